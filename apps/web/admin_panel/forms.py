"""Admin panel forms."""

from decimal import Decimal

from django import forms

from menu_schemas import MenuCategory, MenuItem, MenuItemFlags, MenuItemRequest, MenuUnit

CATEGORY_CHOICES = [(category.value, category.value.capitalize()) for category in MenuCategory]
UNIT_CHOICES = [(unit.value, unit.value) for unit in MenuUnit]


class LoginForm(forms.Form):
    username = forms.CharField(max_length=150)
    password = forms.CharField(strip=False, widget=forms.PasswordInput)


class PromoPriceMixin:
    """Promo items must carry a promo price."""

    def clean(self) -> dict:
        cleaned = super().clean()
        if cleaned.get("is_promo") and cleaned.get("promo_price") is None:
            self.add_error("promo_price", "Promo price is required for promo items.")
        return cleaned


class MenuItemForm(PromoPriceMixin, forms.Form):
    """Create/edit form for a menu item, in both languages."""

    name_en = forms.CharField(max_length=200)
    name_uk = forms.CharField(max_length=200)
    description_en = forms.CharField(required=False, widget=forms.Textarea)
    description_uk = forms.CharField(required=False, widget=forms.Textarea)
    category = forms.ChoiceField(choices=CATEGORY_CHOICES)
    unit = forms.ChoiceField(choices=UNIT_CHOICES)
    amount = forms.IntegerField(min_value=0)
    time_to_cook = forms.IntegerField(min_value=0, label="Time to cook (min)")
    price = forms.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal("0.01"))
    promo_price = forms.DecimalField(
        max_digits=10, decimal_places=2, min_value=Decimal("0"), required=False
    )
    is_new = forms.BooleanField(required=False)
    is_promo = forms.BooleanField(required=False)
    is_out_of_stock = forms.BooleanField(required=False)
    image_url = forms.CharField(max_length=500, required=False)
    position = forms.IntegerField(min_value=0)

    @classmethod
    def initial_for(cls, item: MenuItem) -> dict:
        """Form initial data from an existing item."""
        return item.model_dump(include=set(cls.base_fields))

    def to_request(self, item_id: int | None = None) -> MenuItemRequest:
        data = dict(self.cleaned_data)
        data["image_url"] = data["image_url"] or None
        return MenuItemRequest(id=item_id, **data)


class FlagsForm(PromoPriceMixin, forms.Form):
    """Quick flag edit from the item list. Every field is sent."""

    is_new = forms.BooleanField(required=False)
    is_promo = forms.BooleanField(required=False)
    promo_price = forms.DecimalField(
        max_digits=10, decimal_places=2, min_value=Decimal("0"), required=False
    )

    def to_flags(self) -> MenuItemFlags:
        return MenuItemFlags(
            is_new=self.cleaned_data["is_new"],
            is_promo=self.cleaned_data["is_promo"],
            promo_price=self.cleaned_data["promo_price"],
        )


class ImageUploadForm(forms.Form):
    image = forms.FileField()


class MoveForm(forms.Form):
    direction = forms.ChoiceField(choices=[("up", "Up"), ("down", "Down")])
