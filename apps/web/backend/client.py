"""Menu backend client - the single point of outbound calls to the REST API."""

import logging
from typing import Any, Protocol

import httpx
from django.conf import settings
from django.http import HttpRequest
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from menu_schemas import (
    AuthCheckResponse,
    ImageUploadResult,
    Locale,
    LoginRequest,
    LoginResponse,
    MenuItem,
    MenuItemFlags,
    MenuItemRequest,
    PublicMenuItem,
)

from apps.web.backend import endpoints
from apps.web.backend.exceptions import (
    APIError,
    APINetworkError,
    APIValidationError,
)
from apps.web.core.session import get_session_token

logger = logging.getLogger(__name__)


class UploadFile(Protocol):
    """What the client needs from an uploaded file (Django's UploadedFile fits)."""

    name: str | None
    size: int | None
    content_type: str | None

    def read(self, size: int = -1) -> bytes: ...


class MenuAPIClient:
    """
    Client for the menu backend REST API.

    Every method returns a parsed payload or raises an APIError subclass:
    - APIError: backend answered with a non-2xx status (``status_code`` set)
    - APINetworkError: backend unreachable (``status_code`` is None)
    - APIValidationError: request rejected locally, nothing was sent
    """

    NETWORK_ERROR_MESSAGE = "Network error. Please check your connection and try again."
    UNEXPECTED_RESPONSE_MESSAGE = "Unexpected response from server"

    # Session validation must not hold up page rendering. httpx applies this
    # to each phase (connect, write, pool, and every read) separately, so a
    # backend trickling bytes can exceed it in total.
    AUTH_CHECK_TIMEOUT = 5.0

    MAX_IMAGE_SIZE = 10 * 1024 * 1024  # 10MB
    ALLOWED_IMAGE_TYPES = frozenset(
        {
            "image/jpeg",
            "image/jpg",
            "image/png",
            "image/gif",
            "image/bmp",
            "image/webp",
        }
    )

    def __init__(
        self,
        token: str | None = None,
        base_url: str | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            token: Session token sent as a bearer credential.
            base_url: Backend root; defaults to settings.MENU_API_BASE_URL.
            http_client: Optional HTTP client for dependency injection (testing).
        """
        self.token = token
        self.base_url = (base_url or settings.MENU_API_BASE_URL).rstrip("/")
        self._client = http_client or httpx.Client(
            timeout=settings.MENU_API_TIMEOUT,
            verify=settings.MENU_API_VERIFY_SSL,
        )
        self._owns_client = http_client is None

    @classmethod
    def for_request(cls, request: HttpRequest, **kwargs: Any) -> "MenuAPIClient":
        """Client authenticated with the request's session cookie, if any."""
        return cls(token=get_session_token(request), **kwargs)

    def close(self) -> None:
        """Close the HTTP client if we own it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "MenuAPIClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # =========================================================================
    # HTTP Helpers
    # =========================================================================

    def _headers(self, authenticated: bool, extra: dict[str, str] | None) -> dict[str, str]:
        headers: dict[str, str] = {}
        if authenticated and self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        headers.update(extra or {})
        return headers

    def _request(
        self,
        method: str,
        path: str,
        *,
        authenticated: bool = True,
        headers: dict[str, str] | None = None,
        schema: Any = None,
        **kwargs: Any,
    ) -> Any:
        """
        Send a request and return the decoded JSON body.

        Non-JSON bodies decode to an empty dict. With ``schema`` the body is
        validated and the parsed value returned instead.

        Raises:
            APIError: On a non-2xx response.
            APINetworkError: On a transport failure.
        """
        url = f"{self.base_url}{path}"

        try:
            response = self._client.request(
                method,
                url,
                headers=self._headers(authenticated, headers),
                **kwargs,
            )
        except httpx.RequestError as e:
            logger.warning("Menu API %s %s unreachable: %s", method, path, e)
            raise APINetworkError(self.NETWORK_ERROR_MESSAGE) from e

        data = self._decode(response)

        if not response.is_success:
            message = None
            if isinstance(data, dict):
                message = data.get("message")
            message = message or f"HTTP error! status: {response.status_code}"
            logger.warning(
                "Menu API %s %s failed with %d: %s",
                method,
                path,
                response.status_code,
                message,
            )
            raise APIError(
                message,
                status_code=response.status_code,
                response_body=response.text,
            )

        if schema is None:
            return data
        return self._parse(schema, data, response.status_code)

    def _decode(self, response: httpx.Response) -> Any:
        content_type = response.headers.get("content-type", "")
        if "application/json" not in content_type:
            return {}
        try:
            return response.json()
        except ValueError:
            logger.warning("Menu API returned malformed JSON (%d)", response.status_code)
            return {}

    def _parse(self, schema: Any, data: Any, status_code: int) -> Any:
        """Validate a decoded payload against the endpoint's schema."""
        try:
            return TypeAdapter(schema).validate_python(data)
        except PydanticValidationError as e:
            logger.warning("Menu API payload did not match %s: %s", schema, e)
            raise APIError(
                self.UNEXPECTED_RESPONSE_MESSAGE,
                status_code=status_code,
            ) from e

    # =========================================================================
    # Authentication
    # =========================================================================

    def login(self, credentials: LoginRequest) -> LoginResponse:
        """
        Exchange admin credentials for a session token.

        Raises:
            APIError: 400 for missing fields, 401 for bad credentials.
        """
        return self._request(
            "POST",
            endpoints.AUTH_LOGIN,
            authenticated=False,
            json=credentials.to_payload(),
            schema=LoginResponse,
        )

    def check_auth(self) -> bool:
        """
        Ask the backend whether the current token is still valid.

        Never raises: any failure, timeout or malformed answer counts as
        not authenticated.
        """
        if not self.token:
            return False

        try:
            result = self._request(
                "GET",
                endpoints.AUTH_CHECK,
                timeout=self.AUTH_CHECK_TIMEOUT,
                schema=AuthCheckResponse,
            )
        except APIError as e:
            logger.info("Session token rejected: %s", e.message)
            return False

        return result.is_authenticated

    # =========================================================================
    # Admin Menu Items
    # =========================================================================

    def get_all_menu_items(self) -> list[MenuItem]:
        return self._request("GET", endpoints.MENU_ITEMS, schema=list[MenuItem])

    def get_menu_item(self, item_id: int) -> MenuItem:
        return self._request("GET", endpoints.menu_item(item_id), schema=MenuItem)

    def create_menu_item(self, item: MenuItemRequest) -> MenuItem:
        payload = item.to_payload(exclude={"id"})
        return self._request("POST", endpoints.MENU_ITEMS, json=payload, schema=MenuItem)

    def update_menu_item(self, item_id: int, item: MenuItemRequest) -> None:
        """Replace an item. The body's id always matches ``item_id``."""
        payload = item.model_copy(update={"id": item_id}).to_payload()
        self._request("PUT", endpoints.menu_item(item_id), json=payload)

    def delete_menu_item(self, item_id: int) -> None:
        self._request("DELETE", endpoints.menu_item(item_id))

    def update_menu_item_flags(self, item_id: int, flags: MenuItemFlags) -> MenuItem:
        """Patch only the flags set on ``flags``."""
        return self._request(
            "PATCH",
            endpoints.menu_item_flags(item_id),
            json=flags.to_payload(),
            schema=MenuItem,
        )

    def upload_menu_item_image(self, item_id: int, file: UploadFile) -> ImageUploadResult:
        """
        Upload a picture for an item as multipart field ``file``.

        Raises:
            APIValidationError: File too large or not an allowed image type.
        """
        if (file.size or 0) > self.MAX_IMAGE_SIZE:
            raise APIValidationError("File size exceeds 10MB limit")

        if file.content_type not in self.ALLOWED_IMAGE_TYPES:
            raise APIValidationError("Invalid file type. Only image files are allowed.")

        return self._request(
            "POST",
            endpoints.menu_item_image(item_id),
            files={"file": (file.name or "upload", file.read(), file.content_type)},
            schema=ImageUploadResult,
        )

    # =========================================================================
    # Public Menu
    # =========================================================================

    def get_public_menu_items(self, lang: Locale | str | None = None) -> list[PublicMenuItem]:
        """Menu as guests see it, localized by the backend. Sent without auth."""
        params = {}
        if lang:
            params["lang"] = lang.value if isinstance(lang, Locale) else lang

        return self._request(
            "GET",
            endpoints.PUBLIC_MENU_ITEMS,
            authenticated=False,
            params=params,
            schema=list[PublicMenuItem],
        )
