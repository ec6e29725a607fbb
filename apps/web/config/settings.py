"""
Django settings for Menu Board.

Secrets and the backend location come from the environment.
Run with: API_BASE_URL=https://api.example.com python manage.py runserver
"""

from pathlib import Path

import environ  # type: ignore[import-untyped]

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent

# Initialize environ
env = environ.Env(
    DEBUG=(bool, False),
    ALLOWED_HOSTS=(list, []),
    API_TIMEOUT=(float, 30.0),
    API_VERIFY_SSL=(bool, True),
    LOG_LEVEL=(str, "INFO"),
)

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = env("SECRET_KEY", default="django-insecure-menu-board-dev-only")

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = env("DEBUG")

ALLOWED_HOSTS = env("ALLOWED_HOSTS")

# Application definition
INSTALLED_APPS = [
    "django.contrib.messages",
    "django.contrib.staticfiles",
    # Local apps
    "apps.web.core",
    "apps.web.backend",
    "apps.web.menu",
    "apps.web.admin_panel",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
    # Custom middleware
    "apps.web.core.middleware.LocaleMiddleware",
    "apps.web.core.middleware.SessionGateMiddleware",
]

ROOT_URLCONF = "apps.web.config.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [BASE_DIR / "templates"],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.template.context_processors.i18n",
                "django.contrib.messages.context_processors.messages",
                "apps.web.core.context_processors.locale",
            ],
        },
    },
]

WSGI_APPLICATION = "apps.web.config.wsgi.application"

# No local database - all menu data lives behind the backend API
DATABASES: dict = {}

# Flash messages without server-side sessions
MESSAGE_STORAGE = "django.contrib.messages.storage.cookie.CookieStorage"

# Menu backend API
# Resolved once at startup; the fallback matches the backend's dev profile
MENU_API_BASE_URL = env("API_BASE_URL", default="https://localhost:7270").rstrip("/")
MENU_API_TIMEOUT = env("API_TIMEOUT")
MENU_API_VERIFY_SSL = env("API_VERIFY_SSL")

# Route gating
LOGIN_PATH = "/auth"
PROTECTED_PATH_PREFIXES = ["/adminPanel"]
LOGIN_REDIRECT_DEFAULT = "/adminPanel"

# Internationalization
LANGUAGE_CODE = "uk"
LANGUAGES = [
    ("en", "English"),
    ("uk", "Українська"),
]
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

# Static files (CSS, JavaScript, Images)
STATIC_URL = "static/"
STATIC_ROOT = BASE_DIR.parent.parent / "staticfiles"

# Logging
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
        },
    },
    "loggers": {
        "apps": {
            "handlers": ["console"],
            "level": env("LOG_LEVEL"),
            "propagate": False,
        },
    },
}
