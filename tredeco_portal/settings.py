import os
from pathlib import Path

from django.conf.global_settings import DATE_INPUT_FORMATS as DJ_DATE_INPUT_FORMATS
from dotenv import load_dotenv

load_dotenv()


BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "insecure-secret-key")
DEBUG = os.getenv("DJANGO_DEBUG", "1") == "1"
ALLOWED_HOSTS = [h for h in os.getenv("DJANGO_ALLOWED_HOSTS", "").split(",") if h]

INSTALLED_APPS = [
    "tredeco_calendar.apps.TredecoCalendarConfig",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.staticfiles",
    "rest_framework",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "tredeco_portal.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [BASE_DIR / "templates"],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "tredeco_calendar.context_processors.tredeco_today",
                "tredeco_calendar.context_processors.tredeco_calendar_meta",
            ],
        },
    },
]

WSGI_APPLICATION = "tredeco_portal.wsgi.application"

# DJANGO_DB_PATH keeps the dev database outside the checkout.
DJANGO_DB_PATH = os.environ.get("DJANGO_DB_PATH")
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": DJANGO_DB_PATH or str(BASE_DIR / "db_dev.sqlite3"),
    }
}

# Active date lives in a signed cookie; no session table needed.
SESSION_ENGINE = "django.contrib.sessions.backends.signed_cookies"
TREDECO_SESSION_KEY = os.getenv("TREDECO_SESSION_KEY", "tredeco_active_date")

LANGUAGE_CODE = os.getenv("DJANGO_LANGUAGE_CODE", "en-us")
TIME_ZONE = os.getenv("DJANGO_TIME_ZONE", "UTC")
USE_I18N = True
USE_TZ = True

# Accept DD-MM-YYYY and ISO YYYY-MM-DD regardless of LANGUAGE_CODE
DATE_INPUT_FORMATS = ["%d-%m-%Y", "%Y-%m-%d", *DJ_DATE_INPUT_FORMATS]

STATIC_URL = "static/"

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
    "UNAUTHENTICATED_USER": None,
    "DATE_INPUT_FORMATS": [
        "%d-%m-%Y",
        "%Y-%m-%d",
    ],
}

LOG_LEVEL = os.getenv("DJANGO_LOG_LEVEL", "WARNING")
TREDECO_LOG_LEVEL = os.getenv("TREDECO_LOG_LEVEL", "INFO")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "root": {"handlers": ["console"], "level": LOG_LEVEL},
    "loggers": {
        "tredeco_calendar": {
            "handlers": ["console"],
            "level": TREDECO_LOG_LEVEL,
            "propagate": False,
        },
    },
}

# === DEV convenience: hosts & CSRF (idempotent) ===
if DEBUG:
    ALLOWED_HOSTS = ALLOWED_HOSTS or ["*"]
    CSRF_TRUSTED_ORIGINS = [
        "http://localhost:8000",
        "http://127.0.0.1:8000",
    ]
# === END DEV block ===
