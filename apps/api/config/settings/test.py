# PATH: apps/api/config/settings/test.py
from .base import *

# ==================================================
# TEST (pytest-django)
# ==================================================

DEBUG = False
SECRET_KEY = "test-secret-key"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]

LOGGING["root"]["level"] = "WARNING"
