# PATH: apps/api/config/asgi.py
"""
ASGI 엔트리 (uvicorn / daphne)

- 프로젝트 루트 .env 로드 후 Django 기동
- DJANGO_SETTINGS_MODULE 미지정 시 prod
"""
import os
from pathlib import Path

from dotenv import load_dotenv
from django.core.asgi import get_asgi_application

BASE_DIR = Path(__file__).resolve().parents[3]

load_dotenv(BASE_DIR / ".env")

os.environ.setdefault(
    "DJANGO_SETTINGS_MODULE",
    "apps.api.config.settings.prod",
)

application = get_asgi_application()
