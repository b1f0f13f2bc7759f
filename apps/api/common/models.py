# PATH: apps/api/common/models.py
from django.db import models


class TimestampModel(models.Model):
    """
    생성 / 수정 시간 자동 기록 추상 모델
    """
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class BaseModel(TimestampModel):
    """
    퀴즈/결과 모델 공통 베이스.
    정렬 기본값만 둔다 (id 오름차순 = 저장 순서).
    """
    class Meta:
        abstract = True
        ordering = ["id"]
