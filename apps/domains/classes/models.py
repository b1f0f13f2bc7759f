from django.db import models

from apps.api.common.models import TimestampModel


# ========================================================
# SchoolClass
# ========================================================

class SchoolClass(TimestampModel):
    """
    반(class) 디렉터리.
    반 관리(생성/코드 발급)는 외부 시스템 책임이고,
    여기서는 반 리더보드 / 성과 리포트 필터용으로만 읽는다.
    """

    name = models.CharField(max_length=255)

    # 학교는 외부 시스템 (정수 참조만)
    school_id = models.PositiveIntegerField(null=True, blank=True, db_index=True)

    is_active = models.BooleanField(default=True)

    class Meta:
        db_table = "classes_school_class"
        ordering = ["id"]

    def __str__(self):
        return self.name
