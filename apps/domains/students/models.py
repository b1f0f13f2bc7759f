from django.db import models
from django.conf import settings

from apps.api.common.models import TimestampModel


class Student(TimestampModel):
    """
    학생 디렉터리 (퀴즈 원장에서는 외부 협력자로 취급).
    인증된 User → student_profile 로 학생 신원을 얻는다.
    """

    class Status(models.TextChoices):
        ACTIVE = "ACTIVE", "활성"
        INACTIVE = "INACTIVE", "비활성"

    # =========================
    # 🔐 로그인 사용자 연결
    # =========================
    # - 기존 데이터/운영 고려: null 허용
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="student_profile",
        help_text="학생이 로그인 계정을 가지는 경우 연결",
    )

    # =========================
    # 기본 정보
    # =========================
    name = models.CharField(max_length=50)
    username = models.CharField(max_length=150, blank=True, default="")

    # =========================
    # 반 소속 (반 리더보드 기준)
    # =========================
    school_class = models.ForeignKey(
        "classes.SchoolClass",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="students",
    )

    status = models.CharField(
        max_length=10,
        choices=Status.choices,
        default=Status.ACTIVE,
        db_index=True,
    )

    class Meta:
        ordering = ["-id"]
        constraints = [
            models.UniqueConstraint(
                fields=["user"],
                name="uniq_student_user",
                condition=models.Q(user__isnull=False),
            )
        ]

    def __str__(self):
        return self.name
