from django.db import models
from django.contrib.auth.models import AbstractUser, Group, Permission


# --------------------------------------------------
# Custom User (AUTH_USER_MODEL)
# --------------------------------------------------

class User(AbstractUser):
    """
    Custom User 모델
    - AUTH_USER_MODEL = core.User
    - 신원(identity)만 담당. 학생 정보는 students.Student(student_profile)
    """

    name = models.CharField(max_length=50, blank=True, null=True)

    # 🔥 핵심: auth.User 와 reverse accessor 충돌 방지
    groups = models.ManyToManyField(
        Group,
        related_name="core_users",
        blank=True,
    )
    user_permissions = models.ManyToManyField(
        Permission,
        related_name="core_users",
        blank=True,
    )

    class Meta:
        app_label = "core"
        db_table = "accounts_user"
        ordering = ["-id"]

    def __str__(self):
        return self.username
