from django.db import models
from django.db.models import Sum

from apps.api.common.models import BaseModel


class Quiz(BaseModel):
    """
    퀴즈 정의 (작성 CRUD는 외부 책임, 여기서는 읽기 위주)

    - status=active 인 quiz만 응시 가능
    - total_points는 저장하지 않는다: active 문항 points 합으로 파생
    """

    class Status(models.TextChoices):
        DRAFT = "draft", "Draft"
        ACTIVE = "active", "Active"
        ARCHIVED = "archived", "Archived"

    # topic은 외부 시스템 (정수 참조만)
    topic_id = models.PositiveIntegerField(null=True, blank=True, db_index=True)

    title = models.CharField(max_length=255)
    description = models.TextField(blank=True, default="")

    # 0 = 제한 없음
    time_limit_minutes = models.PositiveIntegerField(default=0)

    # 0~100 (%)
    passing_score = models.FloatField(default=60.0)

    shuffle_questions = models.BooleanField(default=False)
    shuffle_options = models.BooleanField(default=False)
    allow_retake = models.BooleanField(default=True)

    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.DRAFT,
        db_index=True,
    )

    class Meta:
        db_table = "quizzes_quiz"
        ordering = ["-id"]

    def __str__(self):
        return self.title

    @property
    def total_points(self) -> int:
        agg = self.questions.filter(status="active").aggregate(total=Sum("points"))
        return int(agg["total"] or 0)
