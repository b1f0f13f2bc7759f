from django.db import models

from apps.api.common.models import BaseModel


class QuizQuestion(BaseModel):
    """
    퀴즈 문항. active 문항만 채점 대상.
    삭제 대신 archived 로 내려서 과거 attempt/answer 참조를 유지한다.
    """

    class Status(models.TextChoices):
        ACTIVE = "active", "Active"
        ARCHIVED = "archived", "Archived"

    quiz = models.ForeignKey(
        "quizzes.Quiz",
        on_delete=models.CASCADE,
        related_name="questions",
    )

    question_text = models.TextField()
    points = models.PositiveIntegerField(default=1)
    order_position = models.PositiveIntegerField(default=0)

    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.ACTIVE,
    )

    class Meta:
        db_table = "quizzes_question"
        ordering = ["order_position", "id"]

    def __str__(self):
        return f"{self.quiz} Q{self.order_position}"
