from django.db import models
from apps.api.common.models import BaseModel


class QuizAnswer(BaseModel):
    """
    문항별 채점 결과 (write-once)
    제출 시 active 문항마다 1행. 미응답은 selected_option_id=None.
    """

    attempt = models.ForeignKey(
        "results.QuizAttempt",
        on_delete=models.CASCADE,
        related_name="answers",
    )

    question_id = models.PositiveIntegerField()
    selected_option_id = models.PositiveIntegerField(null=True, blank=True)

    is_correct = models.BooleanField(default=False)
    points_earned = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = "results_quiz_answer"
        unique_together = ("attempt", "question_id")
        ordering = ["id"]
