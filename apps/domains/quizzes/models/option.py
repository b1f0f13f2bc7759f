from django.db import models

from apps.api.common.models import BaseModel


class QuizOption(BaseModel):
    """
    문항 선택지.
    is_correct=True 가 정확히 1개인 것이 정상 데이터 (채점기는 개수와 무관하게 동작).
    """

    question = models.ForeignKey(
        "quizzes.QuizQuestion",
        on_delete=models.CASCADE,
        related_name="options",
    )

    option_text = models.CharField(max_length=500)
    is_correct = models.BooleanField(default=False)
    order_position = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = "quizzes_option"
        ordering = ["order_position", "id"]

    def __str__(self):
        return self.option_text[:50]
