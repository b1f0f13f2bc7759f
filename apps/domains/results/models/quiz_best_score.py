from django.db import models
from apps.api.common.models import BaseModel


class QuizBestScore(BaseModel):
    """
    (student, quiz) 최고 점수 집계: 증분 갱신 전용

    - best_score: completed attempt score의 최대값
    - attempts_count: completed attempt 수
    - has_passed: 한 번이라도 합격 기준을 넘었는지
    """

    student = models.ForeignKey(
        "students.Student",
        on_delete=models.CASCADE,
        related_name="quiz_best_scores",
    )
    quiz = models.ForeignKey(
        "quizzes.Quiz",
        on_delete=models.CASCADE,
        related_name="best_scores",
    )

    best_score = models.PositiveIntegerField(default=0)
    best_percentage = models.FloatField(default=0.0)
    attempts_count = models.PositiveIntegerField(default=0)
    has_passed = models.BooleanField(default=False)

    last_attempt_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = "results_quiz_best_score"
        unique_together = ("student", "quiz")
        ordering = ["-last_attempt_at", "-id"]

    def __str__(self):
        return f"BestScore student={self.student_id} quiz={self.quiz_id} best={self.best_score}"
