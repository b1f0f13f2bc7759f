from django.db import models
from apps.api.common.models import BaseModel


class StudentTotalPoints(BaseModel):
    """
    학생 누적 포인트: 증분 갱신 전용 (핫패스에서 재계산 금지)

    불변식: total_points == Σ QuizBestScore.best_score (같은 학생)
    리더보드 정렬: total_points desc, 동점은 id asc (먼저 생긴 행 우선)
    """

    student = models.OneToOneField(
        "students.Student",
        on_delete=models.CASCADE,
        related_name="quiz_total_points",
    )

    total_points = models.PositiveIntegerField(default=0, db_index=True)
    quizzes_completed = models.PositiveIntegerField(default=0)
    quizzes_passed = models.PositiveIntegerField(default=0)
    average_score = models.FloatField(default=0.0)

    last_quiz_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = "results_student_total_points"
        ordering = ["-total_points", "id"]

    def __str__(self):
        return f"TotalPoints student={self.student_id} total={self.total_points}"
