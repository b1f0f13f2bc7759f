# apps/domains/results/models/quiz_attempt.py
from django.db import models
from apps.api.common.models import BaseModel


class QuizAttempt(BaseModel):
    """
    학생의 'quiz 1회 응시'

    🔥 핵심 책임
    - in_progress → completed 단방향 (completed는 다시 열 수 없음)
    - completed 시점의 score/max_score/percentage/passed 고정
    - QuizBestScore / StudentTotalPoints 집계의 입력

    ✅ 설계 고정 사항
    --------------------------------------------------
    1) (student, quiz) 당 in_progress attempt는 최대 1개 (partial unique)
    2) max_score는 시작 시점 quiz total_points 스냅샷,
       제출 시 채점 결과의 max_score로 덮어쓴다
    """

    class Status(models.TextChoices):
        IN_PROGRESS = "in_progress", "In progress"
        COMPLETED = "completed", "Completed"

    student = models.ForeignKey(
        "students.Student",
        on_delete=models.CASCADE,
        related_name="quiz_attempts",
    )
    quiz = models.ForeignKey(
        "quizzes.Quiz",
        on_delete=models.CASCADE,
        related_name="attempts",
    )

    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.IN_PROGRESS,
    )

    score = models.PositiveIntegerField(default=0)
    max_score = models.PositiveIntegerField(default=0)
    percentage = models.FloatField(default=0.0)
    passed = models.BooleanField(default=False)

    time_spent_seconds = models.PositiveIntegerField(default=0)

    started_at = models.DateTimeField()
    completed_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = "results_quiz_attempt"
        ordering = ["-started_at", "-id"]
        indexes = [
            models.Index(fields=["student", "quiz"], name="results_qa_student_quiz_idx"),
            models.Index(fields=["status", "completed_at"], name="results_qa_status_done_idx"),
        ]
        constraints = [
            models.UniqueConstraint(
                fields=["student", "quiz"],
                condition=models.Q(status="in_progress"),
                name="uniq_quiz_attempt_in_progress",
            ),
        ]

    def __str__(self):
        return (
            f"QuizAttempt quiz={self.quiz_id} "
            f"student={self.student_id} "
            f"[{self.status}]"
        )
