# apps/domains/results/models/__init__.py

from .quiz_attempt import QuizAttempt
from .quiz_answer import QuizAnswer
from .quiz_best_score import QuizBestScore
from .student_total_points import StudentTotalPoints

__all__ = [
    "QuizAttempt",
    "QuizAnswer",
    "QuizBestScore",
    "StudentTotalPoints",
]
