# apps/domains/quizzes/models/__init__.py
from .quiz import Quiz
from .question import QuizQuestion
from .option import QuizOption

__all__ = [
    "Quiz",
    "QuizQuestion",
    "QuizOption",
]
