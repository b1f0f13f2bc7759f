"""
Quiz 도메인 엔티티: 순수 파이썬 (Django/ORM 미사용)

Quiz/Question/Option은 읽기 전용 스냅샷(값 객체)으로만 다룬다.
ORM join 결과의 모양 차이는 어댑터(repositories_quizzes)에서 정규화한다.

상태 전이 규칙(in_progress → completed)은 QuizAttempt 메서드로 표현.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


class QuizStatus(str, Enum):
    """apps.domains.quizzes.models.Quiz.Status choices와 동기화."""
    DRAFT = "draft"
    ACTIVE = "active"
    ARCHIVED = "archived"


class QuestionStatus(str, Enum):
    ACTIVE = "active"
    ARCHIVED = "archived"


class AttemptStatus(str, Enum):
    """apps.domains.results.models.QuizAttempt.Status choices와 동기화."""
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


# ==================================================
# Catalog (읽기 전용 입력)
# ==================================================

@dataclass(frozen=True)
class OptionSnapshot:
    id: int
    question_id: int
    option_text: str
    is_correct: bool
    order_position: int = 0


@dataclass(frozen=True)
class QuestionSnapshot:
    id: int
    quiz_id: int
    question_text: str
    points: int
    order_position: int = 0
    status: QuestionStatus = QuestionStatus.ACTIVE
    options: tuple[OptionSnapshot, ...] = ()

    @property
    def is_active(self) -> bool:
        return self.status == QuestionStatus.ACTIVE

    def option_by_id(self, option_id: Optional[int]) -> Optional[OptionSnapshot]:
        if option_id is None:
            return None
        return next((o for o in self.options if o.id == option_id), None)

    def correct_options(self) -> list[OptionSnapshot]:
        return [o for o in self.options if o.is_correct]


@dataclass(frozen=True)
class QuizSnapshot:
    """
    채점 시점의 Quiz.
    attempt 진행 중에는 불변으로 취급한다 (한 번 가져온 뒤 다시 읽지 않음).
    """
    id: int
    title: str
    passing_score: float
    topic_id: Optional[int] = None
    description: str = ""
    time_limit_minutes: int = 0
    shuffle_questions: bool = False
    shuffle_options: bool = False
    allow_retake: bool = True
    status: QuizStatus = QuizStatus.ACTIVE
    questions: tuple[QuestionSnapshot, ...] = ()

    @property
    def is_active(self) -> bool:
        return self.status == QuizStatus.ACTIVE

    @property
    def active_questions(self) -> list[QuestionSnapshot]:
        """active 문항만, order_position 순."""
        return sorted(
            (q for q in self.questions if q.is_active),
            key=lambda q: (q.order_position, q.id),
        )

    @property
    def total_points(self) -> int:
        return sum(int(q.points) for q in self.questions if q.is_active)


@dataclass(frozen=True)
class QuizSummary:
    """best score / history 응답에 붙는 quiz 요약."""
    id: int
    title: str
    total_points: int
    passing_score: float


@dataclass(frozen=True)
class StudentSummary:
    id: int
    name: str
    username: str = ""


# ==================================================
# Grading
# ==================================================

@dataclass(frozen=True)
class SubmittedAnswer:
    question_id: int
    selected_option_id: Optional[int] = None


@dataclass(frozen=True)
class GradedAnswer:
    question: QuestionSnapshot
    selected_option: Optional[OptionSnapshot]
    correct_option: Optional[OptionSnapshot]
    is_correct: bool
    points_earned: int

    @property
    def question_id(self) -> int:
        return self.question.id

    @property
    def selected_option_id(self) -> Optional[int]:
        return self.selected_option.id if self.selected_option else None


@dataclass(frozen=True)
class GradedResult:
    answers: tuple[GradedAnswer, ...]
    score: int
    max_score: int
    percentage: float
    passed: bool

    @property
    def correct_count(self) -> int:
        return sum(1 for a in self.answers if a.is_correct)

    @property
    def total_questions(self) -> int:
        return len(self.answers)


@dataclass(frozen=True)
class AnswerRecord:
    """저장된 QuizAnswer (attempt 상세 조회용)."""
    question_id: int
    selected_option_id: Optional[int]
    is_correct: bool
    points_earned: int


# ==================================================
# Attempt
# ==================================================

@dataclass
class QuizAttempt:
    """
    학생의 quiz 1회 응시.
    in_progress → completed 단방향. completed는 다시 열 수 없다.
    """
    id: Optional[int]
    student_id: int
    quiz_id: int
    status: AttemptStatus = AttemptStatus.IN_PROGRESS
    score: int = 0
    max_score: int = 0
    percentage: float = 0.0
    passed: bool = False
    time_spent_seconds: int = 0
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    quiz: Optional[QuizSummary] = None

    def is_completed(self) -> bool:
        return self.status == AttemptStatus.COMPLETED

    def complete(self, graded: GradedResult, time_spent_seconds: int, now: datetime) -> None:
        """in_progress → completed. 규칙 위반 시 ValueError."""
        if self.is_completed():
            raise ValueError(f"Cannot complete attempt {self.id}: already completed")
        self.score = int(graded.score)
        self.max_score = int(graded.max_score)
        self.percentage = float(graded.percentage)
        self.passed = bool(graded.passed)
        self.time_spent_seconds = max(0, int(time_spent_seconds or 0))
        self.completed_at = now
        self.status = AttemptStatus.COMPLETED


# ==================================================
# Ledger (파생 집계)
# ==================================================

@dataclass
class BestScoreState:
    """(student, quiz) 당 1행. best_score = 완료 attempt score의 최대값."""
    student_id: int
    quiz_id: int
    best_score: int = 0
    best_percentage: float = 0.0
    attempts_count: int = 0
    has_passed: bool = False
    last_attempt_at: Optional[datetime] = None
    id: Optional[int] = None
    quiz: Optional[QuizSummary] = None


@dataclass
class TotalPointsState:
    """student 당 1행. total_points = 모든 quiz best_score 합."""
    student_id: int
    total_points: int = 0
    quizzes_completed: int = 0
    quizzes_passed: int = 0
    average_score: float = 0.0
    last_quiz_at: Optional[datetime] = None
    id: Optional[int] = None


@dataclass(frozen=True)
class LedgerOutcome:
    is_new_high_score: bool
    total_points: int
    points_difference: int = 0
    is_new_quiz: bool = False


@dataclass(frozen=True)
class RankedEntry:
    rank: int
    student: StudentSummary
    total_points: int
    quizzes_completed: int
    quizzes_passed: int = 0
    average_score: float = 0.0


@dataclass
class QuizProgress:
    quiz: QuizSnapshot
    status: str
    can_retake: bool
    best_score: Optional[BestScoreState] = None
    last_attempt: Optional[QuizAttempt] = None


@dataclass
class AttemptDetails:
    attempt: QuizAttempt
    answers: list[AnswerRecord] = field(default_factory=list)
