"""
학생 진행 현황 조회 Use Case (읽기 전용)
"""
from __future__ import annotations

from typing import Optional

from academy.application.ports.unit_of_work import UnitOfWork
from academy.domain.quiz.entities import (
    BestScoreState,
    QuizAttempt,
    QuizProgress,
    TotalPointsState,
)
from academy.domain.quiz.errors import QuizNotFound


class ProgressStatus:
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    PASSED = "passed"
    COMPLETED = "completed"


def get_best_scores(uow: UnitOfWork, student_id: int) -> list[BestScoreState]:
    with uow:
        return uow.ledger.list_best_for_student(int(student_id))


def get_total_points(uow: UnitOfWork, student_id: int) -> TotalPointsState:
    """기록이 없으면 0점 상태 반환."""
    with uow:
        totals = uow.ledger.get_totals(int(student_id))
    return totals or TotalPointsState(student_id=int(student_id))


def get_attempt_history(uow: UnitOfWork, student_id: int, quiz_id: Optional[int] = None) -> list[QuizAttempt]:
    with uow:
        return uow.attempts.list_for_student(
            int(student_id),
            int(quiz_id) if quiz_id is not None else None,
        )


def _progress_status(last_attempt: Optional[QuizAttempt], best: Optional[BestScoreState], passing_score: float) -> str:
    if last_attempt is None:
        return ProgressStatus.NOT_STARTED
    if not last_attempt.is_completed():
        return ProgressStatus.IN_PROGRESS
    if best is not None and best.best_percentage >= float(passing_score):
        return ProgressStatus.PASSED
    return ProgressStatus.COMPLETED


def get_quiz_progress(uow: UnitOfWork, student_id: int, quiz_id: int) -> QuizProgress:
    with uow:
        quiz = uow.quizzes.get_quiz(int(quiz_id))
        if quiz is None:
            raise QuizNotFound(quiz_id=quiz_id)
        best = uow.ledger.get_best(int(student_id), int(quiz_id))
        last_attempt = uow.attempts.last_for(int(student_id), int(quiz_id))

    can_retake = bool(
        quiz.allow_retake
        or last_attempt is None
        or not last_attempt.is_completed()
    )

    return QuizProgress(
        quiz=quiz,
        status=_progress_status(last_attempt, best, quiz.passing_score),
        can_retake=can_retake,
        best_score=best,
        last_attempt=last_attempt,
    )
