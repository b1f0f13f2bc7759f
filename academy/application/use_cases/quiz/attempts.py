"""
Quiz Attempt 라이프사이클 Use Case: 도메인/포트만 사용 (Django 미사용)

in_progress → completed (종결). completed attempt는 다시 열 수 없다.

submit 은 하나의 트랜잭션:
  attempt lock → 채점 → answer 저장 → attempt 완료 → ledger 반영
ledger 실패 시 전체 롤백 (attempt는 in_progress 유지) → 같은 제출 재시도 안전.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable, Optional

from academy.application.ports.unit_of_work import UnitOfWork
from academy.application.use_cases.quiz.ledger import apply_attempt
from academy.domain.quiz.entities import (
    AttemptDetails,
    AttemptStatus,
    GradedAnswer,
    GradedResult,
    LedgerOutcome,
    QuizAttempt,
    SubmittedAnswer,
)
from academy.domain.quiz.errors import (
    AlreadySubmitted,
    AttemptNotFound,
    Forbidden,
    LedgerUpdateFailed,
    QuizNotFound,
    QuizUnavailable,
    RetakeNotAllowed,
)
from academy.domain.quiz.grading import grade

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubmissionResult:
    attempt: QuizAttempt
    graded: GradedResult
    ledger: LedgerOutcome

    @property
    def correct_answers(self) -> int:
        return self.graded.correct_count

    @property
    def total_questions(self) -> int:
        return self.graded.total_questions

    @property
    def score(self) -> int:
        return self.graded.score

    @property
    def max_score(self) -> int:
        return self.graded.max_score

    @property
    def percentage(self) -> float:
        return self.graded.percentage

    @property
    def passed(self) -> bool:
        return self.graded.passed

    @property
    def is_new_high_score(self) -> bool:
        return self.ledger.is_new_high_score

    @property
    def points_earned(self) -> int:
        # 신기록이면 이번 점수 전체, 아니면 0 (순증가분은 total_points에 반영)
        return self.score if self.ledger.is_new_high_score else 0

    @property
    def total_points(self) -> int:
        return self.ledger.total_points

    @property
    def answers(self) -> tuple[GradedAnswer, ...]:
        return self.graded.answers


def _now(now: Optional[datetime]) -> datetime:
    return now if now is not None else datetime.now(timezone.utc)


def _check_owner(attempt: Optional[QuizAttempt], attempt_id: int, student_id: int) -> QuizAttempt:
    if attempt is None:
        raise AttemptNotFound(f"Attempt not found: {attempt_id}", attempt_id=attempt_id)
    if int(attempt.student_id) != int(student_id):
        raise Forbidden(attempt_id=attempt_id)
    return attempt


def start_attempt(
    uow: UnitOfWork,
    student_id: int,
    quiz_id: int,
    now: Optional[datetime] = None,
) -> QuizAttempt:
    """
    - quiz가 active가 아니면 QuizUnavailable
    - in_progress attempt가 있으면 그대로 반환 (멱등 resume)
    - allow_retake=False 이고 completed가 있으면 RetakeNotAllowed
    - 그 외 새 attempt (max_score = 현재 quiz total_points)
    """
    now = _now(now)

    with uow:
        quiz = uow.quizzes.get_quiz(int(quiz_id))
        if quiz is None:
            raise QuizNotFound(quiz_id=quiz_id)
        if not quiz.is_active:
            raise QuizUnavailable(quiz_id=quiz_id, status=quiz.status.value)

        existing = uow.attempts.find_in_progress(int(student_id), int(quiz_id))
        if existing is not None:
            return existing

        if not quiz.allow_retake and uow.attempts.has_completed(int(student_id), int(quiz_id)):
            raise RetakeNotAllowed(quiz_id=quiz_id)

        attempt, created = uow.attempts.create_in_progress(
            QuizAttempt(
                id=None,
                student_id=int(student_id),
                quiz_id=int(quiz_id),
                status=AttemptStatus.IN_PROGRESS,
                max_score=quiz.total_points,
                started_at=now,
            )
        )

    if created:
        logger.info("quiz attempt started attempt_id=%s student_id=%s quiz_id=%s", attempt.id, student_id, quiz_id)
    return attempt


def submit_attempt(
    uow: UnitOfWork,
    attempt_id: int,
    student_id: int,
    answers: Iterable[SubmittedAnswer],
    time_spent_seconds: int = 0,
    now: Optional[datetime] = None,
) -> SubmissionResult:
    """
    제출 1회 = 채점 + attempt 완료 + ledger 반영 (원자적).

    같은 attempt 동시 제출은 attempt row lock으로 직렬화되어
    하나만 성공하고 나머지는 AlreadySubmitted.
    """
    now = _now(now)

    try:
        with uow:
            attempt = _check_owner(uow.attempts.get_for_update(int(attempt_id)), attempt_id, student_id)
            if attempt.is_completed():
                raise AlreadySubmitted(attempt_id=attempt_id)

            quiz = uow.quizzes.get_quiz(int(attempt.quiz_id))
            if quiz is None:
                raise QuizNotFound(quiz_id=attempt.quiz_id)

            graded = grade(quiz, quiz.active_questions, list(answers or ()))

            attempt.complete(graded, time_spent_seconds, now)
            uow.attempts.save_completion(attempt, graded.answers)

            outcome = apply_attempt(
                uow,
                attempt.student_id,
                attempt.quiz_id,
                graded.score,
                graded.percentage,
                passed=graded.passed,
                now=now,
            )
    except LedgerUpdateFailed:
        logger.warning(
            "quiz submission rolled back (ledger failed) attempt_id=%s student_id=%s",
            attempt_id,
            student_id,
        )
        raise

    logger.info(
        "quiz attempt submitted attempt_id=%s student_id=%s score=%s/%s passed=%s",
        attempt.id,
        attempt.student_id,
        graded.score,
        graded.max_score,
        graded.passed,
    )
    return SubmissionResult(attempt=attempt, graded=graded, ledger=outcome)


def get_attempt_details(uow: UnitOfWork, attempt_id: int, student_id: int) -> AttemptDetails:
    with uow:
        attempt = _check_owner(uow.attempts.get(int(attempt_id)), attempt_id, student_id)
        answers = uow.attempts.get_answers(int(attempt.id))
    return AttemptDetails(attempt=attempt, answers=answers)
