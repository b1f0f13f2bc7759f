"""
Best-Score & Points Ledger Use Case: 도메인/포트만 사용 (Django 미사용)

락 순서 (고정):
  1) StudentTotalPoints(student)     : 학생 단위 직렬화
  2) QuizBestScore(student, quiz)    : 1)에 의해 자동으로 직렬화됨

read-modify-write 전체가 하나의 UoW(트랜잭션/savepoint) 안에서 수행된다.
저장 실패는 어댑터가 LedgerUpdateFailed로 올린다.
"""
from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime, timezone
from typing import Optional

from academy.application.ports.unit_of_work import UnitOfWork
from academy.domain.quiz.entities import LedgerOutcome
from academy.domain.quiz.ledger import fold_attempt

logger = logging.getLogger(__name__)


def apply_attempt(
    uow: UnitOfWork,
    student_id: int,
    quiz_id: int,
    score: int,
    percentage: float,
    *,
    passed: bool = False,
    now: Optional[datetime] = None,
) -> LedgerOutcome:
    """
    채점된 attempt 1건을 best score / total points에 반영.

    - 첫 완료: pointsDifference = score, quizzes_completed +1
    - 신기록: pointsDifference = score - 이전 best
    - 그 외: pointsDifference = 0 (attempts_count만 증가)
    """
    if now is None:
        now = datetime.now(timezone.utc)

    with uow:
        totals, created = uow.ledger.lock_totals(int(student_id))
        best = uow.ledger.lock_best(int(student_id), int(quiz_id))

        transition = fold_attempt(
            best=best,
            totals=None if created else totals,
            student_id=int(student_id),
            quiz_id=int(quiz_id),
            score=int(score),
            percentage=float(percentage),
            passed=bool(passed),
            now=now,
        )

        uow.ledger.save_best(transition.best)
        # lock_totals가 만든 행을 그대로 갱신
        uow.ledger.save_totals(replace(transition.totals, id=totals.id))

    outcome = transition.outcome
    logger.info(
        "quiz ledger applied student_id=%s quiz_id=%s score=%s diff=%s new_high=%s total=%s",
        student_id,
        quiz_id,
        score,
        outcome.points_difference,
        outcome.is_new_high_score,
        outcome.total_points,
    )
    return outcome
