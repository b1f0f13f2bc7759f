"""
Quiz Attempt / Score Ledger Repository: Django ORM 구현
(메서드 내부에서만 apps.domains.results import)

- *_for_update / lock_* 는 호출자가 이미 UoW 트랜잭션 내에 있어야 함
- ledger 저장 중 DatabaseError → LedgerUpdateFailed (UoW 롤백으로 제출 전체 취소)
"""
from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from academy.domain.quiz.entities import (
    AnswerRecord,
    AttemptStatus,
    BestScoreState,
    GradedAnswer,
    QuizAttempt,
    QuizSummary,
    TotalPointsState,
)
from academy.domain.quiz.errors import LedgerUpdateFailed

logger = logging.getLogger(__name__)


# ==================================================
# helpers
# ==================================================

def _quiz_summaries(quiz_ids: Iterable[int]) -> dict[int, QuizSummary]:
    """quiz id → 요약 (total_points = active 문항 points 합). 쿼리 2회."""
    from django.db.models import Sum
    from apps.domains.quizzes.models import Quiz, QuizQuestion

    ids = {int(i) for i in quiz_ids}
    if not ids:
        return {}

    totals = {
        row["quiz_id"]: int(row["total"] or 0)
        for row in (
            QuizQuestion.objects
            .filter(quiz_id__in=ids, status=QuizQuestion.Status.ACTIVE)
            .values("quiz_id")
            .annotate(total=Sum("points"))
        )
    }
    return {
        int(q.id): QuizSummary(
            id=int(q.id),
            title=q.title or "",
            total_points=totals.get(q.id, 0),
            passing_score=float(q.passing_score or 0),
        )
        for q in Quiz.objects.filter(id__in=ids).only("id", "title", "passing_score")
    }


def _attempt_to_entity(m, quiz: Optional[QuizSummary] = None) -> Optional[QuizAttempt]:
    if m is None:
        return None
    return QuizAttempt(
        id=int(m.id),
        student_id=int(m.student_id),
        quiz_id=int(m.quiz_id),
        status=AttemptStatus(m.status) if m.status else AttemptStatus.IN_PROGRESS,
        score=int(m.score or 0),
        max_score=int(m.max_score or 0),
        percentage=float(m.percentage or 0),
        passed=bool(m.passed),
        time_spent_seconds=int(m.time_spent_seconds or 0),
        started_at=m.started_at,
        completed_at=m.completed_at,
        quiz=quiz,
    )


def _best_to_entity(m, quiz: Optional[QuizSummary] = None) -> Optional[BestScoreState]:
    if m is None:
        return None
    return BestScoreState(
        id=int(m.id),
        student_id=int(m.student_id),
        quiz_id=int(m.quiz_id),
        best_score=int(m.best_score or 0),
        best_percentage=float(m.best_percentage or 0),
        attempts_count=int(m.attempts_count or 0),
        has_passed=bool(m.has_passed),
        last_attempt_at=m.last_attempt_at,
        quiz=quiz,
    )


def _totals_to_entity(m) -> Optional[TotalPointsState]:
    if m is None:
        return None
    return TotalPointsState(
        id=int(m.id),
        student_id=int(m.student_id),
        total_points=int(m.total_points or 0),
        quizzes_completed=int(m.quizzes_completed or 0),
        quizzes_passed=int(m.quizzes_passed or 0),
        average_score=float(m.average_score or 0),
        last_quiz_at=m.last_quiz_at,
    )


# ==================================================
# Attempts
# ==================================================

class DjangoAttemptRepository:
    """AttemptRepository 구현."""

    def get(self, attempt_id: int) -> Optional[QuizAttempt]:
        from apps.domains.results.models import QuizAttempt as QuizAttemptModel
        m = QuizAttemptModel.objects.filter(id=attempt_id).first()
        return _attempt_to_entity(m)

    def get_for_update(self, attempt_id: int) -> Optional[QuizAttempt]:
        """호출자가 이미 UoW 트랜잭션 내에 있어야 함 (select_for_update 락 유지)."""
        from apps.domains.results.models import QuizAttempt as QuizAttemptModel
        m = QuizAttemptModel.objects.select_for_update().filter(id=attempt_id).first()
        return _attempt_to_entity(m)

    def find_in_progress(self, student_id: int, quiz_id: int) -> Optional[QuizAttempt]:
        from apps.domains.results.models import QuizAttempt as QuizAttemptModel
        m = (
            QuizAttemptModel.objects
            .filter(
                student_id=student_id,
                quiz_id=quiz_id,
                status=QuizAttemptModel.Status.IN_PROGRESS,
            )
            .order_by("-started_at", "-id")
            .first()
        )
        return _attempt_to_entity(m)

    def has_completed(self, student_id: int, quiz_id: int) -> bool:
        from apps.domains.results.models import QuizAttempt as QuizAttemptModel
        return QuizAttemptModel.objects.filter(
            student_id=student_id,
            quiz_id=quiz_id,
            status=QuizAttemptModel.Status.COMPLETED,
        ).exists()

    def create_in_progress(self, attempt: QuizAttempt) -> tuple[QuizAttempt, bool]:
        from django.db import IntegrityError, transaction
        from apps.domains.results.models import QuizAttempt as QuizAttemptModel

        try:
            # savepoint: partial unique 위반 시 바깥 트랜잭션은 살아 있어야 함
            with transaction.atomic():
                m = QuizAttemptModel.objects.create(
                    student_id=attempt.student_id,
                    quiz_id=attempt.quiz_id,
                    status=QuizAttemptModel.Status.IN_PROGRESS,
                    max_score=attempt.max_score,
                    started_at=attempt.started_at,
                )
            return _attempt_to_entity(m), True
        except IntegrityError:
            existing = self.find_in_progress(attempt.student_id, attempt.quiz_id)
            if existing is None:
                raise
            logger.info(
                "concurrent quiz start resolved to existing attempt_id=%s student_id=%s quiz_id=%s",
                existing.id,
                attempt.student_id,
                attempt.quiz_id,
            )
            return existing, False

    def save_completion(self, attempt: QuizAttempt, answers: Sequence[GradedAnswer]) -> None:
        from django.utils import timezone
        from apps.domains.results.models import QuizAnswer
        from apps.domains.results.models import QuizAttempt as QuizAttemptModel

        QuizAttemptModel.objects.filter(id=attempt.id).update(
            status=attempt.status.value,
            score=attempt.score,
            max_score=attempt.max_score,
            percentage=attempt.percentage,
            passed=attempt.passed,
            time_spent_seconds=attempt.time_spent_seconds,
            completed_at=attempt.completed_at,
            updated_at=timezone.now(),
        )
        QuizAnswer.objects.bulk_create([
            QuizAnswer(
                attempt_id=attempt.id,
                question_id=a.question_id,
                selected_option_id=a.selected_option_id,
                is_correct=a.is_correct,
                points_earned=a.points_earned,
            )
            for a in answers
        ])

    def get_answers(self, attempt_id: int) -> list[AnswerRecord]:
        from apps.domains.results.models import QuizAnswer
        return [
            AnswerRecord(
                question_id=int(a.question_id),
                selected_option_id=a.selected_option_id,
                is_correct=bool(a.is_correct),
                points_earned=int(a.points_earned or 0),
            )
            for a in QuizAnswer.objects.filter(attempt_id=attempt_id).order_by("id")
        ]

    def last_for(self, student_id: int, quiz_id: int) -> Optional[QuizAttempt]:
        from apps.domains.results.models import QuizAttempt as QuizAttemptModel
        m = (
            QuizAttemptModel.objects
            .filter(student_id=student_id, quiz_id=quiz_id)
            .order_by("-started_at", "-id")
            .first()
        )
        return _attempt_to_entity(m)

    def list_for_student(self, student_id: int, quiz_id: Optional[int] = None) -> list[QuizAttempt]:
        from apps.domains.results.models import QuizAttempt as QuizAttemptModel

        qs = QuizAttemptModel.objects.filter(student_id=student_id)
        if quiz_id is not None:
            qs = qs.filter(quiz_id=quiz_id)
        rows = list(qs.order_by("-started_at", "-id"))

        quizzes = _quiz_summaries(r.quiz_id for r in rows)
        return [_attempt_to_entity(r, quizzes.get(r.quiz_id)) for r in rows]


# ==================================================
# Ledger (QuizBestScore / StudentTotalPoints)
# ==================================================

class DjangoScoreLedgerRepository:
    """ScoreLedgerRepository 구현. 쓰기 경로의 DB 오류는 LedgerUpdateFailed."""

    def lock_totals(self, student_id: int) -> tuple[TotalPointsState, bool]:
        from django.db import DatabaseError
        from apps.domains.results.models import StudentTotalPoints

        try:
            # 동시 최초 생성은 get_or_create 내부 savepoint + 재조회로 정리됨
            _, created = StudentTotalPoints.objects.get_or_create(student_id=student_id)
            m = StudentTotalPoints.objects.select_for_update().get(student_id=student_id)
        except DatabaseError as e:
            logger.exception("ledger lock_totals failed student_id=%s", student_id)
            raise LedgerUpdateFailed(student_id=student_id) from e
        return _totals_to_entity(m), created

    def lock_best(self, student_id: int, quiz_id: int) -> Optional[BestScoreState]:
        from django.db import DatabaseError
        from apps.domains.results.models import QuizBestScore

        try:
            m = (
                QuizBestScore.objects
                .select_for_update()
                .filter(student_id=student_id, quiz_id=quiz_id)
                .first()
            )
        except DatabaseError as e:
            logger.exception("ledger lock_best failed student_id=%s quiz_id=%s", student_id, quiz_id)
            raise LedgerUpdateFailed(student_id=student_id, quiz_id=quiz_id) from e
        return _best_to_entity(m)

    def save_best(self, state: BestScoreState) -> BestScoreState:
        from django.db import DatabaseError
        from django.utils import timezone
        from apps.domains.results.models import QuizBestScore

        values = {
            "best_score": state.best_score,
            "best_percentage": state.best_percentage,
            "attempts_count": state.attempts_count,
            "has_passed": state.has_passed,
            "last_attempt_at": state.last_attempt_at,
        }
        try:
            if state.id is None:
                m = QuizBestScore.objects.create(
                    student_id=state.student_id,
                    quiz_id=state.quiz_id,
                    **values,
                )
                state.id = int(m.id)
            else:
                QuizBestScore.objects.filter(id=state.id).update(updated_at=timezone.now(), **values)
        except DatabaseError as e:
            logger.exception("ledger save_best failed student_id=%s quiz_id=%s", state.student_id, state.quiz_id)
            raise LedgerUpdateFailed(student_id=state.student_id, quiz_id=state.quiz_id) from e
        return state

    def save_totals(self, state: TotalPointsState) -> TotalPointsState:
        from django.db import DatabaseError
        from django.utils import timezone
        from apps.domains.results.models import StudentTotalPoints

        values = {
            "total_points": state.total_points,
            "quizzes_completed": state.quizzes_completed,
            "quizzes_passed": state.quizzes_passed,
            "average_score": state.average_score,
            "last_quiz_at": state.last_quiz_at,
        }
        try:
            if state.id is None:
                m, _ = StudentTotalPoints.objects.update_or_create(
                    student_id=state.student_id,
                    defaults=values,
                )
                state.id = int(m.id)
            else:
                StudentTotalPoints.objects.filter(id=state.id).update(updated_at=timezone.now(), **values)
        except DatabaseError as e:
            logger.exception("ledger save_totals failed student_id=%s", state.student_id)
            raise LedgerUpdateFailed(student_id=state.student_id) from e
        return state

    def get_best(self, student_id: int, quiz_id: int) -> Optional[BestScoreState]:
        from apps.domains.results.models import QuizBestScore
        m = QuizBestScore.objects.filter(student_id=student_id, quiz_id=quiz_id).first()
        return _best_to_entity(m)

    def list_best_for_student(self, student_id: int) -> list[BestScoreState]:
        from django.db.models import F
        from apps.domains.results.models import QuizBestScore

        rows = list(
            QuizBestScore.objects
            .filter(student_id=student_id)
            .order_by(F("last_attempt_at").desc(nulls_last=True), "-id")
        )
        quizzes = _quiz_summaries(r.quiz_id for r in rows)
        return [_best_to_entity(r, quizzes.get(r.quiz_id)) for r in rows]

    def get_totals(self, student_id: int) -> Optional[TotalPointsState]:
        from apps.domains.results.models import StudentTotalPoints
        m = StudentTotalPoints.objects.filter(student_id=student_id).first()
        return _totals_to_entity(m)

    def top_totals(self, limit: int, student_ids: Optional[Sequence[int]] = None) -> list[TotalPointsState]:
        from apps.domains.results.models import StudentTotalPoints

        qs = StudentTotalPoints.objects.all()
        if student_ids is not None:
            qs = qs.filter(student_id__in=list(student_ids))
        qs = qs.order_by("-total_points", "id")[: max(0, int(limit))]
        return [_totals_to_entity(m) for m in qs]
