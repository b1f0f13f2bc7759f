"""
Leaderboard 프로젝션: StudentTotalPoints 읽기 전용
"""
from __future__ import annotations

from typing import Sequence

from academy.application.ports.unit_of_work import UnitOfWork
from academy.domain.quiz.entities import RankedEntry, StudentSummary, TotalPointsState


def _rank(rows: Sequence[TotalPointsState], students: dict[int, StudentSummary]) -> list[RankedEntry]:
    # 동점 재정렬 없음: 저장소 정렬 순서 그대로 1부터
    return [
        RankedEntry(
            rank=index + 1,
            student=students.get(row.student_id) or StudentSummary(id=row.student_id, name=""),
            total_points=row.total_points,
            quizzes_completed=row.quizzes_completed,
            quizzes_passed=row.quizzes_passed,
            average_score=row.average_score,
        )
        for index, row in enumerate(rows)
    ]


def global_leaderboard(uow: UnitOfWork, limit: int = 10) -> list[RankedEntry]:
    with uow:
        rows = uow.ledger.top_totals(limit=int(limit))
        students = uow.students.get_students([r.student_id for r in rows])
    return _rank(rows, students)


def class_leaderboard(uow: UnitOfWork, class_id: int, limit: int = 10) -> list[RankedEntry]:
    """반 활성 학생만. 활성 학생이 없으면 [] (오류 아님)."""
    with uow:
        student_ids = uow.students.active_student_ids_in_class(int(class_id))
        if not student_ids:
            return []
        rows = uow.ledger.top_totals(limit=int(limit), student_ids=student_ids)
        students = uow.students.get_students([r.student_id for r in rows])
    return _rank(rows, students)
