"""
Student / Class 디렉터리: Django ORM 구현 (읽기 전용)
"""
from __future__ import annotations

from typing import Iterable

from academy.domain.quiz.entities import StudentSummary


def _student_to_summary(m) -> StudentSummary:
    return StudentSummary(
        id=int(m.id),
        name=m.name or "",
        username=m.username or "",
    )


class DjangoStudentDirectory:
    """StudentDirectory 구현."""

    def active_student_ids_in_class(self, class_id: int) -> list[int]:
        from apps.domains.students.models import Student
        return list(
            Student.objects
            .filter(school_class_id=class_id, status=Student.Status.ACTIVE)
            .order_by("id")
            .values_list("id", flat=True)
        )

    def get_students(self, student_ids: Iterable[int]) -> dict[int, StudentSummary]:
        from apps.domains.students.models import Student
        ids = {int(i) for i in student_ids}
        if not ids:
            return {}
        return {
            int(m.id): _student_to_summary(m)
            for m in Student.objects.filter(id__in=ids).only("id", "name", "username")
        }
