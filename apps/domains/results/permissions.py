# PATH: apps/domains/results/permissions.py
from __future__ import annotations

from rest_framework.permissions import BasePermission


def is_teacher_user(u) -> bool:
    """운영자 화면 접근: staff(강사/운영자) 또는 superuser."""
    return bool(getattr(u, "is_superuser", False) or getattr(u, "is_staff", False))


class IsTeacherOrAdmin(BasePermission):
    """성과 리포트 등 운영자 화면 전용."""

    def has_permission(self, request, view):
        u = getattr(request, "user", None)
        if not u or not u.is_authenticated:
            return False
        return is_teacher_user(u)
