# -*- coding: utf-8 -*-

import django_filters

from .models import QuizAttempt


# ==================================================
# Quiz Performance Filter (관리자 리포트)
# ==================================================

class QuizPerformanceFilter(django_filters.FilterSet):
    """
    status:
      - all (기본): completed 만
      - passed / failed: completed 중 합격/불합격
      - in_progress: 진행 중
    date_from / date_to: YYYY-MM-DD, completed_at 날짜(현지 시간) 기준 양끝 포함
    """

    STATUS_CHOICES = (
        ("all", "all"),
        ("passed", "passed"),
        ("failed", "failed"),
        ("in_progress", "in_progress"),
    )

    # ----- 숫자 -----
    school_id = django_filters.NumberFilter(field_name="student__school_class__school_id")
    class_id = django_filters.NumberFilter(field_name="student__school_class_id")
    topic_id = django_filters.NumberFilter(field_name="quiz__topic_id")
    quiz_id = django_filters.NumberFilter(field_name="quiz_id")

    # ----- 기간 -----
    date_from = django_filters.DateFilter(field_name="completed_at", lookup_expr="date__gte")
    date_to = django_filters.DateFilter(field_name="completed_at", lookup_expr="date__lte")

    status = django_filters.ChoiceFilter(choices=STATUS_CHOICES, method="filter_status")

    def filter_status(self, qs, name, value):
        if value == "passed":
            return qs.filter(status=QuizAttempt.Status.COMPLETED, passed=True)
        if value == "failed":
            return qs.filter(status=QuizAttempt.Status.COMPLETED, passed=False)
        if value == "in_progress":
            return qs.filter(status=QuizAttempt.Status.IN_PROGRESS)
        return qs.filter(status=QuizAttempt.Status.COMPLETED)

    @property
    def qs(self):
        qs = super().qs
        # status 미지정 = all
        if not (getattr(self.form, "cleaned_data", {}).get("status") or ""):
            qs = qs.filter(status=QuizAttempt.Status.COMPLETED)
        return qs

    class Meta:
        model = QuizAttempt
        fields = []
