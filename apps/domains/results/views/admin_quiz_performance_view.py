# PATH: apps/domains/results/views/admin_quiz_performance_view.py
"""
Admin Quiz Performance

GET /results/admin/quiz-performance/
    ?school_id=&class_id=&topic_id=&quiz_id=&date_from=&date_to=&status=all|passed|failed|in_progress
"""
from rest_framework.exceptions import ValidationError
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated

from apps.domains.results.aggregations.quiz_performance import build_quiz_performance
from apps.domains.results.filters import QuizPerformanceFilter
from apps.domains.results.models import QuizAttempt
from apps.domains.results.permissions import IsTeacherOrAdmin


class AdminQuizPerformanceView(APIView):
    permission_classes = [IsAuthenticated, IsTeacherOrAdmin]

    def get(self, request):
        filterset = QuizPerformanceFilter(
            data=request.query_params,
            queryset=QuizAttempt.objects.all(),
            request=request,
        )
        if not filterset.is_valid():
            raise ValidationError(filterset.errors)

        return Response(build_quiz_performance(filterset.qs))
