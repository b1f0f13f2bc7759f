# PATH: apps/domains/results/views/student_quiz_scores_view.py
"""
학생 본인 퀴즈 진행 현황 (읽기 전용)

GET /results/me/quiz-attempts/?quiz_id=
GET /results/me/quiz-points/
GET /results/me/quiz-scores/
GET /results/me/quizzes/{quiz_id}/progress/
"""
from rest_framework.exceptions import ValidationError
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated

from academy.adapters.db.django.uow import DjangoUnitOfWork
from academy.application.use_cases.quiz.progress import (
    get_attempt_history,
    get_best_scores,
    get_quiz_progress,
    get_total_points,
)
from apps.core.permissions import IsStudent
from apps.domains.results.serializers.quiz_attempt import QuizAttemptSerializer
from apps.domains.results.serializers.quiz_scores import (
    BestScoreSerializer,
    QuizProgressSerializer,
    TotalPointsSerializer,
)


class MyQuizAttemptsView(APIView):
    permission_classes = [IsAuthenticated, IsStudent]

    def get(self, request):
        raw = request.query_params.get("quiz_id")
        quiz_id = None
        if raw not in (None, ""):
            try:
                quiz_id = int(raw)
            except (TypeError, ValueError):
                raise ValidationError({"quiz_id": "정수여야 합니다."})

        attempts = get_attempt_history(
            DjangoUnitOfWork(),
            student_id=request.user.student_profile.id,
            quiz_id=quiz_id,
        )
        return Response(QuizAttemptSerializer(attempts, many=True).data)


class MyQuizPointsView(APIView):
    permission_classes = [IsAuthenticated, IsStudent]

    def get(self, request):
        totals = get_total_points(DjangoUnitOfWork(), request.user.student_profile.id)
        return Response(TotalPointsSerializer(totals).data)


class MyQuizScoresView(APIView):
    permission_classes = [IsAuthenticated, IsStudent]

    def get(self, request):
        rows = get_best_scores(DjangoUnitOfWork(), request.user.student_profile.id)
        return Response(BestScoreSerializer(rows, many=True).data)


class MyQuizProgressView(APIView):
    permission_classes = [IsAuthenticated, IsStudent]

    def get(self, request, quiz_id: int):
        progress = get_quiz_progress(
            DjangoUnitOfWork(),
            student_id=request.user.student_profile.id,
            quiz_id=int(quiz_id),
        )
        return Response(QuizProgressSerializer(progress).data)
