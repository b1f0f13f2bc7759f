# PATH: apps/domains/results/views/leaderboard_view.py
"""
Leaderboard

GET /results/leaderboard/?limit=
GET /results/leaderboard/classes/{class_id}/?limit=

limit: 기본 QUIZ_LEADERBOARD_DEFAULT_LIMIT, 1..QUIZ_LEADERBOARD_MAX_LIMIT 로 clamp
"""
from django.conf import settings
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated

from academy.adapters.db.django.uow import DjangoUnitOfWork
from academy.application.use_cases.quiz.leaderboard import (
    class_leaderboard,
    global_leaderboard,
)
from apps.domains.results.serializers.quiz_scores import LeaderboardEntrySerializer


def resolve_limit(raw) -> int:
    default = int(getattr(settings, "QUIZ_LEADERBOARD_DEFAULT_LIMIT", 10))
    max_limit = int(getattr(settings, "QUIZ_LEADERBOARD_MAX_LIMIT", 100))
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return default
    return max(1, min(value, max_limit))


class LeaderboardView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        entries = global_leaderboard(
            DjangoUnitOfWork(),
            limit=resolve_limit(request.query_params.get("limit")),
        )
        return Response(LeaderboardEntrySerializer(entries, many=True).data)


class ClassLeaderboardView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, class_id: int):
        entries = class_leaderboard(
            DjangoUnitOfWork(),
            class_id=int(class_id),
            limit=resolve_limit(request.query_params.get("limit")),
        )
        return Response(LeaderboardEntrySerializer(entries, many=True).data)
