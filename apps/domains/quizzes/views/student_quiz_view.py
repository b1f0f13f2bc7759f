# PATH: apps/domains/quizzes/views/student_quiz_view.py
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated

from academy.adapters.db.django.repositories_quizzes import DjangoQuizCatalog
from apps.core.permissions import IsStudent
from apps.domains.quizzes.serializers.student_quiz import StudentQuizSerializer
from apps.domains.quizzes.services.student_view import build_student_quiz


def _as_bool(value) -> bool:
    return str(value or "").strip().lower() in ("1", "true", "yes")


class StudentQuizView(APIView):
    """
    GET /quizzes/student/<quiz_id>/?shuffle=true

    학생 응시 화면용 quiz (정답 정보 제외)
    """
    permission_classes = [IsAuthenticated, IsStudent]

    def get(self, request, quiz_id: int):
        quiz = DjangoQuizCatalog().get_quiz(int(quiz_id))
        payload = build_student_quiz(
            quiz,
            shuffle=_as_bool(request.query_params.get("shuffle")),
        )
        return Response(StudentQuizSerializer(payload).data)
