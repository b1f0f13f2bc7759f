# PATH: apps/domains/results/views/student_quiz_attempt_view.py
"""
Student Quiz Attempt

POST /results/quiz-attempts/start/     {quiz_id}
POST /results/quiz-attempts/submit/    {attempt_id, answers[], time_spent_seconds}
GET  /results/quiz-attempts/{id}/

- 학생 신원: request.user.student_profile (IsStudent 보장)
- 도메인 오류는 apps.api.common.exceptions.domain_exception_handler 가 응답으로 변환
"""
from rest_framework import status
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated

from academy.adapters.db.django.uow import DjangoUnitOfWork
from academy.application.use_cases.quiz.attempts import (
    get_attempt_details,
    start_attempt,
    submit_attempt,
)
from academy.domain.quiz.entities import SubmittedAnswer
from apps.core.permissions import IsStudent
from apps.domains.results.serializers.quiz_attempt import (
    AttemptDetailsSerializer,
    QuizAttemptSerializer,
    StartAttemptInputSerializer,
    SubmissionResultSerializer,
    SubmitAttemptInputSerializer,
)


class StartQuizAttemptView(APIView):
    permission_classes = [IsAuthenticated, IsStudent]

    def post(self, request):
        ser = StartAttemptInputSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        attempt = start_attempt(
            DjangoUnitOfWork(),
            student_id=request.user.student_profile.id,
            quiz_id=ser.validated_data["quiz_id"],
        )
        return Response(QuizAttemptSerializer(attempt).data, status=status.HTTP_201_CREATED)


class SubmitQuizAttemptView(APIView):
    permission_classes = [IsAuthenticated, IsStudent]

    def post(self, request):
        ser = SubmitAttemptInputSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        data = ser.validated_data

        result = submit_attempt(
            DjangoUnitOfWork(),
            attempt_id=data["attempt_id"],
            student_id=request.user.student_profile.id,
            answers=[
                SubmittedAnswer(
                    question_id=a["question_id"],
                    selected_option_id=a.get("selected_option_id"),
                )
                for a in data.get("answers") or []
            ],
            time_spent_seconds=data.get("time_spent_seconds") or 0,
        )
        return Response(SubmissionResultSerializer(result).data)


class QuizAttemptDetailView(APIView):
    permission_classes = [IsAuthenticated, IsStudent]

    def get(self, request, attempt_id: int):
        details = get_attempt_details(
            DjangoUnitOfWork(),
            attempt_id=int(attempt_id),
            student_id=request.user.student_profile.id,
        )
        return Response(AttemptDetailsSerializer(details).data)
