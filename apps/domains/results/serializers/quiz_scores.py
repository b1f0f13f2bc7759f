# PATH: apps/domains/results/serializers/quiz_scores.py
from rest_framework import serializers

from apps.domains.results.serializers.quiz_attempt import (
    QuizAttemptSerializer,
    QuizSummarySerializer,
)


class BestScoreSerializer(serializers.Serializer):
    id = serializers.IntegerField(allow_null=True)
    student_id = serializers.IntegerField()
    quiz_id = serializers.IntegerField()
    best_score = serializers.IntegerField()
    best_percentage = serializers.FloatField()
    attempts_count = serializers.IntegerField()
    has_passed = serializers.BooleanField()
    last_attempt_at = serializers.DateTimeField(allow_null=True)
    quiz = QuizSummarySerializer(allow_null=True, required=False)


class TotalPointsSerializer(serializers.Serializer):
    student_id = serializers.IntegerField()
    total_points = serializers.IntegerField()
    quizzes_completed = serializers.IntegerField()
    quizzes_passed = serializers.IntegerField()
    average_score = serializers.FloatField()
    last_quiz_at = serializers.DateTimeField(allow_null=True)


class ProgressQuizSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    title = serializers.CharField()
    total_points = serializers.IntegerField()
    passing_score = serializers.FloatField()
    allow_retake = serializers.BooleanField()
    time_limit_minutes = serializers.IntegerField()


class QuizProgressSerializer(serializers.Serializer):
    quiz = ProgressQuizSerializer()
    status = serializers.CharField()
    can_retake = serializers.BooleanField()
    best_score = BestScoreSerializer(allow_null=True, required=False)
    last_attempt = QuizAttemptSerializer(allow_null=True, required=False)


class LeaderboardStudentSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField(allow_blank=True)
    username = serializers.CharField(allow_blank=True)


class LeaderboardEntrySerializer(serializers.Serializer):
    rank = serializers.IntegerField()
    student = LeaderboardStudentSerializer()
    total_points = serializers.IntegerField()
    quizzes_completed = serializers.IntegerField()
    quizzes_passed = serializers.IntegerField()
    average_score = serializers.FloatField()
