# PATH: apps/domains/results/serializers/quiz_attempt.py
"""
Quiz attempt 입출력 serializer

입력: ModelSerializer 아님 (use case 입력 검증 전용)
출력: academy.domain.quiz.entities 데이터클래스를 그대로 직렬화
"""
from rest_framework import serializers


# ==================================================
# Input
# ==================================================

class StartAttemptInputSerializer(serializers.Serializer):
    quiz_id = serializers.IntegerField(min_value=1)


class SubmittedAnswerInputSerializer(serializers.Serializer):
    question_id = serializers.IntegerField(min_value=1)
    selected_option_id = serializers.IntegerField(min_value=1, required=False, allow_null=True, default=None)


class SubmitAttemptInputSerializer(serializers.Serializer):
    attempt_id = serializers.IntegerField(min_value=1)
    answers = SubmittedAnswerInputSerializer(many=True, allow_empty=True, required=False, default=list)
    time_spent_seconds = serializers.IntegerField(min_value=0, required=False, default=0)


# ==================================================
# Output
# ==================================================

class QuizSummarySerializer(serializers.Serializer):
    id = serializers.IntegerField()
    title = serializers.CharField()
    total_points = serializers.IntegerField()
    passing_score = serializers.FloatField()


class QuizAttemptSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    student_id = serializers.IntegerField()
    quiz_id = serializers.IntegerField()
    status = serializers.CharField(source="status.value")
    score = serializers.IntegerField()
    max_score = serializers.IntegerField()
    percentage = serializers.FloatField()
    passed = serializers.BooleanField()
    time_spent_seconds = serializers.IntegerField()
    started_at = serializers.DateTimeField(allow_null=True)
    completed_at = serializers.DateTimeField(allow_null=True)
    quiz = QuizSummarySerializer(allow_null=True, required=False)


class GradedAnswerSerializer(serializers.Serializer):
    question_id = serializers.IntegerField()
    question_text = serializers.CharField(source="question.question_text")
    points = serializers.IntegerField(source="question.points")
    selected_option_id = serializers.IntegerField(allow_null=True)
    selected_option_text = serializers.CharField(source="selected_option.option_text", allow_null=True)
    correct_option_id = serializers.IntegerField(source="correct_option.id", allow_null=True)
    correct_option_text = serializers.CharField(source="correct_option.option_text", allow_null=True)
    is_correct = serializers.BooleanField()
    points_earned = serializers.IntegerField()


class SubmissionResultSerializer(serializers.Serializer):
    attempt = QuizAttemptSerializer()
    correct_answers = serializers.IntegerField()
    total_questions = serializers.IntegerField()
    score = serializers.IntegerField()
    max_score = serializers.IntegerField()
    percentage = serializers.FloatField()
    passed = serializers.BooleanField()
    is_new_high_score = serializers.BooleanField()
    points_earned = serializers.IntegerField()
    total_points = serializers.IntegerField()
    answers = GradedAnswerSerializer(many=True)


class AnswerRecordSerializer(serializers.Serializer):
    question_id = serializers.IntegerField()
    selected_option_id = serializers.IntegerField(allow_null=True)
    is_correct = serializers.BooleanField()
    points_earned = serializers.IntegerField()


class AttemptDetailsSerializer(serializers.Serializer):
    attempt = QuizAttemptSerializer()
    answers = AnswerRecordSerializer(many=True)
