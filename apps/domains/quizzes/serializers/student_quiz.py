# PATH: apps/domains/quizzes/serializers/student_quiz.py
from rest_framework import serializers


class StudentQuizOptionSerializer(serializers.Serializer):
    """is_correct 없음 (학생 화면)"""
    id = serializers.IntegerField()
    question_id = serializers.IntegerField()
    option_text = serializers.CharField()
    order_position = serializers.IntegerField()


class StudentQuizQuestionSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    quiz_id = serializers.IntegerField()
    question_text = serializers.CharField()
    points = serializers.IntegerField()
    order_position = serializers.IntegerField()
    options = StudentQuizOptionSerializer(many=True)


class StudentQuizSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    topic_id = serializers.IntegerField(allow_null=True)
    title = serializers.CharField()
    description = serializers.CharField(allow_blank=True)
    time_limit_minutes = serializers.IntegerField()
    passing_score = serializers.FloatField()
    total_points = serializers.IntegerField()
    allow_retake = serializers.BooleanField()
    shuffle_questions = serializers.BooleanField()
    shuffle_options = serializers.BooleanField()
    questions = StudentQuizQuestionSerializer(many=True)
