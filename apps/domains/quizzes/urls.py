# PATH: apps/domains/quizzes/urls.py

from django.urls import path

from apps.domains.quizzes.views.student_quiz_view import StudentQuizView

urlpatterns = [
    path(
        "student/<int:quiz_id>/",
        StudentQuizView.as_view(),
        name="student-quiz",
    ),
]
