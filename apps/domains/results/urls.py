# PATH: apps/domains/results/urls.py

from django.urls import path

# ======================================================
# Student
# ======================================================
from apps.domains.results.views.student_quiz_attempt_view import (
    QuizAttemptDetailView,
    StartQuizAttemptView,
    SubmitQuizAttemptView,
)
from apps.domains.results.views.student_quiz_scores_view import (
    MyQuizAttemptsView,
    MyQuizPointsView,
    MyQuizProgressView,
    MyQuizScoresView,
)

# ======================================================
# Leaderboard
# ======================================================
from apps.domains.results.views.leaderboard_view import (
    ClassLeaderboardView,
    LeaderboardView,
)

# ======================================================
# Admin / Teacher
# ======================================================
from apps.domains.results.views.admin_quiz_performance_view import (
    AdminQuizPerformanceView,
)


urlpatterns = [
    # ============================
    # Student: attempt lifecycle
    # ============================
    path(
        "quiz-attempts/start/",
        StartQuizAttemptView.as_view(),
        name="quiz-attempt-start",
    ),
    path(
        "quiz-attempts/submit/",
        SubmitQuizAttemptView.as_view(),
        name="quiz-attempt-submit",
    ),
    path(
        "quiz-attempts/<int:attempt_id>/",
        QuizAttemptDetailView.as_view(),
        name="quiz-attempt-detail",
    ),

    # ============================
    # Student: my progress
    # ============================
    path(
        "me/quiz-attempts/",
        MyQuizAttemptsView.as_view(),
        name="my-quiz-attempts",
    ),
    path(
        "me/quiz-points/",
        MyQuizPointsView.as_view(),
        name="my-quiz-points",
    ),
    path(
        "me/quiz-scores/",
        MyQuizScoresView.as_view(),
        name="my-quiz-scores",
    ),
    path(
        "me/quizzes/<int:quiz_id>/progress/",
        MyQuizProgressView.as_view(),
        name="my-quiz-progress",
    ),

    # ============================
    # Leaderboard
    # ============================
    path(
        "leaderboard/",
        LeaderboardView.as_view(),
        name="quiz-leaderboard",
    ),
    path(
        "leaderboard/classes/<int:class_id>/",
        ClassLeaderboardView.as_view(),
        name="quiz-class-leaderboard",
    ),

    # ============================
    # Admin
    # ============================
    path(
        "admin/quiz-performance/",
        AdminQuizPerformanceView.as_view(),
        name="admin-quiz-performance",
    ),
]
