# domains/results/admin.py

from django.contrib import admin
from .models import QuizAttempt, QuizAnswer, QuizBestScore, StudentTotalPoints


class QuizAnswerInline(admin.TabularInline):
    model = QuizAnswer
    extra = 0
    can_delete = False
    readonly_fields = ("question_id", "selected_option_id", "is_correct", "points_earned")


@admin.register(QuizAttempt)
class QuizAttemptAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "student",
        "quiz",
        "status",
        "score",
        "max_score",
        "percentage",
        "passed",
        "completed_at",
    )
    list_filter = ("status", "passed")
    search_fields = ("student__name",)
    inlines = [QuizAnswerInline]


# 집계 테이블은 원장 증분 갱신 전용 → admin에서는 조회만
@admin.register(QuizBestScore)
class QuizBestScoreAdmin(admin.ModelAdmin):
    list_display = ("id", "student", "quiz", "best_score", "best_percentage", "attempts_count", "has_passed")
    search_fields = ("student__name",)

    def has_change_permission(self, request, obj=None):
        return False


@admin.register(StudentTotalPoints)
class StudentTotalPointsAdmin(admin.ModelAdmin):
    list_display = ("id", "student", "total_points", "quizzes_completed", "quizzes_passed", "average_score")
    ordering = ("-total_points", "id")

    def has_change_permission(self, request, obj=None):
        return False
