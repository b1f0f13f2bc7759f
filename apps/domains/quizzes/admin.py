# domains/quizzes/admin.py

from django.contrib import admin
from .models import Quiz, QuizQuestion, QuizOption


class QuizOptionInline(admin.TabularInline):
    model = QuizOption
    extra = 0


class QuizQuestionInline(admin.TabularInline):
    model = QuizQuestion
    extra = 0
    fields = ("order_position", "question_text", "points", "status")


@admin.register(Quiz)
class QuizAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "title",
        "topic_id",
        "passing_score",
        "allow_retake",
        "status",
    )
    list_display_links = ("id", "title")
    list_filter = ("status", "allow_retake")
    search_fields = ("title",)
    ordering = ("-id",)
    inlines = [QuizQuestionInline]


@admin.register(QuizQuestion)
class QuizQuestionAdmin(admin.ModelAdmin):
    list_display = ("id", "quiz", "order_position", "points", "status")
    list_filter = ("status", "quiz")
    ordering = ("quiz", "order_position")
    inlines = [QuizOptionInline]
