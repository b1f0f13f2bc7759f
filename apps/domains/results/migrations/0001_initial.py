import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("quizzes", "0001_initial"),
        ("students", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="QuizAttempt",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "status",
                    models.CharField(
                        choices=[("in_progress", "In progress"), ("completed", "Completed")],
                        default="in_progress",
                        max_length=20,
                    ),
                ),
                ("score", models.PositiveIntegerField(default=0)),
                ("max_score", models.PositiveIntegerField(default=0)),
                ("percentage", models.FloatField(default=0.0)),
                ("passed", models.BooleanField(default=False)),
                ("time_spent_seconds", models.PositiveIntegerField(default=0)),
                ("started_at", models.DateTimeField()),
                ("completed_at", models.DateTimeField(blank=True, null=True)),
                (
                    "quiz",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="attempts",
                        to="quizzes.quiz",
                    ),
                ),
                (
                    "student",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="quiz_attempts",
                        to="students.student",
                    ),
                ),
            ],
            options={
                "db_table": "results_quiz_attempt",
                "ordering": ["-started_at", "-id"],
                "indexes": [
                    models.Index(fields=["student", "quiz"], name="results_qa_student_quiz_idx"),
                    models.Index(fields=["status", "completed_at"], name="results_qa_status_done_idx"),
                ],
                "constraints": [
                    models.UniqueConstraint(
                        condition=models.Q(("status", "in_progress")),
                        fields=("student", "quiz"),
                        name="uniq_quiz_attempt_in_progress",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="QuizAnswer",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("question_id", models.PositiveIntegerField()),
                ("selected_option_id", models.PositiveIntegerField(blank=True, null=True)),
                ("is_correct", models.BooleanField(default=False)),
                ("points_earned", models.PositiveIntegerField(default=0)),
                (
                    "attempt",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="answers",
                        to="results.quizattempt",
                    ),
                ),
            ],
            options={
                "db_table": "results_quiz_answer",
                "ordering": ["id"],
                "unique_together": {("attempt", "question_id")},
            },
        ),
        migrations.CreateModel(
            name="QuizBestScore",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("best_score", models.PositiveIntegerField(default=0)),
                ("best_percentage", models.FloatField(default=0.0)),
                ("attempts_count", models.PositiveIntegerField(default=0)),
                ("has_passed", models.BooleanField(default=False)),
                ("last_attempt_at", models.DateTimeField(blank=True, null=True)),
                (
                    "quiz",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="best_scores",
                        to="quizzes.quiz",
                    ),
                ),
                (
                    "student",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="quiz_best_scores",
                        to="students.student",
                    ),
                ),
            ],
            options={
                "db_table": "results_quiz_best_score",
                "ordering": ["-last_attempt_at", "-id"],
                "unique_together": {("student", "quiz")},
            },
        ),
        migrations.CreateModel(
            name="StudentTotalPoints",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("total_points", models.PositiveIntegerField(db_index=True, default=0)),
                ("quizzes_completed", models.PositiveIntegerField(default=0)),
                ("quizzes_passed", models.PositiveIntegerField(default=0)),
                ("average_score", models.FloatField(default=0.0)),
                ("last_quiz_at", models.DateTimeField(blank=True, null=True)),
                (
                    "student",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="quiz_total_points",
                        to="students.student",
                    ),
                ),
            ],
            options={
                "db_table": "results_student_total_points",
                "ordering": ["-total_points", "id"],
            },
        ),
    ]
