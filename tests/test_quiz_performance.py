from datetime import timedelta

import pytest
from django.utils import timezone

from apps.domains.results.aggregations.quiz_performance import (
    build_quiz_performance,
    categorize_score,
)
from apps.domains.results.filters import QuizPerformanceFilter


class TestCategorizeScore:
    @pytest.mark.parametrize(
        "pct, expected",
        [
            (0, "below_expectation"),
            (25, "below_expectation"),
            (25.01, "approaching"),
            (50, "approaching"),
            (75, "meeting"),
            (75.5, "exceeding"),
            (100, "exceeding"),
        ],
    )
    def test_boundaries(self, pct, expected):
        assert categorize_score(pct) == expected


@pytest.mark.django_db
class TestBuildQuizPerformance:
    def _attempt(self, student, quiz, score, *, completed=True, when=None):
        from apps.domains.results.models import QuizAttempt

        max_score = quiz.total_points
        pct = (score / max_score * 100.0) if max_score else 0.0
        return QuizAttempt.objects.create(
            student=student,
            quiz=quiz,
            status=QuizAttempt.Status.COMPLETED if completed else QuizAttempt.Status.IN_PROGRESS,
            score=score if completed else 0,
            max_score=max_score,
            percentage=pct if completed else 0.0,
            passed=completed and pct >= quiz.passing_score,
            started_at=(when or timezone.now()) - timedelta(minutes=5),
            completed_at=(when or timezone.now()) if completed else None,
        )

    def _report(self, **params):
        from apps.domains.results.models import QuizAttempt

        f = QuizPerformanceFilter(data=params, queryset=QuizAttempt.objects.all())
        assert f.is_valid(), f.errors
        return build_quiz_performance(f.qs)

    def test_default_excludes_in_progress(self, make_student, make_db_quiz):
        quiz = make_db_quiz(points=(10, 10, 10, 10))
        a, b = make_student("a"), make_student("b")
        self._attempt(a, quiz, 40)
        self._attempt(a, quiz, 10)
        self._attempt(b, quiz, 20)
        self._attempt(b, quiz, 0, completed=False)

        report = self._report()

        stats = report["stats"]
        assert stats["total_attempts"] == 3
        assert stats["passed_attempts"] == 1
        assert stats["failed_attempts"] == 2
        assert stats["average_score"] == pytest.approx(23.33)
        assert stats["total_students"] == 2
        # 학생별 최고 1개: a=100%, b=50%
        assert stats["score_categories"] == {
            "below_expectation": 0,
            "approaching": 1,
            "meeting": 0,
            "exceeding": 1,
        }
        assert [r["student_id"] for r in report["student_data"]] == [a.id, b.id]
        assert report["quiz_data"][0]["best_score"] == 40
        assert report["quiz_data"][0]["worst_score"] == 10

    def test_status_and_date_filters(self, make_student, make_db_quiz):
        quiz = make_db_quiz(points=(10, 10))
        s = make_student("a")
        old = timezone.now() - timedelta(days=30)
        self._attempt(s, quiz, 20, when=old)
        self._attempt(s, quiz, 0)
        self._attempt(s, quiz, 0, completed=False)

        assert self._report(status="passed")["stats"]["total_attempts"] == 1
        assert self._report(status="failed")["stats"]["total_attempts"] == 1
        assert self._report(status="in_progress")["stats"]["completed_attempts"] == 0
        today = timezone.localdate()
        recent = self._report(date_from=(today - timedelta(days=1)).isoformat())
        assert recent["stats"]["total_attempts"] == 1
        older = self._report(date_to=(today - timedelta(days=30)).isoformat())
        assert older["stats"]["total_attempts"] == 1
        assert older["stats"]["passed_attempts"] == 1
        same_day = self._report(date_from=today.isoformat(), date_to=today.isoformat())
        assert same_day["stats"]["total_attempts"] == 1

    def test_rejects_invalid_date(self, db):
        from apps.domains.results.models import QuizAttempt

        f = QuizPerformanceFilter(data={"date_from": "2026-13-01"}, queryset=QuizAttempt.objects.all())

        assert not f.is_valid()
        assert "date_from" in f.errors

    def test_class_filter(self, make_student, make_db_quiz):
        from apps.domains.classes.models import SchoolClass

        quiz = make_db_quiz()
        other = SchoolClass.objects.create(name="3반", school_id=99)
        mine = make_student("a")
        theirs = make_student("b", school_class_obj=other)
        self._attempt(mine, quiz, 10)
        self._attempt(theirs, quiz, 10)

        report = self._report(class_id=other.id)

        assert [r["student_id"] for r in report["student_data"]] == [theirs.id]
        assert report["student_data"][0]["class_name"] == "3반"

    def test_empty(self, db):
        report = self._report()

        assert report["stats"]["total_attempts"] == 0
        assert report["quiz_data"] == []
        assert report["student_data"] == []
