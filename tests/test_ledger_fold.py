from datetime import datetime, timedelta, timezone

import pytest

from academy.domain.quiz.entities import BestScoreState, TotalPointsState
from academy.domain.quiz.ledger import fold_attempt

T0 = datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc)


def _fold(best, totals, score, percentage, *, quiz_id=1, passed=False, now=T0):
    return fold_attempt(
        best=best,
        totals=totals,
        student_id=7,
        quiz_id=quiz_id,
        score=score,
        percentage=percentage,
        passed=passed,
        now=now,
    )


class TestFirstCompletion:
    def test_no_prior_rows(self):
        t = _fold(None, None, 40, 80.0, passed=True)

        assert t.outcome.is_new_high_score is True
        assert t.outcome.is_new_quiz is True
        assert t.outcome.points_difference == 40
        assert t.outcome.total_points == 40

        assert t.best.best_score == 40
        assert t.best.attempts_count == 1
        assert t.best.has_passed is True
        assert t.best.last_attempt_at == T0

        assert t.totals.total_points == 40
        assert t.totals.quizzes_completed == 1
        assert t.totals.quizzes_passed == 1
        assert t.totals.average_score == pytest.approx(80.0)

    def test_zero_score_still_counts_as_first_completion(self):
        t = _fold(None, None, 0, 0.0)

        assert t.outcome.is_new_high_score is True
        assert t.outcome.points_difference == 0
        assert t.best.attempts_count == 1
        assert t.totals.quizzes_completed == 1

    def test_second_quiz_adds_to_existing_totals(self):
        totals = TotalPointsState(student_id=7, total_points=30, quizzes_completed=1, average_score=60.0, id=5)

        t = _fold(None, totals, 20, 100.0, quiz_id=2)

        assert t.totals.id == 5
        assert t.totals.total_points == 50
        assert t.totals.quizzes_completed == 2
        assert t.totals.average_score == pytest.approx(80.0)
        assert t.outcome.points_difference == 20


class TestImprovement:
    def test_only_the_difference_is_added(self):
        best = BestScoreState(student_id=7, quiz_id=1, best_score=30, best_percentage=60.0, attempts_count=1, id=3)
        totals = TotalPointsState(student_id=7, total_points=30, quizzes_completed=1, average_score=60.0, id=5)
        later = T0 + timedelta(hours=1)

        t = _fold(best, totals, 45, 90.0, now=later)

        assert t.outcome.is_new_high_score is True
        assert t.outcome.is_new_quiz is False
        assert t.outcome.points_difference == 15
        assert t.best.best_score == 45
        assert t.best.best_percentage == pytest.approx(90.0)
        assert t.best.attempts_count == 2
        assert t.best.last_attempt_at == later
        assert t.totals.total_points == 45
        assert t.totals.quizzes_completed == 1
        assert t.totals.average_score == pytest.approx(90.0)


class TestNoImprovement:
    @pytest.mark.parametrize("score", [30, 10, 0])
    def test_equal_or_lower_score_changes_nothing_but_counts(self, score):
        best = BestScoreState(student_id=7, quiz_id=1, best_score=30, best_percentage=60.0, attempts_count=2, id=3)
        totals = TotalPointsState(student_id=7, total_points=30, quizzes_completed=1, average_score=60.0, id=5)

        t = _fold(best, totals, score, score * 2.0)

        assert t.outcome.is_new_high_score is False
        assert t.outcome.points_difference == 0
        assert t.outcome.total_points == 30
        assert t.best.best_score == 30
        assert t.best.best_percentage == pytest.approx(60.0)
        assert t.best.attempts_count == 3
        assert t.totals.total_points == 30
        assert t.totals.quizzes_completed == 1


class TestPassedCounter:
    def test_quizzes_passed_increments_once_per_quiz(self):
        t1 = _fold(None, None, 40, 80.0, passed=True)
        t2 = _fold(t1.best, t1.totals, 50, 100.0, passed=True)

        assert t2.totals.quizzes_passed == 1
        assert t2.best.has_passed is True

    def test_pass_after_fail(self):
        t1 = _fold(None, None, 10, 20.0, passed=False)
        t2 = _fold(t1.best, t1.totals, 40, 80.0, passed=True)

        assert t1.totals.quizzes_passed == 0
        assert t2.totals.quizzes_passed == 1


class TestFoldSequence:
    def test_total_is_sum_of_best_scores(self):
        """점수 순서와 무관하게 total == Σ best, 누적 diff == 최종 best."""
        best_by_quiz = {}
        totals = None
        diffs = {1: 0, 2: 0}
        sequence = [(1, 10), (2, 5), (1, 30), (1, 20), (2, 25), (2, 25), (1, 40)]

        for i, (quiz_id, score) in enumerate(sequence):
            t = _fold(best_by_quiz.get(quiz_id), totals, score, float(score), quiz_id=quiz_id, now=T0 + timedelta(minutes=i))
            best_by_quiz[quiz_id] = t.best
            totals = t.totals
            diffs[quiz_id] += t.outcome.points_difference
            assert totals.total_points == sum(b.best_score for b in best_by_quiz.values())

        assert best_by_quiz[1].best_score == 40
        assert best_by_quiz[2].best_score == 25
        assert diffs == {1: 40, 2: 25}
        assert best_by_quiz[1].attempts_count == 4
        assert best_by_quiz[2].attempts_count == 3
        assert totals.quizzes_completed == 2
        assert totals.average_score == pytest.approx((40.0 + 25.0) / 2)
