"""
Best-Score & Points Ledger 전이 규칙: 순수 함수

(기존 BestScore, 기존 TotalPoints, 이번 attempt 점수) → (새 BestScore, 새 TotalPoints, 결과)

핵심 불변식:
    TotalPoints.total_points == Σ BestScore.best_score (학생의 모든 quiz)

따라서 total_points에는 attempt 원점수가 아니라
"이전 best 대비 개선분(points_difference)"만 더한다.

락/저장은 여기서 하지 않는다 (use_cases.quiz.ledger 참고).
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional

from academy.domain.quiz.entities import BestScoreState, LedgerOutcome, TotalPointsState


@dataclass(frozen=True)
class LedgerTransition:
    best: BestScoreState
    totals: TotalPointsState
    outcome: LedgerOutcome


def _fold_best(
    best: Optional[BestScoreState],
    *,
    student_id: int,
    quiz_id: int,
    score: int,
    percentage: float,
    passed: bool,
    now: datetime,
) -> tuple[BestScoreState, bool, int]:
    """returns (new_best, is_new_high_score, points_difference)"""
    # 1) 첫 완료: 전체 점수가 개선분
    if best is None:
        new_best = BestScoreState(
            student_id=student_id,
            quiz_id=quiz_id,
            best_score=score,
            best_percentage=percentage,
            attempts_count=1,
            has_passed=passed,
            last_attempt_at=now,
        )
        return new_best, True, score

    # 2) 신기록: 이전 best와의 차이만
    if score > best.best_score:
        new_best = replace(
            best,
            best_score=score,
            best_percentage=percentage,
            attempts_count=best.attempts_count + 1,
            has_passed=best.has_passed or passed,
            last_attempt_at=now,
        )
        return new_best, True, score - best.best_score

    # 3) 동점/하락: 응시 횟수만
    new_best = replace(
        best,
        attempts_count=best.attempts_count + 1,
        has_passed=best.has_passed or passed,
        last_attempt_at=now,
    )
    return new_best, False, 0


def fold_attempt(
    *,
    best: Optional[BestScoreState],
    totals: Optional[TotalPointsState],
    student_id: int,
    quiz_id: int,
    score: int,
    percentage: float,
    passed: bool = False,
    now: datetime,
) -> LedgerTransition:
    score = int(score)
    percentage = float(percentage)

    is_new_quiz = best is None
    previous_percentage = best.best_percentage if best is not None else 0.0
    newly_passed = bool(passed and not (best is not None and best.has_passed))

    new_best, is_new_high_score, points_difference = _fold_best(
        best,
        student_id=student_id,
        quiz_id=quiz_id,
        score=score,
        percentage=percentage,
        passed=passed,
        now=now,
    )

    if totals is None:
        # 첫 기록: quizzes_completed는 1로 시작
        new_totals = TotalPointsState(
            student_id=student_id,
            total_points=points_difference,
            quizzes_completed=1,
            quizzes_passed=1 if newly_passed else 0,
            average_score=new_best.best_percentage,
            last_quiz_at=now,
        )
    else:
        count_before = int(totals.quizzes_completed)
        count_after = count_before + (1 if is_new_quiz else 0)

        # average_score = best_percentage 평균 → 합계를 복원해서 증분 갱신
        percentage_sum = float(totals.average_score) * count_before
        if is_new_quiz:
            percentage_sum += new_best.best_percentage
        else:
            percentage_sum += new_best.best_percentage - previous_percentage

        new_totals = replace(
            totals,
            total_points=int(totals.total_points) + points_difference,
            quizzes_completed=count_after,
            quizzes_passed=int(totals.quizzes_passed) + (1 if newly_passed else 0),
            average_score=(percentage_sum / count_after) if count_after else 0.0,
            last_quiz_at=now,
        )

    return LedgerTransition(
        best=new_best,
        totals=new_totals,
        outcome=LedgerOutcome(
            is_new_high_score=is_new_high_score,
            total_points=new_totals.total_points,
            points_difference=points_difference,
            is_new_quiz=is_new_quiz,
        ),
    )
