# PATH: apps/domains/results/aggregations/quiz_performance.py
from __future__ import annotations

from collections import OrderedDict
from typing import Any, Dict, Iterable, List

from apps.domains.results.models import QuizAttempt, StudentTotalPoints


SCORE_CATEGORIES = ("below_expectation", "approaching", "meeting", "exceeding")


def categorize_score(percentage: float) -> str:
    """
    ≤25 below_expectation / ≤50 approaching / ≤75 meeting / 그 외 exceeding
    """
    p = float(percentage or 0)
    if p <= 25:
        return "below_expectation"
    if p <= 50:
        return "approaching"
    if p <= 75:
        return "meeting"
    return "exceeding"


def _empty_categories() -> Dict[str, int]:
    return {k: 0 for k in SCORE_CATEGORIES}


def _avg(values: List[float]) -> float:
    return (sum(values) / len(values)) if values else 0.0


def _categories_of_highest(completed: Iterable[Any]) -> Dict[str, int]:
    """학생별 최고 percentage 1개씩만 분류."""
    highest: Dict[int, float] = {}
    for a in completed:
        cur = highest.get(a.student_id)
        if cur is None or a.percentage > cur:
            highest[a.student_id] = float(a.percentage)

    out = _empty_categories()
    for pct in highest.values():
        out[categorize_score(pct)] += 1
    return out


def _is_completed(a) -> bool:
    return a.status == QuizAttempt.Status.COMPLETED


def _quiz_rows(attempts: List[Any]) -> List[Dict[str, Any]]:
    grouped: "OrderedDict[int, List[Any]]" = OrderedDict()
    for a in attempts:
        grouped.setdefault(a.quiz_id, []).append(a)

    rows = []
    for quiz_id, items in grouped.items():
        quiz = items[0].quiz
        completed = [a for a in items if _is_completed(a)]
        passed = [a for a in completed if a.passed]
        scores = [int(a.score) for a in completed]

        rows.append({
            "quiz_id": quiz_id,
            "quiz_title": getattr(quiz, "title", "") or "Unknown Quiz",
            "topic_id": getattr(quiz, "topic_id", None),
            "total_attempts": len(items),
            "completed_attempts": len(completed),
            "passed_attempts": len(passed),
            "failed_attempts": len(completed) - len(passed),
            "average_score": _avg(scores),
            "average_percentage": _avg([float(a.percentage) for a in completed]),
            "pass_rate": (len(passed) / len(completed) * 100.0) if completed else 0.0,
            "total_students": len({a.student_id for a in items}),
            "best_score": max(scores) if scores else 0,
            "worst_score": min(scores) if scores else 0,
            "score_categories": _categories_of_highest(completed),
        })

    rows.sort(key=lambda r: r["total_attempts"], reverse=True)
    return rows


def _student_rows(attempts: List[Any]) -> List[Dict[str, Any]]:
    grouped: "OrderedDict[int, List[Any]]" = OrderedDict()
    for a in attempts:
        grouped.setdefault(a.student_id, []).append(a)

    totals = {
        row.student_id: row
        for row in StudentTotalPoints.objects.filter(student_id__in=list(grouped.keys()))
    }

    rows = []
    for student_id, items in grouped.items():
        student = items[0].student
        school_class = getattr(student, "school_class", None)
        completed = [a for a in items if _is_completed(a)]
        highest_pct = max((float(a.percentage) for a in completed), default=0.0)
        tp = totals.get(student_id)

        rows.append({
            "student_id": student_id,
            "student_name": getattr(student, "name", "") or "",
            "student_username": getattr(student, "username", "") or "",
            "class_id": getattr(school_class, "id", None),
            "class_name": getattr(school_class, "name", None),
            "total_attempts": len(items),
            "completed_attempts": len(completed),
            "passed_attempts": sum(1 for a in completed if a.passed),
            "highest_score": max((int(a.score) for a in completed), default=0),
            "highest_percentage": highest_pct,
            "score_category": categorize_score(highest_pct),
            # 원장 값 우선, 없으면 필터 범위 내 distinct quiz 수
            "total_points": int(tp.total_points) if tp else 0,
            "quizzes_completed": (
                int(tp.quizzes_completed) if tp else len({a.quiz_id for a in completed})
            ),
        })

    rows.sort(key=lambda r: r["highest_percentage"], reverse=True)
    return rows


def build_quiz_performance(attempts_qs) -> Dict[str, Any]:
    """
    ✅ 관리자 퀴즈 성과 리포트

    입력: 필터가 적용된 QuizAttempt queryset (QuizPerformanceFilter.qs)

    반환(고정):
    {
      "stats": {...전체 요약, score_categories},
      "quiz_data": [...quiz별, total_attempts desc],
      "student_data": [...학생별, highest_percentage desc],
    }
    """
    attempts = list(
        attempts_qs.select_related("quiz", "student", "student__school_class")
    )
    completed = [a for a in attempts if _is_completed(a)]
    passed = [a for a in completed if a.passed]

    stats = {
        "total_attempts": len(attempts),
        "completed_attempts": len(completed),
        "passed_attempts": len(passed),
        "failed_attempts": len(completed) - len(passed),
        "average_score": round(_avg([int(a.score) for a in completed]), 2),
        "average_percentage": round(_avg([float(a.percentage) for a in completed]), 2),
        "total_students": len({a.student_id for a in attempts}),
        "unique_quizzes": len({a.quiz_id for a in attempts}),
        "score_categories": _categories_of_highest(completed),
    }

    return {
        "stats": stats,
        "quiz_data": _quiz_rows(attempts),
        "student_data": _student_rows(attempts),
    }
