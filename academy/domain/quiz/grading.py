"""
Quiz 채점 엔진: 순수 함수 (DB/IO 없음)

규칙:
- active 문항만 채점
- 선택지가 해당 문항에 존재하고 is_correct=True 이면 정답
- 미응답 / 모르는 option id → 미응답 처리 (오류 아님)
- 정답 option이 0개 또는 2개 이상이면 데이터 정합성 문제로 경고만 남기고
  위 규칙 그대로 채점
"""
from __future__ import annotations

import logging
from typing import Iterable, Optional

from academy.domain.quiz.entities import (
    GradedAnswer,
    GradedResult,
    QuestionSnapshot,
    QuizSnapshot,
    SubmittedAnswer,
)

logger = logging.getLogger(__name__)


def _selection_map(submitted: Iterable[SubmittedAnswer]) -> dict[int, Optional[int]]:
    # 같은 문항이 여러 번 오면 첫 번째만 채택
    selections: dict[int, Optional[int]] = {}
    for a in submitted or ():
        selections.setdefault(int(a.question_id), a.selected_option_id)
    return selections


def compute_percentage(score: int, max_score: int) -> float:
    if max_score <= 0:
        return 0.0
    return (float(score) / float(max_score)) * 100.0


def grade_question(question: QuestionSnapshot, selected_option_id: Optional[int]) -> GradedAnswer:
    correct_options = question.correct_options()
    if len(correct_options) != 1:
        logger.warning(
            "quiz question has %d correct options (question_id=%s quiz_id=%s)",
            len(correct_options),
            question.id,
            question.quiz_id,
        )

    selected = question.option_by_id(selected_option_id)
    is_correct = bool(selected is not None and selected.is_correct)

    return GradedAnswer(
        question=question,
        selected_option=selected,
        correct_option=correct_options[0] if correct_options else None,
        is_correct=is_correct,
        points_earned=int(question.points) if is_correct else 0,
    )


def grade(
    quiz: QuizSnapshot,
    active_questions: Iterable[QuestionSnapshot],
    submitted_answers: Iterable[SubmittedAnswer],
) -> GradedResult:
    """
    제출 답안을 채점해 GradedResult 반환.

    - score = 정답 문항 points 합
    - max_score = active 문항 points 합
    - percentage = score / max_score * 100 (max_score=0 이면 0)
    - passed = percentage >= quiz.passing_score (문항이 없으면 항상 False)
    """
    selections = _selection_map(submitted_answers)

    questions = sorted(
        (q for q in active_questions if q.is_active),
        key=lambda q: (q.order_position, q.id),
    )

    answers = tuple(grade_question(q, selections.get(q.id)) for q in questions)

    score = sum(a.points_earned for a in answers)
    max_score = sum(int(q.points) for q in questions)
    percentage = compute_percentage(score, max_score)
    passed = bool(max_score > 0 and percentage >= float(quiz.passing_score))

    return GradedResult(
        answers=answers,
        score=score,
        max_score=max_score,
        percentage=percentage,
        passed=passed,
    )
