# PATH: apps/domains/quizzes/services/student_view.py
"""
학생용 quiz 조회

- active 문항만
- 선택지에서 is_correct 제거 (정답 노출 금지)
- shuffle 요청 또는 quiz.shuffle_questions → 문항 순서 섞기
- quiz.shuffle_options → 문항별 선택지 순서 섞기

비활성(draft/archived) quiz는 학생에게 존재하지 않는 것으로 취급 (QuizNotFound).
"""
from __future__ import annotations

import random
from typing import Any, Dict, List, Optional

from academy.domain.quiz.entities import QuestionSnapshot, QuizSnapshot
from academy.domain.quiz.errors import QuizNotFound


def _option_payload(option) -> Dict[str, Any]:
    return {
        "id": option.id,
        "question_id": option.question_id,
        "option_text": option.option_text,
        "order_position": option.order_position,
    }


def _question_payload(question: QuestionSnapshot) -> Dict[str, Any]:
    return {
        "id": question.id,
        "quiz_id": question.quiz_id,
        "question_text": question.question_text,
        "points": question.points,
        "order_position": question.order_position,
        "options": [_option_payload(o) for o in question.options],
    }


def build_student_quiz(
    quiz: Optional[QuizSnapshot],
    *,
    shuffle: bool = False,
    rng: Optional[random.Random] = None,
) -> Dict[str, Any]:
    if quiz is None or not quiz.is_active:
        raise QuizNotFound(quiz_id=getattr(quiz, "id", None))

    rng = rng or random.Random()

    questions: List[Dict[str, Any]] = [_question_payload(q) for q in quiz.active_questions]

    if shuffle or quiz.shuffle_questions:
        rng.shuffle(questions)

    if quiz.shuffle_options:
        for q in questions:
            rng.shuffle(q["options"])

    return {
        "id": quiz.id,
        "topic_id": quiz.topic_id,
        "title": quiz.title,
        "description": quiz.description,
        "time_limit_minutes": quiz.time_limit_minutes,
        "passing_score": quiz.passing_score,
        "total_points": quiz.total_points,
        "allow_retake": quiz.allow_retake,
        "shuffle_questions": quiz.shuffle_questions,
        "shuffle_options": quiz.shuffle_options,
        "questions": questions,
    }
