"""
Quiz Catalog: Django ORM 구현 (메서드 내부에서만 apps.domains.quizzes import)

ORM 결과(prefetch) → QuizSnapshot 정규화는 이 파일에서만 한다.
"""
from __future__ import annotations

from typing import Optional

from academy.domain.quiz.entities import (
    OptionSnapshot,
    QuestionSnapshot,
    QuestionStatus,
    QuizSnapshot,
    QuizStatus,
)


def _option_to_snapshot(o) -> OptionSnapshot:
    return OptionSnapshot(
        id=int(o.id),
        question_id=int(o.question_id),
        option_text=o.option_text or "",
        is_correct=bool(o.is_correct),
        order_position=int(o.order_position or 0),
    )


def _question_to_snapshot(q) -> QuestionSnapshot:
    options = sorted(q.options.all(), key=lambda o: (o.order_position or 0, o.id))
    return QuestionSnapshot(
        id=int(q.id),
        quiz_id=int(q.quiz_id),
        question_text=q.question_text or "",
        points=int(q.points or 0),
        order_position=int(q.order_position or 0),
        status=QuestionStatus(q.status) if q.status else QuestionStatus.ACTIVE,
        options=tuple(_option_to_snapshot(o) for o in options),
    )


def quiz_to_snapshot(m) -> Optional[QuizSnapshot]:
    if m is None:
        return None
    questions = sorted(m.questions.all(), key=lambda q: (q.order_position or 0, q.id))
    return QuizSnapshot(
        id=int(m.id),
        title=m.title or "",
        passing_score=float(m.passing_score or 0),
        topic_id=m.topic_id,
        description=m.description or "",
        time_limit_minutes=int(m.time_limit_minutes or 0),
        shuffle_questions=bool(m.shuffle_questions),
        shuffle_options=bool(m.shuffle_options),
        allow_retake=bool(m.allow_retake),
        status=QuizStatus(m.status) if m.status else QuizStatus.DRAFT,
        questions=tuple(_question_to_snapshot(q) for q in questions),
    )


class DjangoQuizCatalog:
    """QuizCatalog 구현. 문항/선택지는 prefetch 1회로 가져온다."""

    def get_quiz(self, quiz_id: int) -> Optional[QuizSnapshot]:
        from apps.domains.quizzes.models import Quiz
        m = (
            Quiz.objects
            .prefetch_related("questions__options")
            .filter(id=quiz_id)
            .first()
        )
        return quiz_to_snapshot(m)
