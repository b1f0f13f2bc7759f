"""
In-memory Unit of Work (DB 없이 use case 검증)

- 바깥 with 진입 시 스냅샷, 예외로 빠지면 복원 (atomic 과 동일한 의미)
- 안쪽 with 는 savepoint 처럼 동작
- 저장소는 항상 복사본을 돌려준다 (호출자가 엔티티를 바꿔도 저장 전엔 반영 안 됨)
"""
from __future__ import annotations

import copy
from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional, Sequence, Tuple

from academy.domain.quiz.entities import (
    AnswerRecord,
    AttemptStatus,
    BestScoreState,
    QuizAttempt,
    QuizSnapshot,
    QuizSummary,
    StudentSummary,
    TotalPointsState,
)
from academy.domain.quiz.errors import LedgerUpdateFailed


@dataclass
class Store:
    quizzes: Dict[int, QuizSnapshot] = field(default_factory=dict)
    students: Dict[int, StudentSummary] = field(default_factory=dict)
    # student_id -> (class_id, is_active)
    memberships: Dict[int, Tuple[int, bool]] = field(default_factory=dict)
    attempts: Dict[int, QuizAttempt] = field(default_factory=dict)
    answers: Dict[int, List[AnswerRecord]] = field(default_factory=dict)
    best: Dict[Tuple[int, int], BestScoreState] = field(default_factory=dict)
    totals: Dict[int, TotalPointsState] = field(default_factory=dict)
    next_id: int = 1

    def new_id(self) -> int:
        value = self.next_id
        self.next_id += 1
        return value


def _summary(quiz: Optional[QuizSnapshot]) -> Optional[QuizSummary]:
    if quiz is None:
        return None
    return QuizSummary(
        id=quiz.id,
        title=quiz.title,
        total_points=quiz.total_points,
        passing_score=quiz.passing_score,
    )


class FakeQuizCatalog:
    def __init__(self, uow: "FakeUnitOfWork") -> None:
        self._uow = uow

    def get_quiz(self, quiz_id: int) -> Optional[QuizSnapshot]:
        return self._uow.store.quizzes.get(int(quiz_id))


class FakeStudentDirectory:
    def __init__(self, uow: "FakeUnitOfWork") -> None:
        self._uow = uow

    def active_student_ids_in_class(self, class_id: int) -> list[int]:
        return sorted(
            sid
            for sid, (cid, active) in self._uow.store.memberships.items()
            if cid == int(class_id) and active
        )

    def get_students(self, student_ids) -> dict[int, StudentSummary]:
        students = self._uow.store.students
        return {int(i): students[int(i)] for i in student_ids if int(i) in students}


class FakeAttemptRepository:
    def __init__(self, uow: "FakeUnitOfWork") -> None:
        self._uow = uow

    @property
    def _attempts(self) -> Dict[int, QuizAttempt]:
        return self._uow.store.attempts

    def get(self, attempt_id: int) -> Optional[QuizAttempt]:
        a = self._attempts.get(int(attempt_id))
        return copy.deepcopy(a) if a else None

    def get_for_update(self, attempt_id: int) -> Optional[QuizAttempt]:
        return self.get(attempt_id)

    def find_in_progress(self, student_id: int, quiz_id: int) -> Optional[QuizAttempt]:
        for a in self._attempts.values():
            if a.student_id == student_id and a.quiz_id == quiz_id and not a.is_completed():
                return copy.deepcopy(a)
        return None

    def has_completed(self, student_id: int, quiz_id: int) -> bool:
        return any(
            a.student_id == student_id and a.quiz_id == quiz_id and a.is_completed()
            for a in self._attempts.values()
        )

    def create_in_progress(self, attempt: QuizAttempt) -> tuple[QuizAttempt, bool]:
        existing = self.find_in_progress(attempt.student_id, attempt.quiz_id)
        if existing is not None:
            return existing, False
        stored = replace(attempt, id=self._uow.store.new_id())
        self._attempts[stored.id] = stored
        return copy.deepcopy(stored), True

    def save_completion(self, attempt: QuizAttempt, answers) -> None:
        self._attempts[attempt.id] = copy.deepcopy(attempt)
        self._uow.store.answers[attempt.id] = [
            AnswerRecord(
                question_id=a.question_id,
                selected_option_id=a.selected_option_id,
                is_correct=a.is_correct,
                points_earned=a.points_earned,
            )
            for a in answers
        ]

    def get_answers(self, attempt_id: int) -> list[AnswerRecord]:
        return list(self._uow.store.answers.get(int(attempt_id), []))

    def _ordered(self, student_id: int, quiz_id: Optional[int] = None) -> list[QuizAttempt]:
        rows = [
            a for a in self._attempts.values()
            if a.student_id == student_id and (quiz_id is None or a.quiz_id == quiz_id)
        ]
        return sorted(rows, key=lambda a: (a.started_at, a.id), reverse=True)

    def last_for(self, student_id: int, quiz_id: int) -> Optional[QuizAttempt]:
        rows = self._ordered(student_id, quiz_id)
        return copy.deepcopy(rows[0]) if rows else None

    def list_for_student(self, student_id: int, quiz_id: Optional[int] = None) -> list[QuizAttempt]:
        quizzes = self._uow.store.quizzes
        return [
            replace(copy.deepcopy(a), quiz=_summary(quizzes.get(a.quiz_id)))
            for a in self._ordered(student_id, quiz_id)
        ]


class FakeScoreLedgerRepository:
    def __init__(self, uow: "FakeUnitOfWork") -> None:
        self._uow = uow

    @property
    def _store(self) -> Store:
        return self._uow.store

    def _maybe_fail(self) -> None:
        if self._uow.fail_ledger:
            raise LedgerUpdateFailed()

    def lock_totals(self, student_id: int) -> tuple[TotalPointsState, bool]:
        self._uow.lock_log.append(("totals", student_id))
        created = False
        if student_id not in self._store.totals:
            self._store.totals[student_id] = TotalPointsState(student_id=student_id, id=self._store.new_id())
            created = True
        return copy.deepcopy(self._store.totals[student_id]), created

    def lock_best(self, student_id: int, quiz_id: int) -> Optional[BestScoreState]:
        self._uow.lock_log.append(("best", student_id, quiz_id))
        return self.get_best(student_id, quiz_id)

    def save_best(self, state: BestScoreState) -> BestScoreState:
        self._maybe_fail()
        if state.id is None:
            state = replace(state, id=self._store.new_id())
        self._store.best[(state.student_id, state.quiz_id)] = copy.deepcopy(state)
        return state

    def save_totals(self, state: TotalPointsState) -> TotalPointsState:
        self._maybe_fail()
        self._store.totals[state.student_id] = copy.deepcopy(state)
        return state

    def get_best(self, student_id: int, quiz_id: int) -> Optional[BestScoreState]:
        b = self._store.best.get((student_id, quiz_id))
        return copy.deepcopy(b) if b else None

    def list_best_for_student(self, student_id: int) -> list[BestScoreState]:
        rows = [b for (sid, _), b in self._store.best.items() if sid == student_id]
        rows.sort(key=lambda b: (b.last_attempt_at, b.id), reverse=True)
        return [replace(copy.deepcopy(b), quiz=_summary(self._store.quizzes.get(b.quiz_id))) for b in rows]

    def get_totals(self, student_id: int) -> Optional[TotalPointsState]:
        t = self._store.totals.get(student_id)
        return copy.deepcopy(t) if t else None

    def top_totals(self, limit: int, student_ids: Optional[Sequence[int]] = None) -> list[TotalPointsState]:
        rows = list(self._store.totals.values())
        if student_ids is not None:
            allowed = set(student_ids)
            rows = [r for r in rows if r.student_id in allowed]
        rows.sort(key=lambda r: (-r.total_points, r.id))
        return [copy.deepcopy(r) for r in rows[: max(0, int(limit))]]


class FakeUnitOfWork:
    def __init__(self, store: Optional[Store] = None) -> None:
        self.store = store or Store()
        self.fail_ledger = False
        self.lock_log: list = []
        self.commits = 0
        self._snapshots: list = []
        self.quizzes = FakeQuizCatalog(self)
        self.students = FakeStudentDirectory(self)
        self.attempts = FakeAttemptRepository(self)
        self.ledger = FakeScoreLedgerRepository(self)

    def __enter__(self) -> "FakeUnitOfWork":
        self._snapshots.append(copy.deepcopy(self.store))
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        snapshot = self._snapshots.pop()
        if exc_type is not None:
            self.store = snapshot
        elif not self._snapshots:
            self.commits += 1

    def commit(self) -> None:
        pass

    def rollback(self) -> None:
        if self._snapshots:
            self.store = copy.deepcopy(self._snapshots[-1])
