"""
Django Unit of Work: transaction.atomic 래퍼 (lazy import)

재진입 가능: use case 안에서 다른 use case가 같은 uow로 `with uow:` 하면
안쪽은 savepoint(atomic 중첩)가 된다. 커밋은 가장 바깥 블록 종료 시 1회.
"""
from __future__ import annotations


class DjangoUnitOfWork:
    """Django transaction.atomic으로 트랜잭션 경계. 메서드 내부에서 Django import."""

    def __init__(self) -> None:
        self._atomics: list = []
        self._quizzes = None
        self._students = None
        self._attempts = None
        self._ledger = None

    @property
    def quizzes(self):
        from academy.adapters.db.django.repositories_quizzes import DjangoQuizCatalog
        if self._quizzes is None:
            self._quizzes = DjangoQuizCatalog()
        return self._quizzes

    @property
    def students(self):
        from academy.adapters.db.django.repositories_students import DjangoStudentDirectory
        if self._students is None:
            self._students = DjangoStudentDirectory()
        return self._students

    @property
    def attempts(self):
        from academy.adapters.db.django.repositories_results import DjangoAttemptRepository
        if self._attempts is None:
            self._attempts = DjangoAttemptRepository()
        return self._attempts

    @property
    def ledger(self):
        from academy.adapters.db.django.repositories_results import DjangoScoreLedgerRepository
        if self._ledger is None:
            self._ledger = DjangoScoreLedgerRepository()
        return self._ledger

    def __enter__(self) -> DjangoUnitOfWork:
        from django.db import transaction
        atomic = transaction.atomic()
        atomic.__enter__()
        self._atomics.append(atomic)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if self._atomics:
            atomic = self._atomics.pop()
            atomic.__exit__(exc_type, exc_val, exc_tb)

    def commit(self) -> None:
        # atomic() 블록 내에서는 명시적 commit 없음; 가장 바깥 __exit__ 시 자동
        pass

    def rollback(self) -> None:
        from django.db import transaction
        transaction.set_rollback(True)
