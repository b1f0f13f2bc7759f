"""
Unit of Work 포트: 트랜잭션 경계 (Django 미사용)

중첩 진입 가능: 바깥 with가 트랜잭션, 안쪽 with는 savepoint.
"""
from __future__ import annotations

from typing import Protocol

from academy.application.ports.repositories import (
    AttemptRepository,
    QuizCatalog,
    ScoreLedgerRepository,
    StudentDirectory,
)


class UnitOfWork(Protocol):
    """트랜잭션 단위. __enter__에서 시작, __exit__에서 commit/rollback."""

    @property
    def quizzes(self) -> QuizCatalog:
        ...

    @property
    def students(self) -> StudentDirectory:
        ...

    @property
    def attempts(self) -> AttemptRepository:
        ...

    @property
    def ledger(self) -> ScoreLedgerRepository:
        ...

    def __enter__(self) -> "UnitOfWork":
        ...

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        ...

    def commit(self) -> None:
        ...

    def rollback(self) -> None:
        ...
