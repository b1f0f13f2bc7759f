from academy.application.ports.unit_of_work import UnitOfWork
from academy.application.ports.repositories import (
    AttemptRepository,
    QuizCatalog,
    ScoreLedgerRepository,
    StudentDirectory,
)

__all__ = [
    "UnitOfWork",
    "QuizCatalog",
    "StudentDirectory",
    "AttemptRepository",
    "ScoreLedgerRepository",
]
