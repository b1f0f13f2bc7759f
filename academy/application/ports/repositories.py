"""
Repository 포트: 영속화 추상화 (Django/ORM 미사용)

select_for_update / atomic 은 어댑터(academy.adapters.db.django)에서 수행.
"*_for_update" 메서드는 호출자가 UnitOfWork 트랜잭션 안에 있어야 의미가 있다.
"""
from __future__ import annotations

from abc import abstractmethod
from typing import Iterable, Optional, Protocol, Sequence

from academy.domain.quiz.entities import (
    AnswerRecord,
    BestScoreState,
    GradedAnswer,
    QuizAttempt,
    QuizSnapshot,
    StudentSummary,
    TotalPointsState,
)


class QuizCatalog(Protocol):
    """Quiz 읽기 전용 조회 (외부 협력자: quiz 작성 CRUD는 범위 밖)."""

    @abstractmethod
    def get_quiz(self, quiz_id: int) -> Optional[QuizSnapshot]:
        """quiz + 문항(active/archived 모두) + 선택지, order_position 정렬. 없으면 None."""
        ...


class StudentDirectory(Protocol):
    """학생/반 디렉터리 (외부 협력자)."""

    @abstractmethod
    def active_student_ids_in_class(self, class_id: int) -> list[int]:
        """반에 현재 활성 상태인 학생 id 목록. 없으면 []."""
        ...

    @abstractmethod
    def get_students(self, student_ids: Iterable[int]) -> dict[int, StudentSummary]:
        ...


class AttemptRepository(Protocol):

    @abstractmethod
    def get(self, attempt_id: int) -> Optional[QuizAttempt]:
        """락 없음. 없으면 None."""
        ...

    @abstractmethod
    def get_for_update(self, attempt_id: int) -> Optional[QuizAttempt]:
        """row lock. 같은 attempt 동시 제출을 직렬화."""
        ...

    @abstractmethod
    def find_in_progress(self, student_id: int, quiz_id: int) -> Optional[QuizAttempt]:
        ...

    @abstractmethod
    def has_completed(self, student_id: int, quiz_id: int) -> bool:
        ...

    @abstractmethod
    def create_in_progress(self, attempt: QuizAttempt) -> tuple[QuizAttempt, bool]:
        """
        in_progress attempt 생성.
        (student, quiz) in_progress가 동시에 먼저 생겼으면 그것을 반환한다.
        Returns: (attempt, created)
        """
        ...

    @abstractmethod
    def save_completion(self, attempt: QuizAttempt, answers: Sequence[GradedAnswer]) -> None:
        """completed 상태 저장 + 문항별 answer 일괄 생성 (write-once)."""
        ...

    @abstractmethod
    def get_answers(self, attempt_id: int) -> list[AnswerRecord]:
        ...

    @abstractmethod
    def last_for(self, student_id: int, quiz_id: int) -> Optional[QuizAttempt]:
        """가장 최근 시작한 attempt."""
        ...

    @abstractmethod
    def list_for_student(self, student_id: int, quiz_id: Optional[int] = None) -> list[QuizAttempt]:
        """최신순, quiz 요약 포함."""
        ...


class ScoreLedgerRepository(Protocol):
    """QuizBestScore / StudentTotalPoints 저장소."""

    @abstractmethod
    def lock_totals(self, student_id: int) -> tuple[TotalPointsState, bool]:
        """
        학생 total points 행을 잠근다. 없으면 0값 행을 만든 뒤 잠근다.
        Returns: (state, created): created=True 면 "이전 기록 없음"으로 취급.
        """
        ...

    @abstractmethod
    def lock_best(self, student_id: int, quiz_id: int) -> Optional[BestScoreState]:
        ...

    @abstractmethod
    def save_best(self, state: BestScoreState) -> BestScoreState:
        ...

    @abstractmethod
    def save_totals(self, state: TotalPointsState) -> TotalPointsState:
        ...

    @abstractmethod
    def get_best(self, student_id: int, quiz_id: int) -> Optional[BestScoreState]:
        ...

    @abstractmethod
    def list_best_for_student(self, student_id: int) -> list[BestScoreState]:
        """last_attempt_at 최신순, quiz 요약 포함."""
        ...

    @abstractmethod
    def get_totals(self, student_id: int) -> Optional[TotalPointsState]:
        ...

    @abstractmethod
    def top_totals(self, limit: int, student_ids: Optional[Sequence[int]] = None) -> list[TotalPointsState]:
        """total_points 내림차순, 동점은 저장 순서(id) 유지."""
        ...
