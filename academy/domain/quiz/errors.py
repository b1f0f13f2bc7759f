"""
Quiz 도메인 오류: 순수 파이썬

모두 호출자에게 구분 가능한 상태로 전달된다 (삼키지 않음).
code/http_status는 API 레이어(apps.api.common.exceptions)에서 그대로 응답에 사용.

retryable:
  - LedgerUpdateFailed 만 True (같은 제출을 그대로 다시 보내도 안전)
  - 나머지는 요청을 바꾸지 않으면 재시도 의미 없음
"""
from __future__ import annotations


class QuizDomainError(Exception):
    code = "quiz_error"
    http_status = 400
    retryable = False
    default_message = "Quiz request failed."

    def __init__(self, message: str | None = None, **context):
        super().__init__(message or self.default_message)
        self.message = str(message or self.default_message)
        self.context = dict(context)


class QuizNotFound(QuizDomainError):
    code = "quiz_not_found"
    http_status = 404
    default_message = "Quiz not found."


class QuizUnavailable(QuizDomainError):
    """quiz.status != active"""
    code = "quiz_unavailable"
    http_status = 409
    default_message = "This quiz is not available."


class RetakeNotAllowed(QuizDomainError):
    code = "retake_not_allowed"
    http_status = 409
    default_message = "You have already completed this quiz and retakes are not allowed."


class AttemptNotFound(QuizDomainError):
    code = "attempt_not_found"
    http_status = 404
    default_message = "Attempt not found."


class Forbidden(QuizDomainError):
    """attempt 소유 학생 불일치."""
    code = "forbidden"
    http_status = 403
    default_message = "This attempt does not belong to you."


class AlreadySubmitted(QuizDomainError):
    code = "already_submitted"
    http_status = 409
    default_message = "This quiz has already been submitted."


class LedgerUpdateFailed(QuizDomainError):
    """best score / total points 반영 실패. 제출 전체가 롤백된 상태."""
    code = "ledger_update_failed"
    http_status = 503
    retryable = True
    default_message = "Score could not be recorded. Please submit again."
