# PATH: apps/api/common/exceptions.py
"""
DRF exception handler

QuizDomainError(code/http_status/retryable) → Response
  {"detail": <message>, "code": <code>, "retryable": <bool>}

그 외 예외는 DRF 기본 handler에 위임한다.
(DRF도 처리하지 못하면 None → 예외 전파 → UnhandledExceptionMiddleware)
"""
from __future__ import annotations

import logging

from rest_framework.response import Response
from rest_framework.views import exception_handler

from academy.domain.quiz.errors import QuizDomainError

logger = logging.getLogger(__name__)


def domain_error_payload(exc: QuizDomainError) -> dict:
    return {
        "detail": exc.message,
        "code": exc.code,
        "retryable": bool(exc.retryable),
    }


def domain_exception_handler(exc, context):
    if isinstance(exc, QuizDomainError):
        view = context.get("view")
        log = logger.warning if exc.http_status >= 500 else logger.info
        log(
            "domain error code=%s status=%s view=%s context=%s",
            exc.code,
            exc.http_status,
            type(view).__name__ if view is not None else None,
            exc.context,
        )
        response = Response(domain_error_payload(exc), status=exc.http_status)
        if exc.retryable:
            response["Retry-After"] = "1"
        return response

    return exception_handler(exc, context)
