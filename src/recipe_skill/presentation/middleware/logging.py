"""Logging Middleware"""
from __future__ import annotations

import functools
import logging
import time
from typing import Any, Callable

import structlog

logger = structlog.get_logger()

_configured = False


def configure_logging(level: str = "INFO") -> None:
    """構造化ログを設定（プロセスで 1 回）"""
    global _configured

    if _configured:
        return

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper(), logging.INFO)
        ),
        logger_factory=structlog.PrintLoggerFactory(),
    )
    _configured = True


def request_logging(
    handler: Callable[[dict, Any], dict],
) -> Callable[[dict, Any], dict]:
    """
    リクエスト/レスポンス ログデコレータ

    12-Factor App の Logs 原則に従い、
    呼び出しごとにリクエストIDをコンテキストに束縛して構造化ログを出力する。
    """

    @functools.wraps(handler)
    def wrapper(event: dict, context: Any) -> dict:
        # コンテキストにリクエストIDを設定
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=getattr(context, "aws_request_id", ""),
            alexa_request_id=(event.get("request") or {}).get("requestId", ""),
        )

        start_time = time.perf_counter()
        logger.info(
            "request_started",
            request_type=(event.get("request") or {}).get("type", ""),
        )

        result = handler(event, context)

        duration_ms = (time.perf_counter() - start_time) * 1000
        logger.info("request_completed", duration_ms=round(duration_ms, 2))

        return result

    return wrapper
