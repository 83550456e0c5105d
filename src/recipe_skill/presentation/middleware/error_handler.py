"""Error Handler Middleware"""
from __future__ import annotations

import structlog

from recipe_skill.application.exceptions import (
    InvalidInputError,
    QueryCancelledError,
    RecipeNotFoundError,
    RecipeStoreError,
    StartupError,
)

logger = structlog.get_logger()


# 例外 → (ログレベル, エラーコード) のマッピング
error_codes: dict[type[Exception], tuple[str, str]] = {
    InvalidInputError: ("warning", "INVALID_INPUT"),
    RecipeNotFoundError: ("warning", "RECIPE_NOT_FOUND"),
    QueryCancelledError: ("warning", "QUERY_CANCELLED"),
    RecipeStoreError: ("error", "STORE_FAILURE"),
    StartupError: ("error", "STARTUP_FAILURE"),
}


def error_code_for(exc: Exception) -> tuple[str, str]:
    """例外のログレベルとエラーコードを解決"""
    for exception_class, code in error_codes.items():
        if isinstance(exc, exception_class):
            return code
    return "error", "INTERNAL_ERROR"


def log_failure(exc: Exception) -> str:
    """
    失敗をログ出力

    例外は握りつぶさない。呼び出し側で再送出し、
    プラットフォーム側のエラー応答に変換させる。

    Returns:
        str: エラーコード
    """
    level, code = error_code_for(exc)
    if level == "warning":
        logger.warning("dispatch_failed", code=code, error=str(exc))
    else:
        logger.error("dispatch_failed", code=code, error=str(exc), exc_info=True)
    return code
