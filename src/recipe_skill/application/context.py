"""Invocation Context"""
from __future__ import annotations

import asyncio
import threading
import time
from typing import Any, Awaitable, Callable, Optional, TypeVar

from .exceptions import QueryCancelledError

T = TypeVar("T")


class InvocationContext:
    """
    呼び出しコンテキスト

    1 回のディスパッチに渡されるキャンセル可能なコンテキスト。
    期限（deadline）を持ち、キャンセルまたは期限切れの場合は
    実行中のクエリを放棄して QueryCancelledError を送出する。
    """

    def __init__(self, timeout: Optional[float] = None, request_id: str = ""):
        self.request_id = request_id
        self._deadline = time.monotonic() + timeout if timeout is not None else None
        self._cancelled = False
        self._tasks: set[asyncio.Future] = set()
        self._lock = threading.Lock()

    @classmethod
    def from_lambda_context(
        cls,
        context: Any,
        margin_seconds: float = 0.25,
    ) -> InvocationContext:
        """
        Lambda コンテキストから生成

        Args:
            context: Lambda ランタイムのコンテキスト（None 可）
            margin_seconds: 応答を返すために残しておく時間

        Returns:
            InvocationContext: 残り実行時間を期限とするコンテキスト
        """
        if context is None:
            return cls()

        remaining = context.get_remaining_time_in_millis() / 1000 - margin_seconds
        return cls(
            timeout=max(remaining, 0.0),
            request_id=getattr(context, "aws_request_id", ""),
        )

    @property
    def cancelled(self) -> bool:
        if self._cancelled:
            return True
        return self._deadline is not None and time.monotonic() >= self._deadline

    def remaining(self) -> Optional[float]:
        """期限までの残り秒数（期限なしは None）"""
        if self._deadline is None:
            return None
        return max(self._deadline - time.monotonic(), 0.0)

    def cancel(self) -> None:
        """キャンセル（別スレッドからも呼び出し可）"""
        with self._lock:
            self._cancelled = True
            tasks = list(self._tasks)

        for task in tasks:
            task.get_loop().call_soon_threadsafe(task.cancel)

    async def run(self, func: Callable[..., Awaitable[T]], *args: Any) -> T:
        """
        ストア呼び出しを期限付きで実行

        Raises:
            QueryCancelledError: 実行前のキャンセル、期限切れ、実行中のキャンセル
        """
        if self.cancelled:
            raise QueryCancelledError("Invocation context was cancelled before the query")

        task = asyncio.ensure_future(func(*args))
        with self._lock:
            self._tasks.add(task)
            if self._cancelled:
                task.cancel()

        try:
            return await asyncio.wait_for(task, timeout=self.remaining())
        except asyncio.TimeoutError as e:
            raise QueryCancelledError("Invocation deadline exceeded") from e
        except asyncio.CancelledError as e:
            if not self._cancelled:
                raise
            raise QueryCancelledError("Invocation context was cancelled") from e
        finally:
            with self._lock:
                self._tasks.discard(task)
