"""
DynamoDB Connection Holder

Lambda 実行環境のライフタイムで 1 つだけ接続を確立し、
以降の呼び出しで再利用する（コールドスタート時のみ接続コスト）。
"""
from __future__ import annotations

import atexit
import threading
from concurrent.futures import TimeoutError as FutureTimeoutError
from dataclasses import dataclass
from typing import Any, Optional

import boto3
import structlog
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from recipe_skill.application.exceptions import StartupError
from recipe_skill.infrastructure.config import Settings, get_settings
from recipe_skill.infrastructure.database.executor import store_executor

logger = structlog.get_logger()


@dataclass(frozen=True)
class Collection:
    """コレクション（DynamoDB テーブル）ハンドル"""

    client: Any
    table_name: str


@dataclass(frozen=True)
class Connection:
    """
    ドキュメントストア接続

    1 つの論理データベース（テーブル名プレフィックス）に束縛される。
    作成後は変更せず、複数の呼び出しから読み取り専用で共有する。
    botocore クライアントはスレッドセーフ。
    """

    client: Any
    database: str

    def collection(self, name: str) -> Collection:
        """コレクションハンドルを取得"""
        return Collection(client=self.client, table_name=f"{self.database}-{name}")

    def close(self) -> None:
        """接続を解放"""
        self.client.close()


def initialize(settings: Settings) -> Connection:
    """
    接続を確立

    Args:
        settings: アプリケーション設定（接続 URI を含む）

    Returns:
        Connection: 論理データベースに束縛された接続

    Raises:
        StartupError: URI 未設定、またはタイムアウト内にストアへ到達できない
    """
    if not settings.database_uri:
        raise StartupError("RECIPES_DATABASE_URI is not set")

    log = logger.bind(endpoint=settings.database_uri, database=settings.database_name)
    log.info("connection_initializing")

    # クエリ用: 1 回の読み取りは read_timeout_seconds まで
    client_config = Config(
        region_name=settings.aws_region,
        connect_timeout=settings.connect_timeout_seconds,
        read_timeout=settings.read_timeout_seconds,
        retries={"max_attempts": settings.max_attempts, "mode": "standard"},
    )
    # 疎通確認用: 1 回のみ試行
    ping_config = Config(
        region_name=settings.aws_region,
        connect_timeout=settings.connect_timeout_seconds,
        read_timeout=settings.connect_timeout_seconds,
        retries={"max_attempts": 1, "mode": "standard"},
    )

    try:
        client = boto3.client(
            "dynamodb",
            endpoint_url=settings.database_uri,
            config=client_config,
        )
        ping_client = boto3.client(
            "dynamodb",
            endpoint_url=settings.database_uri,
            config=ping_config,
        )
        _check_reachable(ping_client, settings.connect_timeout_seconds)
    except (BotoCoreError, ClientError, ValueError, FutureTimeoutError) as e:
        log.error("connection_failed", error=str(e) or type(e).__name__)
        raise StartupError(f"Could not connect to {settings.database_uri}: {e!r}") from e

    log.info("connection_established")
    return Connection(client=client, database=settings.database_name)


def _check_reachable(client: Any, timeout: float) -> None:
    """ListTables で疎通確認（全体を timeout 秒で打ち切る）"""
    future = store_executor.submit(client.list_tables, Limit=1)
    try:
        future.result(timeout=timeout)
    finally:
        future.cancel()


_connection: Optional[Connection] = None
_lock = threading.Lock()


def get_connection(settings: Optional[Settings] = None) -> Connection:
    """プロセス共有の接続を取得（初回のみ確立）"""
    global _connection

    if _connection is None:
        with _lock:
            if _connection is None:
                _connection = initialize(settings or get_settings())
    return _connection


def close_connection() -> None:
    """共有接続を解放（ベストエフォート）"""
    global _connection

    with _lock:
        connection, _connection = _connection, None

    if connection is None:
        return
    try:
        connection.close()
    except BotoCoreError as e:
        logger.warning("connection_close_failed", error=str(e))


atexit.register(close_connection)
