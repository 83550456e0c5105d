"""Connection Holder Unit Tests"""
import time

import boto3
import pytest
from botocore.stub import Stubber

from recipe_skill.application.exceptions import StartupError
from recipe_skill.infrastructure.config import Settings
from recipe_skill.infrastructure.database import Connection
from recipe_skill.infrastructure.database import connection as connection_module


@pytest.fixture
def stubbed_client(monkeypatch):
    """boto3.client を Stubber 付きクライアントに差し替え"""
    client = boto3.client(
        "dynamodb",
        region_name="us-east-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )
    created = []

    def fake_client(service_name, **kwargs):
        created.append((service_name, kwargs))
        return client

    monkeypatch.setattr(connection_module.boto3, "client", fake_client)
    with Stubber(client) as stub:
        yield client, stub, created


@pytest.fixture
def reset_connection():
    connection_module.close_connection()
    yield
    connection_module.close_connection()


class FakeClient:
    def __init__(self):
        self.closed = False

    def close(self):
        self.closed = True


class TestInitialize:
    """接続確立のテスト"""

    def test_missing_uri_is_fatal(self):
        """異常: URI 未設定は StartupError"""
        with pytest.raises(StartupError, match="RECIPES_DATABASE_URI"):
            connection_module.initialize(Settings(database_uri=""))

    def test_missing_uri_from_environment(self):
        """異常: 環境変数がなければ StartupError"""
        with pytest.raises(StartupError):
            connection_module.initialize(Settings())

    def test_unreachable_store_is_fatal(self, stubbed_client):
        """異常: 疎通確認の失敗は StartupError"""
        _, stub, _ = stubbed_client
        stub.add_client_error("list_tables", service_error_code="UnrecognizedClientException")

        with pytest.raises(StartupError):
            connection_module.initialize(Settings(database_uri="http://localhost:8000"))

    def test_unreachable_store_is_fatal(self, monkeypatch):
        """異常: 到達できないエンドポイントは StartupError"""
        monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
        monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
        settings = Settings(
            database_uri="http://127.0.0.1:1",
            connect_timeout_seconds=1.0,
            max_attempts=1,
        )

        with pytest.raises(StartupError):
            connection_module.initialize(settings)

    def test_connection_bound_to_database(self, stubbed_client):
        """正常: 論理データベースに束縛された接続を返す"""
        # Arrange
        client, stub, created = stubbed_client
        stub.add_response("list_tables", {"TableNames": ["alexa-recipes"]}, {"Limit": 1})
        settings = Settings(database_uri="http://localhost:8000", connect_timeout_seconds=10)

        # Act
        connection = connection_module.initialize(settings)

        # Assert
        assert connection.client is client
        assert connection.database == "alexa"
        assert connection.collection("recipes").table_name == "alexa-recipes"
        service_name, kwargs = created[0]
        assert service_name == "dynamodb"
        assert kwargs["endpoint_url"] == "http://localhost:8000"
        assert kwargs["config"].connect_timeout == 10


class TestSharedConnection:
    """プロセス共有接続のテスト"""

    def test_initialized_once_and_reused(self, monkeypatch, reset_connection):
        """正常: 2 回目以降は同じ接続を返す（再接続しない）"""
        # Arrange
        calls = []

        def fake_initialize(settings):
            calls.append(settings)
            return Connection(client=FakeClient(), database=settings.database_name)

        monkeypatch.setattr(connection_module, "initialize", fake_initialize)
        settings = Settings(database_uri="http://localhost:8000")

        # Act
        first = connection_module.get_connection(settings)
        second = connection_module.get_connection(settings)

        # Assert
        assert first is second
        assert len(calls) == 1

    def test_close_releases_connection(self, monkeypatch, reset_connection):
        """正常: close_connection で解放し、次回は再確立する"""
        clients = []

        def fake_initialize(settings):
            clients.append(FakeClient())
            return Connection(client=clients[-1], database="alexa")

        monkeypatch.setattr(connection_module, "initialize", fake_initialize)
        settings = Settings(database_uri="http://localhost:8000")

        first = connection_module.get_connection(settings)
        connection_module.close_connection()
        second = connection_module.get_connection(settings)

        assert clients[0].closed
        assert first is not second

    def test_get_connection_reads_environment(self, monkeypatch, reset_connection):
        """正常: 設定省略時は環境変数から読み込む"""
        monkeypatch.setenv("RECIPES_DATABASE_URI", "http://localhost:8000")
        monkeypatch.setenv("RECIPES_DATABASE_NAME", "kitchen")
        monkeypatch.setattr(
            connection_module,
            "initialize",
            lambda settings: Connection(client=FakeClient(), database=settings.database_name),
        )

        connection = connection_module.get_connection()

        assert connection.collection("recipes").table_name == "kitchen-recipes"


class UnresponsiveClient:
    """ListTables が応答しないクライアント"""

    def __init__(self, delay: float):
        self.delay = delay

    def list_tables(self, **kwargs):
        time.sleep(self.delay)
        return {"TableNames": []}


class TestReachabilityBound:
    """疎通確認の時間上限のテスト"""

    def test_ping_client_makes_single_attempt(self, stubbed_client):
        """正常: 疎通確認用クライアントは 1 回のみ試行し、接続タイムアウトで打ち切る"""
        # Arrange
        _, stub, created = stubbed_client
        stub.add_response("list_tables", {"TableNames": []}, {"Limit": 1})
        settings = Settings(
            database_uri="http://localhost:8000",
            connect_timeout_seconds=4,
            read_timeout_seconds=2,
            max_attempts=3,
        )

        # Act
        connection_module.initialize(settings)

        # Assert
        (_, query_kwargs), (_, ping_kwargs) = created
        assert query_kwargs["config"].retries["max_attempts"] == 3
        assert query_kwargs["config"].read_timeout == 2
        assert ping_kwargs["config"].retries["max_attempts"] == 1
        assert ping_kwargs["config"].connect_timeout == 4
        assert ping_kwargs["config"].read_timeout == 4

    def test_unresponsive_store_fails_within_connect_timeout(self, monkeypatch):
        """異常: 応答しないストアは connect_timeout_seconds 以内に StartupError"""
        monkeypatch.setattr(
            connection_module.boto3,
            "client",
            lambda service_name, **kwargs: UnresponsiveClient(delay=3.0),
        )
        settings = Settings(database_uri="http://localhost:8000", connect_timeout_seconds=0.2)

        started = time.perf_counter()
        with pytest.raises(StartupError):
            connection_module.initialize(settings)
        elapsed = time.perf_counter() - started

        assert elapsed < 1.5
