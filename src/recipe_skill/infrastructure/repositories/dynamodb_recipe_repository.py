"""DynamoDB Recipe Repository Implementation"""
from __future__ import annotations

import asyncio
import threading
from typing import Any

import structlog
from boto3.dynamodb.types import TypeDeserializer
from botocore.exceptions import BotoCoreError, ClientError

from recipe_skill.application.exceptions import RecipeStoreError
from recipe_skill.application.ports.repositories import IRecipeRepository
from recipe_skill.domain.recipe import Recipe
from recipe_skill.infrastructure.database.connection import Collection
from recipe_skill.infrastructure.database.executor import store_executor

logger = structlog.get_logger()

_deserializer = TypeDeserializer()


class DynamoDBRecipeRepository(IRecipeRepository):
    """
    DynamoDB ベースの Recipe Repository

    テーブル設計:
    - PK: id
    - GSI (name-index): name
    - ingredients: 文字列の List (L) 型。格納順を保持する。
      String Set (SS) は順序を持たないため RecipeStoreError とする。

    ブロッキングなドライバ呼び出しは store_executor で実行し、
    呼び出しコンテキストから放棄できるようにする。
    放棄されたスキャンは次のページを読まずに終了する。
    """

    def __init__(self, collection: Collection, name_index: str = "name-index"):
        self._client = collection.client
        self.table_name = collection.table_name
        self.name_index = name_index

    async def find_by_name(self, name: str) -> Recipe | None:
        """名前の完全一致（GSI クエリ）"""
        loop = asyncio.get_running_loop()
        item = await loop.run_in_executor(store_executor, self._query_by_name, name)
        return self._to_recipe(item) if item else None

    async def find_by_ingredients(self, first: str, second: str) -> list[Recipe]:
        """2 つの食材を両方含むレシピ（スキャン + フィルタ）"""
        loop = asyncio.get_running_loop()
        stop = threading.Event()
        try:
            items = await loop.run_in_executor(
                store_executor, self._scan_by_ingredients, first, second, stop
            )
        except asyncio.CancelledError:
            stop.set()
            raise
        return [self._to_recipe(item) for item in items]

    def _query_by_name(self, name: str) -> dict[str, Any] | None:
        log = logger.bind(table=self.table_name, recipe=name)
        log.info("querying_recipe_by_name")

        try:
            response = self._client.query(
                TableName=self.table_name,
                IndexName=self.name_index,
                KeyConditionExpression="#name = :name",
                ExpressionAttributeNames={"#name": "name"},
                ExpressionAttributeValues={":name": {"S": name}},
                Limit=1,
            )
        except (ClientError, BotoCoreError) as e:
            log.error("recipe_query_failed", error=str(e))
            raise RecipeStoreError(f"Query on {self.table_name} failed: {e}") from e

        items = response.get("Items", [])
        if not items:
            return None
        return self._deserialize(items[0])

    def _scan_by_ingredients(
        self,
        first: str,
        second: str,
        stop: threading.Event | None = None,
    ) -> list[dict[str, Any]]:
        log = logger.bind(table=self.table_name, ingredients=[first, second])
        log.info("scanning_recipes_by_ingredients")

        params: dict[str, Any] = {
            "TableName": self.table_name,
            "FilterExpression": (
                "contains(#ingredients, :first) AND contains(#ingredients, :second)"
            ),
            "ExpressionAttributeNames": {"#ingredients": "ingredients"},
            "ExpressionAttributeValues": {
                ":first": {"S": first},
                ":second": {"S": second},
            },
        }

        items: list[dict[str, Any]] = []
        try:
            while True:
                response = self._client.scan(**params)
                items.extend(self._deserialize(item) for item in response.get("Items", []))

                last_key = response.get("LastEvaluatedKey")
                if not last_key:
                    break
                if stop is not None and stop.is_set():
                    log.warning("recipe_scan_abandoned", count=len(items))
                    break
                params["ExclusiveStartKey"] = last_key
        except (ClientError, BotoCoreError) as e:
            log.error("recipe_scan_failed", error=str(e))
            raise RecipeStoreError(f"Scan on {self.table_name} failed: {e}") from e

        log.info("recipes_scanned", count=len(items))
        return items

    def _to_recipe(self, item: dict[str, Any]) -> Recipe:
        ingredients = item.get("ingredients")
        if ingredients is not None and not isinstance(ingredients, list):
            raise RecipeStoreError(
                f"Recipe '{item.get('name', '')}' in {self.table_name} stores ingredients "
                f"as {type(ingredients).__name__}; a List (L) is required"
            )
        return Recipe.from_item(item)

    def _deserialize(self, item: dict[str, Any]) -> dict[str, Any]:
        """DynamoDB アイテムを Python の値にデシリアライズ"""
        return {key: _deserializer.deserialize(value) for key, value in item.items()}
