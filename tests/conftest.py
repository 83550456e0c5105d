"""Shared Test Fixtures"""
from __future__ import annotations

import asyncio

import pytest

from recipe_skill.application.ports.repositories import IRecipeRepository
from recipe_skill.domain.recipe import Recipe
from recipe_skill.infrastructure.config import get_settings


class InMemoryRecipeRepository(IRecipeRepository):
    """
    インメモリ Recipe Repository（テスト用代替ストア）

    呼び出し回数を記録し、ストアに触れたかを検証できる。
    """

    def __init__(self, recipes: list[Recipe] | None = None, delay: float = 0.0):
        self.recipes = list(recipes or [])
        self.delay = delay
        self.calls: list[tuple[str, tuple[str, ...]]] = []
        self.error: Exception | None = None

    async def find_by_name(self, name: str) -> Recipe | None:
        await self._record("find_by_name", name)
        for recipe in self.recipes:
            if recipe.name == name:
                return recipe
        return None

    async def find_by_ingredients(self, first: str, second: str) -> list[Recipe]:
        await self._record("find_by_ingredients", first, second)
        return [
            r for r in self.recipes
            if first in r.ingredients and second in r.ingredients
        ]

    async def _record(self, method: str, *args: str) -> None:
        self.calls.append((method, args))
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error


class FakeLambdaContext:
    """Lambda コンテキストの代替"""

    def __init__(self, remaining_ms: int = 3000, request_id: str = "req-123"):
        self.aws_request_id = request_id
        self._remaining_ms = remaining_ms

    def get_remaining_time_in_millis(self) -> int:
        return self._remaining_ms


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """環境変数由来の設定をテストごとに初期化"""
    for name in (
        "RECIPES_DATABASE_URI",
        "RECIPES_DATABASE_NAME",
        "RECIPES_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def cookies() -> Recipe:
    return Recipe(
        id="r-1",
        name="chocolate chip cookies",
        ingredients=("flour", "egg", "sugar", "chocolate"),
    )


@pytest.fixture
def repository(cookies: Recipe) -> InMemoryRecipeRepository:
    return InMemoryRecipeRepository(
        [
            cookies,
            Recipe(id="r-2", name="A", ingredients=("egg", "flour", "sugar")),
            Recipe(id="r-3", name="B", ingredients=("egg",)),
        ]
    )


@pytest.fixture
def lambda_context() -> FakeLambdaContext:
    return FakeLambdaContext()
