"""Repository Interfaces (Ports)"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from recipe_skill.domain.recipe import Recipe


class IRecipeRepository(ABC):
    """
    Recipe Repository Interface

    ディスパッチャから参照するドキュメントストアの抽象インターフェース。
    具体的な実装（DynamoDB等）はインフラ層で提供する。
    テストでは代替ストアを注入できる。
    """

    @abstractmethod
    async def find_by_name(self, name: str) -> Recipe | None:
        """名前の完全一致でレシピを 1 件取得"""
        pass

    @abstractmethod
    async def find_by_ingredients(self, first: str, second: str) -> list[Recipe]:
        """
        2 つの食材を両方含むレシピを取得

        他の食材を含んでいてもよい（上位集合一致）。順序は問わない。
        """
        pass
