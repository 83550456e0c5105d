"""Recipe Entity"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Recipe:
    """
    レシピ（エンティティ）

    ドキュメントストアが所有する読み取り専用の値。
    リクエスト単位で生成され、コアからは変更しない。
    """

    id: str
    name: str
    ingredients: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_item(cls, item: dict[str, Any]) -> Recipe:
        """ストアのアイテム（デシリアライズ済み）から生成"""
        return cls(
            id=str(item.get("id", "")),
            name=item.get("name", ""),
            ingredients=tuple(item.get("ingredients") or ()),
        )

    def to_dict(self) -> dict[str, Any]:
        """辞書に変換"""
        return {
            "id": self.id,
            "name": self.name,
            "ingredients": list(self.ingredients),
        }
