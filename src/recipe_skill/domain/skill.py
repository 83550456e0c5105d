"""Skill Request / Response Value Objects"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Optional


class Intent(str, Enum):
    """対応インテント（閉じた集合）"""

    GET_INGREDIENTS_FOR_RECIPE = "GetIngredientsForRecipeIntent"
    GET_RECIPE_FROM_INGREDIENTS = "GetRecipeFromIngredientsIntent"
    ABOUT = "AboutIntent"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, name: Optional[str]) -> Intent:
        """インテント名を解決。未知の名前（空・None 含む）は UNKNOWN"""
        if not name:
            return cls.UNKNOWN
        try:
            return cls(name)
        except ValueError:
            return cls.UNKNOWN


@dataclass(frozen=True)
class IntentRequest:
    """
    音声プラットフォームから受け取ったリクエスト

    スロット値の検証はディスパッチに必要な存在チェックのみ。
    """

    intent_name: Optional[str]
    slots: Mapping[str, Optional[str]] = field(default_factory=dict)

    @property
    def intent(self) -> Intent:
        return Intent.parse(self.intent_name)

    def slot(self, name: str) -> str:
        """スロット値を取得（未設定は空文字）"""
        return self.slots.get(name) or ""


@dataclass(frozen=True)
class SkillResponse:
    """スキル応答（タイトル + 本文）"""

    title: str
    body: str
