"""Application Exceptions"""
from __future__ import annotations


class SkillError(Exception):
    """スキル処理エラーの基底クラス"""

    pass


class StartupError(SkillError):
    """起動時の致命的エラー（設定不足・ストア到達不可）"""

    pass


class InvalidInputError(SkillError):
    """必須スロットが未設定または空"""

    def __init__(self, slot: str):
        super().__init__(f"Slot '{slot}' is not present in the request")
        self.slot = slot


class RecipeNotFoundError(SkillError):
    """レシピが見つからないエラー"""

    def __init__(self, name: str):
        super().__init__(f"Recipe '{name}' not found")
        self.name = name


class RecipeStoreError(SkillError):
    """ドキュメントストアのクエリ実行エラー"""

    pass


class QueryCancelledError(SkillError):
    """コンテキストのキャンセルまたは期限切れでクエリを中断"""

    pass
