"""Alexa Skill Envelope Schemas"""
from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from recipe_skill.domain.skill import IntentRequest, SkillResponse


class AlexaSlot(BaseModel):
    """スロット"""

    name: Optional[str] = None
    value: Optional[str] = None


class AlexaIntent(BaseModel):
    """インテント"""

    name: Optional[str] = None
    slots: Optional[dict[str, AlexaSlot]] = None


class AlexaRequest(BaseModel):
    """リクエスト本体"""

    model_config = ConfigDict(populate_by_name=True)

    type: str = ""
    request_id: str = Field(default="", alias="requestId")
    locale: str = ""
    intent: Optional[AlexaIntent] = None


class AlexaRequestEnvelope(BaseModel):
    """
    Alexa リクエストエンベロープ

    session / context など未使用のフィールドは無視する。
    LaunchRequest などインテントを持たないリクエストは
    インテント名なし（未知のインテント）として扱う。
    intent.name が null の場合はインテント名なし、slots が null の場合はスロットなし。
    """

    version: str = "1.0"
    request: AlexaRequest = Field(default_factory=AlexaRequest)

    def to_intent_request(self) -> IntentRequest:
        intent = self.request.intent
        if intent is None:
            return IntentRequest(intent_name=None)

        return IntentRequest(
            intent_name=intent.name,
            slots={key: slot.value for key, slot in (intent.slots or {}).items()},
        )


def build_simple_response(response: SkillResponse) -> dict[str, Any]:
    """PlainText 音声 + Simple カードの応答を作成"""
    return {
        "version": "1.0",
        "response": {
            "outputSpeech": {
                "type": "PlainText",
                "text": response.body,
            },
            "card": {
                "type": "Simple",
                "title": response.title,
                "content": response.body,
            },
            "shouldEndSession": True,
        },
    }
