"""
Alexa Skill Lambda Handler

Intent Dispatcher を使用:
- GetIngredientsForRecipeIntent (レシピ名 → 材料)
- GetRecipeFromIngredientsIntent (食材 2 つ → レシピ名)
- AboutIntent
"""
import asyncio
from typing import Any

import structlog

from recipe_skill.application.context import InvocationContext
from recipe_skill.application.use_cases.intent_dispatcher import IntentDispatcher
from recipe_skill.infrastructure.config import get_settings
from recipe_skill.infrastructure.database import get_connection
from recipe_skill.infrastructure.repositories import DynamoDBRecipeRepository
from recipe_skill.presentation.alexa import AlexaRequestEnvelope, build_simple_response
from recipe_skill.presentation.middleware import (
    configure_logging,
    log_failure,
    request_logging,
)

logger = structlog.get_logger()


def build_dispatcher() -> IntentDispatcher:
    """共有接続に束縛したディスパッチャを作成"""
    settings = get_settings()
    connection = get_connection(settings)
    repository = DynamoDBRecipeRepository(
        connection.collection(settings.recipes_collection),
        name_index=settings.recipes_name_index,
    )
    return IntentDispatcher(repository)


@request_logging
def handle(event: dict, context: Any) -> dict:
    """1 リクエストを処理"""
    settings = get_settings()
    invocation = InvocationContext.from_lambda_context(
        context,
        margin_seconds=settings.deadline_margin_seconds,
    )

    try:
        request = AlexaRequestEnvelope.model_validate(event).to_intent_request()
        dispatcher = build_dispatcher()
        response = asyncio.run(dispatcher.dispatch(request, invocation))
    except Exception as e:
        log_failure(e)
        raise

    return build_simple_response(response)


def lambda_handler(event: dict, context: Any) -> dict:
    """Lambda エントリポイント"""
    configure_logging(get_settings().log_level)
    return handle(event, context)
