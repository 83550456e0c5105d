"""Intent Dispatcher Use Case"""
from __future__ import annotations

import structlog

from recipe_skill.application.context import InvocationContext
from recipe_skill.application.exceptions import InvalidInputError, RecipeNotFoundError
from recipe_skill.application.ports.repositories import IRecipeRepository
from recipe_skill.domain.skill import Intent, IntentRequest, SkillResponse

logger = structlog.get_logger()

RECIPE_SLOT = "recipe"
INGREDIENT_ONE_SLOT = "ingredientone"
INGREDIENT_TWO_SLOT = "ingredienttwo"

ABOUT_RESPONSE = SkillResponse(title="About", body="Created by Nic Raboy in Tracy, CA")
UNKNOWN_RESPONSE = SkillResponse(title="Unknown Request", body="The intent was unrecognized")


class IntentDispatcher:
    """
    インテントディスパッチ ユースケース

    (インテント名, スロット値) をクエリと応答整形に対応付ける。
    1 回の呼び出しで実行するクエリは高々 1 つ。
    未知のインテントはエラーにせず既定の応答を返す。
    """

    def __init__(self, recipe_repository: IRecipeRepository):
        self._recipes = recipe_repository

    async def dispatch(
        self,
        request: IntentRequest,
        context: InvocationContext,
    ) -> SkillResponse:
        """
        リクエストをディスパッチ

        Args:
            request: インテント名とスロット値
            context: キャンセル可能な呼び出しコンテキスト

        Returns:
            SkillResponse: 整形済みの応答

        Raises:
            InvalidInputError: 必須スロットが空
            RecipeNotFoundError: 完全一致検索でレシピなし
            RecipeStoreError: ストアのクエリ実行エラー
            QueryCancelledError: コンテキストのキャンセル・期限切れ
        """
        intent = request.intent
        log = logger.bind(intent=intent.value, request_id=context.request_id)
        log.info("dispatch_started")

        if intent is Intent.GET_INGREDIENTS_FOR_RECIPE:
            response = await self._ingredients_for_recipe(request, context)
        elif intent is Intent.GET_RECIPE_FROM_INGREDIENTS:
            response = await self._recipes_from_ingredients(request, context)
        elif intent is Intent.ABOUT:
            response = ABOUT_RESPONSE
        else:
            log.info("unknown_intent", intent_name=request.intent_name)
            response = UNKNOWN_RESPONSE

        log.info("dispatch_completed", title=response.title)
        return response

    async def _ingredients_for_recipe(
        self,
        request: IntentRequest,
        context: InvocationContext,
    ) -> SkillResponse:
        """レシピ名から材料一覧を返す"""
        recipe_name = request.slot(RECIPE_SLOT)
        if not recipe_name:
            raise InvalidInputError(RECIPE_SLOT)

        recipe = await context.run(self._recipes.find_by_name, recipe_name)
        if recipe is None:
            logger.warning("recipe_not_found", recipe=recipe_name)
            raise RecipeNotFoundError(recipe_name)

        return SkillResponse(title="Ingredients", body=", ".join(recipe.ingredients))

    async def _recipes_from_ingredients(
        self,
        request: IntentRequest,
        context: InvocationContext,
    ) -> SkillResponse:
        """2 つの食材を含むレシピ名を返す（0 件は空の本文で成功）"""
        first = request.slot(INGREDIENT_ONE_SLOT)
        second = request.slot(INGREDIENT_TWO_SLOT)

        recipes = await context.run(self._recipes.find_by_ingredients, first, second)
        logger.info("recipes_matched", count=len(recipes))

        # 区切り文字なしで連結する
        return SkillResponse(title="Recipes", body="".join(r.name for r in recipes))
