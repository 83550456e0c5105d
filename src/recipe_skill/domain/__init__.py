"""Recipe Domain Module"""
from .recipe import Recipe
from .skill import Intent, IntentRequest, SkillResponse

__all__ = [
    "Recipe",
    "Intent",
    "IntentRequest",
    "SkillResponse",
]
