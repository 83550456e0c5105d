"""Repository Implementations"""
from .dynamodb_recipe_repository import DynamoDBRecipeRepository

__all__ = ["DynamoDBRecipeRepository"]
