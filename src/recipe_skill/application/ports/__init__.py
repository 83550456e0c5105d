"""Application Ports (Interfaces)"""
from .repositories import IRecipeRepository

__all__ = [
    "IRecipeRepository",
]
