"""Application Use Cases"""
from .intent_dispatcher import (
    ABOUT_RESPONSE,
    UNKNOWN_RESPONSE,
    IntentDispatcher,
)

__all__ = [
    "ABOUT_RESPONSE",
    "UNKNOWN_RESPONSE",
    "IntentDispatcher",
]
