"""Alexa Request / Response Envelope"""
from .schemas import (
    AlexaIntent,
    AlexaRequest,
    AlexaRequestEnvelope,
    AlexaSlot,
    build_simple_response,
)

__all__ = [
    "AlexaIntent",
    "AlexaRequest",
    "AlexaRequestEnvelope",
    "AlexaSlot",
    "build_simple_response",
]
