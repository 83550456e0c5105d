"""Lambda Middleware"""
from .error_handler import log_failure
from .logging import configure_logging, request_logging

__all__ = ["configure_logging", "log_failure", "request_logging"]
