"""
Services package.

Provides the translation logic and the Lambda integration.
"""

from .lambda_invoker import LambdaInvoker
from .translator import RequestTranslator

__all__ = [
    "LambdaInvoker",
    "RequestTranslator",
]
