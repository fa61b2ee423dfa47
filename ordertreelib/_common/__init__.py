"""Common components shared by the OrderTreeLib collections.

This internal package holds configuration and error types used by both the
tree and the linked list. It should NOT be imported directly by users.

Important: This package must NEVER import from core or linked to avoid
circular dependencies.
"""

from .config import TraversalOrder, RenderConfig, parse_order
from .errors import (
    OrderTreeError,
    UnsupportedCapabilityError,
    EmptyTreeError,
    ConversionError,
    InvalidConfigError,
)

__all__ = [
    'TraversalOrder',
    'RenderConfig',
    'parse_order',
    'OrderTreeError',
    'UnsupportedCapabilityError',
    'EmptyTreeError',
    'ConversionError',
    'InvalidConfigError',
]
