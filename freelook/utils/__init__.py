"""Shared enums and constants."""

from .types import DEFAULT_TRANSFORM_ORDER, Movement, TransformStep

__all__ = ['DEFAULT_TRANSFORM_ORDER', 'Movement', 'TransformStep']
