"""Chest layout and job option definitions."""
from .layout import (
    ATLAS_SIZE,
    BoxSpec,
    ChestLayout,
    ConversionOptions,
    SINGLE_LAYOUT,
    DOUBLE_LAYOUT,
    SINGLE_DEBUG_LAYOUT,
    DOUBLE_DEBUG_LAYOUT,
)

__all__ = [
    "ATLAS_SIZE",
    "BoxSpec",
    "ChestLayout",
    "ConversionOptions",
    "SINGLE_LAYOUT",
    "DOUBLE_LAYOUT",
    "SINGLE_DEBUG_LAYOUT",
    "DOUBLE_DEBUG_LAYOUT",
]
