"""
Box UV geometry and atlas blitting for chest textures.

Includes the box net calculator, the split/flip face copy recipes and the
debug face overlay.
"""
from .uv_net import Face, Rect, BoxNet, compute_box_net
from .blitter import (
    FaceCopy,
    SPLIT_COPIES,
    FLIP_COPIES,
    FLIP_SINGLE_COPIES,
    copy_rect,
    split_box,
    flip_box,
    split_atlas,
    flip_atlas,
)
from .debug_overlay import FACE_COLORS, draw_box_net, draw_layout

__all__ = [
    'Face',
    'Rect',
    'BoxNet',
    'compute_box_net',
    'FaceCopy',
    'SPLIT_COPIES',
    'FLIP_COPIES',
    'FLIP_SINGLE_COPIES',
    'copy_rect',
    'split_box',
    'flip_box',
    'split_atlas',
    'flip_atlas',
    'FACE_COLORS',
    'draw_box_net',
    'draw_layout',
]
