# backend/pagecraft/fields/__init__.py
from .geometry import (
    DRAG_BOUNDS,
    MANUAL_BOUNDS,
    RESIZE_BOUNDS,
    Delta,
    DragGesture,
    PixelRect,
    Point,
    Rect,
    RectBounds,
    ResizeGesture,
    Size,
    clamp_rect,
    drag_rect,
    pixel_delta_to_percent,
    resize_rect,
    stacking_order,
    to_pixels,
)
from .layout import Assignee, FieldLayout, FieldType, PlacedField, json_data_uri, new_field

__all__ = [
    "DRAG_BOUNDS", "MANUAL_BOUNDS", "RESIZE_BOUNDS",
    "Delta", "DragGesture", "PixelRect", "Point", "Rect", "RectBounds", "ResizeGesture", "Size",
    "clamp_rect", "drag_rect", "pixel_delta_to_percent", "resize_rect", "stacking_order", "to_pixels",
    "Assignee", "FieldLayout", "FieldType", "PlacedField", "json_data_uri", "new_field"
]
