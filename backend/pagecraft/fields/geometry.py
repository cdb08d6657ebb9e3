# backend/pagecraft/fields/geometry.py
"""
Percentage-based layout math for fields placed over a document surface.

A field's rectangle is stored in percent of its container so it survives
zoom changes; pointer gestures arrive in pixels and are converted back.
All clamping goes through `clamp_rect`.
"""
from dataclasses import dataclass, replace
from typing import Optional

# US Letter at 72 DPI, used until the page has been measured
DEFAULT_SURFACE_WIDTH = 612
DEFAULT_SURFACE_HEIGHT = 792

# Render priority of a field overlay
Z_DRAGGING = 1000
Z_SELECTED = 100
Z_DEFAULT = 10


@dataclass(frozen=True)
class Rect:
    """Field rectangle in percent of the container"""
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class PixelRect:
    left: float
    top: float
    width: float
    height: float


@dataclass(frozen=True)
class Size:
    """Container size in pixels"""
    width: float
    height: float

    @property
    def is_measured(self) -> bool:
        return self.width > 0 and self.height > 0


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Delta:
    dx: float
    dy: float


@dataclass(frozen=True)
class RectBounds:
    """Inclusive limits per component; None leaves that side open"""
    min_x: Optional[float] = None
    max_x: Optional[float] = None
    min_y: Optional[float] = None
    max_y: Optional[float] = None
    min_width: Optional[float] = None
    max_width: Optional[float] = None
    min_height: Optional[float] = None
    max_height: Optional[float] = None


# Origin stays on the surface; the right/bottom edges may still overflow
DRAG_BOUNDS = RectBounds(min_x=0, max_x=95, min_y=0, max_y=95)
RESIZE_BOUNDS = RectBounds(min_width=5, max_width=100, min_height=5, max_height=100)
MANUAL_BOUNDS = RectBounds(
    min_x=0, max_x=95, min_y=0, max_y=95,
    min_width=1, max_width=100, min_height=1, max_height=100,
)


def _clamp(value: float, low: Optional[float], high: Optional[float]) -> float:
    if low is not None:
        value = max(low, value)
    if high is not None:
        value = min(high, value)
    return value


def clamp_rect(rect: Rect, bounds: RectBounds) -> Rect:
    return Rect(
        x=_clamp(rect.x, bounds.min_x, bounds.max_x),
        y=_clamp(rect.y, bounds.min_y, bounds.max_y),
        width=_clamp(rect.width, bounds.min_width, bounds.max_width),
        height=_clamp(rect.height, bounds.min_height, bounds.max_height),
    )


def to_pixels(rect: Rect, container: Size) -> PixelRect:
    """Percent rect to pixels; an unmeasured container falls back to the default surface"""
    if not container.is_measured:
        container = Size(DEFAULT_SURFACE_WIDTH, DEFAULT_SURFACE_HEIGHT)
    return PixelRect(
        left=rect.x / 100 * container.width,
        top=rect.y / 100 * container.height,
        width=rect.width / 100 * container.width,
        height=rect.height / 100 * container.height,
    )


def pixel_delta_to_percent(delta: Delta, container: Size) -> Delta:
    if not container.is_measured:
        raise ValueError(f"Container has no size: {container.width}x{container.height}")
    return Delta(
        dx=delta.dx / container.width * 100,
        dy=delta.dy / container.height * 100,
    )


def drag_rect(rect: Rect, delta: Delta, container: Size) -> Rect:
    """Move by a pixel delta; size is untouched"""
    pct = pixel_delta_to_percent(delta, container)
    moved = replace(rect, x=rect.x + pct.dx, y=rect.y + pct.dy)
    return clamp_rect(moved, DRAG_BOUNDS)


def resize_rect(rect: Rect, delta: Delta, container: Size) -> Rect:
    """Grow or shrink by a pixel delta from the bottom-right corner; origin is untouched"""
    pct = pixel_delta_to_percent(delta, container)
    resized = replace(rect, width=rect.width + pct.dx, height=rect.height + pct.dy)
    return clamp_rect(resized, RESIZE_BOUNDS)


def stacking_order(dragging: bool, selected: bool) -> int:
    if dragging:
        return Z_DRAGGING
    if selected:
        return Z_SELECTED
    return Z_DEFAULT


class _Gesture:
    """
    Pointer gesture anchored at its start position.

    Every `move` is computed from the rect and pointer captured at start, so
    the result does not drift with the number of move events.
    """

    def __init__(self, rect: Rect, pointer: Point):
        self.origin_rect = rect
        self.origin_pointer = pointer
        self.current = rect
        self.active = True

    def _apply(self, rect: Rect, delta: Delta, container: Size) -> Rect:
        raise NotImplementedError

    def move(self, pointer: Point, container: Size) -> Rect:
        if not self.active:
            raise RuntimeError("Gesture already ended")
        delta = Delta(pointer.x - self.origin_pointer.x, pointer.y - self.origin_pointer.y)
        self.current = self._apply(self.origin_rect, delta, container)
        return self.current

    def end(self) -> Rect:
        self.active = False
        return self.current


class DragGesture(_Gesture):
    def _apply(self, rect: Rect, delta: Delta, container: Size) -> Rect:
        return drag_rect(rect, delta, container)


class ResizeGesture(_Gesture):
    def _apply(self, rect: Rect, delta: Delta, container: Size) -> Rect:
        return resize_rect(rect, delta, container)
