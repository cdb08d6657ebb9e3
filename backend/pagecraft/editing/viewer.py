# backend/pagecraft/editing/viewer.py
from dataclasses import dataclass

ZOOM_STEP = 0.25
MIN_ZOOM = 0.5
MAX_ZOOM = 3.0
DEFAULT_ZOOM = 1.25


@dataclass
class DocumentView:
    """Page navigation and zoom of the document editor"""
    total_pages: int = 1
    current_page: int = 1
    zoom: float = DEFAULT_ZOOM

    def __post_init__(self):
        self.total_pages = max(1, self.total_pages)
        self.current_page = self._clamp_page(self.current_page)

    def _clamp_page(self, page: int) -> int:
        return max(1, min(page, self.total_pages))

    def go_to(self, page: int) -> int:
        self.current_page = self._clamp_page(page)
        return self.current_page

    def next_page(self) -> int:
        return self.go_to(self.current_page + 1)

    def previous_page(self) -> int:
        return self.go_to(self.current_page - 1)

    def set_total_pages(self, total_pages: int) -> None:
        """Track the document after pages are added or removed"""
        self.total_pages = max(1, total_pages)
        self.current_page = self._clamp_page(self.current_page)

    def zoom_in(self) -> float:
        self.zoom = min(self.zoom + ZOOM_STEP, MAX_ZOOM)
        return self.zoom

    def zoom_out(self) -> float:
        self.zoom = max(self.zoom - ZOOM_STEP, MIN_ZOOM)
        return self.zoom

    @property
    def zoom_percent(self) -> int:
        return round(self.zoom * 100)
