# tests/editing/test_viewer.py
from pagecraft.editing import DocumentView


def test_page_navigation_is_clamped():
    view = DocumentView(total_pages=3)

    assert view.previous_page() == 1
    assert view.next_page() == 2
    assert view.go_to(10) == 3
    assert view.next_page() == 3
    assert view.go_to(0) == 1


def test_total_pages_change_keeps_current_page_valid():
    view = DocumentView(total_pages=5, current_page=5)

    view.set_total_pages(2)
    assert view.current_page == 2

    view.set_total_pages(0)
    assert view.total_pages == 1
    assert view.current_page == 1


def test_zoom_limits():
    view = DocumentView()
    assert view.zoom_percent == 125

    for _ in range(20):
        view.zoom_in()
    assert view.zoom == 3.0

    for _ in range(20):
        view.zoom_out()
    assert view.zoom == 0.5
    assert view.zoom_percent == 50
