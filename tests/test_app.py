"""
Headless smoke tests for the Hull Explorer window.
"""

import pytest

pytest.importorskip("PyQt5.QtWidgets")

from PyQt5.QtWidgets import QApplication

from app import HullExplorerApp
from geometry import Point
from hull import ChangeOutcome


@pytest.fixture(scope="module")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def window(qapp):
    win = HullExplorerApp()
    yield win
    win.close()


class TestHullExplorer:

    def test_starts_empty(self, window):
        assert window.hull.vertices == ()
        assert window.points == []
        assert window.outcome_status.text() == "No points yet"

    def test_add_point_feeds_the_hull(self, window):
        outcomes = [window.add_point(Point(x, y)) for x, y in [(100, 100), (300, 100), (300, 300)]]
        assert outcomes == [ChangeOutcome.GREW] * 3
        assert len(window.hull) == 3
        assert window.hull.area == pytest.approx(20000.0)
        assert "grew" in window.outcome_status.text()

    def test_interior_click_is_reported(self, window):
        for x, y in [(100, 100), (300, 100), (300, 300), (100, 300)]:
            window.add_point(Point(x, y))
        assert window.add_point(Point(200, 200)) is ChangeOutcome.UNCHANGED_INTERIOR
        assert len(window.points) == 5
        assert len(window.hull) == 4
        assert "unchanged-interior" in window.outcome_status.text()

    def test_demo_square(self, window):
        window._add_demo_square()
        assert len(window.hull) == 4
        assert window.last_outcome is ChangeOutcome.UNCHANGED_INTERIOR
        assert "Hull vertices: 4" in window.info_text.toPlainText()

    def test_clear_all(self, window):
        window._add_demo_square()
        window._clear_all()
        assert window.points == []
        assert window.hull.vertices == ()
        assert window.last_outcome is None

    def test_theme_toggle_keeps_hull(self, window):
        window._add_demo_square()
        window.dark_mode_checkbox.setChecked(False)
        assert window.dark_mode is False
        assert len(window.hull) == 4
