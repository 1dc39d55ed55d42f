import sys
import logging
from typing import List, Optional

from PyQt5.QtWidgets import (QApplication, QMainWindow, QGraphicsView, QGraphicsScene,
                            QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
                            QCheckBox, QGroupBox, QTextEdit, QSplitter)
from PyQt5.QtGui import (QPen, QBrush, QColor, QPainter, QFont, QLinearGradient,
                         QPolygonF, QPalette)
from PyQt5.QtCore import Qt, QPointF, QRectF

from geometry import Point, boundary_length, polygon_area
from hull import ChangeOutcome, ConvexHull

logger = logging.getLogger(__name__)


class HullGraphicsScene(QGraphicsScene):
    """Scene with a themed grid background"""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setBackgroundBrush(QColor(25, 25, 35))

        # Grid properties
        self.grid_visible = True
        self.grid_size = 40
        self.grid_color = QColor(45, 45, 55)
        self.grid_major_color = QColor(60, 60, 70)

        # Visual settings
        self.hull_brush = QBrush(QColor(50, 100, 240, 50))
        self.hull_pen = QPen(QColor(65, 130, 255), 2)
        self.hull_pen.setCosmetic(True)

        self.vertex_pen = QPen(QColor(65, 130, 255), 2)
        self.vertex_pen.setCosmetic(True)
        self.point_brush = QBrush(QColor(148, 163, 184))
        self.last_point_pen = QPen(QColor(40, 200, 90), 2)
        self.last_point_pen.setCosmetic(True)

    def setDarkMode(self, dark_mode: bool):
        """Update scene colors based on theme"""
        if dark_mode:
            self.setBackgroundBrush(QColor(25, 25, 35))
            self.grid_color = QColor(45, 45, 55)
            self.grid_major_color = QColor(60, 60, 70)
            self.hull_brush = QBrush(QColor(50, 100, 240, 50))
            self.point_brush = QBrush(QColor(148, 163, 184))
        else:
            self.setBackgroundBrush(QColor(240, 240, 245))
            self.grid_color = QColor(220, 220, 220)
            self.grid_major_color = QColor(200, 200, 200)
            self.hull_brush = QBrush(QColor(100, 150, 255, 50))
            self.point_brush = QBrush(QColor(70, 80, 100))

        self.hull_pen = QPen(QColor(65, 130, 255), 2)
        self.hull_pen.setCosmetic(True)

    def drawBackground(self, painter: QPainter, rect: QRectF):
        """Draw the grid over a subtle vertical gradient"""
        super().drawBackground(painter, rect)

        if not self.grid_visible:
            return

        gradient = QLinearGradient(0, 0, 0, rect.height())
        background_color = self.backgroundBrush().color()
        slightly_darker = QColor(
            max(0, background_color.red() - 5),
            max(0, background_color.green() - 5),
            max(0, background_color.blue() - 5)
        )
        gradient.setColorAt(0, background_color)
        gradient.setColorAt(1, slightly_darker)
        painter.fillRect(rect, gradient)

        left = int(rect.left()) - (int(rect.left()) % self.grid_size)
        top = int(rect.top()) - (int(rect.top()) % self.grid_size)

        painter.setPen(QPen(self.grid_color, 1))
        for x in range(left, int(rect.right()), self.grid_size):
            painter.drawLine(x, int(rect.top()), x, int(rect.bottom()))
        for y in range(top, int(rect.bottom()), self.grid_size):
            painter.drawLine(int(rect.left()), y, int(rect.right()), y)

        painter.setPen(QPen(self.grid_major_color, 1))
        for x in range(left, int(rect.right()), self.grid_size * 5):
            painter.drawLine(x, int(rect.top()), x, int(rect.bottom()))
        for y in range(top, int(rect.bottom()), self.grid_size * 5):
            painter.drawLine(int(rect.left()), y, int(rect.right()), y)


class HullExplorerApp(QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("Hull Explorer")
        self.resize(1200, 700)

        # Data structures
        self.points: List[Point] = []
        self.hull = ConvexHull()
        self.last_outcome: Optional[ChangeOutcome] = None
        self.cursor_point: Optional[Point] = None

        # Theme state
        self.dark_mode = True

        self._init_ui()
        self._connect_signals()
        self._apply_theme()

    def _init_ui(self):
        """Build the view on the left and the control panel on the right"""
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        main_layout = QHBoxLayout(self.central_widget)

        self.splitter = QSplitter(Qt.Horizontal)
        main_layout.addWidget(self.splitter)

        # Left side: Graphics view
        self.view_container = QWidget()
        view_layout = QVBoxLayout(self.view_container)
        view_layout.setContentsMargins(0, 0, 0, 0)

        self.scene = HullGraphicsScene()
        self.view = QGraphicsView(self.scene)
        self.view.setRenderHint(QPainter.Antialiasing)
        self.view.setDragMode(QGraphicsView.NoDrag)
        self.view.setViewportUpdateMode(QGraphicsView.FullViewportUpdate)
        self.view.setMouseTracking(True)
        self.view.viewport().setMouseTracking(True)

        view_layout.addWidget(self.view)
        self.splitter.addWidget(self.view_container)

        # Right side: Controls panel
        self.panel = QWidget()
        self.panel.setMinimumWidth(300)
        self.panel.setMaximumWidth(450)
        panel_layout = QVBoxLayout(self.panel)

        title_label = QLabel("Hull Explorer")
        title_label.setFont(QFont("Arial", 16, QFont.Bold))
        title_label.setAlignment(Qt.AlignCenter)
        panel_layout.addWidget(title_label)

        hint_label = QLabel("Click the canvas to add a point to the hull.")
        hint_label.setStyleSheet("color: gray;")
        hint_label.setWordWrap(True)
        panel_layout.addWidget(hint_label)

        # Action buttons
        buttons_layout = QHBoxLayout()
        self.demo_btn = QPushButton("Demo square")
        self.clear_all_btn = QPushButton("Clear All")
        buttons_layout.addWidget(self.demo_btn)
        buttons_layout.addWidget(self.clear_all_btn)
        panel_layout.addLayout(buttons_layout)

        # Options
        options_group = QGroupBox("Display")
        options_layout = QVBoxLayout(options_group)
        self.show_grid = QCheckBox("Show grid")
        self.show_grid.setChecked(True)
        options_layout.addWidget(self.show_grid)
        self.dark_mode_checkbox = QCheckBox("Dark mode")
        self.dark_mode_checkbox.setChecked(True)
        options_layout.addWidget(self.dark_mode_checkbox)
        panel_layout.addWidget(options_group)

        # Info panel
        info_group = QGroupBox("Information")
        info_layout = QVBoxLayout(info_group)
        self.info_text = QTextEdit()
        self.info_text.setReadOnly(True)
        self.info_text.setMinimumHeight(260)
        info_layout.addWidget(self.info_text)
        panel_layout.addWidget(info_group)

        # Status indicator
        self.outcome_status = QLabel("No points yet")
        self.outcome_status.setStyleSheet("font-weight: bold;")
        panel_layout.addWidget(self.outcome_status)

        self.splitter.addWidget(self.panel)
        self.splitter.setSizes([800, 400])

        self.scene.setSceneRect(0, 0, 800, 600)
        self._redraw()

    def _connect_signals(self):
        """Connect UI signals to slots"""
        self.demo_btn.clicked.connect(self._add_demo_square)
        self.clear_all_btn.clicked.connect(self._clear_all)
        self.show_grid.stateChanged.connect(self._toggle_grid)
        self.dark_mode_checkbox.stateChanged.connect(self._toggle_theme)

        self.view.mousePressEvent = self._handle_view_click
        self.view.mouseMoveEvent = self._handle_view_move

    def _toggle_grid(self, state):
        """Toggle grid visibility"""
        self.scene.grid_visible = (state == Qt.Checked)
        self.view.viewport().update()

    def _toggle_theme(self, state):
        """Toggle between light and dark themes"""
        self.dark_mode = (state == Qt.Checked)
        self._apply_theme()

    def _apply_theme(self):
        """Apply the current theme to all UI elements"""
        app = QApplication.instance()
        palette = app.palette()

        if self.dark_mode:
            palette.setColor(QPalette.Window, QColor(53, 53, 53))
            palette.setColor(QPalette.WindowText, Qt.white)
            palette.setColor(QPalette.Base, QColor(25, 25, 25))
            palette.setColor(QPalette.AlternateBase, QColor(53, 53, 53))
            palette.setColor(QPalette.Text, Qt.white)
            palette.setColor(QPalette.Button, QColor(53, 53, 53))
            palette.setColor(QPalette.ButtonText, Qt.white)
            palette.setColor(QPalette.Highlight, QColor(42, 130, 218))
            palette.setColor(QPalette.HighlightedText, Qt.black)
            self.view.setBackgroundBrush(QBrush(QColor(25, 25, 35)))
        else:
            palette.setColor(QPalette.Window, QColor(240, 240, 245))
            palette.setColor(QPalette.WindowText, QColor(0, 0, 0))
            palette.setColor(QPalette.Base, QColor(255, 255, 255))
            palette.setColor(QPalette.AlternateBase, QColor(233, 233, 233))
            palette.setColor(QPalette.Text, QColor(0, 0, 0))
            palette.setColor(QPalette.Button, QColor(240, 240, 240))
            palette.setColor(QPalette.ButtonText, QColor(0, 0, 0))
            palette.setColor(QPalette.Highlight, QColor(61, 174, 233))
            palette.setColor(QPalette.HighlightedText, QColor(255, 255, 255))
            self.view.setBackgroundBrush(QBrush(QColor(240, 240, 245)))

        app.setPalette(palette)
        self.scene.setDarkMode(self.dark_mode)
        self.view.viewport().update()
        self._redraw()

    def _handle_view_click(self, event):
        """Add the clicked scene position to the hull"""
        scene_pos = self.view.mapToScene(event.pos())
        self.add_point(Point(scene_pos.x(), scene_pos.y()))
        super(QGraphicsView, self.view).mousePressEvent(event)

    def _handle_view_move(self, event):
        """Track the cursor so the panel can report where it sits relative to the hull"""
        scene_pos = self.view.mapToScene(event.pos())
        self.cursor_point = Point(scene_pos.x(), scene_pos.y())
        self._refresh_info()
        super(QGraphicsView, self.view).mouseMoveEvent(event)

    def add_point(self, pt: Point) -> ChangeOutcome:
        """Feed one point to the hull and refresh the scene"""
        self.points.append(pt)
        outcome = self.hull.add_point(pt)
        self.last_outcome = outcome
        logger.info("Point %s: %s (%d hull vertices)", self._fmt(pt), outcome, len(self.hull))

        self._update_status()
        self._redraw()
        self._refresh_info()
        return outcome

    def _add_demo_square(self):
        """Add a square centred in the scene, one corner at a time"""
        rect = self.scene.sceneRect()
        side = min(rect.width(), rect.height()) / 2
        x0 = rect.center().x() - side / 2
        y0 = rect.center().y() - side / 2
        for dx, dy in ((0, 0), (1, 0), (1, 1), (0, 1), (0.5, 0.5)):
            self.add_point(Point(x0 + dx * side, y0 + dy * side))

    def _clear_all(self):
        """Start over with an empty hull"""
        self.points.clear()
        self.hull = ConvexHull()
        self.last_outcome = None
        logger.info("Hull cleared")
        self._update_status()
        self._redraw()
        self._refresh_info()

    def _update_status(self):
        if self.last_outcome is None:
            self.outcome_status.setText("No points yet")
            self.outcome_status.setStyleSheet("font-weight: bold;")
        elif self.last_outcome.changed:
            self.outcome_status.setText(f"Last point: {self.last_outcome}")
            self.outcome_status.setStyleSheet("color: green; font-weight: bold;")
        else:
            self.outcome_status.setText(f"Last point: {self.last_outcome}")
            self.outcome_status.setStyleSheet("color: orange; font-weight: bold;")

    def _redraw(self):
        """Redraw the entire scene"""
        self.scene.clear()
        vertices = self.hull.vertices

        if len(vertices) >= 3:
            hull_polygon = QPolygonF()
            for x, y in vertices:
                hull_polygon.append(QPointF(x, y))
            hull_item = self.scene.addPolygon(hull_polygon, self.scene.hull_pen, self.scene.hull_brush)
            hull_item.setZValue(10)
        elif len(vertices) == 2:
            p1, p2 = vertices
            self.scene.addLine(p1.x, p1.y, p2.x, p2.y, self.scene.hull_pen).setZValue(10)

        for x, y in self.points:
            point_item = self.scene.addEllipse(x - 4, y - 4, 8, 8, QPen(Qt.NoPen), self.scene.point_brush)
            point_item.setZValue(20)

        for x, y in vertices:
            vertex_item = self.scene.addEllipse(x - 6, y - 6, 12, 12, self.scene.vertex_pen, QBrush(Qt.NoBrush))
            vertex_item.setZValue(30)

        if self.points:
            x, y = self.points[-1]
            last_item = self.scene.addEllipse(x - 8, y - 8, 16, 16, self.scene.last_point_pen, QBrush(Qt.NoBrush))
            last_item.setZValue(40)

    def _refresh_info(self):
        """Update info panel with current state"""
        vertices = self.hull.vertices
        lines = [
            f"<b>Points added:</b> {len(self.points)}",
            f"<b>Hull vertices:</b> {len(vertices)}",
            f"<b>Perimeter:</b> {self.hull.perimeter:.3f}",
            f"<b>Area:</b> {self.hull.area:.3f}",
            f"<b>Edge sum check:</b> {boundary_length(vertices):.3f}",
            f"<b>Shoelace check:</b> {polygon_area(vertices):.3f}",
            f"<b>Last outcome:</b> {self.last_outcome if self.last_outcome else '—'}",
            f"<b>Cursor:</b> {self._fmt(self.cursor_point)} {self._location_str(self.cursor_point)}",
            "",
            "<b>Vertices:</b>"
        ]

        if vertices:
            lines.extend(f"{i}. {self._fmt(p)}" for i, p in enumerate(vertices, start=1))
        else:
            lines.append("• None")

        self.info_text.setHtml("<p>" + "<br>".join(lines) + "</p>")

    def keyPressEvent(self, event):
        """Delete / Backspace clears the canvas"""
        if event.key() in (Qt.Key_Delete, Qt.Key_Backspace):
            self._clear_all()
        else:
            super().keyPressEvent(event)

    def _location_str(self, p: Optional[Point]) -> str:
        if p is None:
            return ""
        return f"({self.hull.locate(p)})"

    @staticmethod
    def _fmt(pt: Optional[Point]) -> str:
        """Format point coordinates"""
        return f"({pt[0]:.1f}, {pt[1]:.1f})" if pt else "—"


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    app = QApplication(sys.argv)
    app.setStyle("Fusion")

    window = HullExplorerApp()
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
