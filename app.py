import logging
import random
import sys
from typing import Dict, List, Optional

from PyQt5.QtWidgets import (QApplication, QMainWindow, QGraphicsView, QGraphicsScene,
                            QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
                            QCheckBox, QSlider, QRadioButton, QButtonGroup,
                            QSplitter, QGroupBox, QTextEdit)
from PyQt5.QtGui import (QPen, QBrush, QColor, QPainter, QFont,
                         QLinearGradient, QPolygonF, QPalette)
from PyQt5.QtCore import Qt, QPointF, QRectF

from geometry import HullError, Point, locate_point, same_cycle
from hulls import ALGORITHMS

logger = logging.getLogger(__name__)

ALGORITHM_LABELS = {
    "quick_hull": "QuickHull",
    "gift_wrapping": "Gift wrapping",
    "monotone_chain": "Monotone chain",
    "graham_scan": "Graham scan",
}


def to_model(x: float, y: float) -> Point:
    # scene y grows downward, hull winding assumes y up
    return Point(x, -y)


def to_scene(p: Point) -> QPointF:
    return QPointF(p[0], -p[1])


class HullGraphicsScene(QGraphicsScene):
    """Scene with a grid background and the hull drawing colours"""

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

        self.point_brush = QBrush(QColor(200, 200, 210))
        self.vertex_pen = QPen(QColor(240, 170, 40), 2)
        self.vertex_pen.setCosmetic(True)

        self.probe_pen = QPen(QColor(40, 200, 90), 2)
        self.probe_pen.setCosmetic(True)

    def setDarkMode(self, dark_mode: bool):
        """Update scene colors based on theme"""
        if dark_mode:
            self.setBackgroundBrush(QColor(25, 25, 35))
            self.grid_color = QColor(45, 45, 55)
            self.grid_major_color = QColor(60, 60, 70)
            self.hull_brush = QBrush(QColor(50, 100, 240, 50))
            self.point_brush = QBrush(QColor(200, 200, 210))
        else:
            self.setBackgroundBrush(QColor(240, 240, 245))
            self.grid_color = QColor(220, 220, 220)
            self.grid_major_color = QColor(200, 200, 200)
            self.hull_brush = QBrush(QColor(100, 150, 255, 50))
            self.point_brush = QBrush(QColor(70, 80, 100))

        self.hull_pen = QPen(QColor(65, 130, 255), 2)
        self.hull_pen.setCosmetic(True)

    def drawBackground(self, painter: QPainter, rect: QRectF):
        """Draw the grid background"""
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

        # Minor grid lines
        painter.setPen(QPen(self.grid_color, 1))
        for x in range(left, int(rect.right()), self.grid_size):
            painter.drawLine(x, int(rect.top()), x, int(rect.bottom()))
        for y in range(top, int(rect.bottom()), self.grid_size):
            painter.drawLine(int(rect.left()), y, int(rect.right()), y)

        # Major grid lines
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
        self.hulls: Dict[str, List[Point]] = {}
        self.hull_error: Optional[str] = None
        self.probe: Optional[Point] = None

        # Settings
        self.algorithm = "monotone_chain"
        self.mode = "point"  # "point", "probe"
        self.scene_width = 800
        self.scene_height = 600
        self.margin = 40
        self.dark_mode = True
        self.rng = random.Random()

        self._init_ui()
        self._connect_signals()
        self._apply_theme()
        self._refresh_info()

    def _init_ui(self):
        """Initialize the UI layout"""
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

        # Algorithm selection
        algo_group = QGroupBox("Algorithm")
        algo_layout = QVBoxLayout(algo_group)
        self.algorithm_buttons = QButtonGroup(self)
        self.algorithm_radios: Dict[str, QRadioButton] = {}
        for name in ALGORITHMS:
            radio = QRadioButton(ALGORITHM_LABELS.get(name, name))
            radio.setChecked(name == self.algorithm)
            self.algorithm_buttons.addButton(radio)
            algo_layout.addWidget(radio)
            self.algorithm_radios[name] = radio
        panel_layout.addWidget(algo_group)

        # Click mode
        mode_group = QGroupBox("Click adds")
        mode_layout = QVBoxLayout(mode_group)
        self.mode_buttons = QButtonGroup(self)
        self.point_radio = QRadioButton("Point")
        self.point_radio.setChecked(True)
        self.probe_radio = QRadioButton("Probe (locate against hull)")
        self.mode_buttons.addButton(self.point_radio)
        self.mode_buttons.addButton(self.probe_radio)
        mode_layout.addWidget(self.point_radio)
        mode_layout.addWidget(self.probe_radio)
        panel_layout.addWidget(mode_group)

        # Random point set
        random_group = QGroupBox("Random points")
        random_layout = QVBoxLayout(random_group)
        count_layout = QHBoxLayout()
        count_layout.addWidget(QLabel("Count:"))
        self.count_slider = QSlider(Qt.Horizontal)
        self.count_slider.setMinimum(3)
        self.count_slider.setMaximum(500)
        self.count_slider.setValue(100)
        count_layout.addWidget(self.count_slider)
        self.count_value = QLabel("100")
        count_layout.addWidget(self.count_value)
        random_layout.addLayout(count_layout)

        buttons_layout = QHBoxLayout()
        self.random_btn = QPushButton("Generate")
        self.clear_btn = QPushButton("Clear All")
        buttons_layout.addWidget(self.random_btn)
        buttons_layout.addWidget(self.clear_btn)
        random_layout.addLayout(buttons_layout)

        self.show_grid = QCheckBox("Show grid")
        self.show_grid.setChecked(True)
        random_layout.addWidget(self.show_grid)
        panel_layout.addWidget(random_group)

        # Info panel
        info_group = QGroupBox("Information")
        info_layout = QVBoxLayout(info_group)
        self.info_text = QTextEdit()
        self.info_text.setReadOnly(True)
        self.info_text.setMinimumHeight(200)
        info_layout.addWidget(self.info_text)
        panel_layout.addWidget(info_group)

        self.agreement_status = QLabel("No hull")
        panel_layout.addWidget(self.agreement_status)

        theme_layout = QHBoxLayout()
        self.dark_mode_checkbox = QCheckBox("Dark mode")
        self.dark_mode_checkbox.setChecked(True)
        theme_layout.addWidget(self.dark_mode_checkbox)
        panel_layout.addLayout(theme_layout)

        self.splitter.addWidget(self.panel)
        self.splitter.setSizes([800, 400])

        self.scene.setSceneRect(0, 0, self.scene_width, self.scene_height)
        self._redraw()

    def _connect_signals(self):
        """Connect UI signals to slots"""
        for name, radio in self.algorithm_radios.items():
            radio.toggled.connect(lambda checked, n=name: checked and self._set_algorithm(n))

        self.point_radio.toggled.connect(lambda checked: checked and self._set_mode("point"))
        self.probe_radio.toggled.connect(lambda checked: checked and self._set_mode("probe"))

        self.count_slider.valueChanged.connect(lambda v: self.count_value.setText(str(v)))
        self.random_btn.clicked.connect(self._generate_points)
        self.clear_btn.clicked.connect(self._clear_all)
        self.show_grid.stateChanged.connect(self._toggle_grid)

        self.view.mousePressEvent = self._handle_view_click

        self.dark_mode_checkbox.stateChanged.connect(self._toggle_theme)

    def _set_algorithm(self, name: str):
        self.algorithm = name
        self._redraw()
        self._refresh_info()

    def _set_mode(self, mode):
        self.mode = mode

    def _toggle_grid(self, state):
        self.scene.grid_visible = (state == Qt.Checked)
        self.view.viewport().update()

    def _toggle_theme(self, state):
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
        """Add a point or move the probe"""
        scene_pos = self.view.mapToScene(event.pos())
        pt = to_model(scene_pos.x(), scene_pos.y())

        if self.mode == "point":
            self.points.append(pt)
            self._recompute_hulls()
        else:
            self.probe = pt

        self._redraw()
        self._refresh_info()
        super(QGraphicsView, self.view).mousePressEvent(event)

    def _generate_points(self):
        """Replace the point set with random points inside the scene"""
        count = self.count_slider.value()
        self.points = [
            to_model(self.rng.uniform(self.margin, self.scene_width - self.margin),
                     self.rng.uniform(self.margin, self.scene_height - self.margin))
            for _ in range(count)
        ]
        self.probe = None
        self._recompute_hulls()
        self._redraw()
        self._refresh_info()

    def _clear_all(self):
        self.points.clear()
        self.hulls.clear()
        self.hull_error = None
        self.probe = None
        self._redraw()
        self._refresh_info()

    def _recompute_hulls(self):
        """Run every algorithm on the current point set"""
        self.hulls = {}
        self.hull_error = None
        try:
            for name, func in ALGORITHMS.items():
                self.hulls[name] = func(self.points)
        except HullError as exc:
            self.hulls = {}
            self.hull_error = str(exc)
        logger.debug("recomputed hulls for %d points: %s", len(self.points),
                     self.hull_error or {n: len(h) for n, h in self.hulls.items()})

    def _current_hull(self) -> List[Point]:
        return self.hulls.get(self.algorithm, [])

    def _redraw(self):
        """Redraw the entire scene"""
        self.scene.clear()
        hull = self._current_hull()

        if hull:
            hull_item = self.scene.addPolygon(QPolygonF([to_scene(p) for p in hull]),
                                              self.scene.hull_pen, self.scene.hull_brush)
            hull_item.setZValue(10)

        for p in self.points:
            c = to_scene(p)
            point_item = self.scene.addEllipse(c.x() - 3, c.y() - 3, 6, 6, QPen(Qt.NoPen), self.scene.point_brush)
            point_item.setZValue(20)

        # Hull vertices, the first one larger to show where the walk starts
        for i, p in enumerate(hull):
            c = to_scene(p)
            r = 7 if i == 0 else 5
            vertex_item = self.scene.addEllipse(c.x() - r, c.y() - r, 2 * r, 2 * r,
                                                self.scene.vertex_pen, QBrush(Qt.NoBrush))
            vertex_item.setZValue(30)

        if self.probe is not None:
            c = to_scene(self.probe)
            probe_item = self.scene.addEllipse(c.x() - 6, c.y() - 6, 12, 12, self.scene.probe_pen, QBrush(Qt.NoBrush))
            probe_item.setZValue(40)

    def _refresh_info(self):
        """Update info panel with current state"""
        lines = [
            f"<b>Points:</b> {len(self.points)}",
            f"<b>Algorithm:</b> {ALGORITHM_LABELS.get(self.algorithm, self.algorithm)}",
            f"<b>Probe:</b> {self._fmt(self.probe)} {self._probe_str()}",
            "",
            "<b>Hull vertices:</b>",
        ]

        if self.hull_error:
            lines.append(f"• {self.hull_error}")
        elif self.hulls:
            lines.extend(f"• {ALGORITHM_LABELS.get(n, n)}: {len(h)}" for n, h in self.hulls.items())
        else:
            lines.append("• None")

        self.info_text.setHtml("<p>" + "<br>".join(lines) + "</p>")

        if not self.hulls:
            self.agreement_status.setText("No hull")
            self.agreement_status.setStyleSheet("color: gray;")
        elif self._hulls_agree():
            self.agreement_status.setText("All algorithms agree")
            self.agreement_status.setStyleSheet("color: green; font-weight: bold;")
        else:
            self.agreement_status.setText("Algorithms disagree")
            self.agreement_status.setStyleSheet("color: red; font-weight: bold;")

    def _hulls_agree(self) -> bool:
        hulls = list(self.hulls.values())
        return all(same_cycle(hulls[0], h) for h in hulls[1:])

    def _probe_str(self) -> str:
        if self.probe is None or not self._current_hull():
            return ""
        return f"({locate_point(self._current_hull(), self.probe)})"

    @staticmethod
    def _fmt(pt: Optional[Point]) -> str:
        """Format point coordinates in scene orientation"""
        return f"({pt[0]:.1f}, {-pt[1]:.1f})" if pt else "—"


def main():
    app = QApplication(sys.argv)
    app.setStyle("Fusion")

    window = HullExplorerApp()
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
