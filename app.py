import random
import sys
import time
from typing import List, Optional

from PyQt5.QtWidgets import (QApplication, QMainWindow, QGraphicsView, QGraphicsScene,
                            QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
                            QCheckBox, QSpinBox, QRadioButton, QButtonGroup,
                            QSplitter, QGroupBox, QTextEdit)
from PyQt5.QtGui import (QPen, QBrush, QColor, QPainter, QFont,
                         QLinearGradient, QPolygonF, QPalette)
from PyQt5.QtCore import Qt, QPointF, QRectF

from geometry import Point, locate_point, perimeter, signed_area
from hull import HullAlgorithm, compute_hull

SCENE_WIDTH = 800
SCENE_HEIGHT = 600


class HullGraphicsScene(QGraphicsScene):
    """Scene with a grid background and theme-aware hull colors"""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setBackgroundBrush(QColor(25, 25, 35))

        self.grid_visible = True
        self.grid_size = 40
        self.grid_color = QColor(45, 45, 55)
        self.grid_major_color = QColor(60, 60, 70)

        self.hull_brush = QBrush(QColor(50, 100, 240, 50))
        self.hull_pen = QPen(QColor(65, 130, 255), 2)
        self.hull_pen.setCosmetic(True)

        self.point_brush = QBrush(QColor(148, 163, 184))
        self.vertex_pen = QPen(QColor(231, 76, 60), 2)
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
        self.setWindowTitle("Convex Hull Explorer")
        self.resize(1200, 700)

        self.points: List[Point] = []
        self.hull: List[Point] = []
        self.probe: Optional[Point] = None
        self.algorithm = HullAlgorithm.GRAHAM_SCAN
        self.mode = "point"  # "point" or "probe"
        self.last_compute_s: Optional[float] = None

        self.dark_mode = True

        self._init_ui()
        self._connect_signals()
        self._apply_theme()
        self._refresh_info()

    def _init_ui(self):
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        main_layout = QHBoxLayout(self.central_widget)

        self.splitter = QSplitter(Qt.Horizontal)
        main_layout.addWidget(self.splitter)

        self.view_container = QWidget()
        view_layout = QVBoxLayout(self.view_container)
        view_layout.setContentsMargins(0, 0, 0, 0)

        self.scene = HullGraphicsScene()
        self.view = QGraphicsView(self.scene)
        self.view.setRenderHint(QPainter.Antialiasing)
        self.view.setDragMode(QGraphicsView.NoDrag)
        self.view.setViewportUpdateMode(QGraphicsView.FullViewportUpdate)
        # y grows upwards so counter-clockwise hulls look counter-clockwise
        self.view.scale(1, -1)

        view_layout.addWidget(self.view)
        self.splitter.addWidget(self.view_container)

        self.panel = QWidget()
        self.panel.setMinimumWidth(300)
        self.panel.setMaximumWidth(450)
        panel_layout = QVBoxLayout(self.panel)

        title_label = QLabel("Convex Hull Explorer")
        title_label.setFont(QFont("Arial", 16, QFont.Bold))
        title_label.setAlignment(Qt.AlignCenter)
        panel_layout.addWidget(title_label)

        algorithm_group = QGroupBox("Algorithm")
        algorithm_layout = QVBoxLayout(algorithm_group)
        self.algorithm_buttons = QButtonGroup(self)
        self.algorithm_radios = {}
        for algorithm in HullAlgorithm:
            radio = QRadioButton(algorithm.label)
            radio.setChecked(algorithm is self.algorithm)
            self.algorithm_buttons.addButton(radio)
            self.algorithm_radios[algorithm] = radio
            algorithm_layout.addWidget(radio)
        panel_layout.addWidget(algorithm_group)

        mode_group = QGroupBox("Click mode")
        mode_layout = QVBoxLayout(mode_group)
        self.mode_buttons = QButtonGroup(self)
        self.point_radio = QRadioButton("Add point")
        self.point_radio.setChecked(True)
        self.probe_radio = QRadioButton("Probe inside/outside")
        self.mode_buttons.addButton(self.point_radio)
        self.mode_buttons.addButton(self.probe_radio)
        mode_layout.addWidget(self.point_radio)
        mode_layout.addWidget(self.probe_radio)
        panel_layout.addWidget(mode_group)

        random_layout = QHBoxLayout()
        random_layout.addWidget(QLabel("Count:"))
        self.random_count = QSpinBox()
        self.random_count.setRange(1, 500)
        self.random_count.setValue(10)
        random_layout.addWidget(self.random_count)
        self.random_btn = QPushButton("Random Points")
        random_layout.addWidget(self.random_btn)
        panel_layout.addLayout(random_layout)

        buttons_layout = QHBoxLayout()
        self.clear_probe_btn = QPushButton("Clear Probe")
        self.clear_all_btn = QPushButton("Clear All")
        buttons_layout.addWidget(self.clear_probe_btn)
        buttons_layout.addWidget(self.clear_all_btn)
        panel_layout.addLayout(buttons_layout)

        self.show_grid = QCheckBox("Show grid")
        self.show_grid.setChecked(True)
        panel_layout.addWidget(self.show_grid)

        hotkeys_label = QLabel("Hotkeys: 1-4=Algorithm, N=Random, C=Clear")
        hotkeys_label.setStyleSheet("color: gray;")
        panel_layout.addWidget(hotkeys_label)

        info_group = QGroupBox("Information")
        info_layout = QVBoxLayout(info_group)
        self.info_text = QTextEdit()
        self.info_text.setReadOnly(True)
        self.info_text.setMinimumHeight(200)
        info_layout.addWidget(self.info_text)
        panel_layout.addWidget(info_group)

        self.status_layout = QHBoxLayout()
        self.hull_status = QLabel("No hull")
        self.hull_status.setStyleSheet("font-weight: bold;")
        self.status_layout.addWidget(self.hull_status)
        self.probe_status = QLabel("No probe")
        self.status_layout.addWidget(self.probe_status)
        panel_layout.addLayout(self.status_layout)

        theme_layout = QHBoxLayout()
        self.dark_mode_checkbox = QCheckBox("Dark mode")
        self.dark_mode_checkbox.setChecked(True)
        theme_layout.addWidget(self.dark_mode_checkbox)
        panel_layout.addLayout(theme_layout)

        self.splitter.addWidget(self.panel)
        self.splitter.setSizes([800, 400])

        self.scene.setSceneRect(0, 0, SCENE_WIDTH, SCENE_HEIGHT)
        self._redraw()

    def _connect_signals(self):
        for algorithm, radio in self.algorithm_radios.items():
            radio.toggled.connect(lambda checked, a=algorithm: checked and self._set_algorithm(a))

        self.point_radio.toggled.connect(lambda: self._set_mode("point"))
        self.probe_radio.toggled.connect(lambda: self._set_mode("probe"))

        self.random_btn.clicked.connect(self._add_random_points)
        self.clear_probe_btn.clicked.connect(self._clear_probe)
        self.clear_all_btn.clicked.connect(self._clear_all)

        self.show_grid.stateChanged.connect(self._toggle_grid)
        self.dark_mode_checkbox.stateChanged.connect(self._toggle_theme)

        self.view.mousePressEvent = self._handle_view_click

    def _set_algorithm(self, algorithm: HullAlgorithm):
        self.algorithm = algorithm
        self._recompute_hull()

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

        app.setPalette(palette)
        self.scene.setDarkMode(self.dark_mode)
        self.view.viewport().update()
        self._redraw()

    def _handle_view_click(self, event):
        scene_pos = self.view.mapToScene(event.pos())
        pt = Point(int(round(scene_pos.x())), int(round(scene_pos.y())))

        if self.mode == "point":
            self.points.append(pt)
            self._recompute_hull()
        else:
            self.probe = pt
            self._redraw()
            self._refresh_info()

        super(QGraphicsView, self.view).mousePressEvent(event)

    def _add_random_points(self):
        margin = self.scene.grid_size
        for _ in range(self.random_count.value()):
            self.points.append(Point(random.randint(margin, SCENE_WIDTH - margin),
                                     random.randint(margin, SCENE_HEIGHT - margin)))
        self._recompute_hull()

    def _recompute_hull(self):
        start = time.perf_counter()
        self.hull = compute_hull(self.points, self.algorithm)
        self.last_compute_s = time.perf_counter() - start
        self._redraw()
        self._refresh_info()

    def _redraw(self):
        self.scene.clear()

        if len(self.hull) >= 3:
            hull_polygon = QPolygonF([QPointF(x, y) for x, y in self.hull])
            hull_item = self.scene.addPolygon(hull_polygon, self.scene.hull_pen, self.scene.hull_brush)
            hull_item.setZValue(10)
        elif len(self.hull) == 2:
            p1, p2 = self.hull
            self.scene.addLine(p1[0], p1[1], p2[0], p2[1], self.scene.hull_pen)

        for x, y in self.points:
            point_item = self.scene.addEllipse(x - 4, y - 4, 8, 8, QPen(Qt.NoPen), self.scene.point_brush)
            point_item.setZValue(20)

        for x, y in self.hull:
            vertex_item = self.scene.addEllipse(x - 7, y - 7, 14, 14, self.scene.vertex_pen, QBrush(Qt.NoBrush))
            vertex_item.setZValue(30)

        if self.probe is not None:
            px, py = self.probe
            probe_item = self.scene.addEllipse(px - 5, py - 5, 10, 10, self.scene.probe_pen, QBrush(Qt.NoBrush))
            probe_item.setZValue(40)

    def _refresh_info(self):
        compute = f"{self.last_compute_s * 1000:.3f} ms" if self.last_compute_s is not None else "—"
        lines = [
            f"<b>Algorithm:</b> {self.algorithm.label}",
            f"<b>Points:</b> {len(self.points)}",
            f"<b>Hull vertices:</b> {len(self.hull)}",
            f"<b>Hull area:</b> {signed_area(self.hull):.1f}",
            f"<b>Hull perimeter:</b> {perimeter(self.hull):.1f}",
            f"<b>Compute time:</b> {compute}",
            f"<b>Probe:</b> {self._fmt(self.probe)} {self._probe_str()}",
            "",
            "<b>Hull (counter-clockwise):</b>",
        ]
        if self.hull:
            lines.extend(f"• {self._fmt(p)}" for p in self.hull)
        else:
            lines.append("• None")
        self.info_text.setHtml("<p>" + "<br>".join(lines) + "</p>")

        if len(self.points) < 3:
            self.hull_status.setText("Fewer than 3 points")
        else:
            self.hull_status.setText(f"{len(self.hull)} of {len(self.points)} points on hull")
        self.probe_status.setText(f"Probe: {self._probe_str()}")

    def _probe_str(self) -> str:
        if self.probe is None:
            return "—"
        state = locate_point(self.hull, self.probe)
        return state if state is not None else "—"

    def _clear_probe(self):
        self.probe = None
        self._redraw()
        self._refresh_info()

    def _clear_all(self):
        self.points.clear()
        self.hull = []
        self.probe = None
        self.last_compute_s = None
        self._redraw()
        self._refresh_info()

    def keyPressEvent(self, event):
        key = event.key()
        shortcuts = dict(zip((Qt.Key_1, Qt.Key_2, Qt.Key_3, Qt.Key_4), HullAlgorithm))
        if key in shortcuts:
            self.algorithm_radios[shortcuts[key]].setChecked(True)
        elif key == Qt.Key_N:
            self._add_random_points()
        elif key == Qt.Key_C:
            self._clear_all()
        else:
            super().keyPressEvent(event)

    @staticmethod
    def _fmt(pt: Optional[Point]) -> str:
        return f"({pt[0]}, {pt[1]})" if pt else "—"


def main():
    app = QApplication(sys.argv)
    app.setStyle("Fusion")

    window = HullExplorerApp()
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
