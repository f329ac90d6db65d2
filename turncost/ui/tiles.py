"""Grid tile graphics items for search visualization."""

from typing import Optional

from PySide6.QtCore import QRectF, Qt
from PySide6.QtGui import QBrush, QColor, QFont, QPainter, QPen
from PySide6.QtWidgets import QGraphicsRectItem

from ..domain.types import Cell, CellKind, Direction


class GridTile(QGraphicsRectItem):
    """Graphics item representing a single grid tile."""

    # Colors for cell kinds and search overlays
    COLORS = {
        "empty": QColor(240, 240, 240),      # Light gray
        "wall": QColor(64, 64, 64),          # Dark gray
        "start": QColor(0, 200, 0),          # Green
        "end": QColor(255, 215, 0),          # Gold
        "frontier": QColor(173, 216, 230),   # Light blue
        "explored": QColor(255, 182, 193),   # Light pink
        "current": QColor(255, 0, 0),        # Red
        "optimal": QColor(255, 255, 0),      # Yellow
    }

    KIND_STATES = {
        CellKind.WALL: "wall",
        CellKind.EMPTY: "empty",
        CellKind.START: "start",
        CellKind.END: "end",
    }

    def __init__(self, size: float, cell: Cell):
        super().__init__(0, 0, size, size)
        self.size = size
        self.cell = cell
        self.overlay: Optional[str] = None
        self.arrow: Optional[Direction] = None

        self.setPos(cell.position.x * size, cell.position.y * size)
        self.update_appearance()

    def set_overlay(self, overlay: Optional[str], arrow: Optional[Direction] = None):
        """Set the search overlay ("frontier", "explored", "current", "optimal" or None)."""
        self.overlay = overlay
        self.arrow = arrow
        self.update_appearance()

    def update_appearance(self):
        """Update the tile appearance from cell kind and overlay."""
        state = self.KIND_STATES[self.cell.kind]
        if self.overlay and self.cell.kind == CellKind.EMPTY:
            state = self.overlay
        self.setBrush(QBrush(self.COLORS[state]))

        if self.cell.is_wall:
            self.setPen(QPen(Qt.black, 1))
        else:
            self.setPen(QPen(Qt.gray, 0.5))
        self.update()

    def paint(self, painter: QPainter, option, widget=None):
        """Paint the tile and its route arrow if any."""
        super().paint(painter, option, widget)

        if self.arrow is not None and self.size > 12:
            font = QFont("Arial", max(8, int(self.size / 2)))
            painter.setFont(font)
            painter.setPen(Qt.black)
            painter.drawText(QRectF(self.rect()), Qt.AlignCenter, self.arrow.arrow)
