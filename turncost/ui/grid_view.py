"""Grid view for search visualization."""

from typing import Dict

from PySide6.QtCore import Qt
from PySide6.QtGui import QPainter
from PySide6.QtWidgets import QGraphicsScene, QGraphicsView

from ..app.controller import SearchController
from ..domain.types import Position
from .tiles import GridTile


class GridView(QGraphicsView):
    """Graphics view showing the grid, search progress and optimal tiles."""

    def __init__(self, controller: SearchController):
        super().__init__()

        self.controller = controller
        self.scene = QGraphicsScene()
        self.setScene(self.scene)

        self.tiles: Dict[Position, GridTile] = {}
        self.tile_size = 20.0
        self._shown_grid = None

        self.setRenderHint(QPainter.Antialiasing)

        self.controller.grid_updated.connect(self.update_grid)
        self.update_grid()

    def update_grid(self):
        """Rebuild tiles when the grid changes, then refresh overlays."""
        grid = self.controller.grid
        if grid is None:
            return

        if grid is not self._shown_grid:
            self.scene.clear()
            self.tiles.clear()
            self.scene.setSceneRect(0, 0, grid.width * self.tile_size,
                                    grid.height * self.tile_size)
            for cell in grid.cells():
                tile = GridTile(self.tile_size, cell)
                self.scene.addItem(tile)
                self.tiles[cell.position] = tile
            self._shown_grid = grid
            self.fit_in_view()

        self._update_overlays()

    def _update_overlays(self):
        """Color explored, frontier, current and optimal tiles."""
        overlays: Dict[Position, str] = {}
        if self.controller.optimal:
            for position in self.controller.optimal:
                overlays[position] = "optimal"
        else:
            for position in self.controller.get_explored_positions():
                overlays[position] = "explored"
            for position in self.controller.get_frontier_positions():
                overlays[position] = "frontier"
            current = self.controller.get_current_position()
            if current is not None:
                overlays[current] = "current"

        arrows = {state.position: state.direction for state in self.controller.route}

        for position, tile in self.tiles.items():
            tile.set_overlay(overlays.get(position), arrows.get(position))

    def wheelEvent(self, event):
        """Handle mouse wheel for zooming."""
        zoom_factor = 1.15
        if event.angleDelta().y() > 0:
            self.scale(zoom_factor, zoom_factor)
        else:
            self.scale(1 / zoom_factor, 1 / zoom_factor)

    def fit_in_view(self):
        """Fit the entire grid in the view."""
        if self.scene.items():
            self.fitInView(self.scene.itemsBoundingRect(), Qt.KeepAspectRatio)
