"""Main window for the turn-cost search visualizer."""

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor, QKeySequence, QPalette, QShortcut
from PySide6.QtWidgets import (
    QComboBox, QDoubleSpinBox, QFileDialog, QFrame, QGroupBox, QHBoxLayout,
    QLabel, QMainWindow, QPushButton, QSlider, QSpinBox, QStatusBar,
    QVBoxLayout, QWidget
)

from ..app.controller import SearchController
from ..app.fsm import SearchPhase
from ..domain.types import Direction
from .grid_view import GridView
from .tiles import GridTile


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self, controller: SearchController):
        super().__init__()
        self.controller = controller

        self.setWindowTitle("Turn-Cost Pathfinding Visualizer")
        self.setMinimumSize(1000, 700)

        self._create_ui()
        self._setup_connections()
        self._setup_shortcuts()

        self._update_button_states()
        self._update_statistics_display()

    def _create_ui(self):
        """Create the user interface."""
        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        main_layout = QVBoxLayout(central_widget)

        main_layout.addLayout(self._create_controls())

        content_layout = QHBoxLayout()
        self.grid_view = GridView(self.controller)
        content_layout.addWidget(self.grid_view, 3)
        content_layout.addWidget(self._create_statistics_panel(), 1)
        main_layout.addLayout(content_layout, 1)

        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)
        self.status_bar.showMessage("Ready | Space to step, Enter to run, R to reset, Ctrl+O to load, Q to quit")

    def _create_controls(self) -> QHBoxLayout:
        """Create the control panel."""
        layout = QHBoxLayout()

        search_group = QGroupBox("Search")
        search_layout = QHBoxLayout(search_group)
        self.step_btn = QPushButton("Step")
        self.run_btn = QPushButton("Run")
        self.pause_btn = QPushButton("Pause")
        self.reset_btn = QPushButton("Reset")
        for btn in [self.step_btn, self.run_btn, self.pause_btn, self.reset_btn]:
            search_layout.addWidget(btn)

        search_layout.addWidget(QLabel("Facing:"))
        self.direction_combo = QComboBox()
        self.direction_combo.addItems([direction.name.title() for direction in Direction])
        self.direction_combo.setCurrentText(self.controller.start_direction.name.title())
        search_layout.addWidget(self.direction_combo)

        search_layout.addWidget(QLabel("States/step:"))
        self.batch_spin = QSpinBox()
        self.batch_spin.setRange(1, 10000)
        self.batch_spin.setValue(self.controller.batch_size)
        search_layout.addWidget(self.batch_spin)

        search_layout.addWidget(QLabel("Speed"))
        self.speed_slider = QSlider(Qt.Horizontal)
        self.speed_slider.setRange(10, 1000)
        self.speed_slider.setValue(self.controller.speed)
        search_layout.addWidget(self.speed_slider)

        maze_group = QGroupBox("Maze")
        maze_layout = QHBoxLayout(maze_group)
        maze_layout.addWidget(QLabel("Size:"))
        self.width_spin = QSpinBox()
        self.width_spin.setRange(5, 151)
        self.width_spin.setValue(21)
        maze_layout.addWidget(self.width_spin)
        maze_layout.addWidget(QLabel("×"))
        self.height_spin = QSpinBox()
        self.height_spin.setRange(5, 151)
        self.height_spin.setValue(21)
        maze_layout.addWidget(self.height_spin)
        maze_layout.addWidget(QLabel("Loops:"))
        self.loops_spin = QDoubleSpinBox()
        self.loops_spin.setRange(0.0, 1.0)
        self.loops_spin.setSingleStep(0.05)
        self.loops_spin.setValue(0.1)
        maze_layout.addWidget(self.loops_spin)
        self.generate_btn = QPushButton("Generate")
        self.load_btn = QPushButton("Load...")
        maze_layout.addWidget(self.generate_btn)
        maze_layout.addWidget(self.load_btn)

        layout.addWidget(search_group)
        layout.addWidget(maze_group)
        return layout

    def _create_statistics_panel(self) -> QGroupBox:
        """Create the statistics display panel."""
        stats_group = QGroupBox("Search Statistics")
        stats_layout = QVBoxLayout(stats_group)

        self.phase_label = QLabel()
        self.explored_label = QLabel()
        self.frontier_label = QLabel()
        self.reached_label = QLabel()
        self.cost_label = QLabel()
        self.optimal_label = QLabel()
        for label in [self.phase_label, self.explored_label, self.frontier_label,
                      self.reached_label, self.cost_label, self.optimal_label]:
            stats_layout.addWidget(label)

        legend_group = QGroupBox("Color Legend")
        legend_layout = QVBoxLayout(legend_group)
        legend_items = [
            ("wall", "Wall"),
            ("start", "Start"),
            ("end", "End"),
            ("frontier", "Queued states"),
            ("explored", "Reached states"),
            ("current", "Last extracted state"),
            ("optimal", "On some optimal route"),
        ]
        for state, description in legend_items:
            legend_layout.addWidget(self._create_legend_item(GridTile.COLORS[state], description))
        stats_layout.addWidget(legend_group)

        stats_layout.addStretch()
        return stats_group

    def _create_legend_item(self, color: QColor, description: str) -> QWidget:
        """Create a single legend item with color box and description."""
        item_widget = QWidget()
        item_layout = QHBoxLayout(item_widget)
        item_layout.setContentsMargins(2, 2, 2, 2)

        color_box = QFrame()
        color_box.setFixedSize(16, 16)
        color_box.setAutoFillBackground(True)
        palette = color_box.palette()
        palette.setColor(QPalette.Window, color)
        color_box.setPalette(palette)
        color_box.setFrameStyle(QFrame.Box | QFrame.Raised)

        item_layout.addWidget(color_box)
        item_layout.addWidget(QLabel(description))
        item_layout.addStretch()
        return item_widget

    def _setup_connections(self):
        """Setup signal connections."""
        self.step_btn.clicked.connect(self.controller.step_search)
        self.run_btn.clicked.connect(self.controller.run_search)
        self.pause_btn.clicked.connect(self.controller.pause_search)
        self.reset_btn.clicked.connect(self.controller.reset_search)
        self.speed_slider.valueChanged.connect(self._on_speed_changed)
        self.batch_spin.valueChanged.connect(self._on_batch_changed)
        self.direction_combo.currentTextChanged.connect(self._on_direction_changed)
        self.generate_btn.clicked.connect(self._on_generate)
        self.load_btn.clicked.connect(self._on_load)

        self.controller.state_changed.connect(self._on_state_changed)
        self.controller.error_occurred.connect(self._on_error)
        self.controller.search_completed.connect(self._on_search_completed)
        self.controller.step_completed.connect(lambda _: self._update_statistics_display())

    def _setup_shortcuts(self):
        """Setup keyboard shortcuts."""
        QShortcut(QKeySequence("Space"), self, self.controller.step_search)
        QShortcut(QKeySequence("Return"), self, self.controller.run_search)
        QShortcut(QKeySequence("R"), self, self.controller.reset_search)
        QShortcut(QKeySequence("Ctrl+M"), self, self._on_generate)
        QShortcut(QKeySequence("Ctrl+O"), self, self._on_load)
        QShortcut(QKeySequence("Q"), self, self.close)
        QShortcut(QKeySequence("Escape"), self, self.close)

    def _on_speed_changed(self, value: int):
        self.controller.speed = value

    def _on_batch_changed(self, value: int):
        self.controller.batch_size = value

    def _on_direction_changed(self, name: str):
        self.controller.set_start_direction(Direction.from_name(name))

    def _on_generate(self):
        """Generate a new maze from the size and loop controls."""
        self.controller.generate_maze(self.width_spin.value(), self.height_spin.value(),
                                      loops=self.loops_spin.value())

    def _on_load(self):
        """Pick and load a maze text file."""
        filepath, _ = QFileDialog.getOpenFileName(self, "Load Maze", "", "Maze files (*.txt);;All files (*)")
        if filepath and self.controller.load_maze_file(filepath):
            self.status_bar.showMessage(f"Loaded {filepath}")

    def _on_state_changed(self, state: SearchPhase):
        self._update_button_states()
        self._update_statistics_display()
        self.status_bar.showMessage(f"State: {state.value.replace('_', ' ').title()}")

    def _on_error(self, error_msg: str):
        self.status_bar.showMessage(f"Error: {error_msg}")

    def _on_search_completed(self, result):
        if result.success:
            self.status_bar.showMessage(
                f"Lowest cost: {result.cost}, optimal tiles: {len(self.controller.optimal)}, "
                f"states explored: {result.states_explored}"
            )
        else:
            self.status_bar.showMessage(f"No path found. States explored: {result.states_explored}")
        self._update_statistics_display()

    def _update_button_states(self):
        """Enable buttons according to the current phase."""
        state = self.controller.current_state
        self.step_btn.setEnabled(state in [SearchPhase.IDLE, SearchPhase.PAUSED])
        self.run_btn.setText("Resume" if state == SearchPhase.PAUSED else "Run")
        self.run_btn.setEnabled(state in [SearchPhase.IDLE, SearchPhase.PAUSED])
        self.pause_btn.setEnabled(state == SearchPhase.RUNNING)
        self.reset_btn.setEnabled(state != SearchPhase.IDLE)

    def _update_statistics_display(self):
        stats = self.controller.get_statistics()
        self.phase_label.setText(f"Phase: {stats['state_description']}")
        self.explored_label.setText(f"States explored: {stats['states_explored']}")
        self.frontier_label.setText(f"Queue entries: {stats['frontier_size']}")
        self.reached_label.setText(f"States reached: {stats['states_reached']}")
        cost = stats['cost'] if stats['cost'] is not None else "-"
        self.cost_label.setText(f"Lowest cost: {cost}")
        self.optimal_label.setText(f"Optimal tiles: {stats['optimal_tiles']}")

    def closeEvent(self, event):
        """Stop timers before closing."""
        self.controller.reset_search()
        event.accept()
