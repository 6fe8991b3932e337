"""UI setup for SceneEditorWindow"""

from PyQt5.QtWidgets import QWidget, QHBoxLayout, QSplitter, QLabel
from PyQt5.QtCore import Qt

from components.controls_panel import ControlsPanel
from components.hierarchy_panel import HierarchyPanel
from components.viewport_area import ViewportArea


class UISetupMixin:
    """UI initialization and component wiring"""

    def setup_ui(self):
        """Initialize and wire up all UI components"""
        # Status labels first: menu and panel callbacks write to them
        self.status_left = QLabel("Ready")
        self.status_right = QLabel("")

        self._create_menu_bar()

        # Create central widget with splitter
        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        main_layout = QHBoxLayout(central_widget)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        # Create splitter for resizable panels
        splitter = QSplitter(Qt.Horizontal)

        # Left sidebar - backend assets
        self.hierarchy_panel = HierarchyPanel(self)
        self.hierarchy_panel.assetSelected.connect(self.open_asset)
        self.hierarchy_panel.refreshRequested.connect(self.refresh_asset_list)
        splitter.addWidget(self.hierarchy_panel)

        # Center viewport with gizmo overlay
        self.viewport_area = ViewportArea(self.session, self.transform_actions, self)
        splitter.addWidget(self.viewport_area)

        # Right sidebar - transform and scene controls
        self.controls_panel = ControlsPanel(self.session, self.transform_actions, self)
        self.controls_panel.saveRequested.connect(self.save_transform)
        self.controls_panel.publishRequested.connect(self.publish_asset)
        self.controls_panel.undoRequested.connect(self.undo)
        self.controls_panel.redoRequested.connect(self.redo)
        splitter.addWidget(self.controls_panel)

        # Set initial sizes (left: 220px, center: flex, right: 320px)
        splitter.setSizes([220, 740, 320])
        splitter.setCollapsible(0, False)
        splitter.setCollapsible(1, False)
        splitter.setCollapsible(2, False)

        main_layout.addWidget(splitter)

        # Status bar at bottom with left and right sections
        self.statusBar().addWidget(self.status_left, 1)  # stretch=1 for left
        self.statusBar().addPermanentWidget(self.status_right)  # permanent widget for right

        self.statusBar().setStyleSheet("QStatusBar { border-top: 1px solid rgba(255, 255, 255, 40); padding: 4px; }")

        self.viewport_area.refresh()
        self._update_status_bar()
        self._update_window_title()
