# PyQt5 imports
from PyQt5.QtWidgets import QFrame, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QButtonGroup
from PyQt5.QtCore import Qt

# Local component imports
from .viewport_widget import ViewportWidget
from .transform_widget import TransformWidget
from models.scene import TransformMode
from services.viewport_adapter import build_render_scene


MODE_BUTTONS = (
    (TransformMode.TRANSLATE, "Move (T)"),
    (TransformMode.ROTATE, "Rotate (R)"),
    (TransformMode.SCALE, "Scale (S)"),
)


class ViewportArea(QFrame):
    """Center area: mode toolbar, asset warning, viewport and gizmo overlay"""

    def __init__(self, session, actions, parent=None):
        super().__init__(parent)
        self.session = session
        self.actions = actions
        self.setStyleSheet("QFrame { background-color: #141414; }")
        self.setMinimumWidth(500)
        self._setup_ui()

    def _setup_ui(self):
        """Setup the viewport area UI"""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        # Top toolbar
        toolbar = QHBoxLayout()
        toolbar.setContentsMargins(8, 4, 8, 4)
        self.mode_group = QButtonGroup(self)
        self.mode_group.setExclusive(True)
        self.mode_buttons = {}
        for mode, text in MODE_BUTTONS:
            button = QPushButton(text)
            button.setCheckable(True)
            button.clicked.connect(lambda _checked, m=mode: self.session.set_mode(m))
            self.mode_group.addButton(button)
            self.mode_buttons[mode] = button
            toolbar.addWidget(button)

        self.grid_button = QPushButton("Grid (G)")
        self.grid_button.setCheckable(True)
        self.grid_button.clicked.connect(lambda _checked: self.session.toggle_grid())
        toolbar.addWidget(self.grid_button)

        hotkeys = QLabel("Hotkeys: T (Move), R (Rotate), S (Scale), G (Grid)")
        hotkeys.setStyleSheet("color: #888; font-size: 10px;")
        toolbar.addStretch()
        toolbar.addWidget(hotkeys)
        layout.addLayout(toolbar)

        # Inline warning for assets that failed to load
        self.warning_label = QLabel()
        self.warning_label.setStyleSheet(
            "QLabel { background-color: #5a3a12; color: #ffd08a; padding: 4px 8px; }"
        )
        self.warning_label.setWordWrap(True)
        self.warning_label.setVisible(False)
        layout.addWidget(self.warning_label)

        # Container holding the viewport; gizmo overlay is positioned over it, not laid out
        viewport_container = QFrame()
        container_layout = QVBoxLayout(viewport_container)
        container_layout.setContentsMargins(0, 0, 0, 0)
        container_layout.setSpacing(0)

        self.viewport_widget = ViewportWidget(viewport_container)
        container_layout.addWidget(self.viewport_widget, stretch=1)

        self.transform_widget = TransformWidget(viewport_container, self.viewport_widget,
                                                self.session, self.actions)
        self.transform_widget.raise_()
        self.viewport_widget.cameraChanged.connect(self.transform_widget.update)

        layout.addWidget(viewport_container, stretch=1)

    def refresh(self, reason=None):
        """Rebuild the drawn scene from the session"""
        session = self.session
        self.viewport_widget.set_scene(build_render_scene(session, session.loaded_asset))

        if reason in (None, 'mode', 'constraints', 'asset'):
            self.transform_widget.rebuild_gizmo()
        else:
            self.transform_widget.update()

        for mode, button in self.mode_buttons.items():
            button.setChecked(mode == session.mode)
        self.grid_button.setChecked(session.settings.show_grid)

        warning = session.asset_warning
        self.warning_label.setText(warning or "")
        self.warning_label.setVisible(bool(warning))
