# PyQt5 imports
from PyQt5.QtWidgets import (
    QFrame, QVBoxLayout, QHBoxLayout, QLabel, QScrollArea, QWidget, QPushButton
)
from PyQt5.QtCore import Qt, pyqtSignal

# Local widget imports
from .controls_panel_widgets import PropertySlider, Vec3Editor, ScaleEditor, ColorButton
from constants import (
    AMBIENT_SLIDER_RANGE, AXES, LIGHT_POSITION_SLIDER_RANGE,
    POSITION_SLIDER_RANGE, ROTATION_SLIDER_RANGE, SCALE_SLIDER_RANGE
)
from models.scene import TransformMode
from utils.transform_math import radians_to_degrees


class ControlsPanel(QFrame):
	"""Right sidebar: transform editors, lighting, material and asset actions

	Writes go through TransformActions; refresh() re-reads the session.
	"""

	saveRequested = pyqtSignal()
	publishRequested = pyqtSignal()
	undoRequested = pyqtSignal()
	redoRequested = pyqtSignal()

	# Gizmo mode whose axis constraints each transform group edits
	FIELD_MODES = {
		'position': TransformMode.TRANSLATE,
		'rotation': TransformMode.ROTATE,
		'scale': TransformMode.SCALE,
	}

	def __init__(self, session, actions, parent=None):
		super().__init__(parent)
		self.session = session
		self.actions = actions
		self.setMinimumWidth(280)
		self.setMaximumWidth(380)
		self.publish_in_progress = False
		self._setup_ui()
		self.refresh()

	def _setup_ui(self):
		outer = QVBoxLayout(self)
		outer.setContentsMargins(0, 0, 0, 0)

		scroll = QScrollArea()
		scroll.setWidgetResizable(True)
		scroll.setFrameShape(QFrame.NoFrame)
		content = QWidget()
		layout = QVBoxLayout(content)
		layout.setContentsMargins(8, 8, 8, 8)
		layout.setSpacing(8)

		header = QLabel("Transform Controls")
		header.setStyleSheet("font-size: 13px; font-weight: bold;")
		layout.addWidget(header)

		# Transform groups
		self.position_editor = Vec3Editor("Position", POSITION_SLIDER_RANGE)
		self.rotation_editor = Vec3Editor("Rotation (degrees)", ROTATION_SLIDER_RANGE,
		                                  display_factor=radians_to_degrees(1.0), decimals=1)
		self.scale_editor = ScaleEditor(SCALE_SLIDER_RANGE)
		self.editors = {
			'position': self.position_editor,
			'rotation': self.rotation_editor,
			'scale': self.scale_editor,
		}
		for field_name, editor in self.editors.items():
			self._connect_editor(field_name, editor)
			layout.addWidget(editor)
		self.scale_editor.uniformToggled.connect(self.actions.set_uniform_scale)

		# Lighting
		lighting_label = QLabel("Lighting")
		lighting_label.setStyleSheet("font-weight: bold; padding: 4px 5px 2px 5px;")
		layout.addWidget(lighting_label)

		min_val, max_val, step = AMBIENT_SLIDER_RANGE
		self.ambient_slider = PropertySlider("Ambient Intensity", min_val, min_val, max_val, step)
		self.ambient_slider.valueChanged.connect(self.actions.set_ambient_intensity)
		layout.addWidget(self.ambient_slider)

		self.light_sliders = {}
		min_val, max_val, step = LIGHT_POSITION_SLIDER_RANGE
		for axis in AXES:
			slider = PropertySlider(f"Light {axis.upper()}", 0.0, min_val, max_val, step, decimals=1)
			slider.valueChanged.connect(lambda value, a=axis: self.actions.set_light_position(a, value))
			self.light_sliders[axis] = slider
			layout.addWidget(slider)

		color_row = QHBoxLayout()
		color_row.addWidget(QLabel("Material Color:"))
		self.color_button = ColorButton()
		self.color_button.colorChanged.connect(self.actions.set_material_color)
		color_row.addWidget(self.color_button)
		color_row.addStretch()
		layout.addLayout(color_row)

		layout.addStretch()
		scroll.setWidget(content)
		outer.addWidget(scroll)

		# Action buttons
		buttons = QVBoxLayout()
		buttons.setContentsMargins(8, 4, 8, 8)
		history_row = QHBoxLayout()
		self.undo_button = QPushButton("Undo")
		self.undo_button.clicked.connect(self.undoRequested.emit)
		self.redo_button = QPushButton("Redo")
		self.redo_button.clicked.connect(self.redoRequested.emit)
		history_row.addWidget(self.undo_button)
		history_row.addWidget(self.redo_button)
		buttons.addLayout(history_row)

		self.save_button = QPushButton("Save")
		self.save_button.clicked.connect(self.saveRequested.emit)
		self.reset_button = QPushButton("Reset")
		self.reset_button.clicked.connect(self.actions.reset)
		self.publish_button = QPushButton("Publish")
		self.publish_button.clicked.connect(self._on_publish_clicked)
		for button in (self.save_button, self.reset_button, self.publish_button):
			buttons.addWidget(button)
		outer.addLayout(buttons)

	def _connect_editor(self, field_name, editor):
		editor.fieldEdited.connect(lambda axis, text: self.actions.set_field(field_name, axis, text))
		editor.sliderMoved.connect(lambda axis, value: self.actions.preview_slider(field_name, axis, value))
		editor.sliderFinished.connect(lambda axis: self.actions.commit_slider(field_name))
		mode = self.FIELD_MODES[field_name]
		editor.constraintToggled.connect(lambda axis: self.session.toggle_axis_constraint(mode, axis))

	def _on_publish_clicked(self):
		# Disable immediately so a double click cannot queue a second publish
		self.publish_button.setEnabled(False)
		self.publishRequested.emit()

	def set_publish_in_progress(self, in_progress):
		self.publish_in_progress = in_progress
		self.refresh_buttons()

	def refresh(self):
		"""Re-read every displayed value from the session"""
		session = self.session
		transform = session.transform
		self.position_editor.set_values(transform.position)
		self.rotation_editor.set_values(transform.rotation)
		self.scale_editor.set_values(transform.scale)
		self.scale_editor.set_uniform(session.uniform_scale)
		for field_name, editor in self.editors.items():
			editor.set_constraints(session.constraints.for_mode(self.FIELD_MODES[field_name]))

		settings = session.settings
		self.ambient_slider.setValue(settings.ambient_intensity)
		for axis, slider in self.light_sliders.items():
			slider.setValue(getattr(settings.light_position, axis))
		self.color_button.set_color(settings.material_color)
		self.refresh_buttons()

	def refresh_buttons(self):
		session = self.session
		has_asset = session.asset is not None
		self.undo_button.setEnabled(session.history.can_undo())
		self.redo_button.setEnabled(session.history.can_redo())
		self.save_button.setEnabled(has_asset and session.persistence is not None)
		self.reset_button.setEnabled(has_asset)
		published = has_asset and session.asset.published
		self.publish_button.setText("Published" if published else "Publish")
		self.publish_button.setEnabled(session.can_publish() and not self.publish_in_progress)
