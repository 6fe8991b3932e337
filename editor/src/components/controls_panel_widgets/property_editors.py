"""
AR Scene Editor - Property Editors

Reusable editor widgets for the controls panel: float sliders with an
input box, per-axis vector editors (constraint toggle + numeric field +
slider) and the scale editor with its uniform toggle.
"""

from PyQt5.QtWidgets import (
	QCheckBox, QColorDialog, QGridLayout, QHBoxLayout, QLabel, QLineEdit,
	QPushButton, QSlider, QVBoxLayout, QWidget
)
from PyQt5.QtCore import Qt, QTimer, pyqtSignal
from PyQt5.QtGui import QColor

from constants import AXES, SLIDER_COMMIT_DELAY_MS
from utils.transform_math import clamp, coerce_number


SLIDER_STYLE = """
	QSlider::groove:horizontal {
		height: 6px;
		border-radius: 3px;
		background-color: rgba(255, 255, 255, 20);
	}
	QSlider::handle:horizontal {
		width: 12px;
		margin: -4px 0;
		border-radius: 6px;
		background-color: #5a8dbf;
	}
	QSlider::handle:horizontal:hover {
		background-color: #6a9dcf;
	}
"""

INPUT_STYLE = """
	QLineEdit {
		padding: 4px;
		border-radius: 3px;
		font-size: 10px;
	}
"""


class PropertySlider(QWidget):
	"""Float slider with synchronized input box

	valueChanged fires continuously while the value moves. editingFinished
	fires once per gesture: on slider release, after a typed value, or once
	keyboard/wheel stepping has been idle for SLIDER_COMMIT_DELAY_MS.
	"""

	valueChanged = pyqtSignal(float)
	editingFinished = pyqtSignal()

	def __init__(self, label, value, min_val, max_val, step, decimals=2, parent=None):
		super().__init__(parent)
		self.min_val = min_val
		self.max_val = max_val
		self.step = step
		self.decimals = decimals
		self._steps = int(round((max_val - min_val) / step))
		self._value = clamp(value, min_val, max_val)

		self._commit_timer = QTimer(self)
		self._commit_timer.setSingleShot(True)
		self._commit_timer.setInterval(SLIDER_COMMIT_DELAY_MS)
		self._commit_timer.timeout.connect(self.editingFinished.emit)

		self._setup_ui(label)

	def _setup_ui(self, label):
		"""Setup the slider UI"""
		layout = QVBoxLayout(self)
		layout.setContentsMargins(0, 0, 0, 0)
		layout.setSpacing(2)

		self.label = None
		if label:
			self.label = QLabel(f"{label}:")
			self.label.setStyleSheet("padding: 2px 5px; font-size: 11px;")
			layout.addWidget(self.label)

		slider_layout = QHBoxLayout()
		slider_layout.setSpacing(5)

		self.value_input = QLineEdit()
		self.value_input.setFixedWidth(50)
		self.value_input.setStyleSheet(INPUT_STYLE)
		slider_layout.addWidget(self.value_input)

		# Integer slider positions map onto min_val + n * step
		self.slider = QSlider(Qt.Horizontal)
		self.slider.setMinimum(0)
		self.slider.setMaximum(self._steps)
		self.slider.setStyleSheet(SLIDER_STYLE)
		slider_layout.addWidget(self.slider)

		layout.addLayout(slider_layout)

		self.setValue(self._value)

		self.slider.valueChanged.connect(self._on_slider_changed)
		self.slider.sliderReleased.connect(self._on_slider_released)
		self.value_input.editingFinished.connect(self._on_input_finished)

	def _to_position(self, value):
		return int(round((clamp(value, self.min_val, self.max_val) - self.min_val) / self.step))

	def _to_value(self, position):
		if position >= self._steps:
			return self.max_val
		return round(self.min_val + position * self.step, 6)

	def _format(self, value):
		return f"{value:.{self.decimals}f}"

	def _on_slider_changed(self, position):
		self._value = self._to_value(position)
		self.value_input.setText(self._format(self._value))
		self.value_input.setModified(False)
		self.valueChanged.emit(self._value)
		if not self.slider.isSliderDown():
			self._commit_timer.start()

	def _on_slider_released(self):
		self._commit_timer.stop()
		self.editingFinished.emit()

	def _on_input_finished(self):
		"""Typed value: clamp, sync slider, emit both signals"""
		if not self.value_input.isModified():
			return
		value = clamp(coerce_number(self.value_input.text(), self._value), self.min_val, self.max_val)
		self.setValue(value)
		self.valueChanged.emit(value)
		self.editingFinished.emit()

	def setValue(self, value):
		"""Set the value without emitting signals"""
		self._value = clamp(value, self.min_val, self.max_val)
		self.slider.blockSignals(True)
		self.value_input.blockSignals(True)
		self.slider.setValue(self._to_position(self._value))
		self.value_input.setText(self._format(self._value))
		self.value_input.setModified(False)
		self.slider.blockSignals(False)
		self.value_input.blockSignals(False)

	def value(self):
		"""Get the current value"""
		return self._value

	def is_dragging(self):
		return self.slider.isSliderDown()

	def setVisible(self, visible):
		"""Override setVisible to hide/show all components"""
		super().setVisible(visible)
		if self.label:
			self.label.setVisible(visible)


class Vec3Editor(QWidget):
	"""X/Y/Z rows of constraint checkbox, numeric field and slider

	Fields may show a different unit than the sliders (display_factor), e.g.
	rotation fields in degrees over radian sliders.
	"""

	fieldEdited = pyqtSignal(str, str)     # axis, entered text
	sliderMoved = pyqtSignal(str, float)   # axis, value (live)
	sliderFinished = pyqtSignal(str)       # axis
	constraintToggled = pyqtSignal(str)    # axis

	def __init__(self, title, slider_range, display_factor=1.0, decimals=2,
	             show_constraints=True, parent=None):
		super().__init__(parent)
		self.display_factor = display_factor
		self.decimals = decimals
		self.fields = {}
		self.sliders = {}
		self.constraint_checks = {}
		self._setup_ui(title, slider_range, show_constraints)

	def _setup_ui(self, title, slider_range, show_constraints):
		layout = QVBoxLayout(self)
		layout.setContentsMargins(0, 0, 0, 0)
		layout.setSpacing(2)

		self.title_label = QLabel(title)
		self.title_label.setStyleSheet("font-weight: bold; padding: 4px 5px 2px 5px;")
		layout.addWidget(self.title_label)

		self.grid = QGridLayout()
		self.grid.setSpacing(4)
		min_val, max_val, step = slider_range
		for row, axis in enumerate(AXES):
			self.grid.addWidget(QLabel(axis.upper()), row, 0)

			check = QCheckBox()
			check.setChecked(True)
			check.setToolTip(f"Enable the {axis.upper()} axis on the gizmo")
			check.toggled.connect(lambda _checked, a=axis: self.constraintToggled.emit(a))
			check.setVisible(show_constraints)
			self.constraint_checks[axis] = check
			self.grid.addWidget(check, row, 1)

			field = QLineEdit()
			field.setFixedWidth(60)
			field.setStyleSheet(INPUT_STYLE)
			field.editingFinished.connect(lambda a=axis: self._on_field_finished(a))
			self.fields[axis] = field
			self.grid.addWidget(field, row, 2)

			slider = PropertySlider(None, min_val, min_val, max_val, step, decimals=self.decimals)
			slider.value_input.setVisible(False)
			slider.valueChanged.connect(lambda value, a=axis: self.sliderMoved.emit(a, value))
			slider.editingFinished.connect(lambda a=axis: self.sliderFinished.emit(a))
			self.sliders[axis] = slider
			self.grid.addWidget(slider, row, 3)
		layout.addLayout(self.grid)

	def _on_field_finished(self, axis):
		field = self.fields[axis]
		if not field.isModified():
			return
		field.setModified(False)
		self.fieldEdited.emit(axis, field.text())

	def set_values(self, vec):
		"""Show vec in fields and sliders without emitting signals"""
		for axis in AXES:
			value = getattr(vec, axis)
			field = self.fields[axis]
			field.blockSignals(True)
			field.setText(f"{value * self.display_factor:.{self.decimals}f}")
			field.setModified(False)
			field.blockSignals(False)
			slider = self.sliders[axis]
			if not slider.is_dragging():
				slider.setValue(value)

	def set_constraints(self, flags):
		for axis, check in self.constraint_checks.items():
			check.blockSignals(True)
			check.setChecked(flags[axis])
			check.blockSignals(False)


class ScaleEditor(Vec3Editor):
	"""Scale vector editor with a uniform-scale toggle"""

	uniformToggled = pyqtSignal(bool)

	def __init__(self, slider_range, parent=None):
		super().__init__("Scale", slider_range, parent=parent)
		self.uniform_check = QCheckBox("Uniform Scale")
		self.uniform_check.setChecked(True)
		self.uniform_check.toggled.connect(self.uniformToggled.emit)
		self.layout().insertWidget(1, self.uniform_check)

	def set_uniform(self, enabled):
		self.uniform_check.blockSignals(True)
		self.uniform_check.setChecked(enabled)
		self.uniform_check.blockSignals(False)


class ColorButton(QPushButton):
	"""Swatch button that opens a color dialog"""

	colorChanged = pyqtSignal(str)  # '#rrggbb'

	def __init__(self, color='#ffffff', parent=None):
		super().__init__(parent)
		self.setFixedSize(40, 24)
		self.clicked.connect(self._pick_color)
		self.set_color(color)

	def set_color(self, color):
		self._color = color
		self.setStyleSheet(f"background-color: {color}; border: 1px solid #666; border-radius: 3px;")

	def color(self):
		return self._color

	def _pick_color(self):
		qcolor = QColorDialog.getColor(QColor(self._color), self, "Material Color")
		if qcolor.isValid():
			self.set_color(qcolor.name())
			self.colorChanged.emit(qcolor.name())
