"""Transform input actions - numeric fields, sliders, gizmo drags"""
import logging

from constants import (
	AMBIENT_SLIDER_RANGE, LIGHT_POSITION_SLIDER_RANGE, POSITION_SLIDER_RANGE,
	ROTATION_SLIDER_RANGE, SCALE_SLIDER_RANGE
)
from models.scene import TransformMode
from services.viewport_adapter import gizmo_drag
from utils.transform_math import (
	clamp, coerce_number, degrees_to_radians, input_fallback,
	with_axis, with_transform_axis, with_uniform_scale
)


SLIDER_RANGES = {
	'position': POSITION_SLIDER_RANGE,
	'rotation': ROTATION_SLIDER_RANGE,
	'scale': SCALE_SLIDER_RANGE,
}


class TransformActions:
	"""Normalizes every transform input surface into session updates

	Numeric fields apply immediately with a history entry. Sliders and gizmo
	drags preview while moving and commit once when released.
	"""

	def __init__(self, session):
		"""Initialize with the editor session

		Args:
			session: EditorSession that owns the transform
		"""
		self.session = session
		self._drag_start = None
		self._drag_mode = None
		self._drag_axis = None
		self._drag_screen_dir = None
		self._logger = logging.getLogger('Session')

	def _with_value(self, field_name, axis, value):
		"""Live transform with one component replaced (uniform scale aware)"""
		transform = self.session.transform
		if field_name == 'scale' and self.session.uniform_scale:
			return with_uniform_scale(transform, value)
		return with_transform_axis(transform, field_name, axis, value)

	# ------------------------------------------------------------------
	# Numeric fields
	# ------------------------------------------------------------------

	def set_field(self, field_name, axis, text):
		"""Apply a numeric field edit

		Args:
			field_name: 'position', 'rotation' or 'scale'
			axis: 'x', 'y' or 'z'
			text: Entered value; rotation is in degrees

		Returns:
			float: The value stored (radians for rotation)
		"""
		value = coerce_number(text, input_fallback(field_name))
		if field_name == 'rotation':
			value = degrees_to_radians(value)
		self.session.apply(self._with_value(field_name, axis, value), f"Set {field_name} {axis}")
		return value

	# ------------------------------------------------------------------
	# Sliders
	# ------------------------------------------------------------------

	def preview_slider(self, field_name, axis, value):
		"""Show a slider value live, clamped to the slider's range"""
		min_val, max_val, _ = SLIDER_RANGES[field_name]
		value = clamp(coerce_number(value, input_fallback(field_name)), min_val, max_val)
		self.session.preview(self._with_value(field_name, axis, value))
		return value

	def commit_slider(self, field_name):
		"""Record the previewed slider value (no-op if nothing changed)"""
		return self.session.commit(f"Adjust {field_name}")

	def set_slider(self, field_name, axis, value):
		value = self.preview_slider(field_name, axis, value)
		self.commit_slider(field_name)
		return value

	# ------------------------------------------------------------------
	# Scene settings (not recorded in history)
	# ------------------------------------------------------------------

	def set_ambient_intensity(self, value):
		min_val, max_val, _ = AMBIENT_SLIDER_RANGE
		value = clamp(coerce_number(value, min_val), min_val, max_val)
		self.session.update_settings(ambient_intensity=value)
		return value

	def set_light_position(self, axis, value):
		min_val, max_val, _ = LIGHT_POSITION_SLIDER_RANGE
		value = clamp(coerce_number(value, 0.0), min_val, max_val)
		light = with_axis(self.session.settings.light_position, axis, value)
		self.session.update_settings(light_position=light)
		return value

	def set_material_color(self, color):
		self.session.update_settings(material_color=color)

	def set_uniform_scale(self, enabled):
		self.session.set_uniform_scale(enabled)

	def reset(self):
		"""Default transform as a new history entry plus default scene settings"""
		self.cancel_drag()
		self.session.reset()

	# ------------------------------------------------------------------
	# Gizmo drags
	# ------------------------------------------------------------------

	@property
	def is_dragging(self):
		return self._drag_start is not None

	def begin_drag(self, mode, axis, screen_dir=None):
		"""Start a gizmo drag on one axis of the given mode

		Returns:
			bool: False when the axis is disabled for this mode
		"""
		mode = TransformMode(mode)
		if not self.session.constraints.is_enabled(mode, axis):
			return False
		self._drag_start = self.session.transform
		self._drag_mode = mode
		self._drag_axis = axis
		self._drag_screen_dir = screen_dir
		return True

	def update_drag(self, dx, dy):
		"""Preview the transform for a total mouse offset of (dx, dy) pixels"""
		if not self.is_dragging:
			return None
		transform = gizmo_drag(
			self._drag_start, self._drag_mode, self._drag_axis, dx, dy,
			self.session.constraints, self.session.uniform_scale,
			screen_dir=self._drag_screen_dir,
		)
		self.session.preview(transform)
		return transform

	def end_drag(self):
		"""Commit the drag result as one history entry

		Returns:
			bool: True if the drag changed the transform
		"""
		if not self.is_dragging:
			return False
		description = f"{self._drag_mode.value.capitalize()} {self._drag_axis.upper()}"
		self._clear_drag()
		changed = self.session.commit(description)
		self._logger.debug("Drag ended: %s (%s)", description, "recorded" if changed else "no change")
		return changed

	def cancel_drag(self):
		"""Abandon a drag and restore its start transform"""
		if not self.is_dragging:
			return
		start = self._drag_start
		self._clear_drag()
		self.session.preview(start)

	def _clear_drag(self):
		self._drag_start = None
		self._drag_mode = None
		self._drag_axis = None
		self._drag_screen_dir = None
