"""Gizmo modes - defines which handles are active for each transform mode."""

from .handles import ArrowHandle, RingHandle, ScaleBoxHandle
from constants import AXES, GIZMO_HANDLE_SIZE, GIZMO_HIT_TOLERANCE
from models.scene import TransformMode


class GizmoMode:
	"""Base class for gizmo modes."""

	handle_class = None

	def __init__(self, mode, enabled_axes=AXES):
		self.mode = mode
		# Disabled axes get no handle, so they are neither drawn nor draggable
		self.handles = {
			axis: self.handle_class(axis, GIZMO_HANDLE_SIZE, GIZMO_HIT_TOLERANCE)
			for axis in AXES if axis in enabled_axes
		}

	def get_handles(self):
		"""Return all handles for this mode."""
		return self.handles

	def get_handle_at_pos(self, mouse_x, mouse_y, geometry):
		"""Find which handle (if any) is at mouse position.

		Returns:
			Handle object or None
		"""
		for handle in self.handles.values():
			if handle.hit_test(mouse_x, mouse_y, geometry):
				return handle
		return None


class TranslateGizmo(GizmoMode):
	"""Axis arrows."""
	handle_class = ArrowHandle


class RotateGizmo(GizmoMode):
	"""Axis rings."""
	handle_class = RingHandle


class ScaleGizmo(GizmoMode):
	"""Axis lines with box ends."""
	handle_class = ScaleBoxHandle


def create_mode(mode, enabled_axes=AXES):
	"""Factory function to create a gizmo mode.

	Args:
		mode: TransformMode (or its value)
		enabled_axes: Axes that get a handle

	Returns:
		GizmoMode instance
	"""
	mode = TransformMode(mode)
	mode_class = {
		TransformMode.TRANSLATE: TranslateGizmo,
		TransformMode.ROTATE: RotateGizmo,
		TransformMode.SCALE: ScaleGizmo,
	}[mode]
	return mode_class(mode, enabled_axes)
