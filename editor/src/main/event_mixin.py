"""Window event handlers for SceneEditorWindow"""

from PyQt5.QtCore import Qt

from models.scene import TransformMode


# Single-key gizmo mode switches (only reach the window when no text field consumed them)
MODE_KEYS = {
	Qt.Key_T: TransformMode.TRANSLATE,
	Qt.Key_R: TransformMode.ROTATE,
	Qt.Key_S: TransformMode.SCALE,
}


class EventMixin:
	"""Window event handlers (keyPress, close)"""
	
	def keyPressEvent(self, event):
		"""Handle keyboard shortcuts

		Qt reports Cmd as ControlModifier on macOS, so the Ctrl checks cover both.
		"""
		key = event.key()
		modifiers = event.modifiers() & ~Qt.KeypadModifier
		# Ctrl+S for save
		if key == Qt.Key_S and modifiers == Qt.ControlModifier:
			self.save_transform()
			event.accept()
		# Ctrl+Shift+Z for redo
		elif key == Qt.Key_Z and modifiers == (Qt.ControlModifier | Qt.ShiftModifier):
			self.redo()
			event.accept()
		# Ctrl+Z for undo
		elif key == Qt.Key_Z and modifiers == Qt.ControlModifier:
			self.undo()
			event.accept()
		# Ctrl+Y for redo
		elif key == Qt.Key_Y and modifiers == Qt.ControlModifier:
			self.redo()
			event.accept()
		# T/R/S switch gizmo mode
		elif key in MODE_KEYS and not modifiers:
			self.session.set_mode(MODE_KEYS[key])
			event.accept()
		# G toggles the ground grid
		elif key == Qt.Key_G and not modifiers:
			self.session.toggle_grid()
			event.accept()
		# Escape abandons an in-progress gizmo drag
		elif key == Qt.Key_Escape:
			self.viewport_area.transform_widget.cancel_drag()
			if self.transform_actions.is_dragging:
				self.transform_actions.cancel_drag()
			event.accept()
		# F1 for shortcuts help
		elif key == Qt.Key_F1:
			self._show_shortcuts()
			event.accept()
		else:
			super().keyPressEvent(event)
	
	def closeEvent(self, event):
		"""Handle window close event - prompt to save if needed"""
		if self._prompt_save_if_needed():
			# Save config before closing
			self._save_config()
			self._wait_for_workers()
			event.accept()
		else:
			event.ignore()
