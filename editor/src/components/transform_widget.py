"""
Transform Widget - Interactive 3D gizmo for the selected asset

Transparent overlay on top of the viewport that provides:
- Axis arrows for translation
- Axis rings for rotation
- Axis box handles for scaling
Only axes enabled in the session's constraints get a handle. Drags preview
through TransformActions and commit once on release. Presses that miss every
handle are forwarded to the viewport for camera orbiting.
"""

from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QBrush, QColor, QMouseEvent, QPainter, QPen
from PyQt5.QtWidgets import QWidget

from components.transform_widgets import DragContext, compute_gizmo_geometry, create_mode


class TransformWidget(QWidget):
	"""Interactive gizmo for manipulating the asset transform"""

	# Signals
	transformEnded = pyqtSignal(bool)  # Emitted on release; True if a history entry was added

	def __init__(self, parent, viewport_widget, session, actions):
		super().__init__(parent)
		self.setAttribute(Qt.WA_TranslucentBackground)
		self.setMouseTracking(True)

		self.viewport_widget = viewport_widget
		self.session = session
		self.actions = actions

		self.gizmo = None
		self.drag = None
		self.hover_handle = None
		self.rebuild_gizmo()

		# Position absolutely on top of the viewport
		self.setGeometry(viewport_widget.geometry())
		viewport_widget.installEventFilter(self)

	def eventFilter(self, obj, event):
		"""Keep the overlay covering the viewport"""
		if obj == self.viewport_widget and event.type() in (event.Resize, event.Move):
			self.setGeometry(obj.geometry())
		return super().eventFilter(obj, event)

	def rebuild_gizmo(self):
		"""Recreate handles for the current mode and axis constraints"""
		mode = self.session.mode
		self.gizmo = create_mode(mode, self.session.constraints.enabled_axes(mode))
		self.hover_handle = None
		self.update()

	def _geometry(self):
		if self.session.asset is None:
			return None
		return compute_gizmo_geometry(
			self.viewport_widget.camera, self.session.transform.position,
			self.width(), self.height()
		)

	def handle_at(self, x, y):
		geometry = self._geometry()
		if geometry is None:
			return None, None
		return self.gizmo.get_handle_at_pos(x, y, geometry), geometry

	# ------------------------------------------------------------------
	# Painting
	# ------------------------------------------------------------------

	def paintEvent(self, event):
		geometry = self._geometry()
		if geometry is None:
			return
		painter = QPainter(self)
		painter.setRenderHint(QPainter.Antialiasing)
		active = self.drag.handle if self.drag else self.hover_handle
		for handle in self.gizmo.get_handles().values():
			handle.draw(painter, geometry, highlighted=(handle is active))

		# Center dot
		cx, cy = geometry.center
		painter.setPen(QPen(QColor(255, 255, 255), 1))
		painter.setBrush(QBrush(QColor(255, 255, 255, 180)))
		painter.drawEllipse(int(cx) - 3, int(cy) - 3, 6, 6)
		painter.end()

	# ------------------------------------------------------------------
	# Mouse
	# ------------------------------------------------------------------

	def _forward(self, event, handler):
		"""Forward a mouse event to the viewport underneath"""
		viewport_pos = self.viewport_widget.mapFromGlobal(self.mapToGlobal(event.pos()))
		viewport_event = QMouseEvent(
			event.type(),
			viewport_pos,
			event.globalPos(),
			event.button(),
			event.buttons(),
			event.modifiers()
		)
		handler(viewport_event)

	def mousePressEvent(self, event):
		if event.button() == Qt.LeftButton:
			handle, geometry = self.handle_at(event.x(), event.y())
			if handle is not None and self.actions.begin_drag(
					self.gizmo.mode, handle.axis, handle.screen_direction(geometry)):
				self.drag = DragContext(handle, event.x(), event.y())
				event.accept()
				self.update()
				return

		self._forward(event, self.viewport_widget.mousePressEvent)
		event.ignore()

	def mouseMoveEvent(self, event):
		if self.drag is None:
			self._forward(event, self.viewport_widget.mouseMoveEvent)
			handle, _ = self.handle_at(event.x(), event.y())
			if handle is not self.hover_handle:
				self.hover_handle = handle
				self.setCursor(handle.get_cursor() if handle else Qt.ArrowCursor)
				self.update()
			event.ignore()
			return

		dx, dy = self.drag.offset(event.x(), event.y())
		self.actions.update_drag(dx, dy)
		event.accept()

	def mouseReleaseEvent(self, event):
		if self.drag is None:
			self._forward(event, self.viewport_widget.mouseReleaseEvent)
			event.ignore()
			return

		if event.button() == Qt.LeftButton:
			self.drag = None
			changed = self.actions.end_drag()
			self.transformEnded.emit(changed)
			self.update()
			event.accept()
			return
		super().mouseReleaseEvent(event)

	def wheelEvent(self, event):
		# Zoom is handled by the viewport
		self.viewport_widget.wheelEvent(event)

	def cancel_drag(self):
		"""Abort an in-progress drag (e.g. Escape or asset switch)"""
		if self.drag is None:
			return
		self.drag = None
		self.actions.cancel_drag()
		self.update()
