"""
Viewport Widget - QPainter rendering of the AR scene

Draws the RenderScene built by the viewport adapter through an orbit camera:
ground grid, the shaded asset node and its outline. Dragging empty space
orbits the camera and the wheel zooms.
"""

from PyQt5.QtCore import QPointF, Qt, pyqtSignal
from PyQt5.QtGui import QColor, QPainter, QPen, QPolygonF
from PyQt5.QtWidgets import QSizePolicy, QWidget

from constants import CAMERA_ORBIT_SPEED, CAMERA_ZOOM_SPEED, VIEWPORT_BACKGROUND
from services.viewport_adapter import project_edges, project_faces, project_segments
from utils.camera import OrbitCamera


class ViewportWidget(QWidget):
	"""Perspective viewport for a single asset node"""

	cameraChanged = pyqtSignal()

	def __init__(self, parent=None):
		super().__init__(parent)
		self.setMinimumSize(400, 300)
		self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
		self.setFocusPolicy(Qt.StrongFocus)
		self.setMouseTracking(True)

		self.camera = OrbitCamera()
		self.scene = None
		self._orbit_last = None

	def set_scene(self, scene):
		"""Replace the drawn RenderScene and repaint"""
		self.scene = scene
		self.update()

	# ------------------------------------------------------------------
	# Painting
	# ------------------------------------------------------------------

	def paintEvent(self, event):
		painter = QPainter(self)
		painter.setRenderHint(QPainter.Antialiasing)
		painter.fillRect(self.rect(), QColor(VIEWPORT_BACKGROUND))

		if self.scene is None:
			painter.end()
			return

		width, height = self.width(), self.height()
		if self.scene.grid is not None:
			self._paint_grid(painter, width, height)
		if self.scene.node is not None:
			self._paint_node(painter, width, height)
		painter.end()

	def _paint_grid(self, painter, width, height):
		painter.setPen(QPen(QColor(self.scene.grid_color), 1))
		for (x1, y1), (x2, y2) in project_segments(self.scene.grid, self.camera, width, height):
			painter.drawLine(QPointF(x1, y1), QPointF(x2, y2))

	def _paint_node(self, painter, width, height):
		node = self.scene.node
		faces = project_faces(self.scene, self.camera, width, height)
		for points, color in faces:
			fill = QColor(color)
			painter.setPen(QPen(fill, 1))
			painter.setBrush(fill)
			painter.drawPolygon(QPolygonF([QPointF(x, y) for x, y in points]))

		if node.placeholder:
			pen = QPen(QColor('#888888'), 1, Qt.DashLine)
		elif faces:
			pen = QPen(QColor(0, 0, 0, 90), 1)
		else:
			# Dense mesh drawn as wireframe only
			pen = QPen(QColor(node.color), 1)
		painter.setPen(pen)
		for (x1, y1), (x2, y2) in project_edges(node, self.camera, width, height):
			painter.drawLine(QPointF(x1, y1), QPointF(x2, y2))

	# ------------------------------------------------------------------
	# Camera interaction
	# ------------------------------------------------------------------

	def mousePressEvent(self, event):
		if event.button() in (Qt.LeftButton, Qt.RightButton, Qt.MiddleButton):
			self._orbit_last = event.pos()
			self.setFocus()
			event.accept()
			return
		super().mousePressEvent(event)

	def mouseMoveEvent(self, event):
		if self._orbit_last is None:
			super().mouseMoveEvent(event)
			return
		delta = event.pos() - self._orbit_last
		self._orbit_last = event.pos()
		self.camera.orbit(-delta.x() * CAMERA_ORBIT_SPEED, delta.y() * CAMERA_ORBIT_SPEED)
		self.cameraChanged.emit()
		self.update()
		event.accept()

	def mouseReleaseEvent(self, event):
		if self._orbit_last is not None:
			self._orbit_last = None
			event.accept()
			return
		super().mouseReleaseEvent(event)

	def wheelEvent(self, event):
		steps = event.angleDelta().y() / 120.0
		if steps:
			self.camera.zoom(CAMERA_ZOOM_SPEED ** -steps)
			self.cameraChanged.emit()
			self.update()
		event.accept()
