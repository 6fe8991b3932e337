"""Asset list sidebar - shows the assets available to edit and the selected one."""

from PyQt5.QtWidgets import QFrame, QVBoxLayout, QLabel, QListWidget, QListWidgetItem, QPushButton
from PyQt5.QtCore import Qt, pyqtSignal

from models.asset import AssetKind


class HierarchyPanel(QFrame):
	"""Left sidebar listing backend assets"""

	assetSelected = pyqtSignal(str)  # asset id
	refreshRequested = pyqtSignal()

	def __init__(self, parent=None):
		super().__init__(parent)
		self.setMinimumWidth(180)
		self.setMaximumWidth(260)
		self._setup_ui()

	def _setup_ui(self):
		layout = QVBoxLayout(self)
		layout.setContentsMargins(8, 8, 8, 8)

		title = QLabel("Assets")
		title.setStyleSheet("font-size: 13px; font-weight: bold;")
		layout.addWidget(title)

		self.asset_list = QListWidget()
		self.asset_list.itemClicked.connect(self._on_item_clicked)
		layout.addWidget(self.asset_list, stretch=1)

		self.refresh_button = QPushButton("Refresh")
		self.refresh_button.clicked.connect(self.refreshRequested.emit)
		layout.addWidget(self.refresh_button)

		self.selected_label = QLabel("No asset selected")
		self.selected_label.setWordWrap(True)
		self.selected_label.setStyleSheet("color: #aaa; font-size: 11px;")
		layout.addWidget(self.selected_label)

	def set_assets(self, assets):
		"""Populate the list from AssetRecords"""
		self.asset_list.blockSignals(True)
		self.asset_list.clear()
		for asset in assets:
			label = asset.name or asset.id
			if asset.published:
				label += "  (published)"
			item = QListWidgetItem(label)
			item.setData(Qt.UserRole, asset.id)
			item.setToolTip(f"{asset.kind.value} - {asset.id}")
			self.asset_list.addItem(item)
		self.asset_list.blockSignals(False)

	def set_selected(self, asset):
		"""Highlight the edited asset and show its summary"""
		if asset is None:
			self.selected_label.setText("No asset selected")
			self.asset_list.clearSelection()
			return
		kind = "Image target" if asset.kind == AssetKind.IMAGE_TARGET else "3D model"
		status = "published" if asset.published else "draft"
		self.selected_label.setText(f"{asset.name or asset.id}\n{kind}, {status}")
		for row in range(self.asset_list.count()):
			item = self.asset_list.item(row)
			if item.data(Qt.UserRole) == asset.id:
				self.asset_list.blockSignals(True)
				self.asset_list.setCurrentItem(item)
				self.asset_list.blockSignals(False)
				break

	def _on_item_clicked(self, item):
		self.assetSelected.emit(item.data(Qt.UserRole))
