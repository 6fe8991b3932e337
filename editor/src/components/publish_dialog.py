"""Publish result dialog - QR code and shareable AR link."""

from PyQt5.QtWidgets import QApplication, QDialog, QHBoxLayout, QLabel, QPushButton, QVBoxLayout
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QPixmap


class PublishDialog(QDialog):
    """Shown after a successful publish"""

    QR_SIZE = 192

    def __init__(self, result, parent=None):
        super().__init__(parent)
        self.publish_result = result
        self.setWindowTitle("Project Published")
        self.setModal(True)
        self.setMinimumWidth(360)

        layout = QVBoxLayout(self)

        intro = QLabel("Your project is now live! Share it using the QR code or link below.")
        intro.setWordWrap(True)
        layout.addWidget(intro)

        self.qr_label = QLabel()
        self.qr_label.setAlignment(Qt.AlignCenter)
        pixmap = QPixmap()
        if pixmap.loadFromData(result.qr_png, 'PNG'):
            self.qr_label.setPixmap(pixmap.scaled(self.QR_SIZE, self.QR_SIZE, Qt.KeepAspectRatio,
                                                  Qt.SmoothTransformation))
        layout.addWidget(self.qr_label)

        self.link_label = QLabel(f'AR Scene Link: <a href="{result.url}">{result.url}</a>')
        self.link_label.setOpenExternalLinks(True)
        self.link_label.setTextInteractionFlags(Qt.TextBrowserInteraction)
        layout.addWidget(self.link_label)

        buttons = QHBoxLayout()
        copy_btn = QPushButton("Copy Link")
        copy_btn.clicked.connect(self.copy_link)
        close_btn = QPushButton("Close")
        close_btn.clicked.connect(self.accept)
        buttons.addWidget(copy_btn)
        buttons.addStretch()
        buttons.addWidget(close_btn)
        layout.addLayout(buttons)

    def copy_link(self):
        QApplication.clipboard().setText(self.publish_result.url)
