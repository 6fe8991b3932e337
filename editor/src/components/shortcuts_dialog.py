"""Keyboard shortcuts help dialog."""

from PyQt5.QtWidgets import QDialog, QVBoxLayout, QTextEdit, QPushButton


class ShortcutsDialog(QDialog):
    """Dialog displaying all keyboard shortcuts"""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Keyboard Shortcuts")
        self.setMinimumWidth(500)
        self.setMinimumHeight(420)

        layout = QVBoxLayout()

        text_edit = QTextEdit()
        text_edit.setReadOnly(True)
        text_edit.setHtml("""
        <h2>Keyboard Shortcuts</h2>

        <h3>Gizmo</h3>
        <table width="100%">
        <tr><td width="30%"><b>T</b></td><td>Move (translate) mode</td></tr>
        <tr><td><b>R</b></td><td>Rotate mode</td></tr>
        <tr><td><b>S</b></td><td>Scale mode</td></tr>
        <tr><td><b>G</b></td><td>Toggle ground grid</td></tr>
        <tr><td><b>Esc</b></td><td>Cancel the current drag</td></tr>
        </table>

        <h3>Edit Operations</h3>
        <table width="100%">
        <tr><td width="30%"><b>Ctrl+Z</b></td><td>Undo last change</td></tr>
        <tr><td><b>Ctrl+Shift+Z</b></td><td>Redo previously undone change</td></tr>
        <tr><td><b>Ctrl+Y</b></td><td>Redo previously undone change</td></tr>
        <tr><td><b>Ctrl+S</b></td><td>Save transform to the backend</td></tr>
        </table>

        <h3>Viewport</h3>
        <table width="100%">
        <tr><td width="30%"><b>Drag</b></td><td>Orbit the camera (outside gizmo handles)</td></tr>
        <tr><td><b>Wheel</b></td><td>Zoom in/out</td></tr>
        </table>

        <h3>Help</h3>
        <table width="100%">
        <tr><td width="30%"><b>F1</b></td><td>Show this keyboard shortcuts help</td></tr>
        </table>

        <p><i>On macOS, Cmd replaces Ctrl.</i></p>
        """)

        close_btn = QPushButton("Close")
        close_btn.clicked.connect(self.accept)

        layout.addWidget(text_edit)
        layout.addWidget(close_btn)

        self.setLayout(layout)
