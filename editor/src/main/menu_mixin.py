"""Menu bar creation and menu action handlers for SceneEditorWindow"""

from PyQt5.QtWidgets import QMessageBox, QActionGroup, QInputDialog
from PyQt5.QtGui import QKeySequence

from components.shortcuts_dialog import ShortcutsDialog
from models.scene import TransformMode
from version import get_version


class MenuMixin:
    """Menu bar and menu action handlers"""

    def _create_menu_bar(self):
        """Create the menu bar with File, Edit, View, Help menus"""
        menubar = self.menuBar()

        # File Menu
        file_menu = menubar.addMenu("&File")

        open_action = file_menu.addAction("&Open Asset...")
        open_action.setShortcut("Ctrl+O")
        open_action.triggered.connect(self._prompt_open_asset)

        # Recent Assets submenu
        self.recent_menu = file_menu.addMenu("Recent Assets")
        self._update_recent_assets_menu()

        refresh_action = file_menu.addAction("&Refresh Asset List")
        refresh_action.setShortcut("F5")
        refresh_action.triggered.connect(self.refresh_asset_list)

        file_menu.addSeparator()

        self.save_action = file_menu.addAction("&Save")
        self.save_action.setShortcut("Ctrl+S")
        self.save_action.triggered.connect(self.save_transform)

        self.publish_action = file_menu.addAction("&Publish...")
        self.publish_action.triggered.connect(self.publish_asset)

        file_menu.addSeparator()

        exit_action = file_menu.addAction("E&xit")
        exit_action.setShortcut("Alt+F4")
        exit_action.triggered.connect(self.close)

        # Edit Menu
        self.edit_menu = menubar.addMenu("&Edit")

        self.undo_action = self.edit_menu.addAction("&Undo")
        self.undo_action.setShortcut("Ctrl+Z")
        self.undo_action.triggered.connect(self.undo)
        self.undo_action.setEnabled(False)

        self.redo_action = self.edit_menu.addAction("&Redo")
        self.redo_action.setShortcuts([QKeySequence("Ctrl+Shift+Z"), QKeySequence("Ctrl+Y")])
        self.redo_action.triggered.connect(self.redo)
        self.redo_action.setEnabled(False)

        self.edit_menu.addSeparator()

        reset_action = self.edit_menu.addAction("Reset &Transform")
        reset_action.triggered.connect(self.transform_actions.reset)

        # View Menu
        view_menu = menubar.addMenu("&View")

        # Gizmo mode (T/R/S are handled in keyPressEvent so text fields keep those keys)
        self.mode_action_group = QActionGroup(self)
        self.mode_action_group.setExclusive(True)
        self.mode_actions = {}
        for mode, label in ((TransformMode.TRANSLATE, "&Move\tT"),
                            (TransformMode.ROTATE, "&Rotate\tR"),
                            (TransformMode.SCALE, "&Scale\tS")):
            action = view_menu.addAction(label)
            action.setCheckable(True)
            action.triggered.connect(lambda checked, m=mode: self.session.set_mode(m))
            self.mode_action_group.addAction(action)
            self.mode_actions[mode] = action

        view_menu.addSeparator()

        self.grid_action = view_menu.addAction("Show &Grid\tG")
        self.grid_action.setCheckable(True)
        self.grid_action.triggered.connect(lambda checked: self.session.update_settings(show_grid=checked))

        # Help Menu
        help_menu = menubar.addMenu("&Help")

        shortcuts_action = help_menu.addAction("&Keyboard Shortcuts")
        shortcuts_action.setShortcut("F1")
        shortcuts_action.triggered.connect(self._show_shortcuts)

        help_menu.addSeparator()

        about_action = help_menu.addAction("&About")
        about_action.triggered.connect(self._show_about)

        self._sync_view_menu()

    def _sync_view_menu(self):
        """Reflect session mode and grid state in the View menu"""
        if not hasattr(self, 'mode_actions'):
            return
        for mode, action in self.mode_actions.items():
            action.setChecked(mode == self.session.mode)
        self.grid_action.setChecked(self.session.settings.show_grid)
        has_asset = self.session.asset is not None
        self.save_action.setEnabled(has_asset and self.session.persistence is not None)
        self.publish_action.setEnabled(self.session.can_publish())

    def _prompt_open_asset(self):
        """Ask for an asset id and open it"""
        asset_id, ok = QInputDialog.getText(self, "Open Asset", "Asset ID:")
        if ok and asset_id.strip():
            self.open_asset(asset_id.strip())

    def _show_shortcuts(self):
        """Show keyboard shortcuts dialog"""
        dialog = ShortcutsDialog(self)
        dialog.exec_()

    def _show_about(self):
        """Show about dialog"""
        QMessageBox.about(self, "About AR Scene Editor",
            "<h3>AR Scene Editor</h3>"
            "<p>Place image targets and 3D models for web AR scenes.</p>"
            f"<p>Version {get_version()}</p>")
