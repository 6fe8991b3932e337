"""History management and undo/redo for SceneEditorWindow"""


class HistoryMixin:
    """Undo/redo, window title and status bar updates"""

    def undo(self):
        """Undo the last transform change"""
        if self.transform_actions.is_dragging:
            self.transform_actions.cancel_drag()
        transform = self.session.undo()
        if transform is None:
            self.status_left.setText("Nothing to undo")
            return
        self._logger.debug("Undo -> %s", transform)

    def redo(self):
        """Redo the last undone transform change"""
        if self.transform_actions.is_dragging:
            self.transform_actions.cancel_drag()
        transform = self.session.redo()
        if transform is None:
            self.status_left.setText("Nothing to redo")
            return
        self._logger.debug("Redo -> %s", transform)

    def _on_history_changed(self, can_undo, can_redo):
        """Called when history state changes"""
        if hasattr(self, 'undo_action'):
            self.undo_action.setEnabled(can_undo)
            undo_desc = self.session.history.get_undo_description()
            self.undo_action.setText(f"&Undo {undo_desc}" if can_undo and undo_desc else "&Undo")
        if hasattr(self, 'redo_action'):
            self.redo_action.setEnabled(can_redo)
            redo_desc = self.session.history.get_redo_description()
            self.redo_action.setText(f"&Redo {redo_desc}" if can_redo and redo_desc else "&Redo")
        if hasattr(self, 'controls_panel'):
            self.controls_panel.refresh_buttons()
        self._update_status_bar()
        self._update_window_title()

    @property
    def is_saved(self):
        """True when the live transform matches the last saved (or loaded) one"""
        return self.session.asset is None or self.session.transform == self.saved_transform

    def _update_window_title(self):
        title = "AR Scene Editor"
        asset = self.session.asset
        if asset is not None:
            title += f" - {asset.name or asset.id}"
            if not self.is_saved:
                title += " *"
        self.setWindowTitle(title)

    def _update_status_bar(self):
        """Update the status bar with asset, mode and history position"""
        if not hasattr(self, 'status_right'):
            return
        session = self.session
        history = session.history
        if session.asset is None:
            self.status_right.setText("No asset selected")
            return
        parts = [
            f"Mode: {session.mode.value.capitalize()}",
            f"History: {history.current_index + 1}/{len(history)}",
        ]
        if session.asset.published:
            parts.append("Published")
        self.status_right.setText(" | ".join(parts))
