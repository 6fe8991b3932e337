"""Save and publish handlers for SceneEditorWindow"""

from PyQt5.QtWidgets import QMessageBox

from components.publish_dialog import PublishDialog


class PersistenceMixin:
    """Writes the edited transform back to the backend and publishes scenes

    Both operations run on a TaskWorker; failures reach the user through the
    session's error listeners (see SceneEditorWindow._on_session_error).
    """

    def save_transform(self):
        """Save the live transform of the current asset"""
        session = self.session
        if session.asset is None:
            self.status_left.setText("No asset to save")
            return
        if session.persistence is None:
            self.status_left.setText("No backend configured")
            return
        # The worker writes what was on screen at click time
        asset_id = session.asset.id
        transform = session.transform
        self.status_left.setText("Saving...")
        self._run_task(session.save, asset_id, transform,
                       on_done=lambda ok: self._on_save_finished(ok, asset_id, transform))

    def _on_save_finished(self, ok, asset_id, transform):
        if not ok:
            self.status_left.setText("Save failed")
            return
        asset = self.session.asset
        if asset is None or asset.id != asset_id:
            return
        self.saved_transform = transform
        self.status_left.setText("Transformations saved successfully!")
        self._update_window_title()

    def publish_asset(self):
        """Publish the current asset once and show its QR code"""
        if not self.session.can_publish():
            self.controls_panel.refresh_buttons()
            return
        self.controls_panel.set_publish_in_progress(True)
        self.status_left.setText("Publishing...")
        self._run_task(self.session.publish, on_done=self._on_publish_finished)

    def _on_publish_finished(self, result):
        self.controls_panel.set_publish_in_progress(False)
        self._update_status_bar()
        if result is None:
            return
        self.status_left.setText(f"Published: {result.url}")
        self.hierarchy_panel.set_selected(self.session.asset)
        self.publish_dialog = PublishDialog(result, self)
        self.publish_dialog.open()

    def _prompt_save_if_needed(self):
        """Ask to save unsaved transform changes. Returns False to cancel."""
        if self.is_saved or self.session.persistence is None:
            return True
        reply = QMessageBox.question(
            self, "Unsaved Changes",
            "The transform has unsaved changes. Save before closing?",
            QMessageBox.Save | QMessageBox.Discard | QMessageBox.Cancel,
            QMessageBox.Save,
        )
        if reply == QMessageBox.Cancel:
            return False
        if reply == QMessageBox.Save:
            # Blocking save; the window is about to close
            return self.session.save()
        return True
