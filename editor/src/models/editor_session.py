"""
AR Scene Editor - Editor Session

Single owner of all mutable editing state for one asset at a time:
the live Transform, its undo/redo history, scene settings, gizmo mode and
axis constraints. Every input surface writes through this object and reads
back from it on refresh, so no surface keeps its own copy.

Backend access goes through an injected PersistenceBridge.
"""

import logging
import threading
from dataclasses import replace

from constants import MAX_HISTORY_ENTRIES
from models.scene import AxisConstraints, SceneSettings, TransformMode
from models.transform import Transform
from services.persistence import PersistenceError
from utils.history_manager import HistoryManager


class EditorSession:
    """Editing state for the currently selected asset.

    Listeners registered with add_listener() receive a short reason string
    ('asset', 'preview', 'commit', 'undo', 'redo', 'mode', 'settings',
    'constraints', 'loaded') after each change. They run on the caller's
    thread; transform edits only happen on the UI thread.
    """

    def __init__(self, persistence=None, max_history=MAX_HISTORY_ENTRIES):
        self.persistence = persistence
        self.asset = None
        self.transform = Transform()
        self.history = HistoryManager(self.transform, max_history=max_history)
        self.settings = SceneSettings()
        self.mode = TransformMode.TRANSLATE
        self.constraints = AxisConstraints()
        self.uniform_scale = True
        self.generation = 0
        self.loaded_asset = None
        self.asset_warning = None
        self.last_error = None
        self._listeners = []
        self._error_listeners = []
        self._publish_lock = threading.Lock()
        self._logger = logging.getLogger('Session')

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------

    def add_listener(self, callback):
        self._listeners.append(callback)

    def remove_listener(self, callback):
        if callback in self._listeners:
            self._listeners.remove(callback)

    def add_error_listener(self, callback):
        """callback(message) is invoked for user-visible, non-fatal errors"""
        self._error_listeners.append(callback)

    def _notify(self, reason):
        for callback in list(self._listeners):
            callback(reason)

    def _report_error(self, message):
        self.last_error = message
        self._logger.error(message)
        for callback in list(self._error_listeners):
            callback(message)

    # ------------------------------------------------------------------
    # Asset selection
    # ------------------------------------------------------------------

    def select_asset(self, asset):
        """Make asset the edited asset.

        Resets history to a single entry holding the asset's stored transform
        and invalidates any asset load still in flight.

        Returns:
            int: the new load generation
        """
        self.asset = asset
        self.generation += 1
        self.loaded_asset = None
        self.asset_warning = None
        self.last_error = None
        self.transform = asset.transform if asset is not None else Transform()
        self.history.reset(self.transform)
        self._logger.info("Selected asset %s (generation %d)", getattr(asset, 'id', None), self.generation)
        self._notify('asset')
        return self.generation

    def apply_loaded_asset(self, generation, loaded):
        """Attach a finished asset load if it still belongs to the current selection.

        Returns:
            bool: False when the result was stale and discarded
        """
        if generation != self.generation:
            self._logger.debug("Discarding stale asset load (generation %d, current %d)", generation, self.generation)
            return False
        self.loaded_asset = loaded
        self.asset_warning = loaded.warning if loaded is not None else None
        self._notify('loaded')
        return True

    # ------------------------------------------------------------------
    # Transform edits
    # ------------------------------------------------------------------

    @property
    def has_pending_edit(self):
        """True when the live transform differs from the current history entry"""
        return self.transform != self.history.current()

    def preview(self, transform):
        """Show transform live without creating a history entry"""
        self.transform = transform
        self._notify('preview')

    def commit(self, description=""):
        """Record the live transform if it differs from the current entry.

        Returns:
            bool: True if a history entry was added
        """
        if not self.has_pending_edit:
            return False
        self.history.record(self.transform, description)
        self._notify('commit')
        return True

    def apply(self, transform, description=""):
        """Set the live transform and record it in one step"""
        self.transform = transform
        if not self.commit(description):
            self._notify('preview')

    def undo(self):
        """Step back one history entry.

        A pending (uncommitted) edit is committed first so that it can be
        redone afterwards.
        """
        self.commit("Edit")
        transform = self.history.undo()
        if transform is None:
            return None
        self.transform = transform
        self._notify('undo')
        return transform

    def redo(self):
        self.commit("Edit")
        transform = self.history.redo()
        if transform is None:
            return None
        self.transform = transform
        self._notify('redo')
        return transform

    def reset(self):
        """Restore default transform (as a history entry) and default scene settings"""
        self.settings = SceneSettings()
        self.apply(Transform(), "Reset transforms")
        self._notify('settings')

    # ------------------------------------------------------------------
    # Modes, constraints and scene settings
    # ------------------------------------------------------------------

    def set_mode(self, mode):
        mode = TransformMode(mode)
        if mode != self.mode:
            self.mode = mode
            self._notify('mode')

    def toggle_axis_constraint(self, mode, axis):
        enabled = self.constraints.toggle(mode, axis)
        self._notify('constraints')
        return enabled

    def set_uniform_scale(self, enabled):
        """Uniform mode only affects subsequent scale edits"""
        self.uniform_scale = bool(enabled)
        self._notify('constraints')

    def update_settings(self, **changes):
        self.settings = replace(self.settings, **changes)
        self._notify('settings')

    def toggle_grid(self):
        self.update_settings(show_grid=not self.settings.show_grid)
        return self.settings.show_grid

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def save(self, asset_id=None, transform=None):
        """Write a transform to the backend.

        Args:
            asset_id: Asset to write, defaults to the current asset
            transform: Transform to write, defaults to the live transform.
                Background saves pass both, captured when the save was requested.

        Failures are reported to error listeners; the live transform is never
        rolled back.

        Returns:
            bool: True on success
        """
        if self.persistence is None:
            return False
        if asset_id is None:
            if self.asset is None:
                return False
            asset_id = self.asset.id
        if transform is None:
            transform = self.transform
        try:
            self.persistence.save(asset_id, transform)
        except PersistenceError as e:
            self._report_error(f"Failed to save transformations: {e}")
            return False
        self.last_error = None
        return True

    def can_publish(self):
        return (
            self.asset is not None
            and self.persistence is not None
            and not self.asset.published
            and not self._publish_lock.locked()
        )

    def publish(self):
        """Publish the current asset once.

        Concurrent calls while a publish is running, or calls for an asset
        already published, return None without contacting the backend.

        Returns:
            PublishResult or None
        """
        if not self._publish_lock.acquire(blocking=False):
            self._logger.info("Publish already in progress")
            return None
        try:
            asset = self.asset
            if asset is None or self.persistence is None or asset.published:
                return None
            try:
                result = self.persistence.publish(asset.id)
            except PersistenceError as e:
                self._report_error(f"Failed to publish project: {e}")
                return None
            if self.asset is asset:
                self.asset = replace(asset, published=True)
            return result
        finally:
            self._publish_lock.release()
