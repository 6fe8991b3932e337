"""
AR Scene Editor - Main Application

Builds the editor window from its mixins, wires the editing session to the
backend and starts the Qt event loop.
"""
import sys
import os
import argparse
import logging

# Add editor/src to path so imports work when running directly
if __name__ == "__main__":
    current_dir = os.path.dirname(os.path.abspath(__file__))
    if current_dir not in sys.path:
        sys.path.insert(0, current_dir)

# PyQt5 import/s
from PyQt5 import QtWidgets
from PyQt5.QtWidgets import QMainWindow
from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QPalette, QColor

from constants import CONFIG_DIR_NAME, MAX_RECENT_ASSETS
from models.editor_session import EditorSession
from services.asset_loader import AssetLoader
from services.persistence import PersistenceBridge
from services.supabase_client import SupabaseClient
from actions.transform_actions import TransformActions
from utils.app_config import AppConfig
from utils.logger import configure_logging, report_error, set_main_window

# Mixin imports
from main.menu_mixin import MenuMixin
from main.event_mixin import EventMixin
from main.config_mixin import ConfigMixin
from main.history_mixin import HistoryMixin
from main.asset_mixin import AssetMixin
from main.persistence_mixin import PersistenceMixin
from main.ui_setup_mixin import UISetupMixin


class SceneEditorWindow(MenuMixin, EventMixin, ConfigMixin, HistoryMixin, AssetMixin, PersistenceMixin,
                        UISetupMixin, QMainWindow):
    # Session errors may be raised on worker threads; this hops them to the UI thread
    errorReported = pyqtSignal(str)

    def __init__(self, config=None, client=None, asset_loader=None, config_dir=None):
        super().__init__()
        self.setWindowTitle("AR Scene Editor")
        self.resize(1280, 760)
        self.setMinimumSize(960, 600)
        self._logger = logging.getLogger('Editor')

        self.app_config = config if config is not None else AppConfig()
        if client is None and self.app_config.has_backend:
            client = SupabaseClient(
                self.app_config.supabase_url, self.app_config.supabase_key,
                table=self.app_config.asset_table, bucket=self.app_config.storage_bucket,
                timeout=self.app_config.request_timeout,
            )
        self.client = client
        bridge = PersistenceBridge(client, self.app_config.public_origin) if client is not None else None

        # Editing state (single source of truth for transform, history and scene settings)
        self.session = EditorSession(persistence=bridge)
        self.transform_actions = TransformActions(self.session)
        self.asset_loader = asset_loader or AssetLoader(timeout=self.app_config.request_timeout)
        self.saved_transform = self.session.transform
        self.publish_dialog = None
        self._pending_asset_id = None
        self._workers = set()

        # Recent assets and view preferences
        self.recent_assets = []
        self.max_recent_assets = MAX_RECENT_ASSETS
        self.config_dir = config_dir or os.path.join(os.path.expanduser("~"), CONFIG_DIR_NAME)
        self.config_file = os.path.join(self.config_dir, "config.json")
        self._load_config()

        # Initialize global logger with main window reference
        set_main_window(self)

        self.setup_ui()

        self.session.add_listener(self._on_session_changed)
        self.session.add_error_listener(self.errorReported.emit)
        self.session.history.add_listener(self._on_history_changed)
        self.errorReported.connect(self._on_session_error)
        self._apply_config()

    def _on_session_changed(self, reason):
        """Re-read every view from the session after a change"""
        self.viewport_area.refresh(reason)
        self.controls_panel.refresh()
        if reason == 'asset':
            self.hierarchy_panel.set_selected(self.session.asset)
        self._sync_view_menu()
        self._update_status_bar()
        self._update_window_title()

    def _on_session_error(self, message):
        report_error(message, "Backend Error")


def main(argv=None):
    """Main entry point for the AR Scene Editor"""
    parser = argparse.ArgumentParser(prog="ar-scene-editor", description="Position AR scene assets")
    parser.add_argument('asset_id', nargs='?', help="Asset to open on startup")
    parser.add_argument('-v', '--verbose', action='store_true', help="Enable debug logging")
    args = parser.parse_args(argv)

    configure_logging(args.verbose)
    config = AppConfig.from_env()
    if not config.has_backend:
        logging.getLogger('Editor').warning("SUPABASE_URL not set; running without a backend")

    app = QtWidgets.QApplication(sys.argv[:1])

    # Use Fusion style with dark palette
    app.setStyle("Fusion")

    dark_palette = QPalette()
    dark_palette.setColor(QPalette.Window, QColor(53, 53, 53))
    dark_palette.setColor(QPalette.WindowText, Qt.white)
    dark_palette.setColor(QPalette.Base, QColor(25, 25, 25))
    dark_palette.setColor(QPalette.AlternateBase, QColor(53, 53, 53))
    dark_palette.setColor(QPalette.ToolTipBase, Qt.white)
    dark_palette.setColor(QPalette.ToolTipText, Qt.white)
    dark_palette.setColor(QPalette.Text, Qt.white)
    dark_palette.setColor(QPalette.Button, QColor(53, 53, 53))
    dark_palette.setColor(QPalette.ButtonText, Qt.white)
    dark_palette.setColor(QPalette.BrightText, Qt.red)
    dark_palette.setColor(QPalette.Link, QColor(42, 130, 218))
    dark_palette.setColor(QPalette.Highlight, QColor(42, 130, 218))
    dark_palette.setColor(QPalette.HighlightedText, Qt.black)

    app.setPalette(dark_palette)

    window = SceneEditorWindow(config)
    window.show()
    window.refresh_asset_list()
    if args.asset_id:
        window.open_asset(args.asset_id)
    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
