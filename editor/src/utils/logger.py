"""Global logging and error handling utilities"""
import logging
import sys
import traceback
from PyQt5.QtWidgets import QMessageBox

# Detect debug mode - True if running from source, False if packaged
DEBUG_MODE = not getattr(sys, 'frozen', False)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

_main_window = None

def configure_logging(verbose=False):
    """Configure root logging once for the application (stdout)"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stdout,
    )

def set_main_window(window):
    """Set the main window reference for showing popups"""
    global _main_window
    _main_window = window

def loggerRaise(e: Exception, user_message: str = None, title: str = "Error"):
    """Handle programming errors with optional popup in release mode

    Args:
        e: The exception to handle
        user_message: User-friendly message to show in popup (optional)
        title: Title for the popup dialog

    In DEBUG_MODE:
        - Just raises the exception (shows full traceback)

    In RELEASE_MODE:
        - Shows popup with user message or exception string
        - Logs the full traceback
        - Then raises the exception
    """
    if DEBUG_MODE:
        raise e

    logging.getLogger('Editor').error("Unhandled error:\n%s", traceback.format_exc())

    message = user_message if user_message else str(e)
    if _main_window:
        QMessageBox.critical(_main_window, title, message)
    else:
        print(f"ERROR POPUP (no window): {title} - {message}", file=sys.stderr)

    raise e

def report_error(message: str, title: str = "Error"):
    """Report a non-fatal failure the user should see (save, publish, load)

    Always logged and shown in the status bar. In release mode a message box
    is shown as well; in DEBUG_MODE the status bar is enough.
    """
    logging.getLogger('Editor').warning(message)
    if _main_window is None:
        return
    status_bar = _main_window.statusBar()
    if status_bar is not None:
        status_bar.showMessage(message, 8000)
    if not DEBUG_MODE:
        QMessageBox.warning(_main_window, title, message)
