"""QThread workers that keep network and decode work off the UI thread.

Results come back through signals, which Qt queues onto the receiver's
(UI) thread.
"""

import logging

from PyQt5.QtCore import QThread, pyqtSignal

logger = logging.getLogger('Workers')


class AssetLoadWorker(QThread):
    """Loads one asset resource and reports it tagged with its generation."""

    loaded = pyqtSignal(int, object)  # generation, LoadedAsset

    def __init__(self, loader, asset, generation, parent=None):
        super().__init__(parent)
        self.loader = loader
        self.asset = asset
        self.generation = generation

    def run(self):
        result = self.loader.load(self.asset)
        self.loaded.emit(self.generation, result)


class TaskWorker(QThread):
    """Runs fn(*args) once and reports the return value or the error text."""

    completed = pyqtSignal(object)  # return value of fn
    failed = pyqtSignal(str)        # error message

    def __init__(self, fn, *args, parent=None):
        super().__init__(parent)
        self.fn = fn
        self.args = args

    def run(self):
        try:
            result = self.fn(*self.args)
        except Exception as e:
            logger.exception("Background task failed")
            self.failed.emit(str(e))
            return
        self.completed.emit(result)
