"""
Undo/Redo History Log for the AR Scene Editor

Linear history of transform snapshots with a current index.
Recording after an undo discards the undone branch.
"""

import logging
from dataclasses import dataclass


@dataclass(frozen=True)
class HistoryEntry:
	transform: object
	description: str = ""


class HistoryManager:
	"""Manages undo/redo history of transform snapshots"""
	
	def __init__(self, initial_transform=None, max_history=None):
		"""
		Initialize the history manager
		
		Args:
			initial_transform: Entry 0 (the transform at asset selection time)
			max_history: Maximum number of entries to keep, None for unbounded
		"""
		self.max_history = max_history
		self.history = []  # List of HistoryEntry
		self.current_index = -1  # -1 means no entries yet
		self._listeners = []  # Callbacks to notify on state changes
		self._logger = logging.getLogger('History')
		if initial_transform is not None:
			self.reset(initial_transform)
	
	def __len__(self):
		return len(self.history)
	
	def record(self, transform, description=""):
		"""
		Append a transform after the current index
		
		Everything after the current index is discarded first. Transforms are
		immutable, so no copy is taken. Does not trigger any rendering.
		
		Args:
			transform: Transform snapshot to record
			description: Optional description of the change
		"""
		# Drop the redo branch
		if self.current_index < len(self.history) - 1:
			self.history = self.history[:self.current_index + 1]
		
		self.history.append(HistoryEntry(transform, description))
		self.current_index = len(self.history) - 1
		
		# Trim oldest entries when capped
		if self.max_history is not None and len(self.history) > self.max_history:
			overflow = len(self.history) - self.max_history
			self.history = self.history[overflow:]
			self.current_index -= overflow
		
		self._notify_listeners()
		self._logger.debug("Recorded: %s (index: %d, total: %d)", description, self.current_index, len(self.history))
	
	def undo(self):
		"""
		Move back one entry
		
		Returns:
			Transform at the new index, or None if already at index 0
		"""
		if not self.can_undo():
			self._logger.debug("Cannot undo - at beginning of history")
			return None
		
		self.current_index -= 1
		entry = self.history[self.current_index]
		self._notify_listeners()
		self._logger.debug("Undo to: %s (index: %d)", entry.description, self.current_index)
		return entry.transform
	
	def redo(self):
		"""
		Move forward one entry
		
		Returns:
			Transform at the new index, or None if already at the end
		"""
		if not self.can_redo():
			self._logger.debug("Cannot redo - at end of history")
			return None
		
		self.current_index += 1
		entry = self.history[self.current_index]
		self._notify_listeners()
		self._logger.debug("Redo to: %s (index: %d)", entry.description, self.current_index)
		return entry.transform
	
	def reset(self, transform, description="Select asset"):
		"""Replace the whole history with a single entry at index 0"""
		self.history = [HistoryEntry(transform, description)]
		self.current_index = 0
		self._notify_listeners()
		self._logger.debug("History reset: %s", description)
	
	def current(self):
		"""Transform at the current index, or None when empty"""
		if 0 <= self.current_index < len(self.history):
			return self.history[self.current_index].transform
		return None
	
	def can_undo(self):
		"""Check if undo is available"""
		return self.current_index > 0
	
	def can_redo(self):
		"""Check if redo is available"""
		return self.current_index < len(self.history) - 1
	
	def add_listener(self, callback):
		"""
		Add a listener to be notified when history state changes
		
		Args:
			callback: Function receiving (can_undo, can_redo)
		"""
		self._listeners.append(callback)
	
	def remove_listener(self, callback):
		"""Remove a listener"""
		if callback in self._listeners:
			self._listeners.remove(callback)
	
	def _notify_listeners(self):
		"""Notify all listeners of history state change"""
		for callback in self._listeners:
			try:
				callback(self.can_undo(), self.can_redo())
			except Exception:
				self._logger.exception("Error notifying listener")
	
	def get_current_description(self):
		"""Get the description of the current entry"""
		if 0 <= self.current_index < len(self.history):
			return self.history[self.current_index].description
		return ""
	
	def get_undo_description(self):
		"""Get the description of the entry that undo would leave"""
		if self.can_undo():
			return self.history[self.current_index].description
		return ""
	
	def get_redo_description(self):
		"""Get the description of the entry that redo would restore"""
		if self.can_redo():
			return self.history[self.current_index + 1].description
		return ""
