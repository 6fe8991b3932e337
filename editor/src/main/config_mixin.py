"""Configuration management for SceneEditorWindow"""

import os
import json
from utils.logger import loggerRaise
from models.scene import TransformMode


class ConfigMixin:
	"""Configuration file operations and recent assets"""
	
	def _load_config(self):
		"""Load recent assets and view settings from config file"""
		self.recent_assets = []
		self._config_mode = None
		self._config_show_grid = None
		try:
			if os.path.exists(self.config_file):
				with open(self.config_file, 'r', encoding='utf-8') as f:
					config = json.load(f)
				self.recent_assets = [str(a) for a in config.get('recent_assets', [])][:self.max_recent_assets]
				self._config_mode = config.get('last_mode')
				self._config_show_grid = config.get('show_grid')
		except json.JSONDecodeError as e:
			self._logger.warning("Ignoring unreadable config %s: %s", self.config_file, e)
		except Exception as e:
			loggerRaise(e, "Error loading config")
	
	def _apply_config(self):
		"""Restore the view settings read by _load_config onto the session"""
		if self._config_mode:
			try:
				self.session.set_mode(TransformMode(self._config_mode))
			except ValueError:
				self._logger.warning("Unknown gizmo mode in config: %s", self._config_mode)
		if self._config_show_grid is not None:
			self.session.update_settings(show_grid=bool(self._config_show_grid))
	
	def _save_config(self):
		"""Save recent assets and view settings to config file"""
		try:
			# Create config directory if it doesn't exist
			os.makedirs(self.config_dir, exist_ok=True)
			
			config = {
				'recent_assets': self.recent_assets[:self.max_recent_assets],
				'last_mode': self.session.mode.value,
				'show_grid': self.session.settings.show_grid,
			}
			
			with open(self.config_file, 'w', encoding='utf-8') as f:
				json.dump(config, f, indent=2)
		except Exception as e:
			loggerRaise(e, "Error saving config")
	
	def _add_to_recent_assets(self, asset_id):
		"""Add an asset id to the recent assets list"""
		# Remove if already in list
		if asset_id in self.recent_assets:
			self.recent_assets.remove(asset_id)
		
		# Add to front of list
		self.recent_assets.insert(0, asset_id)
		
		# Trim to max size
		self.recent_assets = self.recent_assets[:self.max_recent_assets]
		
		# Update menu
		if hasattr(self, 'recent_menu'):
			self._update_recent_assets_menu()
		
		self._save_config()
	
	def _update_recent_assets_menu(self):
		"""Update the Recent Assets submenu"""
		self.recent_menu.clear()
		
		if not self.recent_assets:
			no_recent = self.recent_menu.addAction("No Recent Assets")
			no_recent.setEnabled(False)
			return
		
		for i, asset_id in enumerate(self.recent_assets):
			action = self.recent_menu.addAction(f"&{i + 1}. {asset_id}")
			action.triggered.connect(lambda checked, a=asset_id: self.open_asset(a))
		
		self.recent_menu.addSeparator()
		clear_action = self.recent_menu.addAction("Clear Recent Assets")
		clear_action.triggered.connect(self._clear_recent_assets)
	
	def _clear_recent_assets(self):
		self.recent_assets = []
		self._update_recent_assets_menu()
		self._save_config()
