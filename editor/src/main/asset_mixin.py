"""Asset listing, selection and background loading for SceneEditorWindow"""

from models.asset import AssetRecord
from services.workers import AssetLoadWorker, TaskWorker
from utils.logger import report_error


class AssetMixin:
    """Backend asset list, asset selection and off-thread resource loads"""

    # ------------------------------------------------------------------
    # Worker bookkeeping
    # ------------------------------------------------------------------

    def _start_worker(self, worker):
        """Keep a reference to worker until its thread finishes"""
        self._workers.add(worker)
        worker.finished.connect(lambda w=worker: self._workers.discard(w))
        worker.start()
        return worker

    def _run_task(self, fn, *args, on_done=None, on_failed=None):
        worker = TaskWorker(fn, *args, parent=self)
        if on_done is not None:
            worker.completed.connect(on_done)
        if on_failed is not None:
            worker.failed.connect(on_failed)
        return self._start_worker(worker)

    def _wait_for_workers(self, timeout_ms=5000):
        """Block until running workers finish (window shutdown)"""
        for worker in list(self._workers):
            worker.wait(timeout_ms)

    # ------------------------------------------------------------------
    # Asset list
    # ------------------------------------------------------------------

    def refresh_asset_list(self):
        """Fetch the asset rows for the hierarchy panel"""
        if self.client is None:
            self.hierarchy_panel.set_assets([])
            return
        self.status_left.setText("Fetching assets...")
        self._run_task(self._fetch_asset_records, on_done=self._on_assets_listed,
                       on_failed=lambda message: report_error(f"Failed to list assets: {message}"))

    def _fetch_asset_records(self):
        return [self._record_from_row(row) for row in self.client.list_assets()]

    def _on_assets_listed(self, assets):
        self.hierarchy_panel.set_assets(assets)
        self.hierarchy_panel.set_selected(self.session.asset)
        self.status_left.setText(f"{len(assets)} assets")

    def _record_from_row(self, row):
        return AssetRecord.from_row(row, self.client.public_url(row.get('target_path') or ""))

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def open_asset(self, asset_id):
        """Fetch asset_id from the backend and make it the edited asset

        Only the most recent request is applied; fetches that return after a
        newer open_asset() call are dropped.
        """
        asset_id = str(asset_id)
        if asset_id == self._pending_asset_id:
            return
        current = self.session.asset
        if current is not None and current.id == asset_id:
            # Back to the asset already being edited: forget any newer pending fetch
            self._pending_asset_id = None
            return
        if self.client is None:
            report_error("No backend configured (set SUPABASE_URL and SUPABASE_ANON_KEY)",
                         "Backend Not Configured")
            return
        self._pending_asset_id = asset_id
        self.status_left.setText(f"Opening asset {asset_id}...")
        self._run_task(lambda: self._record_from_row(self.client.fetch_asset(asset_id)),
                       on_done=self._on_asset_fetched,
                       on_failed=lambda message: self._on_asset_fetch_failed(asset_id, message))

    def _on_asset_fetched(self, asset):
        if asset.id != self._pending_asset_id:
            self._logger.debug("Dropping stale fetch of asset %s (pending: %s)", asset.id, self._pending_asset_id)
            return
        self.select_asset_record(asset)

    def _on_asset_fetch_failed(self, asset_id, message):
        if asset_id != self._pending_asset_id:
            return
        self._pending_asset_id = None
        report_error(f"Failed to open asset {asset_id}: {message}")

    def select_asset_record(self, asset):
        """Switch editing to asset and start loading its resource"""
        self._pending_asset_id = None
        self.viewport_area.transform_widget.cancel_drag()
        if self.transform_actions.is_dragging:
            self.transform_actions.cancel_drag()

        self.saved_transform = asset.transform
        generation = self.session.select_asset(asset)
        self._add_to_recent_assets(asset.id)
        self.status_left.setText(f"Loading {asset.name or asset.id}...")

        worker = AssetLoadWorker(self.asset_loader, asset, generation, parent=self)
        worker.loaded.connect(self._on_asset_loaded)
        self._start_worker(worker)

    def _on_asset_loaded(self, generation, loaded):
        if not self.session.apply_loaded_asset(generation, loaded):
            return
        if loaded.placeholder:
            self.status_left.setText(loaded.warning or "Asset failed to load")
        else:
            self.status_left.setText("Asset loaded")
