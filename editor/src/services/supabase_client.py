"""Thin PostgREST/Storage client for the hosted asset backend.

Constructed once by the application and passed to whoever needs it; there is
no module-level client instance.
"""

import logging
import re

import requests

from constants import (
    ASSET_COLUMNS, DEFAULT_ASSET_TABLE, DEFAULT_REQUEST_TIMEOUT, DEFAULT_STORAGE_BUCKET
)

logger = logging.getLogger('Supabase')


class BackendError(Exception):
    """Any failure talking to the backend (network, HTTP status, bad payload)"""


class SupabaseClient:
    """REST access to the asset table and public storage bucket.

    Args:
        url: Project URL, e.g. https://xyz.supabase.co
        key: API key (anon key or user access token)
        table: Asset table name
        bucket: Public storage bucket holding asset files
        session: requests.Session to use (injected in tests)
        timeout: Per-request timeout in seconds
    """

    def __init__(self, url, key, table=DEFAULT_ASSET_TABLE, bucket=DEFAULT_STORAGE_BUCKET,
                 session=None, timeout=DEFAULT_REQUEST_TIMEOUT):
        if not url:
            raise ValueError("Backend URL is required")
        self.url = url.rstrip('/')
        self.key = key or ""
        self.table = table
        self.bucket = bucket
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()

    @property
    def headers(self):
        return {
            'apikey': self.key,
            'Authorization': f"Bearer {self.key}",
            'Content-Type': 'application/json',
        }

    @property
    def rest_url(self):
        return f"{self.url}/rest/v1/{self.table}"

    @property
    def storage_base_url(self):
        return f"{self.url}/storage/v1/object/public/{self.bucket}/"

    def _request(self, method, url, **kwargs):
        headers = dict(self.headers)
        headers.update(kwargs.pop('headers', {}))
        try:
            response = self.session.request(method, url, headers=headers, timeout=self.timeout, **kwargs)
        except requests.exceptions.Timeout as e:
            raise BackendError(f"Request timed out: {url}") from e
        except requests.exceptions.RequestException as e:
            raise BackendError(f"Network error: {e}") from e
        if not 200 <= response.status_code < 300:
            raise BackendError(f"HTTP {response.status_code}: {response.text or response.reason}")
        return response

    def fetch_asset(self, asset_id):
        """Fetch a single asset row by id.

        Raises:
            BackendError: on transport errors or when no row matches
        """
        params = {'id': f"eq.{asset_id}", 'select': ','.join(ASSET_COLUMNS)}
        response = self._request('GET', self.rest_url, params=params)
        try:
            rows = response.json()
        except ValueError as e:
            raise BackendError("Malformed response from backend") from e
        if not rows:
            raise BackendError(f"Asset {asset_id} not found")
        return rows[0]

    def list_assets(self):
        """All asset rows visible to the current key, ordered by name"""
        params = {'select': ','.join(ASSET_COLUMNS), 'order': 'project_name.asc'}
        response = self._request('GET', self.rest_url, params=params)
        try:
            return response.json()
        except ValueError as e:
            raise BackendError("Malformed response from backend") from e

    def update_asset(self, asset_id, fields):
        """PATCH the given columns of one asset row"""
        params = {'id': f"eq.{asset_id}"}
        self._request('PATCH', self.rest_url, params=params, json=fields,
                      headers={'Prefer': 'return=minimal'})
        logger.info("Updated asset %s: %s", asset_id, sorted(fields))

    def clean_target_path(self, target_path):
        """Reduce a stored target path to an object key inside the bucket.

        Stored values may be bare keys, full public URLs of this project, or
        absolute URLs that contain '<bucket>/'.
        """
        if target_path.startswith(self.storage_base_url):
            return target_path[len(self.storage_base_url):]
        if target_path.startswith('https://') or target_path.startswith('http://'):
            match = re.search(re.escape(self.bucket) + r"/(.+)", target_path)
            if match:
                return match.group(1)
        return target_path

    def public_url(self, target_path):
        """Public download URL for a stored target path"""
        if not target_path:
            return ""
        key = self.clean_target_path(target_path)
        return self.storage_base_url + key
