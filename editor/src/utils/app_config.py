"""Backend configuration read from the environment (and an optional .env file)."""
import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from constants import (
    DEFAULT_ASSET_TABLE, DEFAULT_PUBLIC_ORIGIN, DEFAULT_REQUEST_TIMEOUT, DEFAULT_STORAGE_BUCKET
)


@dataclass(frozen=True)
class AppConfig:
    supabase_url: str = ""
    supabase_key: str = ""
    asset_table: str = DEFAULT_ASSET_TABLE
    storage_bucket: str = DEFAULT_STORAGE_BUCKET
    public_origin: str = DEFAULT_PUBLIC_ORIGIN
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT

    @property
    def has_backend(self):
        return bool(self.supabase_url)

    @classmethod
    def from_env(cls, environ=None, load_env_file=True):
        """Build the config from environment variables.

        Args:
            environ: Mapping to read instead of os.environ (tests)
            load_env_file: Load the nearest .env file (working directory upward) first
        """
        if environ is None:
            if load_env_file:
                load_dotenv(find_dotenv(usecwd=True))
            environ = os.environ

        timeout = environ.get('AR_REQUEST_TIMEOUT')
        try:
            timeout = float(timeout) if timeout else DEFAULT_REQUEST_TIMEOUT
        except ValueError:
            timeout = DEFAULT_REQUEST_TIMEOUT

        return cls(
            supabase_url=environ.get('SUPABASE_URL', ''),
            supabase_key=environ.get('SUPABASE_ANON_KEY', ''),
            asset_table=environ.get('AR_ASSET_TABLE') or DEFAULT_ASSET_TABLE,
            storage_bucket=environ.get('AR_STORAGE_BUCKET') or DEFAULT_STORAGE_BUCKET,
            public_origin=environ.get('AR_PUBLIC_ORIGIN') or DEFAULT_PUBLIC_ORIGIN,
            request_timeout=timeout,
        )
