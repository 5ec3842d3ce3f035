"""
app/db/supabase.py

Purpose: Delivery log store (Supabase / PostgREST)

- Appends one row per delivery attempt to email_logs / sms_logs
- Inserts go through the PostgREST endpoint with the anon key
- A fresh HTTP client is opened for every insert
- DeliveryLogWriter wraps the store with a best-effort contract:
  failures are logged and counted, never raised to the request
"""

from threading import Lock
from typing import Any, Dict, Optional

import httpx

from app.core.exceptions import LogStoreError
from app.core.http import HttpClientFactory
from app.core.logging import get_logger
from utils.constants import SUPABASE_REST_PATH

logger = get_logger(__name__)


class SupabaseLogStore:
    """Append-only writer for Supabase tables."""

    def __init__(
        self,
        url: Optional[str],
        anon_key: Optional[str],
        client_factory: HttpClientFactory,
    ):
        self.url = url.rstrip("/") if url else None
        self.anon_key = anon_key
        self._client_factory = client_factory

    def is_configured(self) -> bool:
        return bool(self.url and self.anon_key)

    def _headers(self) -> Dict[str, str]:
        return {
            "apikey": self.anon_key,
            "Authorization": f"Bearer {self.anon_key}",
            "Content-Type": "application/json",
            "Prefer": "return=minimal",
        }

    async def insert(self, table: str, record: Dict[str, Any]) -> None:
        """
        Inserts a single row.

        Raises:
            LogStoreError: store not configured, request failed, or
                PostgREST rejected the row (e.g. the table does not exist)
        """
        if not self.is_configured():
            raise LogStoreError("Supabase configuration missing", table=table)

        url = self.url + SUPABASE_REST_PATH.format(table=table)

        try:
            async with self._client_factory() as client:
                response = await client.post(url, json=record, headers=self._headers())
        except httpx.HTTPError as e:
            raise LogStoreError(f"Supabase request failed: {e}", table=table) from e

        if not response.is_success:
            raise LogStoreError(
                f"Supabase insert into {table} failed: {response.status_code} - {response.text[:300]}",
                table=table
            )


class DeliveryDiagnostics:
    """
    Counts log-store failures per table.
    Surfaced on /health so swallowed write errors stay visible.
    """

    def __init__(self):
        self._lock = Lock()
        self._log_failures: Dict[str, int] = {}
        self.last_error: Optional[str] = None

    def record_log_failure(self, table: str, error: Exception) -> None:
        with self._lock:
            self._log_failures[table] = self._log_failures.get(table, 0) + 1
            self.last_error = str(error)

    def log_failures(self, table: Optional[str] = None) -> int:
        with self._lock:
            if table is not None:
                return self._log_failures.get(table, 0)
            return sum(self._log_failures.values())

    def snapshot(self) -> Dict[str, Any]:
        with self._lock:
            return {
                "log_write_failures": dict(self._log_failures),
                "last_log_error": self.last_error,
            }


class DeliveryLogWriter:
    """
    Best-effort, non-propagating log writer.

    append() never raises: any failure is logged as a warning and reported
    to the diagnostics hook, and the caller carries on.
    """

    def __init__(self, store: SupabaseLogStore, diagnostics: DeliveryDiagnostics):
        self.store = store
        self.diagnostics = diagnostics

    async def append(self, table: str, record: Dict[str, Any]) -> bool:
        """
        Appends a delivery record.

        Returns:
            True if the row was written, False otherwise
        """
        try:
            await self.store.insert(table, record)
        except Exception as e:
            logger.warning(
                f"Delivery log not stored, continuing without logging: {e}",
                extra={"table": table}
            )
            self.diagnostics.record_log_failure(table, e)
            return False

        logger.debug(f"Delivery log stored in {table}", extra={"table": table})
        return True
