"""HTTP client for the accounting REST API."""

import logging
from typing import Any, Optional

import httpx

from ledgerflow.domain.entities import Currency, JournalEntry
from ledgerflow.domain.errors import (
    SourceError,
    fetch_failed,
    http_status_error,
    missing_token,
)
from ledgerflow.source.base import EntrySource
from ledgerflow.source.mappers import (
    currency_to_domain,
    journal_entry_to_domain,
    records_from_envelope,
)

logger = logging.getLogger(__name__)

JOURNAL_ENTRIES_PATH = "/accounting/journal-entries"
CURRENCIES_PATH = "/accounting/currencies"


class HttpEntrySource(EntrySource):
    """Fetches journal entries and currencies with a bearer token.

    Requests are made once; a failed request raises SourceError and the
    caller decides whether to try again.
    """

    def __init__(
        self,
        base_url: str,
        token: Optional[str],
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._token = token
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.Client | None = None

    def _get_client(self) -> httpx.Client:
        if not self._token:
            raise SourceError(missing_token())
        if self._client is None:
            self._client = httpx.Client(
                base_url=self._base_url,
                timeout=self._timeout,
                headers={"Authorization": f"Bearer {self._token}"},
                transport=self._transport,
            )
        return self._client

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def _get_records(self, path: str) -> list[dict[str, Any]]:
        client = self._get_client()
        logger.debug("GET %s%s", self._base_url, path)
        try:
            response = client.get(path)
        except httpx.HTTPError as e:
            logger.warning("Request to %s failed: %s", path, e)
            raise SourceError(fetch_failed(str(e))) from e

        if not response.is_success:
            raise SourceError(http_status_error(response.status_code))

        try:
            payload = response.json()
        except ValueError as e:
            raise SourceError(fetch_failed("Response is not valid JSON")) from e

        records = records_from_envelope(payload)
        logger.debug("Fetched %d records from %s", len(records), path)
        return records

    def list_journal_entries(self) -> list[JournalEntry]:
        return [journal_entry_to_domain(r) for r in self._get_records(JOURNAL_ENTRIES_PATH)]

    def list_currencies(self) -> list[Currency]:
        return [currency_to_domain(r) for r in self._get_records(CURRENCIES_PATH)]
