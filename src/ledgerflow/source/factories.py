"""Entry source factory functions."""

import os
from typing import Optional

from ledgerflow.source.base import EntrySource
from ledgerflow.source.file_source import JsonFileEntrySource
from ledgerflow.source.http_source import HttpEntrySource

DEFAULT_API_URL = "https://nvccz-pi.vercel.app/api"


def create_entry_source(
    api_url: Optional[str] = None,
    token: Optional[str] = None,
    input_path: Optional[str] = None,
) -> EntrySource:
    """Create an entry source.

    Args:
        api_url: Base URL of the accounting API. If None, checks
            LEDGERFLOW_API_URL, then falls back to the hosted API.
        token: Bearer token. If None, checks LEDGERFLOW_API_TOKEN.
        input_path: JSON file to read instead of calling the API

    Returns:
        JsonFileEntrySource when input_path is given, else HttpEntrySource
    """
    if input_path is not None:
        return JsonFileEntrySource(input_path)

    if api_url is None:
        api_url = os.environ.get("LEDGERFLOW_API_URL", DEFAULT_API_URL)
    if token is None:
        token = os.environ.get("LEDGERFLOW_API_TOKEN")

    return HttpEntrySource(api_url, token)
