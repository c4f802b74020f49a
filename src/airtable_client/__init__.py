# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Typed client for the Airtable records API.

Example::

    from airtable_client import AirtableClient

    with AirtableClient(api_key="key...", base_id="app...", table_name="Humans") as client:
        page = client.select(max_records=10)
"""

from .__version__ import __version__
from .client import AirtableClient
from .core.config import AirtableConfig, DEFAULT_ENDPOINT_URL
from .core.errors import AirtableError, ConfigurationError, HttpError
from .models.options import RecordOptions, SelectOptions, SortSpec
from .models.record import (
    DeletedRecord,
    DeletedRecordList,
    Record,
    RecordList,
    SelectResult,
)

__all__ = [
    "__version__",
    "AirtableClient",
    "AirtableConfig",
    "DEFAULT_ENDPOINT_URL",
    "AirtableError",
    "ConfigurationError",
    "HttpError",
    "RecordOptions",
    "SelectOptions",
    "SortSpec",
    "Record",
    "RecordList",
    "SelectResult",
    "DeletedRecord",
    "DeletedRecordList",
]
