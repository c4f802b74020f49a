# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

# HTTP subcode constants
HTTP_400 = "http_400"
HTTP_401 = "http_401"
HTTP_403 = "http_403"
HTTP_404 = "http_404"
HTTP_413 = "http_413"
HTTP_422 = "http_422"
HTTP_429 = "http_429"
HTTP_500 = "http_500"
HTTP_502 = "http_502"
HTTP_503 = "http_503"
HTTP_504 = "http_504"

# Statuses the records API documents, mapped to their subcodes
HTTP_STATUS_TO_SUBCODE = {
    400: HTTP_400,
    401: HTTP_401,
    403: HTTP_403,
    404: HTTP_404,
    413: HTTP_413,
    422: HTTP_422,
    429: HTTP_429,
    500: HTTP_500,
    502: HTTP_502,
    503: HTTP_503,
    504: HTTP_504,
}

# Statuses worth retrying by the caller; the client itself never retries
TRANSIENT_STATUS_CODES = {429, 500, 502, 503, 504}

# Configuration subcodes
CONFIG_MISSING_API_KEY = "config_missing_api_key"
CONFIG_MISSING_ENDPOINT_URL = "config_missing_endpoint_url"
CONFIG_MISSING_BASE_ID = "config_missing_base_id"
CONFIG_MISSING_TABLE_NAME = "config_missing_table_name"


def _http_subcode(status: int) -> str:
    """Subcode for ``status``; statuses without a constant get ``http_<status>``."""
    return HTTP_STATUS_TO_SUBCODE.get(status, f"http_{status}")


def _is_transient_status(status: int) -> bool:
    return status in TRANSIENT_STATUS_CODES
