# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Low-level records API client: URL construction, request dispatch and error mapping.

Every method takes the :class:`~airtable_client.core.config.AirtableConfig` to use
for that call, so a single call always sees one consistent configuration even if
the owning client is reconfigured meanwhile.
"""

from __future__ import annotations

import datetime as _dt
import json
import logging
from typing import Any, Dict, List, Mapping, Optional
from urllib.parse import quote

import requests

from ..core import _error_codes as ec
from ..core._http import _HttpClient
from ..core.config import AirtableConfig
from ..core.errors import ConfigurationError, HttpError
from ._query import serialize_query

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
JSON_CONTENT_TYPE = "application/json"


def _json_default(value: Any) -> Any:
    """Serialize dates and datetimes as ISO 8601 strings."""
    if isinstance(value, (_dt.date, _dt.datetime)):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class _TableClient:
    """Records API client for one table: URL building, dispatch and operation payloads."""

    def __init__(self, session: Optional[requests.Session] = None) -> None:
        self._http = _HttpClient(session=session)

    # ----------------------------- URLs ---------------------------------
    @staticmethod
    def _require_config(config: AirtableConfig) -> None:
        """Raise ConfigurationError for the first missing required setting."""
        if not config.api_key:
            raise ConfigurationError(
                "An API key is required to connect to Airtable",
                subcode=ec.CONFIG_MISSING_API_KEY,
            )
        if not config.endpoint_url:
            raise ConfigurationError("Endpoint URL is not defined", subcode=ec.CONFIG_MISSING_ENDPOINT_URL)
        if not config.base_id:
            raise ConfigurationError("Base ID is not defined", subcode=ec.CONFIG_MISSING_BASE_ID)
        if not config.table_name:
            raise ConfigurationError("Table Name is not defined", subcode=ec.CONFIG_MISSING_TABLE_NAME)

    def _build_url(
        self,
        config: AirtableConfig,
        query: Optional[Mapping[str, Any]] = None,
        *segments: str,
    ) -> str:
        """
        Build ``<endpoint>/<base>/<table>[/<segment>...][?<query>]``.

        The table name is percent-encoded. Each segment is joined with ``/``,
        so an empty segment yields a trailing ``/``. The query marker is added
        only when the serialized query is non-empty.

        :raises ConfigurationError: If the API key, endpoint, base or table is missing.
        """
        self._require_config(config)
        url = "/".join(
            [
                config.endpoint_url,
                config.base_id,
                quote(config.table_name, safe=""),
                *segments,
            ]
        )
        qs = serialize_query(query or {})
        if qs:
            url = f"{url}?{qs}"
        return url

    # --------------------------- Dispatch -------------------------------
    def _headers(self, config: AirtableConfig) -> Dict[str, str]:
        return {"Authorization": f"Bearer {config.api_key}"}

    def _request(
        self,
        config: AirtableConfig,
        method: str,
        url: str,
        *,
        headers: Optional[Mapping[str, str]] = None,
        data: Optional[str] = None,
    ) -> Any:
        """
        Send one request and return the decoded JSON body.

        Caller headers are merged after the authorization header, so a caller
        entry with the same name wins.

        :raises HttpError: If the response status is outside 2xx.
        :raises requests.exceptions.RequestException: On transport failures.
        """
        merged = {**self._headers(config), **(headers or {})}
        kwargs: Dict[str, Any] = {"headers": merged}
        if data is not None:
            kwargs["data"] = data
        if config.http_timeout is not None:
            kwargs["timeout"] = config.http_timeout

        logger.debug("%s %s", method, url)
        r = self._http._request(method, url, **kwargs)

        status = r.status_code
        if not 200 <= status < 300:
            reason = getattr(r, "reason", None) or ""
            message = f"{status} {reason}".strip()
            logger.warning("Airtable request failed: %s %s -> %s", method, url, message)
            raise HttpError(
                message,
                status,
                payload=r.text,
                subcode=ec._http_subcode(status),
                is_transient=ec._is_transient_status(status),
            )
        if not r.text:
            return None
        return r.json()

    def _json_request(
        self,
        config: AirtableConfig,
        method: str,
        url: str,
        *,
        json_body: Any,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        merged = {**(headers or {}), "Content-Type": JSON_CONTENT_TYPE}
        return self._request(
            config,
            method,
            url,
            headers=merged,
            data=json.dumps(json_body, default=_json_default),
        )

    # ----------------------------- CRUD ---------------------------------
    def _select(self, config: AirtableConfig, query: Mapping[str, Any]) -> Any:
        return self._request(config, "GET", self._build_url(config, query))

    def _get(self, config: AirtableConfig, record_id: str) -> Any:
        return self._request(config, "GET", self._build_url(config, {}, record_id))

    def _create(
        self, config: AirtableConfig, fields: Mapping[str, Any], options: Mapping[str, Any]
    ) -> Any:
        """POST ``{"fields": ..., **options}``."""
        body = {"fields": dict(fields), **options}
        return self._json_request(config, "POST", self._build_url(config), json_body=body)

    def _create_multiple(
        self,
        config: AirtableConfig,
        records: List[Mapping[str, Any]],
        options: Mapping[str, Any],
    ) -> Any:
        """POST ``{"records": [{"fields": ...}, ...], **options}``."""
        body = {"records": [{"fields": dict(f)} for f in records], **options}
        return self._json_request(config, "POST", self._build_url(config), json_body=body)

    def _update(
        self,
        config: AirtableConfig,
        record_id: str,
        fields: Mapping[str, Any],
        options: Mapping[str, Any],
        *,
        replace: bool = False,
    ) -> Any:
        """PATCH (or PUT when ``replace``) ``{"fields": ..., **options}`` to the record URL."""
        method = "PUT" if replace else "PATCH"
        body = {"fields": dict(fields), **options}
        return self._json_request(config, method, self._build_url(config, {}, record_id), json_body=body)

    def _update_multiple(
        self,
        config: AirtableConfig,
        records: List[Mapping[str, Any]],
        options: Mapping[str, Any],
        *,
        replace: bool = False,
    ) -> Any:
        """PATCH (or PUT when ``replace``) ``{"records": [...], **options}`` to the table URL."""
        method = "PUT" if replace else "PATCH"
        body = {"records": list(records), **options}
        return self._json_request(config, method, self._build_url(config), json_body=body)

    def _delete(self, config: AirtableConfig, record_id: str) -> Any:
        return self._request(
            config,
            "DELETE",
            self._build_url(config, {}, record_id),
            headers={"Content-Type": FORM_CONTENT_TYPE},
        )

    def _delete_multiple(self, config: AirtableConfig, record_ids: List[str]) -> Any:
        """DELETE with a form body of ``records[]=<id>`` entries against ``<table>/``."""
        body = "&".join(f"records[]={quote(rid, safe='')}" for rid in record_ids)
        return self._request(
            config,
            "DELETE",
            self._build_url(config, {}, ""),
            headers={"Content-Type": FORM_CONTENT_TYPE},
            data=body,
        )

    def close(self) -> None:
        self._http.close()
