# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping, Optional

DEFAULT_ENDPOINT_URL = "https://api.airtable.com/v0"

# Environment variable -> config field
ENV_VARS = {
    "AIRTABLE_API_KEY": "api_key",
    "AIRTABLE_ENDPOINT_URL": "endpoint_url",
    "AIRTABLE_BASE_ID": "base_id",
    "AIRTABLE_TABLE_NAME": "table_name",
}


@dataclass(frozen=True)
class AirtableConfig:
    """
    Connection settings for a single Airtable table.

    Instances are immutable; :meth:`merged` returns a new instance so a request
    that already read the configuration is unaffected by later changes.

    :param api_key: Personal access token or API key sent as a bearer token.
    :type api_key: str or None
    :param endpoint_url: API root, for example ``"https://api.airtable.com/v0"``.
    :type endpoint_url: str or None
    :param base_id: Base identifier (``app...``).
    :type base_id: str or None
    :param table_name: Table name or table identifier (``tbl...``).
    :type table_name: str or None
    :param use_env: Whether the client was seeded from environment variables.
    :type use_env: bool
    :param http_timeout: Request timeout in seconds. ``None`` leaves the transport default.
    :type http_timeout: float or None
    """

    api_key: Optional[str] = None
    endpoint_url: Optional[str] = None
    base_id: Optional[str] = None
    table_name: Optional[str] = None
    use_env: bool = False

    http_timeout: Optional[float] = None

    def merged(self, other: Optional["AirtableConfig"] = None, **overrides: Any) -> "AirtableConfig":
        """
        Shallow, right-biased merge.

        Fields set on ``other`` (differing from the field default) override this
        instance, then keyword ``overrides`` override both. An override of
        ``None`` clears the setting.

        :raises TypeError: If an override names an unknown field.
        """
        changes = {}
        if other is not None:
            for f in fields(other):
                value = getattr(other, f.name)
                if value != f.default:
                    changes[f.name] = value
        known = {f.name for f in fields(self)}
        for key, value in overrides.items():
            if key not in known:
                raise TypeError(f"Unknown configuration field: {key!r}")
            changes[key] = value
        return replace(self, **changes)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AirtableConfig":
        """
        Build a configuration from ``AIRTABLE_*`` environment variables.

        :param environ: Mapping to read from. Defaults to :data:`os.environ`.
        :return: Configuration with ``use_env`` set.
        :rtype: AirtableConfig
        """
        env = os.environ if environ is None else environ
        values = {name: env.get(var) or None for var, name in ENV_VARS.items()}
        return cls(use_env=True, **values)

    @classmethod
    def defaults(cls) -> "AirtableConfig":
        return cls(endpoint_url=DEFAULT_ENDPOINT_URL)
