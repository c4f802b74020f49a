# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Query string serialization for the records API."""

from __future__ import annotations

from typing import Any, List, Mapping, Tuple
from urllib.parse import quote

from ..models.options import SortSpec


def _format_value(value: Any) -> str:
    """Render a scalar as its wire text (booleans lowercase, everything else via ``str``)."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _sort_pairs(sort: Any) -> List[Tuple[str, str]]:
    pairs: List[Tuple[str, str]] = []
    for i, item in enumerate(sort or []):
        criterion = SortSpec.from_value(item)
        pairs.append((f"sort[{i}][field]", criterion.field))
        if criterion.direction is not None:
            pairs.append((f"sort[{i}][direction]", criterion.direction))
    return pairs


def query_pairs(query: Mapping[str, Any]) -> List[Tuple[str, str]]:
    """
    Flatten query parameters into ordered ``(key, value)`` pairs.

    Sort criteria come first as indexed ``sort[i][field]`` / ``sort[i][direction]``
    entries, followed by the remaining parameters in mapping order. List values
    repeat as ``key[]`` entries. ``None`` values and empty lists are dropped.

    :param query: Parameters keyed by wire name.
    :type query: Mapping[str, Any]
    :rtype: list[tuple[str, str]]
    """
    pairs = _sort_pairs(query.get("sort"))
    for key, value in query.items():
        if key == "sort" or value is None:
            continue
        if isinstance(value, (list, tuple)):
            pairs.extend((f"{key}[]", _format_value(v)) for v in value)
        else:
            pairs.append((key, _format_value(value)))
    return pairs


def serialize_query(query: Mapping[str, Any]) -> str:
    """
    Render query parameters as a percent-encoded query string without a leading ``?``.

    Brackets in generated keys are kept literal; everything else is escaped.
    Returns an empty string when there is nothing to send.

    Example::

        serialize_query({"filterByFormula": "{Age}='27'", "sort": [{"field": "Name"}]})
        # "sort[0][field]=Name&filterByFormula=%7BAge%7D%3D%2727%27"
    """
    return "&".join(
        f"{quote(key, safe='[]')}={quote(value, safe='')}" for key, value in query_pairs(query)
    )


__all__ = ["query_pairs", "serialize_query"]
