# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Per-call options for list and write operations.

Provides dataclasses for the query parameters accepted when listing records
and for the flags accepted when writing records.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields as dc_fields, replace
from typing import Any, Dict, List, Mapping, Optional, Union

SORT_DIRECTIONS = ("asc", "desc")
CELL_FORMATS = ("json", "string")


@dataclass(frozen=True)
class SortSpec:
    """
    One sort criterion.

    :param field: Field name to sort on.
    :type field: str
    :param direction: ``"asc"`` or ``"desc"``. ``None`` means ascending and is not sent.
    :type direction: str or None
    :raises ValueError: If ``direction`` is not one of the supported values.
    """

    field: str
    direction: Optional[str] = None

    def __post_init__(self) -> None:
        if self.direction is not None and self.direction not in SORT_DIRECTIONS:
            raise ValueError(f"direction must be one of {SORT_DIRECTIONS}, got {self.direction!r}")

    @classmethod
    def from_value(cls, value: Union["SortSpec", Mapping[str, Any], str]) -> "SortSpec":
        if isinstance(value, SortSpec):
            return value
        if isinstance(value, str):
            return cls(value)
        return cls(value["field"], value.get("direction"))

    def to_dict(self) -> Dict[str, str]:
        d = {"field": self.field}
        if self.direction is not None:
            d["direction"] = self.direction
        return d


# Python attribute -> wire name; order is the order parameters are sent in
_SELECT_WIRE_NAMES = {
    "fields": "fields",
    "filter_by_formula": "filterByFormula",
    "max_records": "maxRecords",
    "page_size": "pageSize",
    "sort": "sort",
    "view": "view",
    "cell_format": "cellFormat",
    "time_zone": "timeZone",
    "user_locale": "userLocale",
    "offset": "offset",
}
_SELECT_ATTR_NAMES = {wire: attr for attr, wire in _SELECT_WIRE_NAMES.items()}


def _attr_kwargs(data: Mapping[str, Any]) -> Dict[str, Any]:
    kwargs: Dict[str, Any] = {}
    for key, value in data.items():
        attr = _SELECT_ATTR_NAMES.get(key, key)
        if attr not in _SELECT_WIRE_NAMES:
            raise TypeError(f"Unknown select option: {key!r}")
        kwargs[attr] = value
    return kwargs


@dataclass
class SelectOptions:
    """
    Query parameters for listing records.

    :param fields: Only return these fields.
    :type fields: list[str] or None
    :param filter_by_formula: Airtable formula; passed through as-is.
    :type filter_by_formula: str or None
    :param max_records: Maximum total number of records to return.
    :type max_records: int or None
    :param page_size: Number of records per page.
    :type page_size: int or None
    :param sort: Ordered sort criteria.
    :type sort: list[SortSpec]
    :param view: View name or id.
    :type view: str or None
    :param cell_format: ``"json"`` or ``"string"``.
    :type cell_format: str or None
    :param time_zone: Time zone used when ``cell_format`` is ``"string"``.
    :type time_zone: str or None
    :param user_locale: Locale used when ``cell_format`` is ``"string"``.
    :type user_locale: str or None
    :param offset: Continuation token from a previous :class:`SelectResult`.
    :type offset: str or None

    Example::

        options = SelectOptions(
            fields=["Name", "Age"],
            max_records=100,
            sort=[SortSpec("Name"), SortSpec("Age", "desc")],
        )
        result = client.select(options)
    """

    fields: Optional[List[str]] = None
    filter_by_formula: Optional[str] = None
    max_records: Optional[int] = None
    page_size: Optional[int] = None
    sort: List[SortSpec] = field(default_factory=list)
    view: Optional[str] = None
    cell_format: Optional[str] = None
    time_zone: Optional[str] = None
    user_locale: Optional[str] = None
    offset: Optional[str] = None

    def __post_init__(self) -> None:
        self.sort = [SortSpec.from_value(s) for s in (self.sort or [])]
        if self.cell_format is not None and self.cell_format not in CELL_FORMATS:
            raise ValueError(f"cell_format must be one of {CELL_FORMATS}, got {self.cell_format!r}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SelectOptions":
        """
        Build options from a mapping keyed by wire names or attribute names.

        :raises TypeError: If a key is not a known option.
        """
        return cls(**_attr_kwargs(data))

    def with_overrides(self, overrides: Mapping[str, Any]) -> "SelectOptions":
        """
        Return a copy with ``overrides`` applied; keys may be wire or attribute names.

        :raises TypeError: If a key is not a known option.
        """
        if not overrides:
            return self
        return replace(self, **_attr_kwargs(overrides))

    def to_query(self) -> Dict[str, Any]:
        """
        Return the query parameters keyed by wire name, omitting unset values.

        :rtype: dict
        """
        query: Dict[str, Any] = {}
        for f in dc_fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            if isinstance(value, list) and not value:
                continue
            if f.name == "sort":
                value = [s.to_dict() for s in value]
            query[_SELECT_WIRE_NAMES[f.name]] = value
        return query


@dataclass(frozen=True)
class RecordOptions:
    """
    Flags sent with create, update and replace requests.

    :param typecast: Let the service convert string values to the field type.
    :type typecast: bool or None
    """

    typecast: Optional[bool] = None

    @classmethod
    def coerce(cls, value: Union["RecordOptions", Mapping[str, Any], None]) -> Dict[str, Any]:
        """Return the request body entries for ``value`` (an instance, a dict, or None)."""
        if value is None:
            return {}
        if isinstance(value, RecordOptions):
            return value.to_body()
        return dict(value)

    def to_body(self) -> Dict[str, Any]:
        if self.typecast is None:
            return {}
        return {"typecast": self.typecast}


__all__ = ["SortSpec", "SelectOptions", "RecordOptions"]
