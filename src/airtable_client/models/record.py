# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Record data models for Airtable tables.

Provides typed representations of the JSON documents returned by the records
API, with dict-like access to record fields. Response bodies are converted as
they are; nothing is validated against the table schema.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Optional

from .fields import Fields

# Type alias for semantic clarity
RecordId = str  # e.g., "recXXXXXXXXXXXXXX"


@dataclass
class Record:
    """
    A single table record.

    :param id: Record identifier assigned by Airtable.
    :type id: str
    :param fields: Field values keyed by field name.
    :type fields: ~airtable_client.models.fields.Fields
    :param created_time: ISO 8601 creation timestamp, when the service returns one.
    :type created_time: str | None

    Example:
        Structured access::

            record = client.find("recXXXXXXXXXXXXXX")
            print(record.id)
            print(record.created_time)

        Dict-like access::

            print(record["Name"])
            record["Age"] = 30
            for name in record:
                print(name, record[name])
    """

    id: RecordId
    fields: Fields = field(default_factory=dict)
    created_time: Optional[str] = None

    def __getitem__(self, key: str) -> Any:
        return self.fields[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self.fields[key] = value

    def __delitem__(self, key: str) -> None:
        del self.fields[key]

    def __contains__(self, key: object) -> bool:
        return key in self.fields

    def __iter__(self) -> Iterator[str]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a field value with an optional default.

        :param key: Field name.
        :type key: str
        :param default: Value returned when the field is absent (Airtable omits empty fields).
        :return: Field value or default.
        """
        return self.fields.get(key, default)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Record":
        """
        Create a record from an API response document.

        :param data: Document with ``id``, ``fields`` and optionally ``createdTime``.
        :type data: dict
        :rtype: Record
        """
        return cls(
            id=data.get("id", ""),
            fields=dict(data.get("fields") or {}),
            created_time=data.get("createdTime"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to the API document shape.

        ``createdTime`` is included only when known.

        :rtype: dict
        """
        d: Dict[str, Any] = {"id": self.id, "fields": dict(self.fields)}
        if self.created_time is not None:
            d["createdTime"] = self.created_time
        return d


@dataclass
class RecordList:
    """Ordered records returned by batch create, update and replace."""

    records: List[Record] = field(default_factory=list)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    def __getitem__(self, index: int) -> Record:
        return self.records[index]

    @property
    def ids(self) -> List[RecordId]:
        return [r.id for r in self.records]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RecordList":
        return cls(records=[Record.from_dict(r) for r in data.get("records") or []])


@dataclass
class SelectResult(RecordList):
    """
    One page of records from a list request.

    :param offset: Continuation token. Pass it back as ``SelectOptions.offset`` to
        fetch the next page; ``None`` on the last page.
    :type offset: str | None

    Example::

        result = client.select(page_size=50)
        while True:
            for record in result:
                print(record["Name"])
            if result.offset is None:
                break
            result = client.select(page_size=50, offset=result.offset)
    """

    offset: Optional[str] = None

    @property
    def has_more(self) -> bool:
        return self.offset is not None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SelectResult":
        return cls(
            records=[Record.from_dict(r) for r in data.get("records") or []],
            offset=data.get("offset"),
        )


@dataclass(frozen=True)
class DeletedRecord:
    """Confirmation for one deleted record."""

    id: RecordId
    deleted: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DeletedRecord":
        return cls(id=data.get("id", ""), deleted=bool(data.get("deleted", False)))


@dataclass
class DeletedRecordList:
    """Confirmations returned by a batch delete."""

    records: List[DeletedRecord] = field(default_factory=list)

    def __iter__(self) -> Iterator[DeletedRecord]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    def __getitem__(self, index: int) -> DeletedRecord:
        return self.records[index]

    @property
    def ids(self) -> List[RecordId]:
        return [r.id for r in self.records]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DeletedRecordList":
        return cls(records=[DeletedRecord.from_dict(r) for r in data.get("records") or []])


__all__ = [
    "RecordId",
    "Record",
    "RecordList",
    "SelectResult",
    "DeletedRecord",
    "DeletedRecordList",
]
