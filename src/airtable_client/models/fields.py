# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Typing aids for Airtable field values.

These carry no behavior. Use them to annotate the field mappings passed to and
returned from the client::

    from airtable_client.models.fields import Attachment, Fields

    def first_photo(fields: Fields) -> Attachment:
        return fields["Photos"][0]
"""

from __future__ import annotations

import datetime as _dt
from typing import Any, Dict, List, Mapping, TypedDict, Union


class Thumbnail(TypedDict):
    url: str
    width: int
    height: int


class Thumbnails(TypedDict):
    small: Thumbnail
    large: Thumbnail
    full: Thumbnail


class _AttachmentBase(TypedDict):
    id: str
    url: str
    filename: str
    size: int
    type: str


class Attachment(_AttachmentBase, total=False):
    thumbnails: Thumbnails


class Collaborator(TypedDict):
    id: str
    email: str
    name: str


# Scalar aliases mirror the field types shown in the Airtable UI
SingleLineText = str
LongText = str
PhoneNumber = str
Email = str
URL = str
Checkbox = bool
Number = float
Currency = float
Percent = float
Duration = float
Rating = int
DateValue = Union[_dt.date, _dt.datetime, str]
MultipleSelect = List[str]
RecordLinks = List[str]
Collaborators = List[Collaborator]
Attachments = List[Attachment]

# Closed union of the documented field value shapes
FieldValue = Union[
    str,
    int,
    float,
    bool,
    _dt.date,
    _dt.datetime,
    List[str],
    Attachments,
    Collaborator,
    Collaborators,
]

# Shapes the service may return for field types not listed above
UnknownFieldValue = Union[None, List[Any], Dict[str, Any]]

AnyFieldValue = Union[FieldValue, UnknownFieldValue]

Fields = Dict[str, AnyFieldValue]
WritableFields = Mapping[str, AnyFieldValue]
