# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Internal pandas helpers"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List

import pandas as pd

from ..models.record import Record

ID_COLUMN = "id"
CREATED_TIME_COLUMN = "createdTime"


def dataframe_to_records(df: pd.DataFrame, na_as_null: bool = False) -> List[Dict[str, Any]]:
    """Convert a DataFrame to a list of field dicts, converting Timestamps to ISO strings.

    :param df: Input DataFrame; columns are field names.
    :param na_as_null: When False (default), missing values are omitted from each dict.
        When True, missing values are included as None (clears the field in Airtable).
    """
    records = []
    for row in df.to_dict(orient="records"):
        clean = {}
        for k, v in row.items():
            if isinstance(v, (list, dict)):
                clean[k] = v
            elif pd.notna(v):
                clean[k] = v.isoformat() if isinstance(v, pd.Timestamp) else v
            elif na_as_null:
                clean[k] = None
        records.append(clean)
    return records


def records_to_dataframe(records: Iterable[Record]) -> pd.DataFrame:
    """Flatten records into a DataFrame with ``id``, ``createdTime`` and one column per field.

    Fields missing from a record (Airtable omits empty fields) become NaN.
    """
    rows = []
    for r in records:
        row: Dict[str, Any] = {ID_COLUMN: r.id, CREATED_TIME_COLUMN: r.created_time}
        row.update(r.fields)
        rows.append(row)
    if not rows:
        return pd.DataFrame(columns=[ID_COLUMN, CREATED_TIME_COLUMN])
    return pd.DataFrame(rows)
