# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

from __future__ import annotations

from dataclasses import replace as _replace
from typing import Any, Dict, List, Mapping, Optional, Union

import requests

from .core.config import AirtableConfig
from .data._table import _TableClient
from .models.fields import WritableFields
from .models.options import RecordOptions, SelectOptions
from .models.record import (
    DeletedRecord,
    DeletedRecordList,
    Record,
    RecordList,
    SelectResult,
)

OptionsArg = Union[RecordOptions, Mapping[str, Any], None]
SelectArg = Union[SelectOptions, Mapping[str, Any], None]


class AirtableClient:
    """
    Client for the records of one Airtable table.

    The client holds an :class:`~airtable_client.core.config.AirtableConfig` that
    names the credentials and the target base and table. Every operation maps to
    exactly one HTTP request; there is no automatic retry or pagination.

    **Context Manager Support (Recommended)**:
        Using the client as a context manager creates a shared HTTP session so
        consecutive calls reuse connections::

            with AirtableClient(api_key="key...", base_id="app...", table_name="Humans") as client:
                record = client.create({"Name": "Ada"})
            # Session closed

    **Without Context Manager**:
        Each call opens its own connection. Call ``close()`` when done if a
        session was supplied or created::

            client = AirtableClient(use_env=True)
            try:
                page = client.select(max_records=10)
            finally:
                client.close()

    Configuration is resolved at construction in this order, later sources
    winning: ``AIRTABLE_*`` environment variables (only when ``use_env`` is
    true), the built-in endpoint ``https://api.airtable.com/v0``, the ``config``
    argument, then the explicit keyword arguments. The environment is read once.

    :param api_key: API key or personal access token.
    :type api_key: :class:`str` | None
    :param endpoint_url: API root URL.
    :type endpoint_url: :class:`str` | None
    :param base_id: Base identifier.
    :type base_id: :class:`str` | None
    :param table_name: Table name or identifier.
    :type table_name: :class:`str` | None
    :param use_env: Seed the configuration from ``AIRTABLE_API_KEY``,
        ``AIRTABLE_ENDPOINT_URL``, ``AIRTABLE_BASE_ID`` and ``AIRTABLE_TABLE_NAME``.
    :type use_env: :class:`bool`
    :param environ: Mapping used instead of :data:`os.environ` when ``use_env`` is true.
    :type environ: :class:`~typing.Mapping` | None
    :param config: Base configuration merged before the keyword arguments.
    :type config: ~airtable_client.core.config.AirtableConfig | None
    :param timeout: Request timeout in seconds. ``None`` applies no timeout.
    :type timeout: :class:`float` | None
    :param session: Caller-owned session to send requests through. It is not
        closed by :meth:`close`.
    :type session: :class:`requests.Session` | None

    Missing settings are not an error at construction; each operation checks
    them and raises :class:`~airtable_client.core.errors.ConfigurationError`
    before sending anything.

    Example:
        Listing and writing records::

            from airtable_client import AirtableClient, SortSpec

            client = AirtableClient(api_key="key...", base_id="app...", table_name="Humans")

            page = client.select(
                fields=["Name", "Age"],
                sort=[SortSpec("Name"), SortSpec("Age", "desc")],
                view="Grid view",
            )
            for record in page:
                print(record.id, record["Name"])

            created = client.create([{"Name": "Foo"}, {"Name": "Bar"}], {"typecast": True})
            client.update(created[0].id, {"Age": 30})
            client.delete(created.ids)
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        endpoint_url: Optional[str] = None,
        base_id: Optional[str] = None,
        table_name: Optional[str] = None,
        *,
        use_env: bool = False,
        environ: Optional[Mapping[str, str]] = None,
        config: Optional[AirtableConfig] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        seed = AirtableConfig.from_env(environ) if use_env else AirtableConfig()
        explicit = {
            "api_key": api_key,
            "endpoint_url": endpoint_url,
            "base_id": base_id,
            "table_name": table_name,
            "http_timeout": timeout,
        }
        self._config = (
            seed.merged(AirtableConfig.defaults())
            .merged(config)
            .merged(**{k: v for k, v in explicit.items() if v is not None})
        )
        self._table: Optional[_TableClient] = None
        self._session: Optional[requests.Session] = session
        self._owns_session: bool = False

    def __enter__(self) -> "AirtableClient":
        """
        Enter the context manager.

        Creates an HTTP session for connection pooling unless one was supplied.

        :return: The client instance.
        :rtype: AirtableClient
        """
        if self._session is None:
            self._session = requests.Session()
            self._owns_session = True
            # Drop any session-less table client so the new session is used.
            self._table = None
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """
        Release the HTTP session created by the context manager.

        Safe to call multiple times. A session passed to the constructor is left open.
        """
        if self._table is not None and self._owns_session:
            self._table.close()
        self._table = None
        if self._session is not None and self._owns_session:
            self._session.close()
            self._session = None
            self._owns_session = False

    def _get_table(self) -> _TableClient:
        """
        Get or create the internal records API client.

        :return: The lazily-initialized low-level client used to perform HTTP requests.
        :rtype: ~airtable_client.data._table._TableClient
        """
        if self._table is None:
            self._table = _TableClient(session=self._session)
        return self._table

    # ---------------- Configuration ----------------
    @property
    def config(self) -> AirtableConfig:
        """The current (immutable) configuration."""
        return self._config

    def configure(self, config: Optional[AirtableConfig] = None, **overrides: Any) -> "AirtableClient":
        """
        Merge settings into the current configuration.

        :param config: Configuration whose set fields override the current ones.
        :type config: ~airtable_client.core.config.AirtableConfig | None
        :param overrides: Field overrides, e.g. ``api_key="..."``. Passing ``None`` clears the setting.
        :return: The client, for chaining.
        :rtype: AirtableClient
        :raises TypeError: If an override names an unknown field.

        Example::

            client.configure(api_key="key...").base("app...").table("Humans")
        """
        self._config = self._config.merged(config, **overrides)
        return self

    def base(self, base_id: str) -> "AirtableClient":
        """Switch to another base. Returns the client for chaining."""
        self._config = _replace(self._config, base_id=base_id)
        return self

    def table(self, table_name: str) -> "AirtableClient":
        """Switch to another table. Returns the client for chaining."""
        self._config = _replace(self._config, table_name=table_name)
        return self

    # ---------------- Read ----------------
    def select(self, options: SelectArg = None, **kwargs: Any) -> SelectResult:
        """
        List one page of records.

        :param options: Query options, as :class:`SelectOptions` or a dict keyed by
            wire names (``filterByFormula``) or attribute names (``filter_by_formula``).
        :param kwargs: Option attributes applied on top of ``options``.
        :return: The records and the continuation ``offset`` (if any).
        :rtype: ~airtable_client.models.record.SelectResult

        :raises ConfigurationError: If the configuration is incomplete.
        :raises HttpError: If the service rejects the request.

        Example::

            page = client.select(filter_by_formula="{Age}='27'", max_records=50)
            nxt = client.select(filter_by_formula="{Age}='27'", offset=page.offset)
        """
        opts = self._select_options(options, kwargs)
        body = self._get_table()._select(self._config, opts.to_query())
        return SelectResult.from_dict(body or {})

    def find(self, record_id: str) -> Record:
        """
        Retrieve a single record by id.

        :raises TypeError: If ``record_id`` is not a string.
        """
        if not isinstance(record_id, str):
            raise TypeError("record_id must be str")
        body = self._get_table()._get(self._config, record_id)
        return Record.from_dict(body or {})

    # ---------------- Create ----------------
    def create(
        self,
        data: Union[WritableFields, List[WritableFields]],
        options: OptionsArg = None,
    ) -> Union[Record, RecordList]:
        """
        Create one or more records.

        Detects single vs batch from the type of ``data``:

        - dict: creates one record, returns :class:`Record`
        - list[dict]: creates one record per item, returns :class:`RecordList`

        :param data: Field values, or a list of field value dicts.
        :param options: :class:`RecordOptions` or a dict such as ``{"typecast": True}``.
        :raises TypeError: If ``data`` is neither a dict nor a list.
        """
        if isinstance(data, list):
            return self.create_many(data, options)
        if isinstance(data, Mapping):
            return self.create_one(data, options)
        raise TypeError("data must be dict or list[dict]")

    def create_one(self, fields: WritableFields, options: OptionsArg = None) -> Record:
        body = self._get_table()._create(self._config, fields, RecordOptions.coerce(options))
        return Record.from_dict(body or {})

    def create_many(self, records: List[WritableFields], options: OptionsArg = None) -> RecordList:
        if not all(isinstance(r, Mapping) for r in records):
            raise TypeError("All items for batch create must be dicts")
        body = self._get_table()._create_multiple(self._config, records, RecordOptions.coerce(options))
        return RecordList.from_dict(body or {})

    # ---------------- Update / replace ----------------
    def update(
        self,
        target: Union[str, List[Union[Record, Mapping[str, Any]]]],
        fields: Optional[Any] = None,
        options: OptionsArg = None,
    ) -> Union[Record, RecordList]:
        """
        Update one or more records, changing only the given fields (PATCH).

        Supports two patterns:

        1. Single: ``update("recXXX", {"Age": 30}, options)``
        2. Batch: ``update([{"id": "recXXX", "fields": {...}}, ...], options)``

        In the batch form the second positional argument is taken as ``options``.

        :raises TypeError: If ``target`` is neither a str nor a list, or the single
            form is missing ``fields``.
        """
        return self._update_dispatch(target, fields, options, replace=False)

    def update_one(self, record_id: str, fields: WritableFields, options: OptionsArg = None) -> Record:
        body = self._get_table()._update(
            self._config, record_id, fields, RecordOptions.coerce(options), replace=False
        )
        return Record.from_dict(body or {})

    def update_many(
        self, records: List[Union[Record, Mapping[str, Any]]], options: OptionsArg = None
    ) -> RecordList:
        body = self._get_table()._update_multiple(
            self._config, self._batch_payload(records), RecordOptions.coerce(options), replace=False
        )
        return RecordList.from_dict(body or {})

    def replace(
        self,
        target: Union[str, List[Union[Record, Mapping[str, Any]]]],
        fields: Optional[Any] = None,
        options: OptionsArg = None,
    ) -> Union[Record, RecordList]:
        """
        Replace one or more records (PUT); fields not sent are cleared.

        Takes the same arguments as :meth:`update`.
        """
        return self._update_dispatch(target, fields, options, replace=True)

    def replace_one(self, record_id: str, fields: WritableFields, options: OptionsArg = None) -> Record:
        body = self._get_table()._update(
            self._config, record_id, fields, RecordOptions.coerce(options), replace=True
        )
        return Record.from_dict(body or {})

    def replace_many(
        self, records: List[Union[Record, Mapping[str, Any]]], options: OptionsArg = None
    ) -> RecordList:
        body = self._get_table()._update_multiple(
            self._config, self._batch_payload(records), RecordOptions.coerce(options), replace=True
        )
        return RecordList.from_dict(body or {})

    # ---------------- Delete ----------------
    def delete(self, ids: Union[str, List[str]]) -> Union[DeletedRecord, DeletedRecordList]:
        """
        Delete one or more records.

        :param ids: A record id, or a list of record ids.
        :return: :class:`DeletedRecord` for a single id, :class:`DeletedRecordList` for a list.
        :raises TypeError: If ``ids`` is not str or list[str].

        Example::

            client.delete("recXXXXXXXXXXXXXX")
            client.delete(["recAAAAAAAAAAAAAA", "recBBBBBBBBBBBBBB"])
        """
        if isinstance(ids, str):
            return self.delete_one(ids)
        if isinstance(ids, list):
            return self.delete_many(ids)
        raise TypeError("ids must be str or list[str]")

    def delete_one(self, record_id: str) -> DeletedRecord:
        body = self._get_table()._delete(self._config, record_id)
        return DeletedRecord.from_dict(body or {})

    def delete_many(self, record_ids: List[str]) -> DeletedRecordList:
        if not all(isinstance(rid, str) for rid in record_ids):
            raise TypeError("ids must contain string record ids")
        body = self._get_table()._delete_multiple(self._config, record_ids)
        return DeletedRecordList.from_dict(body or {})

    # ---------------- DataFrame helpers ----------------
    def select_dataframe(self, options: SelectArg = None, **kwargs: Any):
        """
        List one page of records as a pandas DataFrame.

        Columns are ``id``, ``createdTime`` and one column per returned field.
        The continuation token is not included; use :meth:`select` to paginate.

        :rtype: pandas.DataFrame
        """
        from .utils._pandas import records_to_dataframe

        return records_to_dataframe(self.select(options, **kwargs))

    def create_dataframe(self, df, options: OptionsArg = None):
        """
        Create one record per DataFrame row in a single batch request.

        Missing values are omitted and Timestamps are sent as ISO 8601 strings.

        :param df: Rows to create; columns are field names.
        :type df: pandas.DataFrame
        :return: Created record ids, aligned with ``df.index``.
        :rtype: pandas.Series
        :raises TypeError: If ``df`` is not a DataFrame.
        """
        import pandas as pd

        from .utils._pandas import dataframe_to_records

        if not isinstance(df, pd.DataFrame):
            raise TypeError("df must be a pandas DataFrame")
        if df.empty:
            return pd.Series([], index=df.index, dtype="object")
        created = self.create_many(dataframe_to_records(df), options)
        return pd.Series(created.ids, index=df.index, dtype="object")

    # ---------------- Internal helpers ----------------
    @staticmethod
    def _select_options(options: SelectArg, overrides: Dict[str, Any]) -> SelectOptions:
        if options is None:
            return SelectOptions.from_dict(overrides)
        if isinstance(options, SelectOptions):
            return options.with_overrides(overrides)
        if isinstance(options, Mapping):
            return SelectOptions.from_dict({**options, **overrides})
        raise TypeError("options must be SelectOptions or dict")

    @staticmethod
    def _batch_payload(records: List[Union[Record, Mapping[str, Any]]]) -> List[Dict[str, Any]]:
        payload: List[Dict[str, Any]] = []
        for r in records:
            if isinstance(r, Record):
                payload.append({"id": r.id, "fields": dict(r.fields)})
            elif isinstance(r, Mapping) and "id" in r:
                payload.append({"id": r["id"], "fields": dict(r.get("fields") or {})})
            else:
                raise TypeError("Batch items must be Record or dict with 'id' and 'fields'")
        return payload

    def _update_dispatch(self, target, fields, options, *, replace: bool):
        if isinstance(target, str):
            if not isinstance(fields, Mapping):
                raise TypeError("For a single id, fields must be a dict")
            if replace:
                return self.replace_one(target, fields, options)
            return self.update_one(target, fields, options)
        if isinstance(target, list):
            if fields is not None:
                if options is not None:
                    raise TypeError("Batch form takes (records, options)")
                options = fields
            if replace:
                return self.replace_many(target, options)
            return self.update_many(target, options)
        raise TypeError("target must be str or list")


__all__ = ["AirtableClient"]
