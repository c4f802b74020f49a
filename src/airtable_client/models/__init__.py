# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Data models and type definitions for the Airtable client.

- :class:`~airtable_client.models.record.Record`: Record representation with dict-like access.
- :class:`~airtable_client.models.options.SelectOptions`: List query options.
- :class:`~airtable_client.models.options.RecordOptions`: Write options.
- :mod:`~airtable_client.models.fields`: Typing aids for field values.

Import directly from the specific module files, or from the top-level package.
"""

__all__ = []
