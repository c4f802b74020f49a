# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Request construction and dispatch for the records API.

Internal; use :class:`~airtable_client.client.AirtableClient`.
"""

__all__ = []
