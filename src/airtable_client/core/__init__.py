# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Core infrastructure components for the Airtable client.

This module contains the foundational components: configuration, the HTTP
transport, and error handling.
"""

__all__ = []
