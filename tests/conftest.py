# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Shared pytest fixtures and configuration for Airtable client tests.
"""

import pytest

from airtable_client.core.config import AirtableConfig
from tests.unit.test_helpers import API_KEY, BASE_ID, ENDPOINT, TABLE_NAME


@pytest.fixture
def test_config():
    """Complete configuration pointing at the test table."""
    return AirtableConfig(
        api_key=API_KEY,
        endpoint_url=ENDPOINT,
        base_id=BASE_ID,
        table_name=TABLE_NAME,
    )


@pytest.fixture
def fake_environ():
    """Environment mapping supplying every AIRTABLE_* variable."""
    return {
        "AIRTABLE_API_KEY": "keyFromEnv",
        "AIRTABLE_ENDPOINT_URL": "https://proxy.example.com/v0",
        "AIRTABLE_BASE_ID": "appFromEnv",
        "AIRTABLE_TABLE_NAME": "Table From Env",
    }


@pytest.fixture
def sample_fields():
    """Sample field values for a record."""
    return {"Name": "Griko Nibras", "Age": 25, "Active": True}
