# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

import unittest
from unittest.mock import MagicMock, patch

import requests

from airtable_client.core._http import _HttpClient


class TestHttpClient(unittest.TestCase):
    """Tests for the single-shot HTTP transport."""

    @patch("airtable_client.core._http.requests.request")
    def test_request_without_session_uses_requests(self, mock_request):
        mock_request.return_value = MagicMock(status_code=200)
        client = _HttpClient()

        resp = client._request("GET", "https://example.com", headers={"a": "b"})

        mock_request.assert_called_once_with("GET", "https://example.com", headers={"a": "b"})
        self.assertEqual(resp.status_code, 200)

    def test_request_with_session_uses_session(self):
        session = MagicMock(spec=requests.Session)
        client = _HttpClient(session=session)

        client._request("POST", "https://example.com", data="x", timeout=3)

        session.request.assert_called_once_with("POST", "https://example.com", data="x", timeout=3)

    @patch("airtable_client.core._http.requests.request")
    def test_no_timeout_added_by_default(self, mock_request):
        _HttpClient()._request("GET", "https://example.com")
        self.assertNotIn("timeout", mock_request.call_args.kwargs)

    @patch("airtable_client.core._http.requests.request")
    def test_transport_errors_propagate_without_retry(self, mock_request):
        mock_request.side_effect = requests.exceptions.ConnectionError("down")
        with self.assertRaises(requests.exceptions.ConnectionError):
            _HttpClient()._request("GET", "https://example.com")
        self.assertEqual(mock_request.call_count, 1)

    def test_close_closes_session_once(self):
        session = MagicMock(spec=requests.Session)
        client = _HttpClient(session=session)

        client.close()
        client.close()

        session.close.assert_called_once()
        self.assertIsNone(client._session)


if __name__ == "__main__":
    unittest.main()
