# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
HTTP transport with optional session support.

This module provides :class:`~airtable_client.core._http._HttpClient`, a thin
wrapper around the requests library. It sends exactly one request per call and
never retries; retry and backoff decisions belong to the caller.
"""

from __future__ import annotations

from typing import Any, Optional

import requests


class _HttpClient:
    """
    HTTP transport with optional session support.

    :param session: Optional requests.Session for connection pooling. If provided,
        all requests use this session for connection reuse.
    :type session: :class:`requests.Session` | None
    """

    def __init__(self, session: Optional[requests.Session] = None) -> None:
        self._session = session

    def _request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        """
        Execute a single HTTP request.

        No timeout is applied unless ``timeout`` is passed; the requests default
        (wait indefinitely) applies otherwise.

        :param method: HTTP method (GET, POST, PATCH, PUT, DELETE).
        :type method: :class:`str`
        :param url: Target URL for the request.
        :type url: :class:`str`
        :param kwargs: Additional arguments passed to ``requests.request()`` or
            ``session.request()``, including headers, data and timeout.
        :return: HTTP response object.
        :rtype: :class:`requests.Response`
        :raises requests.exceptions.RequestException: If the request fails at the transport level.
        """
        if self._session is not None:
            return self._session.request(method, url, **kwargs)
        return requests.request(method, url, **kwargs)

    def close(self) -> None:
        """
        Close the HTTP client and release resources.

        If a session was provided, this method closes it. Safe to call multiple times.
        """
        if self._session is not None:
            self._session.close()
            self._session = None
