"""
Offline testing support for code built on LobClient.

StubAdapter is a requests transport adapter that answers every request with a
queued canned response and remembers what was sent, so no network is needed.

Usage:
    adapter = StubAdapter()
    adapter.add_json(200, {"id": "adr_123"})
    client = stub_client(adapter)
    client.get("addresses/adr_123")
    assert adapter.requests[0].method == "GET"
"""
import io
import json
from collections import deque
from typing import Any, Deque, Dict, List, Optional, Union

import requests
from requests.adapters import BaseAdapter
from requests.structures import CaseInsensitiveDict

from .remote_client import LobClient


class _FailingBody(io.RawIOBase):
    """Response body whose first read fails like a dropped connection."""

    def readable(self):
        return True

    def read(self, size=-1):
        raise requests.exceptions.ChunkedEncodingError("Connection broken while reading body")


class StubAdapter(BaseAdapter):
    """Transport adapter returning queued responses instead of touching the network."""

    def __init__(self):
        super().__init__()
        self.requests: List[requests.PreparedRequest] = []
        self._queue: Deque[Union[Dict[str, Any], BaseException]] = deque()

    def add(self, status_code: int = 200, body: Union[bytes, str] = b'',
            headers: Optional[Dict[str, str]] = None) -> 'StubAdapter':
        """Queue a raw response."""
        if isinstance(body, str):
            body = body.encode('utf-8')
        self._queue.append({'status_code': status_code, 'body': body, 'headers': headers or {}})
        return self

    def add_json(self, status_code: int, payload: Any) -> 'StubAdapter':
        """Queue a JSON response."""
        return self.add(status_code, json.dumps(payload), {'Content-Type': 'application/json'})

    def add_exception(self, error: BaseException) -> 'StubAdapter':
        """Queue an exception to raise when the next request is sent."""
        self._queue.append(error)
        return self

    def add_broken_body(self, status_code: int = 200) -> 'StubAdapter':
        """Queue a response whose body fails while being read."""
        self._queue.append({'status_code': status_code, 'body': None, 'headers': {}})
        return self

    @property
    def last_request(self) -> Optional[requests.PreparedRequest]:
        return self.requests[-1] if self.requests else None

    def send(self, request, stream=False, timeout=None, verify=True, cert=None, proxies=None):
        self.requests.append(request)
        if not self._queue:
            raise AssertionError(f"No stub response queued for {request.method} {request.url}")

        item = self._queue.popleft()
        if isinstance(item, BaseException):
            raise item

        response = requests.Response()
        response.status_code = item['status_code']
        response.headers = CaseInsensitiveDict(item['headers'])
        response.raw = _FailingBody() if item['body'] is None else io.BytesIO(item['body'])
        response.url = request.url
        response.request = request
        response.reason = 'OK' if item['status_code'] == 200 else 'Error'
        response.encoding = 'utf-8'
        return response

    def close(self):
        pass


def stub_client(adapter: StubAdapter, api_key: str = 'test_key', **kwargs) -> LobClient:
    """Create a LobClient whose session routes every request through adapter."""
    session = requests.Session()
    session.mount('https://', adapter)
    session.mount('http://', adapter)
    return LobClient(api_key, session=session, **kwargs)
