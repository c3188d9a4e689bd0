"""
Remote HTTP API client for lob.com using the requests library.

All three verbs share one pipeline: build the request, send it, read the whole
body, decode it, then classify the outcome. The body is decoded even when the
status is not 200 so callers can inspect the API's own error description on
the raised APIStatusError.
"""
import logging
import time
from pathlib import Path
from typing import Any, Mapping, Optional, Type, Union
from urllib.parse import urlencode

import requests
from pydantic import BaseModel
from requests.auth import HTTPBasicAuth

from .base_client import APIClient
from .exceptions import (
    APIStatusError,
    BodyReadError,
    DecodeError,
    NetworkError,
    RequestConstructionError,
)
from .metrics import MetricsSink
from .response import APIResponse
from ..config.logging import log_stack_trace
from ..config.settings import API_VERSION, BASE_API, LobConfig
from ..forms import LobRecord, encode_form, query_string

Params = Optional[Union[Mapping[str, str], LobRecord]]
ResponseModel = Optional[Type[BaseModel]]


class LobClient(APIClient):
    """Client for the lob.com REST API.

    Example:
        client = LobClient("test_xxxxxxxx")
        address = client.get("addresses/adr_123", response_model=Address)
    """

    def __init__(self, api_key: str, base_api: str = BASE_API, api_version: str = API_VERSION,
                 session: Optional[requests.Session] = None, logger: Optional[logging.Logger] = None,
                 metrics: Optional[MetricsSink] = None):
        """Initialize the client.

        Args:
            api_key: lob.com API key, sent as the Basic auth user name
            base_api: Base endpoint all resources are relative to
            api_version: Value of the Lob-Version header
            session: requests.Session to send through (a new one is created if omitted)
            logger: Logger for request and diagnostic records
            metrics: Sink that receives one observation per call
        """
        self.config = LobConfig(api_key=api_key, base_api=base_api, api_version=api_version)
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()
        self.logger = logger if logger is not None else logging.getLogger(__name__)
        self.metrics = metrics or MetricsSink()

    @classmethod
    def from_config(cls, config: LobConfig, **kwargs) -> 'LobClient':
        """Create a client from a resolved LobConfig."""
        return cls(config.api_key, base_api=config.base_api, api_version=config.api_version, **kwargs)

    @classmethod
    def from_env(cls, **kwargs) -> 'LobClient':
        """Create a client from LOB_* environment variables."""
        return cls.from_config(LobConfig.from_env(), **kwargs)

    @classmethod
    def from_yaml(cls, path: Union[str, Path], **kwargs) -> 'LobClient':
        """Create a client from a YAML config file; LOB_* environment variables override its values."""
        return cls.from_config(LobConfig.from_yaml(path), **kwargs)

    def close(self):
        """Close the underlying session if this client created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def get(self, resource: str, params: Params = None, response_model: ResponseModel = None,
            operation: Optional[str] = None) -> Any:
        """Perform a GET request; params are sent as the query string."""
        return self._call('GET', resource, _to_form(params), response_model, operation)

    def post(self, resource: str, params: Params = None, response_model: ResponseModel = None,
             operation: Optional[str] = None) -> Any:
        """Perform a POST request; params are sent as a url-encoded form body."""
        return self._call('POST', resource, _to_form(params), response_model, operation)

    def delete(self, resource: str, response_model: ResponseModel = None,
               operation: Optional[str] = None) -> Any:
        """Perform a DELETE request."""
        return self._call('DELETE', resource, None, response_model, operation)

    def _call(self, method: str, resource: str, form: Optional[Mapping[str, str]],
              response_model: ResponseModel, operation: Optional[str]) -> Any:
        url = self.config.base_api + resource
        if method == 'GET':
            url += query_string(form)
        self.logger.debug(f"Lob {method} {url}")

        start = time.monotonic()
        error = None
        try:
            response = self._send(method, url, form)
            return self._decode_response(response, response_model)
        except Exception as e:
            error = e
            raise
        finally:
            self.metrics.record(operation or f"{method.lower()} {resource}",
                                time.monotonic() - start, error)

    def _send(self, method: str, url: str, form: Optional[Mapping[str, str]]) -> APIResponse:
        """Send one request and read its whole body."""
        headers = {
            'Lob-Version': self.config.api_version,
            'Accept': 'application/json',
        }
        data = None
        if method == 'POST' and form:
            data = urlencode(form)
            headers['Content-Type'] = 'application/x-www-form-urlencoded'

        try:
            request = requests.Request(method, url, headers=headers, data=data,
                                       auth=HTTPBasicAuth(self.config.api_key, ''))
            prepared = self.session.prepare_request(request)
        except (requests.exceptions.RequestException, ValueError) as e:
            error = RequestConstructionError(f"Could not build {method} request for {url}: {e}", url=url)
            log_stack_trace(self.logger, error)
            raise error from e

        try:
            settings = self.session.merge_environment_settings(prepared.url, {}, True, None, None)
            raw = self.session.send(prepared, **settings)
        except requests.exceptions.RequestException as e:
            error = NetworkError(f"{method} {url} failed: {e}", url=url)
            log_stack_trace(self.logger, error)
            raise error from e

        try:
            body = raw.content
        except (requests.exceptions.RequestException, OSError) as e:
            error = BodyReadError(f"Could not read response body from {url}: {e}", url=url)
            log_stack_trace(self.logger, error)
            raise error from e
        finally:
            raw.close()

        return APIResponse(
            status_code=raw.status_code,
            body=body or b'',
            url=url,
            headers=dict(raw.headers)
        )

    def _decode_response(self, response: APIResponse, response_model: ResponseModel) -> Any:
        """Decode the body and classify the outcome by status code."""
        if not response.ok:
            # Try anyway, in case the caller wants the API's error info
            try:
                result = _decode(response, response_model)
            except (ValueError, RecursionError):
                self.logger.debug(f"Error body from {response.url} did not decode")
                result = None
            error = APIStatusError(response.status_code, response.url, response.body, result=result)
            log_stack_trace(self.logger, error)
            raise error

        try:
            return _decode(response, response_model)
        except (ValueError, RecursionError) as e:
            error = DecodeError(f"Could not decode response from {response.url}: {e}",
                                url=response.url, body=response.body)
            log_stack_trace(self.logger, error)
            raise error from e


def _to_form(params: Params) -> Optional[Mapping[str, str]]:
    """Encode a LobRecord into a wire form; pass mappings and None through."""
    if isinstance(params, LobRecord):
        return encode_form(params)
    return params


def _decode(response: APIResponse, response_model: ResponseModel) -> Any:
    """Decode a JSON body, into response_model when one is given.

    Raises ValueError (JSONDecodeError, UnicodeDecodeError or pydantic ValidationError),
    or RecursionError when the JSON nests deeper than the parser can follow.
    """
    data = response.json()
    if response_model is None:
        return data
    return response_model.model_validate(data)
