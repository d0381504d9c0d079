#!/usr/bin/env python3

# Copyright (C) 2023-2024 The bsvscript developers
#
# This file is part of bsvscript. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of bsvscript including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""HTTP transport for broadcasters.

Broadcasters only need a minimal fetch capability:
perform a request, asynchronously return a response-like result.

default_http_client picks the implementation
by probing the running environment:

* a host-provided async fetch callable, if any, is wrapped as is;
* the BSVSCRIPT_HTTP_CLIENT environment variable may disable HTTP
  ("none") or force the urllib adapter ("urllib");
* the urllib adapter if urllib supports HTTPS;
* otherwise a client whose fetch always fails.

The request timeout of the urllib adapter (in seconds)
is read from BSVSCRIPT_HTTP_TIMEOUT, defaulting to 30.
"""

import asyncio
import json
import logging
import os
import urllib.request as urlrequest
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from ssl import SSLContext
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional
from urllib.error import HTTPError, URLError

from bsvscript.exceptions import BSVScriptRuntimeError, BSVScriptValueError

log = logging.getLogger(__name__)

HTTP_CLIENT_ENV = "BSVSCRIPT_HTTP_CLIENT"
HTTP_TIMEOUT_ENV = "BSVSCRIPT_HTTP_TIMEOUT"
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class HttpClientRequestOptions:
    method: str = "GET"
    headers: Dict[str, str] = field(default_factory=dict)
    # bytes and str are sent as they are, anything else as JSON
    data: Any = None


@dataclass(frozen=True)
class HttpClientResponse:
    ok: bool
    status: int
    status_text: str
    # decoded JSON if possible, else the raw text
    data: Any = None


Fetch = Callable[[str, HttpClientRequestOptions], Awaitable[HttpClientResponse]]


class HttpClient(ABC):
    @abstractmethod
    async def fetch(
        self, url: str, options: Optional[HttpClientRequestOptions] = None
    ) -> HttpClientResponse:
        "Perform the HTTP request."


class FetchHttpClient(HttpClient):
    "Adapter for a host-provided async fetch callable."

    def __init__(self, fetch: Fetch) -> None:
        self._fetch = fetch

    async def fetch(
        self, url: str, options: Optional[HttpClientRequestOptions] = None
    ) -> HttpClientResponse:
        return await self._fetch(url, options or HttpClientRequestOptions())


class NoHttpClient(HttpClient):
    "Client for environments where no HTTP implementation is available."

    async def fetch(
        self, url: str, options: Optional[HttpClientRequestOptions] = None
    ) -> HttpClientResponse:
        raise BSVScriptRuntimeError("No method available to perform HTTP request")


def _response(status: int, status_text: str, raw: bytes) -> HttpClientResponse:
    text = raw.decode("utf-8", errors="replace")
    try:
        # Try to decode the response as JSON, but fall back to just
        # returning the string.
        data = json.loads(text)
    except json.JSONDecodeError:
        data = text
    return HttpClientResponse(200 <= status < 300, status, status_text, data)


class UrllibHttpClient(HttpClient):
    """urllib.request adapter.

    The blocking request runs in the default executor of the running loop.
    HTTP error statuses are returned as not ok responses;
    failing to reach the server raises BSVScriptRuntimeError.
    """

    def __init__(
        self, timeout: float = DEFAULT_TIMEOUT, context: Optional[SSLContext] = None
    ) -> None:
        self.timeout = timeout
        self.context = context

    def _request(
        self, url: str, options: HttpClientRequestOptions
    ) -> HttpClientResponse:
        headers = dict(options.headers)
        encoded = None
        if isinstance(options.data, str):
            encoded = options.data.encode("utf-8")
        elif isinstance(options.data, bytes):
            encoded = options.data
        elif options.data is not None:
            encoded = json.dumps(options.data).encode("utf-8")
            headers.setdefault("Content-Type", "application/json")

        req = urlrequest.Request(
            url, data=encoded, headers=headers, method=options.method
        )
        try:
            with urlrequest.urlopen(
                req, timeout=self.timeout, context=self.context
            ) as resp:
                return _response(resp.status, resp.reason, resp.read())
        except HTTPError as err:
            return _response(err.code, str(err.reason), err.read())
        except URLError as err:
            raise BSVScriptRuntimeError(
                f"Error in requesting URL {url}: {err.reason}"
            ) from err

    async def fetch(
        self, url: str, options: Optional[HttpClientRequestOptions] = None
    ) -> HttpClientResponse:
        options = options or HttpClientRequestOptions()
        log.debug("%s %s", options.method, url)
        loop = asyncio.get_running_loop()
        response = await loop.run_in_executor(None, self._request, url, options)
        log.debug("%s %s: %d", options.method, url, response.status)
        return response


def _timeout(environ: Mapping[str, str]) -> float:
    value = environ.get(HTTP_TIMEOUT_ENV)
    if value is None:
        return DEFAULT_TIMEOUT
    try:
        timeout = float(value)
    except ValueError as e:
        raise BSVScriptValueError(f"invalid {HTTP_TIMEOUT_ENV}: {value}") from e
    if timeout <= 0:
        raise BSVScriptValueError(f"invalid {HTTP_TIMEOUT_ENV}: {value}")
    return timeout


def default_http_client(
    fetch: Optional[Fetch] = None, environ: Optional[Mapping[str, str]] = None
) -> HttpClient:
    "Return the HttpClient best suited to the running environment."

    if fetch is not None:
        return FetchHttpClient(fetch)

    if environ is None:
        environ = os.environ
    setting = environ.get(HTTP_CLIENT_ENV, "").strip().lower()
    if setting == "none":
        return NoHttpClient()
    if setting not in ("", "urllib"):
        raise BSVScriptValueError(f"invalid {HTTP_CLIENT_ENV}: {setting}")
    if setting == "urllib" or hasattr(urlrequest, "HTTPSHandler"):
        return UrllibHttpClient(_timeout(environ))

    log.warning("no HTTPS support available: HTTP requests will fail")
    return NoHttpClient()
