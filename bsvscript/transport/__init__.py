#!/usr/bin/env python3

# Copyright (C) 2023-2024 The bsvscript developers
#
# This file is part of bsvscript. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of bsvscript including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Module bsvscript.transport."""

from bsvscript.transport.http_client import (
    FetchHttpClient,
    HttpClient,
    HttpClientRequestOptions,
    HttpClientResponse,
    NoHttpClient,
    UrllibHttpClient,
    default_http_client,
)

__all__ = [
    "FetchHttpClient",
    "HttpClient",
    "HttpClientRequestOptions",
    "HttpClientResponse",
    "NoHttpClient",
    "UrllibHttpClient",
    "default_http_client",
]
