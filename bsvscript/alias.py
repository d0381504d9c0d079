#!/usr/bin/env python3

# Copyright (C) 2023-2024 The bsvscript developers
#
# This file is part of bsvscript. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of bsvscript including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from io import BytesIO
from typing import Any, Awaitable, Callable, Union

# Octets are a sequence of eight-bit bytes or a hex-string (not text string)
#
# hex-strings are strings that can be converted to bytes using bytes.fromhex,
# e.g.:
# "deadbeef"
# "dead beef"
# "02cc71eb30d653c0c3163990c47b976f3fb3f37cccdcbedb169a1dfef58bbfbfaf"
#
# use bsvscript.utils.bytes_from_octets to convert Octets to bytes
#
# Octets are used for serialized scripts, push payloads,
# h160 (20 bytes), public keys, DER signatures, etc.
Octets = Union[bytes, str]

# bytes or text string (not hex-string)
#
# this is for string that can be
# converted to bytes using encode()
# e.g. a Metanet data field
#    if isinstance(field, str):
#        field = field.encode()
String = Union[bytes, str]

# binary data, usually to be cosumed as byte stream,
# but possibily provided as Octets too
BinaryData = Union[BytesIO, Octets]

# Anything with a canonical string form, e.g. a public key
# whose str() is its compressed hex-string serialization.
# Raw bytes are rendered as lowercase hex.
PubKeyLike = Any

# The transaction a template signs against: opaque to bsvscript
Transaction = Any

# async signer(tx, input_index) -> DER signature + sighash byte
Signer = Callable[[Transaction, int], Awaitable[bytes]]
