#!/usr/bin/env python3

# Copyright (C) 2023-2024 The bsvscript developers
#
# This file is part of bsvscript. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of bsvscript including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Assorted conversion utilities."

from collections.abc import Iterable as IterableCollection
from io import BytesIO
from typing import Iterable, Optional, Union

from bsvscript.alias import BinaryData, Octets, String
from bsvscript.exceptions import BSVScriptValueError

NoneOneOrMoreInt = Optional[Union[int, Iterable[int]]]


def bytes_from_octets(octets: Octets, out_size: NoneOneOrMoreInt = None) -> bytes:
    """Return bytes from a hex-string, stripping leading/trailing spaces.

    If the input is not a string, then it goes untouched
    (but for bytearray and list of ints, converted to bytes).
    Optionally, it also ensures required output size.
    """

    if isinstance(octets, str):  # hex string
        try:
            octets = bytes.fromhex(octets)
        except ValueError as e:
            raise BSVScriptValueError(f"invalid hex-string: {octets}") from e
    elif not isinstance(octets, bytes):
        octets = bytes(octets)

    if (
        out_size is None
        or isinstance(out_size, int)
        and len(octets) == out_size
        or isinstance(out_size, IterableCollection)
        and len(octets) in out_size
    ):
        return octets

    err_msg = f"invalid size: {len(octets)} bytes instead of {out_size}"
    raise BSVScriptValueError(err_msg)


def bytesio_from_binarydata(stream: BinaryData) -> BytesIO:
    """Return a BytesIO stream object from BinaryIO or Octets.

    If the input is not Octets (i.e. str or bytes),
    then it goes untouched.
    """

    if isinstance(stream, str):  # hex string
        stream = bytes_from_octets(stream)

    if isinstance(stream, (bytes, bytearray, list)):
        stream = BytesIO(bytes(stream))

    return stream


def bytes_from_string(string: String) -> bytes:
    "Return the UTF-8 encoding of a text string; bytes go untouched."

    if isinstance(string, str):
        return string.encode("utf-8")
    return bytes(string)


def hex_string(i: int) -> str:
    """Return the hex-string of a non-negative integer.

    Negative integers are not allowed.

    The resulting hex-string is lowercase, without separators,
    and has an even number of hex-digits (at least two).
    """

    if i < 0:
        raise BSVScriptValueError(f"negative integer: {i}")
    a_str = hex(i)[2:]
    if len(a_str) % 2 != 0:
        a_str = "0" + a_str
    return a_str
