#!/usr/bin/env python3

# Copyright (C) 2023-2024 The bsvscript developers
#
# This file is part of bsvscript. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of bsvscript including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `bsvscript.script.chunk` module."

import pytest

from bsvscript.exceptions import BSVScriptValueError
from bsvscript.script.chunk import Chunk
from bsvscript.script.op_codes import OP_CODES, OP_PUSHDATA1, OP_PUSHDATA2


def test_chunk() -> None:
    chunk = Chunk(OP_CODES["OP_DUP"])
    assert chunk.op == 0x76
    assert chunk.data is None

    # Octets are normalized to bytes
    assert Chunk(1, "ff").data == b"\xff"
    assert Chunk(2, bytearray(b"ab")).data == b"ab"
    assert Chunk(2, "6162") == Chunk(2, b"ab")

    # structural equality
    assert Chunk(0) != Chunk(0, b"")
    assert len({Chunk(1, b"\x01"), Chunk(1, b"\x01"), Chunk(0x76)}) == 2

    with pytest.raises(AttributeError):
        chunk.op = 0x75  # type: ignore


def test_push() -> None:
    assert Chunk.push(b"") == Chunk(0, b"")
    assert Chunk.push("0a0b") == Chunk(2, b"\x0a\x0b")

    data = b"\x0A" * 75
    assert Chunk.push(data) == Chunk(75, data)
    data = b"\x0A" * 76
    assert Chunk.push(data) == Chunk(OP_PUSHDATA1, data)
    data = b"\x0A" * 256
    assert Chunk.push(data) == Chunk(OP_PUSHDATA2, data)


def test_valid_chunks() -> None:
    chunks = [
        Chunk(0),
        Chunk(0, b""),
        Chunk(1, b"\x01"),
        Chunk(75, b"\x01" * 75),
        Chunk(OP_PUSHDATA1, b""),
        Chunk(OP_PUSHDATA1, b"\x01" * 255),
        Chunk(OP_PUSHDATA2, b"\x01" * 256),
        Chunk(OP_CODES["OP_CHECKSIG"]),
        Chunk(0xFF),
    ]
    for chunk in chunks:
        chunk.assert_valid()
        assert chunk.is_valid()


def test_invalid_chunks() -> None:
    # the push convention is not enforced at construction time
    chunk = Chunk(5, b"ab")

    err_msg = "invalid data length for op 5: 2"
    with pytest.raises(BSVScriptValueError, match=err_msg):
        chunk.assert_valid()
    assert not chunk.is_valid()

    err_msg = "invalid data length for op 5: None"
    with pytest.raises(BSVScriptValueError, match=err_msg):
        Chunk(5).assert_valid()

    err_msg = "invalid op: "
    with pytest.raises(BSVScriptValueError, match=err_msg):
        Chunk(256).assert_valid()
    with pytest.raises(BSVScriptValueError, match=err_msg):
        Chunk(-1).assert_valid()

    err_msg = "missing data for op 76"
    with pytest.raises(BSVScriptValueError, match=err_msg):
        Chunk(OP_PUSHDATA1).assert_valid()

    err_msg = "too many bytes for op 76: 256"
    with pytest.raises(BSVScriptValueError, match=err_msg):
        Chunk(OP_PUSHDATA1, b"\x00" * 256).assert_valid()

    err_msg = "unexpected data for op 118"
    with pytest.raises(BSVScriptValueError, match=err_msg):
        Chunk(OP_CODES["OP_DUP"], b"\x00").assert_valid()


def test_dataclasses_json() -> None:
    chunk = Chunk(2, b"\xab\xcd")
    chunk_dict = chunk.to_dict()
    assert chunk_dict == {"op": 2, "data": "abcd"}
    assert Chunk.from_dict(chunk_dict) == chunk
    assert Chunk.from_json(chunk.to_json()) == chunk

    chunk = Chunk(OP_CODES["OP_RETURN"])
    chunk_dict = chunk.to_dict()
    assert chunk_dict == {"op": 0x6A, "data": None}
    assert Chunk.from_dict(chunk_dict) == chunk
