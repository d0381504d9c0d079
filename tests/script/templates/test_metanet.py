#!/usr/bin/env python3

# Copyright (C) 2023-2024 The bsvscript developers
#
# This file is part of bsvscript. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of bsvscript including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.
"Tests for the `bsvscript.script.templates.metanet` module."

import warnings

import pytest

from bsvscript.exceptions import (
    BSVScriptUnsupportedError,
    BSVScriptValueError,
)
from bsvscript.script.chunk import Chunk
from bsvscript.script.op_codes import OP_0, OP_RETURN
from bsvscript.script.script import LockingScript
from bsvscript.script.template import ScriptTemplate
from bsvscript.script.templates.metanet import Metanet


class _PubKey:
    "Stand-in for a public key: only its canonical string form is used."

    def __init__(self, string: str) -> None:
        self._string = string

    def __str__(self) -> str:
        return self._string


def test_root_node() -> None:
    metanet = Metanet()
    assert isinstance(metanet, ScriptTemplate)

    script = metanet.lock(_PubKey("PK"), None, ["app", "hello"])
    assert isinstance(script, LockingScript)
    assert len(script) == 2 + 3 + 2
    assert script.chunks[:2] == [Chunk(OP_0), Chunk(OP_RETURN)]
    fields = [chunk.data.decode() for chunk in script.chunks[2:]]  # type: ignore
    assert fields == ["meta", "PK", "null", "app", "hello"]
    for chunk in script.chunks[2:]:
        assert chunk.op == len(chunk.data)  # type: ignore

    assert script.to_asm() == "0 OP_RETURN 6d657461 504b 6e756c6c 617070 68656c6c6f"
    assert script.to_hex() == "006a046d657461" "02504b" "046e756c6c" "03617070" "0568656c6c6f"
    assert LockingScript.from_hex(script.to_hex()) == script


def test_no_data() -> None:
    script = Metanet().lock(_PubKey("PK"), None)
    assert len(script) == 2 + 3
    assert [chunk.data for chunk in script.chunks[2:]] == [b"meta", b"PK", b"null"]


def test_child_node() -> None:
    pub_key = "02" + "cc" * 32
    parent_txid = "ab" * 32
    script = Metanet().lock(pub_key, parent_txid, "payload")
    assert len(script) == 2 + 3 + 1
    assert script.chunks[3] == Chunk(66, pub_key.encode())
    assert script.chunks[4] == Chunk(64, parent_txid.encode())
    # a single data field
    assert script.chunks[5] == Chunk(7, b"payload")

    # an empty parent txid is a root node
    script = Metanet().lock(pub_key, "", [])
    assert script.chunks[4].data == b"null"


def test_binary_fields() -> None:
    # bytes pub_key are rendered as hex-string
    pub_key = bytes.fromhex("02" + "cc" * 32)
    script = Metanet().lock(pub_key, None, [b"\x00\xff", "€"])
    assert script.chunks[3].data == pub_key.hex().encode()
    assert script.chunks[5] == Chunk(2, b"\x00\xff")
    # text fields are utf-8 encoded: op is the byte length
    assert script.chunks[6] == Chunk(3, b"\xe2\x82\xac")

    script = Metanet().lock(pub_key, None, b"\x01\x02")
    assert script.chunks[5] == Chunk(2, b"\x01\x02")


def test_field_length_boundaries() -> None:
    field = "a" * 75
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        script = Metanet().lock(_PubKey("PK"), None, [field])
    assert script.chunks[-1] == Chunk(75, field.encode())
    assert script.is_valid()

    # fields are not widened to OP_PUSHDATA1/2/4
    field = "a" * 76
    with pytest.warns(UserWarning, match="Metanet field of 76 bytes"):
        script = Metanet().lock(_PubKey("PK"), None, [field])
    assert script.chunks[-1] == Chunk(76, field.encode())

    field = "a" * 255
    with pytest.warns(UserWarning, match="Metanet field of 255 bytes"):
        script = Metanet().lock(_PubKey("PK"), None, [field])
    assert script.chunks[-1].op == 255
    assert not script.is_valid()

    field = "a" * 256
    err_msg = "too many bytes for a Metanet field: 256"
    with pytest.raises(BSVScriptValueError, match=err_msg):
        Metanet().lock(_PubKey("PK"), None, [field])


def test_unlock() -> None:
    err_msg = "unlock is not supported for Metanet scripts"
    with pytest.raises(BSVScriptUnsupportedError, match=err_msg):
        Metanet().unlock()
    with pytest.raises(BSVScriptUnsupportedError, match=err_msg):
        Metanet().unlock(_PubKey("PK"), "tx", input_index=0)
    # not a parse error
    with pytest.raises(NotImplementedError):
        Metanet().unlock()
    assert not issubclass(BSVScriptUnsupportedError, ValueError)
