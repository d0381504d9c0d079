#!/usr/bin/env python3

# Copyright (C) 2023-2024 The bsvscript developers
#
# This file is part of bsvscript. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of bsvscript including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.
"Tests for the `bsvscript.script.templates.p2pkh` module."

import asyncio
from typing import List, Tuple

import pytest

from bsvscript.exceptions import BSVScriptValueError
from bsvscript.script.chunk import Chunk
from bsvscript.script.script import LockingScript, UnlockingScript
from bsvscript.script.template import UnlockingTemplate
from bsvscript.script.templates.p2pkh import P2PKH

H160 = "1f" * 20
PUB_KEY = "02" + "aa" * 32
SIG = bytes.fromhex("30" + "01" * 70 + "41")


def test_lock() -> None:
    script = P2PKH().lock(H160)
    assert isinstance(script, LockingScript)
    assert script.to_hex() == "76a914" + H160 + "88ac"
    assert script.to_asm() == f"OP_DUP OP_HASH160 {H160} OP_EQUALVERIFY OP_CHECKSIG"
    assert P2PKH().lock(bytes.fromhex(H160)) == script

    err_msg = "invalid size: 19 bytes instead of 20"
    with pytest.raises(BSVScriptValueError, match=err_msg):
        P2PKH().lock("1f" * 19)


def test_unlock() -> None:
    calls: List[Tuple[object, int]] = []

    async def signer(tx: object, input_index: int) -> bytes:
        calls.append((tx, input_index))
        return SIG

    template = P2PKH().unlock(signer, PUB_KEY)
    assert isinstance(template, UnlockingTemplate)
    # nothing is signed before sign is awaited
    assert not calls

    assert asyncio.run(template.estimate_length()) == 108

    tx = object()
    script = asyncio.run(template.sign(tx, 3))
    assert calls == [(tx, 3)]
    assert isinstance(script, UnlockingScript)
    assert script.chunks == [Chunk(72, SIG), Chunk(33, bytes.fromhex(PUB_KEY))]
    assert script.is_push_only()
    assert script.to_asm() == f"{SIG.hex()} {PUB_KEY}"
    assert len(script.to_binary()) <= 108


def test_concurrent_signing() -> None:
    async def signer(tx: object, input_index: int) -> bytes:
        await asyncio.sleep(0)
        return SIG[:-1] + bytes([input_index])

    template = P2PKH().unlock(signer, PUB_KEY)

    async def sign_all() -> List[UnlockingScript]:
        return await asyncio.gather(*(template.sign("tx", i) for i in range(3)))

    scripts = asyncio.run(sign_all())
    for i, script in enumerate(scripts):
        assert script.chunks[0].data[-1] == i  # type: ignore


def test_signing_failure() -> None:
    async def signer(tx: object, input_index: int) -> bytes:
        raise RuntimeError("signing device unavailable")

    # the failure surfaces only when sign is awaited
    template = P2PKH().unlock(signer, PUB_KEY)
    with pytest.raises(RuntimeError, match="signing device unavailable"):
        asyncio.run(template.sign("tx", 0))


def test_invalid_pub_key() -> None:
    async def signer(tx: object, input_index: int) -> bytes:
        return SIG

    err_msg = "invalid size: 32 bytes instead of "
    with pytest.raises(BSVScriptValueError, match=err_msg):
        P2PKH().unlock(signer, "aa" * 32)
