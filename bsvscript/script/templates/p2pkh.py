#!/usr/bin/env python3

# Copyright (C) 2023-2024 The bsvscript developers
#
# This file is part of bsvscript. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of bsvscript including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Pay-to-PubKey-Hash script template.

locking script:   OP_DUP OP_HASH160 <pub_key hash> OP_EQUALVERIFY OP_CHECKSIG
unlocking script: <signature> <pub_key>

Signing is delegated to an async signer(tx, input_index)
returning the DER signature followed by the sighash byte.
"""

from bsvscript.alias import Octets, Signer, Transaction
from bsvscript.script.chunk import Chunk
from bsvscript.script.op_codes import (
    OP_CHECKSIG,
    OP_DUP,
    OP_EQUALVERIFY,
    OP_HASH160,
)
from bsvscript.script.script import LockingScript, UnlockingScript
from bsvscript.script.template import ScriptTemplate, UnlockingTemplate
from bsvscript.utils import bytes_from_octets

# push(73-byte sig) + push(33-byte compressed pub_key)
UNLOCKING_SCRIPT_LENGTH = 1 + 73 + 1 + 33


class P2PKH(ScriptTemplate):
    def lock(self, pub_key_hash: Octets) -> LockingScript:
        # p2pkh [OP_DUP, OP_HASH160, pub_key hash, OP_EQUALVERIFY, OP_CHECKSIG]
        # 0x76A914{20-byte pub_key_hash}88AC
        h160 = bytes_from_octets(pub_key_hash, 20)
        return LockingScript(
            [
                Chunk(OP_DUP),
                Chunk(OP_HASH160),
                Chunk.push(h160),
                Chunk(OP_EQUALVERIFY),
                Chunk(OP_CHECKSIG),
            ]
        )

    def unlock(self, signer: Signer, pub_key: Octets) -> UnlockingTemplate:
        pub_key = bytes_from_octets(pub_key, (33, 65))

        async def sign(tx: Transaction, input_index: int) -> UnlockingScript:
            sig = await signer(tx, input_index)
            return UnlockingScript([Chunk.push(sig), Chunk.push(pub_key)])

        async def estimate_length() -> int:
            return UNLOCKING_SCRIPT_LENGTH

        return UnlockingTemplate(sign, estimate_length)
