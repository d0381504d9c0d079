#!/usr/bin/env python3

# Copyright (C) 2023-2024 The bsvscript developers
#
# This file is part of bsvscript. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of bsvscript including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Metanet script template.

https://nchain.com/wp-content/uploads/2019/06/The-Metanet-Technical-Summary-v1.0.pdf

A Metanet node is an unspendable OP_RETURN output:

    OP_0 OP_RETURN 'meta' <node pub_key> <parent txid | 'null'> <data>...

Only the locking script is available.

Each field is pushed with op equal to the field length:
this is correct only for fields shorter than 76 bytes.
Longer fields are not widened to OP_PUSHDATA1/2/4,
a UserWarning is issued instead;
fields longer than 255 bytes cannot be encoded at all.
"""

from typing import Any, List, Optional, Sequence, Union
from warnings import warn

from bsvscript.alias import PubKeyLike, String
from bsvscript.exceptions import BSVScriptUnsupportedError, BSVScriptValueError
from bsvscript.script.chunk import Chunk
from bsvscript.script.op_codes import OP_0, OP_PUSHDATA1, OP_RETURN
from bsvscript.script.script import LockingScript
from bsvscript.script.template import ScriptTemplate, UnlockingTemplate
from bsvscript.utils import bytes_from_string

METANET_FLAG = "meta"
ROOT_PARENT = "null"


def _pub_key_string(pub_key: PubKeyLike) -> str:
    if isinstance(pub_key, (bytes, bytearray)):
        return bytes(pub_key).hex()
    return str(pub_key)


def _field_chunk(field: String) -> Chunk:
    data = bytes_from_string(field)
    length = len(data)
    if length > 255:
        raise BSVScriptValueError(f"too many bytes for a Metanet field: {length}")
    if length >= OP_PUSHDATA1:
        warn(f"Metanet field of {length} bytes is not a valid push")
    return Chunk(length, data)


class Metanet(ScriptTemplate):
    def lock(
        self,
        pub_key: PubKeyLike,
        parent_txid: Optional[str],
        data: Union[Sequence[String], String] = (),
    ) -> LockingScript:
        """Return a Metanet node output script.

        pub_key is the key responsible for the node,
        parent_txid the txid of the parent node transaction
        or None for a root node,
        data the metadata fields ending with the data payload.

        e.g. a root node with 'subprotocol' and 'filename' metadata:
        Metanet().lock(pub_key, None, ["subprotocol", "filename", payload])
        """

        if isinstance(data, (str, bytes)):
            data = [data]

        fields: List[String] = [
            METANET_FLAG,
            _pub_key_string(pub_key),
            parent_txid or ROOT_PARENT,
        ]
        fields.extend(data)

        chunks = [Chunk(OP_0), Chunk(OP_RETURN)]
        chunks.extend(_field_chunk(field) for field in fields)
        return LockingScript(chunks)

    def unlock(self, *args: Any, **kwargs: Any) -> UnlockingTemplate:
        raise BSVScriptUnsupportedError("unlock is not supported for Metanet scripts")
