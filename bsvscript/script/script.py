#!/usr/bin/env python3

# Copyright (C) 2023-2024 The bsvscript developers
#
# This file is part of bsvscript. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of bsvscript including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Bitcoin Script.

https://wiki.bitcoinsv.io/index.php/Script

Scripts are represented by List[Chunk], where each Chunk is
an op value with optional pushed data.

Three representations are supported:

* binary: op | [length-prefix] | data, repeated
* hex: the hex-string of the binary form
* ASM: space separated tokens, e.g. "OP_DUP OP_HASH160 <h160> ..."
  where data pushes are rendered as the hex-string of the data only.

hex and binary round-trip exactly.
ASM does not: a push whose length implies OP_PUSHDATA1/2/4
is rendered as plain hex, so the prefix width actually used is lost.

Binary parsing never fails: scripts found on the wire
are not guaranteed to be well-formed, so a truncated push
is kept as a chunk with empty data and parsing stops there.
"""

import logging
from dataclasses import dataclass, field
from io import BytesIO
from typing import List, Optional, Sequence, Type, TypeVar

from dataclasses_json import DataClassJsonMixin

from bsvscript.alias import BinaryData
from bsvscript.exceptions import BSVScriptValueError
from bsvscript.script.chunk import Chunk
from bsvscript.script.op_codes import (
    OP_0,
    OP_1NEGATE,
    OP_16,
    OP_PUSHDATA1,
    PUSHDATA_PREFIX_SIZE,
    name_of,
    value_of,
)
from bsvscript.utils import bytes_from_octets, bytesio_from_binarydata, hex_string

log = logging.getLogger(__name__)


def _read(stream: BytesIO, size: int) -> Optional[bytes]:
    "Return exactly size bytes, None if the stream is exhausted first."

    data = stream.read(size)
    if len(data) != size:
        log.debug("truncated script: %d bytes instead of %d", len(data), size)
        return None
    return data


def _parse_push(stream: BytesIO, op: int) -> bytes:
    if op < OP_PUSHDATA1:
        data_length = op
    else:
        size = PUSHDATA_PREFIX_SIZE[op]
        prefix = _read(stream, size)
        if prefix is None:
            return b""
        data_length = int.from_bytes(prefix, byteorder="little", signed=False)
    data = _read(stream, data_length)
    return b"" if data is None else data


def parse(stream: BinaryData) -> List[Chunk]:
    "Return the list of chunks of a binary (or hex-string) script."

    s = bytesio_from_binarydata(stream)
    r: List[Chunk] = []  # initialize the result list

    while True:

        t = s.read(1)  # get one byte
        if not t:
            break
        op = t[0]  # convert the first byte to an integer
        if 0 < op < OP_PUSHDATA1 or op in PUSHDATA_PREFIX_SIZE:
            # 0 < op < 76 -> op | data
            # op == 76 -> OP_PUSHDATA1 | 1-byte-data-length | data
            # op == 77 -> OP_PUSHDATA2 | 2-byte-data-length | data
            # op == 78 -> OP_PUSHDATA4 | 4-byte-data-length | data
            r.append(Chunk(op, _parse_push(s, op)))
        else:
            r.append(Chunk(op))

    return r


def _serialize_chunk(chunk: Chunk) -> bytes:
    op = chunk.op
    if not 0 <= op < 256:
        raise BSVScriptValueError(f"invalid op: {op}")
    out = [op.to_bytes(1, byteorder="little", signed=False)]

    data = chunk.data
    if data is None:
        return out[0]

    # the length actually written is always len(data),
    # even if it does not match what op implies
    if op < OP_PUSHDATA1:
        out.append(data)
    elif op in PUSHDATA_PREFIX_SIZE:
        size = PUSHDATA_PREFIX_SIZE[op]
        length = len(data)
        if length >= 2 ** (8 * size):
            raise BSVScriptValueError(f"too many bytes for op {op}: {length}")
        out.append(length.to_bytes(size, byteorder="little", signed=False))
        out.append(data)
    # data attached to non-push ops is not part of the script
    return b"".join(out)


def serialize(chunks: Sequence[Chunk]) -> bytes:
    return b"".join(_serialize_chunk(chunk) for chunk in chunks)


def _chunk_from_asm_token(token: str) -> Chunk:

    # 0 and -1 are rendered as numbers, not as OP_0 and OP_1NEGATE
    if token == "0":
        return Chunk(OP_0)
    if token == "-1":
        return Chunk(OP_1NEGATE)

    op = value_of(token)
    if op is not None:
        return Chunk(op)

    try:
        data = bytes.fromhex(token)
    except ValueError as e:
        raise BSVScriptValueError(f"invalid hex string in script: {token}") from e
    # only the canonical lowercase form is accepted
    if data.hex() != token:
        raise BSVScriptValueError(f"invalid hex string in script: {token}")
    return Chunk.push(data)


def _asm_token_from_chunk(chunk: Chunk) -> str:

    if chunk.data is not None:
        return chunk.data.hex()

    if chunk.op == OP_0:
        return "0"
    if chunk.op == OP_1NEGATE:
        return "-1"
    name = name_of(chunk.op)
    return hex_string(chunk.op) if name is None else name


_Script = TypeVar("_Script", bound="Script")


@dataclass(frozen=True)
class Script(DataClassJsonMixin):
    # Bitcoin script expressed as List[Chunk]
    # e.g. [Chunk(OP_HASH160), Chunk(20, script_h160), Chunk(OP_EQUAL)]
    chunks: List[Chunk] = field(default_factory=list)

    def __post_init__(self) -> None:
        object.__setattr__(self, "chunks", list(self.chunks))

    def __add__(self: _Script, other: object) -> _Script:

        if not isinstance(other, Script):
            return NotImplemented

        return type(self)(self.chunks + other.chunks)

    def __len__(self) -> int:
        return len(self.chunks)

    @classmethod
    def from_asm(cls: Type[_Script], asm: str) -> _Script:
        """Return a Script from its ASM representation.

        Tokens are separated by single spaces:
        '0' and '-1' are OP_0 and OP_1NEGATE,
        known mnemonics are ops without data,
        anything else must be the canonical (lowercase) hex-string
        of data to be pushed with the minimal push op.
        """

        if asm == "":
            return cls()
        return cls([_chunk_from_asm_token(token) for token in asm.split(" ")])

    @classmethod
    def from_hex(cls: Type[_Script], hex_str: str) -> _Script:
        return cls.from_binary(bytes_from_octets(hex_str))

    @classmethod
    def from_binary(cls: Type[_Script], stream: BinaryData) -> _Script:
        return cls(parse(stream))

    def to_asm(self) -> str:
        return " ".join(_asm_token_from_chunk(chunk) for chunk in self.chunks)

    def to_hex(self) -> str:
        return self.to_binary().hex()

    def to_binary(self) -> bytes:
        return serialize(self.chunks)

    def is_push_only(self) -> bool:
        return all(chunk.op <= OP_16 for chunk in self.chunks)

    def assert_valid(self) -> None:
        for i, chunk in enumerate(self.chunks):
            try:
                chunk.assert_valid()
            except BSVScriptValueError as e:
                raise BSVScriptValueError(f"invalid chunk {i}: {e}") from e

    def is_valid(self) -> bool:
        try:
            self.assert_valid()
        except BSVScriptValueError:
            return False
        return True


class LockingScript(Script):
    "A Script attached to a transaction output."


class UnlockingScript(Script):
    "A Script attached to a transaction input."
