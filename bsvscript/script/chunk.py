#!/usr/bin/env python3

# Copyright (C) 2023-2024 The bsvscript developers
#
# This file is part of bsvscript. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of bsvscript including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Script Chunk dataclass.

A chunk is the smallest serializable unit of a script:
an op value and, for pushes, the pushed data.

By convention ops in 1..75 carry exactly op bytes of data,
OP_PUSHDATA1/2/4 carry data whose length fits the prefix width,
and all other ops carry no data.
The convention is not enforced at construction time:
chunks read from the wire are not guaranteed to be well-formed.
Use assert_valid to check it.
"""

from dataclasses import dataclass, field
from typing import Optional, Type, TypeVar, Union

from dataclasses_json import DataClassJsonMixin, config

from bsvscript.alias import Octets
from bsvscript.exceptions import BSVScriptValueError
from bsvscript.script.op_codes import OP_PUSHDATA1, PUSHDATA_PREFIX_SIZE, push_op
from bsvscript.utils import bytes_from_octets

_Chunk = TypeVar("_Chunk", bound="Chunk")


def _hex_or_none(data: Optional[bytes]) -> Optional[str]:
    return None if data is None else data.hex()


def _bytes_or_none(data: Optional[str]) -> Optional[bytes]:
    return None if data is None else bytes.fromhex(data)


@dataclass(frozen=True)
class Chunk(DataClassJsonMixin):
    # 1 byte, 0..255
    op: int
    # None for non-push ops
    data: Optional[bytes] = field(
        default=None, metadata=config(encoder=_hex_or_none, decoder=_bytes_or_none)
    )

    def __post_init__(self) -> None:
        if self.data is not None and not isinstance(self.data, bytes):
            object.__setattr__(self, "data", bytes_from_octets(self.data))

    @classmethod
    def push(cls: Type[_Chunk], data: Union[Octets, bytearray]) -> _Chunk:
        "Return the minimal push chunk for the given data."

        data = bytes_from_octets(data)
        return cls(push_op(len(data)), data)

    def assert_valid(self) -> None:
        if not 0 <= self.op < 256:
            raise BSVScriptValueError(f"invalid op: {self.op}")

        if 0 < self.op < OP_PUSHDATA1:
            if self.data is None or len(self.data) != self.op:
                length = None if self.data is None else len(self.data)
                err_msg = f"invalid data length for op {self.op}: {length}"
                raise BSVScriptValueError(err_msg)
        elif self.op in PUSHDATA_PREFIX_SIZE:
            if self.data is None:
                raise BSVScriptValueError(f"missing data for op {self.op}")
            max_length = 2 ** (8 * PUSHDATA_PREFIX_SIZE[self.op])
            if len(self.data) >= max_length:
                err_msg = f"too many bytes for op {self.op}: {len(self.data)}"
                raise BSVScriptValueError(err_msg)
        elif self.data is not None and not (self.op == 0 and self.data == b""):
            # OP_0 may explicitly push the empty byte vector
            raise BSVScriptValueError(f"unexpected data for op {self.op}")

    def is_valid(self) -> bool:
        try:
            self.assert_valid()
        except BSVScriptValueError:
            return False
        return True
