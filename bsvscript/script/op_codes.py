#!/usr/bin/env python3

# Copyright (C) 2023-2024 The bsvscript developers
#
# This file is part of bsvscript. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of bsvscript including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Bitcoin Script OP_CODES.

https://wiki.bitcoinsv.io/index.php/Opcodes_used_in_Bitcoin_Script

Both directions of the name/value mapping are read-only views,
built once at import time and shared by all callers.
Values without a mnemonic (e.g. the direct pushes 0x01-0x4b)
are legal: lookups just return None.
"""

from types import MappingProxyType
from typing import Dict, Mapping, Optional

from bsvscript.exceptions import BSVScriptValueError

_OP_CODES: Dict[str, int] = {
    # Constants
    "OP_0": 0x00,
    "OP_FALSE": 0x00,
    "OP_PUSHDATA1": 0x4C,
    "OP_PUSHDATA2": 0x4D,
    "OP_PUSHDATA4": 0x4E,
    "OP_1NEGATE": 0x4F,
    "OP_RESERVED": 0x50,
    "OP_1": 0x51,
    "OP_TRUE": 0x51,
    "OP_2": 0x52,
    "OP_3": 0x53,
    "OP_4": 0x54,
    "OP_5": 0x55,
    "OP_6": 0x56,
    "OP_7": 0x57,
    "OP_8": 0x58,
    "OP_9": 0x59,
    "OP_10": 0x5A,
    "OP_11": 0x5B,
    "OP_12": 0x5C,
    "OP_13": 0x5D,
    "OP_14": 0x5E,
    "OP_15": 0x5F,
    "OP_16": 0x60,
    # Flow control
    "OP_NOP": 0x61,
    "OP_VER": 0x62,
    "OP_IF": 0x63,
    "OP_NOTIF": 0x64,
    "OP_VERIF": 0x65,
    "OP_VERNOTIF": 0x66,
    "OP_ELSE": 0x67,
    "OP_ENDIF": 0x68,
    "OP_VERIFY": 0x69,
    "OP_RETURN": 0x6A,
    # Stack
    "OP_TOALTSTACK": 0x6B,
    "OP_FROMALTSTACK": 0x6C,
    "OP_2DROP": 0x6D,
    "OP_2DUP": 0x6E,
    "OP_3DUP": 0x6F,
    "OP_2OVER": 0x70,
    "OP_2ROT": 0x71,
    "OP_2SWAP": 0x72,
    "OP_IFDUP": 0x73,
    "OP_DEPTH": 0x74,
    "OP_DROP": 0x75,
    "OP_DUP": 0x76,
    "OP_NIP": 0x77,
    "OP_OVER": 0x78,
    "OP_PICK": 0x79,
    "OP_ROLL": 0x7A,
    "OP_ROT": 0x7B,
    "OP_SWAP": 0x7C,
    "OP_TUCK": 0x7D,
    # Splice (re-enabled)
    "OP_CAT": 0x7E,
    "OP_SPLIT": 0x7F,
    "OP_NUM2BIN": 0x80,
    "OP_BIN2NUM": 0x81,
    "OP_SIZE": 0x82,
    # Bitwise logic
    "OP_INVERT": 0x83,
    "OP_AND": 0x84,
    "OP_OR": 0x85,
    "OP_XOR": 0x86,
    "OP_EQUAL": 0x87,
    "OP_EQUALVERIFY": 0x88,
    "OP_RESERVED1": 0x89,
    "OP_RESERVED2": 0x8A,
    # Arithmetic
    "OP_1ADD": 0x8B,  # without OP_, 1ADD would be a number
    "OP_1SUB": 0x8C,
    "OP_2MUL": 0x8D,
    "OP_2DIV": 0x8E,
    "OP_NEGATE": 0x8F,
    "OP_ABS": 0x90,
    "OP_NOT": 0x91,
    "OP_0NOTEQUAL": 0x92,
    "OP_ADD": 0x93,
    "OP_SUB": 0x94,
    "OP_MUL": 0x95,
    "OP_DIV": 0x96,
    "OP_MOD": 0x97,
    "OP_LSHIFT": 0x98,
    "OP_RSHIFT": 0x99,
    "OP_BOOLAND": 0x9A,
    "OP_BOOLOR": 0x9B,
    "OP_NUMEQUAL": 0x9C,
    "OP_NUMEQUALVERIFY": 0x9D,
    "OP_NUMNOTEQUAL": 0x9E,
    "OP_LESSTHAN": 0x9F,
    "OP_GREATERTHAN": 0xA0,
    "OP_LESSTHANOREQUAL": 0xA1,
    "OP_GREATERTHANOREQUAL": 0xA2,
    "OP_MIN": 0xA3,
    "OP_MAX": 0xA4,
    "OP_WITHIN": 0xA5,
    # Crypto
    "OP_RIPEMD160": 0xA6,
    "OP_SHA1": 0xA7,
    "OP_SHA256": 0xA8,
    "OP_HASH160": 0xA9,
    "OP_HASH256": 0xAA,
    "OP_CODESEPARATOR": 0xAB,
    "OP_CHECKSIG": 0xAC,
    "OP_CHECKSIGVERIFY": 0xAD,
    "OP_CHECKMULTISIG": 0xAE,
    "OP_CHECKMULTISIGVERIFY": 0xAF,
    # Locktime
    "OP_NOP2": 0xB1,
    "OP_CHECKLOCKTIMEVERIFY": 0xB1,
    "OP_NOP3": 0xB2,
    "OP_CHECKSEQUENCEVERIFY": 0xB2,
    # Reserved words
    "OP_NOP1": 0xB0,
    "OP_NOP4": 0xB3,
    "OP_NOP5": 0xB4,
    "OP_NOP6": 0xB5,
    "OP_NOP7": 0xB6,
    "OP_NOP8": 0xB7,
    "OP_NOP9": 0xB8,
    "OP_NOP10": 0xB9,
    # Template matching pseudo-words
    "OP_SMALLDATA": 0xF9,
    "OP_SMALLINTEGER": 0xFA,
    "OP_PUBKEYS": 0xFB,
    "OP_PUBKEYHASH": 0xFD,
    "OP_PUBKEY": 0xFE,
    "OP_INVALIDOPCODE": 0xFF,
}

# aliases sharing a value with a canonical name
_ALIASES = ("OP_FALSE", "OP_TRUE", "OP_NOP2", "OP_NOP3")

OP_CODES: Mapping[str, int] = MappingProxyType(_OP_CODES)

OP_CODE_NAME_FROM_INT: Mapping[int, str] = MappingProxyType(
    {value: name for name, value in _OP_CODES.items() if name not in _ALIASES}
)

OP_0 = OP_CODES["OP_0"]
# first value that is not a direct push, i.e. 1-byte-length pushes are < 76
OP_PUSHDATA1 = OP_CODES["OP_PUSHDATA1"]
OP_PUSHDATA2 = OP_CODES["OP_PUSHDATA2"]
OP_PUSHDATA4 = OP_CODES["OP_PUSHDATA4"]
OP_1NEGATE = OP_CODES["OP_1NEGATE"]
OP_16 = OP_CODES["OP_16"]
OP_RETURN = OP_CODES["OP_RETURN"]
OP_DUP = OP_CODES["OP_DUP"]
OP_HASH160 = OP_CODES["OP_HASH160"]
OP_EQUALVERIFY = OP_CODES["OP_EQUALVERIFY"]
OP_CHECKSIG = OP_CODES["OP_CHECKSIG"]

# byte width of the length prefix following each PUSHDATA op
PUSHDATA_PREFIX_SIZE: Mapping[int, int] = MappingProxyType(
    {OP_PUSHDATA1: 1, OP_PUSHDATA2: 2, OP_PUSHDATA4: 4}
)


def name_of(op: int) -> Optional[str]:
    "Return the mnemonic of an op value, None if it has no name."
    return OP_CODE_NAME_FROM_INT.get(op)


def value_of(name: str) -> Optional[int]:
    "Return the op value of a mnemonic, None if the mnemonic is unknown."
    return OP_CODES.get(name)


def op_int(i: int) -> str:
    # Short 1-byte op_codes exist
    # to push numbers in [-1, 16]
    if i == -1:
        return "OP_1NEGATE"
    if 0 <= i <= 16:
        return f"OP_{i}"
    raise BSVScriptValueError(f"invalid OP_INT: {i}")


def push_op(length: int) -> int:
    """Return the op for the minimal push of a length-byte payload.

    The payload length itself for direct pushes,
    else the narrowest OP_PUSHDATA able to encode the length.
    """

    if length < 0:
        raise BSVScriptValueError(f"invalid push length: {length}")
    if length < OP_PUSHDATA1:
        return length
    if length < 2**8:
        return OP_PUSHDATA1
    if length < 2**16:
        return OP_PUSHDATA2
    if length < 2**32:
        return OP_PUSHDATA4
    raise BSVScriptValueError(f"too many bytes for OP_PUSHDATA4: {length}")
