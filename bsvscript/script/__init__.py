#!/usr/bin/env python3

# Copyright (C) 2023-2024 The bsvscript developers
#
# This file is part of bsvscript. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of bsvscript including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Module bsvscript.script."""

from bsvscript.script.chunk import Chunk
from bsvscript.script.op_codes import (
    OP_CODE_NAME_FROM_INT,
    OP_CODES,
    name_of,
    op_int,
    value_of,
)
from bsvscript.script.script import (
    LockingScript,
    Script,
    UnlockingScript,
    parse,
    serialize,
)
from bsvscript.script.template import ScriptTemplate, UnlockingTemplate
from bsvscript.script.templates import P2PKH, Metanet

__all__ = [
    "Chunk",
    "OP_CODES",
    "OP_CODE_NAME_FROM_INT",
    "name_of",
    "op_int",
    "value_of",
    "Script",
    "LockingScript",
    "UnlockingScript",
    "parse",
    "serialize",
    "ScriptTemplate",
    "UnlockingTemplate",
    "Metanet",
    "P2PKH",
]
