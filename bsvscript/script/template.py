#!/usr/bin/env python3

# Copyright (C) 2023-2024 The bsvscript developers
#
# This file is part of bsvscript. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of bsvscript including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Script templates.

A template is a convention for building the locking script
of a given script class and, when the class is spendable,
the matching unlocking script.

Locking scripts are built synchronously from template-specific
parameters.
Unlocking scripts cannot be built at unlock() call time:
they need the finalized transaction and an (often remote) signing step.
Hence unlock() returns an UnlockingTemplate, i.e. a pair of coroutine
functions: sign(tx, input_index) producing the UnlockingScript, and
estimate_length() giving its byte size for fee budgeting
before the real signature is available.

Templates are stateless: the sign coroutines of distinct inputs
of the same transaction can be awaited concurrently.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

from bsvscript.alias import Transaction
from bsvscript.script.script import LockingScript, UnlockingScript


@dataclass(frozen=True)
class UnlockingTemplate:
    sign: Callable[[Transaction, int], Awaitable[UnlockingScript]]
    estimate_length: Callable[[], Awaitable[int]]


class ScriptTemplate(ABC):
    @abstractmethod
    def lock(self, *args: Any, **kwargs: Any) -> LockingScript:
        "Return the locking script for the given parameters."

    @abstractmethod
    def unlock(self, *args: Any, **kwargs: Any) -> UnlockingTemplate:
        """Return the deferred-signing handle for the given parameters.

        Templates for non-spendable script classes
        raise BSVScriptUnsupportedError.
        """
