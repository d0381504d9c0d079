#!/usr/bin/env python3

# Copyright (C) 2023-2024 The bsvscript developers
#
# This file is part of bsvscript. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of bsvscript including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

These are only meant to discriminate between Exceptions being raised
by bsvscript from those raised by other codebase.

Users are usually better off just dealing with the regular
ValueError, TypeError, RuntimeError, and NotImplementedError
from which the bsvscript versions are derived.
"""


class BSVScriptValueError(ValueError):
    pass


class BSVScriptTypeError(TypeError):
    pass


class BSVScriptRuntimeError(RuntimeError):
    pass


class BSVScriptUnsupportedError(NotImplementedError):
    "The operation is not available for this script class."
