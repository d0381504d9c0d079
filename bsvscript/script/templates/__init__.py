#!/usr/bin/env python3

# Copyright (C) 2023-2024 The bsvscript developers
#
# This file is part of bsvscript. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of bsvscript including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Module bsvscript.script.templates."""

from bsvscript.script.templates.metanet import Metanet
from bsvscript.script.templates.p2pkh import P2PKH

__all__ = [
    "Metanet",
    "P2PKH",
]
