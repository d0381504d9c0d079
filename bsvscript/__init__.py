#!/usr/bin/env python3

# Copyright (C) 2023-2024 The bsvscript developers
#
# This file is part of bsvscript. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of bsvscript including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the bsvscript package."

name = "bsvscript"
__version__ = "2024.3.1"
__author__ = "The bsvscript developers"
__author_email__ = "devs@bsvscript.org"
__copyright__ = "Copyright (C) 2023-2024 The bsvscript developers"
__license__ = "MIT License"
