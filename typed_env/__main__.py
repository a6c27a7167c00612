# SPDX-License-Identifier: MIT
# Copyright (c) 2025 typed-env contributors

"""Module entry point for running the typed-env command line tool."""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
