# Copyright (c) 2025 PantherianCodeX. All Rights Reserved.

"""Module entry point for ``python -m usewiz``."""

from __future__ import annotations

from usewiz.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
