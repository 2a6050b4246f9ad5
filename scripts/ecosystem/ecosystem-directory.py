#!/usr/bin/env python3
"""Thin entrypoint for the ecosystem directory TUI."""

from __future__ import annotations

from directory_core.app import main


if __name__ == "__main__":
    raise SystemExit(main())
