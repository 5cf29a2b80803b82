#!/usr/bin/env python3
"""
Generate project binstubs for the Go tools pinned in tools.go.

Usage:
  python binstubs_cli.py
  python binstubs_cli.py --tools-file tools/tools.go --output-dir bin
  python binstubs_cli.py --verbose

Each blank import in tools.go becomes bin/<last-path-segment>, a shell script
that runs the tool with `go run`, so the version in go.mod is always used:

  import (
      _ "github.com/golang-migrate/migrate/v4/cmd/migrate" // binstub:args="-tags postgres"
      _ "github.com/some/lib" // binstub:ignore
  )
"""

from __future__ import annotations

from binstubs.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
