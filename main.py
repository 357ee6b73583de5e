#!/usr/bin/env python3
"""Thin wrapper: run commitgraph CLI. Usage: python main.py <cmd> ... (same as python -m commitgraph)."""

import sys

if __name__ == "__main__":
    from commitgraph.cli import main
    sys.exit(main())
