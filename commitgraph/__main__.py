"""Run the commitgraph CLI: python -m commitgraph <cmd> ..."""

import sys

from .cli import main

sys.exit(main())
