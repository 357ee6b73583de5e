"""Constants for commitgraph: row markers, config paths, defaults."""

from __future__ import annotations

# Row markers: one character per column of a layout row
MARKER_VACANT = " "
MARKER_PASSTHROUGH = "|"
MARKER_NODE = "o"
MARKER_TERMINAL = "^"

MARKER_NAMES = {
    MARKER_VACANT: "vacant",
    MARKER_PASSTHROUGH: "vertical-passthrough",
    MARKER_NODE: "node",
    MARKER_TERMINAL: "terminal-node",
}

# Config file (INI format)
CONFIG_FILENAME = ".commitgraph.ini"
CONFIG_ENV_VAR = "COMMITGRAPH_CONFIG"

# Output formats
FORMAT_ASCII = "ascii"
FORMAT_JSON = "json"
OUTPUT_FORMATS = (FORMAT_ASCII, FORMAT_JSON)

# Short identifier length in text output (git log --oneline uses 7)
DEFAULT_ABBREV = 7

# Object names accepted in rev-list input: abbreviated or full hex hashes
MIN_PREFIX_LEN = 4
SHA256_HEX_LEN = 64
