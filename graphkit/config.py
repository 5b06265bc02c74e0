"""
Configuration constants for graphkit.

All paths and tunable settings are defined here. Settings that vary
per environment are read from environment variables.
"""

import os
from pathlib import Path

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of graphkit/
PROJECT_ROOT = Path(__file__).parent.parent

# Data directory (example graph files)
DATA_DIR = PROJECT_ROOT / "data"

SAMPLE_GRAPH_PATH = DATA_DIR / "sample_graph.json"

# =============================================================================
# Loader Configuration
# =============================================================================

# File suffixes understood by graphkit.data.loader, mapped to their format
SUPPORTED_SUFFIXES = {
    ".json": "json",
    ".msgpack": "msgpack",
    ".mpk": "msgpack",
}

# Weight given to edges listed as a bare [a, b] pair
DEFAULT_EDGE_WEIGHT = 1

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"

# =============================================================================
# Validation Helpers
# =============================================================================

def validate_data_files() -> dict[str, bool]:
    """Check which data files exist."""
    return {
        "sample_graph": SAMPLE_GRAPH_PATH.exists(),
    }
