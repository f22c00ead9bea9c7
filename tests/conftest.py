"""Shared path setup for fps-timecode tests."""

import sys
from pathlib import Path

# Run against the checkout even when the package is not installed
SRC_DIR = Path(__file__).parent.parent / "src"

sys.path.insert(0, str(SRC_DIR))
