"""Pytest configuration.

Tests import from the `src.*` namespace; put the repository root on the path so `pytest` works
without installing the project.
"""

from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))
