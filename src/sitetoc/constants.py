#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the sitetoc library.

Constants are organized by category:
1. Type Definitions
2. Table of Contents Defaults
3. Rendering Defaults
4. Configuration Files
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

BulletSymbol = Literal["-", "*", "+"]

# =============================================================================
# Table of Contents Defaults
# =============================================================================

DEFAULT_INCLUDE_PAGES = True
DEFAULT_INCLUDE_HEADERS = True
DEFAULT_ORDERED = True
DEFAULT_MAX_DEPTH = 6
DEFAULT_AUTO_EXPAND = False
DEFAULT_MAX_EXPAND_DEPTH = 1

# Prefix for header anchors generated from heading text
HEADER_ANCHOR_PREFIX = "#"

# =============================================================================
# Rendering Defaults
# =============================================================================

DEFAULT_ACTIVE_LINK_CLASS = "active"
DEFAULT_BULLET_SYMBOL: BulletSymbol = "-"

# =============================================================================
# Configuration Files
# =============================================================================

CONFIG_ENV_VAR = "SITETOC_CONFIG"
PYPROJECT_TOOL_SECTION = "sitetoc"
CONFIG_TOC_SECTION = "toc"
DEDICATED_CONFIG_FILENAMES = [".sitetoc.toml", ".sitetoc.yaml", ".sitetoc.yml", ".sitetoc.json"]
CONFIG_FILENAMES = DEDICATED_CONFIG_FILENAMES + ["pyproject.toml"]
