# coding=utf-8
# SPDX-License-Identifier: Apache-2.0
"""
Configuration module for the binding patcher.

This module centralizes all configuration options, including where the
installed Node.js dependencies live, which of them to process, and how the
native build tool is invoked.

The patcher runs inside an install, so an invalid value never raises here:
it is reported as a warning and the default is used instead.
"""

import logging
import os
import shlex
from pathlib import Path
from typing import List

logger = logging.getLogger(__name__)

DEFAULT_BUILD_COMMAND = "npx node-gyp rebuild"
DEFAULT_BUILD_TIMEOUT = 120.0
DEFAULT_LOG_LEVEL = "INFO"


def parse_build_command(raw: str) -> List[str]:
    """Split a shell-style command line, falling back to the default build command."""
    try:
        command = shlex.split(raw)
    except ValueError as e:
        logger.warning(f"Invalid PATCHER_BUILD_COMMAND {raw!r} ({e}), using '{DEFAULT_BUILD_COMMAND}'")
        return shlex.split(DEFAULT_BUILD_COMMAND)
    if not command:
        logger.warning(f"Empty PATCHER_BUILD_COMMAND, using '{DEFAULT_BUILD_COMMAND}'")
        return shlex.split(DEFAULT_BUILD_COMMAND)
    return command


def parse_build_timeout(raw: str) -> float:
    """Parse a timeout in seconds, falling back to the default for bad or non-positive values."""
    try:
        timeout = float(raw)
    except ValueError:
        logger.warning(f"Invalid PATCHER_BUILD_TIMEOUT {raw!r}, using {DEFAULT_BUILD_TIMEOUT:g}s")
        return DEFAULT_BUILD_TIMEOUT
    if not timeout > 0:
        logger.warning(f"PATCHER_BUILD_TIMEOUT must be positive, got {raw!r}, using {DEFAULT_BUILD_TIMEOUT:g}s")
        return DEFAULT_BUILD_TIMEOUT
    return timeout


def parse_log_level(raw: str) -> str:
    """Normalize a logging level name, falling back to INFO for unknown names."""
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        logger.warning(f"Unknown LOG_LEVEL {raw!r}, using {DEFAULT_LOG_LEVEL}")
        return DEFAULT_LOG_LEVEL
    return level


# ============================================================================
# Project Layout
# ============================================================================

PROJECT_ROOT = Path(os.getenv("PATCHER_PROJECT_ROOT", os.getcwd())).resolve()
"""
Root of the project whose installed dependencies are patched.
Default: the current working directory (npm runs postinstall scripts from
the package root).
"""

NODE_MODULES_DIR = Path(os.getenv("PATCHER_NODE_MODULES", str(PROJECT_ROOT / "node_modules")))
"""
Directory holding installed dependencies.
Default: <PROJECT_ROOT>/node_modules
"""

# ============================================================================
# Dependency Selection
# ============================================================================

PATCH_DEPENDENCIES = [
    name.strip()
    for name in os.getenv("PATCHER_DEPENDENCIES", "tree-sitter-swift").split(",")
    if name.strip()
]
"""
Dependencies to patch and rebuild, comma separated.
Each name must be registered in binding_patcher.targets.
- 'tree-sitter-swift': drops the parser regeneration actions (default)
"""

# ============================================================================
# Native Build Settings
# ============================================================================

BUILD_COMMAND = parse_build_command(os.getenv("PATCHER_BUILD_COMMAND", DEFAULT_BUILD_COMMAND))
"""
Command used to rebuild a native binding, run from the dependency root.
Default: npx node-gyp rebuild
"""

BUILD_TIMEOUT = parse_build_timeout(os.getenv("PATCHER_BUILD_TIMEOUT", str(DEFAULT_BUILD_TIMEOUT)))
"""
Hard timeout for the native build, in seconds.
The build process is killed and the attempt reported as failed when exceeded.
"""

# ============================================================================
# Logging
# ============================================================================

LOG_LEVEL = parse_log_level(os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL))
"""
Logging level name.
Options: 'DEBUG', 'INFO', 'WARNING', 'ERROR'
"""
