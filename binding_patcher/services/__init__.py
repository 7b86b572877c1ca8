# coding=utf-8
# SPDX-License-Identifier: Apache-2.0
"""
Patch and build services.
"""

from .builder import BuildError, manual_build_hint, run_native_build
from .patcher import PatchOutcome, ensure_patched_and_built

__all__ = [
    "BuildError",
    "PatchOutcome",
    "ensure_patched_and_built",
    "manual_build_hint",
    "run_native_build",
]
