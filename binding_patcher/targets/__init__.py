# coding=utf-8
# SPDX-License-Identifier: Apache-2.0
"""
Native dependencies known to the patcher.
"""

from .base import NativeDependency
from .registry import KNOWN_DEPENDENCIES, get_dependency

__all__ = ["NativeDependency", "KNOWN_DEPENDENCIES", "get_dependency"]
