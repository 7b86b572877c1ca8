# coding=utf-8
# SPDX-License-Identifier: Apache-2.0
"""
Registry of dependencies the patcher knows how to fix.
"""

from typing import Dict

from .base import NativeDependency

KNOWN_DEPENDENCIES: Dict[str, NativeDependency] = {
    # Ships pre-generated parser.c/scanner.c, but its binding.gyp still
    # declares actions that regenerate them with tree-sitter-cli.
    "tree-sitter-swift": NativeDependency(
        name="tree-sitter-swift",
        binding_name="tree_sitter_swift_binding.node",
    ),
}


def get_dependency(name: str) -> NativeDependency:
    """
    Look up a known dependency by package name.

    Args:
        name: npm package name, matched case-insensitively

    Returns:
        The registered NativeDependency

    Raises:
        ValueError: If the name is not registered
    """
    key = name.strip().lower()
    dependency = KNOWN_DEPENDENCIES.get(key)
    if dependency is None:
        supported = ", ".join(f"'{n}'" for n in sorted(KNOWN_DEPENDENCIES))
        raise ValueError(
            f"Unknown dependency: {name}. "
            f"Supported values: {supported}"
        )
    return dependency
