# coding=utf-8
# SPDX-License-Identifier: Apache-2.0
"""
Build descriptor handling for native Node.js modules.
"""

from .gyp import (
    ACTIONS_MARKER,
    DescriptorError,
    dump_descriptor,
    load_descriptor,
    parse_descriptor,
    remove_first_target_actions,
    strip_comments,
    write_descriptor,
)

__all__ = [
    "ACTIONS_MARKER",
    "DescriptorError",
    "dump_descriptor",
    "load_descriptor",
    "parse_descriptor",
    "remove_first_target_actions",
    "strip_comments",
    "write_descriptor",
]
