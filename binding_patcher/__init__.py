# coding=utf-8
# SPDX-License-Identifier: Apache-2.0
"""
binding-patcher: keeps native Node.js dependencies buildable after install.
"""

__version__ = "0.1.0"
