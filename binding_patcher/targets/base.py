# coding=utf-8
# SPDX-License-Identifier: Apache-2.0
"""
Description of an installed native Node.js dependency.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class NativeDependency:
    """A dependency whose native binding is built with node-gyp."""

    name: str
    binding_name: str
    descriptor_name: str = "binding.gyp"
    build_dir: str = "build/Release"

    def descriptor_path(self, root: Path) -> Path:
        """Return the build descriptor path under the dependency root."""
        return Path(root) / self.descriptor_name

    def artifact_path(self, root: Path) -> Path:
        """Return the compiled binding path under the dependency root."""
        return Path(root) / self.build_dir / self.binding_name
