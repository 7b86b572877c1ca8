# coding=utf-8
# SPDX-License-Identifier: Apache-2.0
"""
Shared fixtures: a fake installed tree-sitter-swift package on disk.
"""

import pytest

from binding_patcher.targets import get_dependency

SWIFT_BINDING_GYP = """\
{
  "targets": [
    {
      "target_name": "tree_sitter_swift_binding",
      "dependencies": [
        "<!(node -p \\"require('node-addon-api').targets\\"):node_addon_api_except"
      ],
      "include_dirs": [
        "src"
      ],
      "sources": [
        "bindings/node/binding.cc",
        "src/parser.c",
        "src/scanner.c"
      ],
      # Regenerate the parser from grammar.js before compiling
      "actions": [
        {
          "action_name": "generate_header_files",
          "inputs": [
            "grammar.js"
          ],
          "outputs": [
            "src/parser.c"
          ],
          "action": ["tree-sitter", "generate"]
        }
      ],
      "cflags_c": [
        "-std=c11"
      ]
    }
  ]
}
"""

CLEAN_BINDING_GYP = """\
{
  # "actions" were dropped upstream
  "targets": [
    {
      "target_name": "tree_sitter_swift_binding",
      "sources": ["bindings/node/binding.cc", "src/parser.c", "src/scanner.c"]
    }
  ]
}
"""


class FakeRunner:
    """Records build invocations instead of running node-gyp."""

    def __init__(self, error=None):
        self.calls = []
        self.error = error

    def __call__(self, cwd, command, timeout):
        self.calls.append({"cwd": cwd, "command": list(command), "timeout": timeout})
        if self.error is not None:
            raise self.error


@pytest.fixture
def swift_gyp():
    """tree-sitter-swift binding.gyp as shipped, with an actions array."""
    return SWIFT_BINDING_GYP


@pytest.fixture
def clean_gyp():
    """binding.gyp without actions, mentioning them only in a comment."""
    return CLEAN_BINDING_GYP


@pytest.fixture
def swift():
    return get_dependency("tree-sitter-swift")


@pytest.fixture
def swift_root(tmp_path, swift_gyp):
    """Installed tree-sitter-swift whose binding.gyp still has actions."""
    root = tmp_path / "node_modules" / "tree-sitter-swift"
    root.mkdir(parents=True)
    (root / "binding.gyp").write_text(swift_gyp, encoding="utf-8")
    return root


@pytest.fixture
def built_artifact(swift, swift_root):
    """Create the compiled binding so no rebuild is needed for it."""
    artifact = swift.artifact_path(swift_root)
    artifact.parent.mkdir(parents=True)
    artifact.write_bytes(b"\x7fELF")
    return artifact


@pytest.fixture
def runner():
    return FakeRunner()


@pytest.fixture
def failing_runner():
    """Factory for a runner that raises the given error when called."""
    return lambda error: FakeRunner(error=error)
