# coding=utf-8
# SPDX-License-Identifier: Apache-2.0
"""
Patch a native dependency's build descriptor and make sure its binding is built.

Everything here is best-effort: the patcher runs as part of a package install
and must never fail that install. Failures are logged as warnings together
with the command to run by hand.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Sequence, Union

from ..config import BUILD_COMMAND, BUILD_TIMEOUT
from ..descriptors import (
    ACTIONS_MARKER,
    parse_descriptor,
    remove_first_target_actions,
    write_descriptor,
)
from ..targets import NativeDependency, get_dependency
from .builder import manual_build_hint, run_native_build

logger = logging.getLogger(__name__)

BuildRunner = Callable[[Path, Sequence[str], float], object]


@dataclass
class PatchOutcome:
    """What a single patch run found and did."""

    dependency: str
    root: Path
    installed: bool = False
    patched: bool = False
    needs_rebuild: bool = False
    rebuilt: bool = False
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def ensure_patched_and_built(
    dependency_root: Union[str, Path],
    dependency: Optional[NativeDependency] = None,
    *,
    build_command: Optional[Sequence[str]] = None,
    timeout: Optional[float] = None,
    runner: BuildRunner = run_native_build,
    check_only: bool = False,
) -> PatchOutcome:
    """
    Remove pre-build actions from the dependency's descriptor and rebuild if needed.

    A missing descriptor means the dependency is not installed and is not an
    error. The descriptor is rewritten only after it parsed and the actions
    were removed in memory. A rebuild runs when the descriptor was patched or
    the compiled binding is missing.

    Args:
        dependency_root: Root directory of the installed dependency
        dependency: Which dependency this is, defaults to tree-sitter-swift
        build_command: Native build command, defaults to BUILD_COMMAND
        timeout: Build timeout in seconds, defaults to BUILD_TIMEOUT
        runner: Callable invoked as runner(root, command, timeout)
        check_only: Report what would be done without writing or building

    Returns:
        PatchOutcome describing the run. Errors are recorded, never raised.
    """
    root = Path(dependency_root)
    dep = dependency or get_dependency("tree-sitter-swift")
    command = list(build_command or BUILD_COMMAND)
    limit = BUILD_TIMEOUT if timeout is None else timeout
    outcome = PatchOutcome(dependency=dep.name, root=root)
    prefix = f"[{dep.name}]"

    descriptor_path = dep.descriptor_path(root)

    try:
        if not descriptor_path.exists():
            logger.debug(f"{prefix} {descriptor_path} not found, nothing to do")
            return outcome
        outcome.installed = True

        content = descriptor_path.read_text(encoding="utf-8")

        if ACTIONS_MARKER in content:
            document = parse_descriptor(content, source=str(descriptor_path))
            if remove_first_target_actions(document):
                outcome.needs_rebuild = True
                if check_only:
                    logger.info(f"{prefix} {dep.descriptor_name} still declares an actions array")
                else:
                    write_descriptor(descriptor_path, document)
                    outcome.patched = True
                    logger.info(f"{prefix} Patched {dep.descriptor_name} (removed actions array)")

        if not dep.artifact_path(root).exists():
            outcome.needs_rebuild = True
            if check_only:
                logger.info(f"{prefix} Native binding {dep.binding_name} is missing")

        if outcome.needs_rebuild and not check_only:
            logger.info(f"{prefix} Rebuilding native binding...")
            runner(root, command, limit)
            outcome.rebuilt = True
            logger.info(f"{prefix} Native binding built successfully")
    except Exception as e:
        outcome.error = str(e) or type(e).__name__
        if check_only:
            logger.warning(f"{prefix} Could not check native binding: {outcome.error}")
            return outcome
        logger.warning(f"{prefix} Could not build native binding: {outcome.error}")
        logger.warning(f"{prefix} You may need to manually run: {manual_build_hint(root, command)}")

    return outcome
