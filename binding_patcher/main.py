# coding=utf-8
# SPDX-License-Identifier: Apache-2.0
"""
Patch installed native dependencies and rebuild their bindings.

Usage:
    binding-patcher           # patch and rebuild configured dependencies
    binding-patcher --check   # only report what still needs patching/building

Meant to run from an npm postinstall hook. In normal mode the exit status is
always 0 so a failed patch never fails the install.
"""

import logging
import sys
from typing import List, Optional

from .config import (
    BUILD_COMMAND,
    BUILD_TIMEOUT,
    LOG_LEVEL,
    NODE_MODULES_DIR,
    PATCH_DEPENDENCIES,
)
from .services import PatchOutcome, ensure_patched_and_built
from .targets import get_dependency

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def run(check_only: bool = False) -> List[PatchOutcome]:
    """Process every configured dependency and return the outcomes."""
    outcomes: List[PatchOutcome] = []
    for name in PATCH_DEPENDENCIES:
        try:
            dependency = get_dependency(name)
        except ValueError as e:
            logger.warning(f"Skipping {name}: {e}")
            continue

        outcome = ensure_patched_and_built(
            NODE_MODULES_DIR / dependency.name,
            dependency,
            build_command=BUILD_COMMAND,
            timeout=BUILD_TIMEOUT,
            check_only=check_only,
        )
        if not outcome.installed:
            logger.info(f"[{dependency.name}] Not installed, skipping")
        outcomes.append(outcome)
    return outcomes


def configure_logging(level: str) -> None:
    """Set up root logging; an unknown level name falls back to INFO."""
    name = str(level).strip().upper()
    known = isinstance(logging.getLevelName(name), int)
    logging.basicConfig(level=name if known else logging.INFO, format=LOG_FORMAT)
    if not known:
        logger.warning(f"Unknown log level {level!r}, using INFO")


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    check_only = "--check" in args

    configure_logging(LOG_LEVEL)

    outcomes = run(check_only=check_only)

    if check_only:
        pending = [o for o in outcomes if o.needs_rebuild or not o.ok]
        for o in pending:
            logger.info(f"[{o.dependency}] NEED  patch/rebuild")
        return 1 if pending else 0
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
