# topmark:header:start
#
#   project      : TypeMark
#   file         : orchestrator.py
#   file_relpath : src/typemark/bump/orchestrator.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Raise the strictness of a set of files, verify, and roll back regressions.

The workflow runs in four steps over one project root:

1. **Select** the files whose sigil equals the source level.
2. **Apply** the target level to each of them, one file at a time.
3. **Verify** by running the checker once over the whole root.
4. **Reconcile**: every selected file named by a diagnostic goes back to the source
   level; the others keep the target level.

If the checker cannot run at all, or fails without reporting a single diagnostic,
every file changed in step 2 is put back and the bump ends in ``INFRA_FAILED``. Rollback problems never raise: they are collected in
[`BumpResult.failed`][typemark.bump.model.BumpResult].
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from typemark.bump.model import BumpPlan, BumpResult, BumpState
from typemark.checker.parser import parse_diagnostics
from typemark.checker.runner import SubprocessChecker
from typemark.config.logging import get_logger
from typemark.config.model import MutableConfig
from typemark.constants import DEFAULT_BUMP_FROM, DEFAULT_BUMP_TO
from typemark.core.errors import CheckerInvocationError
from typemark.sigils.files import change_sigil_in_files, files_with_strictness
from typemark.sigils.strictness import validate_level

if TYPE_CHECKING:
    from collections.abc import Iterable

    from typemark.checker.runner import Checker, CheckerResult
    from typemark.config.logging import TypemarkLogger
    from typemark.config.model import Config
    from typemark.sigils.files import SigilChangeReport

logger: TypemarkLogger = get_logger(__name__)


def _rollback(plan: BumpPlan, paths: Iterable[Path]) -> None:
    """Put ``paths`` back to the source level, recording the outcome on ``plan``."""
    targets: list[Path] = sorted(paths)
    if not targets:
        return
    logger.warning("Reverting %d file(s) to %r", len(targets), plan.source_level)
    report: SigilChangeReport = change_sigil_in_files(targets, plan.source_level)
    plan.reverted.update(report.changed)
    for path in report.skipped:
        plan.failed[path] = "sigil disappeared before rollback"
    for path, reason in report.failed.items():
        plan.failed[path] = f"rollback failed: {reason}"


def _failure_summary(output: str) -> str:
    """Return the first non-blank line of a failed checker run."""
    for line in output.splitlines():
        if line.strip():
            return line.strip()
    return "checker failed with no output"

def bump(
    root: Path,
    source_level: str = DEFAULT_BUMP_FROM,
    target_level: str = DEFAULT_BUMP_TO,
    *,
    checker: Checker | None = None,
    config: Config | None = None,
) -> BumpResult:
    """Promote the files of ``root`` from ``source_level`` to ``target_level``.

    Args:
        root (Path): Project root; the checker runs there and diagnostic paths are
            resolved against it.
        source_level (str): Level of the files to promote.
        target_level (str): Level to promote them to.
        checker (Checker | None): Checker to run; defaults to a `SubprocessChecker`
            built from ``config``.
        config (Config | None): Configuration; defaults to the configuration merged
            from ``root``.

    Returns:
        BumpResult: The outcome; ``state`` is ``RECONCILED`` or ``INFRA_FAILED``.

    Raises:
        InvalidLevelError: If either level is not recognized. Nothing has been
            read or written at that point.
    """
    validate_level(source_level)
    validate_level(target_level)

    if config is None:
        config = MutableConfig.load_merged(root=root).freeze()
    if checker is None:
        checker = SubprocessChecker(config.checker_command)

    plan = BumpPlan(root=root.resolve(), source_level=source_level, target_level=target_level)
    if source_level == target_level:
        logger.info("Source and target level are both %r: nothing to do", source_level)
        plan.advance(BumpState.RECONCILED)
        return plan.to_result()

    # Select
    plan.selected = set(
        files_with_strictness(
            plan.root,
            source_level,
            extensions=config.file_extensions,
            exclude_patterns=config.exclude_patterns,
        )
    )
    logger.info("Selected %d file(s) at %r under %s", len(plan.selected), source_level, plan.root)
    if not plan.selected:
        plan.advance(BumpState.RECONCILED)
        return plan.to_result()

    # Apply
    applied: SigilChangeReport = change_sigil_in_files(sorted(plan.selected), target_level)
    plan.skipped.update(applied.skipped)
    plan.failed.update(applied.failed)
    plan.advance(BumpState.APPLIED)
    logger.debug("Applied %r to %d file(s)", target_level, len(applied.changed))
    if not applied.changed:
        plan.advance(BumpState.RECONCILED)
        return plan.to_result()

    # Verify
    plan.advance(BumpState.VERIFYING)
    try:
        result: CheckerResult = checker(plan.root)
    except CheckerInvocationError as exc:
        logger.error("Checker failed to run: %s", exc)
        plan.error = str(exc)
        _rollback(plan, applied.changed)
        plan.advance(BumpState.INFRA_FAILED)
        return plan.to_result()

    # Reconcile
    plan.diagnostics = parse_diagnostics(result.output)
    if not result.success and not plan.diagnostics:
        plan.error = _failure_summary(result.output)
        logger.error("Checker failed without reporting diagnostics: %s", plan.error)
        _rollback(plan, applied.changed)
        plan.advance(BumpState.INFRA_FAILED)
        return plan.to_result()
    with_errors: set[Path] = plan.files_with_errors() & set(applied.changed)
    logger.debug(
        "%d diagnostic(s), %d promoted file(s) with errors",
        len(plan.diagnostics),
        len(with_errors),
    )
    _rollback(plan, with_errors)
    plan.advance(BumpState.RECONCILED)

    bump_result: BumpResult = plan.to_result()
    logger.info(
        "Bump %r -> %r: %d promoted, %d reverted",
        source_level,
        target_level,
        len(bump_result.promoted),
        len(bump_result.reverted),
    )
    return bump_result
