"""
Console rendering of timer snapshots.

    load: 9.17ms
    load: 3.48ms
    sub processing
      total: 6.54ms
"""

import logging
from typing import Any, Dict, List, Optional, Union

from .schemas import NestedMeasures

logger = logging.getLogger(__name__)

SnapshotLike = Union[NestedMeasures, Dict[str, Any]]


def _as_snapshot(source: Any) -> NestedMeasures:
    if isinstance(source, NestedMeasures):
        return source
    if hasattr(source, "to_snapshot"):
        return source.to_snapshot()
    return NestedMeasures.model_validate(source)


def format_snapshot(snapshot: SnapshotLike, precision: int = 2, indent: str = "  ") -> str:
    """
    Render a snapshot as an indented text tree.

    Args:
        snapshot: NestedMeasures model or its dict form
        precision: Decimal places for durations
        indent: Indentation added per nesting level

    Returns:
        One line per measure, one header line per child
    """
    lines: List[str] = []
    _render(_as_snapshot(snapshot), precision, indent, 0, lines)
    return "\n".join(lines)


def _render(
    snapshot: NestedMeasures,
    precision: int,
    indent: str,
    depth: int,
    lines: List[str],
) -> None:
    prefix = indent * depth
    for measure in snapshot.measures:
        lines.append(f"{prefix}{measure.name}: {measure.duration:.{precision}f}ms")
    for name, child in (snapshot.children or {}).items():
        lines.append(f"{prefix}{name}")
        _render(child, precision, indent, depth + 1, lines)


def log_snapshot(
    source: Any,
    target_logger: Optional[logging.Logger] = None,
    level: int = logging.DEBUG,
) -> None:
    """
    Log a formatted snapshot as a single record.

    Args:
        source: PerformanceTimer, NestedMeasures or snapshot dict
        target_logger: Logger to use; defaults to this module's logger
        level: Logging level for the record
    """
    target = target_logger or logger
    if not target.isEnabledFor(level):
        return
    target.log(level, "Timer snapshot:\n%s", format_snapshot(_as_snapshot(source)))


__all__ = [
    "format_snapshot",
    "log_snapshot",
]
