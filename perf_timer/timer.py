"""
Hierarchical performance timer.

Records named durations between points in a single operation, similar to
the web performance API but not global and with child contexts for
sub-operations.

Marks are removed as soon as they are measured, and marking can be
skipped entirely: measuring an unmarked name records the time since the
timer was created or since the last measure call, whichever is later.

Usage:
    from perf_timer import PerformanceTimer

    timer = PerformanceTimer()
    load_documents()
    timer.measure("load")            # time since creation
    load_documents()
    timer.measure("load")            # time since the previous measure

    sub = timer.with_context("sub processing")
    process()

    timer.finalize()                 # "sub processing" gets a "total"
    print(timer.to_dict())

Output:
    {
        "measures": [
            {"name": "load", "duration": 9.168},
            {"name": "load", "duration": 3.48},
        ],
        "children": {
            "sub processing": {"measures": [{"name": "total", "duration": 6.536}]}
        },
    }

A timer is not thread-safe. Confine each timer (and its subtree) to one
thread or task; sibling subtrees may be driven independently.
"""

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional, Tuple

from pydantic import ValidationError

from .clock import Clock, get_clock, perf_counter_ms
from .config import get_timer_config
from .report import log_snapshot
from .schemas import Measure, NestedMeasures

logger = logging.getLogger(__name__)

IMPLICIT_TOTAL = "total"


def _default_clock() -> Clock:
    """Resolve the configured clock, falling back to the perf counter."""
    try:
        return get_clock(get_timer_config().clock_source)
    except ValidationError as e:
        logger.warning(f"Invalid timer configuration, using perf_counter clock: {e}")
        return perf_counter_ms


class PerformanceTimer:
    """
    Records marks and measures, and owns a tree of child timers.

    Responsibilities:
    - Open named marks and close them into measures
    - Measure unmarked names against the implicit start reference
    - Create uniquely keyed child timers
    - Close out all open state on finalize and export a snapshot
    """

    def __init__(self, clock: Optional[Clock] = None) -> None:
        """
        Create a timer whose implicit start is the current clock reading.

        Args:
            clock: Millisecond clock; defaults to the configured clock source
        """
        if clock is None:
            clock = _default_clock()
        self._clock = clock
        self._marks: Dict[str, float] = {}
        self._measures: List[Measure] = []
        self._children: Dict[str, "PerformanceTimer"] = {}
        self._start = clock()

    @property
    def clock(self) -> Clock:
        """Clock shared with every child of this timer."""
        return self._clock

    @property
    def start(self) -> float:
        """Reference reading for the next measure of an unmarked name."""
        return self._start

    @property
    def marks(self) -> Dict[str, float]:
        """Copy of the open marks."""
        return dict(self._marks)

    @property
    def measures(self) -> Tuple[Measure, ...]:
        """Completed measures in recording order."""
        return tuple(self._measures)

    @property
    def children(self) -> Dict[str, "PerformanceTimer"]:
        """Copy of the child mapping, in creation order."""
        return dict(self._children)

    def with_context(self, name: str) -> "PerformanceTimer":
        """
        Create a child timer registered under ``name``.

        If ``name`` is taken, the child is registered as
        ``"{name}-{number of children}"`` instead. The earlier child keeps
        its key. The child shares this timer's clock.

        Args:
            name: Label for the sub-operation

        Returns:
            The newly created child timer
        """
        child = PerformanceTimer(clock=self._clock)
        if name in self._children:
            renamed = f"{name}-{len(self._children)}"
            logger.debug(f"Child context '{name}' already exists, registering as '{renamed}'")
            name = renamed
        self._children[name] = child
        return child

    def mark(self, name: str) -> None:
        """Open a mark, replacing any open mark of the same name."""
        if name in self._marks:
            logger.debug(f"Re-marking '{name}', discarding the previous open mark")
        self._marks[name] = self._clock()

    def measure(self, name: str) -> None:
        """
        Record the time elapsed since the mark ``name`` was set.

        Without an open mark the implicit start is used instead. Either
        way the mark is consumed and the implicit start moves to now.
        """
        self._record(name, self._marks.pop(name, self._start))

    def _record(self, name: str, start: float) -> None:
        now = self._clock()
        self._start = now
        self._measures.append(Measure(name=name, duration=now - start))

    @contextmanager
    def span(self, name: str) -> Iterator["PerformanceTimer"]:
        """
        Measure the enclosed block under ``name``.

        The measure is recorded even if the block raises. The start
        reading is held by the block itself rather than in the marks, so
        overlapping spans of the same name (e.g. concurrent coroutines)
        each record their own duration.

        Example:
            with timer.span("parse"):
                parse(document)
        """
        start = self._clock()
        try:
            yield self
        finally:
            self._record(name, start)

    def finalize(self) -> None:
        """
        Close out this timer and all of its descendants.

        A timer that recorded nothing gets an implicit ``"total"`` measure.
        Every open mark is measured so none is dropped from the report.
        Intended to be called once, on the root, when the operation ends.
        """
        self._finalize()

        try:
            config = get_timer_config()
        except ValidationError as e:
            logger.warning(f"Invalid timer configuration, skipping snapshot logging: {e}")
            return
        if config.log_on_finalize:
            log_snapshot(self, level=config.log_level_value)

    def _finalize(self) -> None:
        if not self._measures and not self._marks:
            logger.debug("Nothing measured, recording implicit total")
            self.measure(IMPLICIT_TOTAL)

        if self._marks:
            logger.debug(f"Closing {len(self._marks)} open mark(s): {', '.join(self._marks)}")
        for name in list(self._marks):
            self.measure(name)

        for child in self._children.values():
            child._finalize()

    def to_snapshot(self) -> NestedMeasures:
        """
        Export the measures of this timer and its children.

        Children appear only if at least one exists. Call after
        :meth:`finalize` for a complete report.
        """
        if not self._children:
            return NestedMeasures(measures=list(self._measures))

        children = {name: child.to_snapshot() for name, child in self._children.items()}
        return NestedMeasures(measures=list(self._measures), children=children)

    def to_dict(self) -> Dict[str, Any]:
        """Snapshot as a plain mapping."""
        return self.to_snapshot().to_dict()

    def to_json(self, indent: Optional[int] = None) -> str:
        """Snapshot as a JSON string."""
        return self.to_snapshot().to_json(indent=indent)

    def __repr__(self) -> str:
        return (
            f"PerformanceTimer(measures={len(self._measures)}, "
            f"marks={len(self._marks)}, children={list(self._children)})"
        )
