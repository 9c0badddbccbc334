"""Counters and histograms describing the executed actions."""

from __future__ import annotations

import math
import threading
import time
from typing import Iterable, Sequence

STATUS_OK = 200
STATUS_INTERNAL_SERVER_ERROR = 500


class _LabelledMetric:
    def __init__(self, name: str, help_text: str, label_names: Sequence[str]) -> None:
        self.name = name
        self.help_text = help_text
        self.label_names = tuple(label_names)
        self._lock = threading.Lock()

    def _key(self, label_values: Iterable[object]) -> tuple[str, ...]:
        key = tuple(str(value) for value in label_values)
        if len(key) != len(self.label_names):
            raise ValueError(
                f"{self.name}: expected {len(self.label_names)} label values, got {len(key)}"
            )
        return key


class CounterVec(_LabelledMetric):
    """A family of counters, one per combination of label values."""

    def __init__(self, name: str, help_text: str, label_names: Sequence[str]) -> None:
        super().__init__(name, help_text, label_names)
        self._values: dict[tuple[str, ...], float] = {}

    def inc(self, *args: object) -> None:
        """Increase by one the counter with the given label values."""
        key = self._key(args)
        with self._lock:
            self._values[key] = self._values.get(key, 0.0) + 1.0

    def get(self, *args: object) -> float:
        """The current value of the counter with the given label values."""
        key = self._key(args)
        with self._lock:
            return self._values.get(key, 0.0)


class HistogramVec(_LabelledMetric):
    """A family of histograms with cumulative buckets, one per combination of labels."""

    def __init__(
        self,
        name: str,
        help_text: str,
        buckets: Sequence[float],
        label_names: Sequence[str],
    ) -> None:
        super().__init__(name, help_text, label_names)
        bounds = [float(bound) for bound in buckets]
        if any(later <= earlier for earlier, later in zip(bounds, bounds[1:])):
            raise ValueError(f"{name}: buckets must be in increasing order")
        if not bounds or not math.isinf(bounds[-1]):
            bounds.append(math.inf)
        self.buckets = tuple(bounds)
        self._counts: dict[tuple[str, ...], list[int]] = {}
        self._sums: dict[tuple[str, ...], float] = {}

    def observe(self, value: float, *args: object) -> None:
        """Record one observation for the given label values."""
        key = self._key(args)
        with self._lock:
            counts = self._counts.setdefault(key, [0] * len(self.buckets))
            for position, bound in enumerate(self.buckets):
                if value <= bound:
                    counts[position] += 1
            self._sums[key] = self._sums.get(key, 0.0) + value

    def bucket_counts(self, *args: object) -> dict[float, int]:
        """Cumulative counts per bucket upper bound for the given label values."""
        key = self._key(args)
        with self._lock:
            counts = self._counts.get(key, [0] * len(self.buckets))
            return dict(zip(self.buckets, counts))


ACTION_RESPONSE_TIME = HistogramVec(
    "bdjuno_action_response_time",
    "Time it has taken to execute an action",
    [0.5, 1, 2, 3, 4, 5],
    ["path"],
)

ACTION_COUNTER = CounterVec(
    "bdjuno_actions_total_count",
    "Total number of actions executed.",
    ["path", "http_status_code"],
)

ACTION_ERROR_COUNTER = CounterVec(
    "bdjuno_actions_error_count",
    "Total number of errors emitted.",
    ["path", "http_status_code"],
)


def success_counter(path: str) -> None:
    """Count a successful execution of the action at path."""
    ACTION_COUNTER.inc(path, str(STATUS_OK))


def error_counter(path: str) -> None:
    """Count a failed execution of the action at path."""
    ACTION_ERROR_COUNTER.inc(path, str(STATUS_INTERNAL_SERVER_ERROR))


def response_time_buckets(path: str, start: float) -> None:
    """Record the time elapsed since start, a time.monotonic() reading."""
    ACTION_RESPONSE_TIME.observe(time.monotonic() - start, path)