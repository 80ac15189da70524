"""WatchProjection — derives the displayed rows from the latest poll.

The projection is recomputed from the current ``WatchState`` on every
repaint.  It dedupes the aggregated runs and turns each surviving run
into a ``RunRow`` of display strings: truncated text, a relative
timestamp and a status label.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from datetime import datetime, timedelta, timezone

from pydantic import BaseModel, ConfigDict, Field

from ghwatch.core.dedupe import unique_workflow_runs
from ghwatch.models.runs import WatchState, WorkflowRun

# Column widths
REPO_WIDTH = 20
TITLE_WIDTH = 28
USER_WIDTH = 10

ELLIPSIS = "..."


class TimestampParseError(ValueError):
    """Raised when a run's ``updated_at`` is not an RFC 3339 date-time."""


# ---------------------------------------------------------------------------
# Text helpers
# ---------------------------------------------------------------------------


def truncate(text: str, total: int) -> str:
    """Cut *text* to *total* characters, marking the cut with an ellipsis."""
    if total >= len(text):
        return text
    return f"{text[:total]}{ELLIPSIS}"


# ---------------------------------------------------------------------------
# Timestamps
# ---------------------------------------------------------------------------

# ASCII digits only; use with fullmatch()
_RFC3339_RE = re.compile(
    r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"T(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})"
    r"(?:\.(?P<fraction>\d+))?"
    r"(?P<tz>Z|[+-]\d{2}:\d{2})",
    re.ASCII,
)


def parse_timestamp(value: str) -> datetime:
    """Parse a strict RFC 3339 date-time; the timezone is mandatory.

    Raises
    ------
    TimestampParseError
        If *value* is not of the form ``YYYY-MM-DDTHH:MM:SS[.frac](Z|±HH:MM)``
        or names an impossible date or time.
    """
    match = _RFC3339_RE.fullmatch(value)
    if match is None:
        raise TimestampParseError(f"Error converting updated_at time: {value!r}")

    tz_text = match["tz"]
    if tz_text == "Z":
        tz = timezone.utc
    else:
        sign = -1 if tz_text[0] == "-" else 1
        hours, minutes = int(tz_text[1:3]), int(tz_text[4:6])
        if hours > 23 or minutes > 59:
            raise TimestampParseError(
                f"Error converting updated_at time: {value!r} (bad offset)"
            )
        tz = timezone(sign * timedelta(hours=hours, minutes=minutes))

    # Sub-microsecond digits are dropped
    fraction = (match["fraction"] or "0")[:6].ljust(6, "0")
    try:
        return datetime(
            int(match["year"]),
            int(match["month"]),
            int(match["day"]),
            int(match["hour"]),
            int(match["minute"]),
            int(match["second"]),
            int(fraction),
            tzinfo=tz,
        )
    except ValueError as exc:
        raise TimestampParseError(
            f"Error converting updated_at time: {value!r} ({exc})"
        ) from exc


_SECOND = 1
_MINUTE = 60 * _SECOND
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR
_WEEK = 7 * _DAY
_MONTH = 30 * _DAY
_YEAR = 12 * _MONTH
_LONG_TIME = 37 * _YEAR

# (upper bound in seconds, format, divisor); first bound above the
# elapsed time wins.
_MAGNITUDES: list[tuple[float, str, int]] = [
    (_SECOND, "now", 1),
    (2 * _SECOND, "1 second {label}", 1),
    (_MINUTE, "{n} seconds {label}", _SECOND),
    (2 * _MINUTE, "1 minute {label}", 1),
    (_HOUR, "{n} minutes {label}", _MINUTE),
    (2 * _HOUR, "1 hour {label}", 1),
    (_DAY, "{n} hours {label}", _HOUR),
    (2 * _DAY, "1 day {label}", 1),
    (_WEEK, "{n} days {label}", _DAY),
    (2 * _WEEK, "1 week {label}", 1),
    (_MONTH, "{n} weeks {label}", _WEEK),
    (2 * _MONTH, "1 month {label}", 1),
    (_YEAR, "{n} months {label}", _MONTH),
    (18 * _MONTH, "1 year {label}", 1),
    (2 * _YEAR, "2 years {label}", 1),
    (_LONG_TIME, "{n} years {label}", _YEAR),
    (float("inf"), "a long while {label}", 1),
]


def format_time_ago(then: datetime, now: datetime | None = None) -> str:
    """Format *then* relative to *now*, e.g. ``"3 minutes ago"``.

    Times in the future read ``"... from now"``.
    """
    now = now or datetime.now(timezone.utc)
    elapsed = (now - then).total_seconds()
    label = "ago"
    if elapsed < 0:
        label = "from now"
        elapsed = -elapsed

    for bound, fmt, divisor in _MAGNITUDES:
        if elapsed < bound:
            return fmt.format(n=int(elapsed // divisor), label=label)
    # inf bound always matches
    raise AssertionError("unreachable")


# ---------------------------------------------------------------------------
# Status
# ---------------------------------------------------------------------------

STYLE_SUCCESS = "color(28)"
STYLE_IN_PROGRESS = "color(184)"
STYLE_FAILED = "color(160)"

# raw status/conclusion -> (label, Rich style)
_STATUS_LABELS: dict[str, tuple[str, str]] = {
    "success": ("Success", STYLE_SUCCESS),
    "in_progress": ("In Progress", STYLE_IN_PROGRESS),
    "queued": ("In Progress", STYLE_IN_PROGRESS),
    "failure": ("Failed", STYLE_FAILED),
}


def run_status(run: WorkflowRun) -> str:
    """The conclusion once a run has finished, the raw status until then."""
    return run.conclusion or run.status


def status_label(status: str) -> tuple[str, str]:
    """Map a raw status to ``(label, style)``.

    Unknown values pass through verbatim with no style.
    """
    return _STATUS_LABELS.get(status, (status, ""))


# ---------------------------------------------------------------------------
# Rows
# ---------------------------------------------------------------------------


def same_repo_as_previous(index: int, runs: Sequence[WorkflowRun]) -> bool:
    """True when row *index* belongs to the same repository as the row above."""
    if index == 0:
        return False
    return runs[index - 1].repository.name == runs[index].repository.name


class RunRow(BaseModel):
    """Display strings for one table row."""

    model_config = ConfigDict(frozen=True)

    repo: str
    branch: str
    description: str
    user: str
    triggered_at: str
    status: str
    status_style: str = ""


class WatchSnapshot(BaseModel):
    """A frozen, point-in-time view of the dashboard.

    Computed fresh from the ``WatchState`` on every repaint; never stored.
    """

    model_config = ConfigDict(frozen=True)

    rows: list[RunRow] = []
    fetched_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )

    @property
    def row_count(self) -> int:
        return len(self.rows)


class WatchProjection:
    """Turns a ``WatchState`` into a ``WatchSnapshot``.

    Parameters
    ----------
    clock:
        Returns "now" for relative timestamps.  Defaults to UTC wall time.
    """

    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def snapshot(self, state: WatchState) -> WatchSnapshot:
        """Dedupe the state's runs and build one row per surviving run.

        Raises
        ------
        TimestampParseError
            If any run's ``updated_at`` cannot be parsed.  No partial
            snapshot is produced.
        """
        now = self._clock()
        runs = unique_workflow_runs(state.runs)
        rows = [self._build_row(i, runs, now) for i in range(len(runs))]
        return WatchSnapshot(rows=rows, fetched_at=state.fetched_at)

    @staticmethod
    def _build_row(
        index: int, runs: Sequence[WorkflowRun], now: datetime
    ) -> RunRow:
        run = runs[index]
        updated_at = parse_timestamp(run.updated_at)
        label, style = status_label(run_status(run))

        repo_name = truncate(run.repository.name, REPO_WIDTH)
        if same_repo_as_previous(index, runs):
            repo_name = ""

        return RunRow(
            repo=repo_name,
            branch=run.head_branch,
            description=truncate(run.display_title, TITLE_WIDTH),
            user=truncate(run.actor.login, USER_WIDTH),
            triggered_at=format_time_ago(updated_at, now),
            status=label,
            status_style=style,
        )
