"""Value objects: self-validating domain primitives."""

from __future__ import annotations

import calendar
import re
from dataclasses import dataclass
from datetime import date, timedelta

from repo_entropy.domain.exceptions import InvalidGitHubUrlError, InvalidTimeWindowError

_GITHUB_URL_RE = re.compile(
    r"^https?://github\.com/(?P<owner>[A-Za-z0-9\-_.]+)/(?P<repo>[A-Za-z0-9\-_.]+?)(?:\.git)?/?$"
)

_TIME_WINDOW_RE = re.compile(r"^(?P<num>\d+)(?P<unit>[dmy])$")


@dataclass(frozen=True, slots=True)
class GitHubUrl:
    """Validated GitHub repository URL.

    Extracts *owner* and *repo* from a URL like
    ``https://github.com/psf/requests``.  Rejects anything that does not match
    the expected pattern.
    """

    owner: str
    repo: str
    raw: str

    @classmethod
    def from_string(cls, url: str) -> GitHubUrl:
        """Parse and validate a raw URL string."""
        url = url.strip()
        match = _GITHUB_URL_RE.match(url)
        if not match:
            raise InvalidGitHubUrlError(
                f"Invalid GitHub URL: '{url}'. "
                "Expected format: https://github.com/<owner>/<repo>"
            )
        return cls(owner=match["owner"], repo=match["repo"], raw=url)

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


@dataclass(frozen=True, slots=True)
class TimeWindow:
    """Look-back window such as ``7d``, ``2m`` or ``1y``.

    The window only labels the report; the entropy snapshot is always the
    current tree.
    """

    since: date | None = None

    @classmethod
    def all_time(cls) -> TimeWindow:
        return cls()

    @classmethod
    def from_string(cls, arg: str | None, now: date | None = None) -> TimeWindow:
        """Parse ``<number><d|m|y>`` into a cut-off date relative to *now*."""
        if arg is None or not arg.strip():
            return cls.all_time()

        text = arg.strip()
        match = _TIME_WINDOW_RE.match(text)
        if not match:
            raise InvalidTimeWindowError(
                f"Invalid time window: '{text}'. Expected e.g. 7d, 2m or 1y."
            )

        today = now or date.today()
        num = int(match["num"])
        unit = match["unit"]
        if unit == "d":
            return cls(since=today - timedelta(days=num))
        if unit == "m":
            return cls(since=_shift_months(today, -num))
        return cls(since=_shift_months(today, -12 * num))

    @property
    def label(self) -> str:
        if self.since is None:
            return "all time"
        return f"since {self.since.isoformat()}"


def _shift_months(day: date, months: int) -> date:
    index = day.year * 12 + (day.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))
