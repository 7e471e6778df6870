"""
Clock and Identifier Generation
===============================

Time and randomness are the only non-deterministic inputs of an export.
Both are injected into the exporter so tests can pin them.

Author: Tikun13 Team
Version: 1.0.0
"""

import random
import string
from datetime import datetime, timezone
from typing import Optional, Protocol


_BASE36 = string.digits + string.ascii_lowercase


class Clock(Protocol):
    """Source of the current time."""

    def now(self) -> datetime:
        ...


class SystemClock:
    """Wall clock in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    """Clock frozen at a given instant (naive datetimes are taken as UTC)."""

    def __init__(self, instant: datetime):
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        self.instant = instant

    def now(self) -> datetime:
        return self.instant


def to_epoch_ms(moment: datetime) -> int:
    """Epoch milliseconds, the OCSF timestamp_t representation."""
    return int(moment.timestamp() * 1000)


def to_iso(moment: datetime) -> str:
    """ISO-8601 UTC with millisecond precision, e.g. 2025-01-01T09:30:00.000Z"""
    utc = moment.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


class UIDGenerator:
    """
    Builds finding and recommendation identifiers.

    Identifiers are ``<prefix>-<epoch ms>-<suffix>`` where the suffix is
    either a sequence index or nine random base36 characters. They are
    unique within one export, not across exports.

    Example:
        uids = UIDGenerator(rng=random.Random(7))
        uids.sequential("tikun13", 1735725000000, 0)  # 'tikun13-1735725000000-0'
        uids.random("tikun13", 1735725000000)         # 'tikun13-1735725000000-k3x...'
    """

    SUFFIX_LENGTH = 9

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def sequential(self, prefix: str, timestamp_ms: int, index: int) -> str:
        return f"{prefix}-{timestamp_ms}-{index}"

    def random(self, prefix: str, timestamp_ms: int) -> str:
        suffix = "".join(self.rng.choice(_BASE36) for _ in range(self.SUFFIX_LENGTH))
        return f"{prefix}-{timestamp_ms}-{suffix}"
