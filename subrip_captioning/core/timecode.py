"""Timecode normalization and timeline reconciliation for SubRip cues."""

import logging
import re
from typing import NamedTuple

from .exceptions import TimecodeError, TimelineOrderingViolation

logger = logging.getLogger(__name__)

# One-digit hour/minute/second at the start or after a colon
_UNPADDED_COMPONENT = re.compile(r'(?:(?<=:)|^)\d(?=[:,])')

_TIMECODE = re.compile(r'^\s*(\d+):(\d{1,2}):(\d{1,2})(?:[,.](\d{1,3}))?\s*$')


class TimelinePair(NamedTuple):
    """A start/end pair of timecodes after reconciliation."""
    start: str
    end: str


def normalize_timecode(raw: str) -> str:
    """Add missing milliseconds and leading zeroes to a timecode.

    Only the formatting is repaired; out-of-range components such as a
    minute of 61 are left untouched, and a short millisecond field is not
    padded.

    Args:
        raw: Timecode text as found in the file (e.g. '1:2:3')

    Returns:
        The timecode with two-digit hour/minute/second components and a
        millisecond field (e.g. '01:02:03,000')
    """
    timecode = raw.strip().replace('.', ',')
    if ',' not in timecode:
        timecode += ',000'

    return _UNPADDED_COMPONENT.sub(lambda match: f"{int(match.group(0)):02d}", timecode)


def timecode_to_ms(timecode: str) -> int:
    """Convert a timecode to milliseconds.

    The millisecond field is read as a fraction of a second, so '00:00:01,5'
    is 1500 ms.

    Raises:
        TimecodeError: If the text is not a timecode
    """
    match = _TIMECODE.match(timecode or '')
    if not match:
        raise TimecodeError(f"Invalid timecode: {timecode!r}")

    hours, minutes, seconds, fraction = match.groups()
    ms = int((fraction or '0').ljust(3, '0'))
    return ((int(hours) * 60 + int(minutes)) * 60 + int(seconds)) * 1000 + ms


def ms_to_timecode(ms: int) -> str:
    """Render milliseconds as a canonical HH:MM:SS,mmm timecode."""
    ms = max(0, int(ms))
    hours, ms = divmod(ms, 3600000)
    minutes, ms = divmod(ms, 60000)
    seconds, ms = divmod(ms, 1000)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d},{ms:03d}"


def reconcile_timecodes(
    start: str,
    end: str,
    allow_equal: bool = True,
    strict: bool = False,
    clamp_end: bool = False
) -> TimelinePair:
    """Check that `start` does not come after `end`.

    In repair mode a start that comes after the end is clamped to the end,
    or, with `clamp_end`, the end is raised to the start. In strict mode the
    same situation raises instead, as does an equal pair when `allow_equal`
    is false. An empty `start` has nothing to compare and is returned as-is.

    Args:
        start: Earlier timecode (normalized), may be empty
        end: Later timecode (normalized)
        allow_equal: Whether start == end is acceptable in strict mode
        strict: Raise instead of repairing
        clamp_end: Repair by moving `end` rather than `start`

    Returns:
        TimelinePair with the (possibly clamped) timecodes

    Raises:
        TimelineOrderingViolation: In strict mode, if the pair is out of order
        TimecodeError: If either non-empty timecode cannot be parsed
    """
    if not start:
        return TimelinePair(start, end)

    start_ms = timecode_to_ms(start)
    end_ms = timecode_to_ms(end)

    if start_ms > end_ms:
        if strict:
            raise TimelineOrderingViolation(start, end, f"{start} comes after {end}")
        if clamp_end:
            logger.debug(f"Clamping {end} to {start}")
            return TimelinePair(start, start)
        logger.debug(f"Clamping {start} to {end}")
        return TimelinePair(end, end)

    if start_ms == end_ms and not allow_equal and strict:
        raise TimelineOrderingViolation(start, end, f"{start} is equal to {end}")

    return TimelinePair(start, end)
