"""SubRip Captioning - parse and build SubRip (.srt) subtitle files."""

# Version of the package
__version__ = "0.1.0"

from .core import (
    Cue,
    SubripFile,
    InvalidOptionKey,
    TimelineOrderingViolation,
    normalize_timecode,
    reconcile_timecodes,
)

__all__ = [
    'Cue',
    'SubripFile',
    'InvalidOptionKey',
    'TimelineOrderingViolation',
    'normalize_timecode',
    'reconcile_timecodes',
    '__version__',
]
