"""Core functionality for parsing and building SubRip files."""

from .cue import Cue
from .exceptions import (
    SubripError, ConfigurationError, InvalidOptionKey,
    TimecodeError, TimelineOrderingViolation
)
from .options import OptionsManager, DEFAULT_OPTIONS
from .parser import ParserState, RawCue, parse_raw_cues
from .subrip_file import SubripFile
from .timecode import (
    TimelinePair, normalize_timecode, reconcile_timecodes, timecode_to_ms, ms_to_timecode
)

__all__ = [
    'Cue', 'SubripFile', 'OptionsManager', 'DEFAULT_OPTIONS',
    'ParserState', 'RawCue', 'parse_raw_cues',
    'TimelinePair', 'normalize_timecode', 'reconcile_timecodes', 'timecode_to_ms', 'ms_to_timecode',
    'SubripError', 'ConfigurationError', 'InvalidOptionKey',
    'TimecodeError', 'TimelineOrderingViolation',
]
