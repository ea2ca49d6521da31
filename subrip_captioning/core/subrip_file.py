"""SubRip file: parses content into cues and builds cues back into content."""

import logging
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

import pysubs2

from ..transforms import BaseTextTransform, MarkupTextTransform
from ..utils.line_endings import detect_line_ending
from .cue import Cue
from .exceptions import TimecodeError
from .options import OptionsManager
from .parser import TIMELINE_DELIMITER, parse_raw_cues
from .timecode import ms_to_timecode, normalize_timecode, reconcile_timecodes

logger = logging.getLogger(__name__)

class SubripFile:
    """An ordered collection of cues backed by a single content buffer.

    `file_content` holds the raw text before parse() and the rendered text
    after build(). Cues keep parse order until a build sorts them.

    Timeline ordering problems are repaired by default: a cue that starts
    before the previous cue ends is moved to the previous end, and a cue that
    starts after its own end is moved to its end. With `strict=True` the same
    problems raise TimelineOrderingViolation and abort the parse.
    """

    def __init__(
        self,
        content: Optional[str] = None,
        strict: bool = False,
        transform: Optional[BaseTextTransform] = None,
        options: Optional[Mapping[str, Any]] = None
    ):
        self.file_content = content or ''
        self.line_ending = detect_line_ending(self.file_content)
        self.strict = strict
        self.transform = transform or MarkupTextTransform()
        self.cues: List[Cue] = []
        self._options = OptionsManager(options)

    def __len__(self) -> int:
        return len(self.cues)

    def __iter__(self) -> Iterator[Cue]:
        return iter(self.cues)

    # Cue container

    def add_cue(self, cue: Cue) -> 'SubripFile':
        self.cues.append(cue)
        return self

    def remove_cue(self, index: int) -> 'SubripFile':
        del self.cues[index]
        return self

    def get_cue(self, index: int) -> Cue:
        return self.cues[index]

    def get_cues_count(self) -> int:
        return len(self.cues)

    def sort_cues(self) -> 'SubripFile':
        """Sort cues by start time, keeping parse order for equal starts."""
        self.cues.sort(key=lambda cue: cue.start_ms)
        return self

    def shift(self, offset_ms: int) -> 'SubripFile':
        """Move every cue by `offset_ms` milliseconds."""
        for cue in self.cues:
            cue.shift(offset_ms)
        return self

    def get_file_content(self) -> str:
        return self.file_content

    # Options

    @property
    def options(self) -> Dict[str, Any]:
        return self._options.options

    def set_options(self, options: Mapping[str, Any]) -> 'SubripFile':
        """Set build options; see OptionsManager.set_options."""
        self._options.set_options(options)
        return self

    def reset_options(self) -> 'SubripFile':
        self._options.reset_options()
        return self

    # Parsing

    def parse(self) -> Optional['SubripFile']:
        """Parse `file_content` into cues.

        Cues with blank text are skipped. Any cues already in the file are
        replaced.

        Returns:
            self, or None if the content holds no cue blocks at all (not a
            SubRip file). A file whose blocks all have blank text is still
            returned, with no cues.

        Raises:
            TimecodeError: If a timeline holds text that is not a timecode
            TimelineOrderingViolation: In strict mode, for out-of-order times
        """
        raw_cues = parse_raw_cues(self.file_content)
        if not raw_cues:
            logger.warning("No cue blocks found, content is not a SubRip file")
            return None

        self.line_ending = "\n"
        self.cues = []
        previous_end = ''

        for raw in raw_cues:
            start, end = self._split_timeline(raw.timeline)

            start = reconcile_timecodes(
                previous_end, start, allow_equal=True, strict=self.strict, clamp_end=True
            ).end
            start, end = reconcile_timecodes(start, end, allow_equal=False, strict=self.strict)
            if previous_end:
                # A cue ending before the previous end collapses onto that end
                start = reconcile_timecodes(previous_end, start, clamp_end=True).end
                end = reconcile_timecodes(start, end, clamp_end=True).end

            if raw.text.strip() == '':
                logger.debug(f"Skipping cue {raw.index!r} with empty text")
                continue

            self.add_cue(Cue(start, end, raw.text, line_ending=self.line_ending))
            previous_end = end

        logger.debug(f"Parsed {len(self.cues)} cues from {len(raw_cues)} blocks")
        return self

    @staticmethod
    def _split_timeline(timeline: str) -> Tuple[str, str]:
        parts = timeline.split(TIMELINE_DELIMITER)
        if len(parts) != 2:
            raise TimecodeError(f"Invalid timeline: {timeline!r}")
        # Anything after the end time (e.g. X1:40 X2:600 coordinates) is ignored
        end_tokens = parts[1].split()
        end = end_tokens[0] if end_tokens else ''
        return normalize_timecode(parts[0]), normalize_timecode(end)

    # Building

    def build(self) -> 'SubripFile':
        """Render every cue into `file_content`."""
        return self.build_part(0, self.get_cues_count() - 1)

    def build_part(self, from_index: int, to_index: int) -> 'SubripFile':
        """Render cues `from_index`..`to_index` (inclusive, after sorting) into `file_content`.

        All cues are sorted by start time first. Indices outside the
        collection fall back to the first and last cue. Blocks are numbered
        from 1 on every call.
        """
        self.sort_cues()

        count = self.get_cues_count()
        if from_index < 0 or from_index >= count:
            from_index = 0
        if to_index < 0 or to_index >= count:
            to_index = count - 1

        options = self._options
        buffer = []
        for number, cue in enumerate(self.cues[from_index:to_index + 1], 1):
            buffer.append(f"{number}{self.line_ending}")
            buffer.append(f"{cue.timecode_string()}{self.line_ending}")
            buffer.append(cue.get_text(
                options['strip_tags'],
                options['strip_basic'],
                options['replacements'],
                transform=self.transform
            ))
            buffer.append(self.line_ending)
            buffer.append(self.line_ending)

        self.file_content = ''.join(buffer)
        return self

    # pysubs2 interop

    def to_ssafile(self) -> pysubs2.SSAFile:
        """Return the cues as a pysubs2.SSAFile, in current order."""
        subs = pysubs2.SSAFile()
        for cue in self.cues:
            subs.events.append(pysubs2.SSAEvent(
                start=cue.start_ms,
                end=cue.end_ms,
                text=cue.text.replace("\n", "\\N")
            ))
        return subs

    @classmethod
    def from_ssafile(cls, subs: pysubs2.SSAFile, **kwargs) -> 'SubripFile':
        """Create a file from the dialogue events of a pysubs2.SSAFile."""
        subrip = cls(**kwargs)
        for event in subs.events:
            if event.is_comment or not event.plaintext.strip():
                continue
            subrip.add_cue(Cue(
                ms_to_timecode(event.start),
                ms_to_timecode(event.end),
                event.plaintext,
                line_ending=subrip.line_ending
            ))
        return subrip
