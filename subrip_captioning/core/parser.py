"""Line-oriented state machine that splits SubRip content into raw cue blocks."""

import logging
from enum import Enum
from typing import List, NamedTuple

from ..utils.line_endings import normalize_line_endings

logger = logging.getLogger(__name__)

TIMELINE_DELIMITER = '-->'

BOM = '\ufeff'


class ParserState(Enum):
    """States of the block parser."""
    EXPECT_INDEX = 0
    EXPECT_TIMELINE = 1
    COLLECTING_TEXT = 2


class RawCue(NamedTuple):
    """An unvalidated cue block: sequence index, timeline line and joined text."""
    index: str
    timeline: str
    text: str


def parse_raw_cues(content: str) -> List[RawCue]:
    """Group the lines of a SubRip file into (index, timeline, text) blocks.

    A line that should hold a timeline but has no '-->' is discarded and the
    parser starts looking for an index again. Text lines are joined with a
    single space. A block is only emitted when a blank line follows it, so a
    last block without a trailing blank line is dropped.

    Args:
        content: Decoded file content with any line endings

    Returns:
        List of RawCue in file order (empty for empty input)
    """
    content = normalize_line_endings(content)
    if content.startswith(BOM):
        content = content[len(BOM):]

    blocks: List[RawCue] = []
    state = ParserState.EXPECT_INDEX
    index = ''
    timeline = ''
    text_lines: List[str] = []

    for line_number, line in enumerate(content.split('\n'), 1):
        if state is ParserState.EXPECT_INDEX:
            index = line.strip()
            state = ParserState.EXPECT_TIMELINE

        elif state is ParserState.EXPECT_TIMELINE:
            timeline = line.strip()
            if TIMELINE_DELIMITER not in timeline:
                logger.debug(f"Line {line_number}: expected a timeline, skipping {timeline!r}")
                state = ParserState.EXPECT_INDEX
                continue
            state = ParserState.COLLECTING_TEXT

        elif state is ParserState.COLLECTING_TEXT:
            if line.strip() == '':
                blocks.append(RawCue(index, timeline, ' '.join(text_lines)))
                text_lines = []
                state = ParserState.EXPECT_INDEX
            else:
                text_lines.append(line)

    if state is ParserState.COLLECTING_TEXT and text_lines:
        logger.debug(f"Dropping unterminated block {index!r} at end of content")

    return blocks
