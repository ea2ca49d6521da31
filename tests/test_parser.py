from subrip_captioning.core.parser import ParserState, RawCue, parse_raw_cues


def test_parse_raw_cues(sample_srt) -> None:
    blocks = parse_raw_cues(sample_srt)
    assert blocks == [
        RawCue("1", "00:00:01,000 --> 00:00:02,000", "Hello"),
        RawCue("2", "00:00:03,000 --> 00:00:04,000", "World"),
    ]


def test_parser_has_three_states() -> None:
    assert [state.name for state in ParserState] == [
        "EXPECT_INDEX", "EXPECT_TIMELINE", "COLLECTING_TEXT"
    ]


def test_empty_input() -> None:
    assert parse_raw_cues("") == []


def test_text_lines_are_joined_with_a_space() -> None:
    blocks = parse_raw_cues("1\n00:00:01,000 --> 00:00:02,000\nfirst line\nsecond line\n\n")
    assert blocks[0].text == "first line second line"


def test_windows_line_endings_and_bom() -> None:
    content = "\ufeff1\r\n00:00:01,000 --> 00:00:02,000\r\nHello\r\n\r\n"
    blocks = parse_raw_cues(content)
    assert blocks == [RawCue("1", "00:00:01,000 --> 00:00:02,000", "Hello")]


def test_block_without_trailing_blank_line_is_dropped() -> None:
    content = (
        "1\n00:00:01,000 --> 00:00:02,000\nHello\n\n"
        "2\n00:00:03,000 --> 00:00:04,000\nWorld"
    )
    blocks = parse_raw_cues(content)
    assert len(blocks) == 1
    assert blocks[0].text == "Hello"


def test_single_trailing_newline_closes_the_last_block() -> None:
    assert len(parse_raw_cues("1\n00:00:01,000 --> 00:00:02,000\nHello\n")) == 1


def test_missing_timeline_resynchronises() -> None:
    content = (
        "garbage\n"
        "more garbage\n"
        "1\n"
        "00:00:01,000 --> 00:00:02,000\n"
        "Hello\n"
        "\n"
    )
    blocks = parse_raw_cues(content)
    assert blocks == [RawCue("1", "00:00:01,000 --> 00:00:02,000", "Hello")]


def test_empty_text_block_is_still_emitted() -> None:
    blocks = parse_raw_cues("1\n00:00:01,000 --> 00:00:02,000\n\n")
    assert blocks == [RawCue("1", "00:00:01,000 --> 00:00:02,000", "")]


def test_plain_text_yields_no_blocks() -> None:
    assert parse_raw_cues("just some\nplain text\n\nwith paragraphs\n") == []
