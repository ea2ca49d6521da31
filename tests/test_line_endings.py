from subrip_captioning.utils.line_endings import detect_line_ending, normalize_line_endings


def test_detect_line_ending() -> None:
    assert detect_line_ending("a\r\nb\r\n") == "\r\n"
    assert detect_line_ending("a\rb") == "\r"
    assert detect_line_ending("a\nb\r\n") == "\n"
    assert detect_line_ending("no newline") == "\n"


def test_normalize_line_endings() -> None:
    assert normalize_line_endings("a\r\nb\rc\nd") == "a\nb\nc\nd"
