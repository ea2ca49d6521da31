import pytest

SAMPLE_SRT = (
    "1\n"
    "00:00:01,000 --> 00:00:02,000\n"
    "Hello\n"
    "\n"
    "2\n"
    "00:00:03,000 --> 00:00:04,000\n"
    "World\n"
    "\n"
)


@pytest.fixture
def sample_srt() -> str:
    return SAMPLE_SRT


@pytest.fixture
def five_cue_srt() -> str:
    blocks = []
    for i in range(5):
        blocks.append(f"{i + 1}\n00:00:0{i + 1},000 --> 00:00:0{i + 1},500\ncue {i}\n\n")
    return "".join(blocks)
