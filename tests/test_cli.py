import json

from subrip_captioning.cli.main import main, parse_args, resolve_build_options
from subrip_captioning.utils.config import ConfigManager


def test_rebuilds_file_to_output(tmp_path, sample_srt) -> None:
    source = tmp_path / "input.srt"
    source.write_text(sample_srt.replace("\n", "\r\n"), encoding="utf-8")
    output = tmp_path / "out" / "output.srt"

    code = main([str(source), "-o", str(output), "--config", str(tmp_path / "config.json")])

    assert code == 0
    assert output.read_text(encoding="utf-8") == sample_srt


def test_writes_to_stdout(tmp_path, capsys, five_cue_srt) -> None:
    source = tmp_path / "input.srt"
    source.write_text(five_cue_srt, encoding="utf-8")

    code = main([str(source), "--from", "3", "--config", str(tmp_path / "config.json")])

    assert code == 0
    out = capsys.readouterr().out
    assert out == (
        "1\n00:00:04,000 --> 00:00:04,500\ncue 3\n\n"
        "2\n00:00:05,000 --> 00:00:05,500\ncue 4\n\n"
    )


def test_strip_tags_flag(tmp_path, capsys) -> None:
    source = tmp_path / "input.srt"
    source.write_text("1\n00:00:01,000 --> 00:00:02,000\n<i>Hello</i>\n\n", encoding="utf-8")

    assert main([str(source), "--strip-tags", "--config", str(tmp_path / "config.json")]) == 0
    assert "\nHello\n" in capsys.readouterr().out


def test_not_a_subrip_file(tmp_path) -> None:
    source = tmp_path / "notes.srt"
    source.write_text("nothing to see here\n", encoding="utf-8")
    assert main([str(source), "--config", str(tmp_path / "config.json")]) == 1


def test_strict_flag_reports_ordering_error(tmp_path) -> None:
    source = tmp_path / "input.srt"
    source.write_text("1\n00:00:05,000 --> 00:00:04,000\nA\n\n", encoding="utf-8")
    config = str(tmp_path / "config.json")
    assert main([str(source), "--strict", "--config", config]) == 1
    assert main([str(source), "--config", config]) == 0


def test_missing_input(tmp_path) -> None:
    assert main([str(tmp_path / "missing.srt"), "--config", str(tmp_path / "config.json")]) == 1


def test_refuses_to_overwrite(tmp_path, sample_srt) -> None:
    source = tmp_path / "input.srt"
    source.write_text(sample_srt, encoding="utf-8")
    output = tmp_path / "output.srt"
    output.write_text("keep me", encoding="utf-8")
    config = str(tmp_path / "config.json")

    assert main([str(source), "-o", str(output), "--config", config]) == 1
    assert output.read_text(encoding="utf-8") == "keep me"
    assert main([str(source), "-o", str(output), "--overwrite", "--config", config]) == 0
    assert output.read_text(encoding="utf-8") == sample_srt


def test_save_config(tmp_path, sample_srt) -> None:
    source = tmp_path / "input.srt"
    source.write_text(sample_srt, encoding="utf-8")
    config_path = tmp_path / "config.json"

    assert main([str(source), "--strip-basic", "--strict", "--save-config", "--config", str(config_path)]) == 0

    saved = json.loads(config_path.read_text(encoding="utf-8"))
    assert saved["build"]["strip_basic"] is True
    assert saved["parser"]["strict"] is True


def test_command_line_overrides_config(tmp_path) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"build": {"replacements": True}}), encoding="utf-8")
    config = ConfigManager(config_path)
    args = parse_args(["input.srt", "--strip-tags"])
    assert resolve_build_options(config, args) == {
        "strip_tags": True,
        "strip_basic": False,
        "replacements": True,
    }
