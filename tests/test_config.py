import json

from subrip_captioning.utils.config import ConfigManager


def test_defaults_when_file_missing(tmp_path) -> None:
    config = ConfigManager(tmp_path / "config.json")
    assert config.get("parser.strict") is False
    assert config.get("build.transform") == "markup"
    assert config.get("missing.key", "fallback") == "fallback"
    assert not (tmp_path / "config.json").exists()


def test_set_saves_and_reloads(tmp_path) -> None:
    path = tmp_path / "nested" / "config.json"
    config = ConfigManager(path)
    assert config.set("build.strip_tags", True)
    assert json.loads(path.read_text(encoding="utf-8"))["build"]["strip_tags"] is True

    reloaded = ConfigManager(path)
    assert reloaded.get("build.strip_tags") is True
    assert reloaded.get("build.strip_basic") is False


def test_update_without_save(tmp_path) -> None:
    path = tmp_path / "config.json"
    config = ConfigManager(path)
    config.update({"parser.strict": True, "io.encoding": "latin-1"}, save=False)
    assert config.get("parser.strict") is True
    assert config.get("io.encoding") == "latin-1"
    assert not path.exists()


def test_invalid_file_falls_back_to_defaults(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    config = ConfigManager(path)
    assert config.get("parser.strict") is False


def test_get_build_options(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"build": {"strip_basic": True}}), encoding="utf-8")
    config = ConfigManager(path)
    assert config.get_build_options() == {
        "strip_tags": False,
        "strip_basic": True,
        "replacements": False,
    }


def test_defaults_are_not_shared(tmp_path) -> None:
    first = ConfigManager(tmp_path / "a.json")
    first.set("build.strip_tags", True, save=False)
    second = ConfigManager(tmp_path / "b.json")
    assert second.get("build.strip_tags") is False
