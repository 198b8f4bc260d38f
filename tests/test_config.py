from pathlib import Path

import pytest

from wordperms.core.config import DEFAULT_CONFIG, ConfigError, load_and_merge, load_config_file
from wordperms.core.model import Capitalization


def _write(tmp_path: Path, text: str) -> str:
    p = tmp_path / "wordperms.yaml"
    p.write_text(text, encoding="utf-8")
    return str(p)


def test_defaults():
    cfg = load_and_merge(None)
    assert cfg == DEFAULT_CONFIG
    assert cfg.max_len == 4
    assert cfg.cap_style is Capitalization.all
    assert cfg.limit is None


def test_config_file_overrides_defaults(tmp_path: Path):
    path = _write(tmp_path, "max_len: 2\ncap_style: First\nlimit: 10\nsort: true\n")
    cfg = load_and_merge(path)
    assert cfg.max_len == 2
    assert cfg.cap_style is Capitalization.first
    assert cfg.limit == 10
    assert cfg.sort is True


def test_cli_overrides_config_file(tmp_path: Path):
    path = _write(tmp_path, "max_len: 2\ncap_style: first\n")
    cfg = load_and_merge(path, max_len=3, cap_style=None, limit=None)
    assert cfg.max_len == 3
    assert cfg.cap_style is Capitalization.first


def test_empty_config_file(tmp_path: Path):
    assert load_config_file(_write(tmp_path, "")) == {}


@pytest.mark.parametrize(
    "text",
    [
        "- max_len\n",
        "colour: red\n",
        "max_len: two\n",
        "max_len: true\n",
        "limit: -1\n",
        "workers: 0\n",
        "cap_style: lower\n",
        "sort: maybe\n",
    ],
)
def test_invalid_config_file(tmp_path: Path, text: str):
    with pytest.raises(ConfigError):
        load_config_file(_write(tmp_path, text))


def test_missing_config_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_and_merge(str(tmp_path / "nope.yaml"))


def test_invalid_cli_override():
    with pytest.raises(ConfigError):
        load_and_merge(None, cap_style="title")
