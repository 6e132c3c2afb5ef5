from __future__ import annotations

from pathlib import Path

import pytest

from line_reader.config.loader import ConfigError, default_config, load_config
from line_reader.config.models import AppConfig


def _write(tmp_path: Path, *lines: str) -> Path:
    path = tmp_path / "config.yml"
    path.write_text("\n".join(lines), encoding="utf-8")
    return path


def test_load_config_happy_path(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        "version: 1",
        "input:",
        "  encoding: latin-1",
        "  decode_errors: replace",
        "output:",
        "  kind: file",
        "  file: out.txt",
        "  atomic_replace: true",
        "logging:",
        "  level: debug",
        "  sink: jsonl",
        "  path: logs/run.jsonl",
    )
    cfg = load_config(path)
    assert isinstance(cfg, AppConfig)
    assert cfg.input.encoding == "latin-1"
    assert cfg.input.decode_errors == "replace"
    assert cfg.output.kind == "file"
    assert cfg.output.file_path == "out.txt"
    assert cfg.output.atomic_replace is True
    assert cfg.logging.level == "debug"
    assert cfg.logging.path == "logs/run.jsonl"


def test_sections_default_when_omitted(tmp_path: Path) -> None:
    cfg = load_config(_write(tmp_path, "version: 1"))
    assert cfg.model_dump() == default_config().model_dump()
    assert cfg.output.kind == "stdout"
    assert cfg.logging.sink == "stderr"
    assert cfg.input.decode_errors == "strict"


def test_shipped_default_config_loads() -> None:
    path = Path(__file__).resolve().parents[2] / "src" / "line_reader" / "default_config.yml"
    assert load_config(path).model_dump() == default_config().model_dump()


@pytest.mark.parametrize(
    "lines",
    [
        ("version: 1", "unknown: 1"),
        ("input:", "  encoding: utf-8"),
        ("version: 2",),
        ("version: [1]",),
        ("version: 1", "input:", "  decode_errors: skip"),
        ("version: 1", "output:", "  kind: file"),
        ("version: 1", "logging:", "  sink: jsonl"),
        ("version: 1", "logging:", "  colour: true"),
        ("- version: 1",),
    ],
)
def test_invalid_configs_fail_fast(tmp_path: Path, lines: tuple[str, ...]) -> None:
    with pytest.raises(ConfigError):
        load_config(_write(tmp_path, *lines))


def test_invalid_yaml_is_config_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(_write(tmp_path, "version: [1"))


def test_missing_config_file_is_config_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(tmp_path / "absent.yml")


@pytest.mark.parametrize(
    "lines",
    [
        ("version: 1", "input:", "  encoding: no-such-codec"),
        ("version: 1", "input:", "  encoding: utf-16-le"),
        ("version: 1", "output:", "  encoding: no-such-codec"),
    ],
)
def test_bad_encodings_fail_at_load(tmp_path: Path, lines: tuple[str, ...]) -> None:
    with pytest.raises(ConfigError):
        load_config(_write(tmp_path, *lines))


def test_output_may_use_any_known_encoding(tmp_path: Path) -> None:
    # Output is written in text mode, so LF translation is left to the codec.
    cfg = load_config(_write(tmp_path, "version: 1", "output:", "  encoding: utf-16-le"))
    assert cfg.output.encoding == "utf-16-le"
