# tests/50_core/test_parse_config.py
"""Tests for flag_config: load_config(), parse_config(), extract_selections()."""

from argparse import Namespace
from pathlib import Path

import pytest

import buildflags.flags.flag_config as mod_flag_config
import buildflags.meta as mod_meta
from tests.utils import write_config_file


# ---------------------------------------------------------------------------
# parse_config()
# ---------------------------------------------------------------------------


def test_parse_config_none() -> None:
    # --- execute and verify ---
    assert mod_flag_config.parse_config(None) is None


def test_parse_config_full() -> None:
    # --- setup ---
    raw = {
        "flags": {"A": True},
        "catalog": [{"name": "A"}],
        "command": "develop",
        "log_level": "debug",
    }

    # --- execute and verify ---
    assert mod_flag_config.parse_config(raw) == raw


def test_parse_config_boolean_shorthand() -> None:
    # --- execute and verify ---
    assert mod_flag_config.parse_config({"A": True, "B": False}) == {
        "flags": {"A": True, "B": False}
    }


def test_parse_config_empty_mapping() -> None:
    # --- execute and verify ---
    assert mod_flag_config.parse_config({}) == {"flags": {}}


def test_parse_config_warns_on_unknown_keys(
    capsys: pytest.CaptureFixture[str],
) -> None:
    # --- execute ---
    result = mod_flag_config.parse_config({"flags": {}, "flgs": {"A": True}})

    # --- verify ---
    assert result == {"flags": {}}
    assert "'flgs'" in capsys.readouterr().err


@pytest.mark.parametrize(
    ("raw", "match"),
    [
        (["A"], "root must be an object"),
        ({"flags": ["A"]}, "`flags` must be an object"),
        ({"flags": {}, "catalog": {"name": "A"}}, "`catalog` must be a list"),
    ],
)
def test_parse_config_rejects_bad_shapes(raw: object, match: str) -> None:
    # --- execute and verify ---
    with pytest.raises(TypeError, match=match):
        mod_flag_config.parse_config(raw)


# ---------------------------------------------------------------------------
# extract_selections()
# ---------------------------------------------------------------------------


def test_extract_selections_coerces_non_booleans(
    capsys: pytest.CaptureFixture[str],
) -> None:
    # --- execute ---
    selections = mod_flag_config.extract_selections(
        {"flags": {"A": True, "B": "yes", "C": 0}}  # type: ignore[dict-item]
    )

    # --- verify ---
    assert selections == {"A": True, "B": True, "C": False}
    err = capsys.readouterr().err
    assert "'B' should be true or false" in err
    assert "'C' should be true or false" in err


def test_extract_selections_empty() -> None:
    # --- execute and verify ---
    assert mod_flag_config.extract_selections(None) == {}
    assert mod_flag_config.extract_selections({}) == {}


# ---------------------------------------------------------------------------
# load_config() / load_and_parse_config()
# ---------------------------------------------------------------------------


def test_load_config_toml(tmp_path: Path) -> None:
    # --- setup ---
    path = tmp_path / f".{mod_meta.PROGRAM_CONFIG}.toml"
    path.write_text('command = "build"\n[flags]\nA = true\n', encoding="utf-8")

    # --- execute and verify ---
    assert mod_flag_config.load_config(path) == {
        "command": "build",
        "flags": {"A": True},
    }


def test_load_config_empty_toml_is_none(tmp_path: Path) -> None:
    # --- setup ---
    path = tmp_path / "empty.toml"
    path.write_text("", encoding="utf-8")

    # --- execute and verify ---
    assert mod_flag_config.load_config(path) is None


def test_load_config_bad_json(tmp_path: Path) -> None:
    # --- setup ---
    path = tmp_path / f".{mod_meta.PROGRAM_CONFIG}.json"
    path.write_text("{", encoding="utf-8")

    # --- execute and verify ---
    with pytest.raises(ValueError, match="Error while loading configuration file"):
        mod_flag_config.load_config(path)


def test_load_and_parse_config(tmp_path: Path) -> None:
    # --- setup ---
    path = tmp_path / f".{mod_meta.PROGRAM_CONFIG}.json"
    write_config_file(path, flags={"A": True}, command="develop")

    # --- execute ---
    result = mod_flag_config.load_and_parse_config(Namespace(config=None), tmp_path)

    # --- verify ---
    assert result == (path, {"flags": {"A": True}, "command": "develop"})


def test_load_and_parse_config_without_file(tmp_path: Path) -> None:
    # --- execute and verify ---
    assert (
        mod_flag_config.load_and_parse_config(Namespace(config=None), tmp_path) is None
    )
