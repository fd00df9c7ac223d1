from pathlib import Path

import pytest

from humanize_time.__main__ import main
from humanize_time.local_time import FixedOffset


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv("HUMANIZE_TIME_CONFIG", raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))


def test_coarse_output(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["1000", "--now", "4600"]) == 0
    assert capsys.readouterr().out == "one hour ago\n"


def test_precise_output(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["1000", "--now", "1125", "--precise"]) == 0
    assert capsys.readouterr().out == " 2 minutes and  5 seconds ago\n"


def test_micros_borrow(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["1000", "--micros", "500000", "--now", "1003", "--precise"]) == 0
    assert capsys.readouterr().out == " 2 seconds ago\n"


def test_future(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["5000", "--now", "1000"]) == 0
    assert capsys.readouterr().out == "in the future\n"


def test_config_enables_local_with_fixed_offset(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config_file = tmp_path / "config.toml"
    config_file.write_text("[settings]\nconvert_to_local = true\nutc_offset = 7200\n")
    assert main(["0", "--now", "0", "--config", str(config_file)]) == 0
    assert capsys.readouterr().out == "2 hours ago\n"


def test_config_precise_default(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config_file = tmp_path / "config.toml"
    config_file.write_text("[settings]\nprecise = true\n")
    assert main(["0", "--now", "45", "-c", str(config_file)]) == 0
    assert capsys.readouterr().out == "45 seconds ago\n"


def test_invalid_config_exits_2(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config_file = tmp_path / "config.toml"
    config_file.write_text("[settings]\nprecise = 'maybe'\n")
    assert main(["0", "--config", str(config_file)]) == 2
    assert "Invalid config" in capsys.readouterr().err


def test_micros_out_of_range() -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["0", "--micros", "1000000"])
    assert excinfo.value.code == 2


def test_no_local_overrides_config(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config_file = tmp_path / "config.toml"
    config_file.write_text("[settings]\nconvert_to_local = true\nutc_offset = 7200\n")
    assert main(["0", "--now", "0", "-c", str(config_file), "--no-local"]) == 0
    assert capsys.readouterr().out == "just now\n"


def test_no_precise_overrides_config(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config_file = tmp_path / "config.toml"
    config_file.write_text("[settings]\nprecise = true\n")
    assert main(["0", "--now", "45", "-c", str(config_file), "--no-precise"]) == 0
    assert capsys.readouterr().out == "just now\n"


def test_local_flag_without_config(capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("humanize_time.__main__.build_converter", lambda settings: FixedOffset(3600))
    assert main(["0", "--now", "0", "--local"]) == 0
    assert capsys.readouterr().out == "one hour ago\n"


def test_now_micros_pins_fractional_reference(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["1000", "--micros", "500000", "--now", "1002", "--precise"]) == 0
    assert capsys.readouterr().out == "a second ago\n"

    assert main(["1000", "--micros", "500000", "--now", "1002", "--now-micros", "600000", "--precise"]) == 0
    assert capsys.readouterr().out == " 2 seconds ago\n"


@pytest.mark.parametrize(
    "argv",
    [
        ["0", "--now", "1", "--now-micros", "1000000"],
        ["0", "--now", "1", "--now-micros", "-1"],
        ["0", "--now-micros", "5"],
    ],
)
def test_now_micros_validation(argv: list[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    assert excinfo.value.code == 2
