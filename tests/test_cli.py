from __future__ import annotations

import logging
from pathlib import Path

import pytest

from ssp_mcf import cli
from ssp_mcf.config import DriverConfig

DIAMOND = "4\n0 1 2 1\n0 2 1 2\n1 3 1 1\n2 3 1 1\n"


@pytest.fixture
def diamond_file(tmp_path: Path) -> Path:
    path = tmp_path / "diamond.txt"
    path.write_text(DIAMOND, encoding="utf-8")
    return path


def _exit_code(argv) -> int:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(argv)
    return excinfo.value.code


def test_no_arguments_prints_help(capsys, reset_ssp_logging) -> None:
    assert _exit_code([]) == 0
    assert "ssp-mcf" in capsys.readouterr().out


def test_solves_file(diamond_file: Path, capsys, reset_ssp_logging) -> None:
    assert _exit_code(["--quiet", str(diamond_file)]) == 0
    out = capsys.readouterr().out
    assert f"****Find Flow {diamond_file}" in out
    assert "0 -> 1 -> 3 (1)  $2" in out
    assert "TOTAL FLOW: 2" in out
    assert " Capacity " in out


def test_no_matrices_flag(diamond_file: Path, capsys, reset_ssp_logging) -> None:
    assert _exit_code(["--quiet", "--no-matrices", str(diamond_file)]) == 0
    out = capsys.readouterr().out
    assert "Edge Cost" not in out
    assert "TOTAL FLOW: 2" in out


def test_bad_file_is_skipped(
    diamond_file: Path, tmp_path: Path, capsys, caplog, reset_ssp_logging
) -> None:
    bad = tmp_path / "bad.txt"
    bad.write_text("3\n0 5 1 1\n", encoding="utf-8")
    missing = tmp_path / "missing.txt"

    with caplog.at_level(logging.ERROR, logger="ssp_mcf"):
        code = _exit_code([str(bad), str(missing), str(diamond_file)])
    assert code == 1
    out = capsys.readouterr().out
    assert "bad.txt" not in out
    assert "TOTAL FLOW: 2" in out
    messages = [r.getMessage() for r in caplog.records if r.levelno == logging.ERROR]
    assert any("Skipping" in m and "bad.txt" in m for m in messages)
    assert any("Cannot read" in m and "missing.txt" in m for m in messages)
    assert any("2 of 3 input files failed" in m for m in messages)


def test_verbose_and_quiet_switch_levels(
    diamond_file: Path, caplog, reset_ssp_logging
) -> None:
    with caplog.at_level(logging.DEBUG, logger="ssp_mcf"):
        _exit_code(["--verbose", str(diamond_file)])
    assert any("Debug logging enabled" in r.message for r in caplog.records)
    assert any("augmented 0 -> 1 -> 3" in r.message for r in caplog.records)

    caplog.clear()
    with caplog.at_level(logging.INFO, logger="ssp_mcf"):
        _exit_code(["--quiet", str(diamond_file)])
    assert not any(r.levelno == logging.INFO for r in caplog.records)


def test_run_with_config(diamond_file: Path, capsys) -> None:
    config = DriverConfig(source=0, sink=2, show_matrices=False)
    assert cli.run([diamond_file], config) == 0
    assert "TOTAL FLOW: 1" in capsys.readouterr().out


def test_solve_file_propagates_parse_errors(tmp_path: Path) -> None:
    bad = tmp_path / "bad.txt"
    bad.write_text("3\n0 1", encoding="utf-8")
    with pytest.raises(ValueError, match="mid-quadruple"):
        cli.solve_file(bad, DriverConfig())


def test_recoverable_files_are_skipped(
    diamond_file: Path, tmp_path: Path, capsys, caplog, reset_ssp_logging
) -> None:
    one_vertex = tmp_path / "one.txt"
    one_vertex.write_text("1\n", encoding="utf-8")
    not_utf8 = tmp_path / "binary.txt"
    not_utf8.write_bytes(b"\xff\xfe\x00")
    huge = tmp_path / "huge.txt"
    huge.write_text("2\n0 1 99999999999999999999 1\n", encoding="utf-8")

    with caplog.at_level(logging.ERROR, logger="ssp_mcf"):
        code = cli.run([one_vertex, not_utf8, huge, diamond_file], DriverConfig())
    assert code == 1
    assert "TOTAL FLOW: 2" in capsys.readouterr().out
    skipped = [r.getMessage() for r in caplog.records if "Skipping" in r.getMessage()]
    assert len(skipped) == 3
    assert any("one.txt" in m and "distinct" in m for m in skipped)
    assert any("binary.txt" in m and "UTF-8" in m for m in skipped)
    assert any("huge.txt" in m and "int64" in m for m in skipped)
    assert any("3 of 4 input files failed" in r.getMessage() for r in caplog.records)


@pytest.mark.parametrize(
    "options",
    [
        ["--max-augmentations", "-1"],
        ["--source", "1", "--sink", "1"],
    ],
)
def test_invalid_driver_options_rejected(
    options, diamond_file: Path, capsys, reset_ssp_logging
) -> None:
    assert _exit_code([*options, str(diamond_file)]) == 2
    captured = capsys.readouterr()
    assert "TOTAL FLOW" not in captured.out
    assert "must" in captured.err
