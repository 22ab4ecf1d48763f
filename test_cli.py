"""
CLI Testing for the ND Exposure Table
Tests: default output, subcommands, file output, policy override, error exit
"""

import sys
from pathlib import Path

import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent))

import cli


@pytest.fixture
def config_path(tmp_path):
    config = tmp_path / "config.yaml"
    config.write_text("logging:\n  level: WARNING\n")
    return str(config)


def test_default_prints_both_tables(config_path, capsys):
    cli.main(['--config', config_path])
    out = capsys.readouterr().out
    
    lines = out.split("\n")
    assert lines[0].startswith("| no ND   |")
    assert lines[1].startswith("| ------- |")
    assert out.count("  no ND,") == 2
    # grid header + separator + 52 rows, then two blank-line-prefixed headers + 52 rows
    assert len(out.rstrip("\n").split("\n")) == 54 + 2 * 2 + 52


def test_table_command(config_path, capsys):
    cli.main(['--config', config_path, 'table'])
    lines = capsys.readouterr().out.rstrip("\n").split("\n")
    assert len(lines) == 54
    assert lines[-1].endswith("      x |")


def test_rows_command(config_path, capsys):
    cli.main(['--config', config_path, 'rows'])
    out = capsys.readouterr().out
    assert "| no ND" not in out
    assert out.startswith("\n  no ND,  ")


def test_output_file(config_path, tmp_path, capsys):
    output = tmp_path / "exposure_table.md"
    cli.main(['--config', config_path, 'table', '--output', str(output)])
    
    assert capsys.readouterr().out == ""
    assert output.read_text(encoding='utf-8').startswith("| no ND   |")


def test_policy_override(config_path, capsys):
    cli.main(['--config', config_path, 'table', '--policy', 'all_stacks'])
    lines = capsys.readouterr().out.rstrip("\n").split("\n")
    assert lines[0].endswith("| 1k 64 8 4 |")
    # Columns widen to the longest label
    assert len({len(line) for line in lines}) == 1


def test_missing_config_uses_defaults(tmp_path, capsys):
    cli.main(['--config', str(tmp_path / "missing.yaml"), 'table'])
    assert capsys.readouterr().out.startswith("| no ND   |")


def test_invalid_config_exits_with_error(tmp_path, capsys):
    config = tmp_path / "config.yaml"
    config.write_text("combinations:\n  policy: everything\n")
    
    with pytest.raises(SystemExit) as excinfo:
        cli.main(['--config', str(config)])
    assert excinfo.value.code == 1
    assert capsys.readouterr().out == ""


def test_config_is_loaded_once(tmp_path, capsys, caplog):
    """A missing config file is reported a single time"""
    cli.main(['--config', str(tmp_path / "missing.yaml"), 'table'])
    warnings = [r for r in caplog.records if "Config file not found" in r.getMessage()]
    assert len(warnings) == 1
