"""Tests for the colors-tool command line: registry, contrast-ratio, distance, help."""

import csv
import io
import json
import os
from pathlib import Path

import pytest
from colors_checker import registry
from colors_checker.__main__ import main
from colors_checker.core.env import FORMAT_VAR, SEPARATOR_VAR
from colors_checker.core.types import Command
from colors_checker.registry import all_commands, get

FIXTURES_DIR = Path(__file__).parent / 'fixtures'
PALETTE_TXT = FIXTURES_DIR / 'palette.txt'


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from an empty repo so no stray .env or settings leak in."""
    (tmp_path / '.git').mkdir()
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(FORMAT_VAR, raising=False)
    monkeypatch.delenv(SEPARATOR_VAR, raising=False)
    return tmp_path


class TestRegistry:
    def test_discovers_commands(self):
        assert set(all_commands()) == {'contrast-ratio', 'distance'}

    def test_get_by_alias(self):
        assert get('cr').name == 'contrast-ratio'
        assert get('d').name == 'distance'

    def test_unknown(self):
        with pytest.raises(KeyError):
            get('nope')

    def test_aliases_resolve_to_same_command(self):
        assert get('cr') is get('contrast-ratio')

    def test_duplicate_alias_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(registry, '_commands', {})
        monkeypatch.setattr(registry, '_aliases', {})
        registry._register(Command(name='one', aliases=['x']))
        with pytest.raises(RuntimeError, match='registered twice'):
            registry._register(Command(name='two', aliases=['x']))


class TestDistance:
    def test_text(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(['distance', 'ffffff', '000000'])
        out = capsys.readouterr().out
        assert 'A is #ffffff' in out
        assert 'B is #000000' in out
        assert 'Distance between A and B: 1.73' in out
        assert 'Contrast ratio between A and B: 21.00 (AAA)' in out

    def test_alias_and_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(['d', 'fff6dd', 'a95f09', '--json'])
        obj = json.loads(capsys.readouterr().out)
        assert obj['label'] == 'AA'
        assert obj['contrast_ratio'] == pytest.approx(4.5007, abs=1e-4)

    def test_bad_hex_exits_1(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc:
            main(['distance', 'zz0000', '000000'])
        assert exc.value.code == 1
        assert "Error: invalid hex chunk 'zz'" in capsys.readouterr().err

    def test_needs_two_args(self) -> None:
        with pytest.raises(SystemExit) as exc:
            main(['distance', 'ffffff'])
        assert exc.value.code == 2


class TestContrastRatio:
    def test_table_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(['contrast-ratio', '--in', str(PALETTE_TXT)])
        lines = capsys.readouterr().out.splitlines()
        assert lines[0].split(' | ')[1].strip() == 'white (#ffffff)'
        assert lines[-1].startswith('black (#000000)')
        assert any('cream (#fff6dd)' in line and '4.50 AA' in line for line in lines)

    def test_csv_to_file(self, isolated_env: Path, capsys: pytest.CaptureFixture[str]) -> None:
        out_file = isolated_env / 'contrast.csv'
        main(['cr', '--in', str(PALETTE_TXT), '--out', str(out_file), '--format', 'csv'])
        captured = capsys.readouterr()
        assert captured.out == ''
        assert f'output is in file {out_file}' in captured.err
        rows = list(csv.reader(io.StringIO(out_file.read_text())))
        assert rows[0][0] == ''
        assert len(rows) == 1 + 6  # header + white + 4 colours + black

    def test_format_from_env(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        monkeypatch.setenv(FORMAT_VAR, 'json')
        main(['cr', '--in', str(PALETTE_TXT), '--no-bookends'])
        obj = json.loads(capsys.readouterr().out)
        assert obj['colors'][0] == 'cream (#fff6dd)'

    def test_flag_overrides_env(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        monkeypatch.setenv(FORMAT_VAR, 'json')
        main(['cr', '--in', str(PALETTE_TXT), '--format', 'csv'])
        assert capsys.readouterr().out.startswith(',white (#ffffff)')

    def test_separator(self, isolated_env: Path, capsys: pytest.CaptureFixture[str]) -> None:
        f = isolated_env / 'palette.csv'
        f.write_text('ink,111827\npaper,f8fafc\n')
        main(['cr', '--in', str(f), '--separator', ',', '--format', 'csv', '--no-bookends'])
        rows = list(csv.reader(io.StringIO(capsys.readouterr().out)))
        assert rows[0] == ['', 'ink (#111827)', 'paper (#f8fafc)']
        assert rows[1][2].endswith('AAA')

    def test_empty_separator_means_whitespace(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(['cr', '--in', str(PALETTE_TXT), '--separator', '', '--format', 'csv', '--no-bookends'])
        rows = list(csv.reader(io.StringIO(capsys.readouterr().out)))
        assert rows[0][1] == 'cream (#fff6dd)'

    def test_empty_separator_flag_overrides_env(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv(SEPARATOR_VAR, ',')
        main(['cr', '--in', str(PALETTE_TXT), '--separator', '', '--format', 'csv'])
        assert len(list(csv.reader(io.StringIO(capsys.readouterr().out)))) == 1 + 6

    def test_dotenv_loaded(self, isolated_env: Path, capsys: pytest.CaptureFixture[str]) -> None:
        (isolated_env / '.env').write_text(f'{FORMAT_VAR}=csv\n')
        try:
            main(['cr', '--in', str(PALETTE_TXT)])
        finally:
            os.environ.pop(FORMAT_VAR, None)
        captured = capsys.readouterr()
        assert 'colors-tool: loaded' in captured.err
        assert captured.out.startswith(',white (#ffffff)')

    def test_malformed_line_exits_1(self, isolated_env: Path, capsys: pytest.CaptureFixture[str]) -> None:
        f = isolated_env / 'bad.txt'
        f.write_text('ok ffffff\nbad 12345\n')
        with pytest.raises(SystemExit) as exc:
            main(['cr', '--in', str(f)])
        assert exc.value.code == 1
        assert 'line 2' in capsys.readouterr().err

    def test_missing_file_exits_1(self, isolated_env: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc:
            main(['cr', '--in', str(isolated_env / 'nope.txt')])
        assert exc.value.code == 1
        assert capsys.readouterr().err.startswith('Error:')

    def test_in_required(self) -> None:
        with pytest.raises(SystemExit) as exc:
            main(['contrast-ratio'])
        assert exc.value.code == 2


class TestHelp:
    def test_lists_commands(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(['help'])
        out = capsys.readouterr().out
        assert 'contrast-ratio (cr)' in out
        assert 'distance (d)' in out

    def test_command_docs(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(['help', 'd'])
        assert 'sqrt(R^2 + G^2 + B^2)' in capsys.readouterr().out

    def test_unknown_command(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc:
            main(['help', 'nope'])
        assert exc.value.code == 1
        assert 'Unknown command: nope' in capsys.readouterr().err

    def test_no_command(self) -> None:
        with pytest.raises(SystemExit) as exc:
            main([])
        assert exc.value.code == 1
