"""Tests for the landlord-report command line."""

import sys
import tempfile
from pathlib import Path

import pytest

from landlord_report import cli

from conftest import FakeEngine, FakeExporter, make_image


def run(monkeypatch, *argv):
    monkeypatch.setattr(sys, 'argv', ['landlord-report', *argv])
    return cli.main()


@pytest.fixture
def fake_backends(monkeypatch):
    monkeypatch.setattr(cli, 'PdfEngine', lambda: FakeEngine([make_image()]))
    monkeypatch.setattr(cli, 'PptxExporter', FakeExporter)


def test_no_command_prints_help(monkeypatch):
    assert run(monkeypatch) == 1


def test_generate_missing_input(monkeypatch, capsys):
    assert run(monkeypatch, 'generate', 'missing.pdf', '-a', '1 Main St, Austin, TX') == 1
    assert 'Input file not found' in capsys.readouterr().out


def test_generate_writes_report(monkeypatch, capsys, fake_backends):
    with tempfile.TemporaryDirectory() as tmpdir:
        tmp = Path(tmpdir)
        pdf = tmp / 'offering.pdf'
        pdf.write_bytes(b'%PDF-1.7 fake')
        narrative = tmp / 'market.txt'
        narrative.write_text('Vacancy is tightening.', encoding='utf-8')

        code = run(monkeypatch, 'generate', str(pdf), '-a', '1 Main St, Austin, TX',
                   '-o', str(tmp / 'out'), '--narrative-file', str(narrative))

        assert code == 0
        written = tmp / 'out' / 'Landlord_Update_Report.pptx'
        assert written.read_bytes().startswith(b'deck:')
    out = capsys.readouterr().out
    assert 'Requesting market report for: Austin, TX' in out
    assert 'Created:' in out


def test_generate_rejects_non_pdf(monkeypatch, capsys, fake_backends):
    with tempfile.TemporaryDirectory() as tmpdir:
        image = Path(tmpdir) / 'flyer.png'
        image.write_bytes(b'\x89PNG fake')
        assert run(monkeypatch, 'generate', str(image), '-a', '1 Main St, Austin, TX') == 1
    assert 'Please upload a PDF file' in capsys.readouterr().out


def test_inspect_rejects_non_report(monkeypatch, capsys):
    with tempfile.TemporaryDirectory() as tmpdir:
        bogus = Path(tmpdir) / 'report.pptx'
        bogus.write_bytes(b'not a zip')
        assert run(monkeypatch, 'inspect', str(bogus)) == 1
    assert 'Error:' in capsys.readouterr().out


def test_generate_verbose_prints_traceback(monkeypatch, capsys, fake_backends):
    with tempfile.TemporaryDirectory() as tmpdir:
        image = Path(tmpdir) / 'flyer.png'
        image.write_bytes(b'\x89PNG fake')
        assert run(monkeypatch, 'generate', str(image), '-a', '1 Main St, Austin, TX', '-v') == 1
    assert 'Traceback' in capsys.readouterr().err


def test_verbose_belongs_to_subcommand(monkeypatch):
    with pytest.raises(SystemExit):
        run(monkeypatch, '-v', 'inspect', 'report.pptx')
