"""Tests for report generators (console and JSON)."""

import json
import tempfile
from pathlib import Path

import pytest

from resource_generator.core.code_model import Struct
from resource_generator.core.generator import GenerationResult
from resource_generator.core.identifiers import SymbolName
from resource_generator.core.models import ResourceKind
from resource_generator.reports.console_reporter import ConsoleReporter
from resource_generator.reports.json_reporter import JSONReporter


def create_result(warnings=None):
    return GenerationResult(
        text='struct _R {}\n',
        root=Struct(name=SymbolName('_R')),
        warnings=list(warnings or []),
        generated_kinds=[ResourceKind.STRING, ResourceKind.IMAGE],
        empty_kinds=[ResourceKind.FONT],
        disabled_kinds=[ResourceKind.NIB],
    )


COUNTS = {'images': 3, 'strings': 2}


class TestJSONReporter:
    """Test cases for JSONReporter."""

    def test_build(self):
        report = JSONReporter.build(create_result(['careful']), COUNTS, 'R.generated.swift')

        assert report['metadata']['output'] == 'R.generated.swift'
        assert 'generated_at' in report['metadata']
        assert report['resources'] == COUNTS
        assert report['generated_kinds'] == ['string', 'image']
        assert report['empty_kinds'] == ['font']
        assert report['disabled_kinds'] == ['nib']
        assert report['warnings'] == ['careful']
        assert report['warning_count'] == 1

    def test_generate_and_load(self, capfd):
        with tempfile.TemporaryDirectory() as tmpdir:
            output_path = Path(tmpdir) / 'reports' / 'report.json'
            path = JSONReporter.generate(create_result(), COUNTS, output_path=output_path)

            assert path == output_path
            report = JSONReporter.load(path)

        assert report['warning_count'] == 0
        assert report['resources']['images'] == 3
        assert 'JSON report' in capfd.readouterr().out

    def test_generate_compact(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            output_path = Path(tmpdir) / 'report.json'
            JSONReporter.generate(create_result(), output_path=output_path, pretty=False)
            content = output_path.read_text(encoding='utf-8')

        assert '\n' not in content
        assert json.loads(content)['resources'] == {}

    def test_non_ascii_warnings(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            output_path = Path(tmpdir) / 'report.json'
            JSONReporter.generate(create_result(["Skipping image 'çiçek'"]), output_path=output_path)
            content = output_path.read_text(encoding='utf-8')

        assert 'çiçek' in content


class TestConsoleReporter:
    """Test cases for ConsoleReporter."""

    def test_print_summary(self, capfd):
        ConsoleReporter.print_summary(create_result(), COUNTS, output_path=Path('R.generated.swift'))

        out = capfd.readouterr().out
        assert 'RESOURCE GENERATION' in out
        assert 'images' in out
        assert 'generated' in out
        assert 'empty' in out
        assert 'disabled' in out
        assert 'Written: R.generated.swift' in out
        assert 'warnings' not in out

    def test_dry_run(self, capfd):
        ConsoleReporter.print_summary(create_result())
        assert 'Dry run, nothing written' in capfd.readouterr().out

    def test_warning_count_without_details(self, capfd):
        ConsoleReporter.print_summary(create_result(['one', 'two']))

        out = capfd.readouterr().out
        assert '2 warnings' in out
        assert '1. one' not in out

    def test_show_warnings(self, capfd):
        ConsoleReporter.print_summary(create_result(['one', 'two']), show_warnings=True)

        out = capfd.readouterr().out
        assert '1. one' in out
        assert '2. two' in out

    def test_warning_limit(self, capfd):
        warnings = [f'warning {i}' for i in range(25)]
        ConsoleReporter.print_summary(create_result(warnings), show_warnings=True)

        out = capfd.readouterr().out
        assert '20. warning 19' in out
        assert '... and 5 more' in out


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
