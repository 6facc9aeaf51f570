"""JSON report generator."""

import json
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional

from ..__version__ import __version__
from ..core.generator import GenerationResult
from ..utils.colors import Colors


class JSONReporter:
    """Generate JSON reports for generation runs."""

    @staticmethod
    def build(
        result: GenerationResult,
        counts: Optional[Dict[str, int]] = None,
        output_file: Optional[str] = None
    ) -> dict:
        """Report structure for one run."""
        return {
            'metadata': {
                'generated_at': datetime.now().isoformat(),
                'version': __version__,
                'output': output_file,
            },
            'resources': dict(counts or {}),
            'generated_kinds': [kind.value for kind in result.generated_kinds],
            'empty_kinds': [kind.value for kind in result.empty_kinds],
            'disabled_kinds': [kind.value for kind in result.disabled_kinds],
            'warnings': list(result.warnings),
            'warning_count': len(result.warnings),
        }

    @staticmethod
    def generate(
        result: GenerationResult,
        counts: Optional[Dict[str, int]] = None,
        output_path: Optional[Path] = None,
        output_file: Optional[str] = None,
        pretty: bool = True
    ) -> Path:
        """
        Generate JSON report.

        Args:
            result: Generation result
            counts: Manifest record counts per section
            output_path: Report file path
            output_file: Generated source file, recorded in the metadata
            pretty: Pretty print JSON

        Returns:
            Path to generated report
        """
        if output_path is None:
            output_path = Path.cwd() / 'resource_report.json'
        output_path = Path(output_path)

        report = JSONReporter.build(result, counts, output_file)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w', encoding='utf-8') as f:
            if pretty:
                json.dump(report, f, indent=2, ensure_ascii=False)
            else:
                json.dump(report, f, ensure_ascii=False)

        print(f"{Colors.success('✓')} JSON report: {output_path}")

        return output_path

    @staticmethod
    def load(report_path: Path) -> dict:
        with open(report_path, 'r', encoding='utf-8') as f:
            return json.load(f)
