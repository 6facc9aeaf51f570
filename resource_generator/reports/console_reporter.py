"""Console report generator."""

from typing import Dict, Optional

from ..core.generator import GenerationResult
from ..core.models import ResourceKind
from ..utils.colors import Colors


class ConsoleReporter:
    """Print generation summaries to the terminal."""

    @staticmethod
    def print_summary(
        result: GenerationResult,
        counts: Optional[Dict[str, int]] = None,
        output_path=None,
        show_warnings: bool = False
    ):
        """
        Print a summary of one generation run.

        Args:
            result: Generation result
            counts: Manifest record counts per section
            output_path: Where the file was written, None for a dry run
            show_warnings: Repeat the warnings below the summary
        """
        ConsoleReporter._print_header()
        if counts:
            ConsoleReporter._print_counts(counts)
        ConsoleReporter._print_kinds(result)

        if show_warnings:
            ConsoleReporter._print_warnings(result.warnings)

        print()
        if output_path is None:
            print(f"{Colors.info('ℹ')} Dry run, nothing written")
        else:
            print(f"{Colors.success('✓')} Written: {output_path}")

        if result.warnings:
            print(f"{Colors.warning('⚠')} {len(result.warnings)} warnings")

    @staticmethod
    def _print_header():
        print("\n" + "=" * 70)
        print(Colors.bold('RESOURCE GENERATION'))
        print("=" * 70)

    @staticmethod
    def _print_counts(counts: Dict[str, int]):
        print(f"\n{Colors.bold('Manifest')}")
        print("-" * 70)
        for section, count in counts.items():
            print(f"{section:<20} {count:>6}")

    @staticmethod
    def _print_kinds(result: GenerationResult):
        print(f"\n{Colors.bold('Kinds')}")
        print("-" * 70)
        for kind in ResourceKind:
            if kind in result.generated_kinds:
                status = Colors.success('generated')
            elif kind in result.empty_kinds:
                status = Colors.dim('empty')
            else:
                status = Colors.dim('disabled')
            print(f"{kind.value:<20} {status}")

    @staticmethod
    def _print_warnings(warnings, limit: int = 20):
        if not warnings:
            return

        print(f"\n{Colors.bold('Warnings')}")
        print("-" * 70)
        for i, message in enumerate(warnings[:limit], 1):
            print(f"{i}. {message}")
        if len(warnings) > limit:
            print(f"... and {len(warnings) - limit} more")
