"""Command-line interface for the resource generator."""

import sys
import argparse
import shlex
from pathlib import Path

from .__version__ import __version__
from .utils.colors import Colors
from .utils.config import CONFIG_FILENAME, Config, create_default_config, ConfigValidationError
from .utils.logging import configure_logging, get_logger
from .utils.validators import parse_generator_list
from .frameworks.swift import SwiftAdapter
from .core.errors import GenerationError
from .core.generator import GeneratorOptions, ResourceGenerator, WarningLog, parse_kinds
from .core.manifest import ProjectLoader
from .core.models import ResourceKind
from .reports.json_reporter import JSONReporter
from .reports.console_reporter import ConsoleReporter

PROG = 'swift-resource-generator'


def load_and_validate_config(validate: bool = True, verbose: bool = False) -> Config:
    """
    Load configuration and optionally validate it.

    Args:
        validate: Whether to validate the config
        verbose: Whether to print warnings

    Returns:
        Loaded Config object

    Raises:
        ConfigValidationError: If validation fails with errors
    """
    config = Config.from_file()

    if validate:
        errors, warnings = config.validate()

        if verbose and warnings:
            for warning in warnings:
                print(f"{Colors.warning('⚠️')}  Config warning: {warning}")

        if errors:
            print(f"{Colors.error('❌')} Configuration errors:")
            for error in errors:
                print(f"   • {error}")
            raise ConfigValidationError(errors)

    return config


def cmd_init(args):
    """Initialize configuration file."""
    config_path = Path.cwd() / CONFIG_FILENAME

    if config_path.exists() and not args.force:
        print(f"{Colors.error('❌')} Config already exists: {config_path}")
        print("   Use --force to overwrite")
        return 1

    config = create_default_config(Path.cwd().name)
    config.save(config_path)

    print(f"{Colors.success('✅')} Created: {config_path}")
    print(f"\n{Colors.bold('Next steps:')}")
    print(f"1. Describe your resources in {config.project.manifest}")
    print(f"2. Run: {PROG} generate")
    return 0


def _build_options(args, config: Config) -> GeneratorOptions:
    """Merge command line overrides into the configured options."""
    if args.generators:
        names = parse_generator_list(args.generators)
    else:
        names = config.generator.generators

    imports = list(config.generator.imports) + list(args.imports or [])

    return GeneratorOptions(
        enabled_kinds=parse_kinds(names),
        access_level=args.access_level or config.generator.access_level,
        development_language=args.development_language or config.project.development_language,
        additional_imports=frozenset(imports),
    )


def _write_if_changed(path: Path, text: str) -> bool:
    """Write text unless the file already holds it, keeps incremental builds quiet."""
    if path.exists() and path.read_text(encoding='utf-8') == text:
        return False
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding='utf-8')
    return True


def cmd_generate(args):
    """Generate the accessor source file."""
    configure_logging(verbose=args.verbose, quiet=args.quiet)
    logger = get_logger()

    try:
        config = load_and_validate_config(validate=True, verbose=args.verbose)
    except ConfigValidationError:
        return 1

    try:
        options = _build_options(args, config)
    except ValueError as e:
        print(f"{Colors.error('❌')} {e}")
        return 1

    adapter = SwiftAdapter()
    prefix = adapter.warning_prefix()

    def emit(message: str) -> None:
        print(f"{prefix} {message}")

    manifest_path = Path.cwd() / (args.manifest or config.project.manifest)
    output_path = Path.cwd() / (args.output or config.generator.output)

    loader_log = WarningLog(forward=emit)
    try:
        resources = ProjectLoader(adapter=adapter, warning=loader_log).load(manifest_path)
        generator = ResourceGenerator(options, warning=emit, adapter=adapter)
        result = generator.generate(resources)
    except GenerationError as e:
        print(f"{Colors.error('❌')} {e.description}")
        return 1
    except ValueError as e:
        print(f"{Colors.error('❌')} {e}")
        return 1

    result.warnings = loader_log.messages + result.warnings

    written_path = None
    if not args.dry_run:
        if _write_if_changed(output_path, result.text):
            logger.info(f"Wrote {output_path}")
        else:
            logger.info(f"Unchanged {output_path}")
        written_path = output_path

    if args.json or 'json' in config.reports.formats:
        JSONReporter.generate(
            result=result,
            counts=resources.counts(),
            output_path=Path(args.json) if args.json else Path(config.reports.output) / 'report.json',
            output_file=str(output_path),
        )

    if 'console' in config.reports.formats and not args.quiet:
        ConsoleReporter.print_summary(
            result=result,
            counts=resources.counts(),
            output_path=written_path,
            show_warnings=args.verbose,
        )

    return 0


def cmd_print_command(args):
    """Print the generate invocation for a build phase script."""
    try:
        config = load_and_validate_config(validate=False)
    except ConfigValidationError:
        return 1

    parts = [PROG, 'generate', f'$SRCROOT/{config.generator.output}']
    parts += ['--manifest', f'$SRCROOT/{config.project.manifest}']
    if config.generator.generators:
        parts += ['--generators', ','.join(config.generator.generators)]
    if config.generator.access_level != 'internal':
        parts += ['--access-level', config.generator.access_level]
    for module in config.generator.imports:
        parts += ['--import', module]

    # Keep $SRCROOT expandable by the build phase shell
    print(' '.join(part if part.startswith('$SRCROOT') else shlex.quote(part) for part in parts))
    return 0


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        description='Generate strongly typed Swift accessors for project resources',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # init command
    init_parser = subparsers.add_parser('init', help='Initialize configuration file')
    init_parser.add_argument('--force', action='store_true', help='Overwrite existing config')

    # generate command
    generate_parser = subparsers.add_parser('generate', help='Generate the accessor source file')
    generate_parser.add_argument('output', nargs='?', metavar='OUTPUT',
                                 help='Output file (default: from config)')
    generate_parser.add_argument('--manifest', '-m', metavar='PATH', help='Resource manifest (default: from config)')
    generate_parser.add_argument('--generators', '-g', metavar='LIST',
                                 help=f"Comma separated kinds to generate ({', '.join(ResourceKind.names())})")
    generate_parser.add_argument('--access-level', choices=['internal', 'public'],
                                 help='Access level of generated declarations')
    generate_parser.add_argument('--import', dest='imports', action='append', metavar='MODULE',
                                 help='Additional module to import (repeatable)')
    generate_parser.add_argument('--development-language', metavar='CODE',
                                 help='Override the development region of the project')
    generate_parser.add_argument('--json', metavar='PATH', help='Output JSON report')
    generate_parser.add_argument('--dry-run', action='store_true', help='Generate without writing the output')
    verbosity = generate_parser.add_mutually_exclusive_group()
    verbosity.add_argument('--verbose', '-v', action='store_true', help='Show detailed output')
    verbosity.add_argument('--quiet', '-q', action='store_true', help='Minimal output')

    # print-command command
    subparsers.add_parser('print-command', help='Print the command for a build phase script')

    args = parser.parse_args(argv)

    if args.command == 'init':
        return cmd_init(args)
    elif args.command == 'generate':
        return cmd_generate(args)
    elif args.command == 'print-command':
        return cmd_print_command(args)
    else:
        parser.print_help()
        return 0


if __name__ == '__main__':
    sys.exit(main())
