#!/usr/bin/env python3
"""
Zendown note export - command line entry point

Exports notes dumped from the notes API as Markdown, standalone HTML, or a
ZIP archive of Markdown files.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from config_loader import ConfigLoader, EngineConfig, get_nested
from exceptions import ExportError
from fetchers import FetcherError, NoteFileFetcher
from logger import log_section, setup_logging
from models import ExportedFile
from orchestrator import ExportOrchestrator, format_bulk_report

__version__ = "1.0.0"

DEFAULT_CONFIG_PATH = 'config.yaml'

EXIT_OK = 0
EXIT_EXPORT_FAILED = 1
EXIT_USAGE = 2


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser for CLI."""
    parser = argparse.ArgumentParser(
        prog='zendown-export',
        description="Export Zendown notes as Markdown, HTML, or a ZIP archive",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Export one note as markdown
  zendown-export markdown --notes notes.json --id 3

  # Export one note as a standalone HTML page
  zendown-export html --notes notes.json --id 3 -o exports/

  # Export every note into a ZIP archive
  zendown-export zip --notes notes.json --progress

  # Verbose logging
  zendown-export zip --notes notes.json -vv
        """
    )

    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    parser.add_argument(
        '--config',
        type=str,
        default=DEFAULT_CONFIG_PATH,
        help=f'Path to configuration YAML file (default: {DEFAULT_CONFIG_PATH})'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='count',
        default=0,
        help='Increase verbosity (-v for INFO, -vv for DEBUG)'
    )
    parser.add_argument('--log-file', type=str, help='Write logs to this file as well')
    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help='Explicit log level (overrides -v)'
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    for command, help_text in (('markdown', 'Export one note as Markdown'),
                               ('html', 'Export one note as standalone HTML')):
        sub = subparsers.add_parser(command, help=help_text)
        _add_common_export_args(sub)
        sub.add_argument('--id', type=int, required=True, dest='note_id', help='Note id to export')

    zip_parser = subparsers.add_parser('zip', help='Export all notes as a ZIP archive')
    _add_common_export_args(zip_parser)
    zip_parser.add_argument('--archive-prefix', type=str, help='Archive file name prefix')
    zip_parser.add_argument(
        '--progress',
        action=argparse.BooleanOptionalAction,
        default=None,
        help='Show a progress bar while exporting'
    )

    return parser


def _add_common_export_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('--notes', type=str, required=True, help='JSON or YAML file with notes')
    parser.add_argument(
        '-o', '--output-dir',
        type=str,
        default='.',
        help='Directory to write the exported file to (default: current directory)'
    )


def load_config(args: argparse.Namespace) -> dict:
    """Load, merge and validate configuration; a missing default config means defaults."""
    config_path = Path(args.config)
    if config_path.exists():
        config = ConfigLoader.load(str(config_path))
    elif args.config == DEFAULT_CONFIG_PATH:
        config = {}
    else:
        raise FileNotFoundError(f"Configuration file not found: {args.config}")

    config = ConfigLoader.merge_with_args(config, args)
    ConfigLoader.validate(config)
    return config


def write_exported_file(exported: ExportedFile, output_dir: str) -> Path:
    """Write an exported payload into the output directory."""
    directory = Path(output_dir)
    directory.mkdir(parents=True, exist_ok=True)
    target = directory / exported.filename
    target.write_bytes(exported.content)
    return target


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args)
    except (FileNotFoundError, ValueError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_USAGE

    logger = setup_logging(
        verbosity=args.verbose,
        log_file=get_nested(config, 'logging.file'),
        level=args.log_level or (get_nested(config, 'logging.level') if not args.verbose else None),
    )

    engine_config = EngineConfig.from_dict(config)
    orchestrator = ExportOrchestrator(engine_config, logger=logger)
    fetcher = NoteFileFetcher(args.notes, config=config, logger=logger)

    log_section(f"{args.command} export", logger)

    try:
        if args.command == 'zip':
            exported, report = orchestrator.export_all_as_zip(fetcher.fetch_notes())
            target = write_exported_file(exported, args.output_dir)
            print(format_bulk_report(report))
        else:
            note = fetcher.fetch_note(args.note_id)
            if args.command == 'markdown':
                exported = orchestrator.export_markdown(note)
            else:
                exported = orchestrator.export_raw_html(note)
            target = write_exported_file(exported, args.output_dir)
    except FetcherError as e:
        logger.error(str(e))
        return EXIT_USAGE
    except (ExportError, OSError) as e:
        logger.error(f"Export failed: {e}")
        return EXIT_EXPORT_FAILED

    print(f"Wrote {target}")
    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
