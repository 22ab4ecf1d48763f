"""
Command-Line Interface for the ND Exposure Table

Prints shutter times behind every useful ND filter stack, as a grid table
and as a comma-separated row dump.
"""

import os
import sys
import argparse
import logging

# Add parent directory to path
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from catalog import BASE_FILTERS, BASE_SHUTTERS
from generators import CombinationGenerator, CombinationPolicy
from reporters import TableReporter
from settings import load_config, DEFAULT_LOG_FORMAT

logger = logging.getLogger(__name__)


def setup_logging(config: dict):
    """Configure logging from the ``logging`` section of the loaded config."""
    section = config.get('logging') or {}
    logging.basicConfig(
        level=str(section.get('level', 'INFO')).upper(),
        format=section.get('format', DEFAULT_LOG_FORMAT),
        force=True
    )


def build_reporter(args) -> TableReporter:
    """Generate the filter stacks and wrap them, with the shutters, in a reporter."""
    generator = CombinationGenerator.from_settings(BASE_FILTERS, args.settings, policy=args.policy)
    combinations = generator.build()
    return TableReporter.from_settings(combinations, BASE_SHUTTERS, args.settings)


def _write(args, formats=None):
    reporter = build_reporter(args)
    report_path = reporter.generate_report(output_path=args.output, formats=formats)
    if report_path:
        logger.info(f"✓ Table saved to: {report_path}")


def cmd_table(args):
    """Print the grid table."""
    _write(args, formats=['grid'])


def cmd_rows(args):
    """Print the comma-separated row dump."""
    _write(args, formats=['rows'])


def cmd_all(args):
    """Print the configured tables (both by default)."""
    _write(args)


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description='ND filter exposure table',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  # Print both tables
  python cli.py
  
  # Grid table only, saved as Markdown
  python cli.py table --output exposure_table.md
  
  # Row dump with every filter stack (all triples and the full stack)
  python cli.py rows --policy all_stacks
        '''
    )
    
    parser.add_argument('--config', default='config.yaml', help='Path to config file')
    parser.set_defaults(func=cmd_all, output=None, policy=None)
    
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('--output', help='Write to this file instead of stdout')
    common.add_argument('--policy', choices=[p.value for p in CombinationPolicy],
                        help='Filter combination policy (overrides config)')
    
    subparsers = parser.add_subparsers(dest='command', help='Commands')
    
    table_parser = subparsers.add_parser('table', parents=[common], help='Print the grid table')
    table_parser.set_defaults(func=cmd_table)
    
    rows_parser = subparsers.add_parser('rows', parents=[common], help='Print the row dump')
    rows_parser.set_defaults(func=cmd_rows)
    
    all_parser = subparsers.add_parser('all', parents=[common], help='Print both tables')
    all_parser.set_defaults(func=cmd_all)
    
    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    
    logging.basicConfig(level=logging.INFO, format=DEFAULT_LOG_FORMAT)
    
    try:
        args.settings = load_config(args.config)
        setup_logging(args.settings)
        args.func(args)
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == '__main__':
    main()
