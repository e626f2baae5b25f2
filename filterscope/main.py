"""
FilterScope - WHERE clause lookup for a target table
Main entry point for the application
"""

import sys
import argparse
from pathlib import Path

from filterscope.config.settings import get_settings, ConfigError
from filterscope.config.logging_config import setup_logging, get_logger
from filterscope.core.filter_pipeline import FilterPipeline

VERSION = '1.0.0'


def parse_args(argv=None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        description='FilterScope - Extract the WHERE clause that filters a given table',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Clause for a table, query given inline
  filterscope --table sales.orders --query "SELECT * FROM sales.orders WHERE cob_date='2024-01-15'"

  # Query read from a file, custom config
  filterscope --table sales.orders --file query.sql --config config/production.yaml

  # Query read from stdin
  cat query.sql | filterscope --table sales.orders
        """
    )

    parser.add_argument(
        '--table',
        '-t',
        type=str,
        required=True,
        help='Target table in schema.table form'
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        '--query',
        '-q',
        type=str,
        default=None,
        help='SQL query text'
    )
    source.add_argument(
        '--file',
        '-f',
        type=str,
        default=None,
        help='Read SQL query from file'
    )

    parser.add_argument(
        '--config',
        '-c',
        type=str,
        default=None,
        help='Path to configuration file (default: config/config.yaml)'
    )

    parser.add_argument(
        '--log-level',
        '-l',
        type=str,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        default=None,
        help='Override log level from config'
    )

    parser.add_argument(
        '--version',
        '-v',
        action='version',
        version=f'FilterScope {VERSION}'
    )

    return parser.parse_args(argv)


def read_query(args) -> str:
    """Read query text from --query, --file or stdin"""
    if args.query is not None:
        return args.query
    if args.file is not None:
        return Path(args.file).read_text(encoding='utf-8')
    return sys.stdin.read()


def main(argv=None):
    """Main entry point"""
    args = parse_args(argv)

    try:
        settings = get_settings(args.config)

        log_level = args.log_level or settings.logging.get('level', 'INFO')
        setup_logging(
            log_dir=settings.logging.get('log_dir', 'logs'),
            level=log_level,
            log_file=settings.logging.get('log_file', 'filterscope.log'),
            rotation=settings.logging.get('rotation', 'daily'),
            retention_days=settings.logging.get('retention_days', 30),
            max_file_size_mb=settings.logging.get('max_file_size_mb', 100),
            console_colors=settings.logging.get('console_colors', True)
        )

        logger = get_logger(__name__)
        logger.debug(f"Configuration: {settings.config_file}")
        logger.debug(f"Policy enforcement: {settings.is_policy_enforced()}")

        query = read_query(args)

        pipeline = FilterPipeline(settings)
        result = pipeline.process(query, args.table)
        pipeline.query_logger.log_metrics()

        if not result.success:
            print(result.error_message, file=sys.stderr)
            sys.exit(1)

        if result.clause is not None:
            print(result.clause)
        sys.exit(0)

    except ConfigError as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"Input Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
