"""
Logging Configuration for FilterScope
Sets up colored console logging and JSON file logging
"""

import logging
import sys
from pathlib import Path
from logging.handlers import TimedRotatingFileHandler, RotatingFileHandler
from typing import Optional
import colorlog
from pythonjsonlogger import jsonlogger


def setup_logging(
    log_dir: str = 'logs',
    level: str = 'INFO',
    log_file: str = 'filterscope.log',
    rotation: str = 'daily',
    retention_days: int = 30,
    max_file_size_mb: int = 100,
    console_colors: bool = True
) -> logging.Logger:
    """
    Setup logging with both console and file handlers

    Args:
        log_dir: Directory for log files
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Log file name
        rotation: Rotation strategy ('daily', 'weekly', or 'size')
        retention_days: Days to retain logs
        max_file_size_mb: Max file size for size-based rotation
        console_colors: Enable colored console output

    Returns:
        Configured logger instance
    """
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger('filterscope')
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.handlers.clear()

    # Console goes to stderr, stdout carries the extracted clause
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG)

    if console_colors:
        console_formatter = colorlog.ColoredFormatter(
            fmt='%(log_color)s%(asctime)s [%(levelname)-8s]%(reset)s %(name)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S',
            log_colors={
                'DEBUG': 'cyan',
                'INFO': 'green',
                'WARNING': 'yellow',
                'ERROR': 'red',
                'CRITICAL': 'red,bg_white',
            }
        )
    else:
        console_formatter = logging.Formatter(
            fmt='%(asctime)s [%(levelname)-8s] %(name)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    log_file_path = log_path / log_file

    if rotation == 'daily':
        file_handler = TimedRotatingFileHandler(
            filename=log_file_path,
            when='midnight',
            interval=1,
            backupCount=retention_days,
            encoding='utf-8'
        )
    elif rotation == 'weekly':
        file_handler = TimedRotatingFileHandler(
            filename=log_file_path,
            when='W0',  # Monday
            interval=1,
            backupCount=max(int(retention_days / 7), 1),
            encoding='utf-8'
        )
    else:  # size-based rotation
        file_handler = RotatingFileHandler(
            filename=log_file_path,
            maxBytes=max_file_size_mb * 1024 * 1024,
            backupCount=10,
            encoding='utf-8'
        )

    file_handler.setLevel(logging.DEBUG)

    json_formatter = jsonlogger.JsonFormatter(
        fmt='%(asctime)s %(name)s %(levelname)s %(message)s',
        datefmt='%Y-%m-%dT%H:%M:%S'
    )
    file_handler.setFormatter(json_formatter)
    logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a specific module

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(f'filterscope.{name}')


class QueryLogger:
    """
    Specialized logger for clause extraction requests
    Tracks each request from receipt to outcome
    """

    def __init__(self, logger: Optional[logging.Logger] = None, max_query_length: int = 500):
        """
        Initialize query logger

        Args:
            logger: Base logger instance (default: get filterscope.query logger)
            max_query_length: Truncation length for logged query text
        """
        self.logger = logger or logging.getLogger('filterscope.query')
        self.max_query_length = max_query_length
        self.query_count = 0
        self.clause_count = 0
        self.no_match_count = 0
        self.invalid_count = 0
        self.violation_count = 0

    def _truncate(self, text: str) -> str:
        return text[:self.max_query_length]

    def log_received(self, query_id: str, query: str, table_name: str):
        """Log request received"""
        self.query_count += 1
        self.logger.info(
            "Query received",
            extra={
                'query_id': query_id,
                'table_name': table_name,
                'status': 'RECEIVED',
                'query': self._truncate(query or '')
            }
        )

    def log_clause_found(self, query_id: str, table_name: str, clause: str):
        """Log extracted clause"""
        self.clause_count += 1
        self.logger.info(
            "Where clause extracted",
            extra={
                'query_id': query_id,
                'table_name': table_name,
                'status': 'CLAUSE_FOUND',
                'clause': self._truncate(clause)
            }
        )

    def log_no_match(self, query_id: str, table_name: str, reason: str):
        """Log clean absence outcome"""
        self.no_match_count += 1
        self.logger.debug(
            "No clause for table",
            extra={
                'query_id': query_id,
                'table_name': table_name,
                'status': f'NO_MATCH_{reason.upper()}',
                'reason': reason
            }
        )

    def log_invalid(self, query_id: str, table_name: str, message: str, query: str):
        """Log query whose filter cannot be attributed to the table"""
        self.invalid_count += 1
        self.logger.warning(
            "Invalid query",
            extra={
                'query_id': query_id,
                'table_name': table_name,
                'status': 'INVALID',
                'error': message,
                'query': self._truncate(query)
            }
        )

    def log_policy_violation(self, query_id: str, table_name: str, rule: str,
                             query: str, details: dict = None):
        """Log row-filter policy violation"""
        self.violation_count += 1
        log_data = {
            'query_id': query_id,
            'table_name': table_name,
            'status': f'REJECTED_{rule.upper()}',
            'rule': rule,
            'query': self._truncate(query)
        }
        if details:
            log_data.update(details)

        self.logger.warning("Row filter policy violated", extra=log_data)

    def log_metrics(self):
        """Log aggregate metrics"""
        if self.query_count == 0:
            return

        total = self.query_count

        self.logger.info(
            "Query metrics",
            extra={
                'metric_type': 'aggregate_summary',
                'total_queries': total,
                'clause_count': self.clause_count,
                'no_match_count': self.no_match_count,
                'invalid_count': self.invalid_count,
                'violation_count': self.violation_count,
                'clause_rate': round(self.clause_count / total, 3),
                'invalid_rate': round(self.invalid_count / total, 3)
            }
        )


# Global query logger instance
_query_logger: Optional[QueryLogger] = None


def get_query_logger() -> QueryLogger:
    """Get global query logger instance"""
    global _query_logger
    if _query_logger is None:
        _query_logger = QueryLogger()
    return _query_logger
