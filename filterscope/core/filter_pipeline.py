"""
Filter Pipeline
Orchestrates clause lookup, request logging and row-filter policy checks
"""

import uuid
import time
from typing import Optional
from filterscope.config.settings import Settings
from filterscope.config.logging_config import QueryLogger, get_query_logger
from filterscope.core.clause_result import Clause, NoMatch, Invalid
from filterscope.core.query_parser import parse_query
from filterscope.utils.sql_parser import SQLParser
from filterscope.validation.row_filter_validator import RowFilterValidator, RowFilterViolation


class FilterPipelineResult:
    """Result from filter pipeline"""

    def __init__(
        self,
        success: bool,
        outcome: str,
        clause: Optional[str] = None,
        error_message: Optional[str] = None,
        elapsed_ms: float = 0.0
    ):
        """
        Initialize pipeline result

        Args:
            success: Whether the query passed (clause found or clean no-match)
            outcome: 'clause', 'no_match', 'invalid' or 'violation'
            clause: Extracted where clause (if found)
            error_message: Error message (if failed)
            elapsed_ms: Processing time
        """
        self.success = success
        self.outcome = outcome
        self.clause = clause
        self.error_message = error_message
        self.elapsed_ms = elapsed_ms


class FilterPipeline:
    """Main clause lookup pipeline"""

    def __init__(self, settings: Settings, query_logger: Optional[QueryLogger] = None):
        """
        Initialize filter pipeline

        Args:
            settings: Application settings
            query_logger: Request logger (default: global query logger)
        """
        self.settings = settings
        self.sql_parser = SQLParser()
        self.row_filter_validator = RowFilterValidator(settings, self.sql_parser)

        self.query_logger = query_logger or get_query_logger()
        self.query_logger.max_query_length = settings.log_query_length

    def process(self, sql: str, table_name: str) -> FilterPipelineResult:
        """
        Look up the table's where clause and check its policy

        Args:
            sql: SQL query string
            table_name: Table name in schema.table form

        Returns:
            FilterPipelineResult
        """
        query_id = str(uuid.uuid4())
        start_time = time.time()

        self.query_logger.log_received(query_id, sql, table_name)

        # Step 1: Clause lookup
        result = parse_query(sql, table_name)

        if isinstance(result, Clause):
            self.query_logger.log_clause_found(query_id, table_name, result.text)
        elif isinstance(result, NoMatch):
            self.query_logger.log_no_match(query_id, table_name, result.reason)
        elif isinstance(result, Invalid):
            self.query_logger.log_invalid(query_id, table_name, result.message, sql)

        # Step 2: Row-filter policy
        try:
            self.row_filter_validator.validate(result, table_name)
        except RowFilterViolation as e:
            self.query_logger.log_policy_violation(query_id, table_name, e.rule, sql)
            return FilterPipelineResult(
                success=False,
                outcome='violation',
                clause=result.text if isinstance(result, Clause) else None,
                error_message=str(e),
                elapsed_ms=(time.time() - start_time) * 1000
            )

        elapsed_ms = (time.time() - start_time) * 1000

        if isinstance(result, Invalid):
            return FilterPipelineResult(
                success=False,
                outcome=result.outcome,
                error_message=result.message,
                elapsed_ms=elapsed_ms
            )

        return FilterPipelineResult(
            success=True,
            outcome=result.outcome,
            clause=result.text if isinstance(result, Clause) else None,
            elapsed_ms=elapsed_ms
        )
