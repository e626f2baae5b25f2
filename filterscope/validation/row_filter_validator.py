"""
Row Filter Validator
Validates that queries on protected tables carry the mandated filter
"""

from sqlglot.errors import SqlglotError
from filterscope.config.settings import Settings
from filterscope.core.clause_result import ClauseResult, Clause, NoMatch, Invalid
from filterscope.utils.sql_parser import SQLParser
from filterscope.utils.error_formatter import ErrorFormatter


class RowFilterViolation(Exception):
    """Exception raised when a row-filter policy is violated"""

    def __init__(self, rule: str, table_name: str, message: str):
        """
        Initialize exception

        Args:
            rule: Violated rule name
            table_name: Protected table name
            message: Error message
        """
        self.rule = rule
        self.table_name = table_name
        super().__init__(message)


class RowFilterValidator:
    """Enforces per-table row-filter policies"""

    MISSING_CLAUSE_REASONS = (NoMatch.NO_WHERE, NoMatch.NO_TOP_LEVEL_WHERE)

    def __init__(self, settings: Settings, sql_parser: SQLParser):
        """
        Initialize validator

        Args:
            settings: Application settings
            sql_parser: SQL parser instance
        """
        self.settings = settings
        self.sql_parser = sql_parser

    def validate(self, result: ClauseResult, table_name: str):
        """
        Validate a lookup result against the table's policy

        Args:
            result: Outcome of parse_query for the table
            table_name: Table name the lookup was made for

        Raises:
            RowFilterViolation: If the policy is not satisfied
        """
        if not self.settings.is_policy_enforced():
            return

        policy = self.settings.get_table_policy(table_name)
        if policy is None:
            return

        if isinstance(result, Invalid):
            raise RowFilterViolation('invalid_query', table_name, result.message)

        if isinstance(result, NoMatch):
            if policy.get('require_filter', False) and result.reason in self.MISSING_CLAUSE_REASONS:
                error_msg = ErrorFormatter.format_missing_filter_error(table_name)
                raise RowFilterViolation('missing_filter', table_name, error_msg)
            return

        if isinstance(result, Clause):
            self._check_required_columns(result.text, table_name, policy.get('required_columns', []))

    def _check_required_columns(self, clause: str, table_name: str, required_columns):
        """Check that every required column is referenced in the clause"""
        if not required_columns:
            return

        try:
            columns = self.sql_parser.get_where_columns(clause)
        except (SqlglotError, ValueError) as e:
            error_msg = ErrorFormatter.format_parse_error(clause, str(e))
            raise RowFilterViolation('parse_error', table_name, error_msg)

        missing = [col for col in required_columns if col.lower() not in columns]
        if missing:
            error_msg = ErrorFormatter.format_missing_columns_error(table_name, missing)
            raise RowFilterViolation('missing_columns', table_name, error_msg)
