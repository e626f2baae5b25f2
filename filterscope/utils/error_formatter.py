"""
Error Formatter
Formats clear, actionable error messages for users
"""

from typing import List, Optional


class ErrorFormatter:
    """Formats user-friendly error messages"""

    @staticmethod
    def format_invalid_query_error(
        table_name: str,
        from_table: Optional[str],
        join_table: Optional[str]
    ) -> str:
        """
        Format error message for a filter that cannot be attributed to the table

        Args:
            table_name: Requested table name
            from_table: Token found after FROM (if any)
            join_table: Token found after JOIN (if any)

        Returns:
            Formatted error message
        """
        targets = [t for t in (from_table, join_table) if t]
        targets_str = ", ".join(targets) if targets else "(none)"

        return f"""FilterScope Error: invalid query

The query contains a WHERE clause, but it cannot be attributed to table '{table_name}'.

Resolved targets: {targets_str}

Suggestions:
  • Check that the table name is given as schema.table
  • Reference the table directly in FROM or JOIN (derived tables are not resolved)

Status: Invalid Query"""

    @staticmethod
    def format_missing_filter_error(table_name: str) -> str:
        """
        Format error message for a table queried without a filter

        Args:
            table_name: Protected table name

        Returns:
            Formatted error message
        """
        return f"""FilterScope Error: row filter is mandatory for '{table_name}'

Queries against this table must include a top-level WHERE clause.

Required format:
  SELECT column1, column2
  FROM {table_name}
  WHERE <filter conditions>

Policy: Mandatory Row Filter
Status: Rejected - Add a WHERE clause and retry"""

    @staticmethod
    def format_missing_columns_error(table_name: str, columns: List[str]) -> str:
        """
        Format error message for a filter missing required columns

        Args:
            table_name: Protected table name
            columns: Required columns absent from the clause

        Returns:
            Formatted error message
        """
        columns_str = ", ".join(columns)

        return f"""FilterScope Error: required filter column(s) missing for '{table_name}'

The WHERE clause must reference: {columns_str}

Policy: Required Filter Columns
Status: Rejected - Add the missing column(s) to the WHERE clause and retry"""

    @staticmethod
    def format_parse_error(clause: str, error: str) -> str:
        """
        Format error message for a clause that sqlglot cannot parse

        Args:
            clause: Extracted where clause
            error: Parse error message

        Returns:
            Formatted error message
        """
        return f"""FilterScope Error: Failed to parse WHERE clause

The extracted clause could not be parsed for policy checks.

Clause: {clause[:200]}
Error: {error}

Suggestions:
  • Verify SQL syntax is valid
  • Check for missing or extra parentheses

Status: Parse Error"""
