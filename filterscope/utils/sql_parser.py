"""
SQL Parser Utilities
Wrapper around sqlglot for inspecting extracted WHERE clauses
"""

from sqlglot import exp, parse_one
from typing import Set


class SQLParser:
    """SQL Parser wrapper for sqlglot"""

    # Placeholder select the extracted clause is attached to
    CLAUSE_HOST = "SELECT 1 FROM _filterscope_clause"

    def __init__(self, dialect: str = 'mysql'):
        """
        Initialize SQL parser

        Args:
            dialect: SQL dialect (default: mysql)
        """
        self.dialect = dialect

    def parse(self, sql: str) -> exp.Expression:
        """
        Parse SQL query into AST

        Args:
            sql: SQL query string

        Returns:
            sqlglot Expression (AST root)

        Raises:
            sqlglot.errors.ParseError: If query is invalid
        """
        return parse_one(sql, dialect=self.dialect)

    def parse_clause(self, clause: str) -> exp.Where:
        """
        Parse an extracted 'where ...' clause

        Args:
            clause: Clause text starting with the where keyword

        Returns:
            sqlglot Where node

        Raises:
            sqlglot.errors.ParseError: If clause is invalid
            ValueError: If the parsed statement carries no WHERE node
        """
        ast = self.parse(f"{self.CLAUSE_HOST} {clause}")
        where = ast.find(exp.Where)
        if where is None:
            raise ValueError(f"No WHERE clause in: {clause[:100]}")
        return where

    def get_where_columns(self, clause: str) -> Set[str]:
        """
        Get column names referenced in a where clause

        Args:
            clause: Clause text starting with the where keyword

        Returns:
            Set of lowercased column names (qualifiers dropped)
        """
        where = self.parse_clause(clause)
        return {col.name.lower() for col in where.find_all(exp.Column)}
