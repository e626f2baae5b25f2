"""
Table Resolver
Confirms that a query fragment reads from the requested table
"""

from typing import List, Optional, Tuple
from filterscope.utils.error_formatter import ErrorFormatter


class InvalidQueryError(Exception):
    """Exception raised when a filter cannot be attributed to the table"""

    def __init__(self, table_name: str, from_table: Optional[str],
                 join_table: Optional[str], message: str):
        """
        Initialize exception

        Args:
            table_name: Requested table name
            from_table: Token found after FROM
            join_table: Token found after JOIN
            message: Error message
        """
        self.table_name = table_name
        self.from_table = from_table
        self.join_table = join_table
        super().__init__(message)


class TableResolver:
    """Resolves FROM/JOIN targets by whitespace tokenization"""

    @staticmethod
    def tokenize(fragment: str) -> List[str]:
        """
        Split fragment on whitespace runs

        Args:
            fragment: Query fragment

        Returns:
            Non-empty tokens in order
        """
        return fragment.split()

    @staticmethod
    def resolve_targets(fragment: str) -> Tuple[Optional[str], Optional[str]]:
        """
        Find the tokens that follow FROM and JOIN

        Args:
            fragment: Lowercased query fragment

        Returns:
            Tuple of (from_table, join_table); join_table is only looked
            up when 'join' appears anywhere in the fragment
        """
        tokens = TableResolver.tokenize(fragment)
        has_join = 'join' in fragment

        from_table = None
        join_table = None

        for i, token in enumerate(tokens):
            next_token = tokens[i + 1] if i + 1 < len(tokens) else None

            if token == 'from' and next_token:
                from_table = next_token

            if has_join and token == 'join' and next_token:
                join_table = next_token

            if has_join:
                if from_table and join_table:
                    break
            elif from_table:
                break

        return from_table, join_table

    @staticmethod
    def matches(fragment: str, table_name: str) -> bool:
        """
        Check whether table_name is the FROM or JOIN target

        Args:
            fragment: Lowercased query fragment
            table_name: Requested table name (schema.table)

        Returns:
            True if the table matches
        """
        from_table, join_table = TableResolver.resolve_targets(fragment)
        target = table_name.lower()

        if 'join' in fragment and join_table:
            return target == from_table or target == join_table
        return target == from_table

    @staticmethod
    def check(fragment: str, table_name: str) -> bool:
        """
        Confirm the fragment applies to table_name

        Args:
            fragment: Lowercased query fragment
            table_name: Requested table name (schema.table)

        Returns:
            True if the table matches, False on a clean mismatch

        Raises:
            InvalidQueryError: If the table does not match but the fragment has a where
        """
        if TableResolver.matches(fragment, table_name):
            return True

        if 'where' in fragment:
            from_table, join_table = TableResolver.resolve_targets(fragment)
            error_msg = ErrorFormatter.format_invalid_query_error(table_name, from_table, join_table)
            raise InvalidQueryError(table_name, from_table, join_table, error_msg)

        return False
