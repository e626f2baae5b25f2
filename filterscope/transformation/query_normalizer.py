"""
Query Normalizer
Lowercases a query and unwraps one level of enclosing parentheses
"""

import logging


class QueryNormalizer:
    """Prepare raw query text for the top-level where scan"""

    @staticmethod
    def normalize(query: str) -> str:
        """
        Normalize query text

        The leading '(' is removed unconditionally. The trailing ')' is
        removed only when a leading '(' was removed first.

        Transforms: (SELECT * FROM Foo WHERE x=1)
        To: select * from foo where x=1

        Args:
            query: Raw SQL query

        Returns:
            Normalized query
        """
        logger = logging.getLogger('filterscope.normalize')

        normalized = query.lower()

        if normalized.startswith('('):
            normalized = normalized[1:]
            if normalized.endswith(')'):
                normalized = normalized[:-1]
            logger.debug(f"QueryNormalizer.normalize: Unwrapped parentheses, length={len(normalized)}")

        return normalized
