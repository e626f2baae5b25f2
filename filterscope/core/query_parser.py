"""
Query Parser
Finds the top-level WHERE clause that belongs to a given table
"""

from typing import Optional
from filterscope.config.logging_config import get_logger
from filterscope.core.clause_result import ClauseResult, Clause, NoMatch, Invalid
from filterscope.transformation.query_normalizer import QueryNormalizer
from filterscope.utils.paren_scanner import find_top_level_where
from filterscope.utils.clause_extractor import extract_where_clause
from filterscope.validation.table_resolver import TableResolver, InvalidQueryError

logger = get_logger(__name__)


def parse_query(input_query: Optional[str], table_name: Optional[str]) -> ClauseResult:
    """
    Return the WHERE clause of the query if it filters the given table

    The table is matched against the token after FROM, or after JOIN when
    the query has one. Parenthesized groups before the WHERE keyword are
    skipped, so a WHERE inside a subquery is never picked as the clause.

    Args:
        input_query: Raw SQL query
        table_name: Table name in schema.table form

    Returns:
        Clause with the text from 'where' to end of query, NoMatch, or
        Invalid when the query has a WHERE that cannot be attributed to
        the table
    """
    if not input_query or not table_name:
        return NoMatch(NoMatch.EMPTY_INPUT)

    query = QueryNormalizer.normalize(input_query)

    fragment = find_top_level_where(query)
    if fragment is None:
        logger.debug("parse_query: No top-level where found")
        # Only a query that reads the table counts as unfiltered
        if TableResolver.matches(query, table_name):
            return NoMatch(NoMatch.NO_TOP_LEVEL_WHERE)
        return NoMatch(NoMatch.TABLE_MISMATCH)

    try:
        table_matches = TableResolver.check(fragment, table_name)
    except InvalidQueryError as e:
        logger.debug(f"parse_query: Where clause not attributable to {table_name}")
        return Invalid(str(e))

    if not table_matches:
        return NoMatch(NoMatch.TABLE_MISMATCH)

    clause = extract_where_clause(fragment)
    if clause is None:
        return NoMatch(NoMatch.NO_WHERE)

    logger.debug(f"parse_query: Clause found for {table_name}, length={len(clause)}")
    return Clause(clause)
