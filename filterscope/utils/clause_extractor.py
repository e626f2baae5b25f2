"""
Clause Extractor
Cuts the WHERE clause out of a fragment confirmed for the target table
"""

from typing import Optional


def extract_where_clause(fragment: str) -> Optional[str]:
    """
    Extract the where clause from a query fragment

    Args:
        fragment: Query fragment already matched to the table

    Returns:
        Text from the first 'where' (any case) to end of fragment, or None
    """
    index = fragment.lower().find('where')
    if index == -1:
        return None
    return fragment[index:]
