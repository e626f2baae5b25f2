"""
Paren Scanner
Locates the first WHERE keyword outside parenthesized groups
"""

from typing import Optional

WHERE_KEYWORD = 'where'


def skip_paren_group(text: str, start_index: int) -> int:
    """
    Skip the parenthesized group opening at start_index

    Only nesting depth is tracked; quotes are not special.

    Args:
        text: Query text
        start_index: Index of the opening '(' character

    Returns:
        Index just past the matching ')', or len(text) if the group is never closed

    Raises:
        ValueError: If the character at start_index is not '('
    """
    if text[start_index] != '(':
        raise ValueError(f"Character at position {start_index} is {text[start_index]!r}, not '('")

    depth = 1
    i = start_index + 1
    length = len(text)

    while i < length:
        ch = text[i]
        if ch == '(':
            depth += 1
        elif ch == ')':
            depth -= 1
            if depth == 0:
                return i + 1
        i += 1

    return length


def find_top_level_where(query: str) -> Optional[str]:
    """
    Get the query fragment that carries the first top-level where

    Groups ahead of the keyword are dropped from the fragment; everything
    after the keyword is kept verbatim. A query without '(' is returned whole.

    Args:
        query: Normalized (lowercased) query

    Returns:
        Fragment text, or None if no where sits outside parentheses
    """
    if '(' not in query:
        return query

    buffer = []
    i = 0
    length = len(query)

    while i < length:
        ch = query[i]

        if ch == '(':
            i = skip_paren_group(query, i)
            continue

        buffer.append(ch)

        # Buffer grows one char at a time, so the first containment is a suffix
        if ''.join(buffer[-len(WHERE_KEYWORD):]) == WHERE_KEYWORD:
            return ''.join(buffer) + query[i + 1:]

        i += 1

    return None
