"""
Clause Results
Outcomes of a where-clause lookup: Clause, NoMatch or Invalid
"""

from typing import Optional


class ClauseResult:
    """Base class for lookup outcomes"""

    outcome = 'unknown'

    def _key(self):
        return ()

    def __eq__(self, other) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash((type(self).__name__,) + self._key())


class Clause(ClauseResult):
    """Where clause found for the target table"""

    outcome = 'clause'

    def __init__(self, text: str):
        """
        Initialize clause result

        Args:
            text: Clause text from the where keyword to end of query
        """
        self.text = text

    def _key(self):
        return (self.text,)

    def __repr__(self) -> str:
        return f"Clause(text={self.text!r})"


class NoMatch(ClauseResult):
    """Nothing to report for the target table (not an error)"""

    outcome = 'no_match'

    EMPTY_INPUT = 'empty_input'
    NO_TOP_LEVEL_WHERE = 'no_top_level_where'
    TABLE_MISMATCH = 'table_mismatch'
    NO_WHERE = 'no_where'

    def __init__(self, reason: Optional[str] = None):
        """
        Initialize no-match result

        Args:
            reason: Why no clause was returned (diagnostic only, optional)
        """
        self.reason = reason

    def _key(self):
        return (self.reason,)

    def __repr__(self) -> str:
        return f"NoMatch(reason={self.reason!r})"


class Invalid(ClauseResult):
    """Query has a filter that cannot be attributed to the target table"""

    outcome = 'invalid'

    def __init__(self, message: str):
        """
        Initialize invalid result

        Args:
            message: Error message
        """
        self.message = message

    def _key(self):
        return (self.message,)

    def __repr__(self) -> str:
        return f"Invalid(message={self.message!r})"
