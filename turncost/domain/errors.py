"""Exceptions raised by the grid model and the search."""


class TurnCostError(Exception):
    """Base class for all turncost errors."""


class MalformedGridError(TurnCostError, ValueError):
    """Input rows are empty, ragged, or contain an unknown cell kind."""


class OutOfBoundsError(TurnCostError, IndexError):
    """A position outside the grid was queried."""


class NotFoundError(TurnCostError, LookupError):
    """A unique lookup matched no cell."""


class AmbiguousError(TurnCostError, LookupError):
    """A unique lookup matched more than one cell."""


class NoPathError(TurnCostError):
    """The end position cannot be reached from the start."""
