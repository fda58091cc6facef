# pathviz_core/services/exceptions.py
"""
    Errors raised by the core services.

    Both subclass the builtin a caller would naturally catch:
    a rejected edge is bad input (``ValueError``), a search from a
    missing node is a broken precondition (``AssertionError``).
"""


class EdgeInputError(ValueError):
    """
    A submitted edge was rejected: missing or unknown endpoints, both
    endpoints the same node, or a weight that is not a number.
    The message is meant to be shown to the user as is.
    """


class SourceNotFoundError(AssertionError):
    """The search was started from a node the graph does not contain."""
