"""Exception types raised by vconn.

Errors coming from the networkx flow algorithms are not wrapped; they reach
the caller unchanged.
"""


class InvalidInputError(ValueError):
    """A graph or query argument is not admissible.

    Raised for graphs with fewer than two vertices, unknown vertices, equal or
    adjacent separator endpoints, and invalid connectivity thresholds.
    """
