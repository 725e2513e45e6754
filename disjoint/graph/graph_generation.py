import numbers

import networkx as nx
import numpy as np

from disjoint.union_find import UnionFind


def generate_maze(width, height, seed=None):
    """Creates a random maze on a ``width`` by ``height`` grid of rooms.

    Parameters
    ----------
    width : int
        The number of rooms in each row.
    height : int
        The number of rooms in each column.
    seed : int (optional)
        An integer used to initialize numpy's pseudorandom number
        generator.

    Returns
    -------
    :any:`networkx.Graph`
        A graph whose vertices are the rooms ``(x, y)`` and whose edges
        are the walls that were knocked down. Each vertex has a ``pos``
        attribute equal to ``(x, y)``.

    Raises
    ------
    ValueError
        Raised when ``width`` or ``height`` is less than one.

    Notes
    -----
    Every room starts out walled in. A room and a direction (right or
    down) are picked at random, and the wall between that room and its
    neighbor is torn down if the two rooms can not yet reach each other.
    This repeats until every room is reachable from every other room, so
    the result is a spanning tree of the grid.

    Examples
    --------
    >>> import disjoint
    >>> maze = disjoint.generate_maze(8, 4, seed=13)
    >>> maze.number_of_nodes(), maze.number_of_edges()
    (32, 31)
    """
    if width < 1 or height < 1:
        raise ValueError("width and height must be positive integers.")

    if isinstance(seed, numbers.Integral):
        np.random.seed(seed)

    g = nx.Graph()
    for y in range(height):
        for x in range(width):
            g.add_node((x, y), pos=(x, y))

    rooms = UnionFind(g.nodes())

    while rooms.num_clusters > 1:
        x0 = int(np.random.randint(width))
        y0 = int(np.random.randint(height))
        direction = np.random.randint(2)
        if direction == 0 and x0 < width - 1:
            room = (x0 + 1, y0)
        elif direction == 1 and y0 < height - 1:
            room = (x0, y0 + 1)
        else:
            continue

        if rooms.connected((x0, y0), room):
            continue

        g.add_edge((x0, y0), room)
        rooms.union((x0, y0), room)

    return g
