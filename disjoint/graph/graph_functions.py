import warnings

import networkx as nx
import numpy as np

from disjoint.union_find import UnionFind


def _test_graph(graph):
    """A function that makes sure ``graph`` is a networkx graph, or
    something networkx can turn into one.

    Parameters
    ----------
    graph : :any:`networkx.Graph`, dict, list of edges, etc.

    Returns
    -------
    :any:`networkx.Graph`
        ``graph`` itself if it already is a networkx graph (including
        directed and multigraphs), otherwise a new
        :any:`networkx.Graph`.

    Raises
    ------
    TypeError
        Raises a :exc:`~TypeError` if ``graph`` cannot be turned into a
        :any:`networkx.Graph`.
    """
    if not isinstance(graph, nx.Graph):
        try:
            graph = nx.Graph(graph)
        except (nx.NetworkXError, TypeError):
            raise TypeError("Couldn't turn graph into a Graph.")
    return graph


def label_components(g):
    """Labels the connected components of a graph.

    Parameters
    ----------
    g : :any:`networkx.Graph`, dict, etc.
        Any object that :any:`Graph<networkx.Graph>` accepts. Edge
        directions are ignored, so for a directed graph the weakly
        connected components are labeled.

    Returns
    -------
    labels : dict
        Maps each vertex to the integer label of its component. Labels
        run from ``0`` to ``num_components - 1`` in the order that
        the components are first met while iterating over the vertices.
    num_components : int
        The number of connected components.

    Raises
    ------
    TypeError
        Raised when ``g`` cannot be made into a :any:`networkx.Graph`.

    Examples
    --------
    >>> import disjoint
    >>> labels, n = disjoint.label_components({0: [1], 1: [], 2: [3], 4: []})
    >>> n
    3
    >>> labels[0] == labels[1], labels[2] == labels[3], labels[1] == labels[4]
    (True, True, False)
    """
    g = _test_graph(g)
    uf = UnionFind(g.nodes())
    for u, v in g.edges():
        uf.union(u, v)

    leaders = {}
    labels = {}
    for v in g.nodes():
        leader = uf.find(v)
        if leader not in leaders:
            leaders[leader] = len(leaders)
        labels[v] = leaders[leader]

    return labels, len(leaders)


def has_cycle(g):
    """Determines whether a graph contains a cycle.

    Parameters
    ----------
    g : :any:`networkx.Graph`, dict, etc.
        Any object that :any:`Graph<networkx.Graph>` accepts.

    Returns
    -------
    bool
        ``True`` if some edge joins two vertices that the preceding
        edges already connect.

    Notes
    -----
    Edges are treated as undirected. A self-loop is a cycle, as is a
    pair of parallel edges in a multigraph or a pair of reciprocal
    edges in a directed graph.
    """
    g = _test_graph(g)
    uf = UnionFind(g.nodes())
    for u, v in g.edges():
        if uf.connected(u, v):
            return True
        uf.union(u, v)
    return False


def minimum_spanning_edges(g, weight='weight', default=1):
    """Yields the edges of a minimum spanning forest using Kruskal's
    algorithm.

    Parameters
    ----------
    g : :any:`networkx.Graph`, dict, etc.
        Any object that :any:`Graph<networkx.Graph>` accepts. Edge
        directions are ignored.
    weight : str (optional, default: ``'weight'``)
        The edge attribute holding the weight of each edge.
    default : float (optional, default: ``1``)
        The weight used for edges without a ``weight`` attribute.

    Yields
    ------
    tuple
        ``(u, v, data)`` for every edge in the spanning forest, in
        increasing order of weight. Edges with equal weights keep the
        order in which ``g`` iterates over them.

    Raises
    ------
    TypeError
        Raised when ``g`` cannot be made into a :any:`networkx.Graph`.
    """
    g = _test_graph(g)
    edges = list(g.edges(data=True))
    weights = np.array([d.get(weight, default) for u, v, d in edges], dtype=float)
    uf = UnionFind(g.nodes())

    for k in np.argsort(weights, kind='stable'):
        u, v, d = edges[k]
        if uf.connected(u, v):
            continue
        uf.union(u, v)
        yield u, v, d
        if uf.num_clusters == 1:
            break


def minimum_spanning_tree(g, weight='weight', default=1):
    """Returns a minimum spanning tree of the graph ``g``.

    Parameters
    ----------
    g : :any:`networkx.Graph`, dict, etc.
        Any object that :any:`Graph<networkx.Graph>` accepts.
    weight : str (optional, default: ``'weight'``)
        The edge attribute holding the weight of each edge.
    default : float (optional, default: ``1``)
        The weight used for edges without a ``weight`` attribute.

    Returns
    -------
    :any:`networkx.Graph`
        A graph with every vertex of ``g`` (and its attributes) and the
        edges returned by :func:`.minimum_spanning_edges`.

    Raises
    ------
    TypeError
        Raised when ``g`` cannot be made into a :any:`networkx.Graph`.

    Notes
    -----
    If ``g`` is not connected a :exc:`UserWarning` is emitted and the
    result is a minimum spanning forest, with one tree per component.
    """
    g = _test_graph(g)
    tree = nx.Graph()
    tree.add_nodes_from(g.nodes(data=True))
    tree.add_edges_from(minimum_spanning_edges(g, weight=weight, default=default))

    if tree.number_of_nodes() - tree.number_of_edges() > 1:
        msg = "The graph is disconnected, returning a minimum spanning forest."
        warnings.warn(msg)

    return tree
