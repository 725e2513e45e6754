from disjoint.forest import Element


class UnionFind:
    """The union-find data structure over a collection of hashable objects.

    The UnionFind data structure is a collection of objects that supports
    the union and find operations (described below). Each object in the
    collection belongs to a set, which is identified by its leader. Using the
    ``union(s1, s2)`` operation, the two sets that contain ``s1`` and ``s2``
    can be fused together to form a new set. The ``find(s)`` operation
    identifies the leader of the set to which ``s`` belongs.

    Every object is backed by an :class:`.Element`, whose payload is the
    object itself. Set sizes are kept per leader and moved onto the
    surviving leader after each merge.

    Parameters
    ----------
    S : iterable (optional)
        A collection of hashable objects.

    Attributes
    ----------
    num_clusters : int
        The number of clusters contained in the data-structure.

    Examples
    --------
    >>> import disjoint
    >>> uf = disjoint.UnionFind(range(6))
    >>> uf.union(0, 1)
    >>> uf.union(1, 2)
    >>> uf.size(2), uf.num_clusters
    (3, 4)
    >>> uf.connected(0, 2), uf.connected(0, 5)
    (True, False)
    """
    def __init__(self, S=()):
        self._elements = {}
        self._size = {}
        self.num_clusters = 0
        for s in S:
            self.add(s)

    def __repr__(self):
        return "UnionFind: contains {0} clusters.".format(self.num_clusters)

    def __len__(self):
        return len(self._elements)

    def __contains__(self, s):
        return s in self._elements

    def add(self, s):
        """Adds ``s`` as a singleton set. Does nothing if ``s`` is
        already in the collection.

        Parameters
        ----------
        s : object
            A hashable object.
        """
        if s not in self._elements:
            self._elements[s] = Element(s)
            self._size[s] = 1
            self.num_clusters += 1

    def size(self, s):
        """Returns the number of elements in the set that ``s`` belongs to.

        Parameters
        ----------
        s : object
            An object that the ``UnionFind`` contains.

        Returns
        -------
        out : int
            The number of elements in the set that ``s`` belongs to.

        Raises
        ------
        KeyError
            If ``s`` is not in the collection.
        """
        return self._size[self.find(s)]

    def find(self, s):
        """Locates the leader of the set to which the element ``s`` belongs.

        Parameters
        ----------
        s : object
            An object that the ``UnionFind`` contains.

        Returns
        -------
        object
            The leader of the set that contains ``s``.

        Raises
        ------
        KeyError
            If ``s`` is not in the collection.
        """
        return self._elements[s].find().data

    def connected(self, a, b):
        """Returns ``True`` if ``a`` and ``b`` are in the same set."""
        return self._elements[a].same_set(self._elements[b])

    def union(self, a, b):
        """Merges the set that contains ``a`` with the set that contains ``b``.

        Parameters
        ----------
        a, b : objects
            Two objects whose sets are to be merged.

        Raises
        ------
        KeyError
            If either object is not in the collection.
        """
        r1 = self._elements[a].find()
        r2 = self._elements[b].find()
        if r1 is r2:
            return

        r1.union(r2)
        if r1.is_root():
            leader, other = r1.data, r2.data
        else:
            leader, other = r2.data, r1.data

        self._size[leader] += self._size.pop(other)
        self.num_clusters -= 1
