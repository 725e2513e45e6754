from typing import Generic, Optional, TypeVar

T = TypeVar('T')


class Element(Generic[T]):
    """A member of a disjoint-set forest.

    Each ``Element`` starts out in its own singleton set. Sets are fused
    together with :meth:`.union`, and :meth:`.find` returns the
    *representative* of the set an element belongs to. Two elements are
    in the same set if and only if they have the same representative
    (compared by identity).

    The forest uses union by rank together with path halving, so both
    operations run in amortized near-constant time.

    Parameters
    ----------
    data : object (optional, default: ``None``)
        An arbitrary payload. The forest never reads, combines or
        discards it; callers that want a per-set aggregate should store
        it on the representative after calling :meth:`.union`.

    Attributes
    ----------
    data : object
        The payload supplied by the caller.

    Notes
    -----
    Elements from two different forests should never be merged, and the
    ``parent`` and ``rank`` of an element should not be modified from
    outside this module. Neither mistake is detected.

    Examples
    --------
    >>> import disjoint
    >>> a, b, c = disjoint.Element(), disjoint.Element(), disjoint.Element()
    >>> a.union(b)
    >>> a.find() is b.find()
    True
    >>> a.same_set(c)
    False
    """
    __slots__ = ('_parent', '_rank', 'data')

    def __init__(self, data: Optional[T] = None):
        self._parent = self
        self._rank = 0
        self.data: Optional[T] = data

    def __repr__(self):
        kind = 'root' if self._parent is self else 'child'
        return 'Element({0}, rank={1}, data={2!r})'.format(kind, self._rank, self.data)

    @property
    def parent(self):
        """The element this one points to. A root points to itself."""
        return self._parent

    @property
    def rank(self):
        """An upper bound on the height of the tree below this element.

        Only meaningful while the element is a root.
        """
        return self._rank

    def is_root(self):
        """Returns ``True`` if this element is the representative of its set."""
        return self._parent is self

    def find(self):
        """Returns the representative of the set containing this element.

        This is not a pure query: on the way up every other element on
        the path is re-pointed at its grandparent (path halving).

        Returns
        -------
        :class:`.Element`
            The root of the tree containing this element.
        """
        e = self
        while e._parent is not e:
            e._parent = e._parent._parent
            e = e._parent
        return e

    def union(self, other):
        """Merges the set containing this element with the set that
        contains ``other``.

        The root with the smaller rank is attached below the root with
        the larger rank. When the ranks are equal, the root of ``other``
        is attached below the root of ``self`` and the surviving root's
        rank goes up by one. Nothing happens if both elements are
        already in the same set.

        Parameters
        ----------
        other : :class:`.Element`
            An element from the same forest.
        """
        s_root = self.find()
        o_root = other.find()
        if s_root is o_root:
            return

        if s_root._rank < o_root._rank:
            s_root._parent = o_root
        elif s_root._rank > o_root._rank:
            o_root._parent = s_root
        else:
            o_root._parent = s_root
            s_root._rank += 1

    def same_set(self, other):
        """Returns ``True`` if ``self`` and ``other`` share a representative."""
        return self.find() is other.find()


def singleton(data: Optional[T] = None) -> Element[T]:
    """Creates a new one-element set.

    Parameters
    ----------
    data : object (optional, default: ``None``)
        The payload stored on the new element.

    Returns
    -------
    :class:`.Element`
        An element that is its own representative and has rank zero.
    """
    return Element(data)


def find(e):
    """Returns the representative of the set containing ``e``.

    See :meth:`.Element.find`.
    """
    return e.find()


def union(a, b):
    """Merges the sets containing ``a`` and ``b``.

    See :meth:`.Element.union`.
    """
    a.union(b)


def same_set(a, b):
    """Returns ``True`` if ``a`` and ``b`` belong to the same set."""
    return a.find() is b.find()
