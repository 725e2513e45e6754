import numpy as np
import pytest

import disjoint


def create_elements(n):
    return [disjoint.singleton() for k in range(n)]


def select_indexes(n):
    """Returns ``n`` pairs of indexes, each pairing ``k`` with a random
    index smaller than ``k``."""
    idxes = [(0, np.random.randint(n))]
    for k in range(1, n):
        idxes.append((k, np.random.randint(k)))
    return idxes


def fully_compress(elts):
    for e in elts:
        while not e.parent.is_root():
            e.find()


@pytest.fixture(scope="module", autouse=True)
def fixture_set_seed():
    np.random.seed(10)
    return


class TestElement:
    @staticmethod
    def test_singleton():
        e = disjoint.singleton('payload')
        assert e.parent is e
        assert e.rank == 0
        assert e.data == 'payload'
        assert e.is_root()
        assert e.find() is e
        assert disjoint.find(e) is e

    @staticmethod
    def test_default_payload():
        assert disjoint.Element().data is None
        assert disjoint.singleton().data is None

    @staticmethod
    def test_typed_payload():
        e = disjoint.Element[int](5)
        assert e.data == 5
        assert e.find() is e

    @staticmethod
    def test_find_is_stable():
        elts = create_elements(50)
        for a, b in select_indexes(50):
            disjoint.union(elts[a], elts[b])

        for e in elts:
            assert disjoint.find(e) is disjoint.find(e)
            assert e.find().is_root()

    @staticmethod
    def test_union_tie_and_rank():
        a, b = create_elements(2)
        a.union(b)
        root = a.find()
        assert root is b.find()
        assert root.rank == 1
        assert not (a.is_root() and b.is_root())

    @staticmethod
    def test_union_lower_rank_goes_below():
        a, b, c = create_elements(3)
        a.union(b)
        big = a.find()
        disjoint.union(c, a)
        assert c.find() is big
        assert big.rank == 1
        assert c.parent is big

        d, e, f = create_elements(3)
        d.union(e)
        big = d.find()
        disjoint.union(e, f)
        assert f.find() is big
        assert f.parent is big

    @staticmethod
    def test_find_path_halving():
        elts = create_elements(5)
        # Build the chain elts[0] -> elts[1] -> ... -> elts[4] by hand.
        for k in range(4):
            elts[k]._parent = elts[k + 1]

        assert elts[0].find() is elts[4]
        assert elts[0].parent is elts[2]
        assert elts[2].parent is elts[4]
        assert elts[1].parent is elts[2]
        assert elts[3].parent is elts[4]

    @staticmethod
    def test_same_set():
        a, b, c = create_elements(3)
        assert not disjoint.same_set(a, b)
        disjoint.union(a, b)
        assert disjoint.same_set(a, b)
        assert b.same_set(a)
        assert not c.same_set(a)

    @staticmethod
    def test_repr():
        e = disjoint.Element(7)
        assert 'root' in repr(e)
        assert '7' in repr(e)


class TestForestProperties:
    @staticmethod
    def test_co_membership():
        n = 60
        elts = create_elements(n)
        labels = list(range(n))

        for dummy in range(40):
            a, b = np.random.randint(n, size=2)
            disjoint.union(elts[a], elts[b])
            old, new = labels[b], labels[a]
            labels = [new if lab == old else lab for lab in labels]

        reps = [e.find() for e in elts]
        for i in range(n):
            for j in range(n):
                assert (reps[i] is reps[j]) == (labels[i] == labels[j])

    @staticmethod
    def test_partition_closure():
        n = 40
        elts = create_elements(n)
        for dummy in range(25):
            a, b = np.random.randint(n, size=2)
            elts[a].union(elts[b])

        same = np.array([[a.same_set(b) for b in elts] for a in elts])
        assert same.diagonal().all()
        assert (same == same.T).all()
        closure = np.dot(same.astype(int), same.astype(int)) > 0
        assert (closure == same).all()

    @staticmethod
    def test_union_idempotent():
        n = 100
        elts = create_elements(n)
        for a, b in select_indexes(n):
            elts[a].union(elts[b])
        # find() inside union() halves any path longer than one step.
        fully_compress(elts)

        before = [(e.parent, e.rank) for e in elts]
        for dummy in range(50):
            a, b = np.random.randint(n, size=2)
            assert elts[a].same_set(elts[b])
            elts[a].union(elts[b])
        after = [(e.parent, e.rank) for e in elts]

        for (p1, r1), (p2, r2) in zip(before, after):
            assert p1 is p2
            assert r1 == r2

    @staticmethod
    def test_rank_bound_random():
        n = 2048
        elts = create_elements(n)
        for a, b in select_indexes(n):
            disjoint.union(elts[a], elts[b])

        bound = int(np.floor(np.log2(n)))
        assert max(e.rank for e in elts if e.is_root()) <= bound

    @staticmethod
    def test_rank_bound_balanced():
        n = 1024
        elts = create_elements(n)
        step = 1
        while step < n:
            for k in range(0, n, 2 * step):
                disjoint.union(elts[k], elts[k + step])
            step *= 2

        root = elts[0].find()
        assert all(e.find() is root for e in elts)
        assert root.rank == 10

    @staticmethod
    def test_payload_preserved():
        elts = [disjoint.singleton(k) for k in range(30)]
        for a, b in select_indexes(30):
            disjoint.union(elts[a], elts[b])
        assert [e.data for e in elts] == list(range(30))


class TestScenarios:
    @staticmethod
    def test_even_odd():
        n = 1000
        elts = create_elements(n)
        for k in range(2, n, 2):
            disjoint.union(elts[k], elts[k - 2])
        for k in range(3, n, 2):
            disjoint.union(elts[k], elts[k - 2])

        reps = [e.find() for e in elts]
        assert reps[0] is not reps[1]
        for k in range(n):
            assert reps[k] is reps[k % 2]

        for dummy in range(3 * n):
            s1, s2 = np.random.randint(n, size=2)
            assert (s1 % 2 == s2 % 2) == elts[s1].same_set(elts[s2])

    @staticmethod
    def test_max_payload():
        elts = [disjoint.singleton((6 - k) * 100) for k in range(6)]

        def merge(e1, e2):
            vm = max(e1.data, e2.data)
            disjoint.union(e1, e2)
            e = e1.find()
            e.data = vm
            return e

        e1 = merge(merge(elts[1], elts[0]), elts[4])
        assert e1.data == 600

        e2 = merge(merge(elts[2], elts[3]), elts[5])
        assert e2.data == 400

        e12 = merge(e1, e2)
        assert e12.data == 600

    @staticmethod
    def test_repeated_union_is_noop():
        a, b = create_elements(2)
        a.union(b)
        state = (a.parent, a.rank, b.parent, b.rank)

        a.union(b)
        assert a.parent is state[0] and a.rank == state[1]
        assert b.parent is state[2] and b.rank == state[3]

        b.union(a)
        assert a.parent is state[0] and a.rank == state[1]
        assert b.parent is state[2] and b.rank == state[3]
