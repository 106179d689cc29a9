"""
Fixed arity tuples, from Tuple0 up to Tuple10.

Every arity is its own record type built from the same factory, they don't extend each other.
Fields are named a, b, c... in constructor order, and are also reachable by index.

    >>> t = Tuple3(1, "x", True)
    >>> t.b, t[2]
    ('x', True)
    >>> str(t)
    '(1, x, true)'
"""
import collections
import pickle
import unittest

# closed set of field names, one per arity step
FIELDS = "abcdefghij"


def show(obj):
    """Canonical text of a single field."""
    if obj is None:
        return "null"
    if isinstance(obj, bool):
        return "true" if obj else "false"
    return str(obj)


def _render(self):
    return "(" + ", ".join(show(field) for field in self) + ")"


def tuple_type(n):
    """
    construct the immutable record type holding exactly n fields.

    the fields come from FIELDS, so n can't go past len(FIELDS)
    """
    if not 0 <= n <= len(FIELDS):
        raise ValueError(f"no tuple type of arity {n}")
    T = collections.namedtuple(f"Tuple{n}", tuple(FIELDS[:n]), module=__name__)
    T.__str__ = _render
    T.__doc__ = f"Immutable {n}-tuple." if n else "The empty tuple."
    return T


Tuple0 = tuple_type(0)
Tuple1 = tuple_type(1)
Tuple2 = tuple_type(2)
Tuple3 = tuple_type(3)
Tuple4 = tuple_type(4)
Tuple5 = tuple_type(5)
Tuple6 = tuple_type(6)
Tuple7 = tuple_type(7)
Tuple8 = tuple_type(8)
Tuple9 = tuple_type(9)
Tuple10 = tuple_type(10)

TUPLES = (Tuple0, Tuple1, Tuple2, Tuple3, Tuple4, Tuple5, Tuple6, Tuple7, Tuple8, Tuple9, Tuple10)


def tup(*values):
    """Build the tuple whose arity matches the number of values."""
    if len(values) >= len(TUPLES):
        raise TypeError(f"tup() takes at most {len(TUPLES) - 1} values ({len(values)} given)")
    return TUPLES[len(values)](*values)


class TestShow(unittest.TestCase):
    def test_scalars(self):
        self.assertEqual(show(1), "1")
        self.assertEqual(show("x"), "x")
        self.assertEqual(show(2.5), "2.5")

    def test_booleans_and_none(self):
        self.assertEqual(show(True), "true")
        self.assertEqual(show(False), "false")
        self.assertEqual(show(None), "null")

    def test_ints_are_not_booleans(self):
        self.assertEqual(show(1), "1")
        self.assertEqual(show(0), "0")


class TestTuples(unittest.TestCase):
    def setUp(self):
        self.values = ("zero", 1, 2.0, None, True, "five", 6, 7, (8,), [9])

    def test_rendering(self):
        self.assertEqual(str(Tuple0()), "()")
        self.assertEqual(str(Tuple1(1)), "(1)")
        self.assertEqual(str(Tuple2(1, "x")), "(1, x)")
        self.assertEqual(str(Tuple3(1, "x", True)), "(1, x, true)")
        self.assertEqual(str(Tuple4(1, 2, 3, 4)), "(1, 2, 3, 4)")
        self.assertEqual(
            str(Tuple10(*range(10))),
            "(0, 1, 2, 3, 4, 5, 6, 7, 8, 9)",
        )

    def test_rendering_every_arity(self):
        for n, T in enumerate(TUPLES):
            values = self.values[:n]
            self.assertEqual(str(T(*values)), "(" + ", ".join(map(show, values)) + ")")

    def test_nested(self):
        self.assertEqual(str(Tuple2(1, Tuple2(2, Tuple0()))), "(1, (2, ()))")
        self.assertEqual(str(Tuple1(None)), "(null)")

    def test_accessors(self):
        for n, T in enumerate(TUPLES):
            t = T(*self.values[:n])
            self.assertEqual(len(t), n)
            for k, name in enumerate(FIELDS[:n]):
                self.assertIs(getattr(t, name), self.values[k])
                self.assertIs(t[k], self.values[k])
            # nothing past the arity
            if n < len(FIELDS):
                self.assertFalse(hasattr(t, FIELDS[n]))
            with self.assertRaises(IndexError):
                t[n]

    def test_keywords(self):
        self.assertEqual(Tuple2(b="y", a="x"), Tuple2("x", "y"))

    def test_arity_is_fixed(self):
        with self.assertRaises(TypeError):
            Tuple2(1)
        with self.assertRaises(TypeError):
            Tuple2(1, 2, 3)
        with self.assertRaises(TypeError):
            Tuple0(1)

    def test_immutable(self):
        t = Tuple3(1, 2, 3)
        with self.assertRaises(AttributeError):
            t.a = 5
        with self.assertRaises(AttributeError):
            t.z = 5
        with self.assertRaises(TypeError):
            t[0] = 5
        self.assertEqual(t, (1, 2, 3))

    def test_no_inheritance_between_arities(self):
        for lower in TUPLES:
            for higher in TUPLES:
                if lower is not higher:
                    self.assertFalse(issubclass(higher, lower))

    def test_equality_and_hashing(self):
        self.assertEqual(Tuple2(1, "x"), Tuple2(1, "x"))
        self.assertNotEqual(Tuple2(1, "x"), Tuple2("x", 1))
        self.assertNotEqual(Tuple1(1), Tuple2(1, None))
        self.assertEqual(len({Tuple2(1, 2), Tuple2(1, 2), Tuple2(2, 1)}), 2)

    def test_repr(self):
        self.assertEqual(repr(Tuple2(1, "x")), "Tuple2(a=1, b='x')")
        self.assertEqual(repr(Tuple0()), "Tuple0()")

    def test_unpacking(self):
        a, b, c = Tuple3(1, 2, 3)
        self.assertEqual((a, b, c), (1, 2, 3))

    def test_pickle(self):
        t = Tuple3(1, "x", True)
        self.assertEqual(pickle.loads(pickle.dumps(t)), t)
        self.assertIs(type(pickle.loads(pickle.dumps(t))), Tuple3)

    def test_tuple_type_bounds(self):
        with self.assertRaises(ValueError):
            tuple_type(11)
        with self.assertRaises(ValueError):
            tuple_type(-1)


class TestTup(unittest.TestCase):
    def test_dispatch(self):
        self.assertIs(type(tup()), Tuple0)
        self.assertIs(type(tup(1, 2)), Tuple2)
        self.assertIs(type(tup(*range(10))), Tuple10)
        self.assertEqual(tup(1, "x", True).c, True)

    def test_too_many(self):
        with self.assertRaises(TypeError):
            tup(*range(11))


if __name__ == '__main__':
    unittest.main()
