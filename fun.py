"""
Eager combinators over ordered collections.

Every combinator takes plain one-argument callables. The ones that need two
inputs (zipwith, foldl, foldr) pack them into a Tuple2 and pass that instead:

    >>> foldl(0, [1, 2, 3], lambda t: t.b + t.a)
    6

Results are always new lists, inputs are never modified.
map, filter, all and any shadow the builtins here, so use them as fun.map etc.
"""
import builtins
import functools
import logging
import operator
import unittest
from typing import Callable, TypeVar

from tuples import Tuple0, Tuple2, Tuple3, show

log = logging.getLogger(__name__)

# sentinel
_none = object()

X = TypeVar("X")
Y = TypeVar("Y")
Z = TypeVar("Z")
A = TypeVar("A")

# y = f(x)
Function = Callable[[X], Y]
Predicate = Callable[[X], bool]
StringConverter = Callable[[X], str]


class Doxception(Exception):
    """
    Doxception prepends its docstring to its output.
    """

    def __init__(self, *args):
        super().__init__(" ".join((self.__doc__, *args)))


class InvalidArgument(Doxception, ValueError):
    """invalid argument:"""


class NoVerdict(InvalidArgument):
    """predicate returned None instead of a bool for"""


class ZeroStep(InvalidArgument):
    """step must not be zero in"""


# same text a tuple field renders as
object_to_string: StringConverter = show


def _holds(f, x):
    verdict = f(x)
    if verdict is None:
        log.error(f"predicate {getattr(f, '__name__', f)!r} gave no verdict for {x!r}")
        raise NoVerdict(repr(x))
    return bool(verdict)


def map(collection, f: Function):
    """[a1, a2, ...] -> [f(a1), f(a2), ...]"""
    return [f(x) for x in collection]


def filter(collection, f: Predicate):
    """Elements of collection for which f holds, in their original order."""
    return [x for x in collection if _holds(f, x)]


def zipwith(collection1, collection2, f: Function):
    """
    [a1, a2, ...], [b1, b2, ...] -> [f((a1, b1)), f((a2, b2)), ...]

    Pairs are passed to f as a Tuple2. Stops at the end of the shorter collection.
    collection1 is only advanced once collection2 has produced its element.
    """
    result = []
    i1 = iter(collection1)
    for y in collection2:
        x = next(i1, _none)
        if x is _none:
            break
        result.append(f(Tuple2(x, y)))
    return result


def seq(start, end, step=1):
    """
    start, start + step, ... up to and including end.

    start > end and negative steps give an empty list.
    """
    start, end, step = operator.index(start), operator.index(end), operator.index(step)
    if step == 0:
        log.error(f"refusing to count from {start} to {end} by zero")
        raise ZeroStep(f"seq({start}, {end}, {step})")
    if step < 0:
        return []
    return list(range(start, end + 1, step))


def takewhile(collection, f: Predicate):
    """Leading elements of collection, up to the first one where f fails."""
    result = []
    for x in collection:
        if not _holds(f, x):
            break
        result.append(x)
    return result


def all(collection, f: Predicate):
    """True if f holds for every element. Vacuously true when empty."""
    for x in collection:
        if not _holds(f, x):
            return False
    return True


def any(collection, f: Predicate):
    """True if f holds for at least one element."""
    for x in collection:
        if _holds(f, x):
            return True
    return False


def foldl(accumulator, collection, f: Function):
    """
    Reduce collection from the left.

    For each element x in order, accumulator = f(Tuple2(x, accumulator)).
    """
    for x in collection:
        accumulator = f(Tuple2(x, accumulator))
    return accumulator


def foldr(accumulator, collection, f: Function):
    """
    Reduce collection from the right.

    f is still given Tuple2(element, accumulator), only the traversal order is reversed.
    """
    return foldl(accumulator, reversed(list(collection)), f)


def spread(f):
    """Call a many-argument f with the fields of the packed tuple it is given."""

    @functools.wraps(f)
    def spread_f(packed):
        return f(*packed)

    return spread_f


def compose(*functions):
    """compose(f, g)(x) == f(g(x))"""
    return lambda obj: foldr(obj, functions, lambda t: t.a(t.b))


class Cases:
    """shared inputs, including a one-shot iterator"""

    def setUp(self):
        self.empty = []
        self.one = [7]
        self.five = [1, 2, 3, 4, 5]
        self.chain = iter(self.five)


def is_even(x):
    return x % 2 == 0


def concat(t):
    return t.b + t.a


class Calls(list):
    """A function value that remembers what it was called with."""

    def __init__(self, f):
        super().__init__()
        self.f = f

    def __call__(self, x):
        self.append(x)
        return self.f(x)


class TestMap(Cases, unittest.TestCase):
    def test_empty(self):
        self.assertEqual(map(self.empty, str), [])

    def test_one(self):
        self.assertEqual(map(self.one, str), ["7"])

    def test_five(self):
        f = lambda x: x * 10
        result = map(self.five, f)
        self.assertEqual(len(result), len(self.five))
        for i, x in enumerate(self.five):
            self.assertEqual(result[i], f(x))

    def test_chain(self):
        self.assertEqual(map(self.chain, lambda x: -x), [-1, -2, -3, -4, -5])

    def test_does_not_mutate(self):
        map(self.five, lambda x: x + 1)
        self.assertEqual(self.five, [1, 2, 3, 4, 5])

    def test_object_to_string(self):
        self.assertEqual(map([1, "x", None, True, Tuple2(1, False)], object_to_string),
                         ["1", "x", "null", "true", "(1, false)"])

    def test_idempotent(self):
        self.assertEqual(map(self.five, str), map(self.five, str))


class TestFilter(Cases, unittest.TestCase):
    def test_empty(self):
        self.assertEqual(filter(self.empty, is_even), [])

    def test_one(self):
        self.assertEqual(filter(self.one, is_even), [])
        self.assertEqual(filter(self.one, lambda x: x == 7), [7])

    def test_five(self):
        result = filter(self.five, is_even)
        self.assertEqual(result, [2, 4])
        self.assertTrue(builtins.all(is_even(x) for x in result))
        self.assertLessEqual(len(result), len(self.five))

    def test_chain(self):
        self.assertEqual(filter(self.chain, lambda x: x > 2), [3, 4, 5])

    def test_all_false(self):
        self.assertEqual(filter(self.five, lambda x: False), [])

    def test_called_once_per_element(self):
        f = Calls(is_even)
        filter(self.five, f)
        self.assertEqual(f, self.five)

    def test_truthy_verdicts(self):
        self.assertEqual(filter(self.five, lambda x: x % 2), [1, 3, 5])

    def test_no_verdict(self):
        with self.assertLogs("fun", "ERROR") as cm, self.assertRaises(NoVerdict) as e:
            filter(self.five, lambda x: None)
        self.assertIsInstance(e.exception, ValueError)
        self.assertEqual(str(e.exception), "predicate returned None instead of a bool for 1")
        self.assertEqual(len(cm.output), 1)
        self.assertTrue(cm.output[0].startswith("ERROR:fun:"))
        self.assertTrue(cm.output[0].endswith("gave no verdict for 1"))


class TestZipwith(Cases, unittest.TestCase):
    def test_empty(self):
        self.assertEqual(zipwith(self.empty, self.five, str), [])
        self.assertEqual(zipwith(self.five, self.empty, str), [])

    def test_one(self):
        self.assertEqual(zipwith(self.one, self.five, str), ["(7, 1)"])

    def test_five(self):
        other = ["a", "b", "c", "d", "e"]
        result = zipwith(self.five, other, spread(lambda x, y: y * x))
        self.assertEqual(result, ["a", "bb", "ccc", "dddd", "eeeee"])

    def test_chain(self):
        self.assertEqual(zipwith(self.chain, self.chain, spread(operator.add)), [3, 7])

    def test_packs_a_tuple2(self):
        f = Calls(lambda t: t)
        zipwith([1, 2], "xy", f)
        self.assertEqual(f, [Tuple2(1, "x"), Tuple2(2, "y")])
        self.assertTrue(builtins.all(type(t) is Tuple2 for t in f))

    def test_first_iterator_not_overdrawn(self):
        first = iter([1, 2, 3])
        self.assertEqual(zipwith(first, [9], spread(operator.add)), [10])
        self.assertEqual(list(first), [2, 3])

        first = iter([1, 2, 3])
        self.assertEqual(zipwith(first, [], str), [])
        self.assertEqual(list(first), [1, 2, 3])

    def test_shorter_wins(self):
        for s1, s2 in (([1, 2, 3], [1]), ([1], [1, 2, 3]), ([], []), ([1, 2], [3, 4])):
            result = zipwith(s1, s2, spread(operator.mul))
            self.assertEqual(len(result), min(len(s1), len(s2)))
            for i, r in enumerate(result):
                self.assertEqual(r, s1[i] * s2[i])


class TestSeq(unittest.TestCase):
    def test_inclusive(self):
        self.assertEqual(seq(1, 5), [1, 2, 3, 4, 5])
        self.assertEqual(seq(3, 3), [3])
        self.assertEqual(seq(-2, 1), [-2, -1, 0, 1])

    def test_backwards_is_empty(self):
        self.assertEqual(seq(5, 1), [])

    def test_step(self):
        self.assertEqual(seq(0, 10, 3), [0, 3, 6, 9])
        self.assertEqual(seq(0, 9, 3), [0, 3, 6, 9])
        self.assertEqual(seq(0, 10, 20), [0])
        self.assertEqual(seq(5, 1, 2), [])

    def test_negative_step(self):
        self.assertEqual(seq(1, 5, -1), [])
        self.assertEqual(seq(5, 1, -1), [])

    def test_zero_step(self):
        with self.assertLogs("fun", "ERROR") as cm, self.assertRaises(ZeroStep) as e:
            seq(1, 5, 0)
        self.assertIsInstance(e.exception, InvalidArgument)
        self.assertEqual(str(e.exception), "step must not be zero in seq(1, 5, 0)")
        self.assertEqual(cm.output, ["ERROR:fun:refusing to count from 1 to 5 by zero"])

    def test_integers_only(self):
        with self.assertRaises(TypeError):
            seq(1.5, 3)
        with self.assertRaises(TypeError):
            seq(1, 3, 0.5)


class TestTakewhile(Cases, unittest.TestCase):
    def test_empty(self):
        self.assertEqual(takewhile(self.empty, is_even), [])

    def test_one(self):
        self.assertEqual(takewhile(self.one, is_even), [])
        self.assertEqual(takewhile(self.one, lambda x: x > 0), [7])

    def test_five(self):
        self.assertEqual(takewhile(self.five, lambda x: x < 4), [1, 2, 3])

    def test_chain(self):
        self.assertEqual(takewhile(self.chain, lambda x: x < 3), [1, 2])
        # the first failing element was consumed
        self.assertEqual(list(self.chain), [4, 5])

    def test_does_not_resume(self):
        self.assertEqual(takewhile([2, 4, 6, 7, 8], is_even), [2, 4, 6])

    def test_short_circuits(self):
        f = Calls(is_even)
        takewhile([2, 4, 6, 7, 8], f)
        self.assertEqual(f, [2, 4, 6, 7])

    def test_no_verdict(self):
        with self.assertRaises(NoVerdict):
            takewhile(self.five, lambda x: None)


class TestAll(Cases, unittest.TestCase):
    def test_empty(self):
        self.assertIs(all(self.empty, lambda x: False), True)

    def test_one(self):
        self.assertIs(all(self.one, is_even), False)
        self.assertIs(all(self.one, lambda x: x == 7), True)

    def test_five(self):
        self.assertIs(all(self.five, lambda x: x > 0), True)
        self.assertIs(all(self.five, lambda x: x < 5), False)

    def test_chain(self):
        self.assertIs(all(self.chain, lambda x: x > 0), True)

    def test_short_circuits(self):
        f = Calls(lambda x: x < 2)
        self.assertIs(all(self.five, f), False)
        self.assertEqual(f, [1, 2])

    def test_no_verdict(self):
        with self.assertRaises(NoVerdict):
            all(self.five, lambda x: None)


class TestAny(Cases, unittest.TestCase):
    def test_empty(self):
        self.assertIs(any(self.empty, lambda x: True), False)

    def test_one(self):
        self.assertIs(any(self.one, is_even), False)
        self.assertIs(any(self.one, lambda x: x == 7), True)

    def test_five(self):
        self.assertIs(any(self.five, is_even), True)
        self.assertIs(any(self.five, lambda x: x > 5), False)

    def test_chain(self):
        self.assertIs(any(self.chain, lambda x: x == 5), True)

    def test_short_circuits(self):
        f = Calls(is_even)
        self.assertIs(any(self.five, f), True)
        self.assertEqual(f, [1, 2])

    def test_no_verdict(self):
        with self.assertRaises(NoVerdict):
            any(self.five, lambda x: None)


class TestFolds(Cases, unittest.TestCase):
    def test_empty(self):
        self.assertEqual(foldl("init", self.empty, concat), "init")
        self.assertEqual(foldr("init", self.empty, concat), "init")

    def test_one(self):
        self.assertEqual(foldl(1, self.one, spread(operator.add)), 8)
        self.assertEqual(foldr(1, self.one, spread(operator.add)), 8)

    def test_five(self):
        self.assertEqual(foldl(0, [1, 2, 3], spread(operator.add)), 6)
        self.assertEqual(foldr(0, [1, 2, 3], spread(operator.add)), 6)
        self.assertEqual(foldl(0, self.five, spread(operator.add)), 15)

    def test_chain(self):
        self.assertEqual(foldr("", iter("abc"), concat), "cba")

    def test_traversal_order(self):
        self.assertEqual(foldl("", ["a", "b", "c"], concat), "abc")
        self.assertEqual(foldr("", ["a", "b", "c"], concat), "cba")

    def test_packing_order(self):
        f = Calls(lambda t: t.b + 1)
        foldl(0, "xy", f)
        self.assertEqual(f, [Tuple2("x", 0), Tuple2("y", 1)])

        f = Calls(lambda t: t.b + 1)
        foldr(0, "xy", f)
        self.assertEqual(f, [Tuple2("y", 0), Tuple2("x", 1)])

    def test_does_not_mutate(self):
        foldr(0, self.five, spread(operator.add))
        self.assertEqual(self.five, [1, 2, 3, 4, 5])


class TestHelpers(unittest.TestCase):
    def test_spread(self):
        self.assertEqual(spread(operator.sub)(Tuple2(5, 3)), 2)
        self.assertEqual(spread(lambda: "nothing")(Tuple0()), "nothing")
        self.assertEqual(spread(lambda a, b, c: a + b + c)(Tuple3(1, 2, 3)), 6)

    def test_spread_keeps_name(self):
        self.assertEqual(spread(is_even).__name__, "is_even")

    def test_compose(self):
        inc = lambda x: x + 1
        double = lambda x: x * 2
        self.assertEqual(compose(inc, double)(5), 11)
        self.assertEqual(compose(double, inc)(5), 12)
        self.assertEqual(compose()(5), 5)
        self.assertEqual(map([1, 2], compose(str, inc)), ["2", "3"])


if __name__ == '__main__':
    unittest.main()
