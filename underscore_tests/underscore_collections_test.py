import suite
from array import array
from collections import deque

import numpy as np
import pandas as pd

import underscore as us
from underscore import EmptySequenceError, UnsupportedContainerError

test = suite.test
assert_that = suite.assert_that
raises = suite.raises

# helper data
numbers = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]
words = ['apple', 'banana', 'cherry', 'date', 'elderberry']


class Sealed:
    def __iter__(self):
        return iter([])


# each() tests

@test("each visits every element in order")
def test_each_basic():
    seen = []
    result = us.each([3, 1, 2], seen.append)
    assert_that(seen == [3, 1, 2], f"should visit in order: {seen}")
    assert_that(result is None, "each returns nothing")


@test("each on empty container is a no-op")
def test_each_empty():
    seen = []
    us.each([], seen.append)
    assert_that(seen == [], "nothing should be visited")


# map() tests

@test("map transforms elements into a list by default")
def test_map_basic():
    squares = us.map(numbers, lambda x: x * x)
    assert_that(squares == [1, 4, 9, 16, 25, 36, 49, 64, 81, 100], f"should square all numbers: {squares}")


@test("map builds the requested container kind")
def test_map_into_kinds():
    assert_that(us.map([1, 2, 2, 3], lambda x: x % 2, into=set) == {0, 1}, "set result")
    assert_that(us.map([1, 2], str, into=tuple) == ('1', '2'), "tuple result")
    assert_that(us.map('abc', str.upper, into=str) == 'ABC', "str result")
    assert_that(us.map(words[:2], lambda w: (w, len(w)), into=dict) == {'apple': 5, 'banana': 6}, "dict result")

    arr = us.map([1, 2, 3], lambda x: x / 2, into=np.ndarray)
    assert_that(arr.tolist() == [0.5, 1.0, 1.5], f"ndarray result: {arr}")


@test("map over a set and a generator")
def test_map_other_sources():
    assert_that(sorted(us.map({1, 2, 3}, lambda x: -x)) == [-3, -2, -1], "set source")
    assert_that(us.map((x for x in range(3)), lambda x: x + 1) == [1, 2, 3], "generator source")


@test("map on empty container gives an empty result")
def test_map_empty():
    assert_that(us.map([], lambda x: x) == [], "empty list")
    assert_that(us.map([], lambda x: x, into=set) == set(), "empty set")


@test("map never calls the function for an unsupported result kind")
def test_map_unsupported_kind():
    calls = []
    with raises(UnsupportedContainerError, "Sealed"):
        us.map([1, 2], calls.append, into=Sealed)
    assert_that(calls == [], "function should not run")


@test("map does not mutate the input")
def test_map_no_mutation():
    source = [1, 2, 3]
    us.map(source, lambda x: x * 2)
    assert_that(source == [1, 2, 3], "source must be untouched")


# reduce() / reduce_right() tests

@test("reduce folds left to right")
def test_reduce_basic():
    total = us.reduce(numbers, lambda memo, x: memo + x, 0)
    assert_that(total == 55, f"sum should be 55: {total}")

    joined = us.reduce(['a', 'b', 'c'], lambda memo, x: memo + x, '')
    assert_that(joined == 'abc', f"left fold concatenation: {joined}")


@test("reduce returns the memo untouched for empty input")
def test_reduce_empty():
    memo = {'untouched': True}
    assert_that(us.reduce([], lambda m, x: None, memo) is memo, "memo should come back as is")
    assert_that(us.reduce_right([], lambda m, x: None, 7) == 7, "reduce_right too")


@test("reduce_right folds right to left")
def test_reduce_right_basic():
    joined = us.reduce_right(['a', 'b', 'c'], lambda memo, x: memo + x, '')
    assert_that(joined == 'cba', f"right fold concatenation: {joined}")


@test("reduce_right works on non-reversible sources")
def test_reduce_right_non_reversible():
    joined = us.reduce_right((str(x) for x in range(4)), lambda m, x: m + x, '')
    assert_that(joined == '3210', f"generator source: {joined}")

    arr_sum = us.reduce_right(np.array([1, 2, 3]), lambda m, x: m * 10 + int(x), 0)
    assert_that(arr_sum == 321, f"ndarray source: {arr_sum}")

    total = us.reduce_right({1, 2, 3}, lambda m, x: m + x, 0)
    assert_that(total == 6, "set source with a commutative op")


# find() / detect() tests

@test("find returns the position of the first match")
def test_find_basic():
    assert_that(us.find(numbers, lambda x: x > 4) == 4, "5 sits at position 4")
    assert_that(us.find(words, lambda w: w.startswith('c')) == 2, "cherry at 2")


@test("find returns the end position when nothing matches")
def test_find_no_match():
    assert_that(us.find(numbers, lambda x: x > 100) == len(numbers), "end marker is the size")
    assert_that(us.find([], lambda x: True) == 0, "empty input: end is 0")


@test("detect returns the element or a default")
def test_detect():
    assert_that(us.detect(words, lambda w: len(w) == 4) == 'date', "first 4-letter word")
    assert_that(us.detect(words, lambda w: len(w) > 50) is None, "default is None")
    assert_that(us.detect(words, lambda w: False, 'none') == 'none', "explicit default")


# filter() / reject() tests

@test("filter keeps matching elements in order")
def test_filter_basic():
    evens = us.filter(numbers, lambda x: x % 2 == 0)
    assert_that(evens == [2, 4, 6, 8, 10], f"should filter even numbers: {evens}")


@test("filter rebuilds the input's container kind")
def test_filter_same_kind():
    assert_that(us.filter((1, 2, 3), lambda x: x > 1) == (2, 3), "tuple stays tuple")
    assert_that(us.filter({1, 2, 3}, lambda x: x > 1) == {2, 3}, "set stays set")
    assert_that(us.filter('hello', lambda c: c != 'l') == 'heo', "str stays str")
    assert_that(us.filter(deque([1, 2, 3]), lambda x: x != 2) == deque([1, 3]), "deque stays deque")


@test("filter falls back to a list for sources it can't rebuild")
def test_filter_fallback_list():
    assert_that(us.filter(range(6), lambda x: x % 3 == 0) == [0, 3], "range becomes list")
    assert_that(us.filter((x for x in 'abc'), lambda c: c > 'a') == ['b', 'c'], "generator becomes list")
    assert_that(us.filter({'a': 1, 'b': 2}, lambda k: k == 'b') == ['b'], "mapping keys become list")


@test("filter and reject partition a data frame's columns")
def test_filter_data_frame():
    frame = pd.DataFrame({'a': [1, 2, 3], 'b': [4, 5, 6]})
    kept = us.filter(frame, lambda column: True)
    assert_that(kept == ['a', 'b'], f"column labels come back as a list: {kept}")
    assert_that(us.size(kept) == us.size(frame), "always true keeps every column")
    assert_that(us.reject(frame, lambda column: column == 'a') == ['b'], "reject drops column a")


@test("map into a data frame builds rows")
def test_map_into_data_frame():
    frame = us.map([('a', 1), ('b', 2)], lambda pair: pair, into=pd.DataFrame)
    assert_that(isinstance(frame, pd.DataFrame), "frame result")
    assert_that(len(frame) == 2, f"one row per value: {len(frame)}")


@test("filter, reject and sort_by rebuild array.array with its typecode")
def test_array_array_rebuilt():
    codes = array('i', [3, 1, 2])
    kept = us.filter(codes, lambda x: x > 1)
    assert_that(kept == array('i', [3, 2]), f"filter: {kept}")
    assert_that(us.reject(codes, lambda x: x > 1) == array('i', [1]), "reject")

    ordered = us.sort_by(codes)
    assert_that(ordered.typecode == 'i', "sort_by keeps the typecode")
    assert_that(ordered.tolist() == [1, 2, 3], f"sort_by: {ordered}")


@test("filtering numpy and pandas inputs keeps the element type")
def test_filter_keeps_dtype():
    ints = np.array([1, 2, 3])
    nothing = us.filter(ints, lambda x: False)
    assert_that(isinstance(nothing, np.ndarray), "still an ndarray")
    assert_that(nothing.dtype == ints.dtype, f"empty result keeps {ints.dtype}: {nothing.dtype}")
    assert_that(us.reject(ints, lambda x: x < 3).dtype == ints.dtype, "reject keeps dtype")
    assert_that(us.sort_by(np.array([3, 1], dtype=np.int16)).dtype == np.int16, "sort_by keeps dtype")

    series = us.filter(pd.Series([1, 2, 3], dtype='int64'), lambda x: x > 5)
    assert_that(series.dtype == 'int64', f"empty series keeps int64: {series.dtype}")

    index = us.filter(pd.RangeIndex(5), lambda x: x % 2 == 0)
    assert_that(isinstance(index, pd.Index), f"index stays an index: {type(index)}")
    assert_that(index.tolist() == [0, 2, 4], f"index values: {index.tolist()}")


@test("filter into an explicit kind")
def test_filter_into():
    assert_that(us.filter([3, 1, 3], lambda x: x > 0, into=set) == {1, 3}, "into set")


@test("reject is the complement of filter")
def test_reject_basic():
    odds = us.reject(numbers, lambda x: x % 2 == 0)
    assert_that(odds == [1, 3, 5, 7, 9], f"should drop even numbers: {odds}")
    assert_that(us.reject('hello', lambda c: c == 'l') == 'heo', "str reject")


# all() / any() tests

@test("all and any check predicates")
def test_all_any_basic():
    assert_that(us.all(numbers, lambda x: x > 0), "all positive")
    assert_that(not us.all(numbers, lambda x: x > 1), "not all above one")
    assert_that(us.any(numbers, lambda x: x == 10), "contains ten")
    assert_that(not us.any(numbers, lambda x: x > 10), "nothing above ten")


@test("all and any are vacuous on empty input")
def test_all_any_empty():
    assert_that(us.all([], lambda x: False) is True, "all of nothing is true")
    assert_that(us.any([], lambda x: True) is False, "any of nothing is false")


@test("all and any default to truthiness")
def test_all_any_truthiness():
    assert_that(us.all([1, 'a', [0]]), "all truthy")
    assert_that(not us.all([1, 0]), "zero is falsy")
    assert_that(us.any([0, '', None, 3]), "one truthy value")


@test("any stops at the first match")
def test_any_short_circuits():
    seen = []

    def is_two(x):
        seen.append(x)
        return x == 2

    us.any([1, 2, 3, 4], is_two)
    assert_that(seen == [1, 2], f"should stop after the match: {seen}")


# include() tests

@test("include checks element membership")
def test_include_basic():
    assert_that(us.include([1, 2, 3], 2), "2 is included")
    assert_that(not us.include([1, 2, 3], 5), "5 is not included")
    assert_that(not us.include([], 1), "empty includes nothing")


@test("include on strings, sets and mappings")
def test_include_kinds():
    assert_that(us.include('abc', 'b'), "character member")
    assert_that(not us.include('abc', 'bc'), "substrings are not elements")
    assert_that(us.include({1, 2}, 2), "set member")
    assert_that(not us.include({1, 2}, [1]), "unhashable value is never a set member")
    assert_that(us.include({'k': 1}, 'k'), "mapping key")


# max() / min() tests

@test("max and min return positions")
def test_max_min_basic():
    assert_that(us.max([3, 1, 2]) == 0, "max 3 at 0")
    assert_that(us.min([3, 1, 2]) == 1, "min 1 at 1")


@test("max and min pick the first of equal elements")
def test_max_min_ties():
    assert_that(us.max([1, 5, 5, 2]) == 1, "first max")
    assert_that(us.min([4, 0, 9, 0]) == 1, "first min")


@test("max and min accept a key")
def test_max_min_key():
    assert_that(us.max(words, key=len) == 4, "elderberry is longest")
    assert_that(us.min(words, key=len) == 3, "date is shortest")


@test("max and min refuse empty input")
def test_max_min_empty():
    with raises(EmptySequenceError, "no elements"):
        us.max([])
    with raises(ValueError, "min()"):
        us.min(iter([]))


# sort_by() tests

@test("sort_by sorts ascending")
def test_sort_by_basic():
    assert_that(us.sort_by([3, 1, 2]) == [1, 2, 3], "plain ascending")
    assert_that(us.sort_by(words, key=len)[0] == 'date', "shortest first")
    assert_that(us.sort_by([3, 1, 2], reverse=True) == [3, 2, 1], "reversed")


@test("sort_by with a compare function")
def test_sort_by_compare():
    by_last_char = us.sort_by(['ab', 'ca', 'bc'], compare=lambda a, b: (a[-1] > b[-1]) - (a[-1] < b[-1]))
    assert_that(by_last_char == ['ca', 'ab', 'bc'], f"compare by last char: {by_last_char}")


@test("sort_by keeps the container kind and is stable")
def test_sort_by_kind_stable():
    assert_that(us.sort_by((3, 1, 2)) == (1, 2, 3), "tuple stays tuple")
    assert_that(us.sort_by('cab') == 'abc', "str stays str")

    pairs = [('b', 1), ('a', 1), ('c', 0)]
    ordered = us.sort_by(pairs, key=lambda p: p[1])
    assert_that(ordered == [('c', 0), ('b', 1), ('a', 1)], f"ties keep input order: {ordered}")


@test("sort_by rejects key and compare together")
def test_sort_by_key_and_compare():
    with raises(ValueError, "either key or compare"):
        us.sort_by([1], key=abs, compare=lambda a, b: 0)


# to_array() / size() tests

@test("to_array returns a fresh list")
def test_to_array():
    source = [1, 2, 3]
    copy = us.to_array(source)
    copy.append(4)
    assert_that(source == [1, 2, 3], "source untouched")
    assert_that(us.to_array('ab') == ['a', 'b'], "str to list")
    assert_that(us.to_array(x for x in range(2)) == [0, 1], "generator to list")


@test("size counts elements of any iterable")
def test_size():
    assert_that(us.size(numbers) == 10, "list size")
    assert_that(us.size(set()) == 0, "empty set")
    assert_that(us.size(x for x in range(7)) == 7, "generator counted")


if __name__ == "__main__":
    suite.run(title="underscore collection functions test suite")
