import re
import suite
from collections import namedtuple
from dgen import from_schema
from linqy import Q, from_range, empty

test = suite.test
assert_that = suite.assert_that

# test data schemas
person_schema = {
    'id': ('pyint', {'min_value': 1, 'max_value': 100}),
    'name': 'word',
    'age': ('pyint', {'min_value': 18, 'max_value': 65}),
    'department': {'_qen_provider': 'choice', 'from': ['eng', 'sales', 'hr', 'marketing']},
}

Person = namedtuple('Person', ['name', 'age'])

# helper data
numbers = Q(list(range(1, 11)))  # 1 through 10
words = Q(['apple', 'banana', 'cherry', 'date', 'elderberry'])


# where() tests

@test("where filters elements correctly")
def test_where_basic():
    assert_that(Q([1, 2, 3, 4, 5]).where(lambda n: n > 2) == [3, 4, 5], "should keep numbers above 2")
    evens = numbers.where(lambda x: x % 2 == 0)
    assert_that(evens == [2, 4, 6, 8, 10], "should filter even numbers")


@test("where returns a plain list")
def test_where_returns_list():
    assert_that(isinstance(numbers.where(lambda x: True), list), "eager operators return lists")


@test("where keeps a partition of the input")
def test_where_partition():
    people = from_schema(person_schema, seed=42).records(30)
    pred = lambda p: p['department'] == 'eng' and p['age'] > 40
    kept = Q(people).where(pred)

    assert_that(all(pred(p) for p in kept), "every kept element satisfies the predicate")
    dropped = [p for p in people if not any(p is k for k in kept)]
    assert_that(not any(pred(p) for p in dropped), "every dropped element fails the predicate")
    positions = [next(i for i, p in enumerate(people) if p is k) for k in kept]
    assert_that(positions == sorted(positions), "kept elements keep their relative order")


@test("where handles empty result and empty input")
def test_where_empty():
    assert_that(numbers.where(lambda x: x > 100) == [], "should return empty list for no matches")
    assert_that(empty().where(lambda x: True) == [], "empty input gives empty output")


@test("where with regex pattern")
def test_where_regex():
    text_data = Q(['apple123', 'banana', 'cherry456', 'date', '789elderberry'])
    with_numbers = text_data.where(lambda x: bool(re.search(r'\d', x)))
    assert_that(with_numbers == ['apple123', 'cherry456', '789elderberry'], "should find the 3 items with digits")


# select() tests

@test("select transforms elements")
def test_select_basic():
    assert_that(Q([1, 2, 3]).select(lambda n: n * 2) == [2, 4, 6], "should double each number")
    squares = numbers.select(lambda x: x * x)
    assert_that(squares == [1, 4, 9, 16, 25, 36, 49, 64, 81, 100], "should square all numbers")


@test("select keeps length and position")
def test_select_positions():
    people = from_schema(person_schema, seed=123).records(12)
    names = Q(people).select(lambda p: p['name'])
    assert_that(len(names) == len(people), "should produce one value per element")
    for i, person in enumerate(people):
        assert_that(names[i] == person['name'], f"element {i} should be projected in place")


@test("select visits elements in sequence order")
def test_select_visit_order():
    seen = []
    Q(['c', 'a', 'b']).select(seen.append)
    assert_that(seen == ['c', 'a', 'b'], "selector should see elements in order")


@test("select on empty input")
def test_select_empty():
    assert_that(empty().select(lambda x: x * 2) == [], "empty input gives empty output")


# order_by() tests

@test("order_by sorts ascending by key")
def test_order_by_basic():
    items = [{'age': 30}, {'age': 20}, {'age': 25}]
    result = Q(items).order_by(lambda item: item['age'])
    assert_that(result == [{'age': 20}, {'age': 25}, {'age': 30}], f"ascending order expected: {result}")


@test("order_by is stable for equal keys")
def test_order_by_stable():
    people = [Person('alice', 25), Person('bob', 30), Person('charlie', 25), Person('diana', 30)]
    result = Q(people).order_by(lambda p: p.age)
    assert_that([p.name for p in result] == ['alice', 'charlie', 'bob', 'diana'],
                "ties should keep input order")


@test("order_by_descending sorts descending by key")
def test_order_by_descending_basic():
    items = [{'age': 30}, {'age': 20}, {'age': 25}]
    result = Q(items).order_by_descending(lambda item: item['age'])
    assert_that(result == [{'age': 30}, {'age': 25}, {'age': 20}], f"descending order expected: {result}")


@test("order_by_descending is stable for equal keys")
def test_order_by_descending_stable():
    people = [Person('alice', 25), Person('bob', 30), Person('charlie', 25), Person('diana', 30)]
    result = Q(people).order_by_descending(lambda p: p.age)
    assert_that([p.name for p in result] == ['bob', 'diana', 'alice', 'charlie'],
                "ties should keep input order when descending too")


@test("order_by and order_by_descending reverse each other's key order")
def test_order_directions_mirror():
    people = from_schema(person_schema, seed=7).take(25)
    asc = [p['age'] for p in people.order_by(lambda p: p['age'])]
    desc = [p['age'] for p in people.order_by_descending(lambda p: p['age'])]
    assert_that(asc == list(reversed(desc)), "primary key orders should mirror")
    assert_that(asc == sorted(asc), "ascending keys should be non-decreasing")


@test("ordering sorts a copy and leaves the source untouched")
def test_order_by_does_not_mutate():
    source = [3, 1, 2]
    q = Q(source)
    result = q.order_by(lambda x: x)
    assert_that(result == [1, 2, 3], "result should be sorted")
    assert_that(source == [3, 1, 2], "source list must not be reordered")
    assert_that(result is not source, "result must be a new list")
    q.order_by_descending(lambda x: x)
    assert_that(source == [3, 1, 2], "descending sort must not reorder the source either")


@test("ordering handles empty and string keys")
def test_order_by_edges():
    assert_that(empty().order_by(lambda x: x) == [], "empty input gives empty output")
    assert_that(words.order_by(len)[0] == 'date', "shortest word first")
    assert_that(from_range(1, 5).order_by_descending(lambda x: x) == [5, 4, 3, 2, 1], "range reversed")


if __name__ == "__main__":
    suite.run(title="linqy core operations test suite")
