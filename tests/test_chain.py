import random

from sliceops.chain import Chain, of, of_split_string


def test_filter_not_result():
    names = (
        of(["Bob", "Sally", "John", "Jane"])
        .filter_not(lambda name: name.startswith("J"))
        .result
    )
    assert names == ["Bob", "Sally"]


def test_of_none_is_empty():
    assert of(None).result == []
    assert of(None).first() is None


def test_positional_operations():
    chain = of([1, 2, 3])
    assert chain.reverse().result == [3, 2, 1]
    assert chain.top(2).result == [1, 2]
    assert chain.bottom(2).result == [3, 2]
    assert chain.drop_top(1).result == [2, 3]
    assert chain.insert(1, 9).result == [1, 9, 2, 3]
    assert chain.unshift(0).result == [0, 1, 2, 3]
    assert chain.sub_slice(1, 4, 0).result == [2, 3, 0]
    assert chain.result == [1, 2, 3]


def test_element_access():
    chain = of([4, 5, 6])
    assert chain.first() == 4
    assert chain.last() == 6
    assert of([]).first_or(7) == 7
    assert of([]).last_or(8) == 8


def test_predicates():
    chain = of([1, 2, 3])
    assert chain.all_of(lambda v: v > 0) is True
    assert chain.any_of(lambda v: v > 2) is True
    assert chain.index_of(lambda v: v == 3) == 2
    assert chain.find(lambda v, i: i == 1) == 2


def test_map_filter_sort():
    chain = of([3, 1, 2])
    assert chain.map_items(lambda v, i: v * 10 + i).result == [30, 11, 22]
    assert chain.filter_items(lambda v: v != 1).result == [3, 2]
    assert chain.sort_using(lambda a, b: a < b).result == [1, 2, 3]


def test_each_visits_every_element():
    seen = []
    assert of([1, 2]).each(seen.append).result == [1, 2]
    assert seen == [1, 2]


def test_shuffle_keeps_elements():
    shuffled = of([5, 1, 4, 2]).shuffle(random.Random(0)).result
    assert sorted(shuffled) == [1, 2, 4, 5]


def test_sequence_using_replaces_elements():
    assert of(["x"]).sequence_using(lambda i: i * 2, 3).result == [0, 2, 4]


def test_send():
    received = []
    assert of([1, 2]).send(received.append).result == [1, 2]
    assert received == [1, 2]


def test_join():
    assert of(["a", "b", "c"]).join("-") == "a-b-c"
    assert of([1, 2]).join(",") == ""


def test_of_split_string():
    assert of_split_string("a,b,c", ",").result == ["a", "b", "c"]
    assert of_split_string("abc", "").result == ["a", "b", "c"]
    assert of_split_string("", ",").result == [""]


def test_chain_iteration_and_length():
    chain = Chain([1, 2, 3])
    assert list(chain) == [1, 2, 3]
    assert len(chain) == 3