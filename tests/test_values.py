"""Tests for input classification and dispatch."""

from collections import namedtuple

import pytest

from wordfilter.values import InputKind, classify, map_value


def shout(text):
    return text.upper()


@pytest.mark.parametrize('value, kind', [
    ('text', InputKind.STRING),
    ('', InputKind.STRING),
    (42, InputKind.SCALAR),
    (1.5, InputKind.SCALAR),
    (True, InputKind.SCALAR),
    (['a'], InputKind.SEQUENCE),
    (('a',), InputKind.SEQUENCE),
    (None, InputKind.OTHER),
    ({'a': 'b'}, InputKind.OTHER),
    ({'a'}, InputKind.OTHER),
    (b'bytes', InputKind.OTHER),
    (object(), InputKind.OTHER),
])
def test_classify(value, kind):
    assert classify(value) is kind


def test_string_is_transformed():
    assert map_value('abc', shout) == 'ABC'


def test_scalar_unchanged_keeps_type():
    assert map_value(42, shout) == 42
    assert map_value(True, lambda text: text) is True
    assert map_value(True, shout) == 'TRUE'


def test_bool_uses_word_text():
    assert map_value(False, lambda text: text.lower()) == 'false'
    assert map_value(False, lambda text: text or 'empty') is False


def test_scalar_changed_becomes_string():
    assert map_value(1.5, lambda text: text.replace('.', ',')) == '1,5'


def test_list_preserves_length_and_order():
    assert map_value(['a', 'b', 'c'], shout) == ['A', 'B', 'C']


def test_tuple_stays_tuple():
    assert map_value(('a', 'b'), shout) == ('A', 'B')


def test_namedtuple_stays_namedtuple():
    Pair = namedtuple('Pair', 'left right')
    result = map_value(Pair('a', 'b'), shout)
    assert isinstance(result, Pair)
    assert result == Pair('A', 'B')


def test_mixed_and_nested_sequences():
    value = ['a', 1, None, ['b', {'c': 'd'}], ('e',)]
    assert map_value(value, shout) == ['A', 1, None, ['B', {'c': 'd'}], ('E',)]


def test_input_not_mutated():
    value = ['a', 'b']
    map_value(value, shout)
    assert value == ['a', 'b']


@pytest.mark.parametrize('value', [None, {'a': 'b'}, object()])
def test_other_returned_unchanged(value):
    assert map_value(value, shout) is value
