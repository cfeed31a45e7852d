#!filepath: tests/core/test_fact.py
import dataclasses

import pytest

from spaceloop.core import Fact, Trivalent, facts_named, find_first, find_last
from spaceloop.utils.errors import InvalidTrivalentError


def test_default_trivalent_is_true():
    assert Fact("X").trivalent is Trivalent.TRUE
    assert Fact("X", trivalent="").trivalent is Trivalent.TRUE
    assert Fact("X", trivalent=None).trivalent is Trivalent.TRUE


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("True", Trivalent.TRUE),
        (" false ", Trivalent.FALSE),
        ("UNDECIDED", Trivalent.UNDECIDED),
        (False, Trivalent.FALSE),
        (Trivalent.UNDECIDED, Trivalent.UNDECIDED),
    ],
)
def test_trivalent_coercion(raw, expected):
    assert Fact("X", trivalent=raw).trivalent is expected


def test_invalid_trivalent_rejected():
    with pytest.raises(InvalidTrivalentError):
        Fact("X", trivalent="maybe")

    # 同时也是 ValueError
    with pytest.raises(ValueError):
        Trivalent.coerce(3)


def test_fact_is_immutable():
    f = Fact("X", 1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        f.value = 2


def test_name_stored_verbatim_but_matched_normalized():
    f = Fact("  FibSequence ", (1,))
    assert f.name == "  FibSequence "
    assert f.key == "fibsequence"
    assert f.matches("fibsequence")
    assert not f.matches("fib")


def test_lookup_helpers_with_duplicates():
    facts = [Fact("Avg", 1.0), Fact("Other", 0), Fact(" avg", 2.0)]

    assert find_first(facts, "AVG").value == 1.0
    assert find_last(facts, "AVG").value == 2.0
    assert [f.value for f in facts_named(facts, "avg")] == [1.0, 2.0]
    assert find_last(facts, "missing") is None
    assert find_first([], "avg") is None
