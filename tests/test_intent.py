import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from retrvid.errors import UsageError, ValidationError
from retrvid.intent import Add, ListIds, Lookup, Remove, from_inputs


def test_single_inputs_map_to_intents():
    assert from_inputs(name="work") == Lookup(name="work", print_id=False, copy=True)
    assert from_inputs(list_ids=True) == ListIds()
    assert from_inputs(add=("work", "12345")) == Add(name="work", identifier="12345")
    assert from_inputs(remove="work") == Remove(name="work")


def test_lookup_flags():
    intent = from_inputs(name="work", print_id=True, no_copy=True)
    assert intent == Lookup(name="work", print_id=True, copy=False)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"name": "work", "list_ids": True},
        {"name": "work", "remove": "home"},
        {"list_ids": True, "add": ("a", "1")},
        {"add": ("a", "1"), "remove": "a"},
        {"name": "w", "list_ids": True, "add": ("a", "1"), "remove": "a"},
    ],
)
def test_more_than_one_intent_is_a_usage_error(kwargs):
    with pytest.raises(UsageError, match="cannot be used together"):
        from_inputs(**kwargs)


def test_no_intent_requires_a_name():
    with pytest.raises(ValidationError, match="no id name specified"):
        from_inputs(print_id=True)


@pytest.mark.parametrize("add", [(), ("work",), ("work", "1", "2"), ("", "1")])
def test_add_needs_name_and_id(add):
    with pytest.raises(ValidationError):
        from_inputs(add=add)
