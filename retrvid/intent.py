"""The single operation requested by one invocation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .errors import UsageError, ValidationError


@dataclass(frozen=True)
class Lookup:
    name: str
    print_id: bool = False
    copy: bool = True


@dataclass(frozen=True)
class ListIds:
    pass


@dataclass(frozen=True)
class Add:
    name: str
    identifier: str


@dataclass(frozen=True)
class Remove:
    name: str


Intent = Lookup | ListIds | Add | Remove


def from_inputs(
    name: str | None = None,
    list_ids: bool = False,
    add: Sequence[str] | None = None,
    remove: str | None = None,
    print_id: bool = False,
    no_copy: bool = False,
) -> Intent:
    """Build the one intent encoded by the raw command inputs.

    Raises ``UsageError`` when more than one of ``name``, ``list_ids``,
    ``add`` and ``remove`` is given and ``ValidationError`` when none is.
    """

    given = [
        label
        for label, present in (
            ("NAME", name is not None),
            ("--list", list_ids),
            ("--add", add is not None),
            ("--remove", remove is not None),
        )
        if present
    ]
    if len(given) > 1:
        raise UsageError(f"the arguments {', '.join(given)} cannot be used together")

    if list_ids:
        return ListIds()
    if add is not None:
        if len(add) != 2:
            raise ValidationError("name and/or id to add not specified")
        add_name, identifier = add
        if not add_name:
            raise ValidationError("name and/or id to add not specified")
        return Add(name=add_name, identifier=identifier)
    if remove is not None:
        if not remove:
            raise ValidationError("id to remove not specified")
        return Remove(name=remove)
    if not name:
        raise ValidationError("no id name specified")
    return Lookup(name=name, print_id=print_id, copy=not no_copy)
