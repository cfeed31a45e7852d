from __future__ import annotations

from typing import Any, Iterable, Mapping, Union

from spaceloop.core.fact import Fact, Trivalent, normalize_name

FactLike = Union[Fact, Mapping[str, Any]]


def in_sync(reference: Iterable[FactLike], candidate: Iterable[FactLike]) -> bool:
    """
    Subset match: every fact in `reference` must appear in `candidate`
    (name compared trimmed / case-insensitive) with an equal truth flag,
    empty flags counting as "True". Extra candidate facts are ignored.

    Flags are compared as exact strings: "true" != "True", and values
    outside True / False / Undecided are compared, not rejected.
    For each reference fact only the first candidate with that name
    is compared.
    """
    visitors = [_as_pair(item) for item in candidate]

    for name, flag in (_as_pair(item) for item in reference):
        for other_name, other_flag in visitors:
            if other_name == name:
                if other_flag != flag:
                    return False
                break
        else:
            return False
    return True


def _as_pair(item: FactLike) -> tuple[str, str]:
    if isinstance(item, Fact):
        return item.key, item.trivalent.value

    name = item.get("name", item.get("Name"))
    if name is None:
        raise KeyError(f"fact record has no name: {item!r}")
    flag = item.get("trivalent", item.get("Trivalent"))
    if isinstance(flag, Trivalent):
        flag = flag.value
    elif flag is None or flag == "":
        flag = Trivalent.TRUE.value
    return normalize_name(name), flag
