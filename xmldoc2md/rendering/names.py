"""Member identifier and cross-reference helpers."""

from __future__ import annotations

import re
from typing import Optional

# Kind codes emitted by the documentation compiler, keyed with their colon.
MEMBER_KIND_PREFIXES = {
    "F:": "Field",
    "P:": "Property",
    "T:": "Type",
    "E:": "Event",
    "M:": "Method",
}

_KIND_PREFIX_PATTERN = re.compile(r"^[A-Z]:")


def member_kind(identifier: Optional[str]) -> Optional[str]:
    """Return the kind label (``Type``, ``Method``...) for a member identifier.

    Lookup is case-insensitive on the two-character prefix. ``None`` means the
    prefix is missing or not a known kind code.
    """
    if not identifier or len(identifier) < 2:
        return None
    return MEMBER_KIND_PREFIXES.get(identifier[:2].upper())


def normalize_member_name(identifier: str, assembly_name: Optional[str] = None) -> str:
    """Turn ``T:MyAssembly.Foo`` into ``Type Foo`` style labels.

    When ``assembly_name`` is given, every ``:<assembly_name>.`` occurrence is
    collapsed to ``:`` so a namespace equal to the assembly name disappears.
    The leading kind code is then expanded into its label.
    """
    label = identifier
    if assembly_name:
        label = re.sub(f":{re.escape(assembly_name)}\\.", ":", label)
    return _KIND_PREFIX_PATTERN.sub(_expand_kind_prefix, label)


def _expand_kind_prefix(match: "re.Match[str]") -> str:
    prefix = match.group(0)
    expanded = MEMBER_KIND_PREFIXES.get(prefix)
    if expanded is None:
        return prefix
    return f"{expanded} "


def last_reference_segment(reference: Optional[str]) -> str:
    """Return the simple name at the end of a qualified reference.

    ``M:Foo.Bar.Baz`` gives ``Baz`` and ``Foo`` gives ``Foo``.
    """
    if not reference:
        return ""
    if len(reference) > 2 and reference[1] == ":":
        reference = reference[2:]
    return reference.rsplit(".", 1)[-1]


__all__ = [
    "MEMBER_KIND_PREFIXES",
    "last_reference_segment",
    "member_kind",
    "normalize_member_name",
]
