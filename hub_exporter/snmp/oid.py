"""
OID — immutable dotted-numeric SNMP object identifier.

An OID is a ``str`` so it compares and hashes exactly like the keys of the
router status JSON; the helpers below build scalar and table-entry keys.
"""
from __future__ import annotations

import re

_OID_RE = re.compile(r"^\d+(\.\d+)*$")

SCALAR_SUFFIX = ".0"
TABLE_ENTRY_SUFFIX = ".1"


class OID(str):
    """Dotted-numeric object identifier, e.g. ``1.3.6.1.2.1.10.127.1.1.1``."""

    __slots__ = ()

    def __new__(cls, value: str) -> OID:
        value = str(value).strip()
        if not _OID_RE.match(value):
            raise ValueError(f"invalid OID: {value!r}")
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f"OID({str(self)!r})"

    @property
    def parts(self) -> tuple[int, ...]:
        return tuple(int(p) for p in self.split("."))

    def child(self, *parts: int | str) -> OID:
        """Append sub-identifiers: ``OID("1.3").child(6, 1)`` → ``1.3.6.1``."""
        return OID(".".join([str(self), *(str(p) for p in parts)]))

    def scalar(self) -> OID:
        """Key of the scalar instance (``B.0``)."""
        return OID(f"{self}{SCALAR_SUFFIX}")

    def entry_prefix(self) -> str:
        """Key prefix shared by every column of a table (``B.1.``)."""
        return f"{self}{TABLE_ENTRY_SUFFIX}."

    def trim_suffix(self, suffix: str) -> OID:
        """Drop a trailing ``suffix``; unchanged when absent."""
        if suffix and self.endswith(suffix) and len(suffix) < len(self):
            return OID(self[: -len(suffix)])
        return self
