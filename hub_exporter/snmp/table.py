"""
Snapshot / Row / Table — SNMP structure rebuilt from a flat router status dump.

The hub serialises its MIB view as one JSON object ``{OID: value}``:

- scalar ``B``          → key ``B.0``
- table ``B`` column c  → key ``B.1.<c>.<index>`` (index may contain dots)

``Snapshot.get_table(B)`` groups the ``B.1.`` keys by index into rows keyed by
column OID ``B.1.<c>``; ``parse_table`` runs a row decoder over every row and
fails as a whole if any row fails.
"""
from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterator, Mapping
from enum import IntEnum
from types import MappingProxyType
from typing import Any, Generic, TypeVar

from hub_exporter.snmp.errors import (
    ColumnNotFound,
    InvalidValue,
    MalformedIndex,
    RowJoinMismatch,
    RowNotFound,
    ScalarNotFound,
    UnknownEnumCode,
)
from hub_exporter.snmp.oid import OID

logger = logging.getLogger(__name__)

T = TypeVar("T")
E = TypeVar("E", bound=IntEnum)


def _parse_int(raw: str, field: str) -> int:
    try:
        return int(raw.strip(), 10)
    except ValueError:
        raise InvalidValue(field, raw, "integer") from None


def _parse_float(raw: str, field: str) -> float:
    try:
        value = float(raw.strip())
    except ValueError:
        raise InvalidValue(field, raw, "number") from None
    if not math.isfinite(value):
        raise InvalidValue(field, raw, "number")
    return value


class Row(Mapping[OID, str]):
    """One table row: column OID → raw value."""

    __slots__ = ("_columns",)

    def __init__(self, columns: Mapping[OID, str] | None = None) -> None:
        self._columns: dict[OID, str] = dict(columns or {})

    def __getitem__(self, column: OID) -> str:
        return self._columns[column]

    def __iter__(self) -> Iterator[OID]:
        return iter(self._columns)

    def __len__(self) -> int:
        return len(self._columns)

    def __repr__(self) -> str:
        return f"Row({self._columns!r})"

    def _set(self, column: OID, value: str) -> None:
        self._columns[column] = value

    def get_column(self, column: OID, field: str | None = None) -> str:
        try:
            return self._columns[column]
        except KeyError:
            raise ColumnNotFound(column, field) from None

    def parse_int(self, column: OID, field: str | None = None) -> int:
        return _parse_int(self.get_column(column, field), field or column)

    def parse_float(
        self, column: OID, field: str | None = None, divisor: float = 1.0,
    ) -> float:
        """Parse a number, scaled down by ``divisor`` (10 for tenth-unit MIB values)."""
        return _parse_float(self.get_column(column, field), field or column) / divisor

    def parse_enum(
        self, column: OID, enum_cls: type[E], field: str | None = None,
    ) -> E:
        raw = self.get_column(column, field)
        code = raw.strip()
        try:
            return enum_cls(int(code))
        except ValueError:
            raise UnknownEnumCode(field or enum_cls.__name__, raw) from None

    def parse_bool(self, column: OID, field: str | None = None) -> bool:
        """SNMPv2-TC TruthValue: 1 = true, 2 = false."""
        raw = self.get_column(column, field)
        code = raw.strip()
        if code == "1":
            return True
        if code == "2":
            return False
        raise InvalidValue(field or column, raw, "TruthValue")


RowDecoder = Callable[[Row], T]


class Table(Mapping[str, T], Generic[T]):
    """
    Row index → row (raw ``Row`` or a decoded domain model).

    Indexes are opaque strings compared by equality. Iteration follows the
    order in which indexes first appeared in the snapshot.
    """

    __slots__ = ("oid", "_rows")

    def __init__(self, oid: OID, rows: Mapping[str, T] | None = None) -> None:
        self.oid = oid
        self._rows: dict[str, T] = dict(rows or {})

    def __getitem__(self, index: str) -> T:
        return self._rows[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def __repr__(self) -> str:
        return f"Table({self.oid}, {len(self._rows)} rows)"

    def require(self, index: str) -> T:
        try:
            return self._rows[index]
        except KeyError:
            raise RowNotFound(self.oid, index) from None

    def join(self, *others: Table[Any]) -> list[tuple[Any, ...]]:
        """
        Inner-join ``others`` on this table's indexes.

        Returns ``[(index, row, other_row, ...), ...]`` in this table's order.

        Raises:
            RowJoinMismatch: an index of this table is missing from another table.
        """
        joined: list[tuple[Any, ...]] = []
        for index, row in self._rows.items():
            matches = []
            for other in others:
                if index not in other:
                    raise RowJoinMismatch(other.oid, index)
                matches.append(other[index])
            joined.append((index, row, *matches))
        return joined


class Snapshot(Mapping[str, str]):
    """
    One router status dump, read-only.

    Keys are full instance OIDs; values are always strings.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, str]) -> None:
        self._values: Mapping[str, str] = MappingProxyType(dict(values))

    @classmethod
    def from_json(cls, payload: Any) -> Snapshot:
        """
        Build a snapshot from the decoded JSON body.

        Raises:
            TypeError: payload is not an object of string values.
        """
        if not isinstance(payload, dict):
            raise TypeError(
                f"router status must be a JSON object, got {type(payload).__name__}"
            )
        for key, value in payload.items():
            if not isinstance(value, str):
                raise TypeError(
                    f"router status value for {key} must be a string, "
                    f"got {type(value).__name__}"
                )
        return cls(payload)

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Snapshot({len(self._values)} values)"

    # ── Scalars ─────────────────────────────────────────────────────

    def get_scalar(self, oid: OID) -> str:
        key = oid.scalar()
        try:
            return self._values[key]
        except KeyError:
            raise ScalarNotFound(key) from None

    def parse_scalar(self, oid: OID, parser: Callable[[str, str], T] = _parse_int) -> T:
        """Parse a scalar with ``parser(raw, field)``; integers by default."""
        return parser(self.get_scalar(oid), oid.scalar())

    # ── Tables ──────────────────────────────────────────────────────

    def get_table(self, oid: OID) -> Table[Row]:
        """
        Group every ``B.1.<column>.<index>`` key into rows.

        Raises:
            MalformedIndex: a key under ``B.1.`` has no index part.
        """
        prefix = oid.entry_prefix()
        rows: dict[str, Row] = {}

        for key, value in self._values.items():
            if not key.startswith(prefix):
                continue
            column_part, sep, index = key[len(prefix):].partition(".")
            if not sep or not column_part or not index:
                raise MalformedIndex(key)

            try:
                column = OID(prefix + column_part)
            except ValueError:
                raise MalformedIndex(key, "invalid column identifier") from None
            row = rows.get(index)
            if row is None:
                row = rows[index] = Row()
            row._set(column, value)

        logger.debug("Table %s: %d rows", oid, len(rows))
        return Table(oid, rows)

    def parse_table(self, oid: OID, decoder: RowDecoder[T]) -> Table[T]:
        """
        Decode every row of table ``oid``; any failing row fails the table.
        """
        raw = self.get_table(oid)
        return Table(oid, {index: decoder(row) for index, row in raw.items()})
