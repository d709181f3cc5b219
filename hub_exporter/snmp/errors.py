"""
Exception hierarchy for one scrape cycle.

Every error here is fatal for the current cycle only: the collector catches
``HubExporterError``, reports ``up 0`` and the next scrape starts fresh.
"""
from __future__ import annotations


class HubExporterError(Exception):
    """Base error."""


class FetchFailed(HubExporterError):
    """Router status could not be fetched or decoded."""


class ExtractionError(HubExporterError):
    """Snapshot did not contain what a metric group needs."""


class ScalarNotFound(ExtractionError):
    """Scalar instance ``B.0`` is missing from the snapshot."""

    def __init__(self, oid: str) -> None:
        self.oid = oid
        super().__init__(f"scalar not found: {oid}")


class ColumnNotFound(ExtractionError):
    """Table row has no value for a required column."""

    def __init__(self, column: str, field: str | None = None) -> None:
        self.column = column
        self.field = field
        name = f"{field} ({column})" if field else column
        super().__init__(f"column not found: {name}")


class MalformedIndex(ExtractionError):
    """Row index could not be extracted from a key."""

    def __init__(self, key: str, reason: str = "failed to extract table index") -> None:
        self.key = key
        super().__init__(f"{reason}: {key}")


class InvalidValue(ExtractionError):
    """Value is present but does not parse as the expected type."""

    def __init__(self, field: str, value: str, expected: str) -> None:
        self.field = field
        self.value = value
        self.expected = expected
        super().__init__(f"invalid {expected} for {field}: {value!r}")


class UnknownEnumCode(ExtractionError):
    """Enumerated column holds a code outside the known set."""

    def __init__(self, field: str, value: str) -> None:
        self.field = field
        self.value = value
        super().__init__(f"unknown {field}: {value!r}")


class RowNotFound(ExtractionError):
    """Table has no row for the requested index."""

    def __init__(self, table: str, index: str, message: str | None = None) -> None:
        self.table = table
        self.index = index
        super().__init__(message or f"row {index!r} not found in table {table}")


class RowJoinMismatch(RowNotFound):
    """Index of the primary table is absent from a joined table."""

    def __init__(self, table: str, index: str) -> None:
        super().__init__(
            table, index, f"row {index!r} missing from joined table {table}",
        )


class PrimaryFlowNotFound(ExtractionError):
    """No primary service flow exists for a direction."""

    def __init__(self, direction: str) -> None:
        self.direction = direction
        super().__init__(f"primary {direction} flow not found")


class AmbiguousPrimaryFlow(ExtractionError):
    """More than one service flow is flagged primary for a direction."""

    def __init__(self, direction: str, indexes: list[str]) -> None:
        self.direction = direction
        self.indexes = indexes
        super().__init__(
            f"multiple primary {direction} flows: {', '.join(indexes)}"
        )


class ParamSetNotFound(ExtractionError):
    """Parameter set for the selected service flow is missing."""

    def __init__(self, direction: str, index: str) -> None:
        self.direction = direction
        self.index = index
        super().__init__(f"primary {direction} param set not found: {index}")
