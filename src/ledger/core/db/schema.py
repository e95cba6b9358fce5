"""Startup check for columns added by later migrations.

The hour/minute pair on time entries arrived after the first deployments.
Rather than retrying writes whenever the database rejects those columns, the
schema is inspected once at startup and the app refuses to serve against a
database that has not been migrated.
"""

from dataclasses import dataclass

from sqlalchemy import Connection, inspect

from src.ledger.core.errors import ColumnMissingError

# table -> columns that databases created by older releases may lack
LATE_COLUMNS: dict[str, tuple[str, ...]] = {
    "time_entries": ("entry_hour", "entry_minute"),
}


@dataclass(frozen=True)
class SchemaCapabilities:
    """Late columns that are absent from the connected database."""

    missing: tuple[tuple[str, str], ...] = ()

    @property
    def is_current(self) -> bool:
        return not self.missing

    def has_column(self, table: str, column: str) -> bool:
        return (table, column) not in self.missing

    def ensure_current(self) -> None:
        """Raise ColumnMissingError for the first missing column, if any."""
        if self.missing:
            table, column = self.missing[0]
            raise ColumnMissingError(table, column)


def inspect_capabilities(connection: Connection) -> SchemaCapabilities:
    """Build SchemaCapabilities from a live sync connection.

    Tables that do not exist at all are skipped; that case belongs to the
    migrations, not to this check.
    """
    inspector = inspect(connection)
    missing: list[tuple[str, str]] = []
    for table, columns in LATE_COLUMNS.items():
        if not inspector.has_table(table):
            continue
        existing = {col["name"] for col in inspector.get_columns(table)}
        missing.extend((table, column) for column in columns if column not in existing)
    return SchemaCapabilities(tuple(missing))
