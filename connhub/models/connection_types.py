"""Supported database connection types."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ConnectionType:
    """A supported engine: label shown to users plus its identifier."""

    name: str
    value: str


CONNECTION_TYPES: tuple[ConnectionType, ...] = (
    ConnectionType(name="MySQL", value="mysql"),
    ConnectionType(name="MariaDB", value="mariadb"),
    ConnectionType(name="Postgres", value="postgresql"),
    ConnectionType(name="SQLite", value="sqlite"),
    ConnectionType(name="SQL Server", value="sqlserver"),
    ConnectionType(name="Amazon Redshift", value="redshift"),
    ConnectionType(name="CockroachDB", value="cockroachdb"),
)

CONNECTION_TYPE_VALUES: frozenset[str] = frozenset(t.value for t in CONNECTION_TYPES)

CONNECTION_TYPE_ALIASES: dict[str, str] = {
    "psql": "postgresql",
    "postgres": "postgresql",
    "mssql": "sqlserver",
}

DEFAULT_PORTS: dict[str, int] = {
    "mysql": 3306,
    "mariadb": 3306,
    "postgresql": 5432,
    "sqlserver": 1433,
    "cockroachdb": 26257,
}


def normalize_connection_type(raw: str | None) -> str | None:
    """Map a raw type or alias to its identifier; unknown values give None."""
    if not raw:
        return None
    value = CONNECTION_TYPE_ALIASES.get(raw, raw)
    if value not in CONNECTION_TYPE_VALUES:
        return None
    return value


def default_port_for(connection_type: str | None) -> int | None:
    """Conventional port for a connection type, if it has one."""
    if connection_type is None:
        return None
    return DEFAULT_PORTS.get(connection_type)


def display_name_for(connection_type: str | None) -> str | None:
    """Human label for a connection type identifier."""
    for item in CONNECTION_TYPES:
        if item.value == connection_type:
            return item.name
    return None
