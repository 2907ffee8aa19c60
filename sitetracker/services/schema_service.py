import logging
from typing import Dict, List, Tuple

from sqlalchemy import inspect, text

from sitetracker.database import Base
from sitetracker import models  # noqa: F401

logger = logging.getLogger(__name__)

# Columns added after a table first shipped; create_all() never alters existing tables.
ADDITIVE_COLUMNS: Dict[str, List[Tuple[str, str]]] = {
    "materials": [("image_url", "TEXT")],
}


def _missing_columns(engine, table_name: str) -> List[Tuple[str, str]]:
    existing = {col["name"] for col in inspect(engine).get_columns(table_name)}
    return [(name, ddl_type) for name, ddl_type in ADDITIVE_COLUMNS.get(table_name, []) if name not in existing]


def add_column_sql(dialect_name: str, table_name: str, column_name: str, ddl_type: str) -> str:
    if dialect_name == "postgresql":
        # Lets concurrent bootstraps race on the same column without failing.
        return f"ALTER TABLE {table_name} ADD COLUMN IF NOT EXISTS {column_name} {ddl_type}"
    return f"ALTER TABLE {table_name} ADD COLUMN {column_name} {ddl_type}"


def _columns_to_add(engine, table_name: str) -> List[Tuple[str, str]]:
    if engine.dialect.name == "postgresql":
        return list(ADDITIVE_COLUMNS.get(table_name, []))
    return _missing_columns(engine, table_name)


def bootstrap(engine) -> None:
    """
    Create every table that does not exist yet, then add columns that older
    deployments are missing. Safe to run any number of times.
    """
    Base.metadata.create_all(bind=engine, checkfirst=True)

    for table_name in ADDITIVE_COLUMNS:
        missing = _columns_to_add(engine, table_name)
        if not missing:
            continue
        with engine.begin() as conn:
            for column_name, ddl_type in missing:
                conn.execute(text(add_column_sql(engine.dialect.name, table_name, column_name, ddl_type)))
        logger.info(
            "Ensured additive columns",
            extra={"table": table_name, "columns": [name for name, _ in missing]},
        )

    logger.info("Schema bootstrap complete", extra={"tables": sorted(Base.metadata.tables)})
