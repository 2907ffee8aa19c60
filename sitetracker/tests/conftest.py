import os
import tempfile

_test_db_dir = tempfile.mkdtemp(prefix="sitetracker_test_")
TEST_DATABASE_URL = os.getenv(
    "TEST_DATABASE_URL",
    "sqlite:///" + os.path.join(_test_db_dir, "sitetracker_test.db"),
)
os.environ["DATABASE_URL"] = TEST_DATABASE_URL
os.environ.setdefault("DATABASE_SSLMODE", "prefer")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from sqlalchemy import text

from sitetracker import database
from sitetracker.services import schema_service


def _clear_tables() -> None:
    tables = list(reversed(database.Base.metadata.sorted_tables))
    with database.engine.begin() as conn:
        if conn.dialect.name == "postgresql":
            quoted = ", ".join([f'"public"."{table.name}"' for table in tables])
            conn.execute(text(f"TRUNCATE TABLE {quoted} RESTART IDENTITY CASCADE"))
        else:
            for table in tables:
                conn.execute(table.delete())


@pytest.fixture(scope="session", autouse=True)
def _prepare_test_database() -> None:
    database.configure_database()
    schema_service.bootstrap(database.engine)


@pytest.fixture(scope="function", autouse=True)
def _clear_tables_between_tests():
    _clear_tables()
    yield
    _clear_tables()
