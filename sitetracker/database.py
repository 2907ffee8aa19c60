from sqlalchemy import create_engine, event
from sqlalchemy.engine import make_url
from sqlalchemy.orm import declarative_base, sessionmaker

from sitetracker.core.config import get_database_sslmode, get_database_url

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    expire_on_commit=False,
)

Base = declarative_base()

DATABASE_URL = ""
engine = None
_configured_database_url = None


def _connect_args(database_url: str) -> dict:
    url = make_url(database_url)
    if url.drivername.startswith("postgresql"):
        # Encrypted but unverified: the hosted database presents a certificate
        # that is not in the local trust store.
        return {"sslmode": get_database_sslmode()}
    if url.drivername.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def configure_database() -> None:
    global DATABASE_URL, engine, _configured_database_url

    database_url = get_database_url()

    if engine is not None and _configured_database_url == database_url:
        return

    engine = create_engine(database_url, connect_args=_connect_args(database_url))
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)

    SessionLocal.configure(bind=engine)
    DATABASE_URL = database_url
    _configured_database_url = database_url


configure_database()


def get_engine():
    configure_database()
    return engine


def get_db():
    configure_database()
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
