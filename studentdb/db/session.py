from sqlalchemy import Engine, create_engine, text
from sqlalchemy.orm import sessionmaker

from studentdb.core.config import DATABASE_URL


def make_engine(database_url: str = DATABASE_URL) -> Engine:
    connect_args = {}
    if database_url.startswith("sqlite"):
        # handlers run in the threadpool, not the thread that opened the connection
        connect_args["check_same_thread"] = False
    return create_engine(database_url, connect_args=connect_args)


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )


def check_connection(engine: Engine) -> None:
    """Open one pooled connection and run a trivial query; raises if the store is unreachable."""
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))
