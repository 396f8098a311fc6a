import argparse
import logging

from studentdb.core.config import DATABASE_URL, HOST, PORTS, VARIANTS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="studentdb",
        description="Student/assignment viewer in three data-access styles.",
    )
    parser.add_argument(
        "--database-url",
        default=DATABASE_URL,
        help="SQLAlchemy database URL (default: %(default)s)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("setup", help="create the tables and insert the seed rows")

    serve = sub.add_parser("serve", help="run one variant on its fixed port")
    serve.add_argument("variant", choices=VARIANTS)

    return parser


def setup(database_url: str) -> None:
    from studentdb.db.init_db import init_db, seed_db
    from studentdb.db.session import make_engine, make_session_factory

    engine = make_engine(database_url)
    init_db(engine)
    db = make_session_factory(engine)()
    try:
        seed_db(db)
    finally:
        db.close()
    engine.dispose()


def serve(variant: str, database_url: str) -> None:
    import uvicorn

    from studentdb.db.session import make_engine
    from studentdb.main import create_app

    app = create_app(variant, make_engine(database_url))
    uvicorn.run(app, host=HOST, port=PORTS[variant])


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO)

    if args.command == "setup":
        setup(args.database_url)
    elif args.command == "serve":
        serve(args.variant, args.database_url)


if __name__ == "__main__":
    main()
