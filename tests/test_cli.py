import pytest
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from studentdb.cli import build_parser, main
from studentdb.db.session import make_engine
from studentdb.main import create_app
from studentdb.models.assignment import Assignment
from studentdb.models.student import Student


def test_serve_requires_known_variant():
    args = build_parser().parse_args(["serve", "orm"])
    assert args.command == "serve"
    assert args.variant == "orm"

    with pytest.raises(SystemExit):
        build_parser().parse_args(["serve", "sequelize"])


def test_command_is_required():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_setup_creates_and_seeds_once(tmp_path):
    url = f"sqlite:///{tmp_path}/setup.db"

    main(["--database-url", url, "setup"])
    main(["--database-url", url, "setup"])

    engine = make_engine(url)
    with Session(engine) as session:
        assert session.scalar(select(func.count(Student.id))) == 2
        assert session.scalar(select(func.count(Assignment.id))) == 4
    engine.dispose()


def test_create_app_rejects_unknown_variant():
    with pytest.raises(ValueError):
        create_app("pg")
