import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent.parent
PACKAGE_DIR = Path(__file__).resolve().parent.parent

# Any SQLAlchemy URL works, e.g. postgresql+psycopg://localhost/students
DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{BASE_DIR}/studentdb.db")

TEMPLATES_DIR = PACKAGE_DIR / "templates"

HOST = "127.0.0.1"

# One fixed port per data-access style so all three can run side by side.
PORTS = {
    "sql": 3010,
    "builder": 3011,
    "orm": 3012,
}
VARIANTS = tuple(PORTS)
