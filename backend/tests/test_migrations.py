from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

ALEMBIC_DIR = Path(__file__).resolve().parents[1] / "alembic"

def test_upgrade_creates_schema(tmp_path, monkeypatch):
    url = f"sqlite+pysqlite:///{tmp_path / 'migrate.db'}"
    monkeypatch.setenv("DATABASE_URL", url)
    cfg = Config()
    cfg.set_main_option("script_location", str(ALEMBIC_DIR))

    command.upgrade(cfg, "head")
    engine = create_engine(url)
    tables = set(inspect(engine).get_table_names())
    assert {"exercises", "exercise_groups", "exercise_group_links",
            "performances", "performance_sets"} <= tables
    cols = {c["name"] for c in inspect(engine).get_columns("performance_sets")}
    assert {"weight", "reps", "set_order", "performance_id"} <= cols

    command.downgrade(cfg, "base")
    assert "performances" not in set(inspect(engine).get_table_names())
    engine.dispose()
