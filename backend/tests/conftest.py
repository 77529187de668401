"""
Point the app at a throwaway SQLite file and create the schema.
Runs before any test module imports gymtracker (the engine is built at import time).
"""
import os
import tempfile

_tmp = tempfile.mkdtemp(prefix="gymtracker-tests-")
os.environ["DB_URL"] = f"sqlite+pysqlite:///{os.path.join(_tmp, 'test.db')}"

from gymtracker.db import Base, engine  # noqa: E402
from gymtracker import models  # noqa: E402,F401

Base.metadata.create_all(engine)
