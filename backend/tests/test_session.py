"""Tests for engine construction in backend.app.db.session"""
import threading

from sqlalchemy import text

from backend.app.db.session import build_engine


def test_sqlite_engine_is_usable_from_another_thread(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'portal.db'}")
    with engine.connect() as conn:
        conn.execute(text("CREATE TABLE t (id INTEGER)"))
        conn.commit()

    errors = []

    def insert():
        try:
            with engine.connect() as conn:
                conn.execute(text("INSERT INTO t (id) VALUES (1)"))
                conn.commit()
        except Exception as e:
            errors.append(e)

    worker = threading.Thread(target=insert)
    worker.start()
    worker.join()

    assert errors == []
    with engine.connect() as conn:
        assert conn.execute(text("SELECT COUNT(*) FROM t")).scalar() == 1
    engine.dispose()

