from src.workforce_dashboard.workforce_dashboard.database.bootstrap import (
    _strip_create_db_and_use,
    iter_sql_statements,
)
from src.workforce_dashboard.workforce_dashboard.database.connection import DBConfig


def test_iter_sql_statements_skips_comments_and_respects_quotes():
    sql = """
-- employees
CREATE TABLE a (id INT);
INSERT INTO a VALUES ('x;y');
INSERT INTO b VALUES ("it\\'s; fine")
"""
    assert list(iter_sql_statements(sql)) == [
        "CREATE TABLE a (id INT)",
        "INSERT INTO a VALUES ('x;y')",
        'INSERT INTO b VALUES ("it\\\'s; fine")',
    ]


def test_strip_create_db_and_use():
    sql = "CREATE DATABASE IF NOT EXISTS other;\nUSE other;\nCREATE TABLE t (id INT);\n"
    assert list(iter_sql_statements(_strip_create_db_and_use(sql))) == ["CREATE TABLE t (id INT)"]


def test_db_config_from_mapping_hides_password():
    cfg = DBConfig.from_mapping({"host": "db", "port": "3307", "user": "app", "password": "s3cret", "database": "w"})
    assert cfg.port == 3307
    assert "s3cret" not in cfg.display
