from src.mentor_system.mentor_system.database.bootstrap import _iter_sql_statements, _strip_create_db_and_use


def test_split_keeps_semicolons_inside_quotes():
    sql = "INSERT INTO teams VALUES ('a;b', 0); INSERT INTO teams VALUES (\"c;d\", 1);"

    assert list(_iter_sql_statements(sql)) == [
        "INSERT INTO teams VALUES ('a;b', 0)",
        'INSERT INTO teams VALUES ("c;d", 1)',
    ]


def test_split_drops_line_comments():
    sql = "-- header; not a statement\nCREATE TABLE x (id INT);\n-- trailing\n"

    assert list(_iter_sql_statements(sql)) == ["CREATE TABLE x (id INT)"]


def test_strip_database_selection():
    sql = "CREATE DATABASE IF NOT EXISTS mentor_db;\nUSE mentor_db;\nCREATE TABLE x (id INT);"

    assert list(_iter_sql_statements(_strip_create_db_and_use(sql))) == ["CREATE TABLE x (id INT)"]


def test_split_drops_hash_and_block_comments():
    sql = "# note; not a statement\nCREATE TABLE a (id INT); /* block; comment */ CREATE TABLE b (id INT);"

    assert list(_iter_sql_statements(sql)) == ["CREATE TABLE a (id INT)", "CREATE TABLE b (id INT)"]


def test_double_dash_without_space_is_not_a_comment():
    assert list(_iter_sql_statements("SELECT 5--1;")) == ["SELECT 5--1"]


def test_comment_markers_inside_quotes_are_kept():
    sql = "INSERT INTO teams VALUES ('#1 -- /* team */', 0);"

    assert list(_iter_sql_statements(sql)) == ["INSERT INTO teams VALUES ('#1 -- /* team */', 0)"]
