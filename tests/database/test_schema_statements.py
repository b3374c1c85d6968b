from frota_premio.database.bootstrap import SCHEMA_PATH, schema_statements


def test_schema_file_splits_into_create_table_statements():
    statements = schema_statements(SCHEMA_PATH.read_text(encoding="utf-8"))

    assert statements
    assert all(s.upper().startswith("CREATE TABLE IF NOT EXISTS") for s in statements)
    tables = {s.split()[5] for s in statements}
    assert {"motoristas_cadastrados", "minhas_viagens", "diesel", "diariodebordo_entregas"} <= tables


def test_database_and_use_lines_are_dropped():
    sql = """
    -- cabeçalho
    CREATE DATABASE IF NOT EXISTS frota;
    USE frota;
    CREATE TABLE IF NOT EXISTS t (id INT, status VARCHAR(10) DEFAULT 'x');
    """

    assert schema_statements(sql) == ["CREATE TABLE IF NOT EXISTS t (id INT, status VARCHAR(10) DEFAULT 'x')"]
