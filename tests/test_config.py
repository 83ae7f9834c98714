"""
Tests for environment-sourced settings
"""
from pokemons_api.config import Settings

DB_VARS = ("DB_HOST", "DB_PORT", "DB_USER", "DB_PASSWORD", "DB_DATABASE", "DATABASE_URL", "PORT", "LOG_LEVEL", "CORS_ORIGINS")


def _clear(monkeypatch):
    for name in DB_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults(monkeypatch):
    _clear(monkeypatch)
    settings = Settings.from_env()
    assert settings.port == 3000
    assert settings.cors_origins_list == ["*"]
    url = settings.sqlalchemy_url
    assert url.drivername == "mysql+aiomysql"
    assert url.host == "localhost"
    assert url.port == 3306


def test_store_options_build_mysql_url(monkeypatch):
    _clear(monkeypatch)
    monkeypatch.setenv("DB_HOST", "db.internal")
    monkeypatch.setenv("DB_PORT", "3307")
    monkeypatch.setenv("DB_USER", "trainer")
    monkeypatch.setenv("DB_PASSWORD", "s3cret")
    monkeypatch.setenv("DB_DATABASE", "pokedex")
    monkeypatch.setenv("PORT", "8080")

    settings = Settings.from_env()
    url = settings.sqlalchemy_url
    assert (url.host, url.port, url.username, url.password, url.database) == (
        "db.internal",
        3307,
        "trainer",
        "s3cret",
        "pokedex",
    )
    assert settings.port == 8080


def test_database_url_overrides_store_options(monkeypatch):
    _clear(monkeypatch)
    monkeypatch.setenv("DB_HOST", "ignored")
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///pokemons.db")
    assert Settings.from_env().sqlalchemy_url == "sqlite+aiosqlite:///pokemons.db"


def test_cors_origins_are_split(monkeypatch):
    _clear(monkeypatch)
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test,")
    assert Settings.from_env().cors_origins_list == ["http://a.test", "http://b.test"]


def test_fields_accept_python_names():
    settings = Settings(database_url="sqlite+aiosqlite:///x.db", port=4000)
    assert settings.sqlalchemy_url == "sqlite+aiosqlite:///x.db"
    assert settings.port == 4000


def test_empty_port_falls_back_to_default(monkeypatch):
    _clear(monkeypatch)
    monkeypatch.setenv("PORT", "")
    assert Settings.from_env().port == 3000


def test_env_file_is_read(monkeypatch, tmp_path):
    _clear(monkeypatch)
    (tmp_path / ".env").write_text("DB_HOST=db.from.file\nPORT=5000\nLOG_LEVEL=debug\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    settings = Settings.from_env()
    assert settings.db_host == "db.from.file"
    assert settings.port == 5000
    assert settings.log_level == "DEBUG"
