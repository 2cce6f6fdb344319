from app.core.config import Settings


def test_database_uri_defaults_to_mysql_from_parts():
    settings = Settings(
        DATABASE_URI=None,
        DB_HOST="db.internal",
        DB_PORT="3307",
        DB_USER="catalog",
        DB_PASSWORD="pw",
        DB_NAME="shop",
    )

    assert settings.SQLALCHEMY_DATABASE_URI == "mysql+pymysql://catalog:pw@db.internal:3307/shop"


def test_explicit_database_uri_wins():
    settings = Settings(DATABASE_URI="sqlite:///./catalog.db")

    assert settings.SQLALCHEMY_DATABASE_URI == "sqlite:///./catalog.db"


def test_cors_origins_accept_json_and_comma_separated():
    assert Settings(CORS_ORIGINS='["http://a.test", "http://b.test"]').CORS_ORIGINS == [
        "http://a.test",
        "http://b.test",
    ]
    assert Settings(CORS_ORIGINS="http://a.test, http://b.test").CORS_ORIGINS == [
        "http://a.test",
        "http://b.test",
    ]


def test_health_endpoint(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["data"]["status"] == "online"


def test_cors_origins_from_environment(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test,http://b.test")
    assert Settings().CORS_ORIGINS == ["http://a.test", "http://b.test"]

    monkeypatch.setenv("CORS_ORIGINS", '["http://c.test"]')
    assert Settings().CORS_ORIGINS == ["http://c.test"]
