"""Application factory and configuration tests."""
from wellness_tracker import create_app
from wellness_tracker.seed import DEMO_PASSWORD, DEMO_USERNAME
from wellness_tracker.store import EXTENSION_KEY, WellnessStore

from .conftest import TEST_CONFIG, login


def test_health_endpoint() -> None:
    """Ensure the health check returns the expected response."""
    app = create_app(TEST_CONFIG)
    with app.test_client() as client:
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.get_json() == {"status": "ok"}


def test_each_app_gets_its_own_store() -> None:
    first = create_app(TEST_CONFIG)
    second = create_app(TEST_CONFIG)
    assert first.extensions[EXTENSION_KEY] is not second.extensions[EXTENSION_KEY]


def test_injected_store_is_used(store) -> None:
    app = create_app(TEST_CONFIG, store=store)
    assert app.extensions[EXTENSION_KEY] is store


def test_demo_data_is_seeded_when_enabled() -> None:
    store = WellnessStore()
    app = create_app({**TEST_CONFIG, "SEED_DEMO_DATA": True}, store=store)
    assert store.get_user_by_username(DEMO_USERNAME) is not None
    assert len(store.habits) == 4
    assert len(store.moods) == 3
    assert len(store.goals) == 3
    assert len(store.reminders) == 3

    with app.test_client() as client:
        headers = login(client, DEMO_USERNAME, DEMO_PASSWORD)
        habits = client.get("/api/habits", headers=headers).get_json()
        assert [h["streak"] for h in habits] == [12, 5, 3, 0]


def test_production_does_not_seed(monkeypatch) -> None:
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.delenv("SEED_DEMO_DATA", raising=False)
    store = WellnessStore()
    app = create_app({"TESTING": True}, store=store)
    assert app.config["SEED_DEMO_DATA"] is False
    assert len(store.users) == 0


def test_seed_flag_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("APP_ENV", "development")
    monkeypatch.setenv("SEED_DEMO_DATA", "false")
    app = create_app({"TESTING": True}, store=WellnessStore())
    assert app.config["SEED_DEMO_DATA"] is False


def test_unexpected_errors_are_reported_generically(app, client) -> None:
    @app.route("/api/boom")
    def boom():
        raise RuntimeError("secret internal detail")

    response = client.get("/api/boom")
    assert response.status_code == 500
    body = response.get_json()
    assert body["error"]["code"] == "INTERNAL_ERROR"
    assert "secret" not in body["error"]["message"]


def test_unknown_route_keeps_flask_404(client) -> None:
    assert client.get("/api/does-not-exist").status_code == 404
