"""Web API tests."""
import pytest

from package_info_service import PackageInfoService
from web_server import create_app


@pytest.fixture()
def make_client():

    def _make(source):
        app = create_app(PackageInfoService(source))
        app.config["TESTING"] = True
        return app.test_client()

    return _make


@pytest.fixture()
def client(make_client, scenario_path):
    return make_client(scenario_path)


class TestNames:

    def test_names(self, client):
        resp = client.get("/names")
        assert resp.status_code == 200
        assert resp.get_json() == {"names": ["alpha", "beta"]}


class TestPackages:

    def test_alpha(self, client):
        resp = client.get("/packages?name=alpha")
        assert resp.status_code == 200
        assert resp.get_json() == {
            "summary": "short alpha",
            "description": "long alpha text",
            "depends": [
                {"name": "beta", "found": True},
                {"name": "gamma", "found": False},
            ],
            "dependents": [],
        }

    def test_beta(self, client):
        data = client.get("/packages?name=beta").get_json()
        assert data["dependents"] == ["alpha"]
        assert data["depends"] == []

    def test_unknown_name_is_not_an_error(self, client):
        resp = client.get("/packages?name=gamma")
        assert resp.status_code == 200
        assert resp.get_json()["dependents"] == ["alpha"]

    def test_plus_in_name_is_literal(self, make_client, write_status):
        text = ("Package: g++\nDescription: GNU C++ compiler\n\n"
                "Package: build-essential\nDepends: g++ (>= 4:10.2)\n")
        data = make_client(write_status(text)).get(
            "/packages?name=g++").get_json()
        assert data["summary"] == "GNU C++ compiler"
        assert data["dependents"] == ["build-essential"]

    def test_percent_encoded_name(self, client):
        data = client.get("/packages?name=%61lpha").get_json()
        assert data["summary"] == "short alpha"

    @pytest.mark.parametrize("url", ["/packages", "/packages?name="])
    def test_missing_name(self, client, url):
        resp = client.get(url)
        assert resp.status_code == 404
        assert "error" in resp.get_json()


class TestErrors:

    def test_unknown_path(self, client):
        resp = client.get("/nonexistent")
        assert resp.status_code == 404
        assert "error" in resp.get_json()

    def test_method_not_allowed(self, client):
        resp = client.post("/names")
        assert resp.status_code == 405
        assert "error" in resp.get_json()

    def test_missing_control_file(self, make_client, tmp_path):
        client = make_client(str(tmp_path / "missing"))
        resp = client.get("/names")
        assert resp.status_code == 500
        assert "missing" in resp.get_json()["error"]
        # the server keeps answering
        assert client.get("/packages?name=a").status_code == 500
