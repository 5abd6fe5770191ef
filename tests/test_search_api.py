"""
Tests for the Flask HTTP entry point.
"""

import pytest

from linesift.application.services.search_application_service import _create_app
from linesift.infrastructure.config import ConfigManager
from linesift.shared.exceptions import (
    OutputDecodeFailedError,
    ProcessSpawnFailedError,
    SearchTimeoutError
)


@pytest.fixture
def client_factory(tmp_path, service_factory):
    """Build a Flask test client around a mock engine."""
    def _factory(runner):
        app = _create_app(
            service=service_factory(runner),
            config_manager=ConfigManager(config_dir=str(tmp_path))
        )
        app.config["TESTING"] = True
        return app.test_client()
    return _factory


class TestSearchEndpoint:
    """Test suite for POST /search."""

    def test_search_success(self, client_factory, rg, runner_factory):
        runner = runner_factory(stdout=rg.output(
            rg.match("src/a.py", 5, "hello"),
            rg.context("src/a.py", 4, "intro"),
        ))
        client = client_factory(runner)

        response = client.post("/search", json={"pattern": "hello", "directory": "src"})

        assert response.status_code == 200
        body = response.get_json()
        assert body["count"] == 2
        assert [r["line_number"] for r in body["results"]] == [4, 5]
        assert body["options"]["directory"] == "src"

    def test_body_options_override_defaults(self, client_factory, runner_factory):
        runner = runner_factory()
        client = client_factory(runner)

        client.post("/search", json={
            "pattern": "x",
            "max_depth": 9,
            "include_globs": "*.md",
            "case_sensitive": False,
        })

        args = runner.run.await_args.args[1]
        assert args[args.index("--max-depth") + 1] == "9"
        assert args[args.index("-g") + 1] == "*.md"
        assert "-i" in args

    def test_invalid_options_return_400(self, client_factory, runner_factory):
        runner = runner_factory()
        client = client_factory(runner)

        response = client.post("/search", json={"pattern": "x", "max_depth": 11})

        assert response.status_code == 400
        body = response.get_json()
        assert body["error"] == "InvalidOptionsError"
        assert body["issues"][0]["field"] == "max_depth"
        runner.run.assert_not_awaited()

    def test_mistyped_option_returns_400(self, client_factory, runner_factory):
        client = client_factory(runner_factory())
        response = client.post("/search", json={"pattern": "x", "max_depth": "3"})
        assert response.status_code == 400

    @pytest.mark.parametrize("body", [None, [1, 2], {"directory": "."}, {"pattern": 5}])
    def test_bad_body_returns_400(self, client_factory, runner_factory, body):
        client = client_factory(runner_factory())
        if body is None:
            response = client.post("/search", data="not json", content_type="application/json")
        else:
            response = client.post("/search", json=body)
        assert response.status_code == 400

    @pytest.mark.parametrize("error, status", [
        (ProcessSpawnFailedError("missing"), 503),
        (SearchTimeoutError("slow"), 504),
        (OutputDecodeFailedError("binary"), 502),
    ])
    def test_failures_map_to_status(self, client_factory, runner_factory, error, status):
        client = client_factory(runner_factory(side_effect=error))
        response = client.post("/search", json={"pattern": "x"})
        assert response.status_code == status
        assert response.get_json()["error"] == type(error).__name__

    def test_invalid_config_returns_json_503(self, client_factory, runner_factory, tmp_path):
        (tmp_path / "base.yaml").write_text("server:\n  port: 0\n")
        runner = runner_factory()
        client = client_factory(runner)

        response = client.post("/search", json={"pattern": "x"})

        assert response.status_code == 503
        assert response.is_json
        assert response.get_json()["error"] == "Invalid configuration"
        runner.run.assert_not_awaited()

    def test_unexpected_failure_returns_json_500(self, client_factory, runner_factory):
        client = client_factory(runner_factory(side_effect=RuntimeError("boom")))
        response = client.post("/search", json={"pattern": "x"})
        assert response.status_code == 500
        assert response.get_json() == {"error": "Search failed"}

    def test_invalid_option_issues_carry_severity(self, client_factory, runner_factory):
        client = client_factory(runner_factory())
        response = client.post("/search", json={"pattern": "x", "max_depth": 0})
        issue = response.get_json()["issues"][0]
        assert issue["severity"] == "ERROR"
        assert issue["value"] == 0

    def test_api_key_required_when_configured(self, client_factory, runner_factory, monkeypatch):
        monkeypatch.setenv("LINESIFT_API_KEY", "s3cret")
        client = client_factory(runner_factory())

        assert client.post("/search", json={"pattern": "x"}).status_code == 401
        assert client.post(
            "/search",
            json={"pattern": "x"},
            headers={"Authorization": "Bearer wrong"}
        ).status_code == 401
        assert client.post(
            "/search",
            json={"pattern": "x"},
            headers={"Authorization": "Bearer s3cret"}
        ).status_code == 200


class TestHealthEndpoint:
    """Test suite for GET /health."""

    def test_healthy(self, client_factory, runner_factory):
        response = client_factory(runner_factory()).get("/health")
        assert response.status_code == 200
        assert response.get_json() == {"status": "healthy"}

    def test_degraded_without_engine(self, client_factory, runner_factory):
        runner = runner_factory()
        runner.resolve_executable.return_value = None
        response = client_factory(runner).get("/health")
        assert response.status_code == 503
        assert response.get_json()["status"] == "degraded"

    def test_health_skips_api_key(self, client_factory, runner_factory, monkeypatch):
        monkeypatch.setenv("LINESIFT_API_KEY", "s3cret")
        assert client_factory(runner_factory()).get("/health").status_code == 200
