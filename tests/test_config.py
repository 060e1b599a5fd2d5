"""Tests for configuration loading."""
from config import AppConfig, GraphqlApiConfig


class TestConfig:
    """Test environment-driven config."""

    def test_defaults(self, monkeypatch):
        """Defaults apply when nothing is set."""
        for name in ("GRAPHQL_ENDPOINT", "GRAPHQL_API_KEY", "GRAPHQL_TIMEOUT", "GRAPHQL_ENCODING"):
            monkeypatch.delenv(name, raising=False)

        config = GraphqlApiConfig.from_env()

        assert config.endpoint == "https://graphql-pokemon.now.sh/graphql"
        assert config.api_key == ""
        assert config.timeout == 60
        assert config.encoding == "utf-8"

    def test_from_env(self, monkeypatch):
        """Environment variables override defaults."""
        monkeypatch.setenv("GRAPHQL_ENDPOINT", "http://localhost:4000/graphql")
        monkeypatch.setenv("GRAPHQL_TIMEOUT", "15")
        monkeypatch.setenv("GRAPHQL_ENCODING", "latin-1")
        monkeypatch.setenv("GRAPHQL_OUTPUT_DIR", "/tmp/payloads")

        config = AppConfig.from_env()

        assert config.output_dir == "/tmp/payloads"
        assert config.graphql.endpoint == "http://localhost:4000/graphql"
        assert config.graphql.timeout == 15
        assert config.graphql.encoding == "latin-1"

    def test_nested_config_filled_in(self):
        """AppConfig always carries a GraphQL config."""
        assert isinstance(AppConfig().graphql, GraphqlApiConfig)
