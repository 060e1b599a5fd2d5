"""Application configuration."""
import os
from dataclasses import dataclass


@dataclass
class GraphqlApiConfig:
    """GraphQL endpoint configuration."""

    endpoint: str = "https://graphql-pokemon.now.sh/graphql"
    api_key: str = ""  # Optional bearer token
    timeout: int = 60
    encoding: str = "utf-8"

    @classmethod
    def from_env(cls) -> "GraphqlApiConfig":
        """Load config from environment variables."""
        return cls(
            endpoint=os.getenv("GRAPHQL_ENDPOINT", "https://graphql-pokemon.now.sh/graphql"),
            api_key=os.getenv("GRAPHQL_API_KEY", ""),
            timeout=int(os.getenv("GRAPHQL_TIMEOUT", "60")),
            encoding=os.getenv("GRAPHQL_ENCODING", "utf-8"),
        )


@dataclass
class AppConfig:
    """Application configuration."""

    output_dir: str = "./output"
    graphql: GraphqlApiConfig = None

    def __post_init__(self):
        """Fill in defaults."""
        if self.graphql is None:
            self.graphql = GraphqlApiConfig.from_env()

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Load config from environment variables."""
        return cls(
            output_dir=os.getenv("GRAPHQL_OUTPUT_DIR", "./output"),
            graphql=GraphqlApiConfig.from_env(),
        )


# Global instance
app_config = AppConfig()
