"""GraphQL template - build GraphQL request payloads from query files."""

from .builder import PayloadBuilder, parse_graphql, parse_graphql_file

__version__ = "0.1.0"

__all__ = [
    "PayloadBuilder",
    "parse_graphql",
    "parse_graphql_file",
]
