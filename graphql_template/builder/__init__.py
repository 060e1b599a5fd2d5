"""
Payload Builder Module

Converts GraphQL documents into JSON request bodies:
- Stream and file readers with newline-terminated lines
- Compact {"query": ..., "variables": ...} encoding
"""

from .payload_builder import PayloadBuilder, parse_graphql, parse_graphql_file

__all__ = [
    "PayloadBuilder",
    "parse_graphql",
    "parse_graphql_file",
]
