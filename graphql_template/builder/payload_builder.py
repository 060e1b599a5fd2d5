"""
Payload Builder - Turns a GraphQL document into an HTTP request body

Handles:
- Reading a document from an open stream or from a file path
- Line normalization (every line ends with a single newline)
- Embedding query text and variables into a compact JSON object
"""

import json
import logging
import re
from pathlib import Path
from typing import Any, IO, Mapping, Optional, Union

from config import app_config

logger = logging.getLogger(__name__)

# Same terminators a line-by-line reader recognises
LINE_BREAK = re.compile(r"\r\n|\r|\n")


class PayloadBuilder:
    """
    Builds GraphQL request payloads from query documents

    Usage:
    ```python
    builder = PayloadBuilder()

    with open("pokemon.graphql") as stream:
        payload = builder.parse_graphql(stream, {"name": "Pikachu"})

    payload = builder.parse_graphql_file("pokemon.graphql")
    # Returns: '{"query":"query { ... }\\n","variables":null}'
    ```
    """

    def __init__(self, encoding: Optional[str] = None):
        """
        Initialize PayloadBuilder

        Args:
            encoding: Text encoding for files and binary streams.
                      Defaults to the configured GraphQL encoding.
        """
        self.encoding = encoding or app_config.graphql.encoding

    def read_all(self, source: IO) -> str:
        """
        Read a stream to the end, terminating every line with a newline

        The stream is left open; closing it is the caller's job.

        Args:
            source: Readable text or binary stream

        Returns:
            Query text, or an empty string for an empty stream
        """
        content = source.read()
        if isinstance(content, bytes):
            content = content.decode(self.encoding)

        lines = LINE_BREAK.split(content)
        # A final terminator (or an empty stream) leaves an empty tail
        if lines[-1] == "":
            lines.pop()

        logger.debug(f"Read {len(lines)} lines from {getattr(source, 'name', 'stream')}")
        return "".join(f"{line}\n" for line in lines)

    def read_file(self, path: Union[str, Path]) -> str:
        """Open a file, read it with read_all and close it again"""
        with open(path, "r", encoding=self.encoding, newline="") as handle:
            return self.read_all(handle)

    def build(self, query: str, variables: Optional[Mapping[str, Any]] = None) -> str:
        """
        Build the JSON request body

        Args:
            query: Full query text
            variables: Query variables, or None when the query takes none

        Returns:
            Compact JSON string with "query" and "variables" keys

        Raises:
            TypeError: If query is not a string or variables are not serializable
            ValueError: If variables contain NaN or infinite floats
        """
        if not isinstance(query, str):
            raise TypeError(f"query must be str, not {type(query).__name__}")

        payload = {
            "query": query,
            "variables": dict(variables) if variables is not None else None,
        }

        return json.dumps(
            payload,
            ensure_ascii=False,
            allow_nan=False,
            separators=(",", ":"),
        )

    def parse_graphql(self, stream: IO, variables: Optional[Mapping[str, Any]] = None) -> str:
        """Build a payload from an already open stream"""
        return self.build(self.read_all(stream), variables)

    def parse_graphql_file(
        self,
        path: Union[str, Path],
        variables: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Build a payload from a GraphQL file"""
        return self.build(self.read_file(path), variables)


# ============================================================================
# Builder convenience functions
# ============================================================================


def parse_graphql(
    stream: IO,
    variables: Optional[Mapping[str, Any]] = None,
    encoding: Optional[str] = None,
) -> str:
    """Build a payload from an open stream, leaving it open"""
    return PayloadBuilder(encoding).parse_graphql(stream, variables)


def parse_graphql_file(
    path: Union[str, Path],
    variables: Optional[Mapping[str, Any]] = None,
    encoding: Optional[str] = None,
) -> str:
    """Build a payload from a GraphQL file"""
    return PayloadBuilder(encoding).parse_graphql_file(path, variables)
