"""GraphQL HTTP client."""
import json
import logging
from typing import Any, Dict

import requests

from config import GraphqlApiConfig

logger = logging.getLogger(__name__)


class GraphqlClient:
    """Posts prebuilt payloads to a GraphQL endpoint."""

    CONTENT_TYPE = "application/json; charset=utf-8"

    def __init__(self, config: GraphqlApiConfig):
        """Initialize client."""
        self.config = config
        self.session = requests.Session()
        self.session.headers.update({"Content-Type": self.CONTENT_TYPE})

        if config.api_key:
            self.session.headers.update({"Authorization": f"Bearer {config.api_key}"})

    def post(self, payload: str) -> requests.Response:
        """Send a payload string as the POST body."""
        logger.debug(f"POST {self.config.endpoint} ({len(payload)} chars)")
        return self.session.post(
            self.config.endpoint,
            data=payload.encode("utf-8"),
            timeout=self.config.timeout,
        )

    def execute(self, payload: str) -> Dict[str, Any]:
        """
        Send a payload and decode the response.

        Raises:
            requests.HTTPError: If the endpoint answers with 4xx/5xx
            requests.RequestException: On connection failures
            ValueError: If the response body is not JSON
        """
        response = self.post(payload)
        response.raise_for_status()

        result = response.json()
        logger.info(f"GraphQL request to {self.config.endpoint} returned {response.status_code}")

        if isinstance(result, dict) and result.get("errors"):
            logger.warning(f"GraphQL errors: {json.dumps(result['errors'])}")

        return result
