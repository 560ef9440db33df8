"""Utility functions for loading content type schemas.

This module provides a small Delivery API client and a loader for JSON
dumps of the '/types' endpoint, with proper error handling and validation.
"""

import json
from pathlib import Path
from typing import Any, List
from urllib.parse import urlparse

import requests

from .codegen.core.config import DEFAULT_BASE_URL
from .codegen.core.schema import ContentTypeSchema, SchemaError, convert_delivery_types
from .logging_config import get_logger

logger = get_logger(__name__)


class FetchFailure(Exception):
    """Raised when content types cannot be retrieved."""

    pass


class DeliveryClient:
    """Read-only client for the content types of a Kontent project."""

    def __init__(
        self,
        project_id: str,
        secure_access_key: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: int = 30,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize client.

        Args:
            project_id: Kontent project identifier.
            secure_access_key: Enables secured Delivery API access when set.
            base_url: Delivery API root.
            timeout: Request timeout in seconds.
            session: Session to reuse, a new one by default.
        """
        if not project_id:
            raise ValueError("project_id is required")

        self.project_id = project_id
        self.secure_access_key = secure_access_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    @property
    def types_url(self) -> str:
        return f"{self.base_url}/{self.project_id}/types"

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.secure_access_key:
            headers["Authorization"] = f"Bearer {self.secure_access_key}"
        return headers

    def get_types(self) -> List[ContentTypeSchema]:
        """Fetch all content types, following pagination.

        Returns:
            Content types in the order served by the API.

        Raises:
            FetchFailure: If a request fails or a response is not valid.
        """
        types: List[ContentTypeSchema] = []
        url: str | None = self.types_url

        while url:
            payload = self._get_json(url)
            try:
                types.extend(convert_delivery_types(payload))
            except SchemaError as e:
                logger.error(f"Unexpected types response from {url}: {e}")
                raise FetchFailure(f"Unexpected types response from {url}: {e}") from e

            pagination = payload.get("pagination") if isinstance(payload, dict) else None
            pagination = pagination or {}
            url = pagination.get("next_page") or None

        logger.info(f"Fetched {len(types)} content type(s) for project {self.project_id}")
        return types

    def _get_json(self, url: str) -> Any:
        logger.debug(f"Requesting {url}")

        parsed_url = urlparse(url)
        if not all([parsed_url.scheme, parsed_url.netloc]):
            logger.error(f"Invalid URL format: {url}")
            raise FetchFailure(f"Invalid URL: {url}")

        try:
            response = self.session.get(url, headers=self._headers(), timeout=self.timeout)
            response.raise_for_status()
            return response.json()

        except requests.exceptions.Timeout as e:
            logger.error(f"Request timeout for URL: {url}")
            raise FetchFailure(f"Request timeout for URL: {url}") from e
        except requests.exceptions.ConnectionError as e:
            logger.error(f"Connection error for URL {url}: {e}")
            raise FetchFailure(f"Connection error for URL: {url}") from e
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else "unknown"
            logger.error(f"HTTP error {status} for URL: {url}")
            raise FetchFailure(f"HTTP error {status} for URL: {url}") from e
        except requests.exceptions.JSONDecodeError as e:
            logger.error(f"Invalid JSON response from URL {url}: {e}")
            raise FetchFailure(f"Invalid JSON response from URL {url}: {e}") from e
        except requests.exceptions.RequestException as e:
            logger.error(f"Request error for URL {url}: {e}", exc_info=True)
            raise FetchFailure(f"Request error for URL {url}: {e}") from e


def load_types_from_file(file_path: str | Path) -> List[ContentTypeSchema]:
    """Load content types from a JSON dump of the '/types' endpoint.

    Args:
        file_path: Path to the JSON file.

    Returns:
        Content types in file order.

    Raises:
        FileNotFoundError: If file doesn't exist.
        FetchFailure: If the file cannot be read or is not a types payload.
    """
    file_path = Path(file_path)
    logger.debug(f"Loading content types from file: {file_path}")

    if not file_path.exists():
        logger.error(f"File not found: {file_path}")
        raise FileNotFoundError(f"File not found: {file_path}")

    try:
        with file_path.open("r", encoding="utf-8") as f:
            payload = json.load(f)
        types = convert_delivery_types(payload)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in file {file_path}: {e}")
        raise FetchFailure(f"Invalid JSON in file {file_path}: {e}") from e
    except SchemaError as e:
        logger.error(f"Invalid types payload in {file_path}: {e}")
        raise FetchFailure(f"Invalid types payload in {file_path}: {e}") from e
    except OSError as e:
        logger.error(f"Error reading file {file_path}: {e}", exc_info=True)
        raise FetchFailure(f"Error reading file {file_path}: {e}") from e

    logger.info(f"Loaded {len(types)} content type(s) from {file_path}")
    return types
