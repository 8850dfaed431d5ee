"""
Remote user source for the User Dashboard.

One HTTP GET to a fixed URL returning a JSON array of user objects. Failures
surface as a single FetchError; there is no retry.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import requests

from user_dashboard.config import get_settings
from user_dashboard.exceptions import FetchError
from user_dashboard.utils.logging import get_logger

log = get_logger(__name__)


class RemoteUserSource:
    """
    Fetch the user collection from the configured endpoint.
    """

    def __init__(self, url: Optional[str] = None, timeout: Optional[float] = None) -> None:
        settings = get_settings()
        self.url = url or settings.api_url
        self.timeout = timeout or settings.request_timeout_seconds

    def fetch(self) -> List[Dict[str, Any]]:
        """
        Issue the GET and decode the body.

        Returns
        -------
        list[dict]
            Users in the order the endpoint returned them.

        Raises
        ------
        FetchError
            Transport failure, non-2xx status, or a body that is not a JSON array.
        """
        log.info("Fetching users", extra={"url": self.url})
        try:
            response = requests.get(
                self.url, timeout=self.timeout, headers={"Accept": "application/json"}
            )
        except requests.RequestException as exc:
            log.error("User fetch failed", extra={"url": self.url, "error": str(exc)})
            raise FetchError(str(exc)) from exc

        if not response.ok:
            log.error(
                "User fetch returned non-OK status",
                extra={"url": self.url, "status_code": response.status_code},
            )
            raise FetchError("Network response was not ok")

        try:
            payload = response.json()
        except ValueError as exc:
            raise FetchError(f"Response body is not valid JSON: {exc}") from exc

        if not isinstance(payload, list):
            raise FetchError("Expected a JSON array of users")

        log.info("Users fetched", extra={"url": self.url, "count": len(payload)})
        return payload


__all__ = ["RemoteUserSource"]
