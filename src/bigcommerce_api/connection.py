"""HTTP connection used by the client."""

import base64
import logging
from dataclasses import dataclass, field
from typing import Any, Optional

import requests
from requests.adapters import HTTPAdapter
from requests.structures import CaseInsensitiveDict

from .constants import CLIENT_ERROR_RANGE, MEDIA_TYPE_JSON, SERVER_ERROR_RANGE
from .exceptions import ClientError, ServerError

logger = logging.getLogger(__name__)


@dataclass
class ResponseInfo:
    """Status, headers and raw body of the last response."""

    status: int = 0
    reason: str = ""
    headers: CaseInsensitiveDict = field(default_factory=CaseInsensitiveDict)
    body: str = ""


class Connection:
    """A requests session with JSON defaults and status code classification."""

    def __init__(self, verify_peer: bool = True, timeout: Optional[float] = None):
        """Initialize the session with JSON accept/content-type headers."""
        self.verify_peer = verify_peer
        self.timeout = timeout
        self.session = requests.Session()

        adapter = HTTPAdapter()
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)

        self.session.headers.update({
            "Accept": MEDIA_TYPE_JSON,
            "Content-Type": MEDIA_TYPE_JSON,
        })
        self.last_response = ResponseInfo()

    def authenticate_basic(self, username: str, password: str) -> None:
        """Set the HTTP basic authentication header."""
        token = base64.b64encode(f"{username}:{password}".encode()).decode("ascii")
        self.add_header("Authorization", f"Basic {token}")

    def authenticate_oauth(self, client_id: str, auth_token: str) -> None:
        """Set the OAuth client and token headers."""
        self.add_header("X-Auth-Client", client_id)
        self.add_header("X-Auth-Token", auth_token)

    def add_header(self, header: str, value: str) -> None:
        self.session.headers[header] = str(value)

    def remove_header(self, header: str) -> None:
        self.session.headers.pop(header, None)

    @property
    def request_headers(self) -> dict:
        return dict(self.session.headers)

    def get_header(self, header: str) -> Optional[str]:
        """Header from the last response, if any."""
        return self.last_response.headers.get(header)

    def _handle_response(self, response: requests.Response) -> None:
        """Record the response and raise on 4xx/5xx."""
        self.last_response = ResponseInfo(
            status=response.status_code,
            reason=response.reason or "",
            headers=CaseInsensitiveDict(response.headers),
            body=response.text,
        )
        logger.debug(f"Response status {response.status_code} {response.reason}")

        if response.status_code in CLIENT_ERROR_RANGE:
            logger.debug(f"Client error body: {response.text}")
            raise ClientError(response.text, response.status_code)
        if response.status_code in SERVER_ERROR_RANGE:
            logger.error(f"BigCommerce server error (HTTP {response.status_code})")
            raise ServerError(response.text, response.status_code)

    def request(self, method: str, url: str, body: Any = None,
                query: Optional[dict] = None) -> Any:
        """Perform one HTTP exchange and return the decoded JSON body.

        Returns None when the response has no body. Network failures and
        undecodable bodies propagate as requests exceptions.
        """
        logger.debug(f"{method} {url}")
        response = self.session.request(
            method,
            url,
            params=query,
            json=body,
            verify=self.verify_peer,
            timeout=self.timeout,
        )
        self._handle_response(response)

        if method == "HEAD" or not response.text.strip():
            return None
        return response.json()

    def get(self, url: str, query: Optional[dict] = None) -> Any:
        return self.request("GET", url, query=query)

    def post(self, url: str, body: Any) -> Any:
        return self.request("POST", url, body=body)

    def put(self, url: str, body: Any) -> Any:
        return self.request("PUT", url, body=body)

    def delete(self, url: str) -> None:
        self.request("DELETE", url)

    def head(self, url: str) -> None:
        self.request("HEAD", url)
