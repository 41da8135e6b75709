# src/fixer/adapters/providers/fixer.py
"""
Fixer API Client for Foreign Exchange Rates

This module implements the client for the foreign exchange rates and currency
conversion API. It composes request URLs from the configured base URL, path
and query attributes, sends them over a requests.Session, classifies the
response status and decodes successful bodies into Response models.

Files that USE this module:
- fixer.application.rates_service (default clients and free functions)
- fixer.app (command-line converter)
- tests.test_client (unit tests)

Files that this module USES:
- fixer.adapters.providers.base (RateProvider interface)
- fixer.adapters.providers.options (Option type applied at construction)
- fixer.domain.errors (status classification)
- fixer.domain.models (Response model, date formatting)
"""
import logging
import re
import urllib.parse
from datetime import date
from typing import Dict, Iterable, Mapping, Optional

import requests

from fixer.adapters.providers.base import RateProvider
from fixer.adapters.providers.options import Option
from fixer.domain.errors import response_error
from fixer.domain.models import Response, format_date

log = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://data.fixer.io/api"
DEFAULT_USER_AGENT = "fixer/client.py (+https://fixer.io)"
DEFAULT_TIMEOUT_SECONDS = 20.0

# Only these keys survive merging of query attributes
QUERY_KEYS = ("base", "symbols")

# Bytes read from an unconsumed body before closing, so the connection can be reused
DRAIN_BYTES = 64

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")
_ACCESS_KEY_RE = re.compile(r"(access_key=)[^&#]*")


def _check_reference(raw: str) -> None:
    """
    Reject strings that are not valid URL references.

    Raises:
        requests.exceptions.InvalidURL: If raw contains control characters, has
            a colon in its first segment without a valid scheme, or names a
            scheme without a host
    """
    if any(ord(ch) < 0x20 or ord(ch) == 0x7F for ch in raw):
        raise requests.exceptions.InvalidURL(f"parse {raw!r}: invalid control character in URL")

    head = re.split(r"[/?#]", raw, maxsplit=1)[0]
    if ":" not in head:
        return

    scheme = head.split(":", 1)[0]
    if not scheme:
        raise requests.exceptions.InvalidURL(f"parse {raw}: missing protocol scheme")
    if not _SCHEME_RE.match(scheme):
        raise requests.exceptions.InvalidURL(
            f"parse {raw}: first path segment in URL cannot contain colon"
        )
    if not urllib.parse.urlsplit(raw).netloc:
        raise requests.exceptions.InvalidURL(f"parse {raw}: missing host")


def _redact(url: str) -> str:
    """Hide the access key in URLs written to logs."""
    return _ACCESS_KEY_RE.sub(r"\1***", url)


def _discard(response: Optional[requests.Response]) -> None:
    """Drain a little of the body and close it; failures are only logged."""
    if response is None:
        return
    try:
        for _ in response.iter_content(DRAIN_BYTES):
            break
    except (requests.exceptions.RequestException, OSError) as e:
        log.debug("Could not drain response body: %s", e)
    finally:
        response.close()


class Client(RateProvider):
    """
    Client for the foreign exchange rates and currency conversion API.

    Configuration is fixed at construction:

        client = Client(base_url("https://api.exchangeratesapi.io"), access_key("..."))

    The client holds no per-request state and can be shared between threads.
    """

    def __init__(self, *options: Option):
        """
        Create a client with defaults, then apply options in order.

        Defaults: a new requests.Session, 20 second timeout, DEFAULT_BASE_URL,
        no access key and DEFAULT_USER_AGENT.
        """
        self._session: requests.Session = requests.Session()
        self._timeout: float = DEFAULT_TIMEOUT_SECONDS
        self._base_url: str = DEFAULT_BASE_URL
        self._access_key: str = ""
        self._user_agent: str = DEFAULT_USER_AGENT

        for option in options:
            option(self)

    @property
    def session(self) -> requests.Session:
        return self._session

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def access_key(self) -> str:
        return self._access_key

    @property
    def user_agent(self) -> str:
        return self._user_agent

    def __repr__(self) -> str:
        return f"Client(base_url={self._base_url!r}, timeout={self._timeout!r})"

    def latest(self, *attributes: Mapping[str, str], timeout: Optional[float] = None) -> Response:
        """
        Get the latest foreign exchange reference rates.

        Args:
            *attributes: Query attributes from base() and symbols()
            timeout: Optional timeout in seconds for this call only

        Returns:
            Response with links set to the base URL and the request URL

        Raises:
            APIError: If the API answers with an error status
            requests.RequestException: If the request could not be built or sent
            ValueError: If the body is not a valid Response document
        """
        return self._get("/latest", self._query(attributes), timeout)

    def at(
        self, when: date, *attributes: Mapping[str, str], timeout: Optional[float] = None
    ) -> Response:
        """
        Get historical rates for any day since 1999.

        Aware datetimes are projected to UTC before the day is taken; naive
        values are used as given.
        """
        return self._get("/" + format_date(when), self._query(attributes), timeout)

    def _query(self, attributes: Iterable[Mapping[str, str]]) -> Dict[str, str]:
        query: Dict[str, str] = {}
        for a in attributes:
            if not a:
                continue
            for key in QUERY_KEYS:
                value = a.get(key)
                if value:
                    query[key] = value
        return query

    def _url(self, path: str, query: Mapping[str, str]) -> str:
        query = dict(query)
        if self._access_key:
            query["access_key"] = self._access_key

        base = urllib.parse.urlsplit(self._base_url)
        raw = base.path.rstrip("/") + path
        if query:
            raw += "?" + urllib.parse.urlencode(query)

        _check_reference(raw)
        return urllib.parse.urljoin(self._base_url, raw)

    def _get(self, path: str, query: Mapping[str, str], timeout: Optional[float] = None) -> Response:
        url = self._url(path, query)
        r = self._do(url, timeout)
        r.links = {
            "base": self._base_url,
            "self": url,
        }
        return r

    def _do(self, url: str, timeout: Optional[float] = None) -> Response:
        headers = {
            "Accept": "application/json",
            "User-Agent": self._user_agent,
        }

        log.debug("GET %s", _redact(url))
        try:
            resp = self._session.get(
                url,
                headers=headers,
                timeout=timeout or self._timeout,
                stream=True,
            )
        except requests.exceptions.Timeout:
            log.warning("Rates API timeout after %ss: %s", timeout or self._timeout, _redact(url))
            raise
        except requests.exceptions.RequestException as e:
            log.warning("Rates API request failed: %s", _redact(str(e)))
            raise

        try:
            error = response_error(resp)
            if error is not None:
                log.warning("Rates API returned %s for %s", error, _redact(url))
                raise error

            data = resp.json()
            return Response.model_validate(data)
        finally:
            _discard(resp)
