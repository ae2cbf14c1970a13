"""
WebLink Adapter — Session-cookie client for Laserfiche WebLink portals.

Handles the portal's quirks:
1. Redirects are chased by hand so every hop's Set-Cookie lands in the jar
2. Session bootstrap is a welcome-page hit plus the public auto-login page
3. Folder listings come from an AJAX page method that silently returns
   nothing unless the JSON + XMLHttpRequest headers are all present

Listing payloads are decoded by extractors/listing.py.
"""

import json
from urllib.parse import urlparse

import httpx

from extractors.listing import decode_page, unwrap_envelope
from logging_config import logger, log_api_call, log_api_result, log_redirect
from models import (
    ErrorKind,
    FolderContents,
    FolderEntry,
    WebLinkConfig,
    WeblinkError,
)

__all__ = [
    "WebLinkClient",
    "PAGE_SIZE",
    "BROWSE_PAGE_SIZE",
    "ROOT_FOLDER_ID",
]

# Default timeout for HTTP requests (seconds)
HTTP_TIMEOUT = 30

# The portal serves different markup to unknown clients
USER_AGENT = "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36"

REDIRECT_STATUSES = frozenset({301, 302, 303, 307, 308})

# Hops followed before giving up and returning the redirect itself
MAX_REDIRECTS = 20

LISTING_PATH = "FolderListingService.aspx/GetFolderListing2"

# CRITICAL: all three are required; without them the service answers 200
# with an empty listing even on a valid session.
LISTING_HEADERS = {
    "Content-Type": "application/json; charset=utf-8",
    "Accept": "application/json",
    "X-Requested-With": "XMLHttpRequest",
}

PAGE_SIZE = 500
BROWSE_PAGE_SIZE = 100
ROOT_FOLDER_ID = 1


class WebLinkClient:
    """
    Client for one WebLink portal.

    Holds the session cookie jar for its lifetime. Not safe for concurrent
    use: every request mutates the jar.

    Example:
        client = WebLinkClient(config)
        client.init_session()
        contents = client.get_all_entries(874714)
    """

    def __init__(self, config: WebLinkConfig):
        self.config = config
        self._cookies: dict[str, str] = {}

    @property
    def cookies(self) -> dict[str, str]:
        """Copy of the session cookie jar."""
        return dict(self._cookies)

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def _cookie_header(self) -> str:
        return "; ".join(f"{name}={value}" for name, value in self._cookies.items())

    def _store_cookies(self, response: httpx.Response) -> None:
        """Merge every Set-Cookie from the response into the jar."""
        for set_cookie in response.headers.get_list("set-cookie"):
            name_value = set_cookie.split(";", 1)[0]
            name, sep, value = name_value.partition("=")
            name = name.strip()
            if not sep or not name:
                continue
            self._cookies[name] = value.strip()

    def _resolve_url(self, url: str) -> str:
        if url.startswith("http"):
            return url
        if url.startswith("/"):
            parsed = urlparse(self.config.base_url)
            return f"{parsed.scheme}://{parsed.netloc}{url}"
        return f"{self.config.base_url}/{url}"

    def authenticated_fetch(
        self,
        url: str,
        method: str = "GET",
        headers: dict[str, str] | None = None,
        content: str | bytes | None = None,
    ) -> httpx.Response:
        """
        Send a request carrying the session cookies, chasing redirects by hand.

        Args:
            url: Absolute URL, origin-relative path ("/x") or base-relative path
            method: HTTP method
            headers: Extra headers; these win over the defaults on conflict
            content: Request body

        Returns:
            The first non-redirect response (or the last redirect once
            MAX_REDIRECTS hops have been followed)

        Raises:
            WeblinkError: On timeout, connection failure or an unusable URL
        """
        return self._fetch(url, method, headers, content, hops=0)

    def _fetch(
        self,
        url: str,
        method: str,
        headers: dict[str, str] | None,
        content: str | bytes | None,
        hops: int,
    ) -> httpx.Response:
        full_url = self._resolve_url(url)
        request_headers = {
            "User-Agent": USER_AGENT,
            "Accept": "*/*",
            "Cookie": self._cookie_header(),
            **(headers or {}),
        }

        log_api_call(method, full_url, hop=hops or None)
        try:
            with httpx.Client(
                follow_redirects=False,
                timeout=httpx.Timeout(HTTP_TIMEOUT),
            ) as client:
                response = client.request(
                    method,
                    full_url,
                    headers=request_headers,
                    content=content,
                )
        except httpx.TimeoutException:
            raise WeblinkError(ErrorKind.TIMEOUT, f"Request timed out: {full_url}")
        except httpx.RequestError as e:
            raise WeblinkError(ErrorKind.NETWORK_ERROR, f"Request failed: {full_url} - {e}")
        except httpx.InvalidURL as e:
            # Not a RequestError; raised for e.g. control characters in a Location
            raise WeblinkError(ErrorKind.NETWORK_ERROR, f"Invalid URL: {full_url!r} - {e}")

        self._store_cookies(response)
        log_api_result(method, full_url, response.status_code, len(self._cookies))

        location = response.headers.get("location")
        if location and response.status_code in REDIRECT_STATUSES:
            if hops >= MAX_REDIRECTS:
                logger.warning(
                    f"Stopped after {MAX_REDIRECTS} redirects at {full_url} -> {location}"
                )
                return response
            log_redirect(response.status_code, location, hops + 1)
            return self._fetch(location, method, headers, content, hops=hops + 1)

        return response

    # ------------------------------------------------------------------
    # Session
    # ------------------------------------------------------------------

    def init_session(self) -> bool:
        """
        Establish session cookies via the welcome page and public auto-login.

        Returns:
            True if the portal set at least one cookie. This is a heuristic:
            it does not prove later listing calls will be accepted.

        Raises:
            WeblinkError: On transport failure
        """
        base = self.config.base_url
        self.authenticated_fetch(f"{base}/")
        self.authenticated_fetch(
            f"{base}/Login.aspx?dbid={self.config.dbid}&repo={self.config.repo_name}"
        )
        if not self._cookies:
            logger.warning(f"No session cookies received from {base}")
        return len(self._cookies) > 0

    # ------------------------------------------------------------------
    # Listings
    # ------------------------------------------------------------------

    def get_folder_listing(
        self,
        folder_id: int,
        start: int = 0,
        end: int = PAGE_SIZE,
    ) -> dict | None:
        """
        Fetch one raw page of a folder listing.

        Returns:
            The parsed JSON envelope, or None on a non-success status, an
            unparseable body, or a transport failure. Never raises.
        """
        body = {
            "repoName": self.config.repo_name,
            "folderId": folder_id,
            "getNewListing": True,
            "start": start,
            "end": end,
            "sortColumn": "name",
            "sortAscending": True,
        }

        try:
            response = self.authenticated_fetch(
                f"{self.config.base_url}/{LISTING_PATH}",
                method="POST",
                headers=LISTING_HEADERS,
                content=json.dumps(body, separators=(",", ":")),
            )
        except WeblinkError as e:
            logger.warning(f"Listing request failed for folder {folder_id}: {e.message}")
            return None

        if not response.is_success:
            logger.warning(f"Listing for folder {folder_id} returned HTTP {response.status_code}")
            return None

        try:
            return response.json()
        except ValueError:
            logger.warning(f"Listing for folder {folder_id} was not valid JSON")
            return None

    def get_all_entries(self, folder_id: int) -> FolderContents:
        """
        Fetch every entry of a folder, page by page.

        Name and total are taken from the first page only. Paging stops once
        the offset reaches the reported total, when a page comes back without
        a payload, or when a page has no rows.
        """
        entries: list[FolderEntry] = []
        folder_name = ""
        total_entries = 0
        first_page = True
        start = 0

        while True:
            payload = unwrap_envelope(
                self.get_folder_listing(folder_id, start, start + PAGE_SIZE)
            )
            if payload is None:
                break

            page = decode_page(payload)
            if first_page:
                folder_name = page.name
                total_entries = page.total_entries
                first_page = False

            entries.extend(page.entries)
            start += PAGE_SIZE

            if start >= total_entries:
                break
            if not page.entries:
                logger.warning(
                    f"Folder {folder_id}: empty page at offset {start - PAGE_SIZE} "
                    f"with {total_entries} reported, stopping"
                )
                break

        logger.info(f"Folder {folder_id}: {len(entries)} of {total_entries} entries")
        return FolderContents(
            folder_name=folder_name,
            entries=entries,
            total_entries=total_entries,
        )

    def browse_folder(self, folder_id: int) -> FolderContents:
        """First page (up to 100 entries) of a folder, for interactive browsing."""
        payload = unwrap_envelope(self.get_folder_listing(folder_id, 0, BROWSE_PAGE_SIZE))
        if payload is None:
            return FolderContents(folder_name="")

        page = decode_page(payload)
        return FolderContents(
            folder_name=page.name,
            entries=page.entries[:BROWSE_PAGE_SIZE],
            total_entries=page.total_entries,
        )

    def get_root_folder(self) -> FolderContents:
        return self.browse_folder(ROOT_FOLDER_ID)
