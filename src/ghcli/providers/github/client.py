"""GitHub REST adapter for listing and closing milestones."""

from __future__ import annotations

import logging
from types import TracebackType

import httpx
from pydantic import TypeAdapter, ValidationError

from ghcli._version import package_version
from ghcli.auth.base import Credentials
from ghcli.contracts.client import MilestoneClient
from ghcli.contracts.config import DEFAULT_API_URL
from ghcli.contracts.milestone import GroupMember, Milestone
from ghcli.contracts.results import CloseFailure, CloseResult, CloseSuccess, FetchFailure, FetchResult, FetchSuccess

_LOG = logging.getLogger(__name__)

ACCEPT_HEADER = "application/vnd.github.v3+json"
_PAGE_SIZE = 100
_MAX_PAGES = 100
_MILESTONE_LIST = TypeAdapter(list[Milestone])


class GitHubMilestoneClient(MilestoneClient):
    """Issues basic-authenticated REST calls against one GitHub API host.

    A single ``httpx.AsyncClient`` is opened on ``__aenter__`` and shared by
    every concurrent call of the run. Remote failures are returned as
    :class:`FetchFailure` / :class:`CloseFailure` values and logged as
    warnings; they are never raised.
    """

    def __init__(
        self,
        *,
        credentials: Credentials,
        api_url: str = DEFAULT_API_URL,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 30.0,
    ) -> None:
        self._credentials = credentials
        self._api_url = api_url.rstrip("/")
        self._transport = transport
        self._timeout = timeout
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> GitHubMilestoneClient:
        await self._open_transport()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def list_milestones(self, repository: str) -> FetchResult:
        client = self._require_client()
        url: str | None = f"/repos/{repository}/milestones"
        params: dict[str, str | int] | None = {"state": "open", "per_page": _PAGE_SIZE}
        milestones: list[Milestone] = []
        pages = 0

        while url is not None:
            pages += 1
            if pages > _MAX_PAGES:
                return self._fetch_failed(repository, "pagination exceeded safety budget")

            _LOG.debug("GET %s", url)
            try:
                response = await client.get(url, params=params)
            except (httpx.HTTPError, httpx.InvalidURL) as exc:
                return self._fetch_failed(repository, f"request error: {exc}")

            if not response.is_success:
                return self._fetch_failed(repository, response.reason_phrase, status_code=response.status_code)

            try:
                milestones.extend(_MILESTONE_LIST.validate_json(response.content))
            except ValidationError:
                return self._fetch_failed(repository, "malformed milestone payload", status_code=response.status_code)

            next_link = response.links.get("next")
            url = next_link.get("url") if next_link else None
            params = None

        _LOG.debug("Fetched %d milestone(s) from %s", len(milestones), repository)
        return FetchSuccess(repository=repository, milestones=milestones)

    async def close_milestone(self, member: GroupMember) -> CloseResult:
        client = self._require_client()
        _LOG.debug("PATCH %s", member.locator)
        try:
            response = await client.patch(member.locator, json={"state": "closed"})
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            _LOG.warning("Failed to close milestone for repository %s: %s", member.repository, exc)
            return CloseFailure(member=member, reason=f"request error: {exc}")

        if not response.is_success:
            _LOG.warning(
                "Failed to close milestone for repository %s (status code %d)",
                member.repository,
                response.status_code,
            )
            return CloseFailure(member=member, reason=response.reason_phrase, status_code=response.status_code)

        return CloseSuccess(member=member)

    async def _open_transport(self) -> None:
        self._client = httpx.AsyncClient(
            base_url=self._api_url,
            auth=httpx.BasicAuth(self._credentials.username, self._credentials.token),
            headers={
                "Accept": ACCEPT_HEADER,
                "User-Agent": f"gh-cli/{package_version()}",
            },
            timeout=httpx.Timeout(self._timeout),
            transport=self._transport,
        )

    def _require_client(self) -> httpx.AsyncClient:
        if self._client is None:
            raise RuntimeError("GitHubMilestoneClient must be used as an async context manager")
        return self._client

    @staticmethod
    def _fetch_failed(repository: str, reason: str, *, status_code: int | None = None) -> FetchFailure:
        if status_code is None:
            _LOG.warning("Request to %s failed: %s", repository, reason)
        else:
            _LOG.warning("Request to %s failed with status code %d", repository, status_code)
        return FetchFailure(repository=repository, reason=reason, status_code=status_code)
