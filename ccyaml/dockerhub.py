"""Querying Docker Hub for repositories and tags."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Optional
from urllib.parse import urlencode

import requests

BASE_URL = "https://hub.docker.com/v2"
USER_AGENT = "ccyaml"
_TIMEOUT = 30

_NAMESPACE = re.compile(r"^([a-z0-9\-_]+)/")
_IMAGE_NAME = re.compile(r"^([a-z0-9\-_]+/([a-z0-9\-_]+)|[a-z0-9\-_]+).*\Z")


class DockerHubError(Exception):
    """Raised when Docker Hub cannot be queried or answers nonsense."""


@dataclass
class RepoTag:
    """One tag of a repository."""

    tag_status: str = ""
    name: str = ""

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "RepoTag":
        return cls(
            tag_status=data.get("tag_status") or "",
            name=data.get("name") or "",
        )


@dataclass
class Repository:
    """A repository of a Docker Hub namespace."""

    name: str = ""
    namespace: str = ""
    repository_type: str = ""
    status: int = 0
    is_private: bool = False
    tags: list[RepoTag] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "Repository":
        return cls(
            name=data.get("name") or "",
            namespace=data.get("namespace") or "",
            repository_type=data.get("repository_type") or "",
            status=int(data.get("status") or 0),
            is_private=bool(data.get("is_private")),
        )


def _get(url: str) -> requests.Response:
    return requests.get(url, headers={"User-Agent": USER_AGENT}, timeout=_TIMEOUT)


def _get_json(url: str) -> dict[str, Any]:
    try:
        response = _get(url)
    except requests.RequestException as exc:
        raise DockerHubError("Failed to load next") from exc
    try:
        data = response.json()
    except ValueError as exc:
        raise DockerHubError(f"Invalid response from {url}") from exc
    if not isinstance(data, dict):
        raise DockerHubError(f"Invalid response from {url}")
    return data


@dataclass
class TagPage:
    """One page of tags as Docker Hub returns it."""

    count: int = 0
    next: str = ""
    previous: str = ""
    results: list[RepoTag] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "TagPage":
        return cls(
            count=int(data.get("count") or 0),
            next=data.get("next") or "",
            previous=data.get("previous") or "",
            results=[RepoTag.from_json(item) for item in data.get("results") or []],
        )

    def load_next(self) -> "TagPage":
        """Fetch the page that follows this one."""
        if not self.next:
            raise DockerHubError("Failed to fetch more tags: nothing to fetch")
        return fetch_tags_by_url(self.next)


def fetch_tags_by_url(query_url: str) -> TagPage:
    """Fetch one page of tags from a full URL."""
    return TagPage.from_json(_get_json(query_url))


def fetch_tags(namespace: str, repo: str, name: str) -> TagPage:
    """Fetch the first page of tags of a repository, filtered by ``name``."""
    params = {"page_size": "100"}
    if name:
        params["name"] = name
    query = urlencode(sorted(params.items()))
    url = f"{BASE_URL}/namespaces/{namespace}/repositories/{repo}/tags?{query}"
    return fetch_tags_by_url(url)


class HubNamespace:
    """The repositories of one namespace, loaded page after page."""

    def __init__(self, namespace: str) -> None:
        self.namespace = namespace
        self.next_url = ""
        self.has_loaded = False
        self.repositories: list[Repository] = []

    def load_next(self) -> list[Repository]:
        """Load the next page of repositories and return what it held."""
        if not self.has_loaded:
            url = f"{BASE_URL}/namespaces/{self.namespace}/repositories"
        elif not self.next_url:
            raise DockerHubError("No more to load")
        else:
            url = self.next_url

        data = _get_json(url)
        results = [Repository.from_json(item) for item in data.get("results") or []]
        self.repositories.extend(results)
        self.next_url = data.get("next") or ""
        self.has_loaded = True
        return results

    def find_by_name(self, name: str) -> Optional[Repository]:
        """The loaded repository called exactly ``name``, if any."""
        return next((repo for repo in self.repositories if repo.name == name), None)

    def search(self, query: str) -> "SearchCursor":
        return SearchCursor(self, query)


def _first_prefix_match(
    repositories: list[Repository], prefix: str
) -> tuple[Optional[Repository], int]:
    for index, repo in enumerate(repositories):
        if repo.name.startswith(prefix):
            return repo, index
    return None, -1


class SearchCursor:
    """Walks the repositories of a namespace whose name starts with a query."""

    def __init__(self, hub: HubNamespace, query: str) -> None:
        self.hub = hub
        self.query = query
        self.index = -1

    def has_next(self) -> bool:
        """Tell whether another match follows, loading pages as needed."""
        start = self.index + 1
        _, found = _first_prefix_match(self.hub.repositories[start:], self.query)
        while found < 0 and (self.hub.next_url or not self.hub.has_loaded):
            try:
                self.hub.load_next()
            except DockerHubError:
                break
            _, found = _first_prefix_match(self.hub.repositories[start:], self.query)
        return found >= 0

    def next(self) -> Optional[Repository]:
        """The next loaded match, or None."""
        start = self.index + 1
        repo, found = _first_prefix_match(self.hub.repositories[start:], self.query)
        if found >= 0:
            self.index += found + 1
        return repo

    def prev(self) -> Optional[Repository]:
        """The first match before the current one, or None."""
        if self.index <= 0:
            return None
        domain = self.hub.repositories[: self.index]
        repo, found = _first_prefix_match(domain, self.query)
        if found >= 0:
            self.index -= len(domain) - found
        return repo


class TagsSearchCursor:
    """Walks the tags of a repository, fetching pages as needed."""

    def __init__(self, query: str, first_page: TagPage) -> None:
        self.query = query
        self.index = 0
        self.results: list[RepoTag] = list(first_page.results)
        self.last_response = first_page

    def has_next(self) -> bool:
        if self.index >= len(self.results) - 1 and self.last_response.next:
            try:
                page = self.last_response.load_next()
            except DockerHubError:
                return False
            self.results.extend(page.results)
            self.last_response = page
        return self.index < len(self.results)

    def next(self) -> Optional[RepoTag]:
        if self.index >= len(self.results):
            return None
        tag = self.results[self.index]
        self.index += 1
        return tag

    def prev(self) -> Optional[RepoTag]:
        if self.index > len(self.results) - 1:
            back = self.results
        else:
            back = self.results[: self.index]
        if len(back) < 2:
            return None
        self.index -= 1
        return back[-2]


_namespaces: dict[str, HubNamespace] = {}


def _clear_namespaces() -> None:
    _namespaces.clear()
    _namespaces["library"] = HubNamespace("library")


_clear_namespaces()


def query_namespace(query: str) -> str:
    """The namespace a search query names, ``library`` when it names none."""
    match = _NAMESPACE.search(query)
    return match.group(1) if match else "library"


def query_image_name(query: str) -> str:
    """The image part of a search query."""
    match = _IMAGE_NAME.match(query)
    if match is None:
        return ""
    if _NAMESPACE.search(query):
        return match.group(2) or ""
    return match.group(1) or ""


def search(query: str) -> SearchCursor:
    """A cursor over the repositories matching ``namespace/prefix``."""
    namespace = query_namespace(query)
    image_name = query_image_name(query)
    hub = _namespaces.setdefault(namespace, HubNamespace(namespace))
    return hub.search(image_name)


def search_tags(namespace: str, repo: str, query: str) -> TagsSearchCursor:
    """A cursor over the tags of a repository whose name contains ``query``."""
    return TagsSearchCursor(query, fetch_tags(namespace, repo, query))


class DockerHubAPI:
    """Direct lookups of images and tags."""

    def __init__(self, base_url: str = BASE_URL) -> None:
        self.base_url = base_url.rstrip("/")

    def _repo_url(self, namespace: str, image: str) -> str:
        return f"{self.base_url}/namespaces/{namespace}/repositories/{image}"

    def does_image_exist(self, namespace: str, image: str) -> bool:
        hub = _namespaces.get(namespace)
        if hub is not None and hub.has_loaded and hub.find_by_name(image) is not None:
            return True
        try:
            return _get(self._repo_url(namespace, image)).status_code == 200
        except requests.RequestException:
            return False

    def get_image_tags(self, namespace: str, image: str) -> list[str]:
        """Names of the image's tags; inactive tags show as empty strings."""
        page = TagPage.from_json(_get_json(self._repo_url(namespace, image) + "/tags"))
        return [tag.name if tag.tag_status == "active" else "" for tag in page.results]

    def image_has_tag(self, namespace: str, image: str, tag: str) -> bool:
        try:
            url = f"{self._repo_url(namespace, image)}/tags/{tag}"
            return _get(url).status_code == 200
        except requests.RequestException:
            return False