"""Shared fixtures: explicit settings and an in-memory GitHub served through httpx.MockTransport."""

import httpx
import pytest

from repo_letter_frequency.client import RepoClient
from repo_letter_frequency.settings import Settings


def make_settings(**overrides) -> Settings:
    """Settings that never read the real environment's .env file."""
    values = {
        "github_token": None,
        "github_repo": "owner/repo",
        "github_ref": "main",
        "api_base": "https://api.github.com",
        "raw_base": "https://raw.githubusercontent.com",
        "user_agent": "test-agent",
        "extensions": [".js", ".ts"],
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def _route(url) -> tuple[str, bytes]:
    """Match the way a server sees the request: fragments never reach it."""
    url = httpx.URL(url)
    return url.host, url.raw_path


class FakeGitHub:
    """Serves contents listings and raw files keyed by host and encoded path plus query."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.listings: dict[tuple[str, bytes], dict] = {}
        self.raw: dict[tuple[str, bytes], dict] = {}
        self.requests: list[httpx.Request] = []

    def dir_url(self, path: str = "") -> str:
        base = f"{self.settings.api_base}/repos/{self.settings.github_repo}/contents"
        if path:
            base = f"{base}/{path}"
        return f"{base}?ref={self.settings.github_ref}"

    def add_listing(self, url: str, entries: list, next_url: str | None = None, status: int = 200):
        headers = {}
        if next_url:
            headers["link"] = f'<{next_url}>; rel="next", <{next_url}>; rel="last"'
        self.listings[_route(url)] = {"status_code": status, "json": entries, "headers": headers}

    def add_file(self, path: str, text: str, status: int = 200):
        self.raw[_route(self.settings.raw_url(path))] = {"status_code": status, "text": text}

    def add_tree(self, files: dict[str, str]):
        """Build listings for every directory implied by `files` ({path: content})."""
        dirs: dict[str, list] = {"": []}
        for path, content in files.items():
            parts = path.split("/")
            for depth in range(1, len(parts)):
                parent = "/".join(parts[: depth - 1])
                child = "/".join(parts[:depth])
                if child not in dirs:
                    dirs[child] = []
                    dirs.setdefault(parent, []).append(
                        {"path": child, "type": "dir", "url": self.dir_url(child)}
                    )
            parent = "/".join(parts[:-1])
            dirs.setdefault(parent, []).append({"path": path, "type": "file"})
            self.add_file(path, content)
        for path, entries in dirs.items():
            self.add_listing(self.dir_url(path), entries)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = _route(request.url)
        if route in self.listings:
            return httpx.Response(**self.listings[route])
        if route in self.raw:
            return httpx.Response(**self.raw[route])
        return httpx.Response(404, json={"message": "Not Found"})

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def client(self) -> RepoClient:
        return RepoClient(self.settings, transport=self.transport)


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def fake_github(settings):
    return FakeGitHub(settings)


@pytest.fixture
def mock_client():
    """Factory: RepoClient whose requests go to `handler`."""

    def _make(handler, **overrides) -> RepoClient:
        return RepoClient(make_settings(**overrides), transport=httpx.MockTransport(handler))

    return _make
