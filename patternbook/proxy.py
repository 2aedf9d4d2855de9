"""Proxy pattern: a rate-limiting front server in front of an application."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Server(ABC):
    @abstractmethod
    def handle_request(self, url: str, method: str) -> tuple[int, str]:
        """Return an HTTP status code and a body."""


class Application(Server):
    """The real application server."""

    def handle_request(self, url: str, method: str) -> tuple[int, str]:
        if url == "/app/status" and method == "GET":
            return 200, "Ok"
        if url == "/create/user" and method == "POST":
            return 201, "User Created"
        return 404, "Not Ok"


class NginxServer(Server):
    """A proxy that limits how often each URL may be requested."""

    def __init__(self) -> None:
        self.application = Application()
        self.max_allowed_requests = 2
        self.rate_limiter: dict[str, int] = {}

    def check_rate_limiting(self, url: str) -> bool:
        """Count a request to the URL; return False once the limit is exceeded."""
        rate = self.rate_limiter.setdefault(url, 1)
        if rate > self.max_allowed_requests:
            return False
        self.rate_limiter[url] = rate + 1
        return True

    def handle_request(self, url: str, method: str) -> tuple[int, str]:
        if not self.check_rate_limiting(url):
            return 403, "Not Allowed"
        return self.application.handle_request(url, method)


def demo() -> None:
    """Send a series of requests through the proxy."""
    app_status = "/app/status"
    create_user = "/create/user"
    nginx = NginxServer()
    requests = [
        (app_status, "GET"),
        (app_status, "GET"),
        (app_status, "GET"),
        (create_user, "POST"),
        (create_user, "GET"),
    ]
    for url, method in requests:
        code, body = nginx.handle_request(url, method)
        print(f"Url: {url}\nHttpCode: {code}\nBody: {body}\n")