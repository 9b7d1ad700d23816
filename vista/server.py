"""HTTP API that serves repositories and their resources as JSON."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any
from urllib.parse import unquote, urlsplit

from vista.repo import get_all_repositories, get_repository
from vista.resource import get_resource, get_resources_for_repo

logger = logging.getLogger("vista.api")

_JSON_TYPE = "application/json"
_TEXT_TYPE = "text/plain; charset=utf-8"


@dataclass
class Response:
    """The status, headers and body produced for one request."""

    status: int
    body: str
    headers: dict[str, str] = field(default_factory=dict)

    def json(self) -> Any:
        """Decode the body as JSON."""
        return json.loads(self.body)


def _json_response(payload: Any) -> Response:
    body = json.dumps(payload, separators=(",", ":"), ensure_ascii=False) + "\n"
    return Response(HTTPStatus.OK, body, {"Content-Type": _JSON_TYPE})


def _error(message: str, status: int) -> Response:
    return Response(
        status,
        message + "\n",
        {"Content-Type": _TEXT_TYPE, "X-Content-Type-Options": "nosniff"},
    )


def _method_not_allowed() -> Response:
    return _error("Method not allowed", HTTPStatus.METHOD_NOT_ALLOWED)


def _repo_not_found(repo_id: str) -> Response:
    logger.info("Repository '%s' not found", repo_id)
    return _error(f"Repository '{repo_id}' not found", HTTPStatus.NOT_FOUND)


@dataclass
class Server:
    """The API server, listening on all interfaces at the given port."""

    port: int = 8080

    def start(self) -> None:
        """Serve requests until interrupted; raises OSError if binding fails."""
        api = self

        class _Handler(BaseHTTPRequestHandler):
            def _dispatch(self) -> None:
                response = api.handle_request(self.command, self.path)
                payload = response.body.encode("utf-8")
                self.send_response(response.status)
                for name, value in response.headers.items():
                    self.send_header(name, value)
                self.send_header("Content-Length", str(len(payload)))
                self.end_headers()
                if self.command != "HEAD":
                    self.wfile.write(payload)

            do_GET = do_POST = do_PUT = do_DELETE = _dispatch
            do_PATCH = do_HEAD = do_OPTIONS = _dispatch

            def log_message(self, format: str, *args: Any) -> None:
                logger.debug(format, *args)

        address = ("", self.port)
        logger.info("Starting Vista API server on :%d", self.port)
        with ThreadingHTTPServer(address, _Handler) as httpd:
            httpd.serve_forever()

    def handle_request(self, method: str, path: str) -> Response:
        """Route a request by method and path to the matching handler."""
        url_path = unquote(urlsplit(path).path)
        if url_path == "/repos":
            logger.info("Received request for /repos")
            return self.handle_repos(method)
        if url_path == "/repo":
            return Response(
                HTTPStatus.MOVED_PERMANENTLY,
                "",
                {"Location": "/repo/", "Content-Type": _TEXT_TYPE},
            )
        if url_path.startswith("/repo/"):
            logger.info("Received request for %s", url_path)
            return self._handle_repo_requests(method, url_path)
        return _error("404 page not found", HTTPStatus.NOT_FOUND)

    def _handle_repo_requests(self, method: str, url_path: str) -> Response:
        path = url_path.removeprefix("/repo/")
        parts = path.split("/")

        logger.info("Original URL path: %s", url_path)
        logger.info("After trimming prefix: %s", path)
        logger.info("Path parts: %s", parts)

        repo_id = parts[0]
        if not repo_id:
            return _error("Repository ID is required", HTTPStatus.BAD_REQUEST)
        logger.info("Repository ID: %s", repo_id)

        match parts:
            case [_]:
                logger.info("Routing to handleRepo for %s", repo_id)
                return self.handle_repo(method, repo_id)
            case [_, "resources"]:
                logger.info("Routing to handleRepoResources for %s", repo_id)
                return self.handle_repo_resources(method, repo_id)
            case [_, "resource", resource_id]:
                logger.info(
                    "Routing to handleRepoResource for %s, resource %s",
                    repo_id,
                    resource_id,
                )
                return self.handle_repo_resource(method, repo_id, resource_id)
            case _:
                logger.info(
                    "No route match for path: %s with %d parts", path, len(parts)
                )
                return _error("Invalid path", HTTPStatus.NOT_FOUND)

    def handle_repos(self, method: str) -> Response:
        """List every repository."""
        if method != "GET":
            return _method_not_allowed()
        logger.info("Handling request for all repositories")
        repos = get_all_repositories()
        logger.info("Returning %d repositories", len(repos))
        return _json_response([repo.to_dict() for repo in repos])

    def handle_repo(self, method: str, repo_id: str) -> Response:
        """Describe one repository."""
        if method != "GET":
            return _method_not_allowed()
        logger.info("Handling repository request for: %s", repo_id)
        repository = get_repository(repo_id)
        if repository is None:
            return _repo_not_found(repo_id)
        logger.info("Returning repository data for %s", repo_id)
        return _json_response(repository.to_dict())

    def handle_repo_resources(self, method: str, repo_id: str) -> Response:
        """List the resources of one repository."""
        if method != "GET":
            return _method_not_allowed()
        logger.info("Handling resources for repo: %s", repo_id)
        if get_repository(repo_id) is None:
            return _repo_not_found(repo_id)
        resources = get_resources_for_repo(repo_id)
        logger.info("Returning %d resources for repo %s", len(resources), repo_id)
        return _json_response([res.to_dict() for res in resources])

    def handle_repo_resource(
        self, method: str, repo_id: str, resource_id: str
    ) -> Response:
        """Describe one resource of one repository."""
        if method != "GET":
            return _method_not_allowed()
        logger.info(
            "Handling resource request for repo: %s, resource: %s",
            repo_id,
            resource_id,
        )
        if get_repository(repo_id) is None:
            return _repo_not_found(repo_id)
        res = get_resource(repo_id, resource_id)
        if res is None:
            logger.info(
                "Resource '%s' not found in repository '%s'", resource_id, repo_id
            )
            return _error(
                f"Resource '{resource_id}' not found in repository '{repo_id}'",
                HTTPStatus.NOT_FOUND,
            )
        logger.info("Returning resource %s for repo %s", resource_id, repo_id)
        return _json_response(res.to_dict())