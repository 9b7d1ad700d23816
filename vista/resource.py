"""Resource records and the built-in catalogue of resources per repository."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Resource:
    """An artefact, such as a container image, held in a repository."""

    id: str
    name: str
    type: str
    repository: str
    tags: tuple[str, ...] = ()
    created: str = ""
    size: str = ""
    digest: str = ""
    owner: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form, leaving out empty optional fields."""
        data: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "repository": self.repository,
        }
        if self.tags:
            data["tags"] = list(self.tags)
        optional = {
            "created": self.created,
            "size": self.size,
            "digest": self.digest,
            "owner": self.owner,
        }
        data.update((key, value) for key, value in optional.items() if value)
        return data


def mock_resources() -> dict[str, dict[str, Resource]]:
    """Return the built-in resources keyed by repository, then by resource."""
    return {
        "ecr-main": {
            "my-app": Resource(
                id="my-app",
                name="my-app",
                type="container-image",
                repository="123456789012.dkr.ecr.us-west-2.amazonaws.com/my-app",
                tags=("latest", "v1.2.3"),
                created="2025-05-30T12:34:56Z",
                size="128MB",
                digest="sha256:abc123...",
                owner="my-team@example.com",
            ),
            "api-service": Resource(
                id="api-service",
                name="api-service",
                type="container-image",
                repository="123456789012.dkr.ecr.us-west-2.amazonaws.com/api-service",
                tags=("latest", "v2.0.1"),
                created="2025-05-29T10:12:34Z",
                size="95MB",
                digest="sha256:def456...",
                owner="api-team@example.com",
            ),
        },
        "dockerhub": {
            "nginx": Resource(
                id="nginx",
                name="nginx",
                type="container-image",
                repository="docker.io/library/nginx",
                tags=("latest", "1.21.6"),
                created="2025-04-15T08:30:00Z",
                size="142MB",
                digest="sha256:ghi789...",
                owner="nginx-maintainers",
            ),
        },
    }


def get_resources_for_repo(repo_id: str) -> list[Resource]:
    """Return all resources of a repository; empty if the repository is unknown."""
    return list(mock_resources().get(repo_id, {}).values())


def get_resource(repo_id: str, resource_id: str) -> Resource | None:
    """Return one resource of a repository, or None if either is unknown."""
    return mock_resources().get(repo_id, {}).get(resource_id)