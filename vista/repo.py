"""Repository records and the built-in catalogue of known repositories."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Repository:
    """A container registry that holds resources."""

    id: str
    name: str
    type: str
    url: str
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form, leaving out an empty description."""
        data: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "url": self.url,
        }
        if self.description:
            data["description"] = self.description
        return data


def mock_repositories() -> dict[str, Repository]:
    """Return the built-in repositories keyed by their identifier."""
    return {
        "ecr-main": Repository(
            id="ecr-main",
            name="ECR Main",
            type="ecr",
            url="123456789012.dkr.ecr.us-west-2.amazonaws.com",
            description="Main ECR repository",
        ),
        "dockerhub": Repository(
            id="dockerhub",
            name="Docker Hub",
            type="dockerhub",
            url="https://hub.docker.com",
            description="Docker Hub registry",
        ),
    }


def get_repository(repo_id: str) -> Repository | None:
    """Return the repository with the given identifier, or None if unknown."""
    return mock_repositories().get(repo_id)


def get_all_repositories() -> list[Repository]:
    """Return every known repository."""
    return list(mock_repositories().values())