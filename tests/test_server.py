import pytest

from vista.server import Response, Server


@pytest.fixture
def server():
    return Server(8080)


def test_handle_repos(server):
    response = server.handle_repos("GET")
    assert response.status == 200
    repos = response.json()
    assert len(repos) > 0
    assert response.headers["Content-Type"] == "application/json"


@pytest.mark.parametrize(
    "repo_id, want_code",
    [("ecr-main", 200), ("nonexistent", 404)],
)
def test_handle_repo(server, repo_id, want_code):
    response = server.handle_repo("GET", repo_id)
    assert response.status == want_code
    if want_code == 200:
        assert response.json()["id"] == repo_id


@pytest.mark.parametrize(
    "repo_id, want_code",
    [("ecr-main", 200), ("nonexistent", 404)],
)
def test_handle_repo_resources(server, repo_id, want_code):
    response = server.handle_repo_resources("GET", repo_id)
    assert response.status == want_code
    if want_code == 200:
        assert isinstance(response.json(), list)


@pytest.mark.parametrize(
    "repo_id, resource_id, want_code",
    [
        ("ecr-main", "my-app", 200),
        ("nonexistent", "my-app", 404),
        ("ecr-main", "nonexistent", 404),
    ],
)
def test_handle_repo_resource(server, repo_id, resource_id, want_code):
    response = server.handle_repo_resource("GET", repo_id, resource_id)
    assert response.status == want_code
    if want_code == 200:
        assert response.json()["id"] == resource_id


def test_route_repos(server):
    response = server.handle_request("GET", "/repos")
    assert response.status == 200
    assert {repo["id"] for repo in response.json()} == {"ecr-main", "dockerhub"}


def test_route_repo(server):
    response = server.handle_request("GET", "/repo/dockerhub")
    assert response.status == 200
    assert response.json()["type"] == "dockerhub"


def test_route_resources(server):
    response = server.handle_request("GET", "/repo/ecr-main/resources")
    assert response.status == 200
    assert {res["id"] for res in response.json()} == {"my-app", "api-service"}


def test_route_resource(server):
    response = server.handle_request("GET", "/repo/dockerhub/resource/nginx")
    assert response.status == 200
    body = response.json()
    assert body["repository"] == "docker.io/library/nginx"
    assert body["tags"] == ["latest", "1.21.6"]


def test_missing_repo_id(server):
    response = server.handle_request("GET", "/repo/")
    assert response.status == 400
    assert response.body == "Repository ID is required\n"


@pytest.mark.parametrize(
    "path",
    ["/repo/ecr-main/", "/repo/ecr-main/other", "/repo/ecr-main/resource/a/b"],
)
def test_invalid_path(server, path):
    response = server.handle_request("GET", path)
    assert response.status == 404
    assert response.body == "Invalid path\n"


def test_unknown_top_level_path(server):
    response = server.handle_request("GET", "/nothing")
    assert response.status == 404


def test_repo_not_found_message(server):
    response = server.handle_request("GET", "/repo/nonexistent")
    assert response.status == 404
    assert response.body == "Repository 'nonexistent' not found\n"


def test_resource_not_found_message(server):
    response = server.handle_request("GET", "/repo/ecr-main/resource/nonexistent")
    assert response.status == 404
    assert response.body == (
        "Resource 'nonexistent' not found in repository 'ecr-main'\n"
    )


@pytest.mark.parametrize(
    "path",
    ["/repos", "/repo/ecr-main", "/repo/ecr-main/resources", "/repo/ecr-main/resource/my-app"],
)
def test_method_not_allowed(server, path):
    response = server.handle_request("POST", path)
    assert response.status == 405
    assert response.body == "Method not allowed\n"


def test_query_string_is_ignored(server):
    response = server.handle_request("GET", "/repo/ecr-main?x=1")
    assert response.status == 200
    assert response.json()["id"] == "ecr-main"


def test_response_json_decodes_body():
    response = Response(200, '{"a":[1,2]}\n')
    assert response.json() == {"a": [1, 2]}