# vista

`vista` is a small HTTP server with a read-only JSON API. It lists container
registries ("repositories") and the images ("resources") held in each of them.
It serves a fixed set of sample data and uses only the standard library.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running the server

```
vista
```

The server listens on all interfaces, on port 8080 by default. Use `-port`
(or `--port`) to choose another port:

```
vista -port 9000
```

It logs each request at INFO level and runs until interrupted. If the port
cannot be bound, it logs `Server error: ...` and exits with status 1.

## Endpoints

| Path | Returns |
| --- | --- |
| `/repos` | every repository, as a JSON array |
| `/repo/<repo-id>` | one repository |
| `/repo/<repo-id>/resources` | every resource in the repository, as a JSON array |
| `/repo/<repo-id>/resource/<resource-id>` | one resource |

These endpoints accept only `GET`; any other method gets
`405 Method not allowed`.

Successful answers are compact JSON (`Content-Type: application/json`)
followed by a newline. Errors are plain text:

- an unknown repository or resource gives `404` with a message such as
  `Repository 'nonexistent' not found` or
  `Resource 'nonexistent' not found in repository 'ecr-main'`;
- a path under `/repo/` that matches no route gives `404 Invalid path`;
- a missing repository id (`/repo/`) gives `400 Repository ID is required`;
- `/repo` redirects with `301` to `/repo/`;
- any other path gives `404 page not found`.

The sample data holds two repositories, `ecr-main` and `dockerhub`, with the
images `my-app` and `api-service` in `ecr-main` and `nginx` in `dockerhub`.

Example:

```
$ curl localhost:8080/repo/dockerhub/resource/nginx
{"id":"nginx","name":"nginx","type":"container-image","repository":"docker.io/library/nginx","tags":["latest","1.21.6"],"created":"2025-04-15T08:30:00Z","size":"142MB","digest":"sha256:ghi789...","owner":"nginx-maintainers"}
```

## Using it from Python

The handlers can be called directly without opening a socket.
`Server.handle_request(method, path)` routes a request and returns a
`Response` with `status`, `body` and `headers`; `Response.json()` decodes
the body:

```python
from vista.server import Server

server = Server(8080)
response = server.handle_request("GET", "/repo/ecr-main/resources")
print(response.status)   # 200
print(response.json())   # list of resource dictionaries
```

`Server.start()` serves the same routes over HTTP until interrupted.

The data lookups are plain functions:

```python
from vista.repo import get_repository, get_all_repositories
from vista.resource import get_resource, get_resources_for_repo

repo = get_repository("ecr-main")          # Repository or None
image = get_resource("ecr-main", "my-app")  # Resource or None
```

`get_resources_for_repo` returns an empty list for an unknown repository.
`Repository.to_dict()` and `Resource.to_dict()` give the JSON form, which
leaves out optional fields that are empty.

## What it does not do

The data is built into the package. `vista` does not contact any real
registry, has no storage, and offers no way to add, change or delete
repositories or resources.