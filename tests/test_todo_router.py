import pytest

EMPTY_TASKS = [8, 9, 10]


def ids(response):
    assert response.status_code == 200
    return [item["id"] for item in response.json()]


def tag_ids(todo):
    return [tag["id"] for tag in todo["tags"]]


# ==========================
#  GET
# ==========================
def test_get_todo_by_id(client):
    response = client.get("/api/todos/1")

    assert response.status_code == 200
    todo, = response.json()
    assert todo["name"] == "Prepare project proposal"
    assert todo["due_date"] == "2024-08-31T00:00:00"
    assert todo["priority"] == {"id": 1, "name": "High", "color": "#FF0000"}
    assert todo["status"] == {"id": 2, "name": "In Progress", "color": "#0000FF"}
    assert tag_ids(todo) == [1, 2, 3, 4, 5, 6]
    assert "todos" not in todo["priority"]


def test_get_unknown_todo_is_not_found(client):
    assert client.get("/api/todos/0").status_code == 404


def test_empty_todo_has_no_associations(client):
    todo, = client.get("/api/todos/8").json()

    assert todo["priority"] is None
    assert todo["status"] is None
    assert todo["due_date"] is None
    assert todo["tags"] == []


@pytest.mark.parametrize(
    "sort_order, expected",
    [
        ("Ascending", list(range(1, 11))),
        ("Descending", list(range(10, 0, -1))),
    ],
)
def test_get_todos(client, sort_order, expected):
    assert ids(client.get("/api/todos", params={"sort_order": sort_order})) == expected


@pytest.mark.parametrize(
    "sort_order, expected",
    [
        ("Ascending", [5, 3, 8, 9, 10, 1, 6, 2, 7, 4]),
        ("Descending", [4, 7, 2, 6, 1, 10, 9, 8, 3, 5]),
    ],
)
def test_sorted_by_name(client, sort_order, expected):
    assert ids(client.get("/api/todos/sorted-by-name", params={"sort_order": sort_order})) == expected


# ==========================
#  NULLABLE KEYS
# ==========================
@pytest.mark.parametrize(
    "path, sort_order, expected",
    [
        ("sorted-by-due-date", "Ascending", [6, 5, 1, 3, 4, 7, 2]),
        ("sorted-by-due-date", "Descending", [2, 7, 4, 3, 1, 5, 6]),
        ("sorted-by-priority-id", "Ascending", [1, 3, 4, 6, 7, 2, 5]),
        ("sorted-by-priority-id", "Descending", [2, 5, 6, 7, 1, 3, 4]),
        ("sorted-by-priority-name", "Ascending", [1, 3, 4, 2, 5, 6, 7]),
        ("sorted-by-priority-name", "Descending", [6, 7, 2, 5, 1, 3, 4]),
        ("sorted-by-status-id", "Ascending", [2, 4, 5, 1, 3, 6, 7]),
        ("sorted-by-status-id", "Descending", [6, 7, 1, 3, 2, 4, 5]),
        ("sorted-by-status-name", "Ascending", [6, 7, 1, 3, 2, 4, 5]),
        ("sorted-by-status-name", "Descending", [2, 4, 5, 1, 3, 6, 7]),
    ],
)
def test_rows_without_value_sort_last(client, path, sort_order, expected):
    result = ids(client.get(f"/api/todos/{path}", params={"sort_order": sort_order}))

    # todos lacking the key keep ascending id among themselves
    assert result == expected + EMPTY_TASKS


@pytest.mark.parametrize("path, key", [("sorted-by-priority-id", "priority"), ("sorted-by-priority-name", "priority")])
def test_filter_by_priority(client, path, key):
    response = client.get(f"/api/todos/{path}", params={"priority_id": 1})

    assert ids(response) == [1, 3, 4]
    assert all(todo[key]["id"] == 1 for todo in response.json())


@pytest.mark.parametrize("path", ["sorted-by-status-id", "sorted-by-status-name"])
def test_filter_by_status(client, path):
    response = client.get(f"/api/todos/{path}", params={"status_id": 1, "sort_order": "Descending"})

    assert ids(response) == [2, 4, 5]
    assert all(todo["status"]["id"] == 1 for todo in response.json())


@pytest.mark.parametrize(
    "path, params",
    [
        ("sorted-by-priority-id", {"priority_id": 0}),
        ("sorted-by-status-name", {"status_id": 99}),
        ("sorted-by-tags-count", {"tag_id": 0}),
    ],
)
def test_filter_by_unknown_id_returns_empty_list(client, path, params):
    response = client.get(f"/api/todos/{path}", params=params)

    assert response.status_code == 200
    assert response.json() == []


def test_period_excludes_todos_without_due_date(client):
    response = client.get("/api/todos/sorted-by-due-date", params={"period": "ThisYear"})

    assert response.status_code == 200
    assert all(todo["due_date"] is not None for todo in response.json())


def test_invalid_period_is_rejected(client):
    response = client.get("/api/todos/sorted-by-due-date", params={"period": "NextDecade"})

    assert response.status_code == 400


# ==========================
#  TAGS COUNT
# ==========================
def test_tags_count_defaults_to_descending(client):
    # zero-tag todos last, ordered by name
    assert ids(client.get("/api/todos/sorted-by-tags-count")) == [1, 2, 3, 4, 5, 6, 8, 9, 10, 7]


def test_tags_count_ascending(client):
    result = ids(client.get("/api/todos/sorted-by-tags-count", params={"sort_order": "Ascending"}))

    assert result == [6, 5, 4, 3, 2, 1, 8, 9, 10, 7]


def test_tags_count_ties_break_by_name(client):
    client.post("/api/todos", json={"name": "Aardvark", "tag_ids": [1, 2]})
    client.post("/api/todos", json={"name": "Zebra", "tag_ids": [3, 4]})

    todos = client.get("/api/todos/sorted-by-tags-count").json()
    two_tags = [todo["name"] for todo in todos if len(todo["tags"]) == 2]

    assert two_tags == ["Aardvark", "Client presentation", "Zebra"]


@pytest.mark.parametrize("tag_id, expected", [(2, [1, 2, 3, 4, 5, 6]), (5, [1]), (4, [1, 2])])
def test_tags_count_filter_by_tag(client, tag_id, expected):
    response = client.get("/api/todos/sorted-by-tags-count", params={"tag_id": tag_id})

    assert ids(response) == expected
    assert all(tag_id in tag_ids(todo) for todo in response.json())


# ==========================
#  CREATE
# ==========================
def test_create_todo(client):
    payload = {
        "name": "Create Task 1",
        "description": "This is a create task",
        "due_date": "2030-01-02T03:04:05",
        "priority_id": 1,
        "status_id": 1,
        "tag_ids": [1, 3, 6],
        "created_at": "2024-09-01T00:00:00",
    }

    response = client.post("/api/todos", json=payload)

    assert response.status_code == 201
    body = response.json()
    assert body["name"] == payload["name"]
    assert body["description"] == payload["description"]
    assert body["due_date"] == payload["due_date"]
    assert body["created_at"] == payload["created_at"]
    assert body["priority_id"] == 1
    assert body["priority"]["id"] == 1
    assert body["status_id"] == 1
    assert tag_ids(body) == [1, 3, 6]

    fetched, = client.get(f"/api/todos/{body['id']}").json()
    assert fetched["name"] == payload["name"]
    assert tag_ids(fetched) == [1, 3, 6]


def test_create_todo_without_tags(client):
    response = client.post("/api/todos", json={"name": "Create Task 2", "priority_id": 2, "status_id": 2, "tag_ids": []})

    assert response.status_code == 201
    assert response.json()["tags"] == []


@pytest.mark.parametrize(
    "payload, message",
    [
        ({"name": "", "priority_id": 1}, None),
        ({"name": "x" * 256}, None),
        ({"name": "Create Task 3", "priority_id": 0}, "Invalid PriorityId."),
        ({"name": "Create Task 4", "status_id": 0}, "Invalid StatusId."),
        ({"name": "Create Task 5", "tag_ids": [0]}, "One or more Tag IDs are invalid."),
        ({"name": "Create Task 6", "tag_ids": [1, 999]}, "One or more Tag IDs are invalid."),
    ],
)
def test_create_invalid_todo_is_bad_request(client, payload, message):
    response = client.post("/api/todos", json=payload)

    assert response.status_code == 400
    if message:
        assert message in response.json()["detail"]
    assert len(client.get("/api/todos").json()) == 10


# ==========================
#  UPDATE
# ==========================
def test_update_todo(client):
    payload = {
        "id": 1,
        "name": "Update Task 1",
        "description": "This is a update task",
        "due_date": "2999-01-01T00:00:00",
        "priority_id": 1,
        "status_id": 1,
        "tag_ids": [1, 2, 3, 4],
        "updated_at": "2024-09-05T12:00:00",
    }

    response = client.put("/api/todos", json=payload)

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == 1
    assert body["name"] == "Update Task 1"
    assert body["status"]["id"] == 1
    assert body["updated_at"] == payload["updated_at"]
    assert tag_ids(body) == [1, 2, 3, 4]

    # the same payload again leaves the same state
    again = client.put("/api/todos", json=payload)
    assert again.json() == body


def test_update_with_null_fields_clears_everything(client):
    payload = {
        "id": 1,
        "name": "Update Task 2",
        "description": None,
        "due_date": None,
        "priority_id": None,
        "status_id": None,
        "tag_ids": None,
    }

    body = client.put("/api/todos", json=payload).json()

    assert body["description"] is None
    assert body["due_date"] is None
    assert body["priority"] is None
    assert body["status"] is None
    assert body["tags"] == []


def test_update_unknown_todo_is_not_found(client):
    response = client.put("/api/todos", json={"id": 0, "name": "Update Task 3", "priority_id": 2, "tag_ids": [2]})

    assert response.status_code == 404


def test_update_with_invalid_reference_is_bad_request(client):
    response = client.put("/api/todos", json={"id": 1, "name": "Update Task 4", "status_id": 42})

    assert response.status_code == 400
    assert client.get("/api/todos/1").json()[0]["name"] == "Prepare project proposal"


# ==========================
#  DELETE
# ==========================
def test_delete_todo(client):
    assert client.delete("/api/todos/1").status_code == 204
    assert client.get("/api/todos/1").status_code == 404
    # tags themselves survive
    assert len(client.get("/api/tags").json()) == 6


def test_delete_unknown_todo_is_not_found(client):
    assert client.delete("/api/todos/0").status_code == 404
    assert client.delete("/api/todos/0").status_code == 404


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}
