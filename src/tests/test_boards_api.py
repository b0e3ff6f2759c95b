import pytest

API = "/api/v1"


@pytest.fixture
def setup(client, register):
    alex_id, alex = register("alex")
    bob_id, bob = register("bob")
    project_id = client.post(
        f"{API}/projects",
        json={"title": "Roadmap", "defaultPermissions": {"read": True, "write": True, "admin": False}},
        headers=alex,
    ).json()["data"]["projectId"]
    client.post(f"{API}/projects/{project_id}/permissions/bob", json={"read": True, "write": True}, headers=alex)
    return {
        "project_id": project_id,
        "alex_id": alex_id,
        "alex": alex,
        "bob_id": bob_id,
        "bob": bob,
    }


def boards_url(setup):
    return f"{API}/projects/{setup['project_id']}/boards"


def test_board_inherits_project_default(client, setup):
    response = client.post(boards_url(setup), json={"title": "Sprint 1"}, headers=setup["alex"])
    assert response.status_code == 200
    board_id = response.json()["data"]["boardId"]

    board = client.get(f"{boards_url(setup)}/{board_id}", headers=setup["alex"]).json()["data"]["board"]

    assert board["title"] == "Sprint 1"
    assert board["projectId"] == setup["project_id"]
    assert board["defaultPermissions"] == {"read": True, "write": True, "admin": False}


def test_explicit_board_default_wins(client, setup):
    board_id = client.post(
        boards_url(setup),
        json={"title": "Sprint 1", "defaultPermissions": {"read": True, "write": False, "admin": False}},
        headers=setup["alex"],
    ).json()["data"]["boardId"]

    board = client.get(f"{boards_url(setup)}/{board_id}", headers=setup["alex"]).json()["data"]["board"]

    assert board["defaultPermissions"] == {"read": True, "write": False, "admin": False}


def test_boards_list_only_contains_granted_boards(client, setup):
    client.post(boards_url(setup), json={"title": "Alex only"}, headers=setup["alex"])
    client.post(boards_url(setup), json={"title": "Bob's"}, headers=setup["bob"])

    alex_titles = [b["title"] for b in client.get(boards_url(setup), headers=setup["alex"]).json()["data"]["boards"]]
    bob_titles = [b["title"] for b in client.get(boards_url(setup), headers=setup["bob"]).json()["data"]["boards"]]

    assert alex_titles == ["Alex only"]
    assert bob_titles == ["Bob's"]


def test_board_without_grant_is_not_found(client, setup):
    board_id = client.post(boards_url(setup), json={"title": "Private"}, headers=setup["alex"]).json()["data"][
        "boardId"
    ]

    assert client.get(f"{boards_url(setup)}/{board_id}", headers=setup["bob"]).status_code == 404


def test_board_of_another_project_is_not_found(client, setup):
    other_project = client.post(f"{API}/projects", json={"title": "Other"}, headers=setup["alex"]).json()["data"][
        "projectId"
    ]
    board_id = client.post(boards_url(setup), json={"title": "Sprint"}, headers=setup["alex"]).json()["data"][
        "boardId"
    ]

    response = client.get(f"{API}/projects/{other_project}/boards/{board_id}", headers=setup["alex"])

    assert response.status_code == 404


def test_add_board_member_with_empty_permission_uses_board_default(client, setup):
    board_id = client.post(
        boards_url(setup),
        json={"title": "Sprint", "defaultPermissions": {"read": True, "write": False, "admin": False}},
        headers=setup["alex"],
    ).json()["data"]["boardId"]

    response = client.post(
        f"{boards_url(setup)}/{board_id}/permissions/{setup['bob_id']}",
        json={"read": False, "write": False, "admin": False},
        headers=setup["alex"],
    )

    assert response.status_code == 200
    assert "permissionsId" in response.json()["data"]
    members = client.get(f"{boards_url(setup)}/{board_id}/permissions", headers=setup["bob"]).json()["data"][
        "members"
    ]
    bob_member = next(m for m in members if m["userId"] == setup["bob_id"])
    assert bob_member["permissions"] == {"read": True, "write": False, "admin": False}


def test_board_member_must_be_project_member(client, register, setup):
    carol_id, _ = register("carol")
    board_id = client.post(boards_url(setup), json={"title": "Sprint"}, headers=setup["alex"]).json()["data"][
        "boardId"
    ]

    response = client.post(
        f"{boards_url(setup)}/{board_id}/permissions/{carol_id}",
        json={"read": True},
        headers=setup["alex"],
    )

    assert response.status_code == 404


def test_non_admin_cannot_grant_board_access(client, register, setup):
    board_id = client.post(boards_url(setup), json={"title": "Sprint"}, headers=setup["alex"]).json()["data"][
        "boardId"
    ]
    client.post(
        f"{boards_url(setup)}/{board_id}/permissions/{setup['bob_id']}",
        json={"read": True, "write": True},
        headers=setup["alex"],
    )

    response = client.post(
        f"{boards_url(setup)}/{board_id}/permissions/{setup['alex_id']}",
        json={"read": True},
        headers=setup["bob"],
    )

    assert response.status_code == 403


def test_board_update_and_delete_rights(client, setup):
    board_id = client.post(boards_url(setup), json={"title": "Sprint"}, headers=setup["alex"]).json()["data"][
        "boardId"
    ]
    client.post(
        f"{boards_url(setup)}/{board_id}/permissions/{setup['bob_id']}",
        json={"read": True, "write": True},
        headers=setup["alex"],
    )
    board_url = f"{boards_url(setup)}/{board_id}"

    assert client.put(board_url, json={"title": "Sprint 2"}, headers=setup["bob"]).status_code == 200
    assert client.put(
        board_url, json={"defaultPermissions": {"read": True}}, headers=setup["bob"]
    ).status_code == 403
    assert client.put(
        board_url, json={"defaultPermissions": {"admin": True}}, headers=setup["alex"]
    ).status_code == 400
    assert client.delete(board_url, headers=setup["bob"]).status_code == 403
    assert client.delete(board_url, headers=setup["alex"]).status_code == 200
    assert client.get(board_url, headers=setup["alex"]).status_code == 404


def test_board_owner_cannot_be_removed(client, setup):
    board_id = client.post(boards_url(setup), json={"title": "Sprint"}, headers=setup["alex"]).json()["data"][
        "boardId"
    ]

    response = client.delete(
        f"{boards_url(setup)}/{board_id}/permissions/{setup['alex_id']}", headers=setup["alex"]
    )

    assert response.status_code == 403
