from unittest.mock import patch

import pytest

from drills.users_api import create_app, main


@pytest.fixture
def client():
    return create_app().test_client()


ALICE = {"name": "Alice", "age": "30", "location": "Lima"}
BOB = {"name": "Bob", "age": "41", "location": "Quito"}


def test_starts_empty(client):
    assert client.get("/users").get_json() == []


def test_create_assigns_sequential_ids(client):
    first = client.post("/users", json=ALICE).get_json()
    second = client.post("/users", json=BOB).get_json()
    assert first == {"id": 1, **ALICE}
    assert second == {"id": 2, **BOB}


def test_create_ignores_given_id(client):
    created = client.post("/users", json={**ALICE, "id": 99}).get_json()
    assert created["id"] == 1


def test_get_by_id_round_trip(client):
    client.post("/users", json=ALICE)
    assert client.get("/users/1").get_json() == {"id": 1, **ALICE}


def test_get_missing_user(client):
    response = client.get("/users/5")
    assert response.status_code == 404
    assert response.get_json() == {"Error": "Usuario no encontrado"}


def test_get_non_numeric_id_is_not_found(client):
    client.post("/users", json=ALICE)
    assert client.get("/users/abc").get_json() == {"Error": "Usuario no encontrado"}


def test_update_moves_user_to_end(client):
    client.post("/users", json=ALICE)
    client.post("/users", json=BOB)
    updated = client.put("/users/1", json={"name": "Ann", "age": "31", "location": "Cusco"})
    assert updated.get_json() == {"id": 1, "name": "Ann", "age": "31", "location": "Cusco"}
    ids = [user["id"] for user in client.get("/users").get_json()]
    assert ids == [2, 1]


def test_update_missing_user(client):
    response = client.put("/users/3", json=ALICE)
    assert response.status_code == 404
    assert response.get_json()["Error"] == "Usuario no encontrado"


def test_delete_user(client):
    client.post("/users", json=ALICE)
    response = client.delete("/users/1")
    assert response.get_json() == {"Message": "Usuario eliminado"}
    assert client.get("/users").get_json() == []
    assert client.delete("/users/1").status_code == 404


def test_id_follows_list_length_after_delete(client):
    client.post("/users", json=ALICE)
    client.post("/users", json=BOB)
    client.delete("/users/1")
    created = client.post("/users", json=ALICE).get_json()
    assert created["id"] == len(client.get("/users").get_json())


@patch("flask.Flask.run", autospec=True)
def test_main_runs_server_with_built_app(run):
    main(["--host", "0.0.0.0", "--port", "9001"])
    assert run.call_count == 1
    assert run.call_args.kwargs == {"host": "0.0.0.0", "port": 9001}
    served_client = run.call_args.args[0].test_client()
    created = served_client.post("/users", json=ALICE).get_json()
    expected = create_app().test_client().post("/users", json=ALICE).get_json()
    assert created == expected
    assert served_client.get("/users").get_json() == [{"id": 1, **ALICE}]


def test_main_rejects_bad_port():
    with pytest.raises(SystemExit) as excinfo:
        main(["--port", "not-a-number"])
    assert excinfo.value.code == 2