"""Public, key-addressed API tests."""

from conftest import save_file, signup
from jsonpulse.models.json_file import JsonFile


def test_get_by_key_returns_raw_content(auth_client, api_key):
    """The public endpoint returns the document itself, not an envelope."""
    save_file(auth_client, "config", '{"x": 1, "y": [true, false]}')
    auth_client.cookies.clear()

    response = auth_client.get(f"/api/data/key/{api_key}/config")
    assert response.status_code == 200
    assert response.json() == {"x": 1, "y": [True, False]}


def test_get_by_key_counts_every_view(auth_client, api_key, db):
    """N sequential reads raise views from 0 to exactly N."""
    save_file(auth_client, "counted", '{"a": 1}')

    for _ in range(5):
        assert auth_client.get(f"/api/data/key/{api_key}/counted").status_code == 200

    assert auth_client.get("/api/files/counted").json()["views"] == 5
    assert db.query(JsonFile).filter(JsonFile.file_name == "counted").one().views == 5


def test_view_does_not_touch_updated_at(auth_client, api_key):
    save_file(auth_client, "config", '{"a": 1}')
    before = auth_client.get("/api/files/config").json()["updatedAt"]

    auth_client.get(f"/api/data/key/{api_key}/config")
    assert auth_client.get("/api/files/config").json()["updatedAt"] == before


def test_unknown_key_or_file_does_not_count(auth_client, api_key):
    save_file(auth_client, "config", '{"a": 1}')

    response = auth_client.get("/api/data/key/UnknownKey1234567890/config")
    assert response.status_code == 404
    assert response.json()["error"] == "File not found"

    response = auth_client.get(f"/api/data/key/{api_key}/missing")
    assert response.status_code == 404

    assert auth_client.get("/api/files/config").json()["views"] == 0


def test_key_only_reaches_its_owner(client):
    """A key never resolves files of another user, even with the same name."""
    signup(client, "a@example.com")
    save_file(client, "config", '{"owner": "a"}')
    key_a = client.post("/api/api-key/generate").json()["apiKey"]

    signup(client, "b@example.com")
    save_file(client, "config", '{"owner": "b"}')
    save_file(client, "only-b", '{"owner": "b"}')
    key_b = client.post("/api/api-key/generate").json()["apiKey"]

    assert client.get(f"/api/data/key/{key_a}/config").json() == {"owner": "a"}
    assert client.get(f"/api/data/key/{key_b}/config").json() == {"owner": "b"}
    assert client.get(f"/api/data/key/{key_a}/only-b").status_code == 404


def test_list_by_key(auth_client, api_key):
    save_file(auth_client, "first", '{"n": 1}')
    save_file(auth_client, "second file", '{"n": 2}')
    auth_client.get(f"/api/data/key/{api_key}/first")

    response = auth_client.get(f"/api/data/key/{api_key}")
    assert response.status_code == 200
    data = response.json()
    assert data["apiKey"] == api_key
    assert data["fileCount"] == 2
    assert "message" in data

    by_name = {f["fileName"]: f for f in data["files"]}
    assert set(by_name) == {"first", "second file"}
    assert by_name["first"]["views"] == 1
    assert by_name["first"]["url"] == f"http://testserver/api/data/key/{api_key}/first"
    assert by_name["second file"]["url"].endswith(f"/api/data/key/{api_key}/second%20file")
    assert set(by_name["first"]) == {"fileName", "url", "views", "createdAt", "updatedAt"}


def test_list_by_key_does_not_count_views(auth_client, api_key):
    save_file(auth_client, "config", '{"a": 1}')
    auth_client.get(f"/api/data/key/{api_key}")
    assert auth_client.get("/api/files/config").json()["views"] == 0


def test_list_by_unknown_key(client):
    response = client.get("/api/data/key/UnknownKey1234567890")
    assert response.status_code == 404
    assert response.json()["error"] == "Invalid API key"


def test_list_by_key_without_files(auth_client, api_key):
    response = auth_client.get(f"/api/data/key/{api_key}")
    assert response.status_code == 404
    assert response.json()["error"] == "No files found for this API key"


def test_url_from_listing_resolves(auth_client, api_key):
    save_file(auth_client, "with space", '{"ok": true}')
    url = auth_client.get(f"/api/data/key/{api_key}").json()["files"][0]["url"]

    response = auth_client.get(url)
    assert response.status_code == 200
    assert response.json() == {"ok": True}


def test_deleted_file_is_gone_publicly(auth_client, api_key):
    save_file(auth_client, "temp", '{"a": 1}')
    auth_client.delete("/api/files/temp")
    assert auth_client.get(f"/api/data/key/{api_key}/temp").status_code == 404
