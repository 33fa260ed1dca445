"""Preview URL preference tests."""


def test_preview_url_initially_null(auth_client):
    response = auth_client.get("/api/preview-url")
    assert response.status_code == 200
    assert response.json() == {"previewUrl": None}


def test_save_preview_url(auth_client):
    response = auth_client.post(
        "/api/preview-url", json={"previewUrl": "https://preview.example.com/app"}
    )
    assert response.status_code == 200
    assert response.json() == {"success": True, "previewUrl": "https://preview.example.com/app"}

    assert auth_client.get("/api/preview-url").json() == {
        "previewUrl": "https://preview.example.com/app"
    }


def test_clear_preview_url(auth_client):
    auth_client.post("/api/preview-url", json={"previewUrl": "https://preview.example.com"})

    response = auth_client.post("/api/preview-url", json={"previewUrl": ""})
    assert response.status_code == 200
    assert auth_client.get("/api/preview-url").json() == {"previewUrl": None}


def test_invalid_preview_url(auth_client):
    auth_client.post("/api/preview-url", json={"previewUrl": "https://keep.example.com"})

    response = auth_client.post("/api/preview-url", json={"previewUrl": "not a url"})
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid URL format"
    assert auth_client.get("/api/preview-url").json() == {
        "previewUrl": "https://keep.example.com"
    }
