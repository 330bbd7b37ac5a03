def test_page_shows_stored_assignment(client):
    client.put("/api/assignments/2025-06-01", json={"content": "Math p.1-2"})

    resp = client.get("/", params={"date": "2025-06-01"})
    assert resp.status_code == 200
    assert "text/html" in resp.headers["content-type"]
    assert "Sunday 2025-06-01" in resp.text
    assert "Math p.1-2" in resp.text


def test_page_with_picker_open(client):
    resp = client.get("/", params={"date": "2025-06-01", "picker": "true"})
    assert 'id="datePicker"' in resp.text


def test_publish_form_saves_assignment(client):
    resp = client.post(
        "/",
        data={"date": "2025-06-02", "action": "publish", "content": "  Essay draft  "},
    )
    assert resp.status_code == 200
    assert "Assignment published!" in resp.text

    stored = client.get("/api/assignments/2025-06-02").json()
    assert stored["data"]["content"] == "Essay draft"


def test_publish_form_rejects_empty_content(client):
    resp = client.post("/", data={"date": "2025-06-02", "action": "publish", "content": "  "})
    assert "Please enter the assignment content" in resp.text
    assert client.get("/api/assignments/2025-06-02").json()["data"] is None


def test_pick_form_jumps_to_date(client):
    client.put("/api/assignments/2025-07-15", json={"content": "Summer reading"})
    resp = client.post(
        "/",
        data={"date": "2025-06-01", "action": "pick", "picked": "2025-07-15"},
    )
    assert "Tuesday 2025-07-15" in resp.text
    assert "Summer reading" in resp.text


def test_pick_without_a_date_keeps_current_note(client):
    client.put("/api/assignments/2025-06-01", json={"content": "Stored note"})

    for picked in ("", "not-a-date", "2025-02-30"):
        resp = client.post(
            "/",
            data={"date": "2025-06-01", "action": "pick", "picked": picked},
        )
        assert resp.status_code == 200
        assert "Sunday 2025-06-01" in resp.text
        assert "Stored note" in resp.text
        assert 'id="datePicker"' not in resp.text


def test_publish_failure_keeps_draft_on_page(broken_client):
    resp = broken_client.post(
        "/",
        data={"date": "2025-06-02", "action": "publish", "content": "my draft"},
    )
    assert resp.status_code == 200
    assert "text/html" in resp.headers["content-type"]
    assert "Internal server error" in resp.text
    assert "my draft" in resp.text
    assert 'data-unsaved="true"' in resp.text


def test_load_failure_renders_error_message(broken_client):
    resp = broken_client.get("/", params={"date": "2025-06-01"})
    assert resp.status_code == 200
    assert "text/html" in resp.headers["content-type"]
    assert "Failed to load assignment, please retry" in resp.text


def test_corrupt_record_renders_error_message(client, kv):
    kv.data["2025-06-01"] = "not json"
    resp = client.get("/", params={"date": "2025-06-01"})
    assert resp.status_code == 200
    assert "Failed to load assignment, please retry" in resp.text


def test_saved_note_is_not_flagged_unsaved(client):
    client.put("/api/assignments/2025-06-01", json={"content": "Stored note"})
    resp = client.get("/", params={"date": "2025-06-01"})
    assert 'data-unsaved="false"' in resp.text
