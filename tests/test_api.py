"""
Integration tests for API endpoints.
"""

import tempfile
import uuid
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from api.main import app
from shift_extractor.config import Settings, get_settings


@pytest.fixture
def client(settings):
    app.dependency_overrides[get_settings] = lambda: settings
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestHealth:

    def test_health(self, client):
        response = client.get("/api/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestParseSchedule:

    def test_parses_text(self, client, week_header_schedule):
        response = client.post("/api/parse-schedule", json={"text": week_header_schedule})

        assert response.status_code == 200
        data = response.json()
        assert data["shifts"] == [{
            "id": "1",
            "date": "2025-09-01",
            "startTime": "07:00",
            "endTime": "15:00",
            "location": "Main Street Mall",
            "position": "Barista",
            "notes": "Monday 7:00AM-3:00PM",
        }]
        assert data["summary"]["extracted"] == 1
        assert data["summary"]["lines_read"] == 4

    def test_request_defaults(self, client):
        response = client.post("/api/parse-schedule", json={
            "text": "Mon 09/01/2025 9-5",
            "defaultLocation": "Airport",
            "defaultPosition": "Lead",
        })

        shift = response.json()["shifts"][0]
        assert shift["location"] == "Airport"
        assert shift["position"] == "Lead"

    def test_no_shifts_is_not_an_error(self, client):
        response = client.post("/api/parse-schedule", json={"text": "hello world"})

        assert response.status_code == 200
        assert response.json()["shifts"] == []

    @pytest.mark.parametrize("body", [{}, {"text": ""}, {"text": "   "}, {"text": 123}])
    def test_missing_text(self, client, body):
        response = client.post("/api/parse-schedule", json=body)

        assert response.status_code == 400
        assert response.json()["detail"] == "No text"

    def test_text_too_long(self, client):
        response = client.post("/api/parse-schedule", json={"text": "Mon 9-5\n" * 100})

        assert response.status_code == 413


class TestProcessUpload:

    def test_upload_txt(self, client, week_header_schedule):
        response = client.post(
            "/api/process",
            files={"schedule_file": ("week.txt", week_header_schedule.encode("utf-8"), "text/plain")},
            data={"default_location": "Ignored"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["source"] == "week.txt"
        assert data["shifts"][0]["location"] == "Main Street Mall"

    def test_rejects_other_types(self, client):
        response = client.post(
            "/api/process",
            files={"schedule_file": ("photo.jpg", b"\xff\xd8", "image/jpeg")},
        )

        assert response.status_code == 400

    def test_filename_is_not_used_as_path(self, client):
        name = f"evil_{uuid.uuid4().hex}.txt"
        outside = Path(tempfile.gettempdir()) / name

        response = client.post(
            "/api/process",
            files={"schedule_file": (f"../{name}", b"Mon 09/01/2025 9-5", "text/plain")},
        )

        assert response.status_code == 200
        assert not outside.exists()
        assert response.json()["shifts"][0]["date"] == "2025-09-01"

    def test_nested_filename(self, client):
        response = client.post(
            "/api/process",
            files={"schedule_file": ("sub/dir.txt", b"Mon 09/01/2025 9-5", "text/plain")},
        )

        assert response.status_code == 200
        assert len(response.json()["shifts"]) == 1

    def test_corrupt_pdf(self, client):
        response = client.post(
            "/api/process",
            files={"schedule_file": ("bad.pdf", b"not a pdf", "application/pdf")},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Could not read schedule file"


class TestCalendarEvents:

    def test_builds_events(self, client):
        shift = {
            "id": "1",
            "date": "2025-09-01",
            "startTime": "07:00",
            "endTime": "15:00",
            "location": "Main Street Mall",
            "position": "Barista",
            "notes": "Monday 7:00AM-3:00PM",
        }

        response = client.post("/api/calendar-events", json={"shifts": [shift]})

        assert response.status_code == 200
        event = response.json()["events"][0]
        assert event["start"] == {"dateTime": "2025-09-01T07:00:00", "timeZone": "America/Toronto"}
        assert event["summary"] == "Starbucks Shift - Main Street Mall"

    def test_time_zone_override(self, client):
        shift = {"date": "2025-09-01", "startTime": "07:00", "endTime": "15:00"}

        response = client.post("/api/calendar-events", json={"shifts": [shift], "timeZone": "UTC"})

        assert response.json()["events"][0]["end"]["timeZone"] == "UTC"

    def test_missing_field(self, client):
        response = client.post("/api/calendar-events", json={"shifts": [{"date": "2025-09-01"}]})

        assert response.status_code == 400
