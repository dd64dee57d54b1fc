"""Tests for event listing, detail, student registration and admin event management"""
from datetime import datetime, timedelta

from backend.app.models.event import EventRegistration


def test_register_for_event(student_client, make_event, db_session):
    event = make_event()
    r = student_client.post("/api/events/register", json={"eventId": event.id})
    assert r.status_code == 201
    assert r.json()["registration"]["eventId"] == event.id
    assert db_session.query(EventRegistration).count() == 1


def test_register_requires_student(client, make_event):
    event = make_event()
    assert client.post("/api/events/register", json={"eventId": event.id}).status_code == 401


def test_register_unknown_event_is_404(student_client):
    r = student_client.post("/api/events/register", json={"eventId": "missing"})
    assert r.status_code == 404
    assert r.json()["detail"] == "Event not found"


def test_duplicate_registration_is_400(student_client, make_event, db_session):
    event = make_event()
    student_client.post("/api/events/register", json={"eventId": event.id})
    r = student_client.post("/api/events/register", json={"eventId": event.id})
    assert r.status_code == 400
    assert r.json()["detail"] == "You are already registered for this event"
    assert db_session.query(EventRegistration).count() == 1


def test_capacity_is_enforced(cookie_client, make_event, make_student, db_session):
    event = make_event(capacity=2)
    results = []
    for _ in range(3):
        s = make_student()
        results.append(cookie_client(studentId=s.id).post("/api/events/register", json={"eventId": event.id}))
    assert [r.status_code for r in results] == [201, 201, 400]
    assert results[2].json()["detail"] == "Event has reached maximum capacity"
    assert db_session.query(EventRegistration).count() == 2


def test_full_event_reported_before_duplicate(cookie_client, student_client, make_student, make_event):
    event = make_event(capacity=2)
    student_client.post("/api/events/register", json={"eventId": event.id})
    other = make_student()
    cookie_client(studentId=other.id).post("/api/events/register", json={"eventId": event.id})

    r = student_client.post("/api/events/register", json={"eventId": event.id})
    assert r.status_code == 400
    assert r.json()["detail"] == "Event has reached maximum capacity"


def test_unlimited_capacity(cookie_client, make_event, make_student):
    event = make_event(capacity=None)
    for _ in range(4):
        s = make_student()
        r = cookie_client(studentId=s.id).post("/api/events/register", json={"eventId": event.id})
        assert r.status_code == 201


def test_event_list_defaults_to_upcoming(client, make_event):
    make_event(title="Future")
    make_event(title="Past", date=datetime.utcnow() - timedelta(days=3))
    data = client.get("/api/events").json()
    assert [e["title"] for e in data["items"]] == ["Future"]
    assert data["pagination"]["pageSize"] == 9
    assert data["eventTypes"] == ["WEBINAR", "WORKSHOP", "CONTEST", "OTHER"]


def test_event_list_past_and_order(client, make_event):
    make_event(title="Long ago", date=datetime.utcnow() - timedelta(days=30))
    make_event(title="Recently", date=datetime.utcnow() - timedelta(days=1))
    make_event(title="Future")
    data = client.get("/api/events", params={"status": "past"}).json()
    assert [e["title"] for e in data["items"]] == ["Long ago", "Recently"]


def test_event_list_filters(client, make_event):
    soon = datetime.utcnow() + timedelta(days=2)
    later = datetime.utcnow() + timedelta(days=40)
    make_event(title="Python webinar", event_type="WEBINAR", date=soon)
    make_event(title="Python contest", event_type="CONTEST", date=later)
    make_event(title="Resume workshop", event_type="WORKSHOP", date=soon)

    def titles(**params):
        return [e["title"] for e in client.get("/api/events", params=params).json()["items"]]

    assert titles(eventType="WEBINAR") == ["Python webinar"]
    assert titles(search="python") == ["Python webinar", "Python contest"]
    assert titles(search="python", endDate=(soon + timedelta(days=1)).strftime("%Y-%m-%d")) == [
        "Python webinar"
    ]


def test_event_list_includes_registration_counts(client, student_client, make_event):
    event = make_event()
    student_client.post("/api/events/register", json={"eventId": event.id})
    item = client.get("/api/events").json()["items"][0]
    assert item["registrationCount"] == 1


def test_event_detail(student_client, client, make_event):
    event = make_event()
    detail = client.get(f"/api/events/{event.id}").json()
    assert detail["isRegistered"] is False
    assert detail["registrationCount"] == 0

    student_client.post("/api/events/register", json={"eventId": event.id})
    detail = student_client.get(f"/api/events/{event.id}").json()
    assert detail["isRegistered"] is True
    assert detail["registrationCount"] == 1
    assert detail["event"]["id"] == event.id


def test_event_detail_unknown_is_404(client, db_session):
    assert client.get("/api/events/nope").status_code == 404


# --- admin ---

EVENT_BODY = {
    "title": "Mock interviews",
    "description": "Practice rounds",
    "date": "2030-05-01T10:00:00",
    "location": "Hall A",
    "eventType": "WORKSHOP",
    "capacity": 1,
}


def test_admin_creates_and_updates_event(admin_client):
    r = admin_client.post("/api/admin/events", json=EVENT_BODY)
    assert r.status_code == 201
    event = r.json()
    assert event["eventType"] == "WORKSHOP"

    r = admin_client.patch(f"/api/admin/events/{event['id']}", json={"capacity": None, "title": "Mock rounds"})
    assert r.status_code == 200
    assert r.json()["capacity"] is None
    assert r.json()["title"] == "Mock rounds"


def test_admin_event_invalid_capacity_is_400(admin_client):
    assert admin_client.post("/api/admin/events", json={**EVENT_BODY, "capacity": 0}).status_code == 400


def test_admin_event_list_sorting(admin_client, make_event):
    make_event(title="Beta")
    make_event(title="Alpha", date=datetime.utcnow() - timedelta(days=1))
    make_event(title="Gamma")

    data = admin_client.get("/api/admin/events", params={"sortBy": "title", "sortOrder": "desc"}).json()
    assert [e["title"] for e in data["items"]] == ["Gamma", "Beta", "Alpha"]

    data = admin_client.get("/api/admin/events", params={"status": "upcoming", "sortBy": "title"}).json()
    assert [e["title"] for e in data["items"]] == ["Beta", "Gamma"]

    assert admin_client.get("/api/admin/events", params={"sortBy": "location"}).status_code == 400


def test_admin_registration_management(admin_client, make_event, student, make_student):
    event = make_event(capacity=1)
    r = admin_client.post(f"/api/admin/events/{event.id}/registrations", json={"studentId": student.id})
    assert r.status_code == 201
    registration_id = r.json()["id"]

    r = admin_client.post(f"/api/admin/events/{event.id}/registrations", json={"studentId": student.id})
    assert r.status_code == 400
    assert r.json()["detail"] == "Event has reached maximum capacity"

    listing = admin_client.get(f"/api/admin/events/{event.id}/registrations").json()
    assert listing["count"] == 1
    assert listing["capacity"] == 1
    assert listing["registrations"][0]["student"]["email"] == student.email

    detail = admin_client.get(f"/api/admin/events/{event.id}").json()
    assert detail["registrationCount"] == 1
    assert len(detail["registrations"]) == 1

    r = admin_client.delete(f"/api/admin/events/{event.id}/registrations/{registration_id}")
    assert r.status_code == 200
    assert admin_client.get(f"/api/admin/events/{event.id}/registrations").json()["count"] == 0


def test_admin_duplicate_registration_message(admin_client, make_event, student):
    event = make_event()
    admin_client.post(f"/api/admin/events/{event.id}/registrations", json={"studentId": student.id})
    r = admin_client.post(f"/api/admin/events/{event.id}/registrations", json={"studentId": student.id})
    assert r.status_code == 400
    assert r.json()["detail"] == "Student is already registered for this event"


def test_admin_register_unknown_student_is_404(admin_client, make_event):
    event = make_event()
    r = admin_client.post(f"/api/admin/events/{event.id}/registrations", json={"studentId": "ghost"})
    assert r.status_code == 404
    assert r.json()["detail"] == "Student not found"


def test_admin_delete_event_removes_registrations(admin_client, student_client, make_event, db_session):
    event = make_event()
    student_client.post("/api/events/register", json={"eventId": event.id})
    assert admin_client.delete(f"/api/admin/events/{event.id}").status_code == 200
    db_session.expire_all()
    assert db_session.query(EventRegistration).count() == 0
