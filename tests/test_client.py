import pytest
import requests

from tourism_client import TourismAPI


@pytest.fixture
def api(client):
    return TourismAPI(base_url="http://testserver", session=client)


class _FailingSession:
    def request(self, **kwargs):
        raise requests.ConnectionError("connection refused")


def test_base_url_joins_prefix():
    api = TourismAPI(base_url="http://localhost:5000/", api_prefix="/api/", session=_FailingSession())
    assert api.base_url == "http://localhost:5000/api"
    bare = TourismAPI(base_url="http://localhost:5000", api_prefix="", session=_FailingSession())
    assert bare.base_url == "http://localhost:5000"


def test_network_failure_is_reported():
    api = TourismAPI(base_url="http://localhost:5000", session=_FailingSession())
    data, error = api.get_destination(1)
    assert data is None
    assert error["status_code"] is None
    assert "connection refused" in error["message"]

    items, error = api.list_events()
    assert items == []
    assert error["status_code"] is None


def test_catalogue(api):
    destinations, error = api.list_destinations()
    assert error is None
    assert len(destinations) == 3

    central, _ = api.list_destinations(region="Central Region")
    assert [d["name"] for d in central] == ["Cape Coast"]

    markets, _ = api.list_destinations(tags=["Markets"])
    assert [d["name"] for d in markets] == ["Kumasi"]

    crafts, _ = api.list_experiences(category="Crafts")
    assert [e["title"] for e in crafts] == ["Kente Weaving Workshop"]

    gems, _ = api.list_hidden_gems(region="Volta Region")
    assert len(gems) == 2

    event, error = api.get_event(1)
    assert error is None
    assert event["title"] == "Homowo Festival"


def test_not_found(api):
    data, error = api.get_destination(404)
    assert data is None
    assert error == {"status_code": 404, "message": "Destination not found"}


def test_register_conflict(api, user_payload):
    user, error = api.register_user(user_payload)
    assert error is None
    assert user["username"] == "ama"

    data, error = api.register_user(user_payload)
    assert data is None
    assert error["status_code"] == 409


def test_validation_error_message(api):
    data, error = api.create_review({"user_id": 1, "rating": 9})
    assert data is None
    assert error["status_code"] == 400
    assert error["message"].startswith("Validation error")


def test_reviews_and_bookings(api):
    review, error = api.create_review({"user_id": 3, "experience_id": 2, "rating": 5})
    assert error is None
    reviews, _ = api.list_reviews(experience_id=2)
    assert reviews == [review]
    by_user, _ = api.list_reviews(user_id=3)
    assert by_user == [review]

    booking, error = api.create_booking({"user_id": 3, "experience_id": 2, "booking_date": "2024-09-10"})
    assert error is None
    updated, error = api.update_booking_status(booking["id"], "cancelled")
    assert error is None
    assert updated["status"] == "cancelled"
    bookings, _ = api.list_user_bookings(3)
    assert [b["status"] for b in bookings] == ["cancelled"]


def test_newsletter_and_preferences(api):
    first, _ = api.subscribe("kofi@example.com", name="Kofi")
    again, _ = api.subscribe("kofi@example.com")
    assert again == first

    missing, error = api.get_preferences(8)
    assert missing is None
    assert error["status_code"] == 404

    saved, error = api.save_preferences({"user_id": 8, "interests": ["Markets"]})
    assert error is None
    updated, _ = api.update_preferences(8, {"accommodation_type": "guesthouse"})
    assert updated["id"] == saved["id"]
    assert updated["interests"] == ["Markets"]
    assert updated["accommodation_type"] == "guesthouse"


def test_weather(api):
    report, error = api.get_weather("Kumasi")
    assert error is None
    assert report["city"] == "Kumasi"
    assert len(report["forecast"]) == 4
