from fastapi.testclient import TestClient

from tourism_api.app.main import create_app, format_validation_errors


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "running"


class TestUsers:
    def test_register_hides_password(self, client, user_payload):
        response = client.post("/api/users", json=user_payload)
        assert response.status_code == 201
        body = response.json()
        assert body["id"] == 1
        assert body["username"] == "ama"
        assert "password" not in body

        fetched = client.get(f"/api/users/{body['id']}")
        assert fetched.status_code == 200
        assert "password" not in fetched.json()
        assert fetched.json() == body

    def test_duplicate_username(self, client, user_payload):
        client.post("/api/users", json=user_payload)
        response = client.post("/api/users", json={**user_payload, "email": "new@example.com"})
        assert response.status_code == 409
        assert response.json() == {"detail": "Username already exists"}

    def test_duplicate_email(self, client, user_payload):
        client.post("/api/users", json=user_payload)
        response = client.post("/api/users", json={**user_payload, "username": "kofi"})
        assert response.status_code == 409
        assert response.json() == {"detail": "Email already exists"}

    def test_invalid_payload(self, client):
        response = client.post("/api/users", json={"username": "ab", "email": "not-an-email"})
        assert response.status_code == 400
        detail = response.json()["detail"]
        assert detail.startswith("Validation error: ")
        assert '"username"' in detail
        assert '"password"' in detail

    def test_unknown_user(self, client):
        assert client.get("/api/users/99").status_code == 404

    def test_non_numeric_id(self, client):
        response = client.get("/api/users/abc")
        assert response.status_code == 400
        assert '"user_id"' in response.json()["detail"]

    def test_patch_user(self, client, user_payload):
        user_id = client.post("/api/users", json=user_payload).json()["id"]
        response = client.patch(f"/api/users/{user_id}", json={"username": "ama_k"})
        assert response.status_code == 200
        assert response.json()["username"] == "ama_k"
        assert response.json()["email"] == user_payload["email"]

    def test_patch_unknown_user(self, client):
        assert client.patch("/api/users/12", json={"username": "ghost"}).status_code == 404


class TestDestinations:
    def test_list(self, client):
        response = client.get("/api/destinations")
        assert response.status_code == 200
        assert [d["name"] for d in response.json()] == ["Cape Coast", "Kumasi", "Mole National Park"]

    def test_get(self, client):
        body = client.get("/api/destinations/1").json()
        assert body["name"] == "Cape Coast"
        assert body["coordinates"] == {"lat": 5.1053, "lng": -1.2466}
        assert body["rating"] == 47

    def test_get_missing(self, client):
        response = client.get("/api/destinations/42")
        assert response.status_code == 404
        assert response.json() == {"detail": "Destination not found"}

    def test_by_region(self, client):
        response = client.get("/api/destinations/region/Central Region")
        assert [d["name"] for d in response.json()] == ["Cape Coast"]

    def test_by_tags(self, client):
        response = client.get("/api/destinations", params={"tags": ["Safari", "Beaches"]})
        assert [d["name"] for d in response.json()] == ["Cape Coast", "Mole National Park"]

    def test_create(self, client):
        payload = {
            "name": "Ada Foah",
            "region": "Greater Accra Region",
            "description": "Where the Volta meets the sea",
            "short_description": "River estuary",
            "image_url": "https://example.com/ada.jpg",
            "rating": 43,
            "coordinates": {"lat": 5.78, "lng": 0.63},
            "tags": ["Beaches"],
        }
        response = client.post("/api/destinations", json=payload)
        assert response.status_code == 201
        body = response.json()
        assert body["id"] == 4
        assert body["top_attractions"] == []
        assert client.get("/api/destinations/4").json() == body

    def test_create_rejects_rating_out_of_range(self, client):
        payload = {
            "name": "X",
            "region": "Y",
            "description": "d",
            "short_description": "d",
            "image_url": "u",
            "rating": 51,
            "coordinates": {"lat": 0, "lng": 0},
        }
        assert client.post("/api/destinations", json=payload).status_code == 400


class TestExperiencesGemsEvents:
    def test_experiences(self, client):
        assert len(client.get("/api/experiences").json()) == 3
        assert client.get("/api/experiences/3").json()["title"] == "Kente Weaving Workshop"
        assert client.get("/api/experiences/9").status_code == 404
        crafts = client.get("/api/experiences/category/Crafts").json()
        assert [e["location"] for e in crafts] == ["Bonwire"]

    def test_create_experience(self, client):
        payload = {
            "title": "Drumming Lesson",
            "category": "Cultural",
            "description": "Learn the fontomfrom",
            "image_url": "https://example.com/drum.jpg",
            "location": "Kumasi",
            "duration": "2 hours",
            "price": 25,
        }
        response = client.post("/api/experiences", json=payload)
        assert response.status_code == 201
        assert len(client.get("/api/experiences/category/Cultural").json()) == 2

    def test_hidden_gems(self, client):
        assert len(client.get("/api/hidden-gems").json()) == 4
        assert client.get("/api/hidden-gems/3").json()["name"] == "Paga Crocodile Pond"
        assert client.get("/api/hidden-gems/0").status_code == 404
        volta = client.get("/api/hidden-gems/region/Volta Region").json()
        assert len(volta) == 2

    def test_create_hidden_gem(self, client):
        payload = {
            "name": "Nzulezu",
            "description": "Stilt village",
            "image_url": "https://example.com/nzulezu.jpg",
            "region": "Western Region",
        }
        response = client.post("/api/hidden-gems", json=payload)
        assert response.status_code == 201
        assert response.json()["id"] == 5

    def test_events(self, client):
        events = client.get("/api/events").json()
        assert [e["month"] for e in events] == ["MAY", "JUN", "JUL"]
        assert client.get("/api/events/2").json()["day"] == "05"
        assert client.get("/api/events/4").json() == {"detail": "Event not found"}

    def test_create_event_missing_fields(self, client):
        response = client.post("/api/events", json={"title": "Incomplete"})
        assert response.status_code == 400
        assert "Validation error" in response.json()["detail"]


class TestReviews:
    def test_create_and_filter(self, client):
        created = client.post("/api/reviews", json={"user_id": 1, "destination_id": 2, "rating": 4, "text": "Lovely"})
        assert created.status_code == 201
        review = created.json()
        assert review["experience_id"] is None
        assert "created_at" in review

        assert client.get(f"/api/reviews/{review['id']}").json() == review
        assert client.get("/api/reviews/destination/2").json() == [review]
        assert client.get("/api/reviews/experience/2").json() == []
        assert client.get("/api/reviews/user/1").json() == [review]
        assert client.get("/api/reviews").json() == [review]

    def test_rating_bounds(self, client):
        assert client.post("/api/reviews", json={"user_id": 1, "rating": 0}).status_code == 400
        assert client.post("/api/reviews", json={"user_id": 1, "rating": 6}).status_code == 400

    def test_text_too_long(self, client):
        response = client.post("/api/reviews", json={"user_id": 1, "rating": 3, "text": "x" * 1001})
        assert response.status_code == 400
        assert "1000 characters" in response.json()["detail"]

    def test_missing_review(self, client):
        assert client.get("/api/reviews/1").status_code == 404

    def test_invalid_filter_id(self, client):
        assert client.get("/api/reviews/destination/abc").status_code == 400


class TestBookings:
    payload = {"user_id": 5, "destination_id": 1, "booking_date": "2024-08-01", "guests": 3, "total_price": 150}

    def test_create_and_fetch(self, client):
        response = client.post("/api/bookings", json=self.payload)
        assert response.status_code == 201
        booking = response.json()
        assert booking["status"] == "pending"
        assert client.get(f"/api/bookings/{booking['id']}").json() == booking
        assert client.get("/api/bookings/user/5").json() == [booking]
        assert client.get("/api/bookings/user/6").json() == []
        assert client.get("/api/bookings").json() == [booking]

    def test_update_status(self, client):
        booking = client.post("/api/bookings", json=self.payload).json()
        response = client.patch(f"/api/bookings/{booking['id']}/status", json={"status": "confirmed"})
        assert response.status_code == 200
        updated = response.json()
        assert updated["status"] == "confirmed"
        assert {k: v for k, v in updated.items() if k != "status"} == {
            k: v for k, v in booking.items() if k != "status"
        }

    def test_update_status_requires_status(self, client):
        booking = client.post("/api/bookings", json=self.payload).json()
        assert client.patch(f"/api/bookings/{booking['id']}/status", json={}).status_code == 400
        assert client.patch(f"/api/bookings/{booking['id']}/status", json={"status": ""}).status_code == 400

    def test_update_status_strips_whitespace(self, client):
        booking = client.post("/api/bookings", json=self.payload).json()
        blank = client.patch(f"/api/bookings/{booking['id']}/status", json={"status": "   "})
        assert blank.status_code == 400
        response = client.patch(f"/api/bookings/{booking['id']}/status", json={"status": " confirmed "})
        assert response.json()["status"] == "confirmed"

    def test_update_status_unknown_booking(self, client):
        response = client.patch("/api/bookings/77/status", json={"status": "confirmed"})
        assert response.status_code == 404
        assert response.json() == {"detail": "Booking not found"}

    def test_guests_must_be_positive(self, client):
        assert client.post("/api/bookings", json={**self.payload, "guests": 0}).status_code == 400


class TestNewsletter:
    def test_subscribe_twice_returns_same_record(self, client):
        first = client.post("/api/newsletter", json={"email": "a@x.com", "name": "Ama"})
        second = client.post("/api/newsletter", json={"email": "a@x.com", "name": "Kofi"})
        assert first.status_code == 201
        assert second.status_code == 201
        assert second.json() == first.json()

    def test_invalid_email(self, client):
        assert client.post("/api/newsletter", json={"email": "nope"}).status_code == 400

    def test_lookup(self, client):
        assert client.get("/api/newsletter/a@x.com").status_code == 404
        created = client.post("/api/newsletter", json={"email": "a@x.com"}).json()
        assert client.get("/api/newsletter/a@x.com").json() == created

    def test_lookup_by_mixed_case_address(self, client):
        created = client.post("/api/newsletter", json={"email": "Ama@Example.COM"}).json()
        assert created["email"] == "Ama@example.com"
        response = client.get("/api/newsletter/Ama@Example.COM")
        assert response.status_code == 200
        assert response.json() == created


class TestPreferences:
    def test_get_missing(self, client):
        response = client.get("/api/preferences/1")
        assert response.status_code == 404
        assert response.json() == {"detail": "Preferences not found"}

    def test_upsert(self, client, storage):
        first = client.post("/api/preferences", json={"user_id": 1, "interests": ["Safari"]})
        second = client.post("/api/preferences", json={"user_id": 1, "budget": "mid-range"})
        assert first.status_code == second.status_code == 201
        assert second.json()["id"] == first.json()["id"]
        assert second.json()["interests"] == ["Safari"]
        assert second.json()["budget"] == "mid-range"
        assert len(storage.preferences.list_preferences()) == 1
        assert client.get("/api/preferences/1").json() == second.json()

    def test_patch(self, client):
        assert client.patch("/api/preferences/2", json={"budget": "luxury"}).status_code == 404
        client.post("/api/preferences", json={"user_id": 2, "travel_style": "slow"})
        response = client.patch("/api/preferences/2", json={"budget": "luxury"})
        assert response.status_code == 200
        assert response.json()["travel_style"] == "slow"
        assert response.json()["budget"] == "luxury"
        assert response.json()["user_id"] == 2


class TestWeather:
    def test_forecast_shape(self, client):
        response = client.get("/api/weather/Accra")
        assert response.status_code == 200
        body = response.json()
        assert body["city"] == "Accra"
        assert 25 <= body["temperature"] <= 34
        assert body["condition"] in {"Sunny", "Partly Cloudy", "Cloudy", "Rainy"}
        assert [day["day"] for day in body["forecast"]] == ["Mon", "Tue", "Wed", "Thu"]
        assert all(25 <= day["temp"] <= 34 for day in body["forecast"])


class TestAppFactory:
    def test_apps_do_not_share_state(self, app_settings, empty_storage):
        with TestClient(create_app(app_settings=app_settings)) as first, TestClient(
            create_app(storage=empty_storage, app_settings=app_settings)
        ) as second:
            first.post("/api/newsletter", json={"email": "a@x.com"})
            assert second.get("/api/newsletter/a@x.com").status_code == 404
            assert second.get("/api/destinations").json() == []
            assert len(first.get("/api/destinations").json()) == 3

    def test_custom_prefix(self, storage, app_settings):
        app_settings.api_prefix = "/v1"
        with TestClient(create_app(storage=storage, app_settings=app_settings)) as custom:
            assert custom.get("/v1/events").status_code == 200
            assert custom.get("/api/events").status_code == 404

    def test_format_validation_errors(self):
        message = format_validation_errors(
            [
                {"loc": ("body", "rating"), "msg": "Input should be less than or equal to 5"},
                {"loc": ("body",), "msg": "Field required"},
            ]
        )
        assert message == (
            'Validation error: Input should be less than or equal to 5 at "rating"; Field required'
        )
