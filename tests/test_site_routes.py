from datetime import datetime, timedelta, timezone

from teenhealth.services.record_store import Collections


class TestSymptomsRoute:
    def test_submit_symptoms(self, client):
        resp = client.post("/symptoms/", json={"symptoms": ["fever", "unknown_x"]})

        assert resp.status_code == 200
        assert resp.json() == {
            "recommendations": [
                "If you have a fever, drink plenty of fluids and rest. If it persists, consider seeing a doctor.",
                "Consult a healthcare provider.",
            ]
        }

    def test_empty_list(self, client):
        assert client.post("/symptoms/", json={"symptoms": []}).json() == {"recommendations": []}

    def test_symptoms_must_be_a_list(self, client):
        assert client.post("/symptoms/", json={"symptoms": "fever"}).status_code == 422


class TestAppointments:
    def test_book_and_remind(self, client, make_user, store):
        account, headers = make_user()
        soon = datetime.now(timezone.utc) + timedelta(days=2)
        store.insert(
            Collections.APPOINTMENTS,
            {"userId": account["id"], "appointmentDate": datetime.now(timezone.utc) - timedelta(days=3)},
        )

        booked = client.post(
            "/appointments/",
            json={"appointmentDate": soon.isoformat(), "providerName": "Dr. Lee"},
            headers=headers,
        )
        reminders = client.get(f"/appointments/reminders/{account['id']}", headers=headers)

        assert booked.status_code == 201
        assert booked.json()["message"] == "Appointment booked successfully"
        assert booked.json()["appointment"]["userId"] == account["id"]
        assert reminders.status_code == 200
        assert [r["providerName"] for r in reminders.json()["reminders"]] == ["Dr. Lee"]

    def test_naive_dates_are_utc(self, client, make_user, fake_db):
        _, headers = make_user()

        client.post("/appointments/", json={"appointmentDate": "2030-01-05T09:30:00"}, headers=headers)

        stored = fake_db.docs(Collections.APPOINTMENTS)[0]
        assert stored["appointmentDate"] == datetime(2030, 1, 5, 9, 30, tzinfo=timezone.utc)

    def test_reminders_of_other_user_forbidden(self, client, make_user):
        other, _ = make_user("other@example.com")
        _, headers = make_user()
        assert client.get(f"/appointments/reminders/{other['id']}", headers=headers).status_code == 403


class TestMentalHealth:
    def test_resources(self, client, store):
        store.insert(Collections.MENTAL_HEALTH_RESOURCES, {"title": "Breathing exercise"})

        resp = client.get("/mental-health/resources")

        assert [r["title"] for r in resp.json()["resources"]] == ["Breathing exercise"]

    def test_self_assessment(self, client, make_user, fake_db):
        account, headers = make_user()

        resp = client.post("/mental-health/assessments", json={"answers": {"q1": 3, "q2": "often"}}, headers=headers)

        assert resp.status_code == 201
        assert resp.json() == {"message": "Self-assessment submitted successfully"}
        assert fake_db.docs(Collections.MENTAL_HEALTH_ASSESSMENTS)[0]["userId"] == account["id"]

    def test_book_session(self, client, make_user):
        account, headers = make_user()

        resp = client.post(
            "/mental-health/sessions",
            json={"sessionDate": "2030-02-01T15:00:00Z", "mode": "video"},
            headers=headers,
        )

        assert resp.status_code == 201
        assert resp.json()["session"]["userId"] == account["id"]


class TestContent:
    def test_page(self, client, store):
        store.insert(Collections.PAGES, {"pageId": "about", "title": "About us"})

        assert client.get("/pages/about").json()["page"]["title"] == "About us"
        missing = client.get("/pages/nope")
        assert missing.status_code == 404
        assert missing.json()["message"] == "Page not found"

    def test_home_content(self, client, store):
        store.insert(Collections.HOME_PAGE_CONTENT, {"section": "hero"})
        assert client.get("/home").json()["content"][0]["section"] == "hero"

    def test_search_title_or_description(self, client, store):
        store.insert(Collections.HEALTH_DATA, {"title": "Better sleep", "description": "Routines"})
        store.insert(Collections.HEALTH_DATA, {"title": "Exams", "description": "Sleep before tests"})
        store.insert(Collections.HEALTH_DATA, {"title": "Snacks", "description": "Fruit"})

        results = client.get("/search", params={"q": "sleep"}).json()["results"]

        assert sorted(r["title"] for r in results) == ["Better sleep", "Exams"]

    def test_blank_search(self, client):
        resp = client.get("/search", params={"q": "   "})
        assert resp.status_code == 400
        assert resp.json()["error"] == "bad_request"

    def test_service_details(self, client, store):
        store.insert(Collections.SERVICES, {"serviceId": "checkup", "name": "Annual check-up"})

        assert client.get("/services/checkup").json()["service"]["name"] == "Annual check-up"
        assert client.get("/services/other").json()["message"] == "Service not found"

    def test_blog(self, client, store):
        store.insert(Collections.BLOG_POSTS, {"postId": "p1", "title": "Hello"})

        assert len(client.get("/blog/posts").json()["posts"]) == 1
        assert client.get("/blog/posts/p1").json()["post"]["title"] == "Hello"
        missing = client.get("/blog/posts/p2")
        assert missing.status_code == 404
        assert missing.json()["message"] == "Post not found"

    def test_programs_by_type(self, client, store):
        store.insert(Collections.HEALTH_PROGRAMS, {"title": "Walk", "type": "visitor"})
        store.insert(Collections.HEALTH_PROGRAMS, {"title": "Coach", "type": "participant"})

        assert [p["title"] for p in client.get("/programs/visitor").json()["programs"]] == ["Walk"]
        assert [p["title"] for p in client.get("/programs/participant").json()["programs"]] == ["Coach"]


class TestBookingsAndCart:
    def test_slots_by_date(self, client, store):
        store.insert(Collections.BOOKING_SLOTS, {"date": "2030-03-01", "time": "10:00"})
        store.insert(Collections.BOOKING_SLOTS, {"date": "2030-03-02", "time": "11:00"})

        slots = client.get("/booking-slots", params={"date": "2030-03-01"}).json()["slots"]

        assert [s["time"] for s in slots] == ["10:00"]

    def test_booking_flow(self, client, make_user):
        account, headers = make_user()

        booked = client.post("/bookings", json={"serviceId": "checkup", "date": "2030-03-01"}, headers=headers)
        mine = client.get(f"/users/{account['id']}/bookings", headers=headers)

        assert booked.status_code == 201
        assert booked.json()["message"] == "Booking confirmed"
        assert [b["serviceId"] for b in mine.json()["bookings"]] == ["checkup"]

    def test_cart(self, client, make_user):
        account, headers = make_user()

        added = client.post(f"/cart/{account['id']}", json={"serviceId": "checkup", "price": 40}, headers=headers)
        items = client.get(f"/cart/{account['id']}", headers=headers)

        assert added.json()["message"] == "Service added to cart"
        assert items.json()["items"][0]["quantity"] == 1

    def test_cart_of_other_user_forbidden(self, client, make_user):
        other, _ = make_user("other@example.com")
        _, headers = make_user()
        assert client.get(f"/cart/{other['id']}", headers=headers).status_code == 403

    def test_user_programs(self, client, make_user, store):
        account, headers = make_user()
        store.insert(Collections.HEALTH_PROGRAMS, {"title": "Sleep reset", "userId": account["id"]})

        programs = client.get(f"/users/{account['id']}/programs", headers=headers).json()["programs"]

        assert [p["title"] for p in programs] == ["Sleep reset"]

    def test_feedback(self, client, fake_db):
        resp = client.post("/feedback", json={"rating": 4, "comments": "Quick and easy"})

        assert resp.status_code == 201
        assert resp.json()["message"] == "Feedback saved successfully"
        assert fake_db.docs(Collections.FEEDBACK)[0]["rating"] == 4
