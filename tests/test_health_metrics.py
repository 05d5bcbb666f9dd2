from teenhealth.services.record_store import Collections


class TestHealthMetrics:
    def test_no_metrics_yet(self, client, make_user):
        account, headers = make_user()

        resp = client.get(f"/health-metrics/{account['id']}", headers=headers)

        assert resp.status_code == 404
        assert resp.json()["message"] == "No health data found"

    def test_first_update_creates_then_merges(self, client, make_user, fake_db):
        account, headers = make_user()
        url = f"/health-metrics/{account['id']}"

        created = client.put(url, json={"sleep_hours": 8, "water_intake_ml": 1500}, headers=headers)
        updated = client.put(url, json={"sleep_hours": 6.5, "daily_steps": 10000}, headers=headers)

        assert created.status_code == 201
        assert created.json()["newMetrics"]["sleep_hours"] == 8
        assert updated.status_code == 200
        metrics = updated.json()["updatedMetrics"]
        assert metrics["sleep_hours"] == 6.5
        assert metrics["water_intake_ml"] == 1500
        assert metrics["daily_steps"] == 10000

        stored = fake_db.docs(Collections.HEALTH_METRICS)
        assert len(stored) == 1
        assert stored[0]["userId"] == account["id"]

        fetched = client.get(url, headers=headers).json()["healthMetrics"]
        assert fetched["id"] == created.json()["newMetrics"]["id"]
        assert fetched["daily_steps"] == 10000

    def test_extra_metric_fields_are_kept(self, client, make_user):
        account, headers = make_user()

        resp = client.put(f"/health-metrics/{account['id']}", json={"screen_time_hours": 3}, headers=headers)

        assert resp.json()["newMetrics"]["screen_time_hours"] == 3

    def test_dotted_metric_names_are_rejected(self, client, make_user, fake_db):
        account, headers = make_user()
        url = f"/health-metrics/{account['id']}"
        client.put(url, json={"sleep_hours": 8}, headers=headers)

        resp = client.put(url, json={"sleep_hours": 5, "userId.x": "someone-else"}, headers=headers)

        assert resp.status_code == 400
        [stored] = fake_db.docs(Collections.HEALTH_METRICS)
        assert stored["userId"] == account["id"]
        assert stored["sleep_hours"] == 8
        assert "userId.x" not in stored

    def test_invalid_metric_value(self, client, make_user):
        account, headers = make_user()
        resp = client.put(f"/health-metrics/{account['id']}", json={"sleep_hours": 30}, headers=headers)
        assert resp.status_code == 422

    def test_other_users_metrics_are_forbidden(self, client, make_user):
        other, _ = make_user("other@example.com")
        _, headers = make_user()

        assert client.get(f"/health-metrics/{other['id']}", headers=headers).status_code == 403
        assert client.put(f"/health-metrics/{other['id']}", json={"mood": "ok"}, headers=headers).status_code == 403

    def test_requires_login(self, client):
        assert client.get("/health-metrics/someone").status_code == 401


class TestNutritionAndFitness:
    def test_nutrition_plan(self, client, make_user):
        account, headers = make_user()

        resp = client.get(f"/nutrition-plan/{account['id']}", headers=headers)

        assert resp.status_code == 200
        assert resp.json()["nutritionPlan"] == {
            "breakfast": "Oatmeal with fruits and nuts",
            "lunch": "Chicken salad with quinoa",
            "dinner": "Grilled salmon with vegetables",
        }

    def test_log_fitness_activity(self, client, make_user, fake_db):
        account, headers = make_user()

        resp = client.post(
            f"/fitness-activities/{account['id']}",
            json={"activity": "running", "duration_minutes": 30},
            headers=headers,
        )

        assert resp.status_code == 201
        assert resp.json()["loggedActivity"]["userId"] == account["id"]
        assert fake_db.docs(Collections.FITNESS_ACTIVITIES)[0]["activity"] == "running"
