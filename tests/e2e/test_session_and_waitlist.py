"""End-to-end tests for liveness, session, health and waitlist procedures."""


class TestTransport:
    def test_liveness(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.text == "OK"

    def test_rpc_health_check(self, client):
        response = client.post("/rpc/healthCheck")

        assert response.json() == "OK"

    def test_detailed_health_check(self, client):
        body = client.post("/rpc/health/check").json()

        assert body["checks"]["database"]["status"] == "healthy"
        assert set(body["checks"]["services"]) == {"resend", "uploadthing"}
        assert body["status"] in {"healthy", "degraded", "unhealthy"}


class TestSession:
    def test_no_cookie_returns_null(self, client):
        response = client.get("/api/auth/get-session")

        assert response.status_code == 200
        assert response.json() is None

    def test_cookie_resolves_user(self, client, create_user, login):
        user = create_user("Ada")
        login(user)

        body = client.get("/api/auth/get-session").json()

        assert body["user"]["id"] == user.id
        assert body["user"]["displayUsername"] == "Ada"
        assert body["user"]["email"] == user.email

    def test_private_data_requires_session(self, client, create_user, login):
        anonymous = client.post("/rpc/privateData")
        login(create_user())
        authenticated = client.post("/rpc/privateData")

        assert anonymous.status_code == 401
        assert authenticated.json()["message"] == "This is private"

    def test_update_user_image(self, client, create_user, login):
        login(create_user())

        response = client.post(
            "/rpc/updateUserImage", json={"image": "https://cdn.dealort.test/a.png"}
        )
        session = client.get("/api/auth/get-session").json()

        assert response.json() == {"success": True}
        assert session["user"]["image"] == "https://cdn.dealort.test/a.png"

    def test_analytics_for_another_user_is_forbidden(self, client, create_user, login):
        alice = create_user("Alice")
        bob = create_user("Bob")
        login(alice)

        own = client.post(
            "/rpc/analytics/getOverviewAnalytics",
            json={"userId": alice.id, "duration": "1 year"},
        )
        other = client.post(
            "/rpc/analytics/getOverviewAnalytics", json={"userId": bob.id}
        )

        assert own.json()["impressions"]["value"] == "0"
        assert other.status_code == 403


class TestWaitlist:
    def test_join_then_check(self, client):
        before = client.post("/rpc/waitlist/check", json={"email": "ada@example.com"})
        joined = client.post(
            "/rpc/waitlist/add", json={"name": "Ada", "email": "Ada@Example.com"}
        )
        after = client.post("/rpc/waitlist/check", json={"email": "ada@example.com"})

        assert before.json() == {"exists": False}
        assert joined.json()["success"] is True
        assert after.json() == {"exists": True}

    def test_duplicate_signup_conflicts(self, client):
        body = {"name": "Ada", "email": "ada@example.com"}
        client.post("/rpc/waitlist/add", json=body)

        response = client.post("/rpc/waitlist/add", json=body)

        assert response.status_code == 409
        assert response.json()["message"] == "This email is already on our waitlist"

    def test_invalid_email_is_bad_request(self, client):
        response = client.post(
            "/rpc/waitlist/add", json={"name": "Ada", "email": "not-an-email"}
        )

        assert response.status_code == 400
