def describe_health_check():
    def it_returns_200(client):
        response = client.get("/health/")
        assert response.status_code == 200

    def it_returns_json_with_status_ok(client):
        response = client.get("/health/")
        assert response.json() == {"status": "ok"}

    def it_has_correct_content_type(client):
        response = client.get("/health/")
        assert response["Content-Type"] == "application/json"


def describe_service_worker():
    def it_serves_the_script_as_javascript(client):
        response = client.get("/sw.js")
        assert response.status_code == 200
        assert response["Content-Type"] == "application/javascript"

    def it_serves_the_configured_script(client, settings, tmp_path):
        script = tmp_path / "sw.js"
        script.write_text("self.addEventListener('fetch', () => {});")
        settings.SERVICE_WORKER_SCRIPT = script
        response = client.get("/sw.js")
        assert response.content == b"self.addEventListener('fetch', () => {});"

    def it_returns_404_when_script_is_missing(client, settings, tmp_path):
        settings.SERVICE_WORKER_SCRIPT = tmp_path / "missing.js"
        response = client.get("/sw.js")
        assert response.status_code == 404
        assert response.content == b"Service worker not found"

    def it_rejects_post(client):
        response = client.post("/sw.js")
        assert response.status_code == 405
