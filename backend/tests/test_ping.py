def test_ping_endpoint_returns_health_payload(client):
    """
    Validate the public health endpoint payload.

    1. Call the public ping endpoint.
    2. Parse the response payload returned by the backend.
    3. Validate the running message and version are present.
    """
    response = client.get("/api/v1/ping")
    assert response.status_code == 200

    payload = response.json()
    assert payload["message"].endswith("is running")
    assert payload["version"]
