from fastapi.testclient import TestClient
from voter_guide.main import app

def test_security_headers():
    client = TestClient(app)
    response = client.get("/health")
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"
    assert "Content-Security-Policy" in response.headers
    # Default origin is plain http
    assert "Strict-Transport-Security" not in response.headers
