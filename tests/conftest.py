import pytest
from fastapi.testclient import TestClient

from api.routes.submissions import create_app
from config import Config
from services.errors import DeliveryError


class FakeEmailClient:
    """Records every payload instead of calling the provider."""

    def __init__(self, error=None):
        self.error = error
        self.payloads = []

    async def send(self, payload):
        self.payloads.append(payload)
        if self.error is not None:
            raise self.error
        return {"messageId": "<fake@smtp-relay.mailin.fr>"}


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def config(upload_dir, tmp_path):
    return Config(
        sender_email="loans@example.com",
        receiver_email="applications@example.com",
        brevo_api_key="xkeysib-secret",
        upload_dir=str(upload_dir),
        public_dir=str(tmp_path / "public"),
    )


@pytest.fixture
def email_client():
    return FakeEmailClient()


@pytest.fixture
def failing_email_client():
    return FakeEmailClient(
        error=DeliveryError(
            "Email provider rejected message with status 401",
            status_code=401,
            detail={"code": "unauthorized", "message": "Key not found"},
        )
    )


@pytest.fixture
def client(config, email_client):
    return TestClient(create_app(config, email_client=email_client))
