"""
Shared fixtures. All HTTP traffic goes through a MagicMock session, so no
real credentials or network access are needed.
"""

import json
from unittest.mock import MagicMock

import pytest

from porkctl.api import PorkbunClient
from porkctl.models import Credentials
from porkctl.services import DomainService
from porkctl.utils.config import Settings


API_BASE = "https://api.test.invalid/api/json/v3"

ENV_VARS = [
    "PORKBUN_API_KEY",
    "PORKBUN_SECRET_KEY",
    "PORKCTL_ENV_FILE",
    "PORKCTL_API_BASE",
    "PORKCTL_BULK_DELAY",
    "PORKCTL_TIMEOUT",
    "PORKCTL_LOG_LEVEL",
    "PORKCTL_LOG_FILE",
]


def make_response(payload=None, status_code: int = 200, text: str = None, reason: str = "OK"):
    """Build a fake requests.Response"""
    response = MagicMock()
    response.status_code = status_code
    response.reason = reason
    if payload is not None:
        body = json.dumps(payload)
        response.json.return_value = payload
    else:
        body = text or ""
        response.json.side_effect = ValueError("No JSON object could be decoded")
    response.text = body
    response.content = body.encode("utf-8")
    return response


def check_payload(avail="yes", price="9.68", renewal="10.92", status="SUCCESS", **extra):
    """A checkDomain response in the shape Porkbun sends today"""
    response = {
        "avail": avail,
        "type": "registration",
        "price": price,
        "firstYearPromo": "no",
        "regularPrice": price,
        "premium": "no",
        "additional": {
            "renewal": {"type": "renewal", "price": renewal, "regularPrice": renewal},
            "transfer": {"type": "transfer", "price": renewal, "regularPrice": renewal},
        },
    }
    response.update(extra)
    return {"status": status, "response": response, "limits": {"TTL": "10", "limit": "1"}}


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep real credentials and credential files out of every test"""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(
        "porkctl.utils.config.get_user_config_dir",
        lambda: tmp_path / "user-config"
    )


@pytest.fixture
def settings():
    return Settings(api_base=API_BASE, bulk_delay=0)


@pytest.fixture
def credentials():
    return Credentials(api_key="pk1_test", secret_key="sk1_test", source="tests")


@pytest.fixture
def session():
    mock_session = MagicMock()
    mock_session.headers = {}
    return mock_session


@pytest.fixture
def client(settings, credentials, session):
    return PorkbunClient(settings, credentials=credentials, session=session)


@pytest.fixture
def service(client):
    return DomainService(client, bulk_delay=0)
