import json
import os
from pathlib import Path

import pytest

from porkbun_ddns.adapters.http_client import build_client
from porkbun_ddns.core.config import AppSettings
from porkbun_ddns.core.domain.models import Configuration

API_BASE = "https://api.porkbun.com/api/json/v3"
IP_URL = "https://checkip.amazonaws.com/"
RETRIEVE_URL = f"{API_BASE}/dns/retrieveByNameType/example.com/A/home"
EDIT_URL = f"{API_BASE}/dns/editByNameType/example.com/A/home"

CONFIG_DATA = {
    "secretkey": "sk1_secret",
    "apikey": "pk1_key",
    "domains": [
        {"domain": "example.com", "dns_entry_type": "A", "subdomain": "home"},
    ],
}


def record_payload(content: str) -> dict:
    return {
        "status": "SUCCESS",
        "records": [
            {
                "id": "106926659",
                "name": "home.example.com",
                "type": "A",
                "content": content,
                "ttl": "600",
                "prio": "0",
                "notes": "",
            }
        ],
    }


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    """Isolate tests from PORKBUN_DDNS_* variables and any local .env."""
    for key in list(os.environ):
        if key.upper().startswith("PORKBUN_DDNS_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None)


@pytest.fixture
def config() -> Configuration:
    return Configuration.model_validate(CONFIG_DATA)


@pytest.fixture
def config_file(tmp_path) -> Path:
    path = tmp_path / "config.json"
    path.write_text(json.dumps(CONFIG_DATA), encoding="utf-8")
    return path


@pytest.fixture
def client(settings):
    with build_client(settings) as c:
        yield c
