# tests/test_config.py
import pytest

from seqledger.config import DEFAULT_URL, ClientConfig
from seqledger.exceptions import ConfigurationError
from seqledger.http import Client, create_client


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ("SEQLEDGER_URL", "SEQLEDGER_LEDGER", "SEQLEDGER_CREDENTIAL", "SEQLEDGER_TIMEOUT"):
        monkeypatch.delenv(var, raising=False)


def test_explicit_arguments_win(monkeypatch):
    monkeypatch.setenv("SEQLEDGER_LEDGER", "from-env")
    cfg = ClientConfig.resolve(url="http://localhost:1999", ledger="explicit", credential="c", timeout=5)
    assert cfg.ledger == "explicit"
    assert cfg.base_url == "http://localhost:1999/explicit"
    assert cfg.credential == "c"
    assert cfg.timeout == 5


def test_env_fallback(monkeypatch):
    monkeypatch.setenv("SEQLEDGER_URL", "http://example.test/")
    monkeypatch.setenv("SEQLEDGER_LEDGER", "env-ledger")
    monkeypatch.setenv("SEQLEDGER_CREDENTIAL", "env-cred")
    monkeypatch.setenv("SEQLEDGER_TIMEOUT", "2.5")
    cfg = ClientConfig.resolve()
    assert cfg.base_url == "http://example.test/env-ledger"
    assert cfg.credential == "env-cred"
    assert cfg.timeout == 2.5


def test_defaults():
    cfg = ClientConfig.resolve(ledger="main")
    assert cfg.url == DEFAULT_URL
    assert cfg.credential is None


def test_missing_ledger():
    with pytest.raises(ConfigurationError):
        ClientConfig.resolve()


def test_bad_url():
    with pytest.raises(ConfigurationError):
        ClientConfig.resolve(url="ftp://nope", ledger="main")


def test_bad_timeout(monkeypatch):
    monkeypatch.setenv("SEQLEDGER_TIMEOUT", "soon")
    with pytest.raises(ConfigurationError):
        ClientConfig.resolve(ledger="main")


def test_create_client():
    with create_client(ledger="main") as client:
        assert isinstance(client, Client)
        assert client.config.ledger == "main"
