import os

import pytest

from base_governance.config import Settings
from base_governance.errors import ConfigurationError

ENV_KEYS = (
    "RPC_URL", "PRIVATE_KEY", "NETWORK", "CHAIN_ID", "GOVERNANCE_ADDRESS", "ARTIFACTS_DIR",
    "DEPLOYMENTS_FILE", "DEPLOYMENT_CONFIG_FILE", "REPORTS_ROOT", "GAS_LIMIT", "TX_TIMEOUT", "LOG_LEVEL",
)


def clear_env(monkeypatch):
    # registered through setenv so keys written by load_dotenv are removed on teardown
    for key in ENV_KEYS:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    clear_env(monkeypatch)
    return str(tmp_path / "absent.env")


def test_defaults(clean_env):
    settings = Settings.from_env(clean_env)
    assert settings.rpc_url == "http://127.0.0.1:8545"
    assert settings.private_key is None
    assert settings.network is None
    assert settings.chain_id is None
    assert settings.gas_limit == 1_000_000
    assert settings.deployments_file == "deployments.json"


def test_values_from_environment(clean_env, monkeypatch):
    monkeypatch.setenv("RPC_URL", "http://node:8545")
    monkeypatch.setenv("NETWORK", "hardhat")
    monkeypatch.setenv("CHAIN_ID", "0x7a69")
    monkeypatch.setenv("GAS_LIMIT", "700000")
    monkeypatch.setenv("GOVERNANCE_ADDRESS", "0x5FbDB2315678afecb367f032d93F642f64180aa3")

    settings = Settings.from_env(clean_env)

    assert settings.rpc_url == "http://node:8545"
    assert settings.network == "hardhat"
    assert settings.chain_id == 31337
    assert settings.gas_limit == 700_000
    assert settings.require_governance_address() == "0x5FbDB2315678afecb367f032d93F642f64180aa3"


def test_dotenv_file_is_loaded(clean_env, monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("NETWORK=anvil\nREPORTS_ROOT=/tmp/reports\n")

    settings = Settings.from_env(str(env_file))

    assert settings.network == "anvil"
    assert settings.reports_root == "/tmp/reports"


def test_bad_integer(clean_env, monkeypatch):
    monkeypatch.setenv("CHAIN_ID", "sepolia")
    with pytest.raises(ConfigurationError):
        Settings.from_env(clean_env)


def test_missing_governance_address(clean_env):
    with pytest.raises(ConfigurationError):
        Settings.from_env(clean_env).require_governance_address()


def test_dotenv_values_removed_after_test(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("NETWORK=anvil\nREPORTS_ROOT=/tmp/reports\n")
    before = (os.environ.get("NETWORK"), os.environ.get("REPORTS_ROOT"))

    with pytest.MonkeyPatch.context() as mp:
        clear_env(mp)
        Settings.from_env(str(env_file))
        assert os.environ["NETWORK"] == "anvil"

    assert (os.environ.get("NETWORK"), os.environ.get("REPORTS_ROOT")) == before
