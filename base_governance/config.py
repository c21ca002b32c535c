import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .errors import ConfigurationError

DEFAULT_RPC_URL = "http://127.0.0.1:8545"

# Network names that accept evm_increaseTime / evm_mine
LOCAL_NETWORKS = {"hardhat", "localhost", "anvil", "ganache", "development"}
LOCAL_CHAIN_IDS = {31337, 1337}


def _int_env(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw, 0)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}")


@dataclass
class Settings:
    rpc_url: str = DEFAULT_RPC_URL
    private_key: Optional[str] = None
    network: Optional[str] = None
    chain_id: Optional[int] = None
    governance_address: Optional[str] = None
    artifacts_dir: str = "artifacts"
    deployments_file: str = "deployments.json"
    deployment_config_file: str = os.path.join("config", "deployment.json")
    reports_root: str = "."
    gas_limit: int = 1_000_000
    tx_timeout: int = 120
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "Settings":
        """Loads .env (if any) and reads settings from the process environment."""
        load_dotenv(dotenv_path)
        defaults = cls()
        return cls(
            rpc_url=os.getenv("RPC_URL") or defaults.rpc_url,
            private_key=os.getenv("PRIVATE_KEY") or None,
            network=os.getenv("NETWORK") or None,
            chain_id=_int_env("CHAIN_ID", None),
            governance_address=os.getenv("GOVERNANCE_ADDRESS") or None,
            artifacts_dir=os.getenv("ARTIFACTS_DIR") or defaults.artifacts_dir,
            deployments_file=os.getenv("DEPLOYMENTS_FILE") or defaults.deployments_file,
            deployment_config_file=os.getenv("DEPLOYMENT_CONFIG_FILE") or defaults.deployment_config_file,
            reports_root=os.getenv("REPORTS_ROOT") or defaults.reports_root,
            gas_limit=_int_env("GAS_LIMIT", defaults.gas_limit),
            tx_timeout=_int_env("TX_TIMEOUT", defaults.tx_timeout),
            log_level=os.getenv("LOG_LEVEL") or defaults.log_level,
        )

    def require_governance_address(self) -> str:
        if not self.governance_address:
            raise ConfigurationError("GOVERNANCE_ADDRESS is not set. Fill .env and retry.")
        return self.governance_address


def is_local_network(network: Optional[str], chain_id: Optional[int]) -> bool:
    if network:
        return network.lower() in LOCAL_NETWORKS
    return chain_id in LOCAL_CHAIN_IDS
