"""
JSON-RPC binding shared by every script.

Wraps a Web3 instance and the signer used for state-changing calls. When no
PRIVATE_KEY is configured the first node-managed account is used instead,
which is what a local Hardhat or anvil node hands out.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

from eth_account import Account
from web3 import Web3
from web3.exceptions import ContractLogicError
from web3.types import RPCEndpoint

from .config import Settings, is_local_network
from .errors import NetworkNotLocalError, TransactionRevertedError

logger = logging.getLogger(__name__)


@dataclass
class Artifact:
    name: str
    abi: List[Dict[str, Any]]
    bytecode: str


def load_artifact(contract_name: str, root_path: str = "artifacts") -> Artifact:
    """Loads ABI and bytecode from a Hardhat (artifacts/) or Foundry (out/) build tree."""
    root = Path(root_path)
    matches = sorted(root.rglob(f"{contract_name}.json")) if root.exists() else []
    if not matches:
        raise FileNotFoundError(f"Artifact for {contract_name} not found under: {root.resolve()}")

    with open(matches[0], "r") as f:
        artifact = json.load(f)

    bytecode = artifact.get("bytecode", "")
    # Foundry nests the creation code under "object"
    if isinstance(bytecode, dict):
        bytecode = bytecode.get("object", "")
    return Artifact(name=contract_name, abi=artifact["abi"], bytecode=bytecode)


class ChainClient:
    def __init__(self, w3: Web3, account=None, network: Optional[str] = None,
                 chain_id: Optional[int] = None, gas_limit: int = 1_000_000, tx_timeout: int = 120):
        self.w3 = w3
        self.account = account
        self.network = network
        self.gas_limit = gas_limit
        self.tx_timeout = tx_timeout
        self._chain_id = chain_id

    @classmethod
    def from_settings(cls, settings: Settings) -> "ChainClient":
        w3 = Web3(Web3.HTTPProvider(settings.rpc_url))
        if not w3.is_connected():
            raise ConnectionError(f"Could not connect to RPC URL: {settings.rpc_url}")
        account = Account.from_key(settings.private_key) if settings.private_key else None
        return cls(
            w3,
            account=account,
            network=settings.network,
            chain_id=settings.chain_id,
            gas_limit=settings.gas_limit,
            tx_timeout=settings.tx_timeout,
        )

    @property
    def chain_id(self) -> int:
        if self._chain_id is None:
            self._chain_id = self.w3.eth.chain_id
        return self._chain_id

    @property
    def sender(self) -> str:
        if self.account is not None:
            return self.account.address
        accounts = self.w3.eth.accounts
        if not accounts:
            raise RuntimeError("No PRIVATE_KEY configured and the node exposes no accounts")
        return accounts[0]

    @property
    def is_local(self) -> bool:
        if self.network:
            return is_local_network(self.network, None)
        return is_local_network(None, self.chain_id)

    def contract(self, address: str, abi):
        return self.w3.eth.contract(address=Web3.to_checksum_address(address), abi=abi)

    def balance_of(self, address: str) -> int:
        return self.w3.eth.get_balance(address)

    def send_tx(self, tx_func):
        """Builds, dry-runs, sends one transaction and blocks until its receipt is in."""
        fn_name = getattr(tx_func, "fn_name", "constructor")
        sender = self.sender
        tx = tx_func.build_transaction({
            "chainId": self.chain_id,
            "from": sender,
            "nonce": self.w3.eth.get_transaction_count(sender, "pending"),
            "gas": self.gas_limit,
            "gasPrice": self.w3.eth.gas_price,
        })

        # Simulate first (eth_call) to get the revert reason
        try:
            self.w3.eth.call(tx)
        except ContractLogicError as e:
            raise TransactionRevertedError(fn_name, e) from e

        logger.debug("Sending %s from %s", fn_name, sender)
        if self.account is not None:
            signed = self.account.sign_transaction(tx)
            tx_hash = self.w3.eth.send_raw_transaction(signed.raw_transaction)
        else:
            tx_hash = self.w3.eth.send_transaction(tx)

        receipt = self.w3.eth.wait_for_transaction_receipt(tx_hash, timeout=self.tx_timeout)
        if receipt["status"] == 0:
            raise TransactionRevertedError(fn_name, f"on-chain, tx hash {self.w3.to_hex(tx_hash)}")
        logger.debug("%s included in block %s, gas used %s", fn_name, receipt["blockNumber"], receipt["gasUsed"])
        return receipt

    def deploy(self, artifact: Artifact, *args):
        factory = self.w3.eth.contract(abi=artifact.abi, bytecode=artifact.bytecode)
        receipt = self.send_tx(factory.constructor(*args))
        address = receipt["contractAddress"]
        logger.info("%s deployed at %s", artifact.name, address)
        return self.contract(address, artifact.abi)

    def increase_time(self, seconds: int):
        """Advances the node clock and mines a block. Local networks only."""
        if not self.is_local:
            raise NetworkNotLocalError(f"refusing to advance time on network {self.network or self.chain_id}")
        logger.info("Advancing chain time by %ss", seconds)
        self.w3.provider.make_request(RPCEndpoint("evm_increaseTime"), [int(seconds)])
        self.w3.provider.make_request(RPCEndpoint("evm_mine"), [])
