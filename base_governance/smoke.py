#!/usr/bin/env python3
"""
Smoke test against a deployed GovernanceProtocol.

Proposes a zero-value no-op call back to the sender, votes yes, queues and
executes it. On a local node the clock is advanced past the vote delay and
the timelock; on a live network the script expects those delays to have
already elapsed between steps and reverts otherwise.
"""

import json
import logging
import sys

from .abis import GOVERNANCE_PROTOCOL_ABI
from .client import ChainClient
from .config import Settings
from .errors import ConfigurationError
from .lifecycle import DEFAULT_VOTE_DELAY, run_lifecycle
from .log import setup_logging

logger = logging.getLogger(__name__)


def resolve_governance_address(settings: Settings) -> str:
    if settings.governance_address:
        return settings.governance_address
    try:
        with open(settings.deployments_file, "r") as f:
            deployments = json.load(f)
    except FileNotFoundError:
        raise ConfigurationError(
            f"No GOVERNANCE_ADDRESS set and deployments file not found: {settings.deployments_file}"
        )
    address = deployments.get("contracts", {}).get("GovernanceProtocol")
    if not address:
        raise ConfigurationError(f"{settings.deployments_file} has no contracts.GovernanceProtocol entry")
    return address


def run(settings: Settings, vote_delay: int = DEFAULT_VOTE_DELAY):
    gov_addr = resolve_governance_address(settings)
    client = ChainClient.from_settings(settings)
    governance = client.contract(gov_addr, GOVERNANCE_PROTOCOL_ABI)
    print(f"Gov: {gov_addr}")

    user = client.sender
    result = run_lifecycle(client, governance, target=user, value=0, vote_delay=vote_delay)

    print(f"Proposal id: {result.proposal.id}")
    for step, info in result.steps.items():
        print(f"  {step:<8} tx={info.tx_hash} block={info.block_number} gas={info.gas_used}")
    print(f"Total gas: {result.total_gas}")
    return result


def main():
    settings = Settings.from_env()
    setup_logging(settings.log_level)
    try:
        run(settings)
    except Exception:
        logger.exception("Smoke test failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
