#!/usr/bin/env python3
"""
Deploys the governance contracts from compiled artifacts and records the addresses.

Two contract shapes are in circulation and neither is authoritative:

  --variant v2        ERC20Token + GovernanceProtocolV2(token, quorum, delay, period, threshold)
                      -> config/deployment.json
  --variant protocol  optional ProposalManager + parameterless GovernanceProtocol
                      -> deployments.json (read by the smoke test)
"""

import argparse
import json
import logging
import sys
from datetime import datetime, timezone

from web3 import Web3

from .client import ChainClient, load_artifact
from .config import Settings
from .files import save_json
from .log import setup_logging

logger = logging.getLogger(__name__)

# GovernanceProtocolV2 constructor parameters
QUORUM_THRESHOLD = 1000          # basis points, 10%
VOTING_DELAY = 86400             # 1 day
VOTING_PERIOD = 604800           # 7 days
PROPOSAL_THRESHOLD = Web3.to_wei(1000, "ether")

TOKEN_NAME = "Governance Token"
TOKEN_SYMBOL = "GOV"


def log_deployer(client):
    deployer = client.sender
    logger.info("Deploying contracts with the account: %s", deployer)
    logger.info("Account balance: %s ETH", Web3.from_wei(client.balance_of(deployer), "ether"))
    return deployer


def deploy_governance_v2(client, settings: Settings, loader=load_artifact):
    deployer = log_deployer(client)

    token = client.deploy(loader("ERC20Token", settings.artifacts_dir), TOKEN_NAME, TOKEN_SYMBOL)
    governance = client.deploy(
        loader("GovernanceProtocolV2", settings.artifacts_dir),
        token.address,
        QUORUM_THRESHOLD,
        VOTING_DELAY,
        VOTING_PERIOD,
        PROPOSAL_THRESHOLD,
    )

    data = {
        "governance": governance.address,
        "governanceToken": token.address,
        "owner": deployer,
    }
    save_json(data, settings.deployment_config_file)
    return data


def deploy_protocol(client, settings: Settings, loader=load_artifact):
    deployer = log_deployer(client)
    contracts = {}

    # Optional component, skipped on any failure
    try:
        manager = client.deploy(loader("ProposalManager", settings.artifacts_dir))
        contracts["ProposalManager"] = manager.address
    except Exception as e:
        logger.warning("ProposalManager skipped: %s", e)

    governance = client.deploy(loader("GovernanceProtocol", settings.artifacts_dir))
    contracts["GovernanceProtocol"] = governance.address

    data = {
        "network": client.network or "unknown",
        "chainId": client.chain_id,
        "deployer": deployer,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "contracts": contracts,
    }
    save_json(data, settings.deployments_file)
    return data


VARIANTS = {
    "v2": deploy_governance_v2,
    "protocol": deploy_protocol,
}


def main(argv=None):
    parser = argparse.ArgumentParser(description="Deploy governance contracts")
    parser.add_argument("--variant", choices=sorted(VARIANTS), default="protocol")
    args = parser.parse_args(argv)

    settings = Settings.from_env()
    setup_logging(settings.log_level)
    try:
        client = ChainClient.from_settings(settings)
        data = VARIANTS[args.variant](client, settings)
        print(json.dumps(data, indent=2))
    except Exception:
        logger.exception("Deployment failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
