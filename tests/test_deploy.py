"""Tests for both deployment variants"""
import json
from types import SimpleNamespace

from web3 import Web3

from base_governance.client import Artifact
from base_governance.files import save_json
from base_governance.deploy import (
    PROPOSAL_THRESHOLD,
    QUORUM_THRESHOLD,
    VOTING_DELAY,
    VOTING_PERIOD,
    deploy_governance_v2,
    deploy_protocol,
)

from conftest import USER_ADDR


class DeployClient:
    network = "hardhat"
    chain_id = 31337
    sender = USER_ADDR

    def __init__(self, fail=()):
        self.fail = fail
        self.deployed = []

    def balance_of(self, address):
        return Web3.to_wei(10000, "ether")

    def deploy(self, artifact, *args):
        if artifact.name in self.fail:
            raise ValueError(f"{artifact.name}: constructor arguments mismatch")
        self.deployed.append((artifact.name, args))
        return SimpleNamespace(address="0x" + f"{len(self.deployed):040x}")


def fake_loader(name, root):
    return Artifact(name=name, abi=[], bytecode="0x00")


def missing_loader(*missing):
    def loader(name, root):
        if name in missing:
            raise FileNotFoundError(name)
        return fake_loader(name, root)
    return loader


def test_v2_deploys_token_then_governance(settings):
    client = DeployClient()

    data = deploy_governance_v2(client, settings, loader=fake_loader)

    token_addr = "0x" + f"{1:040x}"
    assert client.deployed == [
        ("ERC20Token", ("Governance Token", "GOV")),
        ("GovernanceProtocolV2", (token_addr, QUORUM_THRESHOLD, VOTING_DELAY, VOTING_PERIOD, PROPOSAL_THRESHOLD)),
    ]
    assert PROPOSAL_THRESHOLD == 1000 * 10 ** 18
    with open(settings.deployment_config_file) as f:
        assert json.load(f) == data == {
            "governance": "0x" + f"{2:040x}",
            "governanceToken": token_addr,
            "owner": USER_ADDR,
        }


def test_protocol_variant_with_proposal_manager(settings):
    client = DeployClient()

    data = deploy_protocol(client, settings, loader=fake_loader)

    assert [name for name, _ in client.deployed] == ["ProposalManager", "GovernanceProtocol"]
    assert set(data["contracts"]) == {"ProposalManager", "GovernanceProtocol"}
    assert data["network"] == "hardhat"
    assert data["chainId"] == 31337
    assert data["deployer"] == USER_ADDR


def test_protocol_variant_skips_mismatched_proposal_manager(settings):
    client = DeployClient(fail=("ProposalManager",))

    data = deploy_protocol(client, settings, loader=fake_loader)

    assert data["contracts"] == {"GovernanceProtocol": "0x" + f"{1:040x}"}
    with open(settings.deployments_file) as f:
        assert json.load(f)["contracts"] == data["contracts"]


def test_protocol_variant_skips_missing_artifact(settings):
    client = DeployClient()

    data = deploy_protocol(client, settings, loader=missing_loader("ProposalManager"))

    assert list(data["contracts"]) == ["GovernanceProtocol"]


def test_save_json_creates_parent_directories(tmp_path):
    path = str(tmp_path / "a" / "b" / "out.json")

    assert save_json({"k": 1}, path) == path
    with open(path) as f:
        assert json.load(f) == {"k": 1}
