"""
Drives one proposal through propose -> vote -> queue -> execute.

The proposal state machine lives in the governance contract. This module only
issues the next transaction once the previous one is mined, and on a local
node fast-forwards the clock past the vote delay and the timelock.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional

from web3 import Web3

from .errors import ProposalNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_VOTE_DELAY = 10
VOTE_POWER = 1
NOOP_DATA = b""


@dataclass
class Proposal:
    id: int
    target: str
    value: int
    data: bytes
    vote_delay: int


@dataclass
class StepResult:
    tx_hash: str = ""
    gas_used: int = 0
    block_number: int = 0


@dataclass
class LifecycleResult:
    proposal: Optional[Proposal] = None
    steps: Dict[str, StepResult] = field(default_factory=dict)
    timelock_delay: int = 0

    @property
    def total_gas(self) -> int:
        return sum(s.gas_used for s in self.steps.values())


def _step(receipt) -> StepResult:
    return StepResult(
        tx_hash=Web3.to_hex(receipt["transactionHash"]),
        gas_used=receipt["gasUsed"],
        block_number=receipt["blockNumber"],
    )


def proposal_id_from_receipt(governance, receipt) -> int:
    logs = governance.events.Proposed().process_receipt(receipt)
    if not logs:
        raise ProposalNotFoundError(
            f"no Proposed event in tx {Web3.to_hex(receipt['transactionHash'])}"
        )
    return int(logs[0]["args"]["id"])


def run_lifecycle(client, governance, target: str, value: int = 0, data: bytes = NOOP_DATA,
                  vote_delay: int = DEFAULT_VOTE_DELAY) -> LifecycleResult:
    """Runs the full lifecycle for a single proposal. Any revert propagates; nothing is rolled back."""
    res = LifecycleResult()

    # 1. PROPOSE
    logger.info("Proposing call to %s (value=%s, delay=%ss)", target, value, vote_delay)
    receipt = client.send_tx(governance.functions.propose(target, value, data, vote_delay))
    res.steps["propose"] = _step(receipt)
    proposal_id = proposal_id_from_receipt(governance, receipt)
    res.proposal = Proposal(id=proposal_id, target=target, value=value, data=data, vote_delay=vote_delay)
    logger.info("Proposal id: %s", proposal_id)

    # 2. VOTE
    receipt = client.send_tx(governance.functions.vote(proposal_id, True, VOTE_POWER))
    res.steps["vote"] = _step(receipt)
    logger.info("Voted yes on %s", proposal_id)

    # 3. QUEUE
    if client.is_local:
        client.increase_time(vote_delay + 1)
    receipt = client.send_tx(governance.functions.queue(proposal_id))
    res.steps["queue"] = _step(receipt)
    logger.info("Queued %s", proposal_id)

    # 4. EXECUTE
    if client.is_local:
        res.timelock_delay = int(governance.functions.timelockDelay().call())
        client.increase_time(res.timelock_delay + 1)
    receipt = client.send_tx(governance.functions.execute(proposal_id))
    res.steps["execute"] = _step(receipt)
    logger.info("Executed %s", proposal_id)

    return res
