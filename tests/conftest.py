"""Chain doubles shared by the test modules"""
from types import SimpleNamespace

import pytest
from web3.exceptions import ContractLogicError

from base_governance.config import Settings

GOV_ADDR = "0x5FbDB2315678afecb367f032d93F642f64180aa3"
USER_ADDR = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"


class FakeFunction:
    def __init__(self, fn_name, args, result=None):
        self.fn_name = fn_name
        self.args = args
        self.result = result

    def call(self):
        return self.result


class FakeGovernance:
    """Governance contract double: records nothing itself, the client does."""

    def __init__(self, proposal_id=7, timelock_delay=60, emit_event=True):
        self.timelock_delay_calls = 0
        self.timelock_delay = timelock_delay
        logs = [{"args": {"id": proposal_id}}] if emit_event else []
        self.functions = SimpleNamespace(
            propose=lambda *a: FakeFunction("propose", a),
            vote=lambda *a: FakeFunction("vote", a),
            queue=lambda *a: FakeFunction("queue", a),
            execute=lambda *a: FakeFunction("execute", a),
            timelockDelay=self._timelock_delay,
        )
        self.events = SimpleNamespace(
            Proposed=lambda: SimpleNamespace(process_receipt=lambda receipt: logs)
        )

    def _timelock_delay(self):
        self.timelock_delay_calls += 1
        return FakeFunction("timelockDelay", (), self.timelock_delay)


class RecordingClient:
    """Stands in for ChainClient; keeps an ordered log of transactions and clock moves."""

    def __init__(self, is_local=True, fail_on=None):
        self.is_local = is_local
        self.fail_on = fail_on
        self.log = []
        self.sender = USER_ADDR

    def send_tx(self, tx_func):
        if tx_func.fn_name == self.fail_on:
            raise RuntimeError(f"{tx_func.fn_name} reverted")
        self.log.append(("tx", tx_func.fn_name, tx_func.args))
        n = len(self.log)
        return {"transactionHash": bytes([n]) * 32, "gasUsed": 21000 * n, "blockNumber": n, "status": 1}

    def increase_time(self, seconds):
        self.log.append(("time", seconds))


class FakeReportContract:
    """Answers getters from a dict; anything else reverts like a missing selector."""

    def __init__(self, values):
        self.values = values
        self.calls = []
        outer = self

        class Functions:
            def __getattr__(self, getter):
                def bind(*args):
                    outer.calls.append((getter, args))
                    if getter not in outer.values:
                        return SimpleNamespace(call=_revert)
                    return SimpleNamespace(call=lambda: outer.values[getter])
                return bind

        self.functions = Functions()


def _revert():
    raise ContractLogicError("execution reverted")


class ReportClient:
    def __init__(self, values=None):
        self.values = values or {}
        self.contracts = []

    def contract(self, address, abi):
        contract = FakeReportContract(self.values)
        self.contracts.append((address, abi, contract))
        return contract


@pytest.fixture
def settings(tmp_path):
    return Settings(
        governance_address=GOV_ADDR,
        artifacts_dir=str(tmp_path / "artifacts"),
        deployments_file=str(tmp_path / "deployments.json"),
        deployment_config_file=str(tmp_path / "config" / "deployment.json"),
        reports_root=str(tmp_path / "out"),
    )
