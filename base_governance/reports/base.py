"""
Shared report template.

A report is a list of metric categories, each filled from one or more
read-only getters on the governance contract, followed by threshold rules
that turn metric values into advisory strings. The ABI for the getters is
generated from the category declarations.

The generated ABI declares each struct getter as a flat list of outputs.
That decodes the same as a struct return only while every field is static;
a getter with a string or dynamic array field (getGovernanceSummary,
getCostOptimization) needs the ABI from the compiled contract, passed in as
`abi`.

Getters are assumed fallible: a call that reverts or returns nothing leaves
its fields out, and the failure is listed under "unavailable". Strict mode
aborts on the first failure instead.
"""

import logging
import os
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Tuple

from web3.exceptions import Web3Exception

from ..errors import MetricUnavailableError
from ..files import save_json

logger = logging.getLogger(__name__)

Report = Dict[str, Any]


def _parse_output(spec: str) -> Tuple[str, str]:
    # "name" is a uint256, "name:type" anything else
    name, _, abi_type = spec.partition(":")
    return name, abi_type or "uint256"


@dataclass(frozen=True)
class Call:
    getter: str
    outputs: Tuple[Tuple[str, str], ...]
    args: Tuple[Any, ...] = ()
    arg_types: Tuple[str, ...] = ()
    reduce: Optional[Callable[[Any], Any]] = None

    def abi(self) -> Dict[str, Any]:
        return {
            "inputs": [{"name": f"arg{i}", "type": t} for i, t in enumerate(self.arg_types)],
            "name": self.getter,
            "outputs": [{"name": n, "type": t} for n, t in self.outputs],
            "stateMutability": "view",
            "type": "function",
        }

    def read(self, contract) -> Dict[str, Any]:
        result = getattr(contract.functions, self.getter)(*self.args).call()
        values = [result] if len(self.outputs) == 1 else list(result)
        out = {}
        for (name, _), raw in zip(self.outputs, values):
            value = to_display(raw)
            out[name] = self.reduce(value) if self.reduce else value
        return out


@dataclass(frozen=True)
class MetricCategory:
    name: str
    calls: Tuple[Call, ...] = ()


def struct(name: str, getter: str, *outputs: str, args=(), arg_types=()) -> MetricCategory:
    """Category filled by a single getter returning several named values."""
    return MetricCategory(name, (Call(getter, tuple(_parse_output(o) for o in outputs), tuple(args), tuple(arg_types)),))


def scalar(getter: str, output: str, reduce=None) -> Call:
    return Call(getter, (_parse_output(output),), reduce=reduce)


def to_display(value):
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, (bytes, bytearray)):
        return "0x" + bytes(value).hex()
    if isinstance(value, (list, tuple)):
        return [to_display(v) for v in value]
    return value


# --- RULES ---

def metric(report: Report, category: str, name: str):
    section = report.get(category)
    if not isinstance(section, dict):
        return None
    return section.get(name)


def as_number(value) -> Optional[float]:
    """Float view of a metric, None when it is missing or not numeric."""
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def below(category: str, name: str, threshold: float):
    def check(report):
        value = as_number(metric(report, category, name))
        return value is not None and value < threshold
    return check


def above(category: str, name: str, threshold: float):
    def check(report):
        value = as_number(metric(report, category, name))
        return value is not None and value > threshold
    return check


def is_false(category: str, name: str):
    return lambda report: metric(report, category, name) is False


def exceeds(category: str, name: str, other: str):
    """True when one metric of a category is numerically larger than another."""
    def check(report):
        a = as_number(metric(report, category, name))
        b = as_number(metric(report, category, other))
        return a is not None and b is not None and a > b
    return check


@dataclass(frozen=True)
class Rule:
    target: str
    message: str
    check: Callable[[Report], bool]


@dataclass(frozen=True)
class ReportDefinition:
    name: str
    directory: str
    prefix: str
    categories: Tuple[MetricCategory, ...]
    rules: Tuple[Rule, ...] = ()
    advisories: Tuple[str, ...] = ("recommendations",)
    summary: str = ""
    populate: Optional[Callable[[Report], None]] = None
    finalize: Optional[Callable[[Report], None]] = None

    @property
    def needs_contract(self) -> bool:
        return any(c.calls for c in self.categories)

    def abi(self) -> List[Dict[str, Any]]:
        entries = {}
        for category in self.categories:
            for call in category.calls:
                entries.setdefault(call.getter, call.abi())
        return list(entries.values())


def iso_timestamp(now: datetime) -> str:
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def evaluate(definition: ReportDefinition, report: Report) -> Report:
    """Applies the rules in declared order. Advisory lists are rebuilt from scratch."""
    for target in definition.advisories:
        report[target] = []
    for rule in definition.rules:
        if rule.check(report):
            report[rule.target].append(rule.message)
    if definition.finalize:
        definition.finalize(report)
    return report


class ReportGenerator:
    def __init__(self, definition: ReportDefinition, client=None, governance_address: Optional[str] = None,
                 output_root: str = ".", strict: bool = False, abi: Optional[List[Dict[str, Any]]] = None):
        self.definition = definition
        self.client = client
        self.governance_address = governance_address
        self.output_root = output_root
        self.strict = strict
        self.abi = abi

    def _contract(self):
        if self.client is None or not self.governance_address:
            raise ValueError(f"{self.definition.name} report needs a client and a governance address")
        return self.client.contract(self.governance_address, self.abi or self.definition.abi())

    def collect(self, now: Optional[datetime] = None) -> Report:
        now = now or datetime.now(timezone.utc)
        d = self.definition
        report: Report = {"timestamp": iso_timestamp(now), "governanceAddress": self.governance_address}
        unavailable = []
        contract = self._contract() if d.needs_contract else None

        for category in d.categories:
            section = {}
            for call in category.calls:
                try:
                    section.update(call.read(contract))
                except (Web3Exception, ValueError) as e:
                    err = MetricUnavailableError(category.name, call.getter, e)
                    if self.strict:
                        raise err from e
                    logger.warning("Skipping %s", err)
                    unavailable.append({"category": category.name, "getter": call.getter, "error": str(e)})
            report[category.name] = section

        if d.populate:
            d.populate(report)
        evaluate(d, report)
        report["unavailable"] = unavailable
        return report

    def output_path(self, now: datetime) -> str:
        epoch_ms = int(now.timestamp() * 1000)
        return os.path.join(self.output_root, self.definition.directory, f"{self.definition.prefix}-{epoch_ms}.json")

    def write(self, report: Report, now: datetime) -> str:
        return save_json(report, self.output_path(now))

    def generate(self, now: Optional[datetime] = None) -> Tuple[str, Report]:
        now = now or datetime.now(timezone.utc)
        logger.info("Generating %s report for %s", self.definition.name, self.governance_address or "-")
        report = self.collect(now)
        return self.write(report, now), report
