class GovernanceToolError(Exception):
    """Base class for errors raised by the governance tooling."""


class ConfigurationError(GovernanceToolError):
    pass


class TransactionRevertedError(GovernanceToolError):
    def __init__(self, fn_name, detail):
        self.fn_name = fn_name
        self.detail = detail
        super().__init__(f"{fn_name} reverted: {detail}")


class ProposalNotFoundError(GovernanceToolError):
    """The propose receipt carried no Proposed event."""


class NetworkNotLocalError(GovernanceToolError):
    """Time manipulation was requested against a live network."""


class MetricUnavailableError(GovernanceToolError):
    def __init__(self, category, getter, cause):
        self.category = category
        self.getter = getter
        self.cause = cause
        super().__init__(f"{category}: {getter}() failed: {cause}")
