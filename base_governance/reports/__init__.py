from .base import ReportDefinition, ReportGenerator, evaluate
from .definitions import (
    AUDIT,
    COMPLIANCE,
    COST_ANALYSIS,
    DASHBOARD,
    INSIGHTS,
    PERFORMANCE,
    SECURITY,
    SECURITY_AUDIT,
    USER_ANALYTICS,
    USER_ENGAGEMENT,
)
from .simulation import SIMULATION

REPORTS = {
    d.name: d
    for d in (
        AUDIT,
        COMPLIANCE,
        COST_ANALYSIS,
        DASHBOARD,
        INSIGHTS,
        PERFORMANCE,
        SECURITY_AUDIT,
        SECURITY,
        SIMULATION,
        USER_ANALYTICS,
        USER_ENGAGEMENT,
    )
}

__all__ = ["REPORTS", "ReportDefinition", "ReportGenerator", "evaluate"]
