"""Static participation scenarios. No contract calls are made."""

from .base import MetricCategory, ReportDefinition, Rule, above, below

SCENARIOS = {
    "highParticipation": ("High participation scenario", 10000, 85, 5, 60, 90),
    "lowParticipation": ("Low participation scenario", 1000, 15, 1, 30, 60),
    "growth": ("Growth scenario", 15000, 88, 6, 65, 92),
    "decline": ("Decline scenario", 8000, 70, 4, 50, 75),
}

SCENARIO_FIELDS = ("totalVoters", "participationRate", "avgVotesPerUser", "proposalSuccessRate", "communityTrust")


def build_scenario(key, timestamp):
    description, *figures = SCENARIOS[key]
    scenario = {"description": description}
    scenario.update(zip(SCENARIO_FIELDS, figures))
    scenario["timestamp"] = timestamp
    return scenario


def calculate_governance_result(scenario) -> float:
    return scenario["totalVoters"] * scenario["participationRate"] / 10000


def _populate(report):
    timestamp = report["timestamp"]
    scenarios = {key: build_scenario(key, timestamp) for key in SCENARIOS}
    report["scenarios"] = scenarios
    report["results"] = {key: calculate_governance_result(s) for key, s in scenarios.items()}
    _, *figures = SCENARIOS["highParticipation"]
    report["participationMetrics"] = dict(zip(SCENARIO_FIELDS, figures))


SIMULATION = ReportDefinition(
    name="simulation",
    directory="simulation",
    prefix="governance-simulation",
    summary="Governance outcome under four participation scenarios",
    categories=(
        MetricCategory("scenarios"),
        MetricCategory("results"),
        MetricCategory("participationMetrics"),
    ),
    rules=(
        Rule("recommendations", "Maintain current engagement levels",
             above("participationMetrics", "participationRate", 80)),
        Rule("recommendations", "Improve proposal quality and process",
             below("participationMetrics", "proposalSuccessRate", 50)),
    ),
    populate=_populate,
)
