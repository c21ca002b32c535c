from .base import MetricCategory, ReportDefinition, Rule, above, below, exceeds, is_false, scalar, struct

# --- AUDIT ---

AUDIT = ReportDefinition(
    name="audit",
    directory="audit",
    prefix="governance-audit",
    summary="Governance, voting, proposal and participation metrics with audit findings",
    categories=(
        struct("governanceSummary", "getGovernanceSummary",
               "totalProposals", "activeProposals", "completedProposals", "totalVotes", "totalVoters",
               "quorumAchieved:bool", "governanceStatus:string"),
        struct("votingMetrics", "getVotingMetrics",
               "avgVotingTime", "avgVotesPerProposal", "participationRate", "avgVotingPower", "totalVotingEvents"),
        struct("proposalMetrics", "getProposalMetrics",
               "proposalSuccessRate", "avgProposalTime", "proposalApprovalRate", "totalProposalReviews",
               "avgProposalComplexity"),
        struct("participationMetrics", "getParticipationMetrics",
               "totalActiveVoters", "avgVoterEngagement", "voterRetention", "newVoterRate", "communityTrust"),
        struct("securityChecks", "getSecurityChecks",
               "ownership:bool", "accessControl:bool", "emergencyPause:bool", "upgradeability:bool", "timelock:bool"),
    ),
    advisories=("findings", "recommendations"),
    rules=(
        Rule("findings", "Low voter participation rate detected", below("votingMetrics", "participationRate", 30)),
        Rule("findings", "Low proposal success rate detected", below("proposalMetrics", "proposalSuccessRate", 40)),
        Rule("findings", "Low voter retention rate detected", below("participationMetrics", "voterRetention", 60)),
        Rule("recommendations", "Implement voter engagement initiatives",
             below("votingMetrics", "participationRate", 50)),
        Rule("recommendations", "Review proposal quality and process",
             below("proposalMetrics", "proposalSuccessRate", 50)),
        Rule("recommendations", "Develop voter retention strategies",
             below("participationMetrics", "voterRetention", 70)),
    ),
)

# --- COMPLIANCE ---

COMPLIANT = "COMPLIANT"
NON_COMPLIANT = "NON_COMPLIANT"


def _compliance_status(report):
    report["complianceStatus"] = NON_COMPLIANT if report["violations"] else COMPLIANT


COMPLIANCE = ReportDefinition(
    name="compliance",
    directory="compliance",
    prefix="compliance-check",
    summary="Quorum, voting period and proposal limits checked against minimums",
    categories=(
        MetricCategory("complianceData", (
            scalar("owner", "owner:address"),
            scalar("getQuorum", "quorum"),
            scalar("getVotingPeriod", "votingPeriod"),
            scalar("getProposalThreshold", "proposalThreshold"),
            scalar("getActiveProposals", "activeProposals:uint256[]", reduce=len),
            scalar("getTotalVotes", "totalVotes"),
        )),
    ),
    advisories=("violations", "recommendations"),
    rules=(
        Rule("violations", "Quorum too low", below("complianceData", "quorum", 1000)),
        Rule("violations", "Voting period too short", below("complianceData", "votingPeriod", 86400)),
        Rule("recommendations", "Consider implementing proposal limits",
             above("complianceData", "activeProposals", 100)),
    ),
    finalize=_compliance_status,
)

# --- COST ANALYSIS ---

COST_ANALYSIS = ReportDefinition(
    name="cost-analysis",
    directory="cost",
    prefix="governance-cost-analysis",
    summary="Cost breakdown, efficiency and revenue",
    categories=(
        struct("costBreakdown", "getCostBreakdown",
               "developmentCost", "maintenanceCost", "operationalCost", "securityCost", "gasCost", "totalCost"),
        struct("efficiencyMetrics", "getEfficiencyMetrics",
               "costPerProposal", "costPerVoter", "roi", "costEffectiveness", "efficiencyScore"),
        struct("costOptimization", "getCostOptimization",
               "optimizationOpportunities:string[]", "potentialSavings", "implementationTime", "riskLevel:string"),
        struct("revenueAnalysis", "getRevenueAnalysis",
               "totalRevenue", "governanceFees", "platformFees", "netProfit", "profitMargin"),
    ),
    rules=(
        Rule("recommendations", "Review and optimize operational costs",
             above("costBreakdown", "totalCost", 1_200_000)),
        # 0.1 ETH in wei
        Rule("recommendations", "Reduce proposal processing costs for better efficiency",
             above("efficiencyMetrics", "costPerProposal", 10 ** 17)),
        Rule("recommendations", "Improve profit margins through cost optimization",
             below("revenueAnalysis", "profitMargin", 25)),
        Rule("recommendations", "Implement cost optimization measures",
             above("costOptimization", "potentialSavings", 60_000)),
    ),
)

# --- DASHBOARD ---

RECENT_PROPOSALS = 5

DASHBOARD = ReportDefinition(
    name="dashboard",
    directory="reports",
    prefix="governance-dashboard",
    summary="Proposal, user and delegate statistics",
    categories=(
        struct("govStats", "getGovernanceStats",
               "totalProposals", "activeProposals", "completedProposals", "passedProposals", "rejectedProposals",
               "totalVotesCast", "totalVoters"),
        struct("recentProposals", "getRecentProposals", "proposalIds:uint256[]",
               args=(RECENT_PROPOSALS,), arg_types=("uint256",)),
        struct("userStats", "getUserStats", "totalUsers", "activeUsers", "avgVotingPower"),
        struct("delegateStats", "getDelegateStats", "totalDelegates", "totalDelegators", "avgDelegation"),
    ),
    advisories=(),
)

# --- INSIGHTS ---

INSIGHTS = ReportDefinition(
    name="insights",
    directory="insights",
    prefix="governance-insights",
    summary="Participation, proposal effectiveness and community health",
    categories=(
        struct("participationMetrics", "getParticipationMetrics",
               "totalVoters", "activeVoters", "participationRate", "avgVotesPerUser"),
        struct("proposalEffectiveness", "getProposalEffectiveness",
               "totalProposals", "passedProposals", "rejectedProposals", "successRate"),
        struct("votingPatterns", "getVotingPatterns", "majorityConsensus", "minorityVotes", "abstentions"),
        struct("communityHealth", "getCommunityHealth",
               "engagementScore", "trustIndex", "diversityScore", "activityLevel"),
    ),
    advisories=("improvementAreas",),
    rules=(
        Rule("improvementAreas", "Low voter participation - implement engagement initiatives",
             below("participationMetrics", "participationRate", 30)),
        Rule("improvementAreas", "Low proposal success rate - review decision-making processes",
             below("proposalEffectiveness", "successRate", 50)),
    ),
)

# --- PERFORMANCE ---

PERFORMANCE = ReportDefinition(
    name="performance",
    directory="performance",
    prefix="governance-performance",
    summary="Response time, efficiency scores, user experience and capacity",
    categories=(
        struct("performanceMetrics", "getPerformanceMetrics",
               "responseTime", "transactionSpeed", "throughput", "uptime", "errorRate", "gasEfficiency"),
        struct("efficiencyScores", "getEfficiencyScores",
               "proposalEfficiency", "votingEfficiency", "userEngagement", "decisionMaking", "transparency"),
        struct("userExperience", "getUserExperience",
               "interfaceUsability", "transactionEase", "mobileCompatibility", "loadingSpeed",
               "customerSatisfaction"),
        struct("scalability", "getScalability",
               "userCapacity", "transactionCapacity", "storageCapacity", "networkCapacity", "futureGrowth"),
    ),
    rules=(
        Rule("recommendations", "Optimize response time for better user experience",
             above("performanceMetrics", "responseTime", 2000)),
        Rule("recommendations", "Reduce error rate through system optimization",
             above("performanceMetrics", "errorRate", 1)),
        Rule("recommendations", "Improve proposal processing efficiency",
             below("efficiencyScores", "proposalEfficiency", 70)),
        Rule("recommendations", "Enhance user experience and satisfaction",
             below("userExperience", "customerSatisfaction", 85)),
    ),
)

# --- SECURITY ---

SECURITY_AUDIT = ReportDefinition(
    name="security-audit",
    directory="security",
    prefix="governance-security-audit",
    summary="Test results, vulnerability counts, controls and risk matrix",
    categories=(
        struct("auditSummary", "getAuditSummary",
               "totalTests", "passedTests", "failedTests", "securityScore", "lastAudit", "auditStatus:string"),
        struct("vulnerabilityAssessment", "getVulnerabilityAssessment",
               "criticalVulnerabilities", "highVulnerabilities", "mediumVulnerabilities", "lowVulnerabilities",
               "totalVulnerabilities"),
        struct("securityControls", "getSecurityControls",
               "accessControl:bool", "authentication:bool", "authorization:bool", "encryption:bool",
               "backupSystems:bool", "incidentResponse:bool"),
        struct("riskMatrix", "getRiskMatrix",
               "riskScore", "riskLevel:string", "mitigationEffort", "likelihood", "impact"),
    ),
    rules=(
        Rule("recommendations", "Immediate remediation of critical vulnerabilities required",
             above("vulnerabilityAssessment", "criticalVulnerabilities", 0)),
        Rule("recommendations", "Prioritize fixing high severity vulnerabilities",
             above("vulnerabilityAssessment", "highVulnerabilities", 2)),
        Rule("recommendations", "Implement robust access control mechanisms",
             is_false("securityControls", "accessControl")),
        Rule("recommendations", "Enable data encryption for governance data",
             is_false("securityControls", "encryption")),
    ),
)

SECURITY = ReportDefinition(
    name="security",
    directory="security",
    prefix="governance-security",
    summary="Security score, vulnerability scan and risk metrics",
    categories=(
        struct("securityAssessment", "getSecurityAssessment",
               "securityScore", "auditStatus:string", "lastAudit", "securityGrade:string", "riskLevel:string"),
        struct("vulnerabilityScan", "getVulnerabilityScan",
               "criticalVulnerabilities", "highVulnerabilities", "mediumVulnerabilities", "lowVulnerabilities",
               "totalVulnerabilities", "scanDate"),
        struct("riskMetrics", "getRiskMetrics",
               "totalRiskScore", "financialRisk", "operationalRisk", "technicalRisk", "regulatoryRisk"),
        struct("securityControls", "getSecurityControls",
               "accessControl:bool", "encryption:bool", "backupSystems:bool", "monitoring:bool",
               "incidentResponse:bool"),
    ),
    rules=(
        Rule("recommendations", "Improve overall security score",
             below("securityAssessment", "securityScore", 80)),
        Rule("recommendations", "Fix critical vulnerabilities immediately",
             above("vulnerabilityScan", "criticalVulnerabilities", 0)),
        Rule("recommendations", "Implement comprehensive risk mitigation strategies",
             above("riskMetrics", "totalRiskScore", 75)),
        Rule("recommendations", "Implement robust access control mechanisms",
             is_false("securityControls", "accessControl")),
    ),
)

# --- USERS ---

USER_ANALYTICS = ReportDefinition(
    name="user-analytics",
    directory="analytics",
    prefix="governance-user-analytics",
    summary="User demographics, engagement, voting patterns and segments",
    categories=(
        struct("userDemographics", "getUserDemographics",
               "totalUsers", "activeUsers", "newUsers", "returningUsers", "userDistribution:uint256[]"),
        struct("engagementMetrics", "getEngagementMetrics",
               "avgSessionTime", "dailyActiveUsers", "weeklyActiveUsers", "monthlyActiveUsers", "userRetention",
               "engagementScore"),
        struct("votingPatterns", "getVotingPatterns",
               "avgVotingPower", "votingFrequency", "popularProposals:uint256[]", "peakVotingHours:uint256[]",
               "averageVotingTime", "participationRate"),
        struct("userSegments", "getUserSegments",
               "casualVoters", "activeVoters", "frequentVoters", "occasionalVoters", "highValueVoters",
               "segmentDistribution:uint256[]"),
    ),
    rules=(
        Rule("recommendations", "Low user retention - implement retention strategies",
             below("engagementMetrics", "userRetention", 65)),
        Rule("recommendations", "Low voting participation - improve engagement",
             below("votingPatterns", "participationRate", 30)),
        Rule("recommendations", "Low high-value voters - focus on premium user acquisition",
             below("userSegments", "highValueVoters", 80)),
        Rule("recommendations", "More casual voters than active voters - consider voter engagement",
             exceeds("userSegments", "casualVoters", "activeVoters")),
    ),
)

USER_ENGAGEMENT = ReportDefinition(
    name="user-engagement",
    directory="engagement",
    prefix="governance-engagement",
    summary="User growth, engagement scores, retention and activity patterns",
    categories=(
        struct("userMetrics", "getUserMetrics",
               "totalUsers", "activeUsers", "newUsers", "returningUsers", "userGrowthRate"),
        struct("engagementScores", "getEngagementScores",
               "overallEngagement", "userRetention", "votingEngagement", "proposalEngagement",
               "communityEngagement"),
        struct("retentionAnalysis", "getRetentionAnalysis",
               "day1Retention", "day7Retention", "day30Retention", "cohortAnalysis:uint256[]", "churnRate"),
        struct("activityPatterns", "getActivityPatterns",
               "peakHours:uint256[]", "weeklyActivity:uint256[]", "seasonalTrends:uint256[]",
               "userSegments:string[]", "engagementFrequency"),
    ),
    advisories=("recommendation",),
    rules=(
        Rule("recommendation", "Improve overall user engagement",
             below("engagementScores", "overallEngagement", 75)),
        Rule("recommendation", "Implement retention strategies",
             below("retentionAnalysis", "day30Retention", 20)),
        Rule("recommendation", "Boost user acquisition efforts",
             below("userMetrics", "userGrowthRate", 6)),
        Rule("recommendation", "Enhance user retention programs",
             below("engagementScores", "userRetention", 50)),
    ),
)
