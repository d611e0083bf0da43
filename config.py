# --- Configuration --------------------------------------------------------------------------------

# Question types understood by the scoring engine.
SINGLE_CHOICE = "single-choice"
MULTI_CHOICE = "multi-choice"
NUMERIC_RANGE = "numeric-range"

# Risk bands, best to worst. One vocabulary for every catalog edition.
RISK_LOW = "Low"
RISK_MODERATE = "Moderate"
RISK_HIGH = "High"
RISK_CRITICAL = "Critical"
RISK_BANDS = [RISK_LOW, RISK_MODERATE, RISK_HIGH, RISK_CRITICAL]

# (lower bound in percent, band). First match wins.
RISK_THRESHOLDS = [
    (75, RISK_LOW),
    (50, RISK_MODERATE),
    (25, RISK_HIGH),
    (0, RISK_CRITICAL),
]

PRIORITIES = ["High", "Medium", "Low"]


# --- Questions ------------------------------------------------------------------------------------

Q_CERTIFICATIONS = {
    "id": "certifications",
    "text": "Do you currently have any compliance certifications (SOC 2, ISO 27001, etc.)?",
    "type": SINGLE_CHOICE,
    "options": [
        {"value": "multiple", "label": "Yes, multiple certifications"},
        {"value": "one", "label": "Yes, one certification"},
        {"value": "inProgress", "label": "No, but we're in the process of obtaining one"},
        {"value": "none", "label": "No certifications"},
    ],
}
Q_COMPLIANCE_TEAM = {
    "id": "complianceTeam",
    "text": "Do you have a designated compliance owner/team?",
    "type": SINGLE_CHOICE,
    "options": [
        {"value": "dedicatedTeam", "label": "Yes, a dedicated compliance team"},
        {"value": "dedicatedPerson", "label": "Yes, a dedicated compliance person"},
        {"value": "partTime", "label": "Yes, but it's a part-time responsibility"},
        {"value": "none", "label": "No designated owner"},
    ],
}
Q_SECURITY_POLICIES = {
    "id": "securityPolicies",
    "text": "Are your security policies documented and regularly reviewed?",
    "type": SINGLE_CHOICE,
    "options": [
        {"value": "documentedAndReviewed", "label": "Yes, documented and regularly reviewed"},
        {"value": "documented", "label": "Yes, documented but not regularly reviewed"},
        {"value": "outdated", "label": "Yes, but they're mostly outdated"},
        {"value": "none", "label": "No formal documentation"},
    ],
}
Q_TRAINING_FREQUENCY = {
    "id": "trainingFrequency",
    "text": "How frequently are employees trained on compliance best practices?",
    "type": SINGLE_CHOICE,
    "options": [
        {"value": "quarterly", "label": "Quarterly or more often"},
        {"value": "biannual", "label": "Twice a year"},
        {"value": "annual", "label": "Once a year"},
        {"value": "adhoc", "label": "Ad-hoc or never"},
    ],
}
Q_WORKFLOWS = {
    "id": "workflows",
    "text": "Are compliance workflows automated or done manually?",
    "type": SINGLE_CHOICE,
    "options": [
        {"value": "fullyAutomated", "label": "Fully automated"},
        {"value": "partiallyAutomated", "label": "Partially automated"},
        {"value": "manual", "label": "Completely manual"},
        {"value": "none", "label": "We don't have established workflows"},
    ],
}
Q_COMPLIANCE_TOOL = {
    "id": "complianceTool",
    "text": "Do you use a compliance management tool today?",
    "type": SINGLE_CHOICE,
    "options": [
        {"value": "dedicated", "label": "Yes, a dedicated compliance platform"},
        {"value": "general", "label": "Yes, but general tools (Jira, etc.)"},
        {"value": "spreadsheets", "label": "We use spreadsheets and documents"},
        {"value": "none", "label": "No tools in place"},
    ],
}
Q_EVIDENCE_COLLECTION = {
    "id": "evidenceCollection",
    "text": "How is audit evidence collected today?",
    "type": SINGLE_CHOICE,
    "options": [
        {"value": "automated", "label": "Automatically collected and stored"},
        {"value": "centralizedManual", "label": "Manually collected but centrally stored"},
        {"value": "adhoc", "label": "Ad-hoc collection when needed"},
        {"value": "none", "label": "We don't formally collect evidence"},
    ],
}
Q_COMPLIANCE_GAPS = {
    "id": "complianceGaps",
    "text": "Are there automated alerts for compliance gaps or control failures?",
    "type": SINGLE_CHOICE,
    "options": [
        {"value": "realtime", "label": "Yes, real-time alerts"},
        {"value": "scheduled", "label": "Yes, on a scheduled basis"},
        {"value": "manual", "label": "Gaps are found through manual checks"},
        {"value": "none", "label": "No alerting in place"},
    ],
}
Q_ACCESS_REVIEWS = {
    "id": "accessReviews",
    "text": "How frequently do you conduct access reviews?",
    "type": SINGLE_CHOICE,
    "options": [
        {"value": "automated", "label": "Continuously through automation"},
        {"value": "quarterly", "label": "Quarterly or more frequently"},
        {"value": "annually", "label": "Annually or semi-annually"},
        {"value": "never", "label": "Never or very rarely"},
    ],
}
Q_CONTROL_MONITORING = {
    "id": "controlMonitoring",
    "text": "Are you monitoring for control violations in real-time?",
    "type": SINGLE_CHOICE,
    "options": [
        {"value": "automated", "label": "Yes, with automated alerting"},
        {"value": "regular", "label": "Yes, with regular manual checks"},
        {"value": "adhoc", "label": "Only ad-hoc monitoring"},
        {"value": "none", "label": "No monitoring in place"},
    ],
}
Q_INCIDENT_RESPONSE = {
    "id": "incidentResponse",
    "text": "Do you have incident response documentation?",
    "type": SINGLE_CHOICE,
    "options": [
        {"value": "documentedAndTested", "label": "Yes, documented and regularly tested"},
        {"value": "documented", "label": "Yes, documented but not regularly tested"},
        {"value": "informal", "label": "Informal processes only"},
        {"value": "none", "label": "No incident response plan"},
    ],
}
Q_CONTROL_MATURITY = {
    "id": "controlMaturity",
    "text": "How are your controls documented and reviewed?",
    "type": SINGLE_CHOICE,
    "options": [
        {"value": "comprehensiveReviewed", "label": "Comprehensively documented and reviewed"},
        {"value": "documented", "label": "Documented but rarely reviewed"},
        {"value": "partial", "label": "Partially documented"},
        {"value": "none", "label": "Not documented"},
    ],
}
Q_LAST_AUDIT = {
    "id": "lastAudit",
    "text": "When was your last formal audit?",
    "type": SINGLE_CHOICE,
    "options": [
        {"value": "sixMonths", "label": "Within the last 6 months"},
        {"value": "oneYear", "label": "Within the last year"},
        {"value": "twoYears", "label": "More than a year ago"},
        {"value": "never", "label": "Never had a formal audit"},
    ],
}
Q_AUDIT_PREP = {
    "id": "auditPrep",
    "text": "How long does it take you to prepare for audits?",
    "type": SINGLE_CHOICE,
    "options": [
        {"value": "lessThanMonth", "label": "Less than a month"},
        {"value": "oneToThreeMonths", "label": "1-3 months"},
        {"value": "threeToSixMonths", "label": "3-6 months"},
        {"value": "moreThanSixMonths", "label": "More than 6 months"},
    ],
}
Q_DEAL_IMPACT = {
    "id": "dealImpact",
    "text": "Have you ever lost a deal or delayed funding due to compliance gaps?",
    "type": SINGLE_CHOICE,
    "options": [
        {"value": "never", "label": "Never"},
        {"value": "rarely", "label": "Rarely"},
        {"value": "occasionally", "label": "Occasionally"},
        {"value": "frequently", "label": "Frequently"},
    ],
}
Q_RISK_ASSESSMENT = {
    "id": "riskAssessment",
    "text": "How often are risk assessments conducted?",
    "type": SINGLE_CHOICE,
    "options": [
        {"value": "quarterly", "label": "Quarterly"},
        {"value": "biannual", "label": "Twice a year"},
        {"value": "annual", "label": "Once a year"},
        {"value": "adhoc", "label": "Ad-hoc or never"},
    ],
}
Q_CHANGE_APPROVAL = {
    "id": "changeApproval",
    "text": "How are infrastructure or IT changes approved and documented?",
    "type": SINGLE_CHOICE,
    "options": [
        {"value": "formalAutomated", "label": "Formal process with automated tracking"},
        {"value": "formalManual", "label": "Formal process, manually tracked"},
        {"value": "informal", "label": "Informal approvals"},
        {"value": "none", "label": "No approval process"},
    ],
}
Q_CHANGE_RISK_TRACKING = {
    "id": "changeRiskTracking",
    "text": "Is there a clear protocol for tracking change-related risks?",
    "type": SINGLE_CHOICE,
    "options": [
        {"value": "comprehensive", "label": "Yes, a comprehensive protocol"},
        {"value": "basic", "label": "Yes, a basic protocol"},
        {"value": "minimal", "label": "Minimal tracking"},
        {"value": "none", "label": "No tracking"},
    ],
}
Q_VENDOR_ASSESSMENT = {
    "id": "vendorAssessment",
    "text": "How are vendors assessed before onboarding?",
    "type": SINGLE_CHOICE,
    "options": [
        {"value": "comprehensive", "label": "Comprehensive security and compliance review"},
        {"value": "basic", "label": "Basic questionnaire"},
        {"value": "minimal", "label": "Minimal checks"},
        {"value": "none", "label": "No assessment"},
    ],
}
Q_VENDOR_MONITORING = {
    "id": "vendorMonitoring",
    "text": "Is there an ongoing vendor risk monitoring process?",
    "type": SINGLE_CHOICE,
    "options": [
        {"value": "automated", "label": "Yes, continuous automated monitoring"},
        {"value": "periodic", "label": "Yes, periodic reviews"},
        {"value": "annual", "label": "Annual review only"},
        {"value": "none", "label": "No ongoing monitoring"},
    ],
}

# Points per option. Explicit on purpose: never derived from option order or labels.
POINTS = {
    "certifications": {"multiple": 5, "one": 3, "inProgress": 2, "none": 0},
    "complianceTeam": {"dedicatedTeam": 5, "dedicatedPerson": 4, "partTime": 2, "none": 0},
    "securityPolicies": {"documentedAndReviewed": 5, "documented": 3, "outdated": 1, "none": 0},
    "trainingFrequency": {"quarterly": 5, "biannual": 3, "annual": 2, "adhoc": 0},
    "workflows": {"fullyAutomated": 5, "partiallyAutomated": 3, "manual": 1, "none": 0},
    "complianceTool": {"dedicated": 5, "general": 3, "spreadsheets": 1, "none": 0},
    "evidenceCollection": {"automated": 5, "centralizedManual": 3, "adhoc": 1, "none": 0},
    "complianceGaps": {"realtime": 5, "scheduled": 3, "manual": 1, "none": 0},
    "accessReviews": {"automated": 5, "quarterly": 4, "annually": 2, "never": 0},
    "controlMonitoring": {"automated": 5, "regular": 3, "adhoc": 1, "none": 0},
    "incidentResponse": {"documentedAndTested": 5, "documented": 3, "informal": 1, "none": 0},
    "controlMaturity": {"comprehensiveReviewed": 5, "documented": 3, "partial": 1, "none": 0},
    "lastAudit": {"sixMonths": 5, "oneYear": 4, "twoYears": 2, "never": 0},
    "auditPrep": {"lessThanMonth": 5, "oneToThreeMonths": 3, "threeToSixMonths": 1, "moreThanSixMonths": 0},
    "dealImpact": {"never": 5, "rarely": 3, "occasionally": 1, "frequently": 0},
    "riskAssessment": {"quarterly": 5, "biannual": 3, "annual": 2, "adhoc": 0},
    "changeApproval": {"formalAutomated": 5, "formalManual": 3, "informal": 1, "none": 0},
    "changeRiskTracking": {"comprehensive": 5, "basic": 3, "minimal": 1, "none": 0},
    "vendorAssessment": {"comprehensive": 5, "basic": 3, "minimal": 1, "none": 0},
    "vendorMonitoring": {"automated": 5, "periodic": 3, "annual": 1, "none": 0},
}


# --- Catalog editions -----------------------------------------------------------------------------

# Edition 2: five sections, 20 points each. One question in four of the sections was
# removed from the questionnaire and is scored from other answers ("retired").
CATALOG_V2 = {
    "version": "2",
    "max_score": 20,
    "sections": [
        {
            "id": "complianceMaturity",
            "title": "Compliance Program Maturity",
            "description": "Let's assess how mature your compliance program is today.",
            "questions": [
                Q_CERTIFICATIONS,
                Q_COMPLIANCE_TEAM,
                Q_SECURITY_POLICIES,
                Q_TRAINING_FREQUENCY,
            ],
        },
        {
            "id": "toolingAutomation",
            "title": "Tooling & Automation",
            "description": "Let's understand how automated your compliance processes are.",
            "questions": [Q_WORKFLOWS, Q_COMPLIANCE_TOOL, Q_COMPLIANCE_GAPS],
        },
        {
            "id": "securityOperations",
            "title": "Security Operations & Controls",
            "description": "Let's evaluate your security operations practices.",
            "questions": [Q_ACCESS_REVIEWS, Q_CONTROL_MONITORING, Q_CONTROL_MATURITY],
        },
        {
            "id": "auditReadiness",
            "title": "Audit Readiness & Risk Management",
            "description": "Let's assess how prepared you are for compliance audits.",
            "questions": [Q_LAST_AUDIT, Q_AUDIT_PREP, Q_DEAL_IMPACT],
        },
        {
            "id": "changeManagement",
            "title": "Change Management & Vendor Risk",
            "description": "Let's look at how you manage change and third-party risk.",
            "questions": [Q_CHANGE_RISK_TRACKING, Q_VENDOR_ASSESSMENT, Q_VENDOR_MONITORING],
        },
    ],
    "retired": {
        "toolingAutomation": [Q_EVIDENCE_COLLECTION],
        "securityOperations": [Q_INCIDENT_RESPONSE],
        "auditReadiness": [Q_RISK_ASSESSMENT],
        "changeManagement": [Q_CHANGE_APPROVAL],
    },
    "weights": {
        "complianceMaturity": 20,
        "toolingAutomation": 20,
        "securityOperations": 20,
        "auditReadiness": 20,
        "changeManagement": 20,
    },
}

# Edition 1: four sections of three questions, 15 points each, nothing retired.
CATALOG_V1 = {
    "version": "1",
    "max_score": 15,
    "sections": [
        {
            "id": "complianceMaturity",
            "title": "Compliance Program Maturity",
            "description": "Let's assess how mature your compliance program is today.",
            "questions": [Q_CERTIFICATIONS, Q_COMPLIANCE_TEAM, Q_SECURITY_POLICIES],
        },
        {
            "id": "toolingAutomation",
            "title": "Tooling & Automation",
            "description": "Let's understand how automated your compliance processes are.",
            "questions": [Q_WORKFLOWS, Q_COMPLIANCE_TOOL, Q_EVIDENCE_COLLECTION],
        },
        {
            "id": "securityOperations",
            "title": "Security Operations",
            "description": "Let's evaluate your security operations practices.",
            "questions": [Q_ACCESS_REVIEWS, Q_CONTROL_MONITORING, Q_INCIDENT_RESPONSE],
        },
        {
            "id": "auditReadiness",
            "title": "Audit Readiness",
            "description": "Let's assess how prepared you are for compliance audits.",
            "questions": [Q_LAST_AUDIT, Q_AUDIT_PREP, Q_DEAL_IMPACT],
        },
    ],
    "retired": {},
    "weights": {
        "complianceMaturity": 25,
        "toolingAutomation": 25,
        "securityOperations": 25,
        "auditReadiness": 25,
    },
}

CATALOGS = {"1": CATALOG_V1, "2": CATALOG_V2}
DEFAULT_CATALOG_VERSION = "2"


# --- Recommendations ------------------------------------------------------------------------------

# Two templates per section, emitted when the section lands in the High or Critical band.
SECTION_RECS = {
    "complianceMaturity": [
        {
            "title": "Establish a Formal Compliance Program",
            "description": "Designate a compliance owner, develop a structured approach to compliance "
            "certifications, and implement regular training cycles.",
        },
        {
            "title": "Document and Standardize Security Policies",
            "description": "Create or update security policies with regular review cycles and establish "
            "employee training programs that reflect current compliance requirements.",
        },
    ],
    "toolingAutomation": [
        {
            "title": "Implement a Compliance Management Platform",
            "description": "Replace manual processes and spreadsheets with a dedicated compliance automation "
            "solution that centralizes evidence collection across frameworks.",
        },
        {
            "title": "Automate Evidence Collection and Compliance Monitoring",
            "description": "Reduce manual effort and human error by implementing automated evidence collection "
            "and real-time alerts for control failures or compliance gaps.",
        },
    ],
    "securityOperations": [
        {
            "title": "Establish Regular Control Reviews and Testing",
            "description": "Implement automated access reviews and continuous control monitoring with "
            "comprehensive documentation of controls that is regularly updated.",
        },
        {
            "title": "Create and Test Incident Response Procedures",
            "description": "Develop detailed incident response documentation and conduct regular tabletop "
            "exercises to ensure effectiveness of your security operations.",
        },
    ],
    "auditReadiness": [
        {
            "title": "Develop a Comprehensive Audit Readiness Program",
            "description": "Create a structured approach to prepare for audits more efficiently with regular "
            "risk assessments and streamlined evidence retrieval.",
        },
        {
            "title": "Implement Risk-based Control Monitoring",
            "description": "Map business risks to specific controls, establish a maintained risk register, "
            "and develop processes to identify and evaluate emerging risks.",
        },
    ],
    "changeManagement": [
        {
            "title": "Establish Formal Change Management Processes",
            "description": "Implement structured approval workflows for infrastructure and IT changes with "
            "clear risk tracking protocols and cross-team communication.",
        },
        {
            "title": "Enhance Vendor Risk Management",
            "description": "Develop comprehensive vendor assessment procedures, implement ongoing monitoring, "
            "and regularly review contracts for compliance requirements.",
        },
    ],
}

GAP_ASSESSMENT_REC = {
    "title": "Conduct a Comprehensive Compliance Gap Assessment",
    "description": "Perform a thorough review of your compliance program to identify all gaps and develop "
    "a remediation plan with clear ownership and timelines.",
    "priority": "High",
}

FILLER_RECS = [
    {
        "title": "Streamline Compliance Workflows with Clear Ownership",
        "description": "Define control ownership across teams, establish accountability metrics, and optimize "
        "your compliance processes to reduce manual effort.",
        "priority": "Medium",
    },
    {
        "title": "Enhance Security Questionnaire Management",
        "description": "Implement a standardized process for managing incoming security questionnaires, "
        "ensuring accurate responses, and tracking completion.",
        "priority": "Low",
    },
]

MIN_RECOMMENDATIONS = 3


# --- Fallback result (engine failure) -------------------------------------------------------------

FALLBACK_SCORE = {
    "overall_score": 50,
    "overall_risk_level": RISK_MODERATE,
    "sections": [
        {"id": s["id"], "title": s["title"], "score": 10, "max_score": 20, "risk_level": RISK_MODERATE}
        for s in CATALOG_V2["sections"]
    ],
}

FALLBACK_RECS = [
    {
        "title": "Implement a Centralized Compliance Platform to Reduce Manual Audit Debt",
        "description": "Replace manual processes and spreadsheets with a dedicated compliance automation solution.",
        "priority": "High",
    },
    {
        "title": "Automate Evidence Collection to Cut Down Operational Audit Debt",
        "description": "Reduce manual effort and human error by automating the collection of compliance evidence.",
        "priority": "Medium",
    },
    {
        "title": "Establish Regular Access Reviews",
        "description": "Implement quarterly or more frequent access reviews to maintain proper access control.",
        "priority": "Medium",
    },
]


# --- Leads ----------------------------------------------------------------------------------------

PERSONAL_EMAIL_DOMAINS = {
    "gmail.com",
    "yahoo.com",
    "hotmail.com",
    "outlook.com",
    "aol.com",
    "icloud.com",
}

COMPANY_SIZES = [
    {"label": "1-25 employees", "value": "1-25"},
    {"label": "26-100 employees", "value": "26-100"},
    {"label": "101-250 employees", "value": "101-250"},
    {"label": "251-500 employees", "value": "251-500"},
    {"label": "501-2000 employees", "value": "501-2000"},
    {"label": "2001-5000 employees", "value": "2001-5000"},
    {"label": "5001+ employees", "value": "5001+"},
]

BOOKING_BASE_URL = "https://sprinto.com/get-a-demo"
BOOKING_SOURCE = "audit_debt_scorecard"


# --- Report copy ----------------------------------------------------------------------------------

REPORT_TITLE = "Sprinto Audit Debt Scorecard Report"

RISK_INSIGHTS = {
    RISK_LOW: "Your organization has minimal audit debt. Continue with your current practices.",
    RISK_MODERATE: "Your organization has some audit debt that should be addressed in the coming months.",
    RISK_HIGH: "Your organization has significant audit debt that requires immediate attention.",
    RISK_CRITICAL: "Your organization has critical audit debt that poses serious risks to your business.",
}

BUSINESS_IMPACT = [
    "Failed compliance audits",
    "Lost business opportunities",
    "Costly remediation efforts",
    "Security vulnerabilities",
    "Operational inefficiencies",
]

CALL_TO_ACTION = (
    "Contact Sprinto to automate your compliance program and eliminate audit debt. "
    "Visit: www.sprinto.com/get-a-demo"
)
