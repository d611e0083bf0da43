"""
Pytest Configuration and Shared Fixtures

Answer sets, leads and a small custom catalog shared by the test modules.
"""

from datetime import date

import pytest

from config import CATALOG_V2, MULTI_CHOICE, NUMERIC_RANGE, POINTS, SINGLE_CHOICE
from leads import Lead


def _pick(question, best=True):
    points = POINTS[question["id"]]
    chooser = max if best else min
    return chooser(points, key=points.get)


def answers_for(catalog, best=True):
    """Answer every active question with its best (or worst) option."""
    return {
        section["id"]: {q["id"]: _pick(q, best) for q in section["questions"]}
        for section in catalog["sections"]
    }


@pytest.fixture
def best_answers():
    return answers_for(CATALOG_V2, best=True)


@pytest.fixture
def worst_answers():
    return answers_for(CATALOG_V2, best=False)


@pytest.fixture
def mixed_answers():
    """
    Hand-scored edition 2 answers.

    complianceMaturity 10 (Moderate), toolingAutomation 7 (High),
    securityOperations 13 (Moderate), auditReadiness 13 (Moderate),
    changeManagement 4 (Critical); overall 47 (High).
    """
    return {
        "complianceMaturity": {
            "certifications": "one",
            "complianceTeam": "partTime",
            "securityPolicies": "documented",
            "trainingFrequency": "annual",
        },
        "toolingAutomation": {
            "workflows": "partiallyAutomated",
            "complianceTool": "spreadsheets",
            "complianceGaps": "none",
        },
        "securityOperations": {
            "accessReviews": "quarterly",
            "controlMonitoring": "regular",
            "controlMaturity": "documented",
        },
        "auditReadiness": {
            "lastAudit": "oneYear",
            "auditPrep": "oneToThreeMonths",
            "dealImpact": "rarely",
        },
        "changeManagement": {
            "changeRiskTracking": "minimal",
            "vendorAssessment": "none",
            "vendorMonitoring": "none",
        },
    }


@pytest.fixture
def lead():
    return Lead(
        full_name="Dana Reyes",
        email="dana@acmecorp.com",
        company="Acme  Corp",
        designation="Head of Security",
        company_size="101-250",
    )


@pytest.fixture
def report_date():
    return date(2024, 5, 1)


@pytest.fixture
def typed_catalog():
    """One section mixing all three question types, 10 points max."""
    return {
        "version": "test",
        "max_score": 10,
        "sections": [
            {
                "id": "mixed",
                "title": "Mixed",
                "description": "",
                "questions": [
                    {
                        "id": "frameworks",
                        "text": "Which frameworks are you certified for?",
                        "type": MULTI_CHOICE,
                        "options": [
                            {"value": "soc2", "label": "SOC 2"},
                            {"value": "iso", "label": "ISO 27001"},
                            {"value": "hipaa", "label": "HIPAA"},
                        ],
                    },
                    {
                        "id": "controls",
                        "text": "How many controls are monitored?",
                        "type": NUMERIC_RANGE,
                        "min": 0,
                        "max": 100,
                        "step": 10,
                    },
                ],
            },
            {
                "id": "single",
                "title": "Single",
                "description": "",
                "questions": [
                    {
                        "id": "owner",
                        "text": "Owner?",
                        "type": SINGLE_CHOICE,
                        "options": [
                            {"value": "yes", "label": "Yes"},
                            {"value": "no", "label": "No"},
                        ],
                    }
                ],
            },
        ],
        "retired": {},
        "weights": {"mixed": 50, "single": 50},
        "points": {
            "frameworks": {"soc2": 3, "iso": 3, "hipaa": 1},
            "controls": [(0, 0), (25, 2), (50, 4), (90, 5)],
            "owner": {"yes": 5, "no": 0},
        },
    }
