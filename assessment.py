# assessment.py

import logging

from config import FALLBACK_RECS, FALLBACK_SCORE
from recommendations import Recommendation, recommend
from report import render
from scoring import AnswerStore, OverallScore, score

logger = logging.getLogger(__name__)


def fallback_result():
    """The neutral result shown when scoring fails, so the flow never dead-ends."""
    return (
        OverallScore.from_dict(FALLBACK_SCORE),
        [Recommendation(**rec) for rec in FALLBACK_RECS],
    )


def assess(answers, catalog_version=None):
    """
    Score the answers and derive recommendations.

    Args:
        answers (AnswerStore | dict): frozen store, or raw section -> question -> value dict
        catalog_version (str, optional): edition used to validate a raw dict

    Returns:
        tuple: (OverallScore, list[Recommendation]); the fallback pair if anything raised
    """
    try:
        if not isinstance(answers, AnswerStore):
            answers = AnswerStore.from_raw(answers, catalog_version)
        result = score(answers)
        return result, recommend(result)
    except Exception:
        logger.exception("Scoring failed, using the fallback result")
        return fallback_result()


def generate_report(contact, overall, recommendations, generated_on=None):
    """
    Build the PDF report once. Failures are logged and give None; there is no retry.
    """
    try:
        return render(contact, overall, recommendations, generated_on)
    except Exception:
        logger.exception("Report generation failed for %s", getattr(contact, "company", "?"))
        return None
