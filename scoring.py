# scoring.py

import logging
import math
from dataclasses import asdict, dataclass, field
from fractions import Fraction
from types import MappingProxyType
from typing import Mapping, Optional, Union

import pandas as pd

from config import (CATALOGS, DEFAULT_CATALOG_VERSION, MULTI_CHOICE,
                    NUMERIC_RANGE, POINTS, RISK_CRITICAL, RISK_THRESHOLDS,
                    SINGLE_CHOICE)

logger = logging.getLogger(__name__)


# ----------- Answers -------------
@dataclass(frozen=True)
class ChoiceAnswer:
    value: str


@dataclass(frozen=True)
class MultiChoiceAnswer:
    values: frozenset


@dataclass(frozen=True)
class RangeAnswer:
    value: int


Answer = Union[ChoiceAnswer, MultiChoiceAnswer, RangeAnswer]

_ANSWER_TYPES = {
    SINGLE_CHOICE: ChoiceAnswer,
    MULTI_CHOICE: MultiChoiceAnswer,
    NUMERIC_RANGE: RangeAnswer,
}


def get_catalog(version=None):
    """
    Return the catalog edition for `version`.

    Unknown versions fall back to the default edition with a warning, so a
    stale client never breaks scoring.
    """
    version = DEFAULT_CATALOG_VERSION if version is None else str(version)
    if version not in CATALOGS:
        logger.warning(
            "Unknown catalog version %r, using %s", version, DEFAULT_CATALOG_VERSION
        )
        version = DEFAULT_CATALOG_VERSION
    return CATALOGS[version]


def question_index(catalog):
    """
    Map section id -> question id -> (question, retired) for every scored question.

    Active questions come first, in catalog order, followed by retired ones.
    """
    index = {}
    for section in catalog["sections"]:
        entries = {q["id"]: (q, False) for q in section["questions"]}
        for q in catalog.get("retired", {}).get(section["id"], []):
            entries.setdefault(q["id"], (q, True))
        index[section["id"]] = entries
    return index


def _option_values(question):
    return {o["value"] for o in question.get("options", [])}


def coerce_answer(question, raw) -> Optional[Answer]:
    """
    Turn a raw UI value into the typed answer for `question`.

    Returns None when the value is empty or does not fit the question
    (unknown option, wrong shape, number outside [min, max]).
    """
    qtype = question.get("type", SINGLE_CHOICE)
    expected = _ANSWER_TYPES.get(qtype)
    if expected is None:
        return None
    if isinstance(raw, expected):
        raw = raw.value if expected is not MultiChoiceAnswer else raw.values

    if qtype == SINGLE_CHOICE:
        if isinstance(raw, str) and raw in _option_values(question):
            return ChoiceAnswer(raw)
        return None

    if qtype == MULTI_CHOICE:
        if isinstance(raw, str) or not isinstance(raw, (list, tuple, set, frozenset)):
            return None
        chosen = frozenset(v for v in raw if isinstance(v, str)) & _option_values(question)
        return MultiChoiceAnswer(chosen) if chosen else None

    # numeric range
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        return None
    if isinstance(raw, float) and not math.isfinite(raw):
        return None
    value = int(round(raw))
    lo = question.get("min", value)
    hi = question.get("max", value)
    if not lo <= value <= hi:
        return None
    return RangeAnswer(value)


@dataclass(frozen=True)
class AnswerStore:
    """
    Read-only answers for one session: section id -> question id -> Answer.

    Always build it with `from_raw` so every value is checked against the
    catalog edition named by `catalog_version`.
    """

    catalog_version: str = DEFAULT_CATALOG_VERSION
    answers: Mapping = field(default_factory=dict)

    @classmethod
    def from_raw(cls, raw, catalog_version=None, catalog=None):
        catalog = catalog or get_catalog(catalog_version)
        index = question_index(catalog)
        parsed = {}
        if not isinstance(raw, Mapping):
            if raw is not None:
                logger.debug("Ignoring answers of type %s", type(raw).__name__)
            raw = {}
        for section_id, section_answers in raw.items():
            questions = index.get(section_id)
            if questions is None:
                logger.debug("Dropping answers for unknown section %r", section_id)
                continue
            if not isinstance(section_answers, Mapping):
                logger.debug("Dropping malformed answers for section %r", section_id)
                continue
            for question_id, value in section_answers.items():
                entry = questions.get(question_id)
                if entry is None:
                    logger.debug("Dropping unknown question %s.%s", section_id, question_id)
                    continue
                answer = coerce_answer(entry[0], value)
                if answer is None:
                    if value not in (None, "", [], ()):
                        logger.debug(
                            "Dropping invalid answer %r for %s.%s", value, section_id, question_id
                        )
                    continue
                parsed.setdefault(section_id, {})[question_id] = answer
        frozen = {k: MappingProxyType(v) for k, v in parsed.items()}
        return cls(catalog["version"], MappingProxyType(frozen))

    def get(self, section_id, question_id):
        return self.answers.get(section_id, {}).get(question_id)

    def choice(self, section_id, question_id):
        """Return the chosen option value of a single-choice answer, or None."""
        answer = self.get(section_id, question_id)
        return answer.value if isinstance(answer, ChoiceAnswer) else None

    def to_raw(self):
        raw = {}
        for section_id, section_answers in self.answers.items():
            for question_id, answer in section_answers.items():
                if isinstance(answer, MultiChoiceAnswer):
                    value = sorted(answer.values)
                else:
                    value = answer.value
                raw.setdefault(section_id, {})[question_id] = value
        return raw


# ----------- Inference -------------
def infer_evidence_collection(workflows):
    """Evidence collection follows workflow automation."""
    return {
        "fullyAutomated": "automated",
        "partiallyAutomated": "centralizedManual",
        "manual": "adhoc",
        "none": "none",
    }.get(workflows)


def infer_incident_response(compliance_team, security_policies):
    """
    Incident response maturity from compliance ownership and policy documentation.

    | owner                       | policies                        | result              |
    |-----------------------------|---------------------------------|---------------------|
    | dedicated team/person       | documented and reviewed         | documentedAndTested |
    | any owner                   | documented (reviewed or not)    | documented          |
    | any owner                   | anything                        | informal            |
    | none / unanswered           | outdated or documented          | informal            |
    | none / unanswered           | none / unanswered               | none                |

    Both unanswered means the inferred question stays unanswered.
    """
    if compliance_team is None and security_policies is None:
        return None
    strong_owner = compliance_team in ("dedicatedTeam", "dedicatedPerson")
    has_owner = strong_owner or compliance_team == "partTime"
    documented = security_policies in ("documentedAndReviewed", "documented")
    if strong_owner and security_policies == "documentedAndReviewed":
        return "documentedAndTested"
    if has_owner and documented:
        return "documented"
    if has_owner or documented or security_policies == "outdated":
        return "informal"
    return "none"


def infer_risk_assessment(last_audit):
    """The more recent the last audit, the higher the assessment cadence."""
    return {
        "sixMonths": "quarterly",
        "oneYear": "biannual",
        "twoYears": "annual",
        "never": "adhoc",
    }.get(last_audit)


def infer_change_approval(security_policies):
    return {
        "documentedAndReviewed": "formalAutomated",
        "documented": "formalManual",
        "outdated": "informal",
        "none": "none",
    }.get(security_policies)


# inferred question id -> (rule, source (section, question) pairs). Evaluated in this order,
# reading only direct answers.
INFERENCE_RULES = {
    "evidenceCollection": (
        infer_evidence_collection,
        [("toolingAutomation", "workflows")],
    ),
    "incidentResponse": (
        infer_incident_response,
        [("complianceMaturity", "complianceTeam"), ("complianceMaturity", "securityPolicies")],
    ),
    "riskAssessment": (
        infer_risk_assessment,
        [("auditReadiness", "lastAudit")],
    ),
    "changeApproval": (
        infer_change_approval,
        [("complianceMaturity", "securityPolicies")],
    ),
}


def infer_answers(store, catalog=None):
    """
    Derive surrogate answers for the retired questions of a catalog.

    Questions the respondent answered explicitly are left alone.

    :param store: AnswerStore with the direct answers
    :param catalog: catalog edition, defaults to the store's edition
    :return: dict of (section id, question id) -> ChoiceAnswer
    """
    catalog = catalog or get_catalog(store.catalog_version)
    retired = {
        q["id"]: section_id
        for section_id, questions in catalog.get("retired", {}).items()
        for q in questions
    }
    inferred = {}
    for question_id, (rule, sources) in INFERENCE_RULES.items():
        section_id = retired.get(question_id)
        if section_id is None or store.get(section_id, question_id) is not None:
            continue
        value = rule(*[store.choice(s, q) for s, q in sources])
        if value is not None:
            inferred[(section_id, question_id)] = ChoiceAnswer(value)
    for question_id, section_id in retired.items():
        if question_id not in INFERENCE_RULES:
            logger.warning("No inference rule for retired question %s.%s", section_id, question_id)
    return inferred


# ----------- Points -------------
def question_points(question, answer, table=None) -> int:
    """
    Points earned by one answer.

    Single choice: table lookup. Multi choice: sum of the selected options,
    capped at the best single option. Numeric range: the points of the highest
    threshold not above the value.
    """
    if answer is None:
        return 0
    table = POINTS if table is None else table
    rule = table.get(question["id"])
    if rule is None:
        return 0
    if isinstance(answer, ChoiceAnswer):
        return int(rule.get(answer.value, 0)) if isinstance(rule, Mapping) else 0
    if isinstance(answer, MultiChoiceAnswer):
        if not isinstance(rule, Mapping):
            return 0
        total = sum(int(rule.get(v, 0)) for v in answer.values)
        return min(total, max(rule.values(), default=0))
    if isinstance(rule, Mapping):
        return 0
    earned = 0
    for threshold, pts in sorted(rule):
        if answer.value >= threshold:
            earned = pts
    return int(earned)


def question_max_points(question, table=None) -> int:
    table = POINTS if table is None else table
    rule = table.get(question["id"])
    if not rule:
        return 0
    if isinstance(rule, Mapping):
        return int(max(rule.values()))
    return int(max(pts for _, pts in rule))


def score_rows(store, catalog=None):
    """
    One row per scored question with the answer used and the points earned.

    Args:
        store (AnswerStore): the frozen answers
        catalog (dict, optional): catalog edition, defaults to the store's edition

    Returns:
        pd.DataFrame: columns section, question, text, answer, points, max_points, inferred
    """
    catalog = catalog or get_catalog(store.catalog_version)
    table = catalog.get("points", POINTS)
    inferred = infer_answers(store, catalog)
    rows = []
    for section_id, questions in question_index(catalog).items():
        for question_id, (question, _retired) in questions.items():
            answer = store.get(section_id, question_id)
            guessed = answer is None and (section_id, question_id) in inferred
            if guessed:
                answer = inferred[(section_id, question_id)]
            rows.append(
                {
                    "section": section_id,
                    "question": question_id,
                    "text": question["text"],
                    "answer": _answer_text(answer),
                    "points": question_points(question, answer, table),
                    "max_points": question_max_points(question, table),
                    "inferred": guessed,
                }
            )
    return pd.DataFrame(
        rows,
        columns=["section", "question", "text", "answer", "points", "max_points", "inferred"],
    )


def _answer_text(answer):
    if answer is None:
        return ""
    if isinstance(answer, MultiChoiceAnswer):
        return ", ".join(sorted(answer.values))
    return str(answer.value)


# ----------- Classification -------------
def classify(score, max_score):
    """
    Map a score to its risk band.

    Compared as exact ratios, so 15/20 (75%) is Low and 14/20 is Moderate.
    A non-positive max_score has nothing to show and is Critical.
    """
    if max_score <= 0:
        return RISK_CRITICAL
    for threshold, band in RISK_THRESHOLDS:
        if score * 100 >= threshold * max_score:
            return band
    return RISK_CRITICAL


# ----------- Scores -------------
@dataclass(frozen=True)
class SectionScore:
    id: str
    title: str
    score: int
    max_score: int
    risk_level: str

    @property
    def percent(self):
        return round(self.score / self.max_score * 100) if self.max_score else 0


@dataclass(frozen=True)
class OverallScore:
    overall_score: int
    overall_risk_level: str
    sections: tuple = ()

    def to_dict(self):
        return asdict(self)

    @classmethod
    def from_dict(cls, data):
        return cls(
            overall_score=int(data["overall_score"]),
            overall_risk_level=data["overall_risk_level"],
            sections=tuple(SectionScore(**s) for s in data.get("sections", [])),
        )


def score(answers, catalog=None) -> OverallScore:
    """
    Compute section scores and the weighted overall score.

    Pure: the same answers always give the same result. Raw dicts are
    validated into an AnswerStore first; unknown sections or questions add
    nothing. The weighted sum is rounded once, half up, at the very end.

    Args:
        answers (AnswerStore | dict): the respondent's answers
        catalog (dict, optional): catalog edition, defaults to the store's edition

    Returns:
        OverallScore: overall percentage, band, and one SectionScore per catalog section
    """
    if not isinstance(answers, AnswerStore):
        answers = AnswerStore.from_raw(answers, catalog=catalog)
    catalog = catalog or get_catalog(answers.catalog_version)
    max_score = int(catalog["max_score"])
    weights = catalog["weights"]

    df = score_rows(answers, catalog)
    totals = df.groupby("section", sort=False)["points"].sum() if not df.empty else {}

    sections = []
    weighted = Fraction(0)
    for section in catalog["sections"]:
        raw = int(totals.get(section["id"], 0))
        points = min(max(raw, 0), max_score)
        sections.append(
            SectionScore(
                id=section["id"],
                title=section["title"],
                score=points,
                max_score=max_score,
                risk_level=classify(points, max_score),
            )
        )
        if max_score > 0:
            weighted += Fraction(points, max_score) * Fraction(weights.get(section["id"], 0))

    overall = min(max(math.floor(weighted + Fraction(1, 2)), 0), 100)
    return OverallScore(
        overall_score=int(overall),
        overall_risk_level=classify(overall, 100),
        sections=tuple(sections),
    )
