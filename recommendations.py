# recommendations.py

from dataclasses import asdict, dataclass
from itertools import cycle

from config import (FILLER_RECS, GAP_ASSESSMENT_REC, MIN_RECOMMENDATIONS,
                    RISK_CRITICAL, RISK_HIGH, SECTION_RECS)

# The two worst bands trigger remediation advice.
ACTION_BANDS = (RISK_HIGH, RISK_CRITICAL)


@dataclass(frozen=True)
class Recommendation:
    title: str
    description: str
    priority: str

    def to_dict(self):
        return asdict(self)


def section_priority(risk_level):
    """Critical sections get High priority advice, High-band sections get Medium."""
    return "High" if risk_level == RISK_CRITICAL else "Medium"


def recommend(overall):
    """
    Build the recommendation list for a scored assessment.

    Sections are visited in catalog order (the order of `overall.sections`),
    not by score. Each section in the High or Critical band adds its two
    templates; a High or Critical overall band adds the gap assessment; and
    the two fixed fillers are appended when fewer than three items were
    collected.

    Args:
        overall (OverallScore): output of `scoring.score`

    Returns:
        list[Recommendation]: at least three items, in display order
    """
    items = []
    for section in overall.sections:
        if section.risk_level not in ACTION_BANDS:
            continue
        priority = section_priority(section.risk_level)
        for template in SECTION_RECS.get(section.id, []):
            items.append(Recommendation(template["title"], template["description"], priority))

    if overall.overall_risk_level in ACTION_BANDS:
        items.append(Recommendation(**GAP_ASSESSMENT_REC))

    if len(items) < MIN_RECOMMENDATIONS:
        items.extend(Recommendation(**rec) for rec in FILLER_RECS)
        # nothing else collected: keep cycling the fillers up to the floor
        fillers = cycle(FILLER_RECS)
        while len(items) < MIN_RECOMMENDATIONS:
            items.append(Recommendation(**next(fillers)))
    return items
