"""
Tests for the Recommendation Generator.
"""

from config import (FILLER_RECS, GAP_ASSESSMENT_REC, RISK_CRITICAL, RISK_HIGH,
                    RISK_LOW, RISK_MODERATE, SECTION_RECS)
from recommendations import recommend, section_priority
from scoring import AnswerStore, OverallScore, SectionScore, score

FILLER_TITLES = [r["title"] for r in FILLER_RECS]


def _overall(overall_score, overall_band, *sections):
    return OverallScore(
        overall_score=overall_score,
        overall_risk_level=overall_band,
        sections=tuple(
            SectionScore(id=sid, title=sid, score=pts, max_score=20, risk_level=band)
            for sid, pts, band in sections
        ),
    )


class TestRecommend:
    def test_all_best_answers_get_only_fillers(self, best_answers):
        recs = recommend(score(AnswerStore.from_raw(best_answers)))
        assert len(recs) == 3
        assert {r.title for r in recs} == set(FILLER_TITLES)
        assert [r.title for r in recs[:2]] == FILLER_TITLES
        assert [r.priority for r in recs] == ["Medium", "Low", "Medium"]

    def test_no_answers_flag_every_section(self):
        result = score(AnswerStore.from_raw({}))
        recs = recommend(result)

        assert len(recs) == 11
        assert all(r.priority == "High" for r in recs)
        assert recs[-1].title == GAP_ASSESSMENT_REC["title"]
        expected = [t["title"] for s in result.sections for t in SECTION_RECS[s.id]]
        assert [r.title for r in recs[:-1]] == expected

    def test_mixed_answers(self, mixed_answers):
        recs = recommend(score(mixed_answers))
        assert [r.title for r in recs] == [
            SECTION_RECS["toolingAutomation"][0]["title"],
            SECTION_RECS["toolingAutomation"][1]["title"],
            SECTION_RECS["changeManagement"][0]["title"],
            SECTION_RECS["changeManagement"][1]["title"],
            GAP_ASSESSMENT_REC["title"],
        ]
        assert [r.priority for r in recs] == ["Medium", "Medium", "High", "High", "High"]

    def test_catalog_order_not_score_order(self):
        overall = _overall(
            60,
            RISK_MODERATE,
            ("complianceMaturity", 9, RISK_HIGH),
            ("toolingAutomation", 20, RISK_LOW),
            ("auditReadiness", 0, RISK_CRITICAL),
        )
        recs = recommend(overall)
        assert recs[0].title == SECTION_RECS["complianceMaturity"][0]["title"]
        assert recs[2].title == SECTION_RECS["auditReadiness"][0]["title"]
        assert len(recs) == 4

    def test_fillers_added_to_a_short_list(self):
        overall = _overall(
            89,
            RISK_LOW,
            ("complianceMaturity", 20, RISK_LOW),
            ("securityOperations", 9, RISK_HIGH),
        )
        recs = recommend(overall)
        assert [r.title for r in recs[2:]] == FILLER_TITLES
        assert len(recs) == 4

    def test_moderate_sections_are_not_flagged(self):
        overall = _overall(50, RISK_MODERATE, ("complianceMaturity", 10, RISK_MODERATE))
        assert [r.title for r in recommend(overall)][:2] == FILLER_TITLES

    def test_unknown_section_contributes_nothing(self):
        overall = _overall(0, RISK_LOW, ("retiredSection", 0, RISK_CRITICAL))
        recs = recommend(overall)
        assert len(recs) == 3
        assert {r.title for r in recs} == set(FILLER_TITLES)

    def test_priority_consistency(self, mixed_answers, worst_answers):
        for raw in (mixed_answers, worst_answers, {}):
            result = score(raw)
            recs = recommend(result)
            titles = {r.title: r.priority for r in recs}
            for section in result.sections:
                for template in SECTION_RECS[section.id]:
                    if section.risk_level == RISK_CRITICAL:
                        assert titles[template["title"]] == "High"
                    elif section.risk_level == RISK_HIGH:
                        assert titles[template["title"]] == "Medium"
                    else:
                        assert template["title"] not in titles

    def test_section_priority(self):
        assert section_priority(RISK_CRITICAL) == "High"
        assert section_priority(RISK_HIGH) == "Medium"

    def test_never_fewer_than_three(self, best_answers, mixed_answers):
        for raw in (best_answers, mixed_answers, {}):
            assert len(recommend(score(raw))) >= 3
