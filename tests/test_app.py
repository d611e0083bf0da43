"""
Tests for the Dash app helpers (callbacks are thin wrappers around these).
"""

import logging

import plotly.graph_objects as go

import app
from assessment import assess


class TestHelpers:
    def test_collect_section_values_skips_empty(self):
        ids = [
            {"type": "q-input", "section": "toolingAutomation", "qid": "workflows"},
            {"type": "q-input", "section": "toolingAutomation", "qid": "complianceTool"},
            {"type": "q-input", "section": "toolingAutomation", "qid": "complianceGaps"},
        ]
        values = ["manual", None, ""]
        assert app.collect_section_values(ids, values) == {
            "toolingAutomation": {"workflows": "manual"}
        }

    def test_merge_answers_keeps_other_sections(self):
        store = {"catalog_version": "2", "sections": {"complianceMaturity": {"certifications": "one"}}}
        merged = app.merge_answers(store, {"toolingAutomation": {"workflows": "manual"}})
        assert merged == {
            "catalog_version": "2",
            "sections": {
                "complianceMaturity": {"certifications": "one"},
                "toolingAutomation": {"workflows": "manual"},
            },
        }
        # the incoming store is not modified
        assert "toolingAutomation" not in store["sections"]

    def test_merge_answers_overwrites_changed_answers(self):
        store = {"catalog_version": "2", "sections": {"auditReadiness": {"lastAudit": "never"}}}
        merged = app.merge_answers(store, {"auditReadiness": {"lastAudit": "sixMonths"}})
        assert merged["sections"]["auditReadiness"] == {"lastAudit": "sixMonths"}

    def test_result_store_round_trip(self, mixed_answers):
        overall, recs = assess(mixed_answers)
        data = app.result_to_store(overall, recs)
        assert app.result_from_store(data) == (overall, recs)

    def test_build_section_prefills_answers(self, mixed_answers):
        children = app.build_section(0, mixed_answers)
        radios = [row.children[1] for row in children[2:]]
        assert [r.value for r in radios] == ["one", "partTime", "documented", "annual"]

    def test_retired_questions_are_not_shown(self):
        shown = {q["id"] for s in app.SECTIONS for q in s["questions"]}
        assert not shown & {"evidenceCollection", "incidentResponse", "riskAssessment", "changeApproval"}


class TestFigures:
    def test_radar_and_bar(self, mixed_answers):
        overall, _ = assess(mixed_answers)
        radar = app.radar_figure(overall, "dark")
        bar = app.bar_figure(overall)
        assert isinstance(radar, go.Figure)
        assert list(radar.data[0].r) == [50, 35, 65, 65, 20, 50]
        assert list(bar.data[0].y) == [50, 35, 65, 65, 20]


class TestConfig:
    def test_shipped_catalogs_are_consistent(self, caplog):
        with caplog.at_level(logging.WARNING, logger="app"):
            app._validate_config()
        assert caplog.records == []
