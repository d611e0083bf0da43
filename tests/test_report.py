"""
Tests for the Report Renderer: block building, pagination and PDF output.
"""

import io

import pandas as pd
import pytest

from config import RISK_INSIGHTS
from recommendations import Recommendation, recommend
from report import (MARGIN_BOTTOM, MARGIN_TOP, PAGE_HEIGHT, Block, Line,
                    answers_csv, build_blocks, layout_report, page_capacity,
                    paginate, render)
from scoring import AnswerStore, score


def _many_recommendations(count=40):
    return [
        Recommendation(
            title=f"Recommendation number {i}",
            description="Map every control to an owner and review evidence on a fixed cadence. " * 4,
            priority="High" if i % 2 else "Medium",
        )
        for i in range(count)
    ]


def _assert_no_overflow(pages, page_height=PAGE_HEIGHT):
    for page in pages:
        assert page, "empty page"
        assert page[0].top == MARGIN_TOP
        for placed in page:
            assert placed.top >= MARGIN_TOP
            assert placed.bottom <= page_height - MARGIN_BOTTOM
        for first, second in zip(page, page[1:]):
            assert second.top == first.bottom


class TestBlocks:
    def test_block_order(self, lead, mixed_answers, report_date):
        overall = score(mixed_answers)
        recs = recommend(overall)
        kinds = [b.kind for b in build_blocks(lead, overall, recs, report_date)]
        assert kinds[:5] == ["title", "contact", "overall", "scores", "heading"]
        assert kinds[5 : 5 + len(recs)] == ["recommendation"] * len(recs)
        assert kinds[-3:] == ["insight", "impact", "cta"]

    def test_content(self, lead, mixed_answers, report_date):
        overall = score(mixed_answers)
        blocks = build_blocks(lead, overall, recommend(overall), report_date)
        text = " ".join(line.text for b in blocks for line in b.lines)
        assert "Generated on: 2024-05-01" in text
        assert "Company: Acme" in text
        assert "Email: dana@acmecorp.com" in text
        assert "Overall Risk Level: High (47%)" in text

        insight = next(b for b in blocks if b.kind == "insight")
        assert " ".join(line.text for line in insight.lines[1:]) == RISK_INSIGHTS["High"]

        scores = next(b for b in blocks if b.kind == "scores")
        right = [line.right_text for line in scores.lines if line.right_text]
        assert "High (35%)" in right
        assert "Critical (20%)" in right

    def test_height_is_line_count_times_line_height(self):
        block = Block("text", [Line("a", size=10), Line("b", size=10)])
        assert block.height == pytest.approx(2 * 10 * 1.35 + 10)


class TestPagination:
    def test_short_report_fits_one_page(self, lead, best_answers, report_date):
        overall = score(best_answers)
        pages = layout_report(lead, overall, recommend(overall), report_date)
        assert len(pages) == 1
        _assert_no_overflow(pages)

    def test_long_report_breaks_between_blocks(self, lead, mixed_answers, report_date):
        overall = score(mixed_answers)
        blocks = build_blocks(lead, overall, _many_recommendations(), report_date)
        total = sum(b.height for b in blocks)
        assert total > page_capacity()

        pages = paginate(blocks)
        assert len(pages) >= 2
        _assert_no_overflow(pages)
        # every block placed exactly once, in order, whole
        placed = [p.block for page in pages for p in page]
        assert placed == blocks

    def test_small_pages(self, lead, mixed_answers, report_date):
        overall = score(mixed_answers)
        pages = layout_report(lead, overall, recommend(overall), report_date, page_height=360)
        assert len(pages) > 2
        _assert_no_overflow(pages, page_height=360)

    def test_heading_stays_with_first_recommendation(self, lead, mixed_answers, report_date):
        overall = score(mixed_answers)
        for height in range(300, 900, 20):
            pages = layout_report(
                lead, overall, _many_recommendations(6), report_date, page_height=height
            )
            for page in pages:
                if page[-1].block.kind == "heading":
                    raise AssertionError(f"orphan heading at page height {height}")

    def test_oversized_block_is_trimmed_not_split(self):
        giant = Block("recommendation", [Line(f"line {i}") for i in range(200)])
        pages = paginate([Block("title", [Line("Title", size=20)]), giant])
        assert len(pages) == 2
        _assert_no_overflow(pages)
        assert pages[1][0].block.lines[-1].text.endswith("...")


class TestRender:
    def test_pdf_bytes(self, lead, mixed_answers, report_date):
        overall = score(mixed_answers)
        pdf = render(lead, overall, _many_recommendations(), report_date)
        assert pdf.startswith(b"%PDF")
        assert len(pdf) > 1000


class TestAnswersCsv:
    def test_rows_and_inferred_flag(self, mixed_answers):
        csv = answers_csv(AnswerStore.from_raw(mixed_answers))
        df = pd.read_csv(io.StringIO(csv))
        assert list(df.columns) == [
            "section",
            "question",
            "text",
            "answer",
            "points",
            "max_points",
            "inferred",
        ]
        row = df[df["question"] == "evidenceCollection"].iloc[0]
        assert row["answer"] == "centralizedManual"
        assert row["points"] == 3
        assert bool(row["inferred"]) is True
        assert df["points"].sum() == 47
