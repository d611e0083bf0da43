# report.py

import io
import logging
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.utils import simpleSplit
from reportlab.pdfgen import canvas

from config import (BUSINESS_IMPACT, CALL_TO_ACTION, REPORT_TITLE, RISK_CRITICAL,
                    RISK_HIGH, RISK_INSIGHTS, RISK_LOW, RISK_MODERATE)
from scoring import score_rows

logger = logging.getLogger(__name__)

PAGE_WIDTH, PAGE_HEIGHT = A4
MARGIN_X = 50
MARGIN_TOP = 56
MARGIN_BOTTOM = 56
CONTENT_WIDTH = PAGE_WIDTH - 2 * MARGIN_X
BLOCK_GAP = 10
LEADING = 1.35  # line height as a multiple of the font size

FONT = "Helvetica"
FONT_BOLD = "Helvetica-Bold"

BAND_COLORS = {
    RISK_LOW: colors.HexColor("#16a34a"),
    RISK_MODERATE: colors.HexColor("#ca8a04"),
    RISK_HIGH: colors.HexColor("#ea580c"),
    RISK_CRITICAL: colors.HexColor("#dc2626"),
}
TEXT_COLOR = colors.HexColor("#0b1020")
MUTED_COLOR = colors.HexColor("#60646e")


# ----------- Layout model -------------
@dataclass
class Line:
    text: str
    font: str = FONT
    size: float = 10
    indent: float = 0
    right_text: Optional[str] = None
    color: object = TEXT_COLOR
    right_color: object = TEXT_COLOR

    @property
    def height(self):
        return self.size * LEADING


@dataclass
class Block:
    kind: str
    lines: List[Line] = field(default_factory=list)
    keep_with_next: bool = False

    @property
    def height(self):
        return sum(line.height for line in self.lines) + BLOCK_GAP


@dataclass
class PlacedBlock:
    block: Block
    top: float  # distance from the top edge of the page

    @property
    def bottom(self):
        return self.top + self.block.height


def page_capacity(page_height=PAGE_HEIGHT):
    return page_height - MARGIN_TOP - MARGIN_BOTTOM


def wrap(text, font=FONT, size=10, indent=0, width=CONTENT_WIDTH, **line_kw):
    """
    Wrap `text` to the content width and return one Line per wrapped line.
    """
    chunks = simpleSplit(text or "", font, size, width - indent) or [""]
    return [Line(chunk, font=font, size=size, indent=indent, **line_kw) for chunk in chunks]


def _fit(block, page_height=PAGE_HEIGHT):
    """
    Trim a block that could never fit on one page so it is never split.

    Trailing lines are dropped and the last kept line is marked with an ellipsis.
    """
    capacity = page_capacity(page_height)
    if block.height <= capacity:
        return block
    logger.warning("Truncating %s block taller than a page (%.0fpt)", block.kind, block.height)
    kept = []
    used = BLOCK_GAP
    for line in block.lines:
        if used + line.height > capacity:
            break
        kept.append(line)
        used += line.height
    if kept:
        last = kept[-1]
        kept[-1] = Line(
            last.text.rstrip() + " ...",
            font=last.font,
            size=last.size,
            indent=last.indent,
            color=last.color,
        )
    block.lines = kept
    return block


def _heading(text):
    return wrap(text, font=FONT_BOLD, size=13)


# ----------- Blocks -------------
def build_blocks(contact, overall, recommendations, generated_on=None):
    """
    Build the ordered list of report blocks.

    Args:
        contact (Lead): the lead the report is for
        overall (OverallScore): scoring result
        recommendations (list[Recommendation]): output of `recommend`
        generated_on (date, optional): defaults to today

    Returns:
        list[Block]
    """
    generated_on = generated_on or date.today()
    blocks = [
        Block(
            "title",
            wrap(REPORT_TITLE, font=FONT_BOLD, size=20)
            + wrap(f"Generated on: {generated_on.isoformat()}", size=9, color=MUTED_COLOR),
        ),
        Block(
            "contact",
            _heading("Contact Information")
            + wrap(f"Name: {contact.full_name}")
            + wrap(f"Company: {contact.company}")
            + wrap(f"Designation: {contact.designation}")
            + wrap(f"Email: {contact.email}")
            + (wrap(f"Company size: {contact.company_size}") if contact.company_size else []),
        ),
        Block(
            "overall",
            _heading("Audit Debt Assessment Results")
            + wrap(
                f"Overall Risk Level: {overall.overall_risk_level} ({overall.overall_score}%)",
                font=FONT_BOLD,
                size=12,
                color=BAND_COLORS.get(overall.overall_risk_level, TEXT_COLOR),
            ),
        ),
    ]

    rows = _heading("Section Scores") + [
        Line("Section", font=FONT_BOLD, right_text="Risk level (score)")
    ]
    for section in overall.sections:
        wrapped = wrap(section.title, width=CONTENT_WIDTH - 140)
        wrapped[0].right_text = f"{section.risk_level} ({section.percent}%)"
        wrapped[0].right_color = BAND_COLORS.get(section.risk_level, TEXT_COLOR)
        rows += wrapped
    blocks.append(Block("scores", rows))

    blocks.append(Block("heading", _heading("Key Recommendations"), keep_with_next=True))
    for rec in recommendations:
        blocks.append(
            Block(
                "recommendation",
                wrap(f"[{rec.priority} Priority] {rec.title}", font=FONT_BOLD, size=10.5)
                + wrap(rec.description, indent=12),
            )
        )

    blocks.append(
        Block(
            "insight",
            _heading("What This Means")
            + wrap(RISK_INSIGHTS.get(overall.overall_risk_level, "")),
        )
    )
    impact = _heading("Business Impact") + wrap("Unaddressed audit debt can lead to:")
    for item in BUSINESS_IMPACT:
        impact += wrap(f"- {item}", indent=12)
    blocks.append(Block("impact", impact))
    blocks.append(
        Block(
            "cta",
            _heading("Next Steps")
            + wrap(CALL_TO_ACTION)
            + wrap(
                f"© {generated_on.year} Sprinto. All rights reserved.",
                size=8,
                color=MUTED_COLOR,
            ),
        )
    )
    return blocks


# ----------- Pagination -------------
def paginate(blocks, page_height=PAGE_HEIGHT):
    """
    Place blocks on pages with a running cursor.

    Before each block the remaining space on the page is checked; when it is
    too small a new page starts at the top margin. A block marked
    `keep_with_next` also needs room for the block after it. Blocks are never
    split; one taller than a page is trimmed first.

    :param blocks: ordered blocks from `build_blocks`
    :param page_height: page height in points
    :return: list of pages, each a list of PlacedBlock
    """
    bottom_limit = page_height - MARGIN_BOTTOM
    pages = [[]]
    cursor = MARGIN_TOP
    blocks = [_fit(b, page_height) for b in blocks]
    for i, block in enumerate(blocks):
        needed = block.height
        if block.keep_with_next and i + 1 < len(blocks):
            needed += blocks[i + 1].height
        if cursor + needed > bottom_limit and pages[-1]:
            pages.append([])
            cursor = MARGIN_TOP
        pages[-1].append(PlacedBlock(block, cursor))
        cursor += block.height
    return pages


def layout_report(contact, overall, recommendations, generated_on=None, page_height=PAGE_HEIGHT):
    return paginate(build_blocks(contact, overall, recommendations, generated_on), page_height)


# ----------- Drawing -------------
def _draw_page(c, placed_blocks, page_no, page_count):
    for placed in placed_blocks:
        y = PAGE_HEIGHT - placed.top
        for line in placed.block.lines:
            y -= line.height
            c.setFont(line.font, line.size)
            c.setFillColor(line.color)
            c.drawString(MARGIN_X + line.indent, y, line.text)
            if line.right_text:
                c.setFillColor(line.right_color)
                c.drawRightString(PAGE_WIDTH - MARGIN_X, y, line.right_text)
    c.setFont(FONT, 8)
    c.setFillColor(MUTED_COLOR)
    c.drawRightString(PAGE_WIDTH - MARGIN_X, MARGIN_BOTTOM / 2, f"Page {page_no} of {page_count}")


def render(contact, overall, recommendations, generated_on=None):
    """
    Render the report as PDF bytes.

    Args:
        contact (Lead): the lead the report is for
        overall (OverallScore): scoring result
        recommendations (list[Recommendation]): recommendations to list
        generated_on (date, optional): defaults to today

    Returns:
        bytes: the PDF document
    """
    pages = layout_report(contact, overall, recommendations, generated_on)
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    c.setTitle(f"{REPORT_TITLE} - {contact.company}")
    for page_no, placed_blocks in enumerate(pages, start=1):
        _draw_page(c, placed_blocks, page_no, len(pages))
        c.showPage()
    c.save()
    return buf.getvalue()


def answers_csv(store):
    """
    Export the scored answers as CSV, one row per scored question.

    Inferred answers are flagged so they can be told apart from what the
    respondent actually picked.
    """
    df = score_rows(store)
    return df.to_csv(index=False)
