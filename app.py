# app.py

import logging
from dataclasses import asdict

import dash
import dash_daq as daq
import plotly.graph_objects as go
from dash import ALL, Input, Output, State, ctx, dcc, html

from assessment import assess, generate_report
from config import (CATALOGS, COMPANY_SIZES, MULTI_CHOICE, NUMERIC_RANGE,
                    POINTS)
from leads import Lead, booking_url, progress, report_filename, validate_lead
from recommendations import Recommendation
from report import answers_csv
from scoring import (INFERENCE_RULES, AnswerStore, OverallScore, get_catalog,
                     question_index, question_max_points)

logger = logging.getLogger(__name__)

app = dash.Dash(__name__, suppress_callback_exceptions=True)
app.title = "Audit Debt Scorecard"
server = app.server

CATALOG = get_catalog()
SECTIONS = CATALOG["sections"]
LEAD_FIELDS = ["full_name", "email", "company", "designation", "company_size"]


def _validate_config() -> None:
    """
    Check the sanity of every catalog edition in `config.py`.

    Logs warnings for weights that do not add up to 100, questions or options
    missing from the point table, section maxima that disagree with the
    questions, and retired questions without an inference rule.
    """
    for version, catalog in CATALOGS.items():
        weights = catalog["weights"]
        if sum(weights.values()) != 100:
            logger.warning("[catalog %s] weights sum to %s", version, sum(weights.values()))
        if set(weights) != {s["id"] for s in catalog["sections"]}:
            logger.warning("[catalog %s] weights do not match the sections", version)

        table = catalog.get("points", POINTS)
        for section_id, questions in question_index(catalog).items():
            for question_id, (question, retired) in questions.items():
                rule = table.get(question_id)
                if rule is None:
                    logger.warning("[catalog %s] no points for %s", version, question_id)
                elif question.get("type") != NUMERIC_RANGE:
                    missing = {o["value"] for o in question.get("options", [])} - set(rule)
                    if missing:
                        logger.warning(
                            "[catalog %s] %s options without points: %s",
                            version,
                            question_id,
                            sorted(missing),
                        )
                if retired and question_id not in INFERENCE_RULES:
                    logger.warning("[catalog %s] no inference rule for %s", version, question_id)
            total = sum(question_max_points(q, table) for q, _ in questions.values())
            if total != catalog["max_score"]:
                logger.warning(
                    "[catalog %s] %s max is %s, expected %s",
                    version,
                    section_id,
                    total,
                    catalog["max_score"],
                )


_validate_config()


# for chart sizes
RADAR_H = 360
BAR_H = 360


def _base_fig_layout(fig, theme="light", height=360):
    """
    Apply a consistent layout to a figure.

    :param fig: a figure to update
    :param theme: a string, either "light" or "dark"
    :param height: the height of the figure in pixels
    :return: the updated figure
    """
    font_color = "#f6f7fb" if theme == "dark" else "#0b1020"
    grid_color = "#334155" if theme == "dark" else "#CBD5E1"
    fig.update_layout(
        autosize=False,
        height=height,
        margin=dict(l=30, r=30, t=30, b=30),
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        font=dict(color=font_color),
        xaxis=dict(showgrid=True, gridcolor=grid_color, zeroline=False, fixedrange=True),
        yaxis=dict(showgrid=True, gridcolor=grid_color, zeroline=False, fixedrange=True),
        uirevision="keep",
    )
    return fig


# ---------- Figures ------------------
def radar_figure(overall, theme="light"):
    """
    Radar of section percentages, in catalog order.

    Args:
        overall (OverallScore): scoring result
        theme (str, optional): light or dark. Defaults to "light".

    Returns:
        go.Figure: radar figure
    """
    cats = [s.title for s in overall.sections]
    vals = [s.percent for s in overall.sections]
    grid_color = "#334155" if theme == "dark" else "#CBD5E1"
    fig = go.Figure()
    if cats:
        fig.add_trace(
            go.Scatterpolar(
                r=vals + vals[:1],
                theta=cats + cats[:1],
                fill="toself",
                name="Score",
                line=dict(width=2),
                marker=dict(size=4),
            )
        )
    fig.update_layout(
        polar=dict(
            radialaxis=dict(
                range=[0, 100], autorange=False, tick0=0, dtick=25, gridcolor=grid_color
            ),
            angularaxis=dict(gridcolor=grid_color),
        ),
    )
    return _base_fig_layout(fig, theme, height=RADAR_H)


def bar_figure(overall, theme="light"):
    cats = [s.title for s in overall.sections]
    fig = go.Figure(go.Bar(x=cats, y=[s.percent for s in overall.sections]))
    fig = _base_fig_layout(fig, theme, height=BAR_H)
    fig.update_layout(
        xaxis=dict(categoryorder="array", categoryarray=cats),
        yaxis=dict(range=[0, 100], tick0=0, dtick=25),
    )
    return fig


# -------------- Layout --------------------
def _field(label, component, field_id):
    return html.Div(
        [
            html.Label(label),
            component,
            html.Div(id=f"err-{field_id}", className="field-error"),
        ],
        className="field",
    )


def build_question(section_id, question, value=None):
    """
    Build the input control for one question, pre-filled with `value`.
    """
    rid = {"type": "q-input", "section": section_id, "qid": question["id"]}
    qtype = question.get("type")
    if qtype == MULTI_CHOICE:
        control = dcc.Checklist(
            id=rid, options=question["options"], value=value or [], className="choices"
        )
    elif qtype == NUMERIC_RANGE:
        control = dcc.Slider(
            id=rid,
            min=question["min"],
            max=question["max"],
            step=question.get("step", 1),
            value=value if value is not None else question["min"],
        )
    else:
        control = dcc.RadioItems(
            id=rid, options=question["options"], value=value, className="choices"
        )
    return html.Div([html.Div(question["text"], className="qtext"), control], className="qrow")


def build_section(index, answers):
    section = SECTIONS[index]
    current = (answers or {}).get(section["id"], {})
    return [
        html.H3(section["title"], className="section-title"),
        html.P(section["description"], className="section-desc"),
    ] + [build_question(section["id"], q, current.get(q["id"])) for q in section["questions"]]


lead_panel = html.Div(
    id="lead-panel",
    className="card",
    children=[
        html.H2("Assess your organization's hidden audit debt"),
        _field("Full Name *", dcc.Input(id="full_name", className="textin"), "full_name"),
        _field("Work Email *", dcc.Input(id="email", type="email", className="textin"), "email"),
        _field("Company *", dcc.Input(id="company", className="textin"), "company"),
        _field(
            "Company Size *",
            dcc.Dropdown(id="company_size", options=COMPANY_SIZES, placeholder="Select size"),
            "company_size",
        ),
        _field("Designation *", dcc.Input(id="designation", className="textin"), "designation"),
        html.Button("Start Assessment", id="lead-submit", className="btn-primary"),
    ],
)

question_panel = html.Div(
    id="question-panel",
    className="card",
    style={"display": "none"},
    children=[
        html.Div(id="progress-label", className="progress-label"),
        html.Div(html.Div(id="progress-bar", className="progress-fill"), className="progress"),
        html.Div(id="section-body"),
        html.Div(
            [
                html.Button("Back", id="back-btn", className="btn-secondary"),
                html.Button("Next", id="next-btn", className="btn-primary"),
            ],
            className="nav",
        ),
    ],
)

results_panel = html.Div(
    id="results-panel",
    style={"display": "none"},
    children=[
        html.Div(
            className="row-kpis",
            children=[
                daq.Gauge(
                    id="score-gauge",
                    label="Audit Debt Score",
                    min=0,
                    max=100,
                    value=0,
                    showCurrentValue=True,
                    units="%",
                ),
                html.Div(id="kpis", className="kpis"),
            ],
        ),
        html.Div(
            className="row-charts",
            children=[
                dcc.Graph(id="radar", style={"height": f"{RADAR_H}px"}, config={"displaylogo": False}),
                dcc.Graph(id="bar", style={"height": f"{BAR_H}px"}, config={"displaylogo": False}),
            ],
        ),
        html.H3("Key Recommendations"),
        html.Ul(id="actions-list", className="actions"),
        html.Div(
            className="exports",
            children=[
                html.Button("Download PDF Report", id="dl-pdf", className="btn-primary"),
                html.Button("Download Answers (CSV)", id="dl-csv", className="btn-secondary"),
                html.A("Book a consultation", id="booking-link", href="#", target="_blank"),
                html.Div(id="dl-status", className="field-error"),
                dcc.Download(id="dl-pdf-out"),
                dcc.Download(id="dl-csv-out"),
            ],
        ),
    ],
)

app.layout = html.Div(
    id="page-root",
    className="page theme-light",
    children=[
        dcc.Store(id="lead-store"),
        dcc.Store(id="answers-store", data={"catalog_version": CATALOG["version"], "sections": {}}),
        dcc.Store(id="step-store", data=0),
        dcc.Store(id="result-store"),
        dcc.Store(id="theme-store", data="light"),
        html.Div(
            [
                html.H1("Audit Debt Scorecard"),
                html.Div(
                    [html.Label("Dark mode"), daq.BooleanSwitch(id="theme-switch", on=False, color="#4f46e5")],
                    className="field",
                ),
            ],
            className="header",
        ),
        lead_panel,
        question_panel,
        results_panel,
    ],
)


# -------- Helpers ------------------
def collect_section_values(ids, values):
    """
    Turn pattern-matched input ids/values into section -> question -> value.
    """
    collected = {}
    for rid, value in zip(ids or [], values or []):
        if value in (None, "", []):
            continue
        collected.setdefault(rid["section"], {})[rid["qid"]] = value
    return collected


def merge_answers(store, collected):
    sections = {k: dict(v) for k, v in (store or {}).get("sections", {}).items()}
    for section_id, answers in collected.items():
        sections.setdefault(section_id, {}).update(answers)
    return {"catalog_version": (store or {}).get("catalog_version", CATALOG["version"]), "sections": sections}


def result_to_store(overall, recs):
    return {"score": overall.to_dict(), "recommendations": [r.to_dict() for r in recs]}


def result_from_store(data):
    return (
        OverallScore.from_dict(data["score"]),
        [Recommendation(**r) for r in data.get("recommendations", [])],
    )


# -------- Callbacks ------------------
@app.callback(
    Output("lead-store", "data"),
    *[Output(f"err-{f}", "children") for f in LEAD_FIELDS],
    Output("answers-store", "data"),
    Output("step-store", "data"),
    Output("result-store", "data"),
    Input("lead-submit", "n_clicks"),
    Input("next-btn", "n_clicks"),
    Input("back-btn", "n_clicks"),
    *[State(f, "value") for f in LEAD_FIELDS],
    State("answers-store", "data"),
    State("step-store", "data"),
    State({"type": "q-input", "section": ALL, "qid": ALL}, "id"),
    State({"type": "q-input", "section": ALL, "qid": ALL}, "value"),
    prevent_initial_call=True,
)
def on_navigate(_submit, _next, _back, *args):
    """
    Move between the lead form, the question sections and the results.

    The lead form only advances when every field validates. Leaving a section
    (either direction) keeps its answers; leaving the last one scores the
    whole store and stores the result.
    """
    lead_values = args[: len(LEAD_FIELDS)]
    store, step, q_ids, q_values = args[len(LEAD_FIELDS):]
    step = step or 0
    no_errors = [""] * len(LEAD_FIELDS)
    keep = dash.no_update

    if ctx.triggered_id == "lead-submit":
        lead = Lead.from_dict(dict(zip(LEAD_FIELDS, lead_values)))
        errors = validate_lead(lead)
        if errors:
            return (keep, *[errors.get(f, "") for f in LEAD_FIELDS], keep, keep, keep)
        return (asdict(lead), *no_errors, keep, 1, keep)

    store = merge_answers(store, collect_section_values(q_ids, q_values))
    if ctx.triggered_id == "back-btn":
        return (keep, *no_errors, store, max(step - 1, 1), keep)

    if step < len(SECTIONS):
        return (keep, *no_errors, store, step + 1, keep)

    overall, recs = assess(store["sections"], store["catalog_version"])
    return (keep, *no_errors, store, len(SECTIONS) + 1, result_to_store(overall, recs))


@app.callback(
    Output("lead-panel", "style"),
    Output("question-panel", "style"),
    Output("results-panel", "style"),
    Output("section-body", "children"),
    Output("progress-label", "children"),
    Output("progress-bar", "style"),
    Output("next-btn", "children"),
    Input("step-store", "data"),
    State("answers-store", "data"),
)
def render_step(step, store):
    hidden, shown = {"display": "none"}, {"display": "block"}
    step = step or 0
    if step == 0:
        return shown, hidden, hidden, [], "", {"width": "0%"}, "Next"
    if step > len(SECTIONS):
        return hidden, hidden, shown, [], "", {"width": "100%"}, "Next"
    pct = progress(step - 1, len(SECTIONS))
    return (
        hidden,
        shown,
        hidden,
        build_section(step - 1, (store or {}).get("sections", {})),
        f"{pct}% completed",
        {"width": f"{pct}%"},
        "See Results" if step == len(SECTIONS) else "Next",
    )


@app.callback(
    Output("score-gauge", "value"),
    Output("kpis", "children"),
    Output("radar", "figure"),
    Output("bar", "figure"),
    Output("actions-list", "children"),
    Output("booking-link", "href"),
    Input("result-store", "data"),
    Input("theme-store", "data"),
    State("lead-store", "data"),
    prevent_initial_call=True,
)
def update_results(data, theme, lead_data):
    """
    Updates the gauge, KPIs, charts, recommendations and booking link.
    """
    if not data:
        raise dash.exceptions.PreventUpdate

    overall, recs = result_from_store(data)
    kpi_children = [
        html.Div(
            [
                html.Div("Overall Risk", className="kpi-title"),
                html.Div(overall.overall_risk_level, className="kpi-value"),
            ],
            className="kpi",
        )
    ]
    for section in overall.sections:
        kpi_children.append(
            html.Div(
                [
                    html.Div(section.title, className="kpi-title"),
                    html.Div(f"{section.risk_level} ({section.percent}%)", className="kpi-value"),
                ],
                className="kpi",
            )
        )
    href = booking_url(Lead.from_dict(lead_data), overall.overall_score) if lead_data else "#"
    return (
        overall.overall_score,
        kpi_children,
        radar_figure(overall, theme),
        bar_figure(overall, theme),
        [
            html.Li([html.B(f"[{r.priority}] {r.title}"), html.Div(r.description)])
            for r in recs
        ],
        href,
    )


# Exports
@app.callback(
    Output("dl-pdf-out", "data"),
    Output("dl-status", "children"),
    Input("dl-pdf", "n_clicks"),
    State("lead-store", "data"),
    State("result-store", "data"),
    prevent_initial_call=True,
)
def download_pdf(_, lead_data, data):
    """
    Build the PDF report once. On failure nothing is downloaded and the user may click again.
    """
    if not data or not lead_data:
        raise dash.exceptions.PreventUpdate
    lead = Lead.from_dict(lead_data)
    overall, recs = result_from_store(data)
    pdf = generate_report(lead, overall, recs)
    if pdf is None:
        return dash.no_update, "The report could not be generated. Please try again."
    return dcc.send_bytes(pdf, report_filename(lead.company)), ""


@app.callback(
    Output("dl-csv-out", "data"),
    Input("dl-csv", "n_clicks"),
    State("answers-store", "data"),
    prevent_initial_call=True,
)
def download_csv(_, store):
    if not store:
        raise dash.exceptions.PreventUpdate
    answers = AnswerStore.from_raw(store.get("sections"), store.get("catalog_version"))
    return dcc.send_string(answers_csv(answers), "audit_debt_answers.csv")


# Theme toggle -> update page class and store
@app.callback(
    Output("page-root", "className"),
    Output("theme-store", "data"),
    Input("theme-switch", "on"),
)
def apply_theme(is_on):
    theme = "dark" if is_on else "light"
    return f"page theme-{theme}", theme


# ---------- Main -------------------
if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app.run(debug=False)
