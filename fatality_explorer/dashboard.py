import logging

from dash import Dash, Input, Output, State, dcc, html

from .aggregate import aggregate, headline_numbers, valid_categories
from .config import CAPTION, COLORS, DEFAULT_TOP_N, MIN_CASES, PEDESTRIAN
from .dimensions import DIMENSION_OPTIONS, MODE_OPTIONS, Dimension, Mode
from .figures import lollipop_figure, placeholder_figure

logger = logging.getLogger(__name__)

HIDDEN = {"display": "none"}
VISIBLE = {"display": "block", "marginTop": "12px"}

EMPTY_SELECTION_MESSAGE = "Select at least one category to see its fatal percentage"
NO_SUPPORT_MESSAGE = f"No category has at least {MIN_CASES} cases"


# =========================================================
# 1. CONTROL & CHART STATE
# =========================================================


def update_controls(traffic, dimension_name, count=None, selected=None):
    """Recompute the valid categories after a dimension change.

    Returns slider max, slider value, slider marks, multi-select options and
    multi-select value, with the slider value bounded and the selection
    limited to categories that are still valid.
    """
    dimension = Dimension[dimension_name]
    categories = valid_categories(traffic, dimension)

    slider_max = max(len(categories), 1)
    count = min(max(int(count or DEFAULT_TOP_N), 1), slider_max)
    marks = {1: "1", slider_max: str(slider_max)}

    options = [{"label": str(c), "value": c} for c in categories]
    valid = set(categories)
    selected = [c for c in (selected or []) if c in valid]

    logger.debug("%s: %d valid categories", dimension.label, len(categories))
    return slider_max, count, marks, options, selected


def mode_control_styles(mode_name):
    if Mode[mode_name] is Mode.TOP_N:
        return VISIBLE, HIDDEN
    return HIDDEN, VISIBLE


def update_chart(traffic, dimension_name, mode_name, count=None, selected=None):
    dimension = Dimension[dimension_name]
    mode = Mode[mode_name]

    if mode is Mode.SPECIFIC and not selected:
        return placeholder_figure(EMPTY_SELECTION_MESSAGE)

    result = aggregate(traffic, dimension, mode, count=count or 1, selected=selected)
    if result.empty:
        return placeholder_figure(NO_SUPPORT_MESSAGE)

    logger.debug("%s / %s: %d categories", dimension.label, mode.label, len(result))
    return lollipop_figure(result, dimension)


# =========================================================
# 2. LAYOUT
# =========================================================


def kpi_card(title, value, background, color):
    return html.Div(
        style={
            "flex": "1",
            "minWidth": "180px",
            "backgroundColor": background,
            "borderRadius": "12px",
            "padding": "12px 16px",
        },
        children=[
            html.Div(title, style={"fontSize": "11px", "color": COLORS["muted"]}),
            html.Div(value, style={"fontSize": "22px", "fontWeight": "bold", "color": color}),
        ],
    )


def control_label(text):
    return html.Label(
        text,
        style={
            "fontSize": "13px",
            "color": COLORS["primary"],
            "fontWeight": "bold",
        },
    )


def build_layout(traffic):
    kpi = headline_numbers(traffic)

    return html.Div(
        style={
            "backgroundColor": COLORS["bg"],
            "minHeight": "100vh",
            "padding": "30px",
        },
        children=[
            html.Div(
                style={
                    "maxWidth": "1100px",
                    "margin": "0 auto",
                    "backgroundColor": COLORS["card"],
                    "borderRadius": "16px",
                    "padding": "24px 28px 32px 28px",
                    "boxShadow": "0 10px 30px rgba(0,0,0,0.12)",
                },
                children=[
                    # HEADER
                    html.H1(
                        "Traffic Fatality Explorer",
                        style={
                            "margin": 0,
                            "fontFamily": "Arial",
                            "fontSize": "28px",
                            "color": COLORS["primary"],
                        },
                    ),
                    html.P(
                        "Share of people involved in crashes who were fatally injured, "
                        "broken down by weather, speed, month, driver condition, vehicle make "
                        "and accident type.",
                        style={"marginTop": "6px", "color": COLORS["muted"], "fontSize": "14px"},
                    ),
                    html.Hr(style={"margin": "18px 0 16px 0", "borderColor": "#f0e1c5"}),

                    # KPI CARDS
                    html.Div(
                        style={"display": "flex", "flexWrap": "wrap", "gap": "12px"},
                        children=[
                            kpi_card("People in Crashes", f"{kpi['total']:,}", "#fff7e0", COLORS["primary"]),
                            kpi_card("Fatally Injured", f"{kpi['fatal']:,}", "#ffeef0", COLORS["danger"]),
                            kpi_card("Overall Fatal Share", f"{kpi['fatal_pct']:.1f}%", "#e8f6ff", "#2980b9"),
                        ],
                    ),
                    html.Br(),

                    # CONTROLS
                    html.Div(
                        style={"display": "flex", "flexWrap": "wrap", "gap": "24px"},
                        children=[
                            html.Div(
                                style={"flex": "1 1 300px"},
                                children=[
                                    control_label("Breakdown"),
                                    dcc.Dropdown(
                                        id="dimension",
                                        options=DIMENSION_OPTIONS,
                                        value=Dimension.WEATHER.name,
                                        clearable=False,
                                        style={"fontSize": "13px"},
                                    ),
                                ],
                            ),
                            html.Div(
                                style={"flex": "1 1 300px"},
                                children=[
                                    control_label("Categories"),
                                    dcc.RadioItems(
                                        id="mode",
                                        options=MODE_OPTIONS,
                                        value=Mode.TOP_N.name,
                                        labelStyle={"display": "block", "fontSize": "13px"},
                                    ),
                                ],
                            ),
                        ],
                    ),
                    html.Div(
                        id="top-n-container",
                        style=VISIBLE,
                        children=[
                            control_label("Number of categories"),
                            dcc.Slider(
                                id="top-n",
                                min=1,
                                max=DEFAULT_TOP_N,
                                step=1,
                                value=DEFAULT_TOP_N,
                                tooltip={"placement": "bottom", "always_visible": True},
                            ),
                        ],
                    ),
                    html.Div(
                        id="specific-container",
                        style=HIDDEN,
                        children=[
                            control_label("Choose categories"),
                            dcc.Dropdown(
                                id="categories",
                                options=[],
                                value=[],
                                multi=True,
                                placeholder="Select one or more categories",
                                style={"fontSize": "13px"},
                            ),
                        ],
                    ),

                    # CHART
                    dcc.Graph(id="fatality-graph", style={"marginTop": "16px"}),
                    html.P(
                        CAPTION,
                        id="caption",
                        style={"fontSize": "12px", "color": COLORS["muted"], "marginTop": "4px"},
                    ),
                    html.P(
                        f"Categories with fewer than {MIN_CASES} cases are not shown. "
                        f"\"{PEDESTRIAN}\" marks people without a vehicle record and is left out "
                        "of every breakdown; it approximates, but does not verify, pedestrian status.",
                        style={"fontSize": "12px", "color": COLORS["muted"], "marginBottom": 0},
                    ),
                ],
            ),
        ],
    )


# =========================================================
# 3. CALLBACKS
# =========================================================


def register_callbacks(app, traffic):
    @app.callback(
        Output("top-n", "max"),
        Output("top-n", "value"),
        Output("top-n", "marks"),
        Output("categories", "options"),
        Output("categories", "value"),
        Input("dimension", "value"),
        State("top-n", "value"),
        State("categories", "value"),
    )
    def on_dimension_change(dimension_name, count, selected):
        return update_controls(traffic, dimension_name, count, selected)

    @app.callback(
        Output("top-n-container", "style"),
        Output("specific-container", "style"),
        Input("mode", "value"),
    )
    def on_mode_change(mode_name):
        return mode_control_styles(mode_name)

    @app.callback(
        Output("fatality-graph", "figure"),
        Input("dimension", "value"),
        Input("mode", "value"),
        Input("top-n", "value"),
        Input("categories", "value"),
    )
    def on_selection_change(dimension_name, mode_name, count, selected):
        return update_chart(traffic, dimension_name, mode_name, count, selected)


def create_app(traffic):
    app = Dash(__name__, title="Traffic Fatality Explorer")
    app.layout = build_layout(traffic)
    register_callbacks(app, traffic)
    return app
