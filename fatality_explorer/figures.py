import plotly.graph_objects as go

from .config import COLORS

# =========================================================
# COMMON FIGURE STYLING
# =========================================================
PCT_COLORSCALE = [[0.0, COLORS["accent"]], [1.0, COLORS["danger"]]]


def style_figure(fig):
    fig.update_layout(
        template="simple_white",
        font=dict(family="Arial", size=12, color=COLORS["text"]),
        title_font=dict(size=18, color=COLORS["primary"], family="Arial"),
        plot_bgcolor=COLORS["card"],
        paper_bgcolor=COLORS["card"],
        margin=dict(t=60, l=40, r=20, b=40),
    )
    fig.update_xaxes(showgrid=True, gridcolor="rgba(0,0,0,0.06)", zeroline=False)
    fig.update_yaxes(showgrid=False, zeroline=False)
    return fig


# =========================================================
# LOLLIPOP: % FATAL BY CATEGORY
# =========================================================


def lollipop_figure(result, dimension):
    """One marker per category at its fatal percentage, stem from zero."""
    ordered = result.sort_values("fatal_pct", kind="mergesort")
    categories = [str(c) for c in ordered["category"]]
    pct = ordered["fatal_pct"].tolist()

    stem_x, stem_y = [], []
    for cat, value in zip(categories, pct):
        stem_x += [0, value, None]
        stem_y += [cat, cat, None]

    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=stem_x,
            y=stem_y,
            mode="lines",
            line=dict(color="rgba(0,0,0,0.25)", width=2),
            hoverinfo="skip",
            showlegend=False,
        )
    )
    fig.add_trace(
        go.Scatter(
            x=pct,
            y=categories,
            mode="markers",
            marker=dict(
                size=14,
                color=pct,
                colorscale=PCT_COLORSCALE,
                showscale=True,
                colorbar=dict(title="% Fatal"),
                line=dict(width=1, color=COLORS["text"]),
            ),
            customdata=ordered[["total_cases", "fatal_cases"]].to_numpy(),
            hovertemplate=(
                "%{y}<br>%{x:.1f}% fatal"
                "<br>%{customdata[1]:,} of %{customdata[0]:,} cases<extra></extra>"
            ),
            showlegend=False,
        )
    )
    fig = style_figure(fig)
    fig.update_layout(
        title=f"Percent of Fatal Accidents by {dimension.label}",
        xaxis_title="Fatal Accidents (%)",
        yaxis_title=dimension.label,
        height=max(360, 40 * len(categories) + 120),
        margin=dict(t=60, l=40, r=20, b=40),
    )
    fig.update_xaxes(rangemode="tozero", ticksuffix="%")
    fig.update_yaxes(categoryorder="array", categoryarray=categories, automargin=True)
    return fig


def placeholder_figure(message):
    fig = go.Figure()
    fig = style_figure(fig)
    fig.update_layout(
        height=360,
        annotations=[
            dict(
                text=message,
                x=0.5,
                y=0.5,
                xref="paper",
                yref="paper",
                showarrow=False,
                font=dict(size=15, color=COLORS["muted"]),
            )
        ],
    )
    fig.update_xaxes(visible=False)
    fig.update_yaxes(visible=False)
    return fig
