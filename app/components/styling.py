import streamlit as st

from oncall.models.rules import SHIFTS


def css_class_for(token: str) -> str:
    return "shift-" + SHIFTS[token].code if token in SHIFTS else "shift-OFF"


def apply_styling():
    """Apply global CSS styling based on shift configuration."""
    css = "<style>\n"
    for token, cfg in SHIFTS.items():
        css += f".{css_class_for(token)} {{ background-color: {cfg.color_bg} !important; color: {cfg.color_text}; font-weight: bold; }}\n"

    css += """
    .shift-OFF { background-color: #F5F5F5 !important; color: #999; }
    .kpi-card { padding: 1rem; border-radius: 8px; background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); color: white; margin: 0.5rem 0; }
    .kpi-value { font-size: 2rem; font-weight: bold; }
    .kpi-label { font-size: 0.9rem; opacity: 0.9; }

    div[data-testid="stDataFrame"] div[data-testid="stTable"] { font-size: 0.8rem; }

    .stDeployButton { display: none !important; }
    </style>
    """

    st.markdown(css, unsafe_allow_html=True)


def color_cell(value: str) -> str:
    """pandas Styler callback: background per shift token."""
    if value in SHIFTS:
        return f"background-color: {SHIFTS[value].color_bg}; color: {SHIFTS[value].color_text}"
    return ""
