from __future__ import annotations

import streamlit as st

APP_CSS = r"""
/* Keep tiles crisp when the preview is scaled up */
[data-testid="stImage"] img {
  image-rendering: pixelated;
  border-radius: 6px;
}

[data-testid="stAppViewContainer"] {
  background:
    radial-gradient(
      1000px 700px at 15% 0%,
      rgba(15, 118, 110, 0.10),
      rgba(0,0,0,0) 60%
    ),
    linear-gradient(180deg, rgba(255,255,255,0.35), rgba(0,0,0,0) 45%);
}

[data-testid="stSidebar"] {
  border-right: 1px solid rgba(17, 24, 39, 0.08);
}

/* Metric cards */
[data-testid="stMetric"] {
  border: 1px solid rgba(17, 24, 39, 0.08);
  border-radius: 10px;
  padding: 0.4rem 0.75rem;
  background: rgba(255, 255, 255, 0.65);
}
"""


def inject_global_styles() -> None:
    st.markdown(f"<style>{APP_CSS}</style>", unsafe_allow_html=True)
