# analyzer_view.py

import streamlit as st

from resume_scorer import Analysis, format_report
from score_chart import build_score_chart


def render_empty_state() -> None:
    with st.container(border=True):
        st.markdown("<p class='subtitle'>📤<br>Upload and analyze your resume</p>", unsafe_allow_html=True)


def render_analysis(analysis: Analysis, file_name: str, show_chart: bool = True) -> None:
    """Score card, strengths/weaknesses lists, optional chart and report download."""
    with st.container(border=True):
        c1, c2 = st.columns([3, 1])
        c1.subheader("Score")
        c2.subheader(f"{analysis.score}/100")
        # The bar only takes 0-100; the printed score stays unclamped
        st.progress(min(100, max(0, analysis.score)))
        st.write(f"Suggested Role: **{analysis.role}**")

    s_col, w_col = st.columns(2)
    with s_col:
        st.subheader("✅ Strengths")
        for item in analysis.strengths:
            st.markdown(f"✔ {item.title}")
    with w_col:
        st.subheader("⚠️ Improve")
        for item in analysis.weaknesses:
            st.markdown(f"⚠ {item.title}")

    if show_chart:
        st.pyplot(build_score_chart(analysis))

    st.download_button(
        label="Download Analysis Report",
        data=format_report(analysis, file_name),
        file_name="resume_report.txt",
        mime="text/plain",
    )
