# main.py

"""Streamlit web UI for the grammar correction pipeline.

Accepts text from the user, sends it to the grammar checker, and shows the
original text with flagged spans highlighted, the corrected text, the list
of suggestions and simple style insights.
"""

import logging

import streamlit as st

from proofing.core.definitions import Messages
from proofing.core.exceptions import ConfigurationError
from proofing.engine.highlighter import highlight_html
from proofing.logging_config import configure_logging
from proofing.service.config import get_settings
from proofing.service.pipeline import proofread_text

logger = logging.getLogger(__name__)

HIGHLIGHT_CSS = """
<style>
.proofing-original {{
    white-space: pre-wrap;
}}
.{css_class} {{
    background-color: #ffd6d6;
    border-bottom: 2px solid #e53935;
}}
</style>
"""


def original_text_html(report, css_class: str) -> str:
    """Builds the HTML block showing the original text with flagged spans.

    The text is HTML-escaped and shown as raw HTML, so Markdown syntax such as
    ``$``, ``*`` or ``#`` stays literal and line breaks are kept.
    """
    marked = highlight_html(report.original_text, report.issues, css_class=css_class)
    return (
        HIGHLIGHT_CSS.format(css_class=css_class)
        + f'<div class="proofing-original">{marked.markup}</div>'
    )


def render_report(report, css_class: str) -> None:
    """Displays a successful proofreading report."""
    st.subheader("Original Text")
    st.html(original_text_html(report, css_class))

    st.subheader("Corrected Text")
    st.code(report.correction.corrected_text, language=None)

    if report.metadata.get("info"):
        st.info(report.metadata["info"])

    st.subheader("Suggestions")
    if not report.suggestions:
        st.markdown(f"- {Messages.NO_ISSUES}")
    else:
        st.markdown("\n".join(f"- {s.display}" for s in report.suggestions))

    st.subheader("Style Insights")
    st.write(report.statistics.summary())


def main():
    """Run the Streamlit application UI."""
    st.set_page_config(layout="wide", page_title="Grammar Correction", page_icon="✍️")

    try:
        settings = get_settings()
    except ConfigurationError as e:
        st.error(f"Configuration error: {e}")
        return

    configure_logging(settings.log_level)

    st.title("Grammar Correction")
    st.markdown("Check text for grammar and spelling issues and apply the suggested fixes.")
    st.markdown("---")

    text_input = st.text_area(
        "Text to check", height=250, placeholder="Paste or type your text here..."
    )

    if st.button("Check grammar", type="primary"):
        with st.spinner("Checking text..."):
            logger.info(f"Processing text of length: {len(text_input or '')}")
            report = proofread_text(text_input, settings=settings)

        if report.failed:
            if report.metadata.get("error_type") == "NoTextError":
                st.warning(report.metadata["error"])
            else:
                st.error(f"Grammar check failed: {report.metadata['error']}")
            return

        render_report(report, settings.highlight_css_class)

    with st.sidebar:
        st.header("About")
        st.markdown(f"""
        Text is checked with LanguageTool (language: **{settings.language}**).

        - **Highlights** mark every flagged span in the original text
        - **Corrections** apply the first suggestion of each issue
        - **Style insights** report word and sentence counts
        """)


if __name__ == "__main__":
    main()
