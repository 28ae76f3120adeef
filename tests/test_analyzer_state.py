"""
Unit tests for the analyzer page state transitions
"""

import logging

from analyzer_state import (
    Analyzed,
    FileSelected,
    Idle,
    can_analyze,
    request_analysis,
    select_file,
    selected_file_name,
)
from resume_scorer import score_file_name


class TestSelectFile:
    """Picking and clearing files"""

    def test_select_from_idle(self):
        assert select_file(Idle(), "resume.pdf") == FileSelected("resume.pdf")

    def test_select_discards_previous_analysis(self):
        state = Analyzed("old.pdf", score_file_name("old.pdf"))

        assert select_file(state, "new.pdf") == FileSelected("new.pdf")

    def test_clear_returns_to_idle(self):
        assert select_file(FileSelected("resume.pdf"), None) == Idle()
        assert select_file(Idle(), None) == Idle()

    def test_select_is_logged(self, caplog):
        with caplog.at_level(logging.INFO, logger="analyzer_state"):
            select_file(Idle(), "resume.pdf")

        assert "File selected: resume.pdf" in caplog.text


class TestRequestAnalysis:
    """Running the scorer"""

    def test_idle_is_noop(self):
        calls = []

        state = request_analysis(Idle(), scorer=calls.append)

        assert state == Idle()
        assert calls == []

    def test_analyze_selected_file(self):
        state = request_analysis(FileSelected("react_resume.pdf"))

        assert isinstance(state, Analyzed)
        assert state.file_name == "react_resume.pdf"
        assert state.analysis == score_file_name("react_resume.pdf")

    def test_scorer_called_once_with_name(self):
        calls = []

        def scorer(name):
            calls.append(name)
            return score_file_name(name)

        request_analysis(FileSelected("cv.pdf"), scorer=scorer)

        assert calls == ["cv.pdf"]

    def test_reanalyze_gives_same_result(self):
        first = request_analysis(FileSelected("python_cv.pdf"))
        second = request_analysis(first)

        assert second == first

    def test_analysis_is_logged(self, caplog):
        with caplog.at_level(logging.INFO, logger="analyzer_state"):
            request_analysis(FileSelected("resume.pdf"))

        assert "score 60" in caplog.text


class TestHelpers:
    """State inspection helpers"""

    def test_selected_file_name(self):
        assert selected_file_name(Idle()) is None
        assert selected_file_name(FileSelected("a.pdf")) == "a.pdf"
        assert selected_file_name(Analyzed("b.pdf", score_file_name("b.pdf"))) == "b.pdf"

    def test_can_analyze(self):
        assert can_analyze(Idle()) is False
        assert can_analyze(FileSelected("a.pdf")) is True
        assert can_analyze(Analyzed("b.pdf", score_file_name("b.pdf"))) is True
