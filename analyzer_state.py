"""
Per-session state of the analyzer page.

The page is always in exactly one of three states: no file chosen, a file
chosen but not analyzed yet, or a finished analysis. Two events move it
between them: the user picks (or clears) a file, and the user asks for an
analysis.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Union

from resume_scorer import Analysis, score_file_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class FileSelected:
    file_name: str


@dataclass(frozen=True)
class Analyzed:
    file_name: str
    analysis: Analysis


AnalyzerState = Union[Idle, FileSelected, Analyzed]


def select_file(state: AnalyzerState, file_name: Optional[str]) -> AnalyzerState:
    """Handle a file picker change; any previous analysis is dropped."""
    if file_name is None:
        if not isinstance(state, Idle):
            logger.info("File selection cleared")
        return Idle()
    logger.info(f"File selected: {file_name}")
    return FileSelected(file_name)


def request_analysis(
    state: AnalyzerState,
    scorer: Callable[[str], Analysis] = score_file_name,
) -> AnalyzerState:
    """Run the scorer on the selected file. Without a file this is a no-op."""
    if isinstance(state, Idle):
        logger.debug("Analysis requested with no file selected; ignoring")
        return state

    analysis = scorer(state.file_name)
    logger.info(
        f"Analyzed {state.file_name}: score {analysis.score}, role {analysis.role}"
    )
    return Analyzed(state.file_name, analysis)


def selected_file_name(state: AnalyzerState) -> Optional[str]:
    if isinstance(state, Idle):
        return None
    return state.file_name


def can_analyze(state: AnalyzerState) -> bool:
    return not isinstance(state, Idle)
