# score_chart.py

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np

from resume_scorer import Analysis

BAR_COLORS = ["#9b59b6", "#3498db", "#2ecc71", "#e67e22"]


def build_score_chart(analysis: Analysis):
    """Horizontal stacked bar showing how each rule adds to the score."""
    labels = [label for label, _ in analysis.score_breakdown]
    values = np.array([value for _, value in analysis.score_breakdown], dtype=int)
    offsets = np.concatenate(([0], np.cumsum(values)[:-1])) if len(values) else values

    fig, ax = plt.subplots(figsize=(6, 1.8))
    for i, (label, value, left) in enumerate(zip(labels, values, offsets)):
        ax.barh(
            0,
            value,
            left=left,
            color=BAR_COLORS[i % len(BAR_COLORS)],
            label=f"{label} (+{value})",
        )

    ax.axvline(100, color="#7f8c8d", linestyle="--", linewidth=1)
    ax.set_xlim(0, max(100, analysis.score))
    ax.set_yticks([])
    ax.set_xlabel("Score")
    ax.set_title("Score Breakdown")
    if labels:
        ax.legend(loc="upper center", bbox_to_anchor=(0.5, -0.45), ncol=len(labels), frameon=False)
    fig.tight_layout()
    return fig
