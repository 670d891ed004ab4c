"""Text and JSON renderers for corpus label statistics."""

from __future__ import annotations

import json
from typing import Any, Dict, Iterable, List

from .models import CorpusHistogram, FunctionLabels, LabelHistogram


def format_counts(histogram: LabelHistogram) -> str:
    """Render ``label count`` pairs in label order, separated by commas."""
    return ", ".join(f"{label} {count}" for label, count in sorted(histogram.counts.items()))


def render_summary(histogram: CorpusHistogram, *, by_provenance: bool = False) -> str:
    """Render the corpus summary.

    The first three lines are the number of functions with at least one
    label, the number of distinct labels and the label counts.
    """
    lines = [
        str(histogram.labelled_functions),
        str(histogram.labels.distinct),
        format_counts(histogram.labels),
        (
            f"functions={histogram.total_functions} native={histogram.native_functions} "
            f"foreign={histogram.foreign_functions} mixed={histogram.mixed_functions} "
            f"empty={histogram.empty_functions}"
        ),
    ]
    if by_provenance:
        for title, sub in (("native", histogram.native), ("foreign", histogram.foreign)):
            lines.append(f"{title}: total={sub.total} distinct={sub.distinct}")
            if sub.counts:
                lines.append(f"  {format_counts(sub)}")
    return "\n".join(lines)


def render_functions(functions: Iterable[FunctionLabels], *, include_empty: bool = False) -> str:
    lines: List[str] = []
    for entry in functions:
        if not entry.labels and not include_empty:
            continue
        labels = ", ".join(sorted(entry.labels)) or "(none)"
        prefix = f"{entry.unit}::" if entry.unit else ""
        lines.append(f"{prefix}{entry.name}: {labels}")
    return "\n".join(lines)


def histogram_to_dict(histogram: CorpusHistogram) -> Dict[str, Any]:
    return {
        "total_functions": histogram.total_functions,
        "labelled_functions": histogram.labelled_functions,
        "empty_functions": histogram.empty_functions,
        "native_functions": histogram.native_functions,
        "foreign_functions": histogram.foreign_functions,
        "mixed_functions": histogram.mixed_functions,
        "labels": dict(sorted(histogram.labels.counts.items())),
        "native": _sub_histogram(histogram.native),
        "foreign": _sub_histogram(histogram.foreign),
    }


def functions_to_list(
    functions: Iterable[FunctionLabels], *, include_empty: bool = False
) -> List[Dict[str, Any]]:
    return [
        {"unit": entry.unit, "name": entry.name, "labels": sorted(entry.labels)}
        for entry in functions
        if entry.labels or include_empty
    ]


def render_json(payload: Dict[str, Any]) -> str:
    return json.dumps(payload, indent=2, sort_keys=True)


def _sub_histogram(histogram: LabelHistogram) -> Dict[str, Any]:
    return {
        "total": histogram.total,
        "distinct": histogram.distinct,
        "labels": dict(sorted(histogram.counts.items())),
    }


__all__ = [
    "format_counts",
    "functions_to_list",
    "histogram_to_dict",
    "render_functions",
    "render_json",
    "render_summary",
]
