# src/paintwindow/engine/summary.py
from __future__ import annotations
from typing import Sequence

from paintwindow.engine.finder import WindowMatch
from paintwindow.engine.reasons import Reason, TaskKind

GO_MESSAGES = {
    TaskKind.PAINT: "Go: professional-safe paint conditions.",
    TaskKind.STAIN: "Go: professional-safe stain conditions.",
}

NEXT_FOUND_MESSAGES = {
    TaskKind.PAINT: "Next paint-safe window found.",
    TaskKind.STAIN: "Next stain-safe window found.",
}

NEXT_NOT_FOUND_MESSAGE = "No safe window found in the next few days."


def summarize(task: TaskKind | str, ok: bool, reasons: Sequence[Reason]) -> str:
    if ok:
        return GO_MESSAGES[TaskKind(task)]

    # 상위 2개만 노출 (CRITERIA 순서)
    top = "; ".join(r.message.rstrip(".") for r in reasons[:2])
    return f"No-go: {top}."


def summarize_next(task: TaskKind | str, match: WindowMatch) -> str:
    if match.found:
        return NEXT_FOUND_MESSAGES[TaskKind(task)]
    return NEXT_NOT_FOUND_MESSAGE
