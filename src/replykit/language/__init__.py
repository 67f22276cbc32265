"""Language-mode detection for typed text."""

from replykit.language.detector import detect, detect_from_current_input


__all__ = [
    "detect",
    "detect_from_current_input",
]
