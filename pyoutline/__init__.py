"""PyOutlineEditor: a keyboard-driven outline checklist editor built on PyQt6."""
