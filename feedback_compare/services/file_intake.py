from __future__ import annotations

from typing import Dict, Optional

from feedback_compare.domain.models import SelectedFile

PERIOD_1 = "file1"
PERIOD_2 = "file2"

SLOT_TITLES = {
    PERIOD_1: "Teaching Period 1 Data",
    PERIOD_2: "Teaching Period 2 Data",
}

DEFAULT_LABEL = "Click to upload a CSV file"


def decode_upload(content: bytes) -> str:
    # No validation: whatever was uploaded is handed to the model as text.
    return content.decode("utf-8-sig", errors="replace")


class FileIntake:
    """Two fixed upload slots. Analysis is allowed only once both are filled."""

    def __init__(self) -> None:
        self._files: Dict[str, Optional[SelectedFile]] = {slot: None for slot in SLOT_TITLES}

    def select(self, slot: str, filename: str, content: bytes) -> Optional[SelectedFile]:
        if slot not in self._files:
            raise KeyError(f"Unknown upload slot: {slot}")

        filename = (filename or "").strip()
        if not filename:
            return None

        selected = SelectedFile(slot=slot, filename=filename, text=decode_upload(content))
        self._files[slot] = selected
        return selected

    def label(self, slot: str) -> str:
        selected = self._files[slot]
        return selected.filename if selected else DEFAULT_LABEL

    def has_file(self, slot: str) -> bool:
        return self._files[slot] is not None

    @property
    def is_ready(self) -> bool:
        return all(f is not None for f in self._files.values())

    def texts(self) -> tuple[str, str]:
        p1, p2 = self._files[PERIOD_1], self._files[PERIOD_2]
        if p1 is None or p2 is None:
            raise ValueError("Both teaching period files are required.")
        return p1.text, p2.text
