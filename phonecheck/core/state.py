"""UI state shared by the submission and chrome controllers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .renderer import ResultRow

SUBMIT_LABEL = "Validate Phone Number"
BUSY_LABEL = "Validating..."


class Panel(str, Enum):
    FORM = "form"
    RESULTS = "results"


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"


class Phase(str, Enum):
    """Submission state machine: IDLE -> SUBMITTING -> SUCCESS|FAILURE -> IDLE."""

    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass
class UIState:
    """Everything a front end needs to draw the page."""

    busy: bool = False
    active_panel: Panel = Panel.FORM
    theme: Theme = Theme.LIGHT
    phase: Phase = Phase.IDLE
    # SUCCESS or FAILURE of the most recent provider call, None before any
    last_outcome: Optional[Phase] = None

    # Submit control
    submit_label: str = SUBMIT_LABEL
    submit_enabled: bool = True
    form_busy: bool = False

    # Form fields
    selected_prefix: str = ""
    number_text: str = ""

    # Results panel
    rows: List[ResultRow] = field(default_factory=list)
    phone_number: str = ""

    # Chrome
    sidebar_open: bool = False
    scroll_locked: bool = False

    # One-shot outputs for the front end
    notice: Optional[str] = None
    focus: Optional[str] = None

    @property
    def theme_toggle_checked(self) -> bool:
        return self.theme is Theme.DARK

    @property
    def color_scheme_attribute(self) -> dict:
        return {"data-color-scheme": self.theme.value}


class BusyGuard:
    """Holds the busy flag for the duration of one provider call.

    Entering marks the form busy and disables the submit control; leaving
    restores both whatever happened inside the block.
    """

    def __init__(self, state: UIState) -> None:
        self.state = state

    def __enter__(self) -> UIState:
        self.state.busy = True
        self.state.submit_enabled = False
        self.state.submit_label = BUSY_LABEL
        self.state.form_busy = True
        return self.state

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.state.busy = False
        self.state.submit_enabled = True
        self.state.submit_label = SUBMIT_LABEL
        self.state.form_busy = False
        return False
