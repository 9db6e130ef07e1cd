"""Submission controller: form input -> provider -> results panel."""

from __future__ import annotations

import logging
from typing import Optional

from ..api_manager.base import (
    NUMBER_FIELD,
    InputError,
    PhoneValidator,
    ValidationFailed,
    build_request,
)
from .renderer import render
from .state import BusyGuard, Panel, Phase, UIState

logger = logging.getLogger("phonecheck.controller")

FAILURE_MESSAGE = "Failed to validate phone number. Please try again."


class SubmissionController:
    """Runs the submission state machine over a shared ``UIState``."""

    def __init__(self, state: UIState, validator: PhoneValidator) -> None:
        self.state = state
        self.validator = validator

    def _transition(self, phase: Phase) -> None:
        logger.debug(f"Submission phase {self.state.phase.value} -> {phase.value}")
        self.state.phase = phase
        if phase in (Phase.SUCCESS, Phase.FAILURE):
            self.state.last_outcome = phase

    def _notify(self, message: str, focus: Optional[str] = None) -> None:
        self.state.notice = message
        if focus:
            self.state.focus = focus

    def select_country(self, prefix: str) -> None:
        self.state.selected_prefix = prefix or ""

    def enter_number(self, text: str) -> None:
        self.state.number_text = text or ""

    def submit(self) -> bool:
        """Validate the current form contents.

        Returns:
            True when a result was rendered, False otherwise (ignored
            because busy, rejected input, or provider failure).
        """
        if self.state.busy:
            logger.debug("Submit ignored: a validation is already in flight")
            return False

        try:
            request = build_request(self.state.selected_prefix, self.state.number_text)
        except InputError as exc:
            logger.info(f"Submission rejected: {exc.message}")
            self.state.last_outcome = None
            self._notify(exc.message, focus=exc.field if exc.field == NUMBER_FIELD else None)
            return False

        self._transition(Phase.SUBMITTING)
        with BusyGuard(self.state):
            # Render inside the handler so a malformed payload ends in FAILURE.
            try:
                result = self.validator.lookup(request)
                rows = render(result, request.full_number)
            except (ValidationFailed, TypeError, ValueError, AttributeError) as exc:
                logger.error(f"Validation error: {exc}", exc_info=True)
                self._transition(Phase.FAILURE)
                self.state.active_panel = Panel.FORM
                self._notify(FAILURE_MESSAGE)
            else:
                self.state.rows = rows
                self.state.phone_number = request.full_number
                self.state.active_panel = Panel.RESULTS
                self._transition(Phase.SUCCESS)

        succeeded = self.state.phase is Phase.SUCCESS
        self._transition(Phase.IDLE)
        return succeeded

    def number_keypress(self, key: str) -> bool:
        if key == "Enter":
            return self.submit()
        return False

    def back(self) -> None:
        """Return to the form with an empty number field."""
        self.state.active_panel = Panel.FORM
        self.state.number_text = ""
        self.state.focus = NUMBER_FIELD
