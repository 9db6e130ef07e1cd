"""Application object: one UIState plus the action dispatch table.

Front ends never touch the controllers directly; they translate their own
events (widget callbacks, HTTP requests, CLI arguments) into named actions:

    app = build_app()
    app.dispatch("select_country", prefix="+91")
    app.dispatch("enter_number", text="9876543210")
    app.dispatch("submit")
    app.state.rows  # -> [ResultRow(...), ...]
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional

from ..api_manager.base import PhoneValidator
from ..api_manager.validators.phone.abstract_api import AbstractApiPhoneValidator
from ..utils.config_loader import Settings, load_settings
from .chrome import ChromeController
from .controller import SubmissionController
from .state import UIState


class UnknownAction(KeyError):
    """Raised when a front end dispatches an unregistered action name."""


class PhoneCheckApp:
    def __init__(self, validator: PhoneValidator, prefers_dark: bool = False) -> None:
        self.state = UIState()
        self.submission = SubmissionController(self.state, validator)
        self.chrome = ChromeController(self.state)
        self.chrome.load_theme_preference(prefers_dark)

        self.actions: Dict[str, Callable[..., Any]] = {
            "select_country": self.submission.select_country,
            "enter_number": self.submission.enter_number,
            "submit": self.submission.submit,
            "number_keypress": self.submission.number_keypress,
            "back": self.submission.back,
            "toggle_sidebar": self.chrome.toggle_sidebar,
            "overlay_click": self.chrome.close_sidebar,
            "document_keydown": self.chrome.document_keydown,
            "theme_toggle": self.chrome.theme_toggle,
            "system_theme_change": self.chrome.system_theme_change,
        }

    def dispatch(self, action: str, **payload: Any) -> Any:
        try:
            handler = self.actions[action]
        except KeyError:
            raise UnknownAction(action) from None
        return handler(**payload)

    def pop_notice(self) -> Optional[str]:
        """Return the pending notice once, then forget it."""
        notice, self.state.notice = self.state.notice, None
        return notice

    def pop_focus(self) -> Optional[str]:
        focus, self.state.focus = self.state.focus, None
        return focus


def build_app(settings: Optional[Settings] = None, prefers_dark: bool = False) -> PhoneCheckApp:
    """Create an app wired to the AbstractAPI provider from ``settings``."""
    settings = settings or load_settings()
    validator = AbstractApiPhoneValidator.from_settings(settings)
    return PhoneCheckApp(validator, prefers_dark=prefers_dark)
