"""FastAPI web application for PhoneCheck."""

from typing import List

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from phonecheck.api_manager.base import PhoneValidator
from phonecheck.api_manager.validators.phone.abstract_api import AbstractApiPhoneValidator
from phonecheck.core.app import PhoneCheckApp
from phonecheck.core.countries import selector_options
from phonecheck.core.state import Panel, Phase
from phonecheck.utils.config_loader import load_settings
from phonecheck.utils.logger import setup_logger_from_settings

settings = load_settings()
logger = setup_logger_from_settings(settings)

app = FastAPI(
    title="PhoneCheck API",
    description="Validate phone numbers against a third-party provider",
    version="1.0.0",
)

# Enable CORS for web frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, specify actual origins
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class ValidateBody(BaseModel):
    prefix: str = ""
    number: str = ""


class Row(BaseModel):
    label: str
    value: str
    style: str = ""


class ValidateResponse(BaseModel):
    panel: str
    phone_number: str
    rows: List[Row]


def get_validator() -> PhoneValidator:
    """Provider used by /validate (overridden in tests)."""
    return AbstractApiPhoneValidator.from_settings(settings)


@app.get("/")
async def root():
    """Health check endpoint."""
    return {
        "status": "ok",
        "message": "PhoneCheck API",
        "version": "1.0.0",
    }


@app.get("/countries")
async def countries():
    """Country selector options in display order."""
    return selector_options()


@app.post("/validate", response_model=ValidateResponse)
def validate(body: ValidateBody, validator: PhoneValidator = Depends(get_validator)):
    """Run one submission through a fresh application object.

    Returns:
        The rendered result rows.
    """
    logger.info(f"Validation requested for prefix {body.prefix!r}")

    phone_app = PhoneCheckApp(validator)
    phone_app.dispatch("select_country", prefix=body.prefix)
    phone_app.dispatch("enter_number", text=body.number)
    phone_app.dispatch("submit")

    state = phone_app.state
    notice = phone_app.pop_notice()
    if state.active_panel is not Panel.RESULTS:
        # Input errors never reach the provider; anything else did and failed.
        status_code = 502 if state.last_outcome is Phase.FAILURE else 400
        raise HTTPException(status_code=status_code, detail=notice)

    return ValidateResponse(
        panel=state.active_panel.value,
        phone_number=state.phone_number,
        rows=[Row(label=r.label, value=r.value, style=r.style) for r in state.rows],
    )


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
