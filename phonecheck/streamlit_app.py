"""Streamlit web interface for PhoneCheck.

Run with: streamlit run phonecheck/streamlit_app.py
"""

import html
import sys
from pathlib import Path

import streamlit as st

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from phonecheck.core.app import PhoneCheckApp, build_app
from phonecheck.core.countries import COUNTRIES, get_country
from phonecheck.core.state import BUSY_LABEL, Panel, Theme
from phonecheck.utils.config_loader import load_settings
from phonecheck.utils.logger import setup_logger_from_settings

settings = load_settings()
logger = setup_logger_from_settings(settings)

# Page config
st.set_page_config(
    page_title="Phone Number Validator",
    page_icon="📞",
    layout="centered",
)

THEME_CSS = {
    Theme.LIGHT: """
        :root, [data-color-scheme="light"] { --pc-bg: #fcfcf9; --pc-surface: #ffffff; --pc-text: #13343b; --pc-border: rgba(94, 82, 64, 0.2); }
    """,
    Theme.DARK: """
        :root, [data-color-scheme="dark"] { --pc-bg: #1f2121; --pc-surface: #262828; --pc-text: #f5f5f5; --pc-border: rgba(119, 124, 124, 0.3); }
        .stApp { background-color: #1f2121; color: #f5f5f5; }
    """,
}

RESULT_CSS = """
    .result-item { background: var(--pc-surface); color: var(--pc-text); border: 1px solid var(--pc-border);
                   border-radius: 8px; padding: 12px 16px; margin-bottom: 8px; }
    .result-item h4 { margin: 0 0 4px 0; font-size: 0.8rem; text-transform: uppercase; opacity: 0.7; }
    .result-item p { margin: 0; font-size: 1rem; }
    .result-item.valid p { color: #21808d; font-weight: 600; }
    .result-item.invalid p { color: #c0152f; font-weight: 600; }
"""

NAV_LINKS = [
    ("📞 Validate number", "#phone-number-validator"),
    ("ℹ️ About", "#about"),
]


def system_prefers_dark() -> bool:
    """Colour scheme the browser reported for this session."""
    return st.context.theme.type == "dark"


def get_app() -> PhoneCheckApp:
    """One application object per browser session."""
    prefers_dark = system_prefers_dark()
    if "phone_app" not in st.session_state:
        st.session_state.phone_app = build_app(settings, prefers_dark=prefers_dark)
        logger.info(f"New session, system theme {'dark' if prefers_dark else 'light'}")
        st.session_state.system_dark = prefers_dark
    elif st.session_state.system_dark != prefers_dark:
        st.session_state.system_dark = prefers_dark
        st.session_state.phone_app.dispatch("system_theme_change", prefers_dark=prefers_dark)
    return st.session_state.phone_app


def render_theme(phone_app: PhoneCheckApp) -> None:
    theme = phone_app.state.theme
    attr, value = next(iter(phone_app.state.color_scheme_attribute.items()))
    st.markdown(
        f"<style>{THEME_CSS[theme]}{RESULT_CSS}</style><div {attr}=\"{value}\"></div>",
        unsafe_allow_html=True,
    )


def render_sidebar(phone_app: PhoneCheckApp) -> None:
    if not phone_app.state.sidebar_open:
        return

    with st.sidebar:
        st.markdown("### Menu")
        for label, anchor in NAV_LINKS:
            st.markdown(f"[{label}]({anchor})")
        st.markdown("---")

        checked = st.toggle("🌙 Dark mode", value=phone_app.state.theme_toggle_checked)
        if checked != phone_app.state.theme_toggle_checked:
            phone_app.dispatch("theme_toggle", checked=checked)
            st.rerun()

        if st.button("✕ Close menu", use_container_width=True):
            phone_app.dispatch("overlay_click")
            st.rerun()


def render_form(phone_app: PhoneCheckApp) -> None:
    state = phone_app.state
    codes = [""] + [c.iso_code for c in COUNTRIES]
    # US and CA share +1, so remember the ISO code that was picked
    current = st.session_state.get("country_code", "")
    if not state.selected_prefix:
        current = ""

    # A form submits on Enter in the number field as well as on the button.
    with st.form("validation_form", clear_on_submit=False):
        code = st.selectbox(
            "Country",
            options=codes,
            index=codes.index(current),
            format_func=lambda c: "Select a country" if not c else get_country(c).option_label,
        )
        number = st.text_input(
            "Phone number",
            value=state.number_text,
            placeholder="Enter phone number without country code",
        )
        submitted = st.form_submit_button(
            state.submit_label,
            type="primary",
            disabled=not state.submit_enabled,
            use_container_width=True,
        )

    if submitted:
        country = get_country(code) if code else None
        st.session_state.country_code = code
        phone_app.dispatch("select_country", prefix=country.dialing_prefix if country else "")
        phone_app.dispatch("enter_number", text=number)
        with st.spinner(BUSY_LABEL):
            phone_app.dispatch("submit")
        st.rerun()


def render_results(phone_app: PhoneCheckApp) -> None:
    st.subheader("Validation Results")
    for row in phone_app.state.rows:
        st.markdown(
            f"<div class=\"result-item {row.style}\">"
            f"<h4>{html.escape(row.label)}</h4><p>{html.escape(row.value)}</p></div>",
            unsafe_allow_html=True,
        )

    if st.button("← Validate another number", use_container_width=True):
        phone_app.dispatch("back")
        st.rerun()


phone_app = get_app()
render_theme(phone_app)

col_menu, col_title = st.columns([1, 8])
with col_menu:
    if st.button("☰", help="Toggle menu"):
        phone_app.dispatch("toggle_sidebar")
        st.rerun()
with col_title:
    st.title("Phone Number Validator")

render_sidebar(phone_app)

notice = phone_app.pop_notice()
focus = phone_app.pop_focus()
if notice:
    st.error(notice)
if notice and focus:
    st.caption("👇 Check the phone number field")

if phone_app.state.active_panel is Panel.RESULTS:
    render_results(phone_app)
else:
    render_form(phone_app)

st.markdown("---")
st.subheader("About", anchor="about")
st.caption(
    "Pick a country, type the number without its country code and press Enter. "
    "Validity, carrier and line type come from AbstractAPI Phone Validation."
)
