import streamlit as st

from oncall.models.requirements import Requirements


def get_requirement_options() -> dict:
    """Requirement options from session state, using the form's option names."""
    return {
        "onCallSunToWed": st.session_state.get("cfg_sun_wed"),
        "onCallThurs": st.session_state.get("cfg_thurs"),
        "onCallFriToSat": st.session_state.get("cfg_fri_sat"),
        "daysInMonth": st.session_state.get("cfg_days"),
        "firstDayOfMonth": st.session_state.get("cfg_first_day"),
    }


def get_requirements() -> Requirements:
    """Build validated Requirements from session state."""
    return Requirements.validated(get_requirement_options())
