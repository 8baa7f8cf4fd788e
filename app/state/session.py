"""
Session State Management
========================
Encapsulates all Streamlit session state interactions.
"""
from typing import TYPE_CHECKING, Any, List, Optional

import streamlit as st

from oncall.models.rules import RULES

if TYPE_CHECKING:
    from oncall.models.availability import AvailabilityGrid
    from oncall.solver.engine import ScheduleResult


class SessionStateManager:
    """Manages type-safe access to session state."""

    @staticmethod
    def init_state():
        """Initialize default session state values."""
        defaults = {
            "people": [],
            "grid": None,
            "result": None,
            "load_error": None,
            "loaded_file_key": None,
            "trigger_generate": False,
            # Requirement inputs
            "cfg_sun_wed": RULES.default_staffing["sun_to_wed"],
            "cfg_thurs": RULES.default_staffing["thurs"],
            "cfg_fri_sat": RULES.default_staffing["fri_to_sat"],
            "cfg_days": RULES.default_days_in_month,
            "cfg_first_day": RULES.default_first_day,
        }

        for key, value in defaults.items():
            if key not in st.session_state:
                st.session_state[key] = value

    @property
    def people(self) -> List[Any]:
        return st.session_state.get("people", [])

    @people.setter
    def people(self, value: List[Any]):
        st.session_state.people = value

    @property
    def grid(self) -> Optional["AvailabilityGrid"]:
        return st.session_state.get("grid")

    @grid.setter
    def grid(self, value: "AvailabilityGrid"):
        st.session_state.grid = value

    @property
    def result(self) -> Optional["ScheduleResult"]:
        return st.session_state.get("result")

    @result.setter
    def result(self, value: "ScheduleResult"):
        st.session_state.result = value

    @property
    def trigger_generate(self) -> bool:
        return bool(st.session_state.get("trigger_generate"))

    @trigger_generate.setter
    def trigger_generate(self, value: bool):
        st.session_state.trigger_generate = value

    def clear_results(self):
        """Clear the last generated schedule."""
        st.session_state.result = None
