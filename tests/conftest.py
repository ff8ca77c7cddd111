"""
Pytest configuration and shared fixtures for motionboard tests.

Testing Standards:
- Unit tests go in tests/unit/<layer>/
- Property-based tests use hypothesis and are marked with @pytest.mark.property
- Rosters are built with InMemoryDelegateDirectory, never mocked
"""

import pytest

from motionboard.domain.models.delegate import DelegatePresence
from motionboard.domain.models.motion import (
    ModeratedCaucus,
    OtherMotion,
    RoundRobin,
    UnmoderatedCaucus,
)
from motionboard.infrastructure.adapters.in_memory_delegate_directory import (
    InMemoryDelegateDirectory,
)

ROSTER_PRESET = {
    "us": {"name": "United States", "aliases": ["USA", "US"], "flagURL": "us"},
    "fr": {"name": "France", "aliases": []},
    "ci": {"name": "Côte d'Ivoire", "aliases": ["Ivory Coast"]},
    "de": {"name": "Germany", "aliases": ["Deutschland"]},
    "br": {"name": "Brazil", "aliases": []},
}


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from motionboard import __version__

    return __version__


@pytest.fixture
def directory() -> InMemoryDelegateDirectory:
    """Roster where everyone but Germany is present.

    Brazil is present and voting; Germany is not present.
    """
    roster = InMemoryDelegateDirectory.from_preset(
        ROSTER_PRESET, presence=DelegatePresence.PRESENT
    )
    roster.set_presence("de", DelegatePresence.NOT_PRESENT)
    roster.set_presence("br", DelegatePresence.PRESENT_AND_VOTING)
    return roster


@pytest.fixture
def mod_motion() -> ModeratedCaucus:
    """10 minute moderated caucus with 1 minute speeches (10 speakers)."""
    return ModeratedCaucus(
        id="mod-1",
        delegate="us",
        total_time=600,
        speaking_time=60,
        topic="Climate finance",
    )


@pytest.fixture
def unmod_motion() -> UnmoderatedCaucus:
    """5 minute unmoderated caucus."""
    return UnmoderatedCaucus(id="unmod-1", delegate="fr", total_time=300)


@pytest.fixture
def rr_motion() -> RoundRobin:
    """Round robin of 3 speakers, 45 seconds each."""
    return RoundRobin(
        id="rr-1",
        delegate="ci",
        speaking_time=45,
        topic="Opening statements",
        total_speakers=3,
    )


@pytest.fixture
def other_motion() -> OtherMotion:
    """Other motion (e.g. a 15 minute recess)."""
    return OtherMotion(id="other-1", delegate="br", total_time=900, topic="Recess")
