"""Unit tests for the Delegate model and name folding."""

import pytest

from motionboard.domain.models.delegate import Delegate, DelegatePresence, fold_name
from motionboard.domain.models.delegate_stats import DelegateMotionStats


class TestFoldName:
    """Tests for fold_name."""

    def test_case_and_accents_are_ignored(self) -> None:
        assert fold_name("Côte d'Ivoire") == fold_name("COTE D'IVOIRE")
        assert fold_name("Côte d'Ivoire") == "cote d'ivoire"

    def test_surrounding_whitespace_is_ignored(self) -> None:
        assert fold_name("  France ") == "france"

    def test_casefold_handles_special_cases(self) -> None:
        assert fold_name("STRASSE") == fold_name("straße")


class TestDelegate:
    """Tests for the Delegate dataclass."""

    def test_defaults(self) -> None:
        delegate = Delegate(id="fr", name="France")
        assert delegate.aliases == ()
        assert delegate.presence is DelegatePresence.NOT_PRESENT
        assert delegate.flag_url is None
        assert not delegate.is_present()

    def test_aliases_are_stored_as_tuple(self) -> None:
        delegate = Delegate(id="us", name="United States", aliases=["USA"])  # type: ignore[arg-type]
        assert delegate.aliases == ("USA",)

    def test_empty_id_rejected(self) -> None:
        with pytest.raises(ValueError, match="id cannot be empty"):
            Delegate(id="", name="France")

    def test_blank_name_rejected(self) -> None:
        with pytest.raises(ValueError, match="name cannot be empty"):
            Delegate(id="fr", name="   ")

    @pytest.mark.parametrize("name", ["United States", "usa", "US", "united states"])
    def test_name_equals_matches_name_and_aliases(self, name: str) -> None:
        delegate = Delegate(id="us", name="United States", aliases=("USA", "US"))
        assert delegate.name_equals(name)

    def test_name_equals_is_not_a_prefix_match(self) -> None:
        delegate = Delegate(id="us", name="United States")
        assert not delegate.name_equals("United")

    @pytest.mark.parametrize(
        ("presence", "expected"),
        [
            (DelegatePresence.NOT_PRESENT, False),
            (DelegatePresence.PRESENT, True),
            (DelegatePresence.PRESENT_AND_VOTING, True),
        ],
    )
    def test_is_present(self, presence: DelegatePresence, expected: bool) -> None:
        assert Delegate(id="fr", name="France", presence=presence).is_present() is expected

    def test_with_presence_returns_copy(self) -> None:
        delegate = Delegate(id="fr", name="France")
        updated = delegate.with_presence(DelegatePresence.PRESENT)
        assert updated.presence is DelegatePresence.PRESENT
        assert delegate.presence is DelegatePresence.NOT_PRESENT
        assert updated.name_equals("france")

    def test_presence_codes(self) -> None:
        assert [p.value for p in DelegatePresence] == ["NP", "P", "PV"]


class TestDelegateMotionStats:
    """Tests for per-delegate counters."""

    def test_counters_increment_on_copies(self) -> None:
        stats = DelegateMotionStats()
        updated = stats.with_proposed().with_proposed().with_accepted()
        assert (updated.motions_proposed, updated.motions_accepted) == (2, 1)
        assert stats == DelegateMotionStats(0, 0)

    def test_negative_counts_rejected(self) -> None:
        with pytest.raises(ValueError):
            DelegateMotionStats(motions_proposed=-1)
