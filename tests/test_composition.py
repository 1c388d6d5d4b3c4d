"""Tests for the Composition lifecycle, lookup and copy semantics."""

import copy
import logging

import pytest

from alloycomp.constants import FRACTION_SUM_TOLERANCE
from alloycomp.core.composition import Composition, build_composition
from alloycomp.models.element import ElementDefinition

M_FE = 55.845
M_C = 12.0107
M_MN = 54.938049


# ── Helpers ──────────────────────────────────────────────────────────

def _fe_c_mn() -> Composition:
    return Composition([
        ElementDefinition("Fe", is_major=True),
        ElementDefinition("C", is_interstitial=True, is_variable=True),
        ElementDefinition("Mn", is_variable=True),
    ])


def _steel() -> Composition:
    """Fe major, C variable interstitial, N fixed interstitial,
    Mn variable substitutional, Cr and Ni fixed substitutional."""
    return build_composition([
        ("Fe", False, False, True),
        ("C", True, True),
        ("N", True, False),
        ("Mn", False, True),
        ("Cr",),
        ("Ni",),
    ])


def _x_sum(comp: Composition) -> float:
    return sum(el.x for el in comp)


# ── Construction ─────────────────────────────────────────────────────

class TestConstruction:
    def test_registration_order_preserved(self):
        assert _steel().symbols == ["Fe", "C", "N", "Mn", "Cr", "Ni"]

    def test_len_and_iteration(self):
        comp = _fe_c_mn()
        assert len(comp) == 3
        assert [el.symbol for el in comp] == ["Fe", "C", "Mn"]

    def test_molar_masses_from_periodic_table(self):
        comp = _fe_c_mn()
        assert comp.get_molar_mass("Fe") == pytest.approx(M_FE)
        assert comp.get_molar_mass("C") == pytest.approx(M_C)

    def test_symbols_normalized(self):
        comp = Composition([ElementDefinition("FE", is_major=True), ElementDefinition("c", True, True)])
        assert comp.symbols == ["Fe", "C"]

    def test_unknown_symbol_raises(self):
        with pytest.raises(KeyError, match="Unknown element"):
            Composition([ElementDefinition("Fe", is_major=True), ElementDefinition("Xx")])

    def test_duplicate_symbol_raises(self):
        with pytest.raises(ValueError, match="more than once"):
            Composition([ElementDefinition("Fe", is_major=True), ElementDefinition("fe")])

    def test_major_element_symbol(self):
        assert _steel().major_element_symbol == "Fe"

    def test_initial_state(self):
        comp = _fe_c_mn()
        assert not comp.is_composition_locked
        assert comp.molar_mass_avg == 0.0

    def test_repr(self):
        assert repr(_fe_c_mn()) == "Composition([Fe, C, Mn], unlocked)"


# ── Symbol lookup ────────────────────────────────────────────────────

class TestSymbolLookup:
    def test_case_insensitive(self):
        comp = _fe_c_mn()
        el = comp.element("Fe")
        assert comp.element("fe") is el
        assert comp.element("FE") is el
        assert comp["fE"] is el

    def test_undefined_element_raises(self):
        comp = _fe_c_mn()
        with pytest.raises(KeyError, match="'Ni' is not defined"):
            comp.element("ni")

    def test_setter_on_undefined_element_raises(self):
        with pytest.raises(KeyError):
            _fe_c_mn().set_x("Cr", 0.01)

    def test_contains(self):
        comp = _fe_c_mn()
        assert "mn" in comp
        assert "Ni" not in comp
        assert 26 not in comp


# ── Unlocked updates ─────────────────────────────────────────────────

class TestUnlockedUpdate:
    def test_mole_fractions_sum_to_one(self):
        comp = _steel()
        comp.set_x("C", 0.004)
        comp.set_w("Mn", 0.015)
        comp.set_x("Cr", 0.02)
        comp.set_w("Ni", 0.01)
        comp.set_x("N", 0.001)
        assert comp.update_fractions()
        assert _x_sum(comp) == pytest.approx(1.0, abs=FRACTION_SUM_TOLERANCE)

    def test_mass_fractions_sum_to_one(self):
        comp = _steel()
        comp.set_x("C", 0.004)
        comp.set_w("Mn", 0.015)
        comp.set_x("Cr", 0.02)
        comp.update_fractions()
        assert sum(el.w for el in comp) == pytest.approx(1.0)

    @pytest.mark.parametrize("symbol,x", [("C", 0.005), ("Mn", 0.02), ("Mn", 0.3)])
    def test_mole_to_mass_round_trip(self, symbol, x):
        comp = _fe_c_mn()
        comp.set_x(symbol, x)
        comp.update_fractions()
        back = comp.get_w(symbol) * comp.molar_mass_avg / comp.get_molar_mass(symbol)
        assert back == pytest.approx(x)

    def test_mass_to_mole_round_trip(self):
        comp = _fe_c_mn()
        comp.set_w("Mn", 0.02)
        comp.update_fractions()
        back = comp.get_x("Mn") * comp.get_molar_mass("Mn") / comp.molar_mass_avg
        assert back == pytest.approx(0.02)

    def test_switching_channel_replaces_input(self):
        comp = _fe_c_mn()
        comp.set_w("Mn", 0.02)
        comp.set_x("Mn", 0.01)
        comp.update_fractions()
        assert comp.get_x("Mn") == pytest.approx(0.01)
        assert comp["Mn"].user_w == 0.0

    def test_major_element_cannot_be_set(self):
        comp = _fe_c_mn()
        assert not comp.set_x("Fe", 0.5)
        comp.update_fractions()
        assert comp.get_x("Fe") == pytest.approx(1.0)


# ── Lock / unlock ────────────────────────────────────────────────────

class TestLockLifecycle:
    def test_lock_runs_full_update(self):
        comp = _fe_c_mn()
        comp.set_x("Mn", 0.02)
        assert comp.lock_composition()
        assert comp.is_composition_locked
        assert comp.get_x("Fe") == pytest.approx(0.98)
        assert comp.molar_mass_avg == pytest.approx(0.98 * M_FE + 0.02 * M_MN)

    def test_lock_disables_fixed_elements(self):
        comp = _steel()
        comp.lock_composition()
        assert not comp["Cr"].is_allowed_to_vary
        assert not comp["N"].is_allowed_to_vary
        assert comp["Mn"].is_allowed_to_vary
        assert comp["C"].is_allowed_to_vary

    def test_lock_flags_alloying_elements(self):
        comp = _steel()
        comp.lock_composition()
        assert all(comp[s].is_composition_locked for s in ["C", "N", "Mn", "Cr", "Ni"])
        assert not comp["Fe"].is_composition_locked

    def test_fixed_element_rejected_while_locked(self, caplog):
        comp = _steel()
        comp.set_x("Cr", 0.02)
        comp.lock_composition()
        with caplog.at_level(logging.ERROR):
            assert not comp.set_x("Cr", 0.05)
        assert comp["Cr"].user_x == 0.02
        assert "Cannot set locked X(Cr)" in caplog.text

    def test_mass_fraction_rejected_while_locked(self, caplog):
        comp = _steel()
        comp.lock_composition()
        with caplog.at_level(logging.ERROR):
            assert not comp.set_w("Mn", 0.02)
        assert comp["Mn"].user_w == 0.0

    def test_unlock_restores_setters(self):
        comp = _steel()
        comp.lock_composition()
        comp.unlock_composition()
        assert not comp.is_composition_locked
        assert comp.set_x("Cr", 0.02)
        assert comp.set_w("Mn", 0.02)
        assert all(not el.is_composition_locked for el in comp)

    def test_cache_seeded_only_while_locked(self):
        comp = _steel()
        assert not comp.cache.seeded
        comp.lock_composition()
        assert comp.cache.seeded
        comp.unlock_composition()
        assert not comp.cache.seeded

    def test_update_after_unlock_is_full_recompute(self):
        comp = _fe_c_mn()
        comp.set_x("Mn", 0.02)
        comp.lock_composition()
        comp.unlock_composition()
        comp.set_w("Mn", 0.02)
        assert comp.update_fractions()
        assert comp.get_w("Mn") == pytest.approx(0.02)
        assert _x_sum(comp) == pytest.approx(1.0)

    def test_locked_update_without_changes_is_noop(self):
        comp = _fe_c_mn()
        comp.set_x("C", 0.005)
        comp.lock_composition()
        assert comp.update_fractions() is False


class TestLockingInvariance:
    def test_fixed_site_fractions_unchanged(self):
        comp = _steel()
        comp.set_x("C", 0.004)
        comp.set_x("N", 0.001)
        comp.set_x("Mn", 0.015)
        comp.set_w("Cr", 0.02)
        comp.set_x("Ni", 0.01)
        comp.lock_composition()
        fixed_u = {s: comp.get_u(s) for s in ["N", "Cr", "Ni"]}

        for symbol, x in [("C", 0.008), ("Mn", 0.03), ("C", 0.002), ("Mn", 0.0)]:
            comp.set_x(symbol, x)
            comp.update_fractions()
            for s, u in fixed_u.items():
                assert comp.get_u(s) == u, s
            assert _x_sum(comp) == pytest.approx(1.0)

    def test_variable_element_updates_while_locked(self):
        comp = _steel()
        comp.set_x("Mn", 0.015)
        comp.lock_composition()
        comp.set_x("Mn", 0.025)
        comp.update_fractions()
        assert comp.get_x("Mn") == pytest.approx(0.025)


# ── Classification errors ────────────────────────────────────────────

class TestMissingMajor:
    def test_two_majors_do_not_crash(self, caplog):
        with caplog.at_level(logging.ERROR):
            comp = Composition([
                ElementDefinition("Fe", is_major=True),
                ElementDefinition("Ni", is_major=True),
                ElementDefinition("C", True, True),
            ])
            comp.set_x("C", 0.01)
            assert comp.update_fractions() is False
        assert comp.molar_mass_avg == 0.0
        assert comp.categories is None
        assert comp.major_element_symbol is None
        assert "More than one major element" in caplog.text

    def test_failed_classification_logged_once(self, caplog):
        with caplog.at_level(logging.ERROR):
            comp = Composition([
                ElementDefinition("Fe", is_major=True),
                ElementDefinition("Ni", is_major=True),
            ])
            comp.update_fractions()
            comp.lock_composition()
            assert comp.categories is None
            assert comp.major_element is None
        messages = [r.getMessage() for r in caplog.records]
        assert sum("More than one major element" in m for m in messages) == 1

    def test_no_major_cannot_lock(self, caplog):
        comp = Composition([ElementDefinition("Fe"), ElementDefinition("C", True, True)])
        with caplog.at_level(logging.ERROR):
            assert comp.lock_composition() is False
        assert not comp.is_composition_locked
        assert "Cannot lock composition" in caplog.text

    def test_unlock_without_major_is_harmless(self):
        comp = Composition([ElementDefinition("Fe"), ElementDefinition("C", True, True)])
        comp.unlock_composition()
        assert not comp.is_composition_locked


# ── Copy ─────────────────────────────────────────────────────────────

class TestCopy:
    def test_copy_has_independent_records(self):
        comp = _fe_c_mn()
        comp.set_x("Mn", 0.02)
        clone = comp.copy()
        assert clone["Mn"] is not comp["Mn"]
        clone.set_x("Mn", 0.05)
        assert comp["Mn"].user_x == 0.02

    def test_copy_rebuilds_categories(self):
        comp = _steel()
        clone = copy.copy(comp)
        assert clone.categories == comp.categories
        assert clone.major_element is clone["Fe"]

    def test_locked_copy_keeps_working(self):
        comp = _fe_c_mn()
        comp.set_x("C", 0.005)
        comp.set_x("Mn", 0.02)
        comp.lock_composition()
        clone = copy.deepcopy(comp)
        assert clone.is_composition_locked
        clone.set_x("Mn", 0.03)
        assert clone.update_fractions()
        assert clone.get_x("Fe") == pytest.approx(0.965)
        assert comp.get_x("Fe") == pytest.approx(0.975)


# ── Array view ───────────────────────────────────────────────────────

class TestFractionArrays:
    def test_aligned_with_symbols(self):
        comp = _fe_c_mn()
        comp.set_x("Mn", 0.02)
        comp.update_fractions()
        arrays = comp.fraction_arrays()
        assert set(arrays) == {"x", "w", "u", "molar_mass"}
        assert arrays["x"].shape == (3,)
        assert arrays["x"][2] == pytest.approx(0.02)
        assert arrays["molar_mass"][0] == pytest.approx(M_FE)


class TestFractionDeviation:
    def test_consistent_after_unlocked_update(self):
        comp = _fe_c_mn()
        comp.set_w("C", 0.002)
        comp.set_x("Mn", 0.015)
        comp.update_fractions()
        assert comp.fraction_deviation() < FRACTION_SUM_TOLERANCE

    def test_consistent_after_locked_update(self):
        comp = _fe_c_mn()
        comp.set_x("C", 0.005)
        comp.set_x("Mn", 0.02)
        comp.lock_composition()
        comp.set_x("Mn", 0.03)
        comp.update_fractions()
        comp.set_x("C", 0.01)
        comp.update_fractions()
        assert comp.fraction_deviation() < FRACTION_SUM_TOLERANCE

    def test_detects_stale_mass_fraction(self):
        comp = _fe_c_mn()
        comp.set_x("Mn", 0.02)
        comp.update_fractions()
        comp["Mn"].w += 0.01
        assert comp.fraction_deviation() == pytest.approx(0.01)

    def test_requires_update(self):
        with pytest.raises(ValueError, match="not been updated"):
            _fe_c_mn().fraction_deviation()


# ── End-to-end ───────────────────────────────────────────────────────

@pytest.mark.scenario
class TestFeCMnScenario:
    """Fe major, C interstitial+variable, Mn substitutional+variable."""

    @pytest.fixture
    def locked(self) -> Composition:
        comp = _fe_c_mn()
        comp.set_x("C", 0.005)
        comp.set_x("Mn", 0.02)
        comp.lock_composition()
        return comp

    def test_major_balance_after_lock(self, locked):
        assert locked.get_x("Fe") == pytest.approx(0.975)

    def test_site_fractions_after_lock(self, locked):
        x_c = locked.get_x("C")
        assert locked.get_u("C") == pytest.approx(0.005 / (1 - x_c))
        assert locked.get_u("Mn") == pytest.approx(0.02 / (1 - x_c))
        assert locked.get_u("Fe") == pytest.approx(0.975 / (1 - x_c))

    def test_substitutional_change_keeps_interstitial_site_fraction(self, locked):
        u_c = locked.get_u("C")
        x_fe = locked.get_x("Fe")

        assert locked.set_x("Mn", 0.03)
        assert locked.update_fractions()

        assert locked.get_u("C") == u_c
        assert locked.get_x("Fe") < x_fe
        assert locked.get_x("Fe") == pytest.approx(0.965)
        assert locked.get_u("Mn") == pytest.approx(0.03 / 0.995)
        assert sum(el.w for el in locked) == pytest.approx(1.0)
