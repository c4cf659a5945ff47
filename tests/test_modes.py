"""Unit tests for the lighting mode catalog."""

import pytest

from rkconfigurator.models import KeyboardFamily, Mode
from rkconfigurator.modes import RgbMode, SingleColorMode, is_custom_mode, list_modes


class TestListModes:
    """Test catalog contents per family."""

    @pytest.mark.unit
    def test_rgb_catalog_size(self):
        """RGB keyboards offer 21 modes."""
        assert len(list_modes(KeyboardFamily.RGB)) == 21

    @pytest.mark.unit
    def test_single_color_catalog_size(self):
        """Single-color keyboards offer 20 modes."""
        assert len(list_modes(KeyboardFamily.SINGLE_COLOR)) == 20

    @pytest.mark.unit
    def test_rgb_custom_listed_first(self):
        """Custom comes first, then effects sorted by name."""
        modes = list_modes(KeyboardFamily.RGB)
        assert modes[0] == Mode(name="Custom", mode_bit=0)

        names = [mode.name for mode in modes[1:]]
        assert names == sorted(names)

    @pytest.mark.unit
    def test_single_color_order(self):
        """Single-color modes are listed in code order."""
        modes = list_modes(KeyboardFamily.SINGLE_COLOR)
        assert [mode.mode_bit for mode in modes] == list(range(1, 21))
        assert modes[1] == Mode(name="Custom", mode_bit=2)

    @pytest.mark.unit
    def test_families_use_different_codes(self):
        """The same display name maps to different codes per family."""
        rgb = {mode.name: mode.mode_bit for mode in list_modes(KeyboardFamily.RGB)}
        single = {mode.name: mode.mode_bit for mode in list_modes(KeyboardFamily.SINGLE_COLOR)}

        assert rgb["Steady"] == 16
        assert single["Steady"] == 1
        assert rgb["Custom"] != single["Custom"]

    @pytest.mark.unit
    def test_codes_unique_per_family(self):
        """No two modes in a family share a code."""
        for family in KeyboardFamily:
            codes = [mode.mode_bit for mode in list_modes(family)]
            assert len(codes) == len(set(codes))

    @pytest.mark.unit
    def test_catalog_covers_enum(self):
        """Every enum member is listed exactly once."""
        rgb_codes = {mode.mode_bit for mode in list_modes(KeyboardFamily.RGB)}
        single_codes = {mode.mode_bit for mode in list_modes(KeyboardFamily.SINGLE_COLOR)}

        assert rgb_codes == {int(mode) for mode in RgbMode}
        assert single_codes == {int(mode) for mode in SingleColorMode}

    @pytest.mark.unit
    def test_accepts_family_string(self):
        """Family can be passed as its string value."""
        assert list_modes("rgb") == list_modes(KeyboardFamily.RGB)

    @pytest.mark.unit
    def test_returns_fresh_list(self):
        """Callers may mutate the returned list."""
        modes = list_modes(KeyboardFamily.RGB)
        modes.clear()
        assert len(list_modes(KeyboardFamily.RGB)) == 21


class TestIsCustomMode:
    """Test the custom mode predicate."""

    @pytest.mark.unit
    def test_rgb_custom_code(self):
        """Code 0 is custom on RGB keyboards only."""
        assert is_custom_mode(0, KeyboardFamily.RGB) is True
        assert is_custom_mode(0, KeyboardFamily.SINGLE_COLOR) is False

    @pytest.mark.unit
    def test_single_color_custom_code(self):
        """Code 2 is custom on single-color keyboards only."""
        assert is_custom_mode(2, KeyboardFamily.SINGLE_COLOR) is True
        assert is_custom_mode(2, KeyboardFamily.RGB) is False

    @pytest.mark.unit
    @pytest.mark.parametrize("mode_bit", [1, 16, 17, 20, 255])
    def test_other_codes_not_custom(self, mode_bit):
        """Built-in effect codes are never custom on RGB keyboards."""
        assert is_custom_mode(mode_bit, KeyboardFamily.RGB) is False
