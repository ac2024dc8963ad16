import math

import pytest

from aiscan.core.normalizer import SCORE_CEILING, clamp_score, normalize, normalize_extended
from aiscan.errors import InvalidInputError


def _formula(length, score, alpha, scale):
    return 1 - math.exp(-(abs(alpha) ** scale * score) / length)


class TestNormalize:
    def test_furthermore_scenario(self):
        alpha = math.log1p(2) * 2
        value = normalize(42, 4, alpha, 1.75)
        assert value == pytest.approx(_formula(42, 4, alpha, 1.75))
        assert value == pytest.approx(0.3145, abs=1e-3)

    def test_zero_alpha_is_zero(self):
        assert normalize(100, 10, 0.0, 1.75) == 0.0

    def test_zero_pattern_score_is_zero(self):
        assert normalize(100, 0, 3.0, 2.25) == 0.0

    @pytest.mark.parametrize("scale", [0.5, 1.75, 2.25, 4.0])
    def test_monotonic_in_pattern_score(self, scale):
        values = [normalize(500, s, 2.5, scale) for s in range(0, 60, 3)]
        assert values == sorted(values)

    def test_monotonic_in_alpha(self):
        values = [normalize(500, 6, a / 2, 1.75) for a in range(0, 20)]
        assert values == sorted(values)

    def test_alpha_sign_ignored(self):
        assert normalize(200, 5, -2.0, 1.75) == normalize(200, 5, 2.0, 1.75)

    def test_larger_scale_is_more_sensitive(self):
        assert normalize(1000, 8, 3.0, 2.25) > normalize(1000, 8, 3.0, 1.75)

    def test_stays_below_one_for_moderate_inputs(self):
        assert 0.0 < normalize(1000, 20, 4.0, 1.75) < 1.0

    @pytest.mark.parametrize("length", [0, -1])
    def test_rejects_non_positive_length(self, length):
        with pytest.raises(InvalidInputError):
            normalize(length, 4, 2.0, 1.75)

    @pytest.mark.parametrize("scale", [0, -1.5])
    def test_rejects_non_positive_scale(self, scale):
        with pytest.raises(InvalidInputError):
            normalize(42, 4, 2.0, scale)

    def test_negative_score_goes_below_zero(self):
        assert normalize(10, -5, 3.0, 2.0) < 0.0

    def test_exponent_overflow(self):
        assert normalize(1, -1000, 10.0, 2.0) == -math.inf

    def test_saturates_to_one(self):
        assert normalize(1, 1000, 10.0, 2.0) == 1.0


class TestNormalizeExtended:
    def test_off_matches_baseline(self):
        assert normalize_extended(300, 6, 2.0, 1.75, 0.9, mode="off") == normalize(300, 6, 2.0, 1.75)

    def test_additive(self):
        assert normalize_extended(300, 6, 2.0, 1.75, 0.9, mode="additive") == pytest.approx(
            normalize(300, 6.9, 2.0, 1.75)
        )

    def test_multiplicative(self):
        assert normalize_extended(300, 6, 2.0, 1.75, 0.5, mode="multiplicative") == pytest.approx(
            normalize(300, 9.0, 2.0, 1.75)
        )

    def test_linguistic_signal_raises_score(self):
        base = normalize(300, 6, 2.0, 1.75)
        assert normalize_extended(300, 6, 2.0, 1.75, 1.2, mode="additive") > base

    def test_unknown_mode(self):
        with pytest.raises(InvalidInputError):
            normalize_extended(300, 6, 2.0, 1.75, 0.5, mode="geometric")


class TestClamp:
    def test_in_range_untouched(self):
        assert clamp_score(0.42) == (0.42, False)

    def test_zero_untouched(self):
        assert clamp_score(0.0) == (0.0, False)

    def test_negative_clamped_to_zero(self):
        assert clamp_score(-3.7) == (0.0, True)

    def test_negative_infinity(self):
        assert clamp_score(-math.inf) == (0.0, True)

    def test_nan(self):
        assert clamp_score(math.nan) == (0.0, True)

    def test_one_clamped_below_one(self):
        score, clamped = clamp_score(1.0)
        assert clamped
        assert score == SCORE_CEILING
        assert score < 1.0
