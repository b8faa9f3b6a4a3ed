import math

import numpy as np
import pytest
from scipy.stats import norm

from samplealign.error import AlignError, ErrorKind
from samplealign.math_utils.transforms import log10_weighted_sum, quantile_normalize


def test_quantile_normalize_small_sample_uses_blom_offset() -> None:
    values = [3.2, -1.0, 7.5]
    expected_q = [(2 - 0.375) / 3.25, (1 - 0.375) / 3.25, (3 - 0.375) / 3.25]
    result = quantile_normalize(values)
    assert result == pytest.approx(norm.ppf(expected_q))
    assert result[1] < result[0] < result[2]


def test_quantile_normalize_large_sample_offset() -> None:
    values = np.arange(11, dtype=float)[::-1]
    result = quantile_normalize(values)
    expected = norm.ppf((np.arange(1, 12) - 0.5) / 11)[::-1]
    assert result == pytest.approx(expected)
    assert result.sum() == pytest.approx(0.0, abs=1e-12)


def test_quantile_normalize_is_rank_equivariant() -> None:
    rng = np.random.default_rng(7)
    values = rng.normal(size=25)
    permutation = rng.permutation(25)
    assert quantile_normalize(values[permutation]) == pytest.approx(
        quantile_normalize(values)[permutation]
    )


def test_quantile_normalize_ties_follow_input_order() -> None:
    result = quantile_normalize([1.0, 1.0, 0.0])
    assert result[2] < result[0] < result[1]


def test_quantile_normalize_rejects_non_finite() -> None:
    with pytest.raises(AlignError) as info:
        quantile_normalize([1.0, math.nan])
    assert info.value.kind == ErrorKind.VALIDATION
    with pytest.raises(AlignError):
        quantile_normalize([1.0, math.inf])


def test_quantile_normalize_empty() -> None:
    assert quantile_normalize([]).size == 0


def test_log10_weighted_sum_uniform_identical_values() -> None:
    assert log10_weighted_sum([2.0, 2.0, 2.0]) == pytest.approx(2.0)


def test_log10_weighted_sum_matches_direct_formula() -> None:
    values = [0.5, 1.5, -2.0]
    weights = [0.2, 0.3, 0.5]
    direct = math.log10(sum(w * 10**v for w, v in zip(weights, values)))
    assert log10_weighted_sum(values, weights) == pytest.approx(direct)
    uniform = math.log10(sum(10**v for v in values) / 3)
    assert log10_weighted_sum(values) == pytest.approx(uniform)


def test_log10_weighted_sum_explicit_weights_not_renormalized() -> None:
    assert log10_weighted_sum([1.0, 1.0], [1.0, 1.0]) == pytest.approx(1.0 + math.log10(2.0))


def test_log10_weighted_sum_large_magnitudes() -> None:
    assert log10_weighted_sum([400.0, 400.0]) == pytest.approx(400.0)
    assert log10_weighted_sum([-400.0, -400.0]) == pytest.approx(-400.0)
    assert log10_weighted_sum([1000.0, 0.0], [0.5, 0.5]) == pytest.approx(1000.0 + math.log10(0.5))


def test_log10_weighted_sum_bad_input() -> None:
    with pytest.raises(AlignError):
        log10_weighted_sum([])
    with pytest.raises(AlignError):
        log10_weighted_sum([1.0, 2.0], [1.0])
    assert log10_weighted_sum([-math.inf, -math.inf]) == -math.inf
