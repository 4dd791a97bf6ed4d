import collections
import math

import pytest
from hpo_tpe.kde import (
    AdaptiveComponents,
    Component,
    Full,
    KernelDensityEstimator,
    Left,
    LeftMiddle,
    Middle,
    MiddleRight,
    Right,
    adaptive_bandwidth,
)
from hpo_tpe.kernels import Binomial, Gaussian, Multivariate, Uniform
from hpo_tpe.rng import RandomSource


@pytest.fixture
def rng():
    return RandomSource.from_seed(7)


# --- Component ---

def test_component_delegates_to_kernel():
    component = Component(Gaussian, 0.0, 1.0)
    assert component.density(1.0) == pytest.approx(Gaussian(0.0, 1.0).density(1.0))
    assert isinstance(component.instance, Gaussian)


def test_component_rejects_non_positive_bandwidth():
    with pytest.raises(ValueError):
        Component(Gaussian, 0.0, 0.0)


def test_component_with_bounds():
    """
    Tests that the bounded component matches a uniform kernel over the range.
    """
    component = Component.with_bounds(Uniform, 0.0, 10.0)
    assert component.location == pytest.approx(5.0)
    assert component.density(0.5) == pytest.approx(0.1)
    assert component.density(10.5) == 0.0
    with pytest.raises(ValueError):
        Component.with_bounds(Uniform, 1.0, 1.0)


def test_component_with_bounds_rounds_discrete_midpoint(rng):
    component = Component.with_bounds(Binomial, 0, 11)
    assert component.location == 6
    assert isinstance(component.instance, Binomial)
    assert isinstance(component.sample(rng), int)


# --- Bandwidth rule ---

def test_adaptive_bandwidth_rules():
    """
    Tests the larger-neighbour-distance rule, with range bounds for missing neighbours.
    """
    assert adaptive_bandwidth(Full(1, 2, 4), 0, 10) == (2, 2)
    assert adaptive_bandwidth(Full(1, 3, 4), 0, 10) == (3, 2)
    assert adaptive_bandwidth(LeftMiddle(1, 2), 0, 10) == (2, 8)
    assert adaptive_bandwidth(MiddleRight(2, 3), 0, 10) == (2, 2)
    assert adaptive_bandwidth(Middle(3), 0, 10) == (3, 7)
    assert adaptive_bandwidth(Left(3), 0, 10) is None
    assert adaptive_bandwidth(Right(3), 0, 10) is None


def test_from_window_applies_multiplier():
    component = Component.from_window(Gaussian, Middle(3.0), 0.0, 10.0, multiplier=0.5)
    assert component.location == 3.0
    assert component.bandwidth == pytest.approx(3.5)
    assert Component.from_window(Gaussian, Left(3.0), 0.0, 10.0) is None


def test_degenerate_bandwidth_fails_fast():
    with pytest.raises(ValueError):
        Component.from_window(Gaussian, Middle(1.0), 1.0, 1.0)


# --- AdaptiveComponents ---

def test_adaptive_components_one_per_value():
    components = list(AdaptiveComponents.from_values(Gaussian, [0.5, 0.2, 0.9], 0.0, 1.0))

    assert [c.location for c in components] == [0.2, 0.5, 0.9]
    assert [c.bandwidth for c in components] == pytest.approx([0.3, 0.4, 0.4])


def test_adaptive_components_singleton():
    components = list(AdaptiveComponents.from_values(Gaussian, [0.25], 0.0, 1.0))
    assert len(components) == 1
    assert components[0].bandwidth == pytest.approx(0.75)


def test_adaptive_components_multiplier():
    components = list(AdaptiveComponents.from_values(Gaussian, [0.25], 0.0, 1.0, multiplier=2.0))
    assert components[0].bandwidth == pytest.approx(1.5)


@pytest.mark.parametrize("multiplier", [0.0, -1.0])
def test_adaptive_components_rejects_bad_multiplier(multiplier):
    with pytest.raises(ValueError):
        AdaptiveComponents.from_values(Gaussian, [0.25], 0.0, 1.0, multiplier=multiplier)


def test_adaptive_components_are_reiterable():
    components = AdaptiveComponents.from_values(Gaussian, [1.0, 2.0], 0.0, 3.0)
    assert list(components) == list(components)


# --- KernelDensityEstimator ---

def test_empty_kde_density_is_zero():
    assert KernelDensityEstimator([]).density(0.0) == 0.0


def test_empty_kde_sample_is_none(rng):
    """
    Tests that sampling without components signals "no sample" instead of failing.
    """
    kde = KernelDensityEstimator([])
    assert kde.sample(rng) is None
    assert kde.select(rng) is None


def test_kde_density_is_mean_of_components():
    kde = KernelDensityEstimator([Component(Gaussian, 0.0, 1.0), Component(Gaussian, 2.0, 1.0)])
    expected = (Gaussian(0.0, 1.0).density(1.0) + Gaussian(2.0, 1.0).density(1.0)) / 2.0
    assert kde.density(1.0) == pytest.approx(expected)
    assert kde.density(1.0) == pytest.approx(0.241_970_724_519_143_37)


def test_sample_single_component(rng):
    kde = KernelDensityEstimator([Component.with_bounds(Uniform, -1.0, 1.0)])

    sample = kde.sample(rng)
    assert -1.0 - 1e-9 <= sample <= 1.0 + 1e-9

    # The estimator can be sampled again.
    assert kde.sample(rng) is not None


def test_kde_rejects_one_shot_iterator():
    with pytest.raises(TypeError):
        KernelDensityEstimator(iter([Component(Gaussian, 0.0, 1.0)]))


def test_kde_over_lazy_components(rng):
    kde = KernelDensityEstimator(AdaptiveComponents.from_values(Gaussian, [1.0, 2.0, 3.0], 0.0, 4.0))
    assert kde.density(2.0) > kde.density(10.0)
    assert isinstance(kde.sample(rng), float)


def test_reservoir_selection_is_uniform(rng):
    """
    Tests that each of k components is selected with probability 1/k.
    """
    components = [Component(Gaussian, float(location), 1.0) for location in range(4)]
    kde = KernelDensityEstimator(components)
    n_draws = 40000

    counts = collections.Counter(kde.select(rng).location for _ in range(n_draws))

    assert set(counts) == {0.0, 1.0, 2.0, 3.0}
    for count in counts.values():
        assert count / n_draws == pytest.approx(0.25, abs=0.02)


def test_kde_sample_follows_components(rng):
    kde = KernelDensityEstimator([Component(Uniform, 0.0, 0.1), Component(Uniform, 100.0, 0.1)])
    samples = [kde.sample(rng) for _ in range(2000)]
    near_zero = sum(1 for s in samples if abs(s) < 1.0)
    near_hundred = sum(1 for s in samples if abs(s - 100.0) < 1.0)
    assert near_zero + near_hundred == len(samples)
    assert math.isclose(near_zero / len(samples), 0.5, abs_tol=0.05)


def test_kde_over_multivariate_components(rng):
    """
    Tests that tuple-valued components plug into the estimator unchanged.
    """
    kernel = Multivariate.of(Gaussian, Gaussian)
    kde = KernelDensityEstimator([Component(kernel, (0.0, 0.0), (1.0, 1.0)), Component(kernel, (4.0, 4.0), (1.0, 1.0))])
    standard = Gaussian(0.0, 1.0)
    expected = (standard.density(0.0) ** 2 + standard.density(4.0) ** 2) / 2.0
    assert kde.density((0.0, 0.0)) == pytest.approx(expected)
    sample = kde.sample(rng)
    assert isinstance(sample, tuple)
    assert len(sample) == 2
