"""
Example 1: Basic Mathematical Optimization
-------------------------------------------

This example demonstrates how to use the TPE optimizer to find the maximum
value of a simple 1D function, first through the Study loop and then by
driving the optimizer by hand.

The objective is to maximize: f(x) = -(x - 3)^2 + 10
The known optimal solution is at x=3, with a value of 10.
"""

from hpo_tpe import (
    Component, Epanechnikov, Gaussian, RandomSource, Study, TPEOptimizer, Uniform, configure_logging,
)


def objective(x):
    """
    The objective function to be maximized.

    Args:
        x (float): The parameter value suggested by the optimizer.

    Returns:
        float: The value of the function at x.
    """
    return -(x - 3) ** 2 + 10


def main():
    """
    Run the mathematical optimization study.
    """
    print("Running Example: Basic Mathematical Optimization")
    print("Goal: Maximize f(x) = -(x - 3)^2 + 10")
    print("--------------------------------------------------")
    configure_logging()

    # 1. Create the optimizer with a flat prior over the range
    optimizer = TPEOptimizer(
        -10.0, 10.0,
        prior=Component.with_bounds(Uniform, -10.0, 10.0),
        kernel=Gaussian,
    ).set_cutoff(0.2).set_n_candidates(30)

    # 2. Create and run the study
    study = Study(optimizer, direction='maximize')
    best_trial = study.optimize(objective, n_trials=50, rng=42)

    # 3. Print and analyze the results
    print(f"\nBest parameter: {best_trial.parameter:.4f} (value {best_trial.value:.4f})")
    print(study.trials_dataframe().sort_values('value', ascending=False).head())

    # 4. The same, driving the optimizer by hand; the metric is minimized
    manual = TPEOptimizer(-10.0, 10.0, Component(Gaussian, 0.0, 5.0), Epanechnikov)
    rng = RandomSource.from_seed(7)
    for _ in range(50):
        x = manual.new_trial(rng)
        manual.feed_back(x, -objective(x))
    print(f"Manual loop best: {manual.best_trial()}")


if __name__ == "__main__":
    main()
