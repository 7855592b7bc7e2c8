"""Implements Benchmark class to measure fitting and evaluation time of RBF interpolators"""

from time import perf_counter

import numpy as np
import pandas as pd
import seaborn as sns
import matplotlib.pyplot as plt
from tqdm.auto import tqdm

from rbfinterp import RBFInterpolator, Kernel
from rbfinterp.utils import to_list


sns.set_theme(style="darkgrid")
def make_benchmark_data(n_points, ndim=2, seed=None):
    """Generate random training points in a unit hypercube and a smooth function sampled at them."""
    rng = np.random.default_rng(seed)
    points = rng.uniform(size=(n_points, ndim))
    values = np.sin(2 * np.pi * points[:, 0]) + points[:, 1:].sum(axis=1)
    return points, values


class Benchmark:
    """A class aimed to compare the execution time of `RBFInterpolator` fitting and evaluation for various kernels and
    training set sizes.

    `Benchmark` runs experiments with all combinations of given kernels and numbers of training points and measures
    the time of interpolator construction and evaluation at `n_queries` random points. To get a more accurate time
    estimation, each experiment is repeated `n_iters` times.

    Simple usage of `Benchmark` contains three steps:
    1. Define Benchmark instance.
    2. Call `benchmark.run()` to run the benchmark.
    3. Call `benchmark.plot()` to plot the results.

    Parameters
    ----------
    kernels : str, Kernel or array of them
        Kernel(s) to run the benchmark for.
    n_points : int or array of int
        Number(s) of training points to run the benchmark for.
    ndim : int, optional, defaults to 2
        Dimensionality of generated points.
    n_queries : int, optional, defaults to 1000
        The number of points to evaluate the fitted interpolator at.
    smoothing : float, optional, defaults to 0
        Smoothing parameter of benchmarked interpolators.
    seed : int, optional, defaults to 0
        Seed of the data generator.

    Attributes
    ----------
    kernels : list of Kernel
        Benchmarked kernels.
    n_points : list of int
        Benchmarked training set sizes.
    results : None or pd.DataFrame
        A DataFrame with benchmark results.
    """
    def __init__(self, kernels, n_points, ndim=2, n_queries=1000, smoothing=0, seed=0):
        self.kernels = [Kernel.from_name(kernel) for kernel in to_list(kernels)]
        self.n_points = [int(n) for n in to_list(n_points)]
        self.ndim = ndim
        self.n_queries = n_queries
        self.smoothing = smoothing
        self.seed = seed
        self.results = None

        # Run each kernel once to precompile all numba callables
        self._warmup()

    def _warmup(self):
        """Fit and evaluate a tiny interpolator for each kernel."""
        points, values = make_benchmark_data(3, ndim=self.ndim, seed=self.seed)
        for kernel in self.kernels:
            RBFInterpolator(points, values, kernel=kernel, smoothing=1).evaluate_many(points)

    def run(self, n_iters=10, bar=True):
        """Measure the fitting and evaluation time for all combinations of kernels and training set sizes.

        Parameters
        ----------
        n_iters : int, optional, defaults to 10
            The number of repetitions of each experiment to get a more accurate elapsed time estimation.
        bar : bool, optional, defaults to True
            Whether to use progress bar or not.

        Returns
        -------
        self : Benchmark
            Benchmark with computed results.
        """
        grid = [(kernel, n) for kernel in self.kernels for n in self.n_points]
        rng = np.random.default_rng(self.seed)
        queries = rng.uniform(size=(self.n_queries, self.ndim))

        records = []
        for kernel, n in tqdm(grid, desc="Benchmark", disable=not bar):
            points, values = make_benchmark_data(n, ndim=self.ndim, seed=self.seed)
            fit_time, evaluate_time = self._run_single_experiment(kernel, points, values, queries, n_iters)
            records.append({"kernel": kernel.kernel_name, "n_points": n, "Fit": fit_time, "Evaluate": evaluate_time})

        self.results = pd.DataFrame(records).set_index(["kernel", "n_points"])
        return self

    def _run_single_experiment(self, kernel, points, values, queries, n_iters):
        """Benchmark fitting and evaluation of an interpolator with a particular `kernel` and training set."""
        fit_time = []
        evaluate_time = []
        for _ in range(n_iters):
            start = perf_counter()
            interpolator = RBFInterpolator(points, values, kernel=kernel, smoothing=self.smoothing)
            fit_time.append(perf_counter() - start)

            start = perf_counter()
            interpolator.evaluate_many(queries)
            evaluate_time.append(perf_counter() - start)
        return fit_time, evaluate_time

    def plot(self, figsize=(12, 6)):
        """Plot fitting and evaluation time versus the number of training points for each kernel.

        The graph represents the average value and the standard deviation of the elapsed time over `n_iters`
        iterations.

        Parameters
        ----------
        figsize : tuple, optional, defaults to (12, 6)
            Output plot size.
        """
        if self.results is None:
            raise ValueError("Benchmark must be run before plotting its results")
        for col_name, col_series in self.results.items():
            sub_df = col_series.explode().astype(float).reset_index()

            plt.figure(figsize=figsize)
            sns.lineplot(data=sub_df, x="n_points", y=col_name, hue="kernel", errorbar='sd', marker='o')

            plt.title(f"{col_name} time for {self.n_queries} queries" if col_name == "Evaluate" else
                      f"{col_name} time")
            plt.xticks(ticks=self.n_points, labels=self.n_points)
            plt.ylim(0)
            plt.xlabel("Number of training points")
            plt.ylabel("Time (s)")
        plt.show()
