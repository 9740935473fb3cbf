""" repeated timing of functions, with bootstrap errors """

import sys
import numpy as np
from splitwatch.stopwatch import Stopwatch
from splitwatch.units import TimeUnit, as_unit


class BenchmarkResult:
    """ timing samples (in 'unit') together with mean/std and their bootstrap errors """

    def __init__(self, samples, unit, mean, mean_err, std, std_err, label=None):
        self.samples = samples
        self.unit = unit
        self.mean = mean
        self.mean_err = mean_err
        self.std = std
        self.std_err = std_err
        self.label = label

    @property
    def repeats(self):
        return self.samples.shape[0]

    @property
    def minimum(self):
        return float(np.min(self.samples))

    @property
    def median(self):
        return float(np.median(self.samples))

    def __str__(self):
        from uncertainties import ufloat
        return f"{ufloat(self.mean, self.mean_err):u2S} {self.unit.symbol}"

    def __repr__(self):
        return f"BenchmarkResult(label={self.label!r}, mean={self}, repeats={self.repeats})"


def _bootstrap_errors(samples, bootstrap, seed):
    """ errors of mean and std from their spread over 'bootstrap' resampled runs """
    rng = np.random.RandomState(seed=seed)
    n = samples.shape[0]
    resampled = samples[rng.randint(0, n, size=(bootstrap, n))]
    return float(resampled.mean(axis=1).std()), float(resampled.std(axis=1).std())


def summarize(samples, unit=TimeUnit.MILLISECONDS, bootstrap=100, seed=0, label=None):
    """
    compute mean and standard deviation of timing samples (given in 'unit')
    with errors from 'bootstrap' resamples
    """
    unit = as_unit(unit)
    samples = np.array(samples, dtype=float, ndmin=1)
    assert samples.ndim == 1 and samples.shape[0] >= 1, "need at least one sample"
    assert bootstrap >= 1, "need at least one bootstrap sample"

    mean_err, std_err = _bootstrap_errors(samples, bootstrap, seed)
    return BenchmarkResult(samples, unit, float(samples.mean()), mean_err, float(samples.std()), std_err, label=label)


def benchmark(func, args=(), kwargs=None, repeats=100, warmup=1, unit=TimeUnit.MILLISECONDS, bootstrap=100, seed=0, clock=None, progress=False, plot=False, label=None, verbose=False):
    """
    time 'func(*args, **kwargs)' over 'repeats' calls using a single Stopwatch
      - the first 'warmup' calls are done but not recorded
      - each call is timed separately (restart + stop), results are in 'unit'
      - 'clock' is passed on to the Stopwatch
      - 'progress' shows a progress bar on stderr
      - 'plot' can be True (new figure) or an existing axes object
      - returns a BenchmarkResult
    """
    unit = as_unit(unit)
    assert repeats >= 1 and warmup >= 0
    assert bootstrap >= 1, "need at least one bootstrap sample"
    if kwargs is None:
        kwargs = {}
    if label is None:
        label = getattr(func, "__name__", None)

    for _ in range(warmup):
        func(*args, **kwargs)

    sw = Stopwatch(clock=clock)
    samples = np.zeros(repeats)
    pbar = None
    if progress:
        import progressbar as pb
        sys.stdout.flush()
        sys.stderr.flush()
        pbar = pb.ProgressBar(maxval=repeats, fd=sys.stderr).start()
    try:
        for k in range(repeats):
            sw.restart()
            func(*args, **kwargs)
            sw.stop()
            samples[k] = sw.elapsed(unit)
            if pbar is not None:
                pbar.update(k + 1)
    finally:
        if pbar is not None:
            pbar.finish()
            sys.stdout.flush()
            sys.stderr.flush()

    result = summarize(samples, unit=unit, bootstrap=bootstrap, seed=seed, label=label)

    if plot is True:
        plot_samples(result)
    elif plot:
        plot_samples(result, ax=plot)

    if verbose:
        from uncertainties import ufloat
        print("{}: {} (std = {:u2S} {}, min = {:.3f} {}, {} runs)".format(
            label, result, ufloat(result.std, result.std_err), unit.symbol,
            result.minimum, unit.symbol, repeats))
        if result.mean_err > 0.1 * abs(result.mean):
            print(f"WARNING: error of mean above 10%, consider more repeats. (label={label})")

    return result


def plot_samples(result, ax=None, bins=30):
    """ histogram of the timing samples, with the mean and its error band """

    import matplotlib.pyplot as plt
    if ax is None:
        fig, ax = plt.subplots()
    ax.hist(result.samples, bins=bins, density=True, alpha=0.7, label=result.label)
    ax.axvline(result.mean, color="k")
    ax.axvspan(result.mean - result.mean_err, result.mean + result.mean_err, color="k", alpha=0.2)
    ax.set_xlabel(f"time [{result.unit.symbol}]")
    if result.label is not None:
        ax.legend()
    ax.grid(True)
    return ax
