"""
Chi-square goodness-of-fit test.

Partitions the fitted distribution into equal-probability classes, counts
the observations in each class and compares the chi-square statistic with
a tabulated critical value.
"""

import math
import numpy as np
import pandas as pd
from typing import Optional, Sequence, Union
from dataclasses import dataclass, field

from .distributions import (
    Distribution, CONFIDENCE_LEVELS, prepare_sample, validate_confidence_index,
)
from .frequency_factor import cumulative_frequency_factor, magnitude
from .statistics import compute_statistics
from ..exceptions import EmptyInputError, InvalidConfidenceIndexError


# Critical chi-square values. Rows: df 1-20; columns: 85%, 90%, 95%, 97.5%, 99%
CHI2_TABLE = (
    (1.320, 2.706, 3.841, 5.020, 6.630),
    (2.775, 4.605, 5.991, 7.380, 9.210),
    (4.111, 6.251, 7.815, 9.350, 11.300),
    (5.390, 7.779, 9.488, 11.100, 13.300),
    (6.630, 9.236, 11.070, 12.800, 15.100),
    (7.840, 10.645, 12.592, 14.400, 16.800),
    (9.040, 12.017, 14.067, 16.000, 18.500),
    (10.202, 13.362, 15.507, 17.500, 20.100),
    (11.400, 14.684, 16.919, 19.000, 21.700),
    (12.500, 15.987, 18.307, 20.500, 23.200),
    (13.700, 17.275, 19.675, 21.900, 24.700),
    (14.800, 18.549, 21.026, 23.300, 26.200),
    (16.000, 19.812, 22.362, 24.700, 27.700),
    (17.100, 21.064, 23.685, 26.100, 29.100),
    (18.200, 22.307, 24.996, 27.500, 30.600),
    (19.400, 23.542, 26.296, 28.800, 32.000),
    (20.500, 24.769, 27.587, 30.200, 33.400),
    (21.600, 25.989, 28.869, 31.500, 34.800),
    (22.700, 27.204, 30.144, 32.900, 36.200),
    (23.800, 28.412, 31.410, 34.200, 37.600),
)

# Padding added outside the sample range for the open-ended classes
EDGE_PADDING = 2.0


@dataclass
class ChiSquareResult:
    """
    Chi-square test results.

    Class edges are in the analysis scale (log10 for the log-space
    distributions). Arrays are empty when the test could not be run.
    """
    distribution: Distribution
    confidence_level: str
    interval_count: int = 0
    low: np.ndarray = field(default_factory=lambda: np.array([]))
    high: np.ndarray = field(default_factory=lambda: np.array([]))
    observed: np.ndarray = field(default_factory=lambda: np.array([], dtype=int))
    expected: np.ndarray = field(default_factory=lambda: np.array([]))
    observed_statistic: float = 0.0
    critical_statistic: float = 0.0
    degrees_of_freedom: int = 0
    fitted: bool = False
    conclusion: str = ""

    def to_frame(self) -> pd.DataFrame:
        """One row per class."""
        with np.errstate(divide='ignore', invalid='ignore'):
            contribution = (self.observed - self.expected) ** 2 / self.expected
        return pd.DataFrame({
            'low': self.low,
            'high': self.high,
            'observed': self.observed,
            'expected': self.expected,
            'contribution': contribution,
        })

    def report(self) -> str:
        """Fixed-width text report of the test."""
        label = self.distribution.label
        lines = [
            "CHI-SQUARE TEST",
            f"Ho: The series is {label}.",
            f"H1: The series is not {label}.",
        ]
        if self.interval_count == 0:
            lines.append(self.conclusion)
            return "\n".join(lines) + "\n"

        lines.append("              Class             O.     E.   (O-E)^2/E")
        lines.append("-" * 56)
        k = self.interval_count
        for i, row in self.to_frame().iterrows():
            if i == 0:
                cls = f"           <  {row['high']:8.2f}"
            elif i == k - 1:
                cls = f"{row['low']:8.2f}    <         "
            else:
                cls = f"{row['low']:8.2f} - {row['high']:8.2f}"
            lines.append(
                f"{cls:>25} {row['observed']:7.1f} {row['expected']:7.1f} "
                f"{row['contribution']:10.3f}"
            )
        lines.append("-" * 56)
        lines.append(f"Observed Chi2 value = {self.observed_statistic:.3f}")
        lines.append(
            f"Critical Chi2 value ({self.confidence_level}) = "
            f"{self.critical_statistic:.3f}"
        )
        lines.append(f"* Goodness of fit: {self.fitted}")
        return "\n".join(lines) + "\n"


def sturges_interval_count(n: int) -> int:
    """Number of classes by Sturges' rule: 1 + round(3.3 * log10(n)), half-up."""
    if n < 1:
        raise EmptyInputError("Sturges' rule needs at least one observation")
    return 1 + int(math.floor(3.3 * math.log10(n) + 0.5))


def degrees_of_freedom(distribution: Distribution, interval_count: int) -> int:
    """k - 1 - number of fitted parameters, at least 1."""
    return max(1, interval_count - 1 - distribution.n_params)


def critical_value(df: int, confidence_index: int) -> float:
    """Tabulated critical value, +inf beyond the table."""
    if 1 <= df <= len(CHI2_TABLE):
        return CHI2_TABLE[df - 1][confidence_index]
    return math.inf


class ChiSquareTest:
    """
    Chi-square goodness-of-fit test with equal-probability classes.

    Examples
    --------
    >>> test = ChiSquareTest()
    >>> result = test.run(Distribution.LOG_PEARSON_III, annual_maxima, 2)
    >>> print(result.report())
    """

    def run(
        self,
        distribution: Union[Distribution, int, str],
        sample: Sequence[float],
        confidence_index: int = 2,
        interval_count: Optional[int] = None
    ) -> ChiSquareResult:
        """
        Run the chi-square test for one distribution.

        Parameters
        ----------
        distribution : Distribution, int or str
        sample : array-like
            Annual maximum series (original units). Not modified.
        confidence_index : int
            Index into (85%, 90%, 95%, 97.5%, 99%)
        interval_count : int, optional
            Number of classes. Defaults to Sturges' rule.

        Returns
        -------
        ChiSquareResult
            An invalid confidence index does not raise: the result has
            ``fitted=False`` and the reason in ``conclusion``.

        Notes
        -----
        Observations are counted with strict inequalities
        (low < x < high), so a value exactly on a class edge is counted in
        neither neighbouring class.
        """
        distribution = Distribution.parse(distribution)

        try:
            validate_confidence_index(confidence_index)
        except InvalidConfidenceIndexError as exc:
            return ChiSquareResult(
                distribution=distribution,
                confidence_level=str(confidence_index),
                fitted=False,
                conclusion=str(exc),
            )

        n = len(sample)
        if n == 0:
            raise EmptyInputError("Input sample cannot be empty")

        if interval_count is None:
            interval_count = sturges_interval_count(n)
        elif interval_count < 1:
            raise ValueError(f"interval_count must be at least 1, got {interval_count}")

        x = prepare_sample(distribution, np.sort(np.asarray(sample, dtype=float)))
        moments = compute_statistics(x)

        low, high = self._class_edges(distribution, moments, interval_count)
        observed = np.array(
            [np.count_nonzero((x > lo) & (x < hi)) for lo, hi in zip(low, high)],
            dtype=int,
        )
        expected = np.full(interval_count, n / interval_count)
        statistic = float(np.sum((observed - expected) ** 2 / expected))

        df = degrees_of_freedom(distribution, interval_count)
        critical = critical_value(df, confidence_index)
        fitted = statistic < critical
        level = CONFIDENCE_LEVELS[confidence_index]

        return ChiSquareResult(
            distribution=distribution,
            confidence_level=level,
            interval_count=interval_count,
            low=low,
            high=high,
            observed=observed,
            expected=expected,
            observed_statistic=statistic,
            critical_statistic=critical,
            degrees_of_freedom=df,
            fitted=fitted,
            conclusion=(
                f"Critical Chi-square value at {level} confidence = {critical:.3f}\n"
                f"Fitted? {fitted}"
            ),
        )

    @staticmethod
    def _class_edges(distribution, moments, interval_count):
        """Edges at cumulative probabilities i/k, padded at both ends."""
        high = np.empty(interval_count)
        for i in range(1, interval_count):
            cumulative = i / interval_count
            kt = cumulative_frequency_factor(distribution, cumulative, moments.skew)
            high[i - 1] = magnitude(distribution, moments, kt)
        high[-1] = moments.max + EDGE_PADDING

        low = np.empty(interval_count)
        low[0] = moments.min - EDGE_PADDING
        low[1:] = high[:-1]
        return low, high

