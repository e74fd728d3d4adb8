"""
CPU reference backend for descriptive statistics.
"""

from __future__ import annotations

import math
import numpy as np

from pystatcore.core.result import Result
from pystatcore.core.compute.timing import Timer
from pystatcore.descriptive.design import DescriptiveDesign
from pystatcore.descriptive.solution import DescriptiveParams
from pystatcore.descriptive._stats import median_of_sorted, mode_values, sum_of_squares


class CPUDescriptiveBackend:
    """CPU reference backend for descriptive statistics."""

    @property
    def name(self) -> str:
        return 'cpu_descriptive'

    def solve(self, design: DescriptiveDesign) -> Result[DescriptiveParams]:
        """Compute the full set of descriptive statistics in one pass."""
        timer = Timer()
        timer.start()

        x = design.data
        xs = design.sorted
        n = design.n

        with timer.section('moments'):
            total = float(np.sum(x))
            mean = total / n
            variance = sum_of_squares(x) / n

        with timer.section('order_statistics'):
            median = median_of_sorted(xs)
            minimum = float(xs[0])
            maximum = float(xs[-1])

        with timer.section('mode'):
            mode = tuple(mode_values(x))

        timer.stop()

        params = DescriptiveParams(
            count=n,
            total=total,
            mean=mean,
            median=median,
            mode=mode,
            variance=variance,
            sd=math.sqrt(variance),
            minimum=minimum,
            maximum=maximum,
            range=maximum - minimum,
        )

        return Result(
            params=params,
            info={'n': n},
            timing=timer.result(),
            backend_name=self.name,
            warnings=(),
        )
