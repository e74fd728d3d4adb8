"""
CPU reference backend for hypothesis tests.

Each design.test_type maps to one kernel returning (params, warnings).
"""

from __future__ import annotations

from typing import Callable

from pystatcore.core.exceptions import InvalidParametersError
from pystatcore.core.result import Result
from pystatcore.core.compute.timing import Timer
from pystatcore.hypothesis._common import HypothesisParams
from pystatcore.hypothesis.design import HypothesisDesign
from pystatcore.hypothesis.backends._t_test import t_one_sample, t_paired, t_two_sample
from pystatcore.hypothesis.backends._chisq_test import chisq_gof, chisq_independence


Kernel = Callable[[HypothesisDesign], tuple[HypothesisParams, list[str]]]

KERNELS: dict[str, Kernel] = {
    "t_one_sample": t_one_sample,
    "t_two_sample": t_two_sample,
    "t_paired": t_paired,
    "chisq_gof": chisq_gof,
    "chisq_independence": chisq_independence,
}


class CPUHypothesisBackend:
    """Runs the t and chi-squared kernels on the CPU."""

    @property
    def name(self) -> str:
        return 'cpu_hypothesis'

    def solve(self, design: HypothesisDesign) -> Result[HypothesisParams]:
        """
        Run the kernel registered for design.test_type.

        Raises:
            InvalidParametersError: If no kernel handles the test type
        """
        kernel = KERNELS.get(design.test_type)
        if kernel is None:
            raise InvalidParametersError(
                f"No hypothesis kernel for test_type {design.test_type!r}; "
                f"known: {sorted(KERNELS)}"
            )

        timer = Timer()
        timer.start()
        with timer.section(design.test_type):
            params, kernel_warnings = kernel(design)
        timer.stop()

        return Result(
            params=params,
            info={'test_type': design.test_type},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(kernel_warnings),
        )
