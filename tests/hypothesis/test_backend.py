"""
Tests for the CPU hypothesis backend dispatch and warning collection.
"""

import dataclasses
import warnings

import pytest

from pystatcore.core.exceptions import InvalidParametersError
from pystatcore.hypothesis import HypothesisDesign
from pystatcore.hypothesis._common import collect_runtime_warnings
from pystatcore.hypothesis.backends.cpu import KERNELS, CPUHypothesisBackend


SAMPLE = [2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]


class TestKernelDispatch:

    @pytest.mark.parametrize("design", [
        HypothesisDesign.for_t_test(SAMPLE),
        HypothesisDesign.for_t_test(SAMPLE, [1.0, 3.0, 5.0, 6.0]),
        HypothesisDesign.for_t_test(SAMPLE, SAMPLE[::-1], paired=True),
        HypothesisDesign.for_chisq_test([10, 20, 30]),
        HypothesisDesign.for_chisq_test([[10, 20], [30, 40]]),
    ])
    def test_every_design_has_a_kernel(self, design):
        assert design.test_type in KERNELS
        result = CPUHypothesisBackend().solve(design)
        assert result.backend_name == 'cpu_hypothesis'
        assert result.info['test_type'] == design.test_type
        assert design.test_type in result.timing

    def test_unknown_test_type(self):
        design = dataclasses.replace(
            HypothesisDesign.for_t_test(SAMPLE), test_type="z_one_sample"
        )
        with pytest.raises(InvalidParametersError, match="z_one_sample"):
            CPUHypothesisBackend().solve(design)


class TestCollectRuntimeWarnings:

    def test_runtime_warning_collected(self):
        collected = []
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            with collect_runtime_warnings(collected):
                warnings.warn("series did not converge", RuntimeWarning)
        assert collected == ["series did not converge"]

    def test_other_categories_reemitted(self):
        collected = []
        with pytest.warns(UserWarning, match="unrelated"):
            with collect_runtime_warnings(collected):
                warnings.warn("unrelated", UserWarning)
        assert collected == []

    def test_nothing_raised(self):
        collected = []
        with collect_runtime_warnings(collected):
            pass
        assert collected == []
