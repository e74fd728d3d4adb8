"""
Numeric configuration for the special-function and linear-algebra kernels.

Single source of truth for iteration caps, stopping tolerances and the
thresholds at which the hypothesis engine switches approximations.
Import from here, never hard-code the numbers at the call site.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class IterationControl:
    """Stopping rule for a bounded series or continued-fraction evaluation."""
    tolerance: float
    max_iterations: int
    tiny: float
    name: str
    description: str


# Series / continued-fraction evaluation for incomplete gamma and beta.
# 1e-10 relative change is well inside what the p-value consumers need.
# Near x ~ a the gamma series needs roughly sqrt(46 * a) terms, so 200
# terms covers chi-squared df up to about 1700; beyond that the cap is hit
# and reported (a RuntimeWarning, collected into Result.warnings by the
# hypothesis backends).
SPECIAL_FUNCTIONS = IterationControl(
    tolerance=1e-10,
    max_iterations=200,
    tiny=1e-30,
    name='special_functions',
    description='Incomplete gamma/beta series and Lentz continued fractions',
)

# Gaussian elimination refuses a pivot at or below this magnitude
PIVOT_TOLERANCE = 1e-10

# Above this many degrees of freedom the t-distribution is replaced by
# the standard normal for p-values and critical values
NORMAL_APPROXIMATION_DF = 100.0

# Acklam inverse-normal region boundary (low tail is p < ACKLAM_P_LOW)
ACKLAM_P_LOW = 0.02425

# Chi-squared expected counts below this trigger an approximation warning
SMALL_EXPECTED_COUNT = 5.0
