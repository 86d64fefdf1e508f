"""
Autosomal Recessive Inheritance Model
=====================================
Offspring outcome probabilities for two parents with independent carrier
probabilities, plus the fraction helpers used to display them.
"""

import logging
import math
from dataclasses import dataclass, asdict
from enum import Enum
from fractions import Fraction

logger = logging.getLogger(__name__)

FRACTION_TOLERANCE = 1.0e-6
MAX_EXPANSION_TERMS = 64

# Mendelian segregation ratios
AFFECTED_IF_BOTH_CARRY = 0.25
CARRIER_IF_BOTH_CARRY = 0.5
CARRIER_IF_ONE_CARRIES = 0.5


# ============================================
# ERRORS
# ============================================

class InheritanceInputError(ValueError):
    """Base class for rejected parent inputs."""


class InvalidFractionError(InheritanceInputError):
    """Fraction text could not be parsed as n/d."""


class ProbabilityRangeError(InheritanceInputError):
    """Carrier probability falls outside [0, 1]."""


# ============================================
# FRACTION HELPERS
# ============================================

def approximate_fraction(decimal, max_terms=MAX_EXPANSION_TERMS):
    """
    Continued-fraction expansion of a decimal in [0, 1].
    Returns (numerator, denominator) of the first convergent within
    FRACTION_TOLERANCE relative error, or the last one after max_terms.

    The expansion runs on the exact rational value of the float, so
    subnormal inputs keep a relative tolerance and never overflow.
    """
    target = Fraction(decimal)
    tolerance = target * Fraction(FRACTION_TOLERANCE)

    h1, h2 = 1, 0
    k1, k2 = 0, 1
    b = target

    for _ in range(max(1, max_terms)):
        a = math.floor(b)
        h1, h2 = a * h1 + h2, h1
        k1, k2 = a * k1 + k2, k1

        if abs(target - Fraction(h1, k1)) <= tolerance:
            break

        remainder = b - a
        if remainder == 0:
            # Exact expansion, nothing left to invert
            break
        b = 1 / remainder

    return h1, k1


def format_fraction(decimal):
    """
    Render a probability as "p/q". Exact 0 and 1 render as "0" and "1".
    """
    if decimal == 0:
        return '0'
    if decimal == 1:
        return '1'
    numerator, denominator = approximate_fraction(decimal)
    return f"{numerator}/{denominator}"


def parse_fraction(text):
    """
    Parse "n/d" into a float.
    """
    parts = str(text).split('/')
    if len(parts) != 2:
        raise InvalidFractionError(f"Expected a fraction like 1/4, got '{text}'")

    try:
        numerator = int(parts[0].strip())
        denominator = int(parts[1].strip())
    except ValueError:
        raise InvalidFractionError(f"Numerator and denominator must be whole numbers, got '{text}'") from None

    if denominator == 0:
        raise InvalidFractionError(f"Denominator cannot be zero in '{text}'")

    try:
        return numerator / denominator
    except OverflowError:
        raise InvalidFractionError("Fraction is too large to evaluate") from None


def format_percent(decimal):
    return f"{decimal * 100:.2f}%"


# ============================================
# INPUTS
# ============================================

class InputMode(Enum):
    PERCENTAGE = 'percentage'
    FRACTION = 'fraction'


@dataclass(frozen=True)
class PercentageInput:
    """Carrier probability entered as a whole percentage (0-100)."""

    value: int


@dataclass(frozen=True)
class FractionInput:
    """Carrier probability entered as fraction text, e.g. "1/4"."""

    text: str


def make_input(mode, raw):
    """
    Wrap a raw widget value in the input type for the selected mode.
    """
    mode = InputMode(mode)
    if mode is InputMode.PERCENTAGE:
        return PercentageInput(int(raw))
    return FractionInput(str(raw))


def to_probability(carrier_input):
    """
    Normalize a parent input to a decimal probability in [0, 1].
    """
    if isinstance(carrier_input, PercentageInput):
        if not 0 <= carrier_input.value <= 100:
            raise ProbabilityRangeError(f"Percentage must be between 0 and 100, got {carrier_input.value}")
        return carrier_input.value / 100

    if isinstance(carrier_input, FractionInput):
        probability = parse_fraction(carrier_input.text)
        if not 0 <= probability <= 1:
            raise ProbabilityRangeError(f"Fraction must be between 0 and 1, got '{carrier_input.text}'")
        return probability

    raise TypeError(f"Unsupported carrier input: {carrier_input!r}")


# ============================================
# OUTCOME MODEL
# ============================================

@dataclass(frozen=True)
class OutcomeDistribution:
    """
    Offspring outcome probabilities. The three fields sum to 1.
    """

    normal: float
    carrier: float
    affected: float

    def as_dict(self):
        return asdict(self)

    def percentages(self):
        """Each outcome as a percentage rounded to two decimals."""
        return {name: round(value * 100, 2) for name, value in self.as_dict().items()}


@dataclass(frozen=True)
class InheritanceBreakdown:
    """
    Every intermediate term of the calculation, for the equations panel.
    """

    p1: float
    p2: float
    q1: float
    q2: float
    both_carriers: float
    only_parent1: float
    only_parent2: float
    no_carriers: float
    outcomes: OutcomeDistribution

    def as_dict(self):
        return asdict(self)


def compute_breakdown(p1, p2):
    """
    Joint parental genotypes and offspring outcomes for carrier
    probabilities p1 and p2. Parents are assumed independent.
    """
    q1 = 1 - p1
    q2 = 1 - p2

    both_carriers = p1 * p2
    only_parent1 = p1 * q2
    only_parent2 = q1 * p2
    no_carriers = q1 * q2

    affected = both_carriers * AFFECTED_IF_BOTH_CARRY
    carrier = (both_carriers * CARRIER_IF_BOTH_CARRY) + (only_parent1 * CARRIER_IF_ONE_CARRIES) + (only_parent2 * CARRIER_IF_ONE_CARRIES)
    normal = 1 - affected - carrier

    logger.debug("Outcomes for p1=%s p2=%s: normal=%s carrier=%s affected=%s", p1, p2, normal, carrier, affected)

    return InheritanceBreakdown(
        p1=p1,
        p2=p2,
        q1=q1,
        q2=q2,
        both_carriers=both_carriers,
        only_parent1=only_parent1,
        only_parent2=only_parent2,
        no_carriers=no_carriers,
        outcomes=OutcomeDistribution(normal=normal, carrier=carrier, affected=affected),
    )


def compute_outcomes(p1, p2):
    return compute_breakdown(p1, p2).outcomes


def calculate_outcomes(parent1, parent2):
    """
    Normalize both parent inputs, then compute the full breakdown.
    Raises InheritanceInputError before computing if either input is invalid.
    """
    probabilities = []
    for parent, carrier_input in enumerate((parent1, parent2), start=1):
        try:
            probabilities.append(to_probability(carrier_input))
        except InheritanceInputError as e:
            raise type(e)(f"Parent {parent}: {e}") from e

    p1, p2 = probabilities
    return compute_breakdown(p1, p2)
