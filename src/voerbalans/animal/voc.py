"""
Feed intake capacity (VOC) of dairy cows.

VOC = [a0 + a1 × (1 - exp(-rho_a × a))] × [1 - beta × exp(-rho_b × d)] × [1 - delta_220 × (g/220)²]

Where:
- a = (parity - 1) + DIM/365, the lactation age
- d = days in milk
- g = days pregnant

The capacity is expressed in filling value units (VW) and compared against
the summed filling value of a ration. It limits how much can be eaten; it is
not part of the VEM/DVE requirement.

References:
-----------
[1] Zom, R.L.G., et al. (2012). "Development of a model for the prediction of
    feed intake by dairy cows". Livestock Science 146:71-83.
"""

import math
from dataclasses import dataclass

from voerbalans.core.standards import CVB_INTAKE, IntakeCapacityStandard


@dataclass(frozen=True)
class VocResult:
    """Intake capacity with its three multiplicative factors."""

    voc: float  # VW units
    voc_kg_ds: float  # approximate kg DS
    lactation_age: float
    maturity_factor: float
    lactation_factor: float
    pregnancy_factor: float


def calculate_voc(
    parity: int,
    days_in_milk: int,
    days_pregnant: int,
    standard: IntakeCapacityStandard = CVB_INTAKE,
) -> VocResult:
    """
    Calculate feed intake capacity.

    Args:
        parity: Lactation number (1 = first lactation)
        days_in_milk: Days since calving
        days_pregnant: Days pregnant (0 if open)
        standard: VOC coefficients (default: CVB)

    Returns:
        VocResult; a mature cow at DIM 100 has roughly 11-12 VW
    """
    s = standard
    lactation_age = (parity - 1) + days_in_milk / 365

    maturity = s.alpha_0 + s.alpha_1 * (1 - math.exp(-s.rho_alpha * lactation_age))
    lactation = 1 - s.beta * math.exp(-s.rho_beta * days_in_milk)
    pregnancy = 1 - s.delta_220 * (days_pregnant / 220) ** 2

    voc = maturity * lactation * pregnancy
    return VocResult(
        voc=voc,
        voc_kg_ds=voc * s.vw_to_kg_ds,
        lactation_age=lactation_age,
        maturity_factor=maturity,
        lactation_factor=lactation,
        pregnancy_factor=pregnancy,
    )
