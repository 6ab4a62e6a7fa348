"""Animal requirement modeling.

This module provides:
- Validated animal descriptions (state.py)
- VEM and DVE requirement components (requirements.py)
- Feed intake capacity (voc.py)
"""

from voerbalans.animal.requirements import (
    RequirementResult,
    calculate_fpcm,
    calculate_requirements,
    dve_requirement,
    explain_requirements,
    grazing_supplement_vem,
    growth_supplement_vem,
    maintenance_vem,
    pregnancy_supplement_vem,
    production_vem,
    protein_yield_grams,
    requirement_from_profile,
)
from voerbalans.animal.state import AnimalProfile, PhysiologicalState
from voerbalans.animal.voc import VocResult, calculate_voc

__all__ = [
    # state
    "AnimalProfile",
    "PhysiologicalState",
    # requirements
    "RequirementResult",
    "calculate_fpcm",
    "maintenance_vem",
    "production_vem",
    "growth_supplement_vem",
    "pregnancy_supplement_vem",
    "grazing_supplement_vem",
    "protein_yield_grams",
    "dve_requirement",
    "calculate_requirements",
    "requirement_from_profile",
    "explain_requirements",
    # voc
    "VocResult",
    "calculate_voc",
]
