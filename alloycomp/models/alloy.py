"""Alloy definition data model."""

from dataclasses import dataclass, field

from alloycomp.models.element import ElementDefinition


@dataclass
class AlloyDefinition:
    """Registered alloy system with optional nominal composition.

    Attributes:
        alloy_id: Unique identifier ("steel", "fe_c_mn", etc.).
        name: Display name.
        elements: Element registrations, exactly one major.
        mole_fractions: Nominal mole fractions of alloying elements.
        weight_fractions: Nominal mass fractions of alloying elements.
    """
    alloy_id: str
    name: str
    elements: list[ElementDefinition] = field(default_factory=list)
    mole_fractions: dict[str, float] = field(default_factory=dict)
    weight_fractions: dict[str, float] = field(default_factory=dict)
