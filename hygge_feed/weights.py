"""
Interaction weights used for engagement scoring.

The table is a published contract with the scoring service: changing a
weight changes scores everywhere.
"""

from .errors import UnknownInteractionType
from .models import InteractionType, WeightMap

# Increasing with how much commitment the action signals
WEIGHTS: WeightMap = {
    InteractionType.VIEW: 1,
    InteractionType.LIKE: 2,
    InteractionType.SHARE: 3,
    InteractionType.COMMENT: 4,
    InteractionType.SAVE: 5,
    InteractionType.FOLLOW: 6,
    InteractionType.PURCHASE: 7,
}

_missing = set(InteractionType) - set(WEIGHTS)
if _missing:
    raise RuntimeError(f"No weight for interaction types: {sorted(_missing)}")


def weight_of(interaction_type: InteractionType | str) -> float:
    """
    Look up the weight of an interaction type.

    Args:
        interaction_type: An InteractionType, or its string value
            (e.g. straight out of deserialized data)

    Returns:
        The fixed weight for that type.

    Raises:
        UnknownInteractionType: If the value isn't a known interaction type.
    """
    try:
        key = InteractionType(interaction_type)
    except (ValueError, TypeError):
        raise UnknownInteractionType(interaction_type) from None
    return WEIGHTS[key]
