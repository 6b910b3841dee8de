"""
State merging for netcfg.

Combines a newly requested state for one family with the previously
parsed state of the other family. The untouched family is carried over
as-is; only a family that was never configured is given its default.
"""

from .dataclasses import (
    DEFAULTS,
    AddressFamilyState,
    Family,
    MergeDefaults,
    Mode,
    StatePair,
)
from .validation import validate_state


def resolve_state(family: Family, state: AddressFamilyState, defaults: MergeDefaults = DEFAULTS) -> AddressFamilyState:
    """Replace an unset state with the family default mode."""
    if state.mode == Mode.UNSET:
        return AddressFamilyState(mode=defaults.mode_for(family))
    return state


def resolve_pair(states: StatePair, defaults: MergeDefaults = DEFAULTS) -> StatePair:
    """Resolve both families so every one is explicitly stated on render."""
    return StatePair(
        ipv4=resolve_state(Family.IPV4, states.ipv4, defaults),
        ipv6=resolve_state(Family.IPV6, states.ipv6, defaults),
    )


def merge_states(
    current: StatePair,
    family: Family,
    requested: AddressFamilyState,
    defaults: MergeDefaults = DEFAULTS,
) -> StatePair:
    """
    Merge a requested state for one family into the current pair.

    Args:
        current: States last observed in the document (may contain unset)
        family: The family being changed
        requested: New state for that family
        defaults: Family defaults applied to unset families

    Returns:
        Fully resolved StatePair ready for rendering

    Raises:
        ValidationError: If the requested state is invalid
    """
    validate_state(family, requested)
    return resolve_pair(current.replace(family, requested), defaults)


def merge_both(
    ipv4: AddressFamilyState,
    ipv6: AddressFamilyState,
    defaults: MergeDefaults = DEFAULTS,
) -> StatePair:
    """Validate and resolve a pair where both families are being set."""
    validate_state(Family.IPV4, ipv4)
    validate_state(Family.IPV6, ipv6)
    return resolve_pair(StatePair(ipv4=ipv4, ipv6=ipv6), defaults)
