"""Manually managed & curated capability policies.

1. First import a new policy that you have implemented.
2. Add the policy class to the POLICY_CLASSES list.
"""
from collections import defaultdict
from typing import Dict, List, Type

from .base import BaseCapabilityPolicy
from .none_policy import NoCapabilitiesPolicy
from .requires_exports import RequiresExportsPolicy

# --------------------------------------------------------------------------------------------------
# Add your implemented policy class to the POLICY_CLASSES list
# --------------------------------------------------------------------------------------------------
POLICY_CLASSES: List[Type[BaseCapabilityPolicy]] = [
    NoCapabilitiesPolicy,
    RequiresExportsPolicy,
]
# --------------------------------------------------------------------------------------------------

DEFAULT_POLICY_TYPE = NoCapabilitiesPolicy.POLICY_TYPE


def _validate_no_duplicate_policy_types(policy_classes):
    """Validate that there are no duplicate policy types.

    This check runs every time the module is loaded for the first time.
    """
    policy_type_to_class_map = defaultdict(list)

    for policy_class in policy_classes:
        policy_type_to_class_map[policy_class.POLICY_TYPE].append(policy_class)

    offenders = [
        f"* POLICY_TYPE: '{policy_type}' is duplicated for these POLICY_CLASSES: {classes}"
        for policy_type, classes in policy_type_to_class_map.items()
        if len(classes) > 1
    ]

    if offenders:
        offenders_str = "\n".join(offenders)
        raise ValueError(
            f"The POLICY_CATALOG cannot be constructed since some policies have duplicated "
            f"`POLICY_TYPE`s. The following is the list of duplicates and their classes:\n"
            f"{offenders_str}"
        )


_validate_no_duplicate_policy_types(POLICY_CLASSES)

POLICY_CATALOG: Dict[str, Type[BaseCapabilityPolicy]] = {
    policy_class.POLICY_TYPE: policy_class for policy_class in POLICY_CLASSES
}


def get_policy(policy_type: str = DEFAULT_POLICY_TYPE) -> BaseCapabilityPolicy:
    if policy_type not in POLICY_CATALOG:
        raise ValueError(
            f"{policy_type=} not found in POLICY_CATALOG. Known policies: {', '.join(POLICY_CATALOG)}"
        )
    return POLICY_CATALOG[policy_type]()
