"""Driver evaluation: affine property links between bones."""

from __future__ import annotations

from typing import List, Sequence

from rigpose import log

from .bone import Bone, BoneProperty

DRIVER_PASSES = 2


def evaluate_drivers(bones: Sequence[Bone], passes: int = DRIVER_PASSES) -> List[Bone]:
    """
    Apply every driver and return a new bone list.

    Runs a fixed number of passes over the bones in list order. A driver reads
    its source from the working list, so within one pass it sees writes made
    by bones earlier in the list but not by later ones. Chains longer than
    `passes` links stay partially resolved.

    A driver whose source bone is missing does nothing. Locked bones ignore
    driver writes to rotation.
    """
    working = list(bones)
    positions = {bone.id: i for i, bone in enumerate(working)}

    for _ in range(passes):
        for index in range(len(working)):
            owner = working[index]
            if not owner.drivers:
                continue

            for driver in owner.drivers:
                source_index = positions.get(driver.source_bone_id)
                if source_index is None:
                    log.debug(f"[drivers] '{owner.id}': source '{driver.source_bone_id}' not found")
                    continue
                if owner.locked and driver.target_property is BoneProperty.ROTATION:
                    continue

                source = working[source_index]
                value = driver.drive(driver.source_property.get(source))
                owner = driver.target_property.set(owner, value)
                working[index] = owner

    return working
