"""Splicing of two token-to-anchor routes into a single conversion path."""

from typing import List, Sequence

from ..core.types import PathStep, TokenRole


def tag_path(path: Sequence[str]) -> List[PathStep]:
    """Tag every element of a path with the role of its position."""
    return [PathStep(token, TokenRole.for_index(i)) for i, token in enumerate(path)]


def _collapse(steps: List[PathStep]) -> List[PathStep]:
    """Drop the loops between repeated steps.

    A step repeats only if the same token shows up again in the same role;
    everything from a step up to its furthest repeat is a loop and is skipped.
    """
    compacted: List[PathStep] = []
    p = 0
    while p < len(steps):
        for q in range(p + 1, len(steps)):
            if steps[q] == steps[p]:
                p = q
        compacted.append(steps[p])
        p += 1
    return compacted


def collapse_cycles(path: Sequence[str]) -> List[str]:
    """Remove redundant loops from a conversion path.

    Running it on an already collapsed path returns the path unchanged.
    """
    return [step.token for step in _collapse(tag_path(path))]


def merge_paths(source_path: Sequence[str], target_path: Sequence[str]) -> List[str]:
    """Merge a source-to-anchor and a target-to-anchor route.

    The longest common suffix of the two routes is trimmed down to the point
    where they meet, the target route is appended in reverse, and any loops
    left over are collapsed.

    Args:
        source_path: Route from the source token to the anchor token
        target_path: Route from the target token to the anchor token

    Returns:
        Path from source to target, empty if either route is empty
    """
    if not source_path or not target_path:
        return []

    source_steps = tag_path(source_path)
    target_steps = tag_path(target_path)

    i = len(source_steps) - 1
    j = len(target_steps) - 1
    while i >= 0 and j >= 0 and source_steps[i].token == target_steps[j].token:
        i -= 1
        j -= 1

    # Keep the meeting point once, then walk the target route backwards
    merged = source_steps[:i + 2]
    if j >= 0:
        merged += target_steps[j::-1]

    return [step.token for step in _collapse(merged)]
