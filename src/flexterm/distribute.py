"""Space distribution along the flow and cross axes of a container."""

from __future__ import annotations

from typing import Sequence

from flexterm.policy import ContentAlign, ContentJustify
from flexterm.size import SizeComponent


def largest_remainder(total: int, weights: Sequence[int]) -> list[int]:
    """
    Split ``total`` into integer shares proportional to ``weights``.

    Each slot first gets the floor of its exact share; the cells left over
    go one each to the slots with the largest fractional remainders. Ties
    go to the earlier slot, so the result is stable for a given order.
    The shares always sum to ``total`` (when any weight is positive).
    """
    weight_sum = sum(weights)
    if total <= 0 or weight_sum <= 0:
        return [0] * len(weights)

    shares = [total * w // weight_sum for w in weights]
    remainders = [total * w % weight_sum for w in weights]
    leftover = total - sum(shares)

    order = sorted(range(len(weights)), key=lambda i: (-remainders[i], i))
    for i in order[:leftover]:
        shares[i] += 1
    return shares


def allocate_leftover(
    components: Sequence[SizeComponent],
    leftover: int,
) -> tuple[list[int], int]:
    """
    Hand out ``leftover`` cells among the flexible components.

    Fixed components get nothing. Each pass splits what is left in
    proportion to how much every flexible component can still absorb:
    a Stretch weighs the whole leftover, a MinMax weighs its remaining
    room (``max - min`` minus what it already got). Shares are capped at
    that room and the excess goes around again to the others.

    Returns:
        Tuple of (extra cells per component, cells nobody could absorb)
    """
    extras = [0] * len(components)
    active = [i for i, c in enumerate(components) if c.is_flexible]

    while leftover > 0 and active:
        weights = []
        for i in active:
            room = components[i].room(extras[i])
            weights.append(leftover if room is None else min(room, leftover))
        shares = largest_remainder(leftover, weights)
        spent = 0
        still_active: list[int] = []

        for i, share in zip(active, shares):
            room = components[i].room(extras[i])
            granted = share if room is None else min(share, room)
            extras[i] += granted
            spent += granted
            if room is None or granted < room:
                still_active.append(i)

        if spent == 0:
            break
        leftover -= spent
        active = still_active

    return extras, leftover


def justify_gaps(justify: ContentJustify, free: int, count: int) -> list[int]:
    """
    Gaps around ``count`` children along the flow axis.

    Returns ``count + 1`` values: the gap before each child followed by
    the gap after the last one. The gaps sum to ``free``.
    """
    gaps = [0] * (count + 1)
    if free <= 0:
        return gaps

    if justify is ContentJustify.END:
        gaps[0] = free
    elif justify is ContentJustify.CENTER:
        gaps[0] += free - free // 2
        gaps[-1] += free // 2
    elif justify is ContentJustify.SPACE_BETWEEN and count > 1:
        gaps[1:-1] = largest_remainder(free, [1] * (count - 1))
    elif justify is ContentJustify.SPACE_AROUND and count > 0:
        # Every child owns one half-gap on each side
        halves = largest_remainder(free, [1] * (2 * count))
        gaps[0] = halves[0]
        for k in range(1, count):
            gaps[k] = halves[2 * k - 1] + halves[2 * k]
        gaps[-1] = halves[-1]
    elif justify is ContentJustify.SPACE_EVEN:
        gaps = largest_remainder(free, [1] * (count + 1))
    else:
        # START, STRETCH, and spacing policies with nothing to space out
        gaps[-1] = free
    return gaps


def align_offset(align: ContentAlign, free: int) -> int:
    """Leading offset of a child inside ``free`` spare cross-axis cells."""
    if free <= 0:
        return 0
    if align is ContentAlign.END:
        return free
    if align is ContentAlign.CENTER:
        return free - free // 2
    return 0
