from __future__ import annotations
import math
from typing import Iterable, List
from ..types import Exclusion, Zone, as_exclusion

def clean_exclusions(from_: float, to: float, exclusions: Iterable)->List[Exclusion]:
    # 欠損の除外、from/to の入替、範囲へのクリップ、重なりの切り詰め
    spans=[]
    for e in map(as_exclusion, exclusions):
        if e.from_ is None or e.to is None: continue
        a, b = float(e.from_), float(e.to)
        if a > b: a, b = b, a
        spans.append([max(a, from_), min(b, to)])
    spans.sort(key=lambda s: s[0])
    for cur, nxt in zip(spans, spans[1:]):
        if cur[1] > nxt[0]: cur[1] = nxt[0]
    return [Exclusion(a, b) for a, b in spans if a < b]

def get_zones(from_: float, to: float, number_of_points: int, exclusions: Iterable = (), reverse: bool = False)->List[Zone]:
    """Split [from_, to] around the exclusions, sharing the points in proportion to zone width.

    Counts are rounded half-up and capped at what is still unallocated; the
    last zone takes the remainder so the counts always sum to number_of_points.
    Zones with zero points are kept (they tile the range) but produce no output.
    """
    if from_ > to: from_, to = to, from_
    excl = clean_exclusions(from_, to, exclusions)
    if not excl:
        return [Zone(from_, to, number_of_points)]

    included = (to - from_) - sum(e.to - e.from_ for e in excl)
    zones=[]; left = number_of_points; start = from_
    for e in excl:
        width = e.from_ - start
        n = int(math.floor(number_of_points * width / included + 0.5)) if included > 0 else 0
        n = min(n, left)
        zones.append(Zone(start, e.from_, n))
        left -= n
        start = e.to
    zones.append(Zone(start, to, left))
    if reverse: zones.sort(key=lambda z: z.from_, reverse=True)
    return zones
