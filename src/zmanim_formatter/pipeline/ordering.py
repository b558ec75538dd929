"""Sort & Filter

- timestamps: по возрастанию абсолютного момента (stable, tie → discovery order)
- durations: только конечные и |value| > threshold (значения ≤ 1000:
  величины в минутах и т.п., не миллисекунды), по возрастанию модуля (stable)
- unavailable: без сортировки
"""

import logging
import math
from typing import Final, List, Sequence

from zmanim_formatter.core.domain.zman import (
    NamedDuration,
    NamedTimestamp,
    date_order_key,
    duration_order_key,
)


logger = logging.getLogger(__name__)

DURATION_THRESHOLD_MS: Final[int] = 1000


def sort_timestamps(timestamps: Sequence[NamedTimestamp]) -> List[NamedTimestamp]:
    return sorted(timestamps, key=date_order_key)


def filter_durations(
    durations: Sequence[NamedDuration],
    threshold_ms: float = DURATION_THRESHOLD_MS,
) -> List[NamedDuration]:
    """
    Оставляет конечные длительности со строго большим порогом модулем.

    NaN и бесконечности отбрасываются.
    """
    kept: List[NamedDuration] = []
    for zman in durations:
        if math.isfinite(zman.value_millis) and zman.magnitude > threshold_ms:
            kept.append(zman)
        else:
            logger.debug(
                "Dropping %s: %s is not a finite value above %s ms", zman.label, zman.value_millis, threshold_ms
            )
    return kept


def sort_durations(
    durations: Sequence[NamedDuration],
    threshold_ms: float = DURATION_THRESHOLD_MS,
) -> List[NamedDuration]:
    return sorted(filter_durations(durations, threshold_ms), key=duration_order_key)
