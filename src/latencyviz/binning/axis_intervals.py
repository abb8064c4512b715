"""
Axis interval generation: "nice" evenly spaced boundary values.

Given a data range [min, max] and a desired number of points N, produce N
ascending boundaries niceMin, niceMin + step, ... where step is the raw
step (max - min) / N snapped up to a human-friendly decimal ladder value.

All arithmetic runs in decimal.Decimal (34 significant digits, the
DECIMAL128 precision). Binary floats are only used to pick the decimal
exponent; the step, the floored start and the accumulated points are exact
decimals, converted to float one at a time on output. Repeated float
addition of e.g. 0.1 would drift visibly after a few dozen steps.

Steps:
  1. raw = (max' - min) / N, where max' = max, or a synthetic max when
     min == max (see _synthetic_max).
  2. x = floor(log10(raw) + 1); y = raw / 10**x, must lie in [0.1, 1.0].
  3. Snap y up to the first NICE_LADDER value >= y (0.1 stays 0.1).
  4. step = ladder * 10**x; niceMin = floor(min / step) * step.
  5. Emit niceMin and then N - 1 further points by repeated addition.
"""

from __future__ import annotations

import math
from decimal import Context, Decimal
from typing import Iterable

from latencyviz.errors import InternalInvariantError, InvalidInputError
from latencyviz.utils.logging import get_logger

logger = get_logger(__name__)

# Human-friendly mantissas, ascending; the step is snapped up to one of these.
NICE_LADDER: tuple[str, ...] = (
    "0.1", "0.2", "0.25", "0.3", "0.4", "0.5",
    "0.6", "0.7", "0.75", "0.8", "0.9", "1.0",
)

# 34 significant digits, same as IEEE 754 decimal128.
DECIMAL_CONTEXT = Context(prec=34)

_ONE = Decimal(1)


def _to_decimal(value: float) -> Decimal:
    """Exact decimal of the shortest repr of a float (0.1 -> Decimal('0.1'))."""
    return Decimal(repr(float(value)))


def _decimal_scale(value: Decimal) -> int:
    """Number of digits after the decimal point (0 for integral values)."""
    exponent = value.as_tuple().exponent
    return -exponent if isinstance(exponent, int) and exponent < 0 else 0


def _synthetic_max(min_dec: Decimal) -> Decimal:
    """Upper bound used when min == max, so the range is non-zero.

    For 0 < min < 1 the bump is one unit in the last decimal place of min
    (0.25 -> 0.26); otherwise it is 1.
    """
    if _ONE > min_dec > 0:
        scale = _decimal_scale(min_dec)
        unit = _ONE.scaleb(-scale)
        return DECIMAL_CONTEXT.add(min_dec, unit)
    return DECIMAL_CONTEXT.add(min_dec, _ONE)


def _snap_to_ladder(y: float) -> Decimal:
    """First ladder value >= y; exactly 0.1 maps to 0.1."""
    if y == 0.1:
        return Decimal(NICE_LADDER[0])
    for step in NICE_LADDER[1:]:
        if y <= float(step):
            return Decimal(step)
    return Decimal(NICE_LADDER[-1])


def generate_interval_points(min_value: float, max_value: float, n_points: int) -> list[float]:
    """Generate n_points "nice" ascending boundaries covering min_value.

    Args:
        min_value: Lower end of the data range, >= 0.
        max_value: Upper end of the data range, >= min_value.
        n_points: Number of boundaries to emit, >= 1.

    Returns:
        Exactly n_points strictly ascending floats, evenly spaced by the
        nice interval, with the first value <= min_value.

    Raises:
        InvalidInputError: On negative bounds, min > max or n_points < 1.
        InternalInvariantError: If the normalized step leaves [0.1, 1.0].
    """
    if min_value < 0:
        raise InvalidInputError(f"min = <{min_value}>")
    if max_value < 0:
        raise InvalidInputError(f"max = <{max_value}>")
    if min_value > max_value:
        raise InvalidInputError(f"min = <{min_value}>, max = <{max_value}>")
    if n_points < 1:
        raise InvalidInputError(f"Too few interval points <{n_points}>")

    ctx = DECIMAL_CONTEXT
    min_dec = _to_decimal(min_value)
    if min_value == max_value:
        max_dec = _synthetic_max(min_dec)
    else:
        max_dec = _to_decimal(max_value)

    raw_interval = ctx.divide(ctx.subtract(max_dec, min_dec), Decimal(n_points))

    x = math.floor(math.log10(float(raw_interval)) + 1)
    ten_power_x = _ONE.scaleb(x)

    y = float(ctx.divide(raw_interval, ten_power_x))
    if y < 0.1 or y > 1.0:
        raise InternalInvariantError(f"Internal error: normalized interval {y} outside [0.1, 1.0]")

    nice_interval = ctx.multiply(_snap_to_ladder(y), ten_power_x)

    # min >= 0, so integer division truncates toward -inf as well
    nice_min = ctx.multiply(nice_interval, ctx.divide_int(min_dec, nice_interval))

    logger.debug(
        "interval points: min=%s max=%s n=%d raw=%s nice=%s start=%s",
        min_dec, max_dec, n_points, raw_interval, nice_interval, nice_min,
    )

    points = [float(nice_min)]
    current = nice_min
    for _ in range(1, n_points):
        current = ctx.add(current, nice_interval)
        points.append(float(current))
    return points


def interval_points_for_data(data: Iterable[float], n_points: int) -> list[float]:
    """Generate nice boundaries spanning the min and max of data."""
    values = [float(d) for d in data]
    if not values:
        raise InvalidInputError("cannot derive interval points from empty data")
    return generate_interval_points(min(values), max(values), n_points)
