"""Heuristic board evaluation.

The score combines hole penalties, a target stack height, flatness around the
average (ignoring a single deep well) and the offense/defense statistics of the
state.  A tall or holed board switches hard to the ``downstack`` profile and
takes a fixed penalty; there is no blending between profiles.

The arithmetic is carried out in ``numpy.float32`` and in a fixed order so the
results are reproducible to the bit.
"""

from __future__ import annotations

import logging
from typing import Optional

from .breakdown import ScoreBreakdown
from .config import DEFAULT_CONFIG, EvaluatorConfig
from .features import (
    F32,
    average_height,
    average_without,
    column_heights,
    find_well,
    global_deviation,
    hole_stats,
    local_deviation,
)
from .state import State
from .tetromino import HEIGHT

LOGGER = logging.getLogger(__name__)


def evaluate(
    state: State,
    config: EvaluatorConfig = DEFAULT_CONFIG,
    breakdown: Optional[ScoreBreakdown] = None,
) -> float:
    """Return the desirability of ``state`` (higher is better)."""

    rows = state.board.rows
    props = state.props
    score = F32(0.0)

    heights = column_heights(rows)
    avg = average_height(heights)
    raw_avg = avg
    holes, depth_sum_sq = hole_stats(rows, heights)
    LOGGER.debug("h: %s", heights)

    downstack = F32(HEIGHT) - avg > F32(config.consts.ds_height_threshold) or holes > 0
    if downstack:
        profile = config.downstack
        score += F32(config.consts.ds_mode_penalty)
        LOGGER.debug("DS penalty: %s", config.consts.ds_mode_penalty)
    else:
        profile = config.normal
    weights = profile.weights
    factors = profile.factors

    hole_term = F32(holes) * F32(weights.hole)
    depth_term = F32(depth_sum_sq) * F32(weights.hole_depth)
    score += hole_term
    score += depth_term
    LOGGER.debug("holes: %d, penalty: %s", holes, hole_term)
    LOGGER.debug("hole depth sq sum: %d, penalty: %s", depth_sum_sq, depth_term)

    well = find_well(heights, avg, factors.well_threshold)
    if well is not None:
        avg = average_without(heights, avg, well)
        LOGGER.debug("identified well: %d", well)

    stack_h = F32(HEIGHT) - avg
    d = abs(stack_h - F32(factors.ideal_h))
    height_term = F32(weights.average_h) * d * d
    score += height_term
    LOGGER.debug("global h: %s, ideal: %s, penalty: %s", stack_h, factors.ideal_h, height_term)

    global_sq = global_deviation(heights, avg, well)
    global_term = global_sq * F32(weights.h_global_deviation)
    score += global_term
    LOGGER.debug("global h-deviation sum_sq: %s, penalty: %s", global_sq, global_term)

    local_sq = local_deviation(heights, well)
    local_term = local_sq * F32(weights.h_local_deviation)
    score += local_term
    LOGGER.debug("local h-deviation sum_sq: %s, penalty: %s", local_sq, local_term)

    eff_term = F32(props.sum_atk - props.sum_ds) * F32(weights.eff)
    sum_atk_term = F32(props.sum_atk) * F32(weights.sum_attack)
    sum_ds_term = F32(props.sum_ds) * F32(weights.sum_downstack)
    atk_term = F32(props.atk) * F32(weights.attack)
    ds_term = F32(props.ds) * F32(weights.downstack)
    score += eff_term
    score += sum_atk_term
    score += sum_ds_term
    score += atk_term
    score += ds_term
    LOGGER.debug("sum_atk: %d, sum_ds: %d", props.sum_atk, props.sum_ds)
    LOGGER.debug("final score: %s", score)

    if breakdown is not None:
        breakdown.heights = list(heights)
        breakdown.raw_average = float(raw_avg)
        breakdown.average = float(avg)
        breakdown.holes = holes
        breakdown.hole_depth_sum_sq = depth_sum_sq
        breakdown.profile = profile.name
        breakdown.well = well
        breakdown.global_deviation = float(global_sq)
        breakdown.local_deviation = float(local_sq)
        if downstack:
            breakdown.add("ds_mode", config.consts.ds_mode_penalty)
        breakdown.add("holes", hole_term)
        breakdown.add("hole_depth", depth_term)
        breakdown.add("average_h", height_term)
        breakdown.add("h_global_deviation", global_term)
        breakdown.add("h_local_deviation", local_term)
        breakdown.add("eff", eff_term)
        breakdown.add("sum_attack", sum_atk_term)
        breakdown.add("sum_downstack", sum_ds_term)
        breakdown.add("attack", atk_term)
        breakdown.add("downstack", ds_term)
        breakdown.score = float(score)

    return float(score)


class BoardEvaluator:
    """Evaluator bound to one :class:`EvaluatorConfig`."""

    def __init__(self, config: EvaluatorConfig = DEFAULT_CONFIG) -> None:
        self.config = config

    def evaluate(self, state: State, breakdown: Optional[ScoreBreakdown] = None) -> float:
        return evaluate(state, self.config, breakdown)

    def __call__(self, state: State) -> float:
        return self.evaluate(state)


__all__ = ["BoardEvaluator", "evaluate"]
