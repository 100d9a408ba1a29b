"""Fixed weight and factor tables for the board evaluator.

Two profiles exist: ``normal`` for a clean, low stack and ``downstack`` for a
tall or holed one.  Everything here is frozen; build alternate weight sets
with :func:`dataclasses.replace` and pass them to the evaluator explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Consts:
    """Profile-independent constants of the mode switch."""

    ds_height_threshold: float = 14.0
    ds_mode_penalty: float = -2000.0


@dataclass(frozen=True)
class Factors:
    ideal_h: float
    well_threshold: float


@dataclass(frozen=True)
class Weights:
    hole: float
    hole_depth: float
    h_local_deviation: float
    h_global_deviation: float
    average_h: float
    sum_attack: float
    sum_downstack: float
    attack: float
    downstack: float
    eff: float


@dataclass(frozen=True)
class Profile:
    name: str
    weights: Weights
    factors: Factors


WEIGHTS_NORMAL = Weights(
    hole=-100.0,
    hole_depth=-10.0,
    h_local_deviation=-5.0,
    h_global_deviation=-1.0,
    average_h=-10.0,
    sum_attack=40.0,
    sum_downstack=15.0,
    attack=35.0,
    downstack=10.0,
    eff=50.0,
)

WEIGHTS_DOWNSTACK = Weights(
    hole=-150.0,
    hole_depth=-15.0,
    h_local_deviation=-10.0,
    h_global_deviation=-1.0,
    average_h=-20.0,
    sum_attack=0.0,
    sum_downstack=350.0,
    attack=0.0,
    downstack=30.0,
    eff=50.0,
)

FACTORS_NORMAL = Factors(ideal_h=5.0, well_threshold=4.0)
FACTORS_DOWNSTACK = Factors(ideal_h=0.0, well_threshold=20.0)

CONSTS = Consts()

NORMAL = Profile("normal", WEIGHTS_NORMAL, FACTORS_NORMAL)
DOWNSTACK = Profile("downstack", WEIGHTS_DOWNSTACK, FACTORS_DOWNSTACK)


@dataclass(frozen=True)
class EvaluatorConfig:
    """Everything :func:`tetris_bot.evaluator.evaluate` reads besides the state."""

    normal: Profile = NORMAL
    downstack: Profile = DOWNSTACK
    consts: Consts = field(default_factory=Consts)


DEFAULT_CONFIG = EvaluatorConfig()


__all__ = [
    "CONSTS",
    "Consts",
    "DEFAULT_CONFIG",
    "DOWNSTACK",
    "EvaluatorConfig",
    "FACTORS_DOWNSTACK",
    "FACTORS_NORMAL",
    "Factors",
    "NORMAL",
    "Profile",
    "WEIGHTS_DOWNSTACK",
    "WEIGHTS_NORMAL",
    "Weights",
]
