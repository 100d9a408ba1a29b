"""Optional record of how an evaluation arrived at its score."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class ScoreBreakdown:
    """Intermediate values captured by :func:`tetris_bot.evaluator.evaluate`.

    Pass an instance as ``breakdown=`` to have it filled in.  The returned
    score is the same whether or not a breakdown is collected.
    """

    heights: List[int] = field(default_factory=list)
    raw_average: float = 0.0
    average: float = 0.0
    holes: int = 0
    hole_depth_sum_sq: int = 0
    profile: str = ""
    well: Optional[int] = None
    global_deviation: float = 0.0
    local_deviation: float = 0.0
    terms: Dict[str, float] = field(default_factory=dict)
    score: float = 0.0

    def add(self, name: str, value: float) -> None:
        self.terms[name] = self.terms.get(name, 0.0) + float(value)

    def format(self) -> str:
        """Return a multi-line human readable summary."""

        lines = [
            f"heights: {self.heights}",
            f"profile: {self.profile}",
            f"holes: {self.holes}, depth sq sum: {self.hole_depth_sum_sq}",
            f"well: {self.well if self.well is not None else '-'}",
            f"average: raw {self.raw_average:.3f}, adjusted {self.average:.3f}",
        ]
        lines.extend(f"  {name}: {value:+.3f}" for name, value in self.terms.items())
        lines.append(f"score: {self.score:.3f}")
        return "\n".join(lines)
