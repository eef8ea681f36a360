"""Phones with their length and pitch pattern."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class PitchPoint:
    """A pitch pattern point: position in milliseconds and frequency in Hz."""

    pos: float
    freq: float


@dataclass
class Phone:
    """A phoneme, its length in milliseconds and its pitch points.

    The first pitch point gives F0 at 0% of the phone's duration and the
    last one gives F0 at 100%.
    """

    name: str
    length: float
    pitch_points: list[PitchPoint] = field(default_factory=list, init=False)

    def append_f0(self, pos: float, f0: float) -> PitchPoint:
        """Append a pitch point given as a percentage of the length and Hz."""
        point = PitchPoint(pos / 100.0 * self.length, f0)
        self.pitch_points.append(point)
        return point

    def reset(self) -> None:
        """Forget every pitch point of the phone."""
        self.pitch_points.clear()

    def apply_ratio(self, ratio: float) -> None:
        """Stretch length and positions by ratio and divide the pitch by it."""
        if ratio == 1.0:
            return
        self.length *= ratio
        for point in self.pitch_points:
            point.pos *= ratio
            point.freq /= ratio