"""State and line shading of an animated "waiting" spinner."""

from __future__ import annotations

import math

_DEFAULT_ROUNDNESS = 100.0
_DEFAULT_MIN_TRAIL_OPACITY = math.pi
_DEFAULT_TRAIL_FADE_PERCENTAGE = 80.0
_DEFAULT_REVOLUTIONS_PER_SECOND = math.pi / 2
_DEFAULT_NUMBER_OF_LINES = 20
_DEFAULT_LINE_LENGTH = 10
_DEFAULT_LINE_WIDTH = 2
_DEFAULT_INNER_RADIUS = 10


def line_count_distance(current: int, primary: int, total: int) -> int:
    """How many steps the line ``current`` trails behind the ``primary`` line."""
    distance = primary - current
    if distance < 0:
        distance += total
    return distance


def line_alpha(
    distance: int,
    total: int,
    trail_fade_percentage: float,
    min_opacity: float,
    alpha: float = 1.0,
) -> float:
    """Opacity of a line that trails the primary line by ``distance`` steps."""
    if distance == 0:
        return alpha
    min_alpha = min_opacity / 100.0
    threshold = math.ceil((total - 1) * trail_fade_percentage / 100.0)
    if distance > threshold:
        return min_alpha
    gradient = (alpha - min_alpha) / (threshold + 1)
    result = alpha - gradient * distance
    return min(1.0, max(0.0, result))


class Spinner:
    """A ring of lines whose brightest line steps around on every tick."""

    def __init__(
        self,
        color: str = "#000000",
        alpha: float = 1.0,
        center_on_parent: bool = True,
        disable_parent_when_spinning: bool = True,
    ) -> None:
        self.color = color
        self.alpha = alpha
        self.center_on_parent = center_on_parent
        self.disable_parent_when_spinning = disable_parent_when_spinning
        self._roundness = _DEFAULT_ROUNDNESS
        self.minimum_trail_opacity = _DEFAULT_MIN_TRAIL_OPACITY
        self.trail_fade_percentage = _DEFAULT_TRAIL_FADE_PERCENTAGE
        self._revolutions_per_second = _DEFAULT_REVOLUTIONS_PER_SECOND
        self._number_of_lines = _DEFAULT_NUMBER_OF_LINES
        self.line_length = _DEFAULT_LINE_LENGTH
        self.line_width = _DEFAULT_LINE_WIDTH
        self.inner_radius = _DEFAULT_INNER_RADIUS
        self.counter = 0
        self.is_spinning = False

    @property
    def roundness(self) -> float:
        return self._roundness

    @roundness.setter
    def roundness(self, value: float) -> None:
        self._roundness = max(0.0, min(100.0, float(value)))

    @property
    def number_of_lines(self) -> int:
        return self._number_of_lines

    @number_of_lines.setter
    def number_of_lines(self, lines: int) -> None:
        self._number_of_lines = lines
        self.counter = 0

    @property
    def revolutions_per_second(self) -> float:
        return self._revolutions_per_second

    @revolutions_per_second.setter
    def revolutions_per_second(self, value: float) -> None:
        self._revolutions_per_second = value

    @property
    def size(self) -> int:
        """Width and height of the square the spinner occupies."""
        return (self.inner_radius + self.line_length) * 2

    @property
    def interval(self) -> int:
        """Milliseconds between two animation ticks."""
        return int(1000 / (self._number_of_lines * self._revolutions_per_second))

    @property
    def parent_enabled(self) -> bool:
        """Whether the parent should accept input while this spinner runs."""
        return not (self.is_spinning and self.disable_parent_when_spinning)

    def position(self, parent_width: int, parent_height: int) -> tuple[int, int] | None:
        """Top-left corner that centres the spinner on its parent, if it should be centred."""
        if not self.center_on_parent:
            return None
        return (parent_width // 2 - self.size // 2, parent_height // 2 - self.size // 2)

    def start(self) -> None:
        """Begin spinning from the first line."""
        if not self.is_spinning:
            self.counter = 0
        self.is_spinning = True

    def stop(self) -> None:
        """Stop spinning and go back to the first line."""
        self.is_spinning = False
        self.counter = 0

    def rotate(self) -> None:
        """Advance the primary line by one step."""
        self.counter += 1
        if self.counter >= self._number_of_lines:
            self.counter = 0

    def line_alphas(self) -> list[float]:
        """Opacity of every line for the current animation step."""
        if self.counter >= self._number_of_lines:
            self.counter = 0
        total = self._number_of_lines
        return [
            line_alpha(
                line_count_distance(line, self.counter, total),
                total,
                self.trail_fade_percentage,
                self.minimum_trail_opacity,
                self.alpha,
            )
            for line in range(total)
        ]