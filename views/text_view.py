"""
Text view for rendering game snapshots as terminal frames.

This module provides the TextView class that draws the three towers, the
pointer caret, the help line and the win banner as plain strings. It only
reads GameSnapshot values and never touches a live Game.
"""

from __future__ import annotations

from core.game_state import GameSnapshot
from core.tower import TowerId

HELP_TEXT = "L/R Arrow => move ; Enter => Select ; R => Restart ; Q => Quit"
WIN_TITLE = "You win!"
WIN_TEXT = "Congratulations! Press Q to quit or R to restart."


class TextView:
    """
    Renders snapshots as fixed-width lines.

    The frame is split horizontally into a 5% margin, three 30% tower columns
    and a 5% margin. Each disc is drawn centered in its column with a length
    proportional to its width percentage.

    Attributes:
        width: Frame width in characters
        disc_char: Fill character for discs
        armed_char: Fill character for the armed tower's top disc
    """

    MIN_WIDTH = 40

    def __init__(self, width: int = 80, disc_char: str = "=", armed_char: str = "#"):
        """
        Initialize text view.

        Args:
            width: Frame width in characters
            disc_char: Fill character for discs
            armed_char: Fill character for the selected disc

        Raises:
            ValueError: If width is below MIN_WIDTH
        """
        if width < self.MIN_WIDTH:
            raise ValueError(f"Frame width must be at least {self.MIN_WIDTH}, got {width}")
        self.width = width
        self.disc_char = disc_char
        self.armed_char = armed_char
        self.column_width = width * 30 // 100
        self.margin = width * 5 // 100

    def column_start(self, tower_id: TowerId) -> int:
        return self.margin + int(tower_id) * self.column_width

    def column_center(self, tower_id: TowerId) -> int:
        return self.column_start(tower_id) + self.column_width // 2

    def _disc_cell(self, disc_width: int, fill: str) -> str:
        length = max(1, round(self.column_width * disc_width / 100))
        return (fill * length).center(self.column_width)

    def _row(self, cells: list[str]) -> str:
        return (" " * self.margin + "".join(cells)).ljust(self.width)

    def render_towers(self, snapshot: GameSnapshot) -> list[str]:
        """
        Draw the towers, bottom-aligned, with a base line.

        Returns:
            disc_count + 2 lines: pole tip, disc rows, base
        """
        height = snapshot.disc_count
        pole = "|".center(self.column_width)
        lines = [self._row([pole] * 3)]

        for row in range(height):
            cells = []
            for tower_id in TowerId:
                widths = snapshot.tower(tower_id)
                index = row - (height - len(widths))
                if index < 0:
                    cells.append(pole)
                    continue
                armed_top = snapshot.armed == tower_id and index == 0
                fill = self.armed_char if armed_top else self.disc_char
                cells.append(self._disc_cell(widths[index], fill))
            lines.append(self._row(cells))

        lines.append(self._row(["-" * self.column_width] * 3))
        return lines

    def render_pointer(self, snapshot: GameSnapshot) -> str:
        line = [" "] * self.width
        line[self.column_center(snapshot.pointer)] = "^"
        return "".join(line)

    def render_banner(self) -> list[str]:
        """Boxed win banner centered in the frame."""
        inner = max(len(WIN_TITLE), len(WIN_TEXT)) + 2
        box = [
            "+" + WIN_TITLE.center(inner, "-") + "+",
            "|" + WIN_TEXT.center(inner) + "|",
            "+" + "-" * inner + "+",
        ]
        return [line.center(self.width) for line in box]

    def render(self, snapshot: GameSnapshot) -> list[str]:
        """
        Render a full frame.

        Args:
            snapshot: Game state to draw

        Returns:
            List of lines; includes the win banner when the game is finished
        """
        lines = self.render_towers(snapshot)
        lines.append(self.render_pointer(snapshot))
        if snapshot.finished:
            lines.append("")
            lines.extend(self.render_banner())
        lines.append("")
        lines.append(HELP_TEXT.rjust(self.width))
        return lines

    def render_text(self, snapshot: GameSnapshot) -> str:
        return "\n".join(line.rstrip() for line in self.render(snapshot))
