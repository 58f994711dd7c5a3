"""Button state tracked over time."""

from dataclasses import dataclass

_U32_MAX = 0xFFFF_FFFF


@dataclass
class Button:
    """Holds the button's state and detects clicks and holding."""

    pressed: bool = False
    clicked: bool = False
    held: int = 0

    def update(self, down: bool) -> None:
        """Feed the current debounced state of the button."""
        was_pressed = self.pressed
        self.pressed = down
        self.clicked = not was_pressed and self.pressed
        self.held = min(self.held + 1, _U32_MAX) if self.pressed else 0