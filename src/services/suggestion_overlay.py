"""
Suggestion Overlay Module.

State machine behind the command helper panel shown while typing.

States are ``Hidden`` and ``Visible(candidates, highlighted)``. The
presentation layer feeds it explicit events (text changed, arrow key,
accept, dismiss) and renders whatever state results. While the overlay
is visible it owns the arrow keys; while hidden they belong to the input
history.
"""

import logging
from enum import Enum
from typing import List, Optional, Sequence

logger = logging.getLogger(__name__)


class Direction(Enum):
    """Highlight movement direction."""

    UP = "up"
    DOWN = "down"


class SuggestionOverlay:
    """
    Tracks overlay visibility, the candidate list and the highlight.

    Candidates are catalog entries matching the typed text
    case-insensitively: prefix matches first, then substring matches,
    each group in catalog order.
    """

    def __init__(self, catalog: Sequence[str]) -> None:
        """
        Args:
            catalog: Known command forms offered as suggestions.
        """
        self._catalog = list(catalog)
        self._visible = False
        self._candidates: List[str] = []
        self._highlighted: Optional[int] = None
        self._accepted_text: Optional[str] = None

    # --------------------------------------------------------------------------
    # Queries
    # --------------------------------------------------------------------------

    @property
    def visible(self) -> bool:
        return self._visible

    @property
    def candidates(self) -> List[str]:
        return list(self._candidates) if self._visible else []

    @property
    def highlighted_index(self) -> Optional[int]:
        return self._highlighted if self._visible else None

    @property
    def highlighted(self) -> Optional[str]:
        """The highlighted candidate text, or None."""
        if not self._visible or self._highlighted is None:
            return None
        return self._candidates[self._highlighted]

    @property
    def owns_arrow_keys(self) -> bool:
        """True when arrow keys should move the highlight, not recall history."""
        return self._visible

    def match(self, text: str) -> List[str]:
        """
        Computes candidates for ``text`` without changing state.

        Args:
            text: The current input text.

        Returns:
            List[str]: Matching catalog entries; empty for blank input.
        """
        needle = text.lstrip().casefold()
        if not needle.strip():
            return []
        prefix = [c for c in self._catalog if c.casefold().startswith(needle)]
        substring = [
            c for c in self._catalog if needle in c.casefold() and c not in prefix
        ]
        return prefix + substring

    # --------------------------------------------------------------------------
    # Transitions
    # --------------------------------------------------------------------------

    def update_candidates(self, text: str) -> bool:
        """
        Recomputes candidates after the input text changed.

        Args:
            text: The new input text.

        Returns:
            bool: Whether the overlay is visible afterwards.
        """
        if self._accepted_text is not None:
            echoed = text == self._accepted_text
            self._accepted_text = None
            if echoed:
                return False

        candidates = self.match(text)
        if not candidates:
            self._hide()
            return False

        previous = self.highlighted
        self._candidates = candidates
        if self._visible and previous in candidates:
            self._highlighted = candidates.index(previous)
        else:
            self._highlighted = None
        self._visible = True
        return True

    def move_highlight(self, direction: Direction) -> Optional[str]:
        """
        Moves the highlight one candidate, clamped at both ends.

        Moving down with nothing highlighted selects the first candidate;
        moving up with nothing highlighted does nothing.

        Args:
            direction: Direction.UP or Direction.DOWN.

        Returns:
            The highlighted candidate afterwards, or None.
        """
        if not self._visible:
            return None

        last = len(self._candidates) - 1
        if direction is Direction.DOWN:
            if self._highlighted is None:
                self._highlighted = 0
            else:
                self._highlighted = min(self._highlighted + 1, last)
        elif self._highlighted is not None:
            self._highlighted = max(self._highlighted - 1, 0)
        return self.highlighted

    def accept_highlighted(self) -> Optional[str]:
        """
        Accepts the highlighted candidate.

        The overlay hides, and the next ``update_candidates`` call carrying
        exactly the accepted text (the input echoing the replacement) keeps
        it hidden.

        Returns:
            The text to place in the input, or None if nothing is highlighted.
        """
        text = self.highlighted
        if text is None:
            return None
        self._hide()
        self._accepted_text = text
        logger.debug(f"Accepted suggestion: {text}")
        return text

    def dismiss(self) -> None:
        """Hides the overlay unconditionally."""
        self._hide()
        self._accepted_text = None

    def _hide(self) -> None:
        self._visible = False
        self._candidates = []
        self._highlighted = None
