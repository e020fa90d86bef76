import logging
from typing import List, Tuple

from .actions import Action

logger = logging.getLogger(__name__)


class ActionHistory:
    """
    Linear undo/redo log of drawing actions.

    Actions before ``cursor`` are applied; the ones after it can be redone until
    a new action is appended, which drops them.
    """

    def __init__(self) -> None:
        self._actions: List[Action] = []
        self._cursor: int = 0

    def __len__(self) -> int:
        return len(self._actions)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def actions(self) -> Tuple[Action, ...]:
        """Full log, including undone actions."""
        return tuple(self._actions)

    def applied(self) -> Tuple[Action, ...]:
        """Actions up to the cursor."""
        return tuple(self._actions[:self._cursor])

    def append(self, action: Action) -> None:
        """Record an action at the cursor, discarding any redo tail first."""
        if self._cursor < len(self._actions):
            logger.debug("Discarding %d undone action(s)", len(self._actions) - self._cursor)
            del self._actions[self._cursor:]
        self._actions.append(action)
        self._cursor += 1

    def undo(self) -> bool:
        if self._cursor == 0:
            return False
        self._cursor -= 1
        logger.debug("Undo, cursor at %d/%d", self._cursor, len(self._actions))
        return True

    def redo(self) -> bool:
        if self._cursor >= len(self._actions):
            return False
        self._cursor += 1
        logger.debug("Redo, cursor at %d/%d", self._cursor, len(self._actions))
        return True

    def reset(self) -> bool:
        """Clear the log. Returns whether there was anything to clear."""
        had_actions = bool(self._actions)
        self._actions = []
        self._cursor = 0
        if had_actions:
            logger.debug("History reset")
        return had_actions

    @property
    def can_undo(self) -> bool:
        return self._cursor > 0

    @property
    def can_redo(self) -> bool:
        return self._cursor < len(self._actions)

    @property
    def can_reset(self) -> bool:
        return len(self._actions) > 0
