from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

import pygame

from stillworld.core.state import FrameInput

logger = logging.getLogger(__name__)

MOVEMENT_ACTIONS = ("MOVE_UP", "MOVE_DOWN", "MOVE_LEFT", "MOVE_RIGHT")


# ---------------------------------------------------------------------------
# Data types
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Binding:
    """A single keyboard binding."""
    name: str   # human-readable key name ("w", "left shift")
    key: int    # pygame keycode


class Keymap:
    """
    Fixed action -> keys table.

    Polling (held movement keys) goes through ``is_action_down``; one-shot
    toggles come from KEYDOWN events through ``event_to_actions``.
    """

    def __init__(self, bindings: Mapping[str, Iterable[str]]) -> None:
        self._warnings: List[str] = []
        parsed: Dict[str, List[Binding]] = {}
        for action, names in bindings.items():
            blist: List[Binding] = []
            for name in names:
                b = _parse_binding(name)
                if b:
                    blist.append(b)
                else:
                    self._warnings.append(f"Unrecognized binding '{name}' for action '{action}'")
            parsed[action] = blist
        self._map: Dict[str, List[Binding]] = parsed
        for w in self._warnings:
            logger.warning(w)

    # ---------------- Public diagnostics / info ----------------
    @property
    def warnings(self) -> List[str]:
        """Any parse warnings collected at construction."""
        return list(self._warnings)

    # ---------------- Queries ----------------
    def is_action_down(self, action: str, pressed: Sequence[bool]) -> bool:
        """
        Polling: True if any key bound to the action is down in ``pressed``
        (the object returned by ``pygame.key.get_pressed()``).
        """
        for b in self._map.get(action, ()):
            try:
                if pressed[b.key]:
                    return True
            except IndexError:
                continue
        return False

    def event_to_actions(self, ev: pygame.event.Event) -> List[str]:
        """Return all actions matched by a KEYDOWN event."""
        if ev.type != pygame.KEYDOWN:
            return []
        key = getattr(ev, "key", None)
        return [action for action, binds in self._map.items() if any(b.key == key for b in binds)]

    def frame_input(self, pressed: Sequence[bool]) -> FrameInput:
        """Snapshot held movement keys and the slow-walk modifier."""
        up, down, left, right = (self.is_action_down(a, pressed) for a in MOVEMENT_ACTIONS)
        return FrameInput(
            up=up,
            down=down,
            left=left,
            right=right,
            slow=self.is_action_down("SLOW_WALK", pressed),
        )


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def _parse_binding(name: str) -> Optional[Binding]:
    token = name.strip().lower()
    if not token:
        return None
    try:
        key = pygame.key.key_code(token)
    except ValueError:
        return None
    return Binding(name=token, key=key)
