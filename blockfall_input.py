"""Inbound messages, key mapping and the single-consumer event queue"""
import logging
from collections import deque
from dataclasses import dataclass
from typing import Iterator, Optional, Union
import pygame
from blockfall_engine import Engine, LEFT, RIGHT, DOWN

log = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1

KEY_DIRECTIONS = {
    "ArrowLeft": LEFT,
    "ArrowRight": RIGHT,
    "ArrowDown": DOWN,
}

# pygame key constants -> browser-style key codes
KEY_CODES = {
    pygame.K_LEFT: "ArrowLeft",
    pygame.K_RIGHT: "ArrowRight",
    pygame.K_DOWN: "ArrowDown",
    pygame.K_UP: "ArrowUp",
}

@dataclass(frozen=True)
class Tick:
    pass

@dataclass(frozen=True)
class Key:
    code: str

Message = Union[Tick, Key]

class EventQueue:
    def __init__(self):
        self._q = deque()
    def __len__(self): return len(self._q)
    def put(self, msg: Message):
        self._q.append(msg)
    def drain(self) -> Iterator[Message]:
        while self._q:
            yield self._q.popleft()

def dispatch(engine: Engine, msg: Message) -> bool:
    """Apply one message to the engine; returns True if the host should re-render."""
    if isinstance(msg, Tick):
        return engine.advance()
    if isinstance(msg, Key):
        log.debug("key %s", msg.code)
        direction = KEY_DIRECTIONS.get(msg.code)
        if direction is None or engine.ended: return False
        engine.shift(direction)
        return True
    raise TypeError(f"unsupported message {msg!r}")

def from_pygame(event) -> Optional[Message]:
    if event.type == TICK_EVENT: return Tick()
    if event.type == pygame.KEYDOWN:
        code = KEY_CODES.get(event.key)
        if code: return Key(code)
    return None
