"""One-shot animation timer used by the simulations.

Timers are plain values: a stage and the clock reading at which its
animation ends. Nothing runs in the background; the owner polls
`is_due(now)` (the UI does so from a `gr.Timer`) and dropping the value
cancels it.
"""

import time
from typing import Optional

from states import AnimationTimer, Stage, TransientNotice

ANIMATION_SECONDS = 3.0
HINT_SECONDS = 1.5


def monotonic_clock() -> float:
    return time.monotonic()


def start_timer(stage: Stage, now: float, duration: float = ANIMATION_SECONDS) -> AnimationTimer:
    return AnimationTimer(stage=stage, due_at=now + duration)


def notice(text: str, now: float, duration: float = HINT_SECONDS) -> TransientNotice:
    """A hint that disappears `duration` seconds after this rejection."""
    return TransientNotice(text=text, expires_at=now + duration)


def visible_text(current: Optional[TransientNotice], now: float) -> Optional[str]:
    if current is not None and current.is_visible(now):
        return current.text
    return None
