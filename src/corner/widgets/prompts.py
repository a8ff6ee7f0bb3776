"""Home-screen prompt: one short line of encouragement plus a tiny mission."""

from __future__ import annotations

import random
from dataclasses import dataclass

PROMPTS: tuple[str, ...] = (
    "“You’re allowed to take up space.”",
    "“Pick one thing. Do it properly.”",
    "“Consistency beats intensity (yes, even at the gym).”",
    "“Small progress counts. Don’t bully yourself.”",
    "“Drink water. Then decide.”",
    "“Do it in 10 minutes. Perfect later.”",
    "“Your future self likes clean schedules.”",
    "“Be kind. Be sharp. Be unstoppable.”",
    "“You don’t need permission to be proud.”",
    "“No overthinking today—just one step.”",
    "“If it’s worth doing, it’s worth doing calmly.”",
)

MISSIONS: tuple[str, ...] = (
    "Do one small thing with full focus.",
    "Stretch for 3 minutes. Your body will forgive you.",
    "Reply to one message you’ve been postponing.",
    "Clean one tiny area (one drawer counts).",
    "Plan tomorrow’s top 2 tasks. Stop there.",
    "Walk for 8 minutes. No headphones. Just air.",
)


@dataclass(frozen=True, slots=True)
class Prompt:
    text: str
    mission: str


def draw_prompt(rng: random.Random | None = None) -> Prompt:
    """Pick a prompt and a mission independently and uniformly."""
    pick = rng or random
    return Prompt(text=pick.choice(PROMPTS), mission=pick.choice(MISSIONS))


__all__ = ["MISSIONS", "PROMPTS", "Prompt", "draw_prompt"]
