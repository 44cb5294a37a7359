from __future__ import annotations

from dataclasses import dataclass
import random
from typing import Literal


PHILOSOPHY_QUOTES: list[str] = [
    "If you look for perfection, you’ll never be content. — Leo Tolstoy",
    "We are what we pretend to be, so we must be careful what we pretend to be. — Kurt Vonnegut",
    "The privilege of a lifetime is to become who you truly are. — C.G. Jung",
    "Become what you are. — Friedrich Nietzsche",
    "The notion that a human being should be constantly happy is a uniquely modern, uniquely destructive idea. — Andrew Weil",
    "You are not too old and it is not too late to dive into your increasing depths where life calmly gives out its own secret. — Rainer Maria Rilke",
    "The menu is not the meal. — Alan Watts",
    "We see the world not as it is, but as we are. — Anais Nin",
    "I dream. Sometimes I think that’s the only right thing to do. — Haruki Murakami",
    "It is not true that people stop pursuing dreams because they grow old, they grow old because they stop pursuing dreams. — Gabriel García Márquez",
    "The struggle between ‘for’ and ‘against’ is the mind’s worst disease. — Sent-ts’an",
    "Life must be understood backward. But it must be lived forward. — Soren Kierkegaard",
    "What labels me, negates me. — Soren Kierkegaard",
    "You have your way. I have my way. As for the right way, the correct way, and the only way, it does not exist. — Friedrich Nietzsche",
    "To live is to suffer; to survive is to find some meaning in the suffering. — Friedrich Nietzsche",
]

PHILOSOPHY_EXERCISES: list[str] = [
    "Exercise: Name a moment this week that changed your mood. What triggered it?",
    "Exercise: Imagine you wake up in a world where everyone’s mood shapes reality. How would today look different?",
    "Exercise: Think of a friend in a maze of their own—what philosophical advice would you give them right now?",
    "Exercise: Recall a decision you made recently. Was it ruled by your mood or rational thought?",
    "Quick Challenge: Try to imagine a color you’ve never seen. What does it mean for experience to go beyond knowledge? (Mary’s Room)",
    "Thought Experiment: The Veil of Ignorance—Would you choose your current maze path if you didn’t know you were the player?",
    "Exercise: List three things that make your journey meaningful, even when the maze gets tough.",
    "Mini Reflection: After this game, consider what you’d do differently if each mood unlocked a secret bonus or challenge.",
]

EXERCISE_LESSON = "Player completed a philosophical exercise and reflected on their journey."


@dataclass(frozen=True)
class PhilosophySupport:
    kind: Literal["quote", "exercise"]
    text: str

    @property
    def title(self) -> str:
        return "Philosophical Quote" if self.kind == "quote" else "Philosophical Exercise"


def pick_support(rng: random.Random) -> PhilosophySupport:
    """Coin flip between a quote and an exercise, then a uniform pick."""
    if rng.randrange(2) == 0:
        return PhilosophySupport("quote", PHILOSOPHY_QUOTES[rng.randrange(len(PHILOSOPHY_QUOTES))])
    return PhilosophySupport("exercise", PHILOSOPHY_EXERCISES[rng.randrange(len(PHILOSOPHY_EXERCISES))])
