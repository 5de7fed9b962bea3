"""Situation catalog for To Click Or Not.

Draw policy: unrestricted draw with a core bias. Every draw first picks a
pool (core with probability CORE_SITUATION_PROBABILITY, otherwise the
template pool), then a uniform entry from that pool. Repeats within a game
are allowed and no draw history is kept.

Effects: templates in the built-in pools carry no effect, so every draw gets
a freshly generated effect. A template with a fixed effect keeps it.

Effect generation rule:
    - Choose 1-3 of the four stats without replacement
    - Each chosen stat moves up by 2..7 with probability 0.6,
      otherwise down by 4..10
"""

from __future__ import annotations

import random
from typing import Optional, Protocol, Sequence

from toclickornot.models.situation import Situation, SituationTemplate
from toclickornot.models.stats import Effect
from toclickornot.parameters import (
    CORE_SITUATION_PROBABILITY,
    EFFECT_MAX_STATS,
    EFFECT_MIN_STATS,
    EFFECT_NEGATIVE_RANGE,
    EFFECT_POSITIVE_PROBABILITY,
    EFFECT_POSITIVE_RANGE,
    STAT_NAMES,
)


class RandomSource(Protocol):
    """The subset of random.Random the game uses.

    Production code passes a random.Random; tests may pass a seeded one or a
    scripted fake.
    """

    def random(self) -> float: ...

    def randint(self, a: int, b: int) -> int: ...

    def sample(self, population: Sequence, k: int) -> list: ...

    def choice(self, seq: Sequence): ...


# Repeatable everyday situations, drawn with CORE_SITUATION_PROBABILITY
CORE_SITUATIONS: tuple[str, ...] = (
    "You get a notification that you have a meeting in 5 minutes.",
    "Your friend texts you a meme that actually made you laugh.",
    "You spill coffee on your shirt right before work.",
    "Someone compliments your work unexpectedly.",
    "You realize you forgot to respond to an important email.",
)

SITUATION_TEMPLATES: tuple[str, ...] = (
    "Your boss nitpicks something trivial you did.",
    "You find money in an old jacket pocket.",
    "You're stuck in traffic and late for something important.",
    "You make someone smile with a kind gesture.",
    "Your alarm didn't go off and you overslept.",
    "You remember something embarrassing you did years ago.",
    "A loved one tells you they're proud of you.",
    "You receive an unexpected bill in the mail.",
    "You finally finish a task you've been procrastinating on.",
    "You catch yourself in the mirror and don't recognize yourself.",
    "A stranger holds the door for you.",
    "You eat something delicious and savor every bite.",
    "Your anxiety spirals about something you can't control.",
    "You have a moment of pure clarity about what matters.",
    "Someone took credit for your work.",
    "You laughed until your sides hurt.",
    "The weight of your responsibilities feels crushing.",
    "You helped someone without being asked.",
    "You made a silly mistake that everyone witnessed.",
    "You felt genuinely safe and at peace.",
    "Your body aches from stress.",
    "You had a conversation that changed your perspective.",
    "You failed at something you really wanted to succeed at.",
    "You received unexpected kindness from a stranger.",
    "You wasted the entire evening and feel guilty.",
    "You stood up for yourself for once.",
    "You felt completely invisible.",
    "You made someone laugh until they cried.",
    "You couldn't afford something you really needed.",
    "You reconnected with an old friend.",
    "You caught a cold from your coworker.",
    "Found $20 on the ground!",
    "Your landlord raised the rent.",
    "A stranger smiled at you today.",
    "You stayed up doom-scrolling until 3am.",
    "Your best friend moved away.",
    "You got a promotion at work!",
    "Food poisoning from gas station sushi.",
    "Your therapist went on vacation.",
    "You won a small lottery prize!",
    "Your car broke down.",
    "A dog ran up and licked your face.",
    "You burnt your dinner again.",
    "Your ex texted you at 2am.",
    "You finished reading a good book.",
    "Your credit card got declined.",
    "You went for a nice walk.",
    "Your WiFi went out during important work.",
    "You got a compliment from a stranger.",
    "Stepped on a LEGO.",
    "You accidentally liked your ex's old photo.",
    "Your plant is still alive!",
    "You lost your wallet.",
    "A bird pooped on you. Lucky?",
    "You had a really good nap.",
)

# Flavour events shown when a round completes
ROUND_EVENTS: tuple[str, ...] = (
    "You made it through another day.",
    "The weight of existence feels heavier than usual.",
    "You feel more human today than yesterday.",
    "Everything feels pointless.",
    "You had moments of genuine connection.",
    "Fatigue is setting in.",
    "Time moves strangely today.",
    "You're still here. That counts for something.",
)


def generate_random_effect(rng: RandomSource) -> Effect:
    """Generate a random stat change touching 1-3 stats.

    Args:
        rng: Random source

    Returns:
        Mapping of chosen stat names to signed deltas
    """
    count = rng.randint(EFFECT_MIN_STATS, EFFECT_MAX_STATS)
    effect: Effect = {}
    for name in rng.sample(STAT_NAMES, count):
        if rng.random() < EFFECT_POSITIVE_PROBABILITY:
            effect[name] = rng.randint(*EFFECT_POSITIVE_RANGE)
        else:
            effect[name] = rng.randint(*EFFECT_NEGATIVE_RANGE)
    return effect


def _as_templates(entries: Sequence[str | SituationTemplate]) -> tuple[SituationTemplate, ...]:
    return tuple(
        entry if isinstance(entry, SituationTemplate) else SituationTemplate(message=entry)
        for entry in entries
    )


class SituationCatalog:
    """Fixed pools of situations plus the randomizer that draws from them.

    Attributes:
        core: Small pool drawn with probability core_probability
        templates: Main pool
        round_events: Pool drawn when a round completes
        core_probability: Chance of drawing from the core pool
    """

    def __init__(
        self,
        core: Sequence[str | SituationTemplate] = CORE_SITUATIONS,
        templates: Sequence[str | SituationTemplate] = SITUATION_TEMPLATES,
        round_events: Sequence[str | SituationTemplate] = ROUND_EVENTS,
        core_probability: float = CORE_SITUATION_PROBABILITY,
        rng: Optional[RandomSource] = None,
    ) -> None:
        self.core = _as_templates(core)
        self.templates = _as_templates(templates)
        self.round_events = _as_templates(round_events)
        if not self.templates and not self.core:
            raise ValueError("SituationCatalog needs at least one situation")
        if not self.round_events:
            raise ValueError("SituationCatalog needs at least one round event")
        self.core_probability = core_probability
        self.rng: RandomSource = rng if rng is not None else random.Random()

    def __len__(self) -> int:
        return len(self.core) + len(self.templates)

    def _materialize(self, template: SituationTemplate) -> Situation:
        if template.effects is not None:
            effects = dict(template.effects)
        else:
            effects = generate_random_effect(self.rng)
        return Situation(message=template.message, effects=effects)

    def draw_situation(self) -> Situation:
        """Draw the situation for one click."""
        use_core = bool(self.core) and (
            not self.templates or self.rng.random() < self.core_probability
        )
        pool = self.core if use_core else self.templates
        return self._materialize(self.rng.choice(pool))

    def draw_round_event(self) -> Situation:
        """Draw the flavour event applied when a round completes."""
        return self._materialize(self.rng.choice(self.round_events))


def get_random_situation(rng: Optional[RandomSource] = None) -> Situation:
    """Draw one situation from the default catalog."""
    return SituationCatalog(rng=rng).draw_situation()
