from __future__ import annotations

from typing import Callable

from pacing.application.services.encounter_service import EncounterService
from pacing.domain.models.player import Player
from pacing.domain.models.task import Task
from pacing.domain.services import lingo
from pacing.domain.services.rand import Rand

OASIS_BEATS = (
    "Exhausted, you arrive at a friendly oasis in a hostile land",
    "You greet old friends and meet new allies",
    "You are privy to a council of powerful do-gooders",
    "There is much to be done, you are chosen!",
)

SEQUENCES = ("oasis", "nemesis", "intrigue")


class StoryDirector:
    """Scripts the cinematic that plays whenever the plot meter fills.

    Beats are handed to ``enqueue`` one at a time; the simulation appends each
    beat and immediately runs its dequeue loop, so the first beat replaces the
    finished task and the rest wait in the queue.
    """

    def __init__(self, encounters: EncounterService | None = None) -> None:
        self.encounters = encounters or EncounterService()

    def play_cinematic(self, player: Player, rng: Rand, enqueue: Callable[[Task], None]) -> str:
        sequence = SEQUENCES[rng.below(len(SEQUENCES))]
        if sequence == "oasis":
            self._oasis(enqueue)
        elif sequence == "nemesis":
            self._nemesis(player, rng, enqueue)
        else:
            self._intrigue(rng, enqueue)

        next_act = lingo.act_name(player.quest_book.act + 1)
        enqueue(Task.plot(f"Loading {next_act}", 1.0))
        return sequence

    @staticmethod
    def _oasis(enqueue: Callable[[Task], None]) -> None:
        for description in OASIS_BEATS:
            enqueue(Task.regular(description, 1.0))

    def _nemesis(self, player: Player, rng: Rand, enqueue: Callable[[Task], None]) -> None:
        enqueue(Task.regular("Your quarry is in sigh, but a mightly enemy bars your path!", 1.0))
        nemesis = self.encounters.named_monster(player.level + 3, rng)
        enqueue(Task.regular(f"A desperate struggle commences with {nemesis}", 4.0))

        swing = rng.below(3)
        round_number = 1
        while round_number <= rng.below(player.quest_book.act + 2):
            swing += 1 + rng.below(2)
            phase = swing % 3
            if phase == 0:
                enqueue(Task.regular(f"Locked in grim combat with {nemesis}", 2.0))
            elif phase == 1:
                enqueue(Task.regular(f"{nemesis} seems to have the upper hand", 1.0))
            else:
                enqueue(Task.regular(f"You seem to gain the advantage over {nemesis}", 2.0))
            round_number += 1

        enqueue(Task.regular(f"Victory! {nemesis} is slain! Exhauted, you lose consciousness", 3.0))
        enqueue(Task.regular("You awake in a friendly place, but the road awaits", 2.0))

    def _intrigue(self, rng: Rand, enqueue: Callable[[Task], None]) -> None:
        nemesis = self.encounters.impressive_npc(rng)
        enqueue(Task.regular(f"Oh sweet relief! You've reached the protection of the good {nemesis}", 2.0))
        enqueue(Task.regular(f"There is rejoicing, and an unnerving encounter with {nemesis} in private", 3.0))
        enqueue(Task.regular(f"You forgot your {self.encounters.boring_item(rng)} and go back to get it", 2.0))
        enqueue(Task.regular("What's this!? Your overhead something shocking!", 2.0))
        enqueue(Task.regular(f"Could {nemesis} be a dirty double-dealer?", 2.0))
        enqueue(Task.regular("Who can possibly be trusted with this new?! ... Oh yes, of course.", 3.0))
