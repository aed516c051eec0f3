from __future__ import annotations

from winded.events import GameEvent, subscribe_to_event
from winded.game.actors import Character, StaminaTuning
from winded.game.enums import MovementMode, Trait


def make_character(
    max_stamina: int = 10000,
    *,
    burn_rate: int = 15,
    regen_rate: float = 20.0,
    burden: float = 0.0,
    mouth_encumbrance: int = 0,
    traits: set[Trait] | None = None,
) -> Character:
    """Create a full-stamina walking character carrying ``burden`` x capacity.

    Capacity is fixed at 100000 grams so ``burden`` maps to whole grams the
    same way an inventory of 1 g items would.
    """
    capacity = 100000
    return Character(
        "Dummy",
        max_stamina=max_stamina,
        tuning=StaminaTuning(base_burn_rate=burn_rate, base_regen_rate=regen_rate),
        carried_weight=round(capacity * burden),
        weight_capacity=capacity,
        mouth_encumbrance=mouth_encumbrance,
        traits=traits,
    )


def actual_burn_rate(character: Character, mode: MovementMode) -> int:
    """Return the stamina burned by one turn of movement from full stamina."""
    character.stamina.set_stamina(character.stamina.stamina_max)
    character.catch_breath()
    assert character.set_movement_mode(mode)

    before = character.stamina.stamina
    character.burn_move_stamina(character.tuning.moves_per_turn)
    after = character.stamina.stamina
    assert before > after
    return before - after


def actual_regen_rate(character: Character, moves: int) -> int:
    """Return the stamina regained over ``moves``, starting from 10% stamina."""
    character.stamina.set_stamina(character.stamina.stamina_max // 10)
    before = character.stamina.stamina
    character.update_stamina(moves)
    return character.stamina.stamina - before


class EventRecorder:
    """Collect every published event of the given types."""

    def __init__(self, *event_types: type[GameEvent]) -> None:
        self.events: list[GameEvent] = []
        for event_type in event_types:
            subscribe_to_event(event_type, self.events.append)

    def of_type(self, event_type: type[GameEvent]) -> list[GameEvent]:
        return [e for e in self.events if isinstance(e, event_type)]
