import pytest

from tests.helpers import make_character
from winded.game.actors.components import StatusEffectsComponent
from winded.game.actors.status_effects import StatusEffect, WindedEffect


class CountingEffect(StatusEffect):
    """Records every lifecycle hook so tests can check the order of calls."""

    def __init__(self, duration: int = 2, can_stack: bool = False) -> None:
        super().__init__(name="Counting", duration=duration, can_stack=can_stack)
        self.calls: list[str] = []

    def apply_on_start(self, character) -> None:
        self.calls.append("start")

    def apply_turn_effect(self, character) -> None:
        self.calls.append("turn")

    def remove_effect(self, character) -> None:
        self.calls.append("remove")


def test_winded_effect_expires_after_its_duration() -> None:
    character = make_character()
    character.status_effects.apply_status_effect(WindedEffect(duration=2))

    character.update_turn()
    assert character.is_winded
    character.update_turn()
    assert not character.is_winded


def test_winded_effect_defaults_to_configured_duration() -> None:
    effect = WindedEffect()
    assert effect.duration == 10
    assert effect.name == "Winded"
    assert not effect.can_stack


def test_reapplying_refreshes_instead_of_stacking() -> None:
    effects = StatusEffectsComponent()
    effects.apply_status_effect(WindedEffect(duration=10))
    effects.update_turn()
    effects.update_turn()

    effects.apply_status_effect(WindedEffect(duration=10))

    assert len(effects.get_all_status_effects()) == 1
    assert effects.get_all_status_effects()[0].duration == 10


def test_refresh_never_shortens_duration() -> None:
    effects = StatusEffectsComponent()
    effects.apply_status_effect(WindedEffect(duration=10))
    effects.apply_status_effect(WindedEffect(duration=3))
    assert effects.get_all_status_effects()[0].duration == 10


@pytest.mark.parametrize(
    ("existing", "incoming", "expected"),
    [
        (4, 10, 10),
        (10, 4, 10),
        (-1, 5, -1),
        (5, -1, -1),
    ],
)
def test_refresh_durations(existing: int, incoming: int, expected: int) -> None:
    effect = WindedEffect(duration=existing)
    effect.refresh(WindedEffect(duration=incoming))
    assert effect.duration == expected


def test_stackable_effects_accumulate() -> None:
    effects = StatusEffectsComponent()
    effects.apply_status_effect(CountingEffect(can_stack=True))
    effects.apply_status_effect(CountingEffect(can_stack=True))
    assert len(effects.get_status_effects_by_type(CountingEffect)) == 2


def test_lifecycle_hooks_run_in_order() -> None:
    effects = StatusEffectsComponent()
    effect = CountingEffect(duration=2)
    effects.apply_status_effect(effect)

    effects.update_turn()
    effects.update_turn()

    assert effect.calls == ["start", "turn", "turn", "remove"]
    assert not effects.has_status_effect(CountingEffect)


def test_indefinite_effect_stays_until_removed() -> None:
    effects = StatusEffectsComponent()
    effect = CountingEffect(duration=-1)
    effects.apply_status_effect(effect)

    for _ in range(20):
        effects.update_turn()
    assert effects.has_status_effect(CountingEffect)

    removed = effects.remove_status_effect(CountingEffect)
    assert removed == [effect]
    assert effect.calls[-1] == "remove"
    assert len(effects.get_all_status_effects()) == 0


def test_catch_breath_clears_winded() -> None:
    character = make_character()
    character.status_effects.apply_status_effect(WindedEffect())
    character.catch_breath()
    assert not character.is_winded
