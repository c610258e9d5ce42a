"""Detection and resolution of clashing buttonlike bindings.

An input map here is any object offering ``buttonlike_actions()`` and
``get_buttonlike(action)``, the latter returning the list of buttonlike
inputs bound to the action or ``None`` if it has none.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, List, Optional

from actionbind.actions import Buttonlike, Gamepad, InputStore, UpdatedActions
from actionbind.basic_inputs import ClashStrategy


@dataclass
class Clash:
    """Two actions that clash, with the inputs of each that take part."""

    action_a: Any
    action_b: Any
    inputs_a: List[Buttonlike] = field(default_factory=list)
    inputs_b: List[Buttonlike] = field(default_factory=list)

    def _copy(self) -> "Clash":
        return Clash(self.action_a, self.action_b, list(self.inputs_a), list(self.inputs_b))


def _pressed_inputs(
    inputs: List[Buttonlike], input_store: InputStore, gamepad: Gamepad
) -> Iterator[Buttonlike]:
    return (input for input in inputs if input.pressed(input_store, gamepad))


def possible_clash(input_map: Any, action_a: Any, action_b: Any) -> Optional[Clash]:
    """How the two actions could clash, or ``None`` if they never can."""
    inputs_a = input_map.get_buttonlike(action_a)
    if inputs_a is None:
        return None
    clash = Clash(action_a, action_b)
    for input_a in inputs_a:
        inputs_b = input_map.get_buttonlike(action_b)
        if inputs_b is None:
            return None
        for input_b in inputs_b:
            if input_a.decompose().clashes_with(input_b.decompose()):
                clash.inputs_a.append(input_a)
                clash.inputs_b.append(input_b)
    return clash if clash.inputs_a else None


def possible_clashes(input_map: Any) -> List[Clash]:
    """Every ordered pair of buttonlike actions that could clash."""
    actions = list(input_map.buttonlike_actions())
    return [
        clash
        for action_a in actions
        for action_b in actions
        if (clash := possible_clash(input_map, action_a, action_b)) is not None
    ]


def check_clash(clash: Clash, input_store: InputStore, gamepad: Gamepad) -> Optional[Clash]:
    """The clash as it stands given the current inputs, or ``None``.

    The returned clash keeps the inputs of the given one and gains every
    pair of currently pressed inputs that clash.
    """
    actual = clash._copy()
    for input_a in _pressed_inputs(clash.inputs_a, input_store, gamepad):
        for input_b in _pressed_inputs(clash.inputs_b, input_store, gamepad):
            if input_a.decompose().clashes_with(input_b.decompose()):
                actual.inputs_a.append(input_a)
                actual.inputs_b.append(input_b)
    return actual if clash.inputs_a else None


def get_clashes(
    input_map: Any,
    updated_actions: UpdatedActions,
    input_store: InputStore,
    gamepad: Gamepad,
) -> List[Clash]:
    """The clashes between actions that are both currently pressed."""
    clashes = []
    for clash in possible_clashes(input_map):
        if updated_actions.pressed(clash.action_a) and updated_actions.pressed(clash.action_b):
            actual = check_clash(clash, input_store, gamepad)
            if actual is not None:
                clashes.append(actual)
    return clashes


def resolve_clash(
    clash: Clash,
    clash_strategy: ClashStrategy,
    input_store: InputStore,
    gamepad: Gamepad,
) -> Optional[Any]:
    """The action of the clash to discard, if any."""
    reasons_a = list(_pressed_inputs(clash.inputs_a, input_store, gamepad))
    reasons_b = list(_pressed_inputs(clash.inputs_b, input_store, gamepad))

    # Any non-clashing reason for both presses makes the clash spurious.
    for reason_a in reasons_a:
        for reason_b in reasons_b:
            if not reason_a.decompose().clashes_with(reason_b.decompose()):
                return None

    if clash_strategy is ClashStrategy.PRESS_ALL:
        return None

    longest_a = max((len(reason.decompose()) for reason in reasons_a), default=0)
    longest_b = max((len(reason.decompose()) for reason in reasons_b), default=0)
    if longest_a > longest_b:
        return clash.action_b
    if longest_a < longest_b:
        return clash.action_a
    return None


def handle_clashes(
    input_map: Any,
    updated_actions: UpdatedActions,
    input_store: InputStore,
    clash_strategy: ClashStrategy,
    gamepad: Gamepad,
) -> None:
    """Remove from ``updated_actions`` every action overruled by a clash."""
    for clash in get_clashes(input_map, updated_actions, input_store, gamepad):
        culled = resolve_clash(clash, clash_strategy, input_store, gamepad)
        if culled is not None:
            updated_actions.pop(culled, None)