"""Run conditions built from an action state.

Each factory returns a callable taking an action state object that offers
``pressed``, ``just_pressed`` and ``just_released`` for an action.
"""

from __future__ import annotations

from typing import Any, Callable

Condition = Callable[[Any], bool]


def action_toggle_active(default: bool, action: Any) -> Condition:
    """A stateful condition that flips each time the action is just pressed."""
    active = default

    def condition(action_state: Any) -> bool:
        nonlocal active
        active ^= bool(action_state.just_pressed(action))
        return active

    return condition


def action_pressed(action: Any) -> Condition:
    """A condition active while the action is pressed."""
    return lambda action_state: action_state.pressed(action)


def action_just_pressed(action: Any) -> Condition:
    """A condition active when the action was just pressed."""
    return lambda action_state: action_state.just_pressed(action)


def action_just_released(action: Any) -> Condition:
    """A condition active when the action was just released."""
    return lambda action_state: action_state.just_released(action)