"""Core vocabulary: action kinds, input traits, the input store and updated action values."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Hashable, Optional, Tuple

Gamepad = Optional[Hashable]
Pair = Tuple[float, float]
Triple = Tuple[float, float, float]


class InputControlKind(Enum):
    """The kind of data an action or input produces."""

    BUTTON = "button"
    AXIS = "axis"
    DUAL_AXIS = "dual_axis"
    TRIPLE_AXIS = "triple_axis"


class Actionlike:
    """Mixin for action types.

    Actions are hashable values, typically enum members. By default every
    action is buttonlike; override :meth:`input_control_kind` to change that.
    """

    def input_control_kind(self) -> InputControlKind:
        return InputControlKind.BUTTON


class InputStore:
    """Holds the current raw state of every input, optionally per gamepad.

    Values recorded without a gamepad apply to every gamepad query; values
    recorded for a gamepad are only visible when that gamepad is asked for.
    """

    def __init__(self) -> None:
        self._buttons: dict[tuple[Any, Gamepad], float] = {}
        self._axes: dict[tuple[Any, Gamepad], float] = {}
        self._pairs: dict[tuple[Any, Gamepad], Pair] = {}
        self._triples: dict[tuple[Any, Gamepad], Triple] = {}

    @staticmethod
    def _lookup(table: dict, input: Any, gamepad: Gamepad, default: Any) -> Any:
        if (input, gamepad) in table:
            return table[(input, gamepad)]
        return table.get((input, None), default)

    def press(self, input: Any, gamepad: Gamepad = None) -> None:
        """Record the input as fully pressed."""
        self.set_button_value(input, 1.0, gamepad)

    def release(self, input: Any, gamepad: Gamepad = None) -> None:
        """Record the input as released."""
        self.set_button_value(input, 0.0, gamepad)

    def set_button_value(self, input: Any, value: float, gamepad: Gamepad = None) -> None:
        """Record the analogue value of a buttonlike input."""
        self._buttons[(input, gamepad)] = float(value)

    def button_value(self, input: Any, gamepad: Gamepad = None) -> float:
        """The recorded value of a buttonlike input, 0.0 if unknown."""
        return self._lookup(self._buttons, input, gamepad, 0.0)

    def pressed(self, input: Any, gamepad: Gamepad = None) -> bool:
        """Whether a buttonlike input is currently pressed."""
        return self.button_value(input, gamepad) > 0.0

    def set_value(self, input: Any, value: float, gamepad: Gamepad = None) -> None:
        """Record the value of a single-axis input."""
        self._axes[(input, gamepad)] = float(value)

    def value(self, input: Any, gamepad: Gamepad = None) -> float:
        """The recorded value of a single-axis input, 0.0 if unknown."""
        return self._lookup(self._axes, input, gamepad, 0.0)

    def set_axis_pair(self, input: Any, pair: Pair, gamepad: Gamepad = None) -> None:
        """Record the value of a dual-axis input."""
        x, y = pair
        self._pairs[(input, gamepad)] = (float(x), float(y))

    def axis_pair(self, input: Any, gamepad: Gamepad = None) -> Pair:
        """The recorded value of a dual-axis input, zero if unknown."""
        return self._lookup(self._pairs, input, gamepad, (0.0, 0.0))

    def set_axis_triple(self, input: Any, triple: Triple, gamepad: Gamepad = None) -> None:
        """Record the value of a triple-axis input."""
        x, y, z = triple
        self._triples[(input, gamepad)] = (float(x), float(y), float(z))

    def axis_triple(self, input: Any, gamepad: Gamepad = None) -> Triple:
        """The recorded value of a triple-axis input, zero if unknown."""
        return self._lookup(self._triples, input, gamepad, (0.0, 0.0, 0.0))


class Buttonlike:
    """Base for hashable inputs that are either pressed or released."""

    def pressed(self, input_store: InputStore, gamepad: Gamepad) -> bool:
        return input_store.pressed(self, gamepad)

    def button_value(self, input_store: InputStore, gamepad: Gamepad) -> float:
        return input_store.button_value(self, gamepad)

    def decompose(self):
        """The buttonlike parts of this input; a single button by default."""
        from actionbind.basic_inputs import BasicInputs

        return BasicInputs.simple(self)


class Axislike:
    """Base for hashable inputs producing a single value."""

    def value(self, input_store: InputStore, gamepad: Gamepad) -> float:
        return input_store.value(self, gamepad)

    def decompose(self):
        """The buttonlike parts of this input; none by default."""
        from actionbind.basic_inputs import BasicInputs

        return BasicInputs.none()


class DualAxislike:
    """Base for hashable inputs producing an (x, y) pair."""

    def axis_pair(self, input_store: InputStore, gamepad: Gamepad) -> Pair:
        return input_store.axis_pair(self, gamepad)

    def decompose(self):
        """The buttonlike parts of this input; none by default."""
        from actionbind.basic_inputs import BasicInputs

        return BasicInputs.none()


class TripleAxislike:
    """Base for hashable inputs producing an (x, y, z) triple."""

    def axis_triple(self, input_store: InputStore, gamepad: Gamepad) -> Triple:
        return input_store.axis_triple(self, gamepad)

    def decompose(self):
        """The buttonlike parts of this input; none by default."""
        from actionbind.basic_inputs import BasicInputs

        return BasicInputs.none()


@dataclass(frozen=True)
class ButtonValue:
    """Updated state of a buttonlike action."""

    pressed: bool


@dataclass(frozen=True)
class AxisValue:
    """Updated value of an axislike action."""

    value: float


@dataclass(frozen=True)
class DualAxisValue:
    """Updated value of a dual-axislike action."""

    pair: Pair


@dataclass(frozen=True)
class TripleAxisValue:
    """Updated value of a triple-axislike action."""

    triple: Triple


class UpdatedActions(dict):
    """Mapping from action to its freshly computed value."""

    def pressed(self, action: Any) -> bool:
        """True if the action is buttonlike and pressed."""
        updated = self.get(action)
        return isinstance(updated, ButtonValue) and updated.pressed