"""A multi-map binding actions to the user inputs that trigger them."""

from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from actionbind import clashing
from actionbind.actions import (
    AxisValue,
    ButtonValue,
    DualAxisValue,
    Gamepad,
    InputControlKind,
    InputStore,
    TripleAxisValue,
    UpdatedActions,
)
from actionbind.basic_inputs import BasicInputs, ClashStrategy

_LABELS = {
    InputControlKind.BUTTON: "a Buttonlike",
    InputControlKind.AXIS: "an Axislike",
    InputControlKind.DUAL_AXIS: "a DualAxislike",
    InputControlKind.TRIPLE_AXIS: "a TripleAxislike",
}


def _insert_unique(table: Dict[Any, List[Any]], action: Any, value: Any) -> None:
    bindings = table.setdefault(action, [])
    if value not in bindings:
        bindings.append(value)


def _add_pairs(values: Iterable[Tuple[float, ...]], size: int) -> Tuple[float, ...]:
    total = [0.0] * size
    for value in values:
        total = [a + b for a, b in zip(total, value)]
    return tuple(total)


class InputMap:
    """Maps each action to any number of inputs of the action's kind.

    Buttonlike, axislike, dual-axislike and triple-axislike bindings are kept
    apart; an action can only be bound to inputs matching its
    :class:`InputControlKind`. Binding the same input twice to the same
    action has no effect.
    """

    def __init__(self, bindings: Iterable[Tuple[Any, Any]] = ()) -> None:
        self._tables: Dict[InputControlKind, Dict[Any, List[Any]]] = {
            kind: {} for kind in InputControlKind
        }
        self.gamepad: Gamepad = None
        self.insert_multiple(bindings)

    @classmethod
    def from_mapping(cls, mapping: Mapping[Any, Iterable[Any]]) -> "InputMap":
        """Build a map from actions to lists of buttonlike inputs."""
        input_map = cls()
        for action, inputs in mapping.items():
            input_map.insert_one_to_many(action, inputs)
        return input_map

    # Builders

    def with_button(self, action: Any, button: Any) -> "InputMap":
        """Bind a buttonlike input and return the map."""
        return self.insert(action, button)

    def with_axis(self, action: Any, axis: Any) -> "InputMap":
        """Bind an axislike input and return the map."""
        return self.insert_axis(action, axis)

    def with_dual_axis(self, action: Any, dual_axis: Any) -> "InputMap":
        """Bind a dual-axislike input and return the map."""
        return self.insert_dual_axis(action, dual_axis)

    def with_triple_axis(self, action: Any, triple_axis: Any) -> "InputMap":
        """Bind a triple-axislike input and return the map."""
        return self.insert_triple_axis(action, triple_axis)

    def with_one_to_many(self, action: Any, inputs: Iterable[Any]) -> "InputMap":
        """Bind several buttonlike inputs to one action and return the map."""
        return self.insert_one_to_many(action, inputs)

    def with_multiple(self, bindings: Iterable[Tuple[Any, Any]]) -> "InputMap":
        """Add several buttonlike bindings and return the map."""
        return self.insert_multiple(bindings)

    def with_gamepad(self, gamepad: Gamepad) -> "InputMap":
        """Accept gamepad input from the given gamepad only."""
        self.gamepad = gamepad
        return self

    def clear_gamepad(self) -> "InputMap":
        """Accept gamepad input from any gamepad again."""
        self.gamepad = None
        return self

    # Insertion

    def _insert_kind(self, kind: InputControlKind, action: Any, input: Any) -> "InputMap":
        action_kind = action.input_control_kind()
        if action_kind is not kind:
            raise ValueError(
                f"Cannot map {_LABELS[kind]} input for action {action!r} of kind {action_kind.name}"
            )
        _insert_unique(self._tables[kind], action, input)
        return self

    def insert(self, action: Any, button: Any) -> "InputMap":
        """Bind a buttonlike input to a buttonlike action."""
        return self._insert_kind(InputControlKind.BUTTON, action, button)

    def insert_axis(self, action: Any, axis: Any) -> "InputMap":
        """Bind an axislike input to an axislike action."""
        return self._insert_kind(InputControlKind.AXIS, action, axis)

    def insert_dual_axis(self, action: Any, dual_axis: Any) -> "InputMap":
        """Bind a dual-axislike input to a dual-axislike action."""
        return self._insert_kind(InputControlKind.DUAL_AXIS, action, dual_axis)

    def insert_triple_axis(self, action: Any, triple_axis: Any) -> "InputMap":
        """Bind a triple-axislike input to a triple-axislike action."""
        return self._insert_kind(InputControlKind.TRIPLE_AXIS, action, triple_axis)

    def insert_one_to_many(self, action: Any, inputs: Iterable[Any]) -> "InputMap":
        """Bind several buttonlike inputs to one action, skipping duplicates."""
        bindings = self._tables[InputControlKind.BUTTON].setdefault(action, [])
        for input in inputs:
            if input not in bindings:
                bindings.append(input)
        return self

    def insert_multiple(self, bindings: Iterable[Tuple[Any, Any]]) -> "InputMap":
        """Add several (action, buttonlike input) bindings."""
        for action, input in bindings:
            self.insert(action, input)
        return self

    def merge(self, other: "InputMap") -> "InputMap":
        """Add every binding of ``other``, skipping duplicates.

        If the associated gamepads differ, the association is cleared.
        """
        if self.gamepad != other.gamepad:
            self.clear_gamepad()
        for kind, table in other._tables.items():
            for action, inputs in table.items():
                for input in inputs:
                    _insert_unique(self._tables[kind], action, input)
        return self

    # Evaluation

    def pressed(
        self,
        action: Any,
        input_store: InputStore,
        clash_strategy: ClashStrategy = ClashStrategy.PRIORITIZE_LONGEST,
    ) -> bool:
        """Whether the action is pressed once clashes are accounted for."""
        return self.process_actions(input_store, clash_strategy).pressed(action)

    def process_actions(
        self,
        input_store: InputStore,
        clash_strategy: ClashStrategy = ClashStrategy.PRIORITIZE_LONGEST,
        gamepad: Gamepad = None,
    ) -> UpdatedActions:
        """Compute the current value of every bound action.

        Buttonlike actions are pressed if any binding is pressed; axis values
        are the sum of all bindings. Clashing buttonlike actions are then
        removed according to ``clash_strategy``. The map's own gamepad, if
        set, takes precedence over ``gamepad``.
        """
        if self.gamepad is not None:
            gamepad = self.gamepad
        updated = UpdatedActions()

        for action, bindings in self.iter_buttonlike():
            updated[action] = ButtonValue(
                any(binding.pressed(input_store, gamepad) for binding in bindings)
            )
        for action, bindings in self.iter_axislike():
            updated[action] = AxisValue(
                sum((binding.value(input_store, gamepad) for binding in bindings), 0.0)
            )
        for action, bindings in self.iter_dual_axislike():
            updated[action] = DualAxisValue(
                _add_pairs((binding.axis_pair(input_store, gamepad) for binding in bindings), 2)
            )
        for action, bindings in self.iter_triple_axislike():
            updated[action] = TripleAxisValue(
                _add_pairs(
                    (binding.axis_triple(input_store, gamepad) for binding in bindings), 3
                )
            )

        self.handle_clashes(updated, input_store, clash_strategy, gamepad)
        return updated

    # Clashes

    def handle_clashes(
        self,
        updated_actions: UpdatedActions,
        input_store: InputStore,
        clash_strategy: ClashStrategy,
        gamepad: Gamepad,
    ) -> None:
        """Remove overruled actions from ``updated_actions``."""
        clashing.handle_clashes(self, updated_actions, input_store, clash_strategy, gamepad)

    def possible_clashes(self) -> List[clashing.Clash]:
        """Every ordered pair of buttonlike actions that could clash."""
        return clashing.possible_clashes(self)

    def possible_clash(self, action_a: Any, action_b: Any) -> Optional[clashing.Clash]:
        """How the two actions could clash, or ``None``."""
        return clashing.possible_clash(self, action_a, action_b)

    def decomposed(self, action: Any) -> List[BasicInputs]:
        """The decomposed buttons of every binding of the action."""
        bindings = self._tables[action.input_control_kind()].get(action)
        if bindings is None:
            return []
        return [binding.decompose() for binding in bindings]

    # Access

    def iter_buttonlike(self) -> Iterator[Tuple[Any, List[Any]]]:
        """(action, inputs) for every buttonlike action."""
        return iter(self._tables[InputControlKind.BUTTON].items())

    def iter_axislike(self) -> Iterator[Tuple[Any, List[Any]]]:
        """(action, inputs) for every axislike action."""
        return iter(self._tables[InputControlKind.AXIS].items())

    def iter_dual_axislike(self) -> Iterator[Tuple[Any, List[Any]]]:
        """(action, inputs) for every dual-axislike action."""
        return iter(self._tables[InputControlKind.DUAL_AXIS].items())

    def iter_triple_axislike(self) -> Iterator[Tuple[Any, List[Any]]]:
        """(action, inputs) for every triple-axislike action."""
        return iter(self._tables[InputControlKind.TRIPLE_AXIS].items())

    def _bindings(self, kind: InputControlKind) -> Iterator[Tuple[Any, Any]]:
        for action, inputs in self._tables[kind].items():
            for input in inputs:
                yield action, input

    def buttonlike_bindings(self) -> Iterator[Tuple[Any, Any]]:
        """Every (action, input) buttonlike binding."""
        return self._bindings(InputControlKind.BUTTON)

    def axislike_bindings(self) -> Iterator[Tuple[Any, Any]]:
        """Every (action, input) axislike binding."""
        return self._bindings(InputControlKind.AXIS)

    def dual_axislike_bindings(self) -> Iterator[Tuple[Any, Any]]:
        """Every (action, input) dual-axislike binding."""
        return self._bindings(InputControlKind.DUAL_AXIS)

    def triple_axislike_bindings(self) -> Iterator[Tuple[Any, Any]]:
        """Every (action, input) triple-axislike binding."""
        return self._bindings(InputControlKind.TRIPLE_AXIS)

    def buttonlike_actions(self) -> Iterator[Any]:
        """Every action with buttonlike bindings."""
        return iter(self._tables[InputControlKind.BUTTON])

    def axislike_actions(self) -> Iterator[Any]:
        """Every action with axislike bindings."""
        return iter(self._tables[InputControlKind.AXIS])

    def dual_axislike_actions(self) -> Iterator[Any]:
        """Every action with dual-axislike bindings."""
        return iter(self._tables[InputControlKind.DUAL_AXIS])

    def triple_axislike_actions(self) -> Iterator[Any]:
        """Every action with triple-axislike bindings."""
        return iter(self._tables[InputControlKind.TRIPLE_AXIS])

    def get(self, action: Any) -> Optional[List[Any]]:
        """A copy of the inputs bound to the action, or ``None``."""
        bindings = self._tables[action.input_control_kind()].get(action)
        return None if bindings is None else list(bindings)

    def get_buttonlike(self, action: Any) -> Optional[List[Any]]:
        """The buttonlike inputs bound to the action, or ``None``."""
        return self._tables[InputControlKind.BUTTON].get(action)

    def get_axislike(self, action: Any) -> Optional[List[Any]]:
        """The axislike inputs bound to the action, or ``None``."""
        return self._tables[InputControlKind.AXIS].get(action)

    def get_dual_axislike(self, action: Any) -> Optional[List[Any]]:
        """The dual-axislike inputs bound to the action, or ``None``."""
        return self._tables[InputControlKind.DUAL_AXIS].get(action)

    def get_triple_axislike(self, action: Any) -> Optional[List[Any]]:
        """The triple-axislike inputs bound to the action, or ``None``."""
        return self._tables[InputControlKind.TRIPLE_AXIS].get(action)

    def __len__(self) -> int:
        return sum(len(inputs) for table in self._tables.values() for inputs in table.values())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InputMap):
            return NotImplemented
        return self._tables == other._tables and self.gamepad == other.gamepad

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        tables = {kind.name: table for kind, table in self._tables.items() if table}
        return f"InputMap({tables!r}, gamepad={self.gamepad!r})"

    # Removal

    def clear(self) -> None:
        """Remove every binding."""
        for table in self._tables.values():
            table.clear()

    def clear_action(self, action: Any) -> None:
        """Remove every binding of the action."""
        self._tables[action.input_control_kind()].pop(action, None)

    def remove_at(self, action: Any, index: int) -> bool:
        """Remove the action's binding at ``index``; False if there is none."""
        bindings = self._tables[action.input_control_kind()].get(action)
        if bindings is None or not 0 <= index < len(bindings):
            return False
        del bindings[index]
        return True

    def remove(self, action: Any, input: Any) -> Optional[int]:
        """Remove a buttonlike binding, returning its former index or ``None``."""
        bindings = self._tables[InputControlKind.BUTTON].get(action)
        if bindings is None or input not in bindings:
            return None
        index = bindings.index(input)
        del bindings[index]
        return index