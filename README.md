# actionbind

Bind abstract game actions such as "Jump", "Move" or "Save" to concrete inputs
like keys, buttons, axes and chords. Each frame, the library works out which
actions are active. When one key chord contains another, it resolves the clash.

## Modules

| Module | Contents |
| --- | --- |
| `actionbind.actions` | `InputControlKind`, `Actionlike`, `InputStore`, the input bases `Buttonlike`, `Axislike`, `DualAxislike`, `TripleAxislike`, the value types `ButtonValue`, `AxisValue`, `DualAxisValue`, `TripleAxisValue`, and `UpdatedActions` |
| `actionbind.basic_inputs` | `ClashStrategy` and `BasicInputs` |
| `actionbind.clashing` | `Clash` and the functions `possible_clash`, `possible_clashes`, `check_clash`, `get_clashes`, `resolve_clash`, `handle_clashes` |
| `actionbind.input_map` | `InputMap` |
| `actionbind.conditions` | `action_pressed`, `action_just_pressed`, `action_just_released`, `action_toggle_active` |

## Concepts

- **Actions** are hashable values, usually enum members that mix in
  `Actionlike`. `input_control_kind()` returns `InputControlKind.BUTTON` by
  default. Override it for axis, dual-axis or triple-axis actions.
- **Inputs** subclass one of the four input bases and must be hashable.
  - By default, a `Buttonlike` is pressed when the `InputStore` has a value
    above 0.0 for it.
  - Its `decompose()` returns `BasicInputs.simple(self)`.
  - The axis bases read their value from the store, and their `decompose()`
    returns `BasicInputs.none()`.
- **`InputStore`** holds raw input state. You fill it with:
  - `press`, `release` and `set_button_value`
  - `set_value`, `set_axis_pair` and `set_axis_triple`

  Every setter takes an optional gamepad. A value recorded without a gamepad
  is seen by every gamepad query.
- **`InputMap`** binds each action to any number of inputs of its own kind.
  - `insert`, `insert_axis`, `insert_dual_axis`, `insert_triple_axis`,
    `insert_one_to_many` and `insert_multiple` add bindings.
  - The `with_*` builders do the same and return the map.
  - A binding that already exists is ignored.
  - Binding an input to an action of the wrong kind raises `ValueError`, and
    the map is left unchanged.
- **`InputMap.process_actions(input_store, clash_strategy, gamepad)`** returns
  an `UpdatedActions` dict.
  - A button action is `ButtonValue(True)` if any of its bindings is pressed.
  - Axis actions hold the sum of the values of their bindings.
  - A gamepad set on the map with `with_gamepad` takes precedence over the
    `gamepad` argument.
- **`ClashStrategy`** decides what happens when the buttons of one binding
  are a strict subset of another's. For example, `Ctrl + S` and `S`.
  - `PRESS_ALL` keeps every action.
  - `PRIORITIZE_LONGEST` is the default. Of the two actions, it keeps the one
    with the longer chord and drops the other from the result.
  - The clash is ignored if the two actions are also pressed for a reason that
    does not clash.
  - Only buttonlike bindings take part in clash detection.
- **`BasicInputs`** is the flat decomposition used to detect clashes. It has
  four forms:
  - `none()`
  - `simple(input)`
  - `composite(inputs)`: any one of the inputs triggers it, and it counts as
    one button.
  - `chord(inputs)`: all the inputs must be pressed together.

  `len()` gives the number of logical buttons. `clashes_with(other)` reports
  whether two decompositions clash.

## Example

```python
from dataclasses import dataclass
from enum import Enum

from actionbind.actions import Actionlike, Buttonlike, InputStore
from actionbind.basic_inputs import BasicInputs, ClashStrategy
from actionbind.input_map import InputMap


class Key(Buttonlike, Enum):
    CTRL = "ctrl"
    S = "s"


@dataclass(frozen=True)
class Chord(Buttonlike):
    keys: tuple

    def pressed(self, input_store, gamepad):
        return all(key.pressed(input_store, gamepad) for key in self.keys)

    def decompose(self):
        return BasicInputs.chord(self.keys)


class Action(Actionlike, Enum):
    SAVE = "save"
    DOWN = "down"


input_map = InputMap([
    (Action.DOWN, Key.S),
    (Action.SAVE, Chord((Key.CTRL, Key.S))),
])

store = InputStore()
store.press(Key.CTRL)
store.press(Key.S)

input_map.pressed(Action.SAVE, store)   # True
input_map.pressed(Action.DOWN, store)   # False: overruled by the longer chord
input_map.pressed(Action.DOWN, store, ClashStrategy.PRESS_ALL)  # True

updated = input_map.process_actions(store, ClashStrategy.PRIORITIZE_LONGEST, None)
updated.pressed(Action.SAVE)            # True
```

## Run conditions

Each function in `actionbind.conditions` returns a callable. The callable
takes an action-state object and returns a bool. The object must provide
`pressed(action)`, `just_pressed(action)` and `just_released(action)`.

`action_toggle_active(default, action)` starts at `default`. Its value flips
on every call in which the action was just pressed.

## What the package does not do

- It does not read devices or window events. You fill the `InputStore`
  yourself.
- It has no action-state type that tracks presses over time. The run
  conditions expect you to supply an object with `pressed`, `just_pressed` and
  `just_released`.
- It provides no concrete keys, mouse buttons, gamepad sticks, virtual D-pads
  or chord types. You define inputs by subclassing the input bases, as in the
  example.
- It has no serialisation, no plugin or scheduling integration, and no
  command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```