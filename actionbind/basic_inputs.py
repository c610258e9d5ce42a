"""Clash strategies and the flat button decomposition of user inputs.

Buttonlike actions clash when the buttons of one binding are a strict
subset of another's: ``Ctrl + S`` and ``S`` clash, ``S`` and ``W`` do not.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple

from actionbind.actions import Buttonlike


class ClashStrategy(Enum):
    """How clashing inputs are handled by an input map."""

    PRESS_ALL = "press_all"
    """All matching inputs are always pressed."""

    PRIORITIZE_LONGEST = "prioritize_longest"
    """Only the action with the longest chord is pressed (the default)."""

    @classmethod
    def variants(cls) -> Tuple["ClashStrategy", ...]:
        """All possible clash strategies."""
        return (cls.PRESS_ALL, cls.PRIORITIZE_LONGEST)


class _Kind(Enum):
    NONE = "none"
    SIMPLE = "simple"
    COMPOSITE = "composite"
    CHORD = "chord"


@dataclass(frozen=True)
class BasicInputs:
    """A flat list of the buttonlike inputs that make up a user input.

    * ``none``: no buttons involved, e.g. a joystick axis.
    * ``simple``: a single button.
    * ``composite``: one logical input triggered by any of several buttons,
      e.g. a virtual D-pad.
    * ``chord``: several buttons that must be pressed together.
    """

    kind: _Kind
    members: Tuple[Buttonlike, ...] = ()

    @classmethod
    def none(cls) -> "BasicInputs":
        """An input with no buttonlike parts."""
        return cls(_Kind.NONE, ())

    @classmethod
    def simple(cls, input: Buttonlike) -> "BasicInputs":
        """A single fundamental button."""
        return cls(_Kind.SIMPLE, (input,))

    @classmethod
    def composite(cls, inputs: Iterable[Buttonlike]) -> "BasicInputs":
        """One logical input that any of the given buttons can trigger."""
        return cls(_Kind.COMPOSITE, tuple(inputs))

    @classmethod
    def chord(cls, inputs: Iterable[Buttonlike]) -> "BasicInputs":
        """A group of buttons that must be pressed together."""
        return cls(_Kind.CHORD, tuple(inputs))

    def inputs(self) -> list:
        """The underlying buttons.

        Do not use this to measure the input for clash purposes; use ``len``.
        """
        return list(self.members)

    def compose(self, other: "BasicInputs") -> "BasicInputs":
        """A composite made of the buttons of both inputs."""
        return BasicInputs.composite([*self.inputs(), *other.inputs()])

    def __len__(self) -> int:
        """The number of logical buttons: a composite counts as one."""
        if self.kind is _Kind.NONE:
            return 0
        if self.kind is _Kind.CHORD:
            return len(self.members)
        return 1

    def clashes_with(self, other: "BasicInputs") -> bool:
        """Whether the two decomposed inputs clash with each other."""
        a, b = self.kind, other.kind
        mine, theirs = self.members, other.members

        if a is _Kind.NONE or b is _Kind.NONE:
            return False
        if a is _Kind.SIMPLE and b is _Kind.SIMPLE:
            return False
        if a is _Kind.SIMPLE and b is _Kind.CHORD:
            return len(theirs) > 1 and mine[0] in theirs
        if a is _Kind.CHORD and b is _Kind.SIMPLE:
            return len(mine) > 1 and theirs[0] in mine
        if a is _Kind.SIMPLE and b is _Kind.COMPOSITE:
            return mine[0] in theirs
        if a is _Kind.COMPOSITE and b is _Kind.SIMPLE:
            return theirs[0] in mine
        if a is _Kind.COMPOSITE and b is _Kind.CHORD:
            return len(theirs) > 1 and any(button in mine for button in theirs)
        if a is _Kind.CHORD and b is _Kind.COMPOSITE:
            return len(mine) > 1 and any(button in theirs for button in mine)
        if a is _Kind.CHORD and b is _Kind.CHORD:
            return (
                len(mine) > 1
                and len(theirs) > 1
                and mine != theirs
                and (
                    all(button in theirs for button in mine)
                    or all(button in mine for button in theirs)
                )
            )
        # Both composite.
        return any(button in mine for button in theirs) or any(
            button in theirs for button in mine
        )