"""
A sample operator system over a custom value kind, doubling as an example of
a state machine.

Put any Creature into the machine, apply Commands, and watch it evolve or
devolve.
"""

from __future__ import annotations

from enum import Enum

from scriptful.core.condition_stack import ConditionStack
from scriptful.core.stack import Stack


class Creature(Enum):
    """Simply the first nine."""
    Bulbasaur = "Bulbasaur"
    Ivysaur = "Ivysaur"
    Venusaur = "Venusaur"
    Charmander = "Charmander"
    Charmeleon = "Charmeleon"
    Charizard = "Charizard"
    Squirtle = "Squirtle"
    Wartortle = "Wartortle"
    Blastoise = "Blastoise"


class Command(Enum):
    Evolve = "Evolve"
    Devolve = "Devolve"
    Close = "Close"


EVOLUTIONS = {
    Creature.Bulbasaur: Creature.Ivysaur,
    Creature.Ivysaur: Creature.Venusaur,
    Creature.Charmander: Creature.Charmeleon,
    Creature.Charmeleon: Creature.Charizard,
    Creature.Squirtle: Creature.Wartortle,
    Creature.Wartortle: Creature.Blastoise,
}

DEVOLUTIONS = {after: before for before, after in EVOLUTIONS.items()}


def pokemon_op_sys(stack: Stack, operator: Command, conditions: ConditionStack) -> None:
    creature = stack.pop()
    if operator == Command.Evolve:
        stack.push(EVOLUTIONS.get(creature, creature))
    elif operator == Command.Devolve:
        stack.push(DEVOLUTIONS.get(creature, creature))
    # Close leaves the creature out of the machine.
