"""Test fixtures for the Scriptful test suite."""
import pytest
import sys
from pathlib import Path
from typing import List

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from scriptful.core.item import Item
from scriptful.core.machine import Machine
from scriptful.core.value import Float, Integer, String
from scriptful.op_systems.simple_math import MathOperator, simple_math_op_sys


def noop_op_sys(stack, operator, conditions):
    """Operator system that ignores every operator."""


@pytest.fixture
def math_machine() -> Machine:
    """Machine running the simple math operator system."""
    return Machine(simple_math_op_sys)


@pytest.fixture
def noop_machine() -> Machine:
    """Machine whose operators do nothing."""
    return Machine(noop_op_sys)


@pytest.fixture
def example_script() -> List[Item]:
    """Mixed script covering every value kind and two operators."""
    return [
        Item.value(Integer(1)),
        Item.value(Integer(99999999)),
        Item.operator(MathOperator.Add),
        Item.value(Float(3.14)),
        Item.operator(MathOperator.Mul),
        Item.value(String("Hello, World!")),
        Item.value(String("")),
    ]


@pytest.fixture
def example_bytes() -> bytes:
    """Encoding of example_script."""
    return bytes([
        3, 1, 6, 255, 224, 245, 5, 128, 2, 31, 133, 235, 81, 184, 30, 9, 64, 130, 20, 13, 72,
        101, 108, 108, 111, 44, 32, 87, 111, 114, 108, 100, 33, 19,
    ])
