"""
Pytest configuration for the palette viewer tests.

- Puts the project root on sys.path (flat module layout)
- Selects the offscreen Qt platform so window tests run headless
- Shared fake color providers
"""

import os
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from palette import FAMILIES, SHADES, Color, ColorSlot  # noqa: E402


def slot_color(slot: ColorSlot) -> Color:
    """A distinct, never-black color for every slot"""
    row = SHADES.index(slot.shade)
    column = FAMILIES.index(slot.family)
    return Color(0xFF000000 | (row << 16) | (column << 8) | 0x01)


class FakeProvider:
    """Resolves every slot to slot_color() except the ones listed as failing"""

    def __init__(self, failing=()):
        self.failing = set(failing)
        self.calls = []

    def get_color(self, slot: ColorSlot) -> Color:
        self.calls.append(slot)
        if slot in self.failing:
            raise LookupError(f"{slot.resource_name} missing")
        return slot_color(slot)


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def make_provider():
    return FakeProvider


@pytest.fixture
def expected_color():
    return slot_color
