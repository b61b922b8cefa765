from __future__ import annotations

import pytest

from fit.commands import CommandContext
from fit.styles import StyleSheet


@pytest.fixture
def styles() -> StyleSheet:
    return StyleSheet.plain()


@pytest.fixture
def context() -> CommandContext:
    return CommandContext()
