# conftest.py
"""Shared fixtures. Pygame runs headless through SDL's dummy drivers."""
import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest
import pygame

from theme import ThemeManager
from surface import SurfaceManager


class FakeViewport:
    """A host viewport whose size the test controls."""
    def __init__(self, width, height):
        self.width = width
        self.height = height
        self.reads = 0

    def __call__(self):
        self.reads += 1
        return self.width, self.height


@pytest.fixture
def viewport():
    return FakeViewport(1000, 500)


@pytest.fixture
def theme():
    return ThemeManager()


@pytest.fixture
def surface(viewport, theme):
    return SurfaceManager(viewport, theme)


@pytest.fixture(scope="session", autouse=True)
def pygame_session():
    pygame.init()
    yield
    pygame.quit()
