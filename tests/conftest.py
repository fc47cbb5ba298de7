import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest


class ScriptedRng:
    """Stands in for random.Random; hands out queued values, then repeats the last one."""

    def __init__(self, *values):
        self.values = list(values)
        self.calls = 0

    def randrange(self, n):
        self.calls += 1
        value = self.values.pop(0) if len(self.values) > 1 else self.values[0]
        assert 0 <= value < n
        return value


class FakeClock:
    def __init__(self, now=0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def pygame_ready():
    pygame.init()
    yield
    pygame.quit()
