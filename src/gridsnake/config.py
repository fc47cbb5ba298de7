from __future__ import annotations

# Simulation
ROWS, COLS = 48, 48
DEFAULT_LENGTH = 10
TICK_MS = 100
FOOD_POINTS = 10

# Window
CELL = 12
HEADER = 56
FOOTER = 170
FPS = 60

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
GRID_BG = (24, 24, 24)
FOOD_COLOR = (220, 40, 40)
BODY_COLOR = (40, 180, 60)
HEAD_COLOR = (150, 255, 120)
BUTTON_COLOR = (70, 70, 90)
BUTTON_TEXT = (235, 235, 235)
GAME_OVER_COLOR = (255, 80, 80)

BUTTON_W, BUTTON_H = 96, 32
FONT_SIZE = 24

# Raw input identifiers -> direction. Browser arrow key names and pygame.key.name().
KEY_BINDINGS = {
    "ArrowUp": "UP",
    "ArrowDown": "DOWN",
    "ArrowLeft": "LEFT",
    "ArrowRight": "RIGHT",
    "up": "UP",
    "down": "DOWN",
    "left": "LEFT",
    "right": "RIGHT",
}
