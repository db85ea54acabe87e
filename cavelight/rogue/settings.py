from __future__ import annotations

# Window / render
CELL_SIZE: int = 18                  # px per glyph cell
FONT_SIZE: int = 20
HUD_HEIGHT: int = 28
WINDOW_TITLE: str = "Cavelight"

# Map (tiles)
MAP_WIDTH: int = 50
MAP_HEIGHT: int = 50

# Cave generation
WALL_FREQUENCY: float = 0.4
CAVE_ITERATIONS: int = 3
CAVE_WALL_THRESHOLD: int = 5        # walls in the 3x3 block (self included) to fill a floor
WATER_FREQUENCY: float = 0.02

# Sight / camera
SIGHT_RADIUS: int = 10
RAY_ANGLE_STEP: float = 0.02        # radians between rays

# Derived window size: one (2r+1)^2 viewport plus the HUD line
VIEW_SIDE: int = 2 * SIGHT_RADIUS + 1
SCREEN_WIDTH: int = VIEW_SIDE * CELL_SIZE
SCREEN_HEIGHT: int = VIEW_SIDE * CELL_SIZE + HUD_HEIGHT
SCREEN_SIZE: tuple[int, int] = (SCREEN_WIDTH, SCREEN_HEIGHT)

# Timestep (render tick)
TICK_MS: int = 100
MAX_TICKS: int = 3
FPS_CAP: int = 60

# Colors (pygame color names)
DEFAULT_FG: str = "white"
DEFAULT_BG: str = "black"
PLAYER_COLOR: str = "green"
GOBLIN_COLOR: str = "red"
CORPSE_COLOR: str = "darkred"
WATER_COLOR: str = "dodgerblue"
HUD_BG: str = "gray10"
HUD_TEXT: str = "gray90"
FREE_LOOK_TEXT: str = "yellow"

# Draw order (higher paints last)
DRAW_ORDER_CORPSE: int = 0
DRAW_ORDER_MONSTER: int = 10
DRAW_ORDER_PLAYER: int = 20

# Population
ENEMY_COUNT: int = 8
ENEMY_CHASE_RADIUS: int = 8

# --- Combat ---
PLAYER_MAX_HP: int = 20
PLAYER_ATTACK_BONUS: int = 4
PLAYER_DEFENSE: int = 12
PLAYER_DAMAGE: str = "1d8+1"

GOBLIN_MAX_HP: int = 7
GOBLIN_ATTACK_BONUS: int = 2
GOBLIN_DEFENSE: int = 10
GOBLIN_DAMAGE: str = "1d6"

ATTACK_DIE: str = "1d20"
CRIT_ROLL: int = 20                 # natural roll that always crits
FUMBLE_ROLL: int = 1                # natural roll that always misses

# Corpses
GOBLIN_REVIVE_TURNS: int | None = 25   # None = stays dead
PLAYER_REVIVE_TURNS: int | None = None

# Message log
MESSAGE_LOG_SIZE: int = 50

# --- Logging ---
LOG_LEVEL: str = "INFO"
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# --- RNG (optional seed; None = random) ---
RNG_SEED: int | None = None
