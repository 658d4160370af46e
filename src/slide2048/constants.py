GRID_SIZE = 4
WIN_TILE = 2048
STARTING_TILES = 2

# Spawn value roll: 2 most of the time, 4 otherwise.
SPAWN_FOUR_PROBABILITY = 0.1

# Special variant rolls. Only one roll is made per spawn; the first threshold
# reached by the current top tile decides which variant is rolled for.
WILD_SPAWN_THRESHOLD = 64
WILD_SPAWN_PROBABILITY = 0.12
DOUBLER_SPAWN_THRESHOLD = 32
DOUBLER_SPAWN_PROBABILITY = 0.10

# Power-up uses granted at the start of every game.
DEFAULT_POWER_USES = {
    "wild": 1,
    "bomb": 1,
    "shuffle": 1,
}

LEADERBOARD_SIZE = 5

# Key-value store keys
STORAGE_KEY_BEST = "best-2048"
STORAGE_KEY_LEADERBOARD = "leaderboard-2048"
