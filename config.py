# config.py

# Game difficulty settings
MAZE_SIZE = 20
NUM_DOORS = 10
NUM_MASTER_KEYS = 5

# Request limits for the API
MIN_MAZE_SIZE = 1
MAX_MAZE_SIZE = 100
MAX_DOORS = 100

DEFAULT_PORT = 5000
