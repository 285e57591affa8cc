# Configuration for the Hammurabi game
#
# Every value can be overridden from the environment (or a .env file loaded
# by your shell). Command line flags in run_game.py take precedence.

import os

# Length of a reign in years
YEARS_TO_PLAY = int(os.getenv("HAMMURABI_YEARS", "3"))

# Save slot used by the "quit" option
SAVE_FILE = os.getenv("HAMMURABI_SAVE_FILE", "savegame.txt")

# Message catalog: "en" or "ru"
LANGUAGE = os.getenv("HAMMURABI_LANGUAGE", "en")

# Fixed seed for reproducible games; unset seeds from the clock once at startup
_seed = os.getenv("HAMMURABI_SEED")
SEED = int(_seed) if _seed else None

# Give up on a question after this many bad answers; unset asks forever
_max_attempts = os.getenv("HAMMURABI_MAX_INPUT_ATTEMPTS")
MAX_INPUT_ATTEMPTS = int(_max_attempts) if _max_attempts else None

# Log file; narration goes to stdout so log lines are kept out of it
LOG_FILE = os.getenv("HAMMURABI_LOG_FILE", "hammurabi.log")

# Example .env file content:
# HAMMURABI_YEARS=10
# HAMMURABI_LANGUAGE=ru
# HAMMURABI_SEED=1234
