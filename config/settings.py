# config/settings.py

# A* weights
# The path cost (g) of every step is multiplied by this
DEFAULT_G_WEIGHT = 10
# The straight-line estimate (h) is multiplied by this; above the g weight the
# search turns greedy and may return longer routes
DEFAULT_H_WEIGHT = 30
# Loop budget for a single search, None = unbounded
DEFAULT_MAX_LOOPS = None

LOG_LEVEL = "INFO"

# File name of the pathfinder configuration inside the config directory
PATHFINDER_CONFIG_FILE = "pathfinder.yml"

# Board legend
OPEN_CHAR = "."
BLOCKED_CHAR = "#"
START_CHAR = "S"
DESTINATION_CHAR = "D"
# Route marker, only used when rendering
PATH_CHAR = "*"
