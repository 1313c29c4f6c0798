PROMPT = "$ "
FAREWELL = "Exit"

MAX_ALIASES = 10
MAX_COMMANDS = 100

# Status used for "command not found", failed exec and failed fork
EXIT_FAILURE = 1
