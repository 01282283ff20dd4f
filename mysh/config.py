import os

PROMPT = os.getenv("MYSH_PROMPT", "mysh> ")
BANNER = "Welcome to my shell!"

# directories consulted by `which`, in order
SEARCH_PATH = os.getenv("MYSH_SEARCH_PATH", "/usr/local/bin:/usr/bin:/bin").split(":")

# owner and group read/write, no world access (before umask)
OUTPUT_MODE = 0o660

# longest accepted input line, 0 disables the check
MAX_LINE_LENGTH = int(os.getenv("MYSH_MAX_LINE", "1024"))

_cache_dir = os.getenv("XDG_CACHE_HOME") or os.path.join(os.path.expanduser("~"), ".cache")

LOG_DIR = os.getenv("MYSH_LOG_DIR", os.path.join(_cache_dir, "mysh", "logs"))
LOG_LEVEL = os.getenv("MYSH_LOG_LEVEL", "ERROR")
