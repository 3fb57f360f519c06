import os

# job configuration file used by the cli when no path is passed must not come from the developer environment
for _key in ("CONFIG_FILE_PATH", "LOG_LEVEL", "LOG_FORMAT"):
    os.environ.pop("RUNTIME__" + _key, None)
    os.environ.pop(_key, None)

# fixtures shared by all test modules
from tests.utils import preserve_environ, reset_logger_and_debug  # noqa: E402, F401
