from .base_configuration import BaseConfiguration, configspec  # noqa: F401
from .run_configuration import RunConfiguration  # noqa: F401
