from .provider import ConfigProvider
from .environ import EnvironProvider


__all__ = [
    "ConfigProvider",
    "EnvironProvider",
]
