from os import environ
from typing import Any, Optional, Type, Tuple

from .provider import ConfigProvider, get_key_name


class EnvironProvider(ConfigProvider):
    @staticmethod
    def get_key_name(key: str, *sections: str) -> str:
        # env key is always upper case
        return get_key_name(key, "__", *sections).upper()

    @property
    def name(self) -> str:
        return "Environment Variables"

    def get_value(self, key: str, hint: Type[Any], *sections: str) -> Tuple[Optional[Any], str]:
        # apply sections to the key
        key = self.get_key_name(key, *sections)
        return environ.get(key, None), key
