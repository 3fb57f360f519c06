import abc
from typing import Any, Tuple, Type, Optional


class ConfigProvider(abc.ABC):
    @abc.abstractmethod
    def get_value(self, key: str, hint: Type[Any], *sections: str) -> Tuple[Optional[Any], str]:
        """Looks for a value under `key` in section(s) `sections`. Returns the value or None
        and the full key that was looked up.
        """

    @property
    @abc.abstractmethod
    def name(self) -> str:
        """Human readable name of config provider"""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"


def get_key_name(key: str, separator: str, /, *sections: str) -> str:
    if sections:
        sections = filter(lambda x: bool(x), sections)  # type: ignore
        env_key = separator.join((*sections, key))
    else:
        env_key = key
    return env_key
