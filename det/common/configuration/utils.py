from typing import Any, Sequence, Type

from det.common import logger
from det.common.typing import (
    TAny,
    extract_inner_type,
    extract_union_types,
    get_args,
    is_literal_type,
    is_optional_type,
)
from det.common.configuration.exceptions import ConfigValueCannotBeCoercedException, LookupTrace

TRUE_VALUES = ("true", "1", "yes", "on")
FALSE_VALUES = ("false", "0", "no", "off")


def _coerce_to_type(value: Any, hint: Type[Any]) -> Any:
    if hint is bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            if value.strip().lower() in TRUE_VALUES:
                return True
            if value.strip().lower() in FALSE_VALUES:
                return False
        raise ValueError(value)
    if hint in (int, float):
        if isinstance(value, bool):
            raise ValueError(value)
        return hint(value)
    if hint is str:
        if isinstance(value, (str, int, float)) and not isinstance(value, bool):
            return str(value)
        raise ValueError(value)
    if not isinstance(value, hint):
        raise ValueError(value)
    return value


def deserialize_value(key: str, value: Any, hint: Type[TAny]) -> TAny:
    """Coerces `value` coming from a config provider (typically a string) into `hint`"""
    if hint is Any:
        return value  # type: ignore[no-any-return]
    try:
        literal_hint = hint
        if is_optional_type(hint):
            literal_hint = extract_union_types(hint, no_none=True)[0]
        value = _coerce_to_type(value, extract_inner_type(hint))
        if is_literal_type(literal_hint) and value not in get_args(literal_hint):
            raise ValueError(value)
        return value  # type: ignore[no-any-return]
    except Exception as exc:
        raise ConfigValueCannotBeCoercedException(key, value, hint) from exc


def log_traces(config: Any, key: str, hint: Type[Any], value: Any, traces: Sequence[LookupTrace]) -> None:
    if logger.is_logging() and logger.log_level() == "DEBUG":
        logger.debug(
            f"Field {key} with type {hint} in {type(config).__name__}"
            f" {'NOT RESOLVED' if value is None else 'RESOLVED'}"
        )
        for tr in traces:
            logger.debug(str(tr))
