from typing import Any, Dict, List, Optional, Sequence, Tuple, Type, TypeVar

from det.common.typing import is_optional_type
from det.common.configuration.providers import ConfigProvider, EnvironProvider
from det.common.configuration.specs.base_configuration import BaseConfiguration
from det.common.configuration.utils import deserialize_value, log_traces
from det.common.configuration.exceptions import ConfigFieldMissingException, LookupTrace

TConfiguration = TypeVar("TConfiguration", bound=BaseConfiguration)


def resolve_configuration(config: TConfiguration, *, sections: Tuple[str, ...] = ()) -> TConfiguration:
    """Fills fields of `config` from environment variables.

    Each field is looked up under `sections` (by default the `__section__` of the
    configuration) and then under fewer and fewer sections down to the bare key, so
    `RUNTIME__LOG_LEVEL` wins over `LOG_LEVEL`. Found values are coerced to the field hint,
    fields without a value keep their defaults.

    Raises:
        ConfigFieldMissingException: a required field has no value
        ConfigValueCannotBeCoercedException: a value does not match the field hint
    """
    if config.is_resolved():
        return config
    if not sections and config.__section__:
        sections = (config.__section__,)
    providers: List[ConfigProvider] = [EnvironProvider()]

    missing: Dict[str, Sequence[LookupTrace]] = {}
    for key, hint in config.get_resolvable_fields().items():
        value, traces = _lookup_value(key, hint, sections, providers)
        log_traces(config, key, hint, value, traces)
        if value is not None:
            setattr(config, key, deserialize_value(key, value, hint))
        elif getattr(config, key) is None and not is_optional_type(hint):
            missing[key] = traces
    if missing:
        raise ConfigFieldMissingException(type(config).__name__, missing)

    config.on_resolved()
    config.__is_resolved__ = True
    return config


def _lookup_value(
    key: str, hint: Type[Any], sections: Tuple[str, ...], providers: Sequence[ConfigProvider]
) -> Tuple[Optional[Any], List[LookupTrace]]:
    traces: List[LookupTrace] = []
    for provider in providers:
        for depth in range(len(sections), -1, -1):
            value, full_key = provider.get_value(key, hint, *sections[:depth])
            traces.append(LookupTrace(provider.name, sections[:depth], full_key, value))
            if value is not None:
                return value, traces
    return None, traces
