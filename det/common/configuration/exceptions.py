from typing import Any, Mapping, NamedTuple, Sequence, Type

from det.common.exceptions import DetException, TerminalException


class LookupTrace(NamedTuple):
    provider: str
    sections: Sequence[str]
    key: str
    value: Any


class ConfigurationException(DetException, TerminalException):
    pass


class ConfigFieldMissingException(KeyError, ConfigurationException):
    """Required fields of a configuration were not found in any provider"""

    def __init__(self, spec_name: str, traces: Mapping[str, Sequence[LookupTrace]]) -> None:
        self.spec_name = spec_name
        self.traces = traces
        self.fields = list(traces)
        super().__init__(spec_name)

    def __str__(self) -> str:
        lines = [f"Configuration {self.spec_name} is missing required fields {self.fields}"]
        for field, field_traces in self.traces.items():
            tried = ", ".join(f"{tr.key} ({tr.provider})" for tr in field_traces)
            lines.append(f"\t{field}: tried {tried}")
        return "\n".join(lines)


class ConfigValueCannotBeCoercedException(ConfigurationException, ValueError):
    def __init__(self, field_name: str, field_value: Any, hint: Type[Any]) -> None:
        self.field_name = field_name
        self.field_value = field_value
        self.hint = hint
        super().__init__(f"Value {field_value!r} of field {field_name} is not a valid {hint}")


class ConfigFileNotFoundException(ConfigurationException):
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Missing config file in {path}")


class ConfigFieldMissingTypeHintException(ConfigurationException):
    def __init__(self, field_name: str, spec: Type[Any]) -> None:
        self.field_name = field_name
        self.spec = spec
        super().__init__(f"Field {field_name} of {spec.__name__} must have a type hint")
