import re
from typing import Any, Optional, Tuple

import yaml
from yaml.constructor import ConstructorError
from yaml.nodes import MappingNode


class UniqueKeySafeLoader(yaml.SafeLoader):
    """Safe loader that keeps plain scalars as text and fails on duplicate keys.

    Only `~`, `null` and empty values resolve implicitly (to None). Values such as `off`,
    `2024`, `1.50` or `2024-01-01` stay strings exactly as written, both as values and as
    mapping keys. Explicit tags (`!!int 5`) are still honored.
    """

    yaml_implicit_resolvers: Any = {}

    def construct_mapping(self, node: MappingNode, deep: bool = False) -> Any:
        if isinstance(node, MappingNode):
            # merge `<<` keys first so they are not reported as duplicates
            self.flatten_mapping(node)
            seen = set()
            for key_node, _ in node.value:
                key = self.construct_object(key_node, deep=deep)
                try:
                    is_duplicate = key in seen
                except TypeError:
                    # unhashable keys are reported by the base constructor
                    continue
                if is_duplicate:
                    raise ConstructorError(
                        "while constructing a mapping",
                        node.start_mark,
                        f"found duplicate key {key!r}",
                        key_node.start_mark,
                    )
                seen.add(key)
        return super().construct_mapping(node, deep=deep)


UniqueKeySafeLoader.add_implicit_resolver(
    "tag:yaml.org,2002:null", re.compile(r"^(?:~|null|Null|NULL|)$"), ["~", "n", "N", ""]
)
UniqueKeySafeLoader.add_implicit_resolver(
    "tag:yaml.org,2002:merge", re.compile(r"^(?:<<)$"), ["<"]
)


def load_yaml(content: str) -> Any:
    """Decodes a single YAML document. Empty document decodes to None"""
    return yaml.load(content, Loader=UniqueKeySafeLoader)


def get_error_position(exc: yaml.YAMLError) -> Optional[Tuple[int, int]]:
    """Returns 1-based (line, column) of the problem reported by `exc` if available"""
    # PyYAML uses 0-based line/column
    mark = getattr(exc, "problem_mark", None) or getattr(exc, "context_mark", None)
    if mark is None:
        return None
    return mark.line + 1, mark.column + 1
