import os
import types
from collections.abc import Mapping as C_Mapping, Sequence as C_Sequence
from typing import Any, Dict, List, Literal, Mapping, Type, TypeVar, TYPE_CHECKING, Union

from typing_extensions import TypeAlias, TypedDict, get_args, get_origin, is_typeddict

if TYPE_CHECKING:
    PathLike = os.PathLike[str]
else:
    PathLike = os.PathLike

DictStrAny: TypeAlias = Dict[str, Any]
StrAny: TypeAlias = Mapping[str, Any]  # immutable, covariant entity
StrStr: TypeAlias = Mapping[str, str]  # immutable, covariant entity
TAny = TypeVar("TAny", bound=Any)
TAnyClass = TypeVar("TAnyClass", bound=object)
TFileOrPath = Union[str, PathLike]


def is_union_type(hint: Type[Any]) -> bool:
    """True for `Union[...]`, `Optional[...]` and `X | Y`"""
    return get_origin(hint) in (Union, types.UnionType)


def is_optional_type(hint: Type[Any]) -> bool:
    return is_union_type(hint) and type(None) in get_args(hint)


def extract_union_types(hint: Type[Any], no_none: bool = False) -> List[Any]:
    members = list(get_args(hint))
    if no_none:
        return [m for m in members if m is not type(None)]
    return members


def is_literal_type(hint: Type[Any]) -> bool:
    return get_origin(hint) is Literal


def _origin_is_subclass(hint: Type[Any], base: type) -> bool:
    origin = get_origin(hint)
    return isinstance(origin, type) and issubclass(origin, base)


def is_list_generic_type(hint: Type[Any]) -> bool:
    """True for `List[...]`, `Sequence[...]` and similar"""
    return _origin_is_subclass(hint, C_Sequence)


def is_dict_generic_type(hint: Type[Any]) -> bool:
    """True for `Dict[...]`, `Mapping[...]` and similar"""
    return _origin_is_subclass(hint, C_Mapping)


def extract_inner_type(hint: Type[Any]) -> Type[Any]:
    """Removes `Optional` and replaces `Literal` with the type of its values"""
    if is_optional_type(hint):
        hint = extract_union_types(hint, no_none=True)[0]
    if is_literal_type(hint):
        # literals used in configuration hold values of a single type
        return type(get_args(hint)[0])
    return hint

