from __future__ import annotations
from typing import Any, Sequence, TypeVar

import pytreeclass as tc
from pytreeclass._src.code_build import (
    NULL,
    ArgKindType,
    Field,
    build_init_method,
    convert_hints_to_fields,
    dataclass_transform,
)
from pytreeclass._src.code_build import (
    field as tc_field,
)


class TreeClass(tc.TreeClass):
    """Immutable tree class. Attributes can only be set during __init__ and __post_init__,
    afterwards every modification has to create a new instance.
    """


T = TypeVar("T")


def field(
    *,
    default: Any = NULL,
    init: bool = True,
    repr: bool = True,
    kind: ArgKindType = "KW_ONLY",
    metadata: dict[str, Any] | None = None,
    on_setattr: Sequence[Any] = (),
    on_getattr: Sequence[Any] = (),
    alias: str | None = None,
) -> Any:
    """
    A wrapper for pytreeclass fields, which defaults to keyword-only arguments.

    Args:
        default (Any, optional): The default value for the field. Defaults to NULL (required).
        init (bool, optional): Whether to include the field in __init__. Defaults to True.
        repr (bool, optional): Whether to include the field in __repr__. Defaults to True.
        kind (ArgKindType, optional): The argument kind (POS_ONLY, POS_OR_KW, etc.). Defaults to KW_ONLY.
        metadata (dict[str, Any] | None, optional): Additional metadata for the field. Defaults to None.
        on_setattr (Sequence[Any], optional): Additional setattr callbacks. Defaults to no callbacks.
        on_getattr (Sequence[Any], optional): Additional getattr callbacks. Defaults to no callbacks.
        alias (str | None, optional): Alternative name for the field in __init__. Defaults to None

    Returns:
        Any: A Field instance
    """
    return tc_field(
        default=default,
        init=init,
        repr=repr,
        kind=kind,
        metadata=metadata,
        on_setattr=on_setattr,
        on_getattr=on_getattr,
        alias=alias,
    )


def frozen_field(
    *,
    default: Any = NULL,
    init: bool = True,
    repr: bool = True,
    kind: ArgKindType = "KW_ONLY",
    metadata: dict[str, Any] | None = None,
    on_setattr: Sequence[Any] = (),
    on_getattr: Sequence[Any] = (),
    alias: str | None = None,
) -> Any:
    """Creates a field that freezes on set and unfreezes on get. Frozen values are
    not leaves of the pytree, so they are invisible to jax transformations.

    Args:
        default (Any, optional): The default value for the field. Defaults to NULL (required).
        init (bool, optional): Whether to include the field in __init__. Defaults to True.
        repr (bool, optional): Whether to include the field in __repr__. Defaults to True.
        kind (ArgKindType, optional): The argument kind (POS_ONLY, POS_OR_KW, etc.). Defaults to KW_ONLY.
        metadata (dict[str, Any] | None, optional): Additional metadata for the field. Defaults to None.
        on_setattr (Sequence[Any], optional): Additional setattr callbacks (applied after freezing).
        on_getattr (Sequence[Any], optional): Additional getattr callbacks (applied after unfreezing).
        alias (str | None, optional): Alternative name for the field in __init__. Defaults to None

    Returns:
        Any: A Field instance configured with freeze/unfreeze behavior
    """
    return tc_field(
        default=default,
        init=init,
        repr=repr,
        kind=kind,
        metadata=metadata,
        on_setattr=list(on_setattr) + [tc.freeze],
        on_getattr=[tc.unfreeze] + list(on_getattr),
        alias=alias,
    )


def frozen_private_field(
    *,
    default: Any = None,
    init: bool = False,
    repr: bool = True,
    kind: ArgKindType = "KW_ONLY",
    metadata: dict[str, Any] | None = None,
) -> Any:
    """Frozen field which is excluded from __init__ and has to be set in __post_init__."""
    return frozen_field(
        default=default,
        init=init,
        repr=repr,
        kind=kind,
        metadata=metadata,
    )


@dataclass_transform(
    field_specifiers=(Field, tc_field, frozen_field, frozen_private_field, field),
    kw_only_default=True,
)
def autoinit(klass: type[T]) -> type[T]:
    """Wrapper around tc.autoinit that preserves parameter requirement information"""
    return (
        klass
        # if the class already has a user-defined __init__ method
        # then return the class as is without any modification
        if "__init__" in vars(klass)
        # first convert the current class hints to fields
        # then build the __init__ method from the fields of the current class
        # and any base classes that are decorated with `autoinit`
        else build_init_method(convert_hints_to_fields(klass))
    )
