"""Closed error-variant declarations.

A variant set is declared once per error domain as a ``Variants`` subclass.
Each annotation names a tag and its detail type; ``None`` marks a unit
variant that carries no detail.

Example:
    ```python
    class ParseErrors(Variants, undetailed=('empty',)):
        invalid_number: str
        negative: int

    ParseErrors.tags()                 # frozenset({'invalid_number', 'negative', 'empty'})
    ParseErrors.detail_type('negative')  # <class 'int'>
    ParseErrors.has_detail('empty')      # False
    ```
"""

from __future__ import annotations

import inspect
import types
from collections.abc import Iterable, Mapping
from typing import Any, ClassVar

from tagged_result.errors import NonExhaustiveMatchError

__all__ = ['Variants', 'undetailed']

_UNIT = (None, type(None), 'None')


def _own_annotations(cls: type) -> dict[str, Any]:
    try:
        return inspect.get_annotations(cls, eval_str=True)
    except NameError:
        return inspect.get_annotations(cls)


class Variants:
    """Base class for a closed mapping of failure tag to detail type.

    The mapping is computed once at class creation and exposed read-only as
    ``__variants__``. Subclasses inherit their parent's tags. Variant classes
    are declarations only and are never instantiated.
    """

    __variants__: ClassVar[Mapping[str, Any]] = types.MappingProxyType({})

    def __init_subclass__(cls, /, *, undetailed: Iterable[str] = (), **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        declared: dict[str, Any] = dict(cls.__variants__)
        for tag, detail_type in _own_annotations(cls).items():
            if tag.startswith('_'):
                continue
            declared[tag] = None if detail_type in _UNIT else detail_type
        for tag in undetailed:
            declared[tag] = None
        cls.__variants__ = types.MappingProxyType(declared)

    def __new__(cls, *args: Any, **kwargs: Any) -> Variants:
        msg = f'{cls.__name__} is a variant declaration and cannot be instantiated'
        raise TypeError(msg)

    @classmethod
    def tags(cls) -> frozenset[str]:
        """Return the closed set of declared tags."""
        return frozenset(cls.__variants__)

    @classmethod
    def detail_type(cls, tag: str) -> Any:
        """Return the declared detail type for ``tag`` (``None`` for unit variants).

        Raises:
            KeyError: If ``tag`` is not declared.
        """
        return cls.__variants__[tag]

    @classmethod
    def has_detail(cls, tag: str) -> bool:
        """Return True if ``tag`` carries a detail payload."""
        return cls.__variants__[tag] is not None

    @classmethod
    def declares(cls, tag: str) -> bool:
        """Return True if ``tag`` belongs to this variant set."""
        return tag in cls.__variants__

    @classmethod
    def require_exhaustive(cls, handlers: Mapping[str, Any]) -> None:
        """Check that ``handlers`` covers exactly the declared tags.

        Raises:
            NonExhaustiveMatchError: If a tag has no handler, or a handler names
                an undeclared tag.
        """
        declared = cls.tags()
        given = frozenset(handlers)
        if given != declared:
            raise NonExhaustiveMatchError(missing=declared - given, unexpected=given - declared)


def undetailed(*tags: str, name: str = 'Undetailed') -> type[Variants]:
    """Build a variant set whose tags all carry no detail.

    Example:
        ```python
        Lookup = undetailed('not_found', 'forbidden')
        Lookup.has_detail('not_found')  # False
        ```
    """
    return types.new_class(name, (Variants,), {'undetailed': tags})
