import logging
from collections.abc import Iterable, Sequence
from typing import Protocol, runtime_checkable

from assert_analyzer.models.invocation import Invocation
from assert_analyzer.models.symbols import (
    AttributeSymbol,
    MethodSymbol,
    Symbol,
    TypeSymbol,
)
from assert_analyzer.services.overload_binding import select_overload

logger = logging.getLogger(__name__)


@runtime_checkable
class SymbolResolver(Protocol):
    """Protocol defining the semantic queries the inspector relies on."""

    def resolve_method_symbol(self, invocation: Invocation) -> MethodSymbol | None:
        """Bind the member access of a call to one method overload.

        Args:
            invocation: Call whose callee should be resolved.

        Returns:
            The overload selected for the call, or None when the callee is
            unknown or no overload accepts the supplied arguments.
        """
        ...

    def get_members_by_name(self, containing_type: str, name: str) -> Sequence[Symbol]:
        """Return every member of `containing_type` called `name`.

        Args:
            containing_type: Name of the type to look into.
            name: Member name to look up.

        Returns:
            Matching members in declaration order, methods and attributes alike.
        """
        ...


class TypeCatalogResolver:
    """Resolve calls against a fixed catalog of declared types."""

    def __init__(self, types: Iterable[TypeSymbol] = ()) -> None:
        self._types: dict[str, TypeSymbol] = {}
        for type_symbol in types:
            self.register(type_symbol)

    @property
    def type_names(self) -> list[str]:
        return sorted(self._types)

    def register(self, type_symbol: TypeSymbol) -> None:
        """Add a type, merging members into an existing type of the same name."""

        existing = self._types.get(type_symbol.name)
        if existing is None:
            self._types[type_symbol.name] = type_symbol.model_copy(deep=True)
            return

        logger.debug(
            "Merging %d members into already declared type %s",
            len(type_symbol.members),
            type_symbol.name,
        )
        existing.members.extend(m.model_copy() for m in type_symbol.members)

    def get_members_by_name(self, containing_type: str, name: str) -> Sequence[Symbol]:
        type_symbol = self._types.get(containing_type)
        if type_symbol is None:
            return []
        return type_symbol.members_named(name)

    def resolve_method_symbol(self, invocation: Invocation) -> MethodSymbol | None:
        callee = invocation.callee
        if callee is None or callee.receiver_name is None:
            return None

        members = self.get_members_by_name(callee.receiver_name, callee.member)
        candidates: list[MethodSymbol] = [
            m for m in members if isinstance(m, MethodSymbol)
        ]
        if not candidates:
            if any(isinstance(m, AttributeSymbol) for m in members):
                logger.debug(
                    "%s.%s is not a method", callee.receiver_name, callee.member
                )
            return None

        return select_overload(candidates, invocation.arguments or [])
