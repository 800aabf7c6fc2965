from collections.abc import Sequence
from typing import NamedTuple

from assert_analyzer.models.invocation import Argument, ArgumentUnpacking
from assert_analyzer.models.symbols import MethodSymbol, ParameterKind


class Binding(NamedTuple):
    """Outcome of matching call arguments against one overload."""

    method: MethodSymbol
    omitted_defaults: int
    uses_variadic: bool
    declaration_index: int

    @property
    def rank(self) -> tuple[int, bool, int]:
        return (self.omitted_defaults, self.uses_variadic, self.declaration_index)


def bind_arguments(
    method: MethodSymbol, arguments: Sequence[Argument], declaration_index: int = 0
) -> Binding | None:
    """Match arguments to the parameters of `method` using Python call rules.

    Args:
        method: Candidate overload.
        arguments: Arguments supplied at the call site.
        declaration_index: Position of the candidate among its siblings.

    Returns:
        A binding when the call is valid for this overload, otherwise None.
        Calls that unpack ``*args`` or ``**kwargs`` are never bound.
    """

    if any(arg.unpacking is not ArgumentUnpacking.NONE for arg in arguments):
        return None

    positional: list[Argument] = [arg for arg in arguments if not arg.is_named]
    named: list[Argument] = [arg for arg in arguments if arg.is_named]

    positional_params = [p for p in method.parameters if p.kind.accepts_positional]
    var_positional = any(
        p.kind is ParameterKind.VAR_POSITIONAL for p in method.parameters
    )
    var_keyword = any(p.kind is ParameterKind.VAR_KEYWORD for p in method.parameters)

    uses_variadic: bool = False
    if len(positional) > len(positional_params):
        if not var_positional:
            return None
        uses_variadic = True

    bound: set[str] = {p.name for p in positional_params[: len(positional)]}
    for arg in named:
        param = method.find_parameter(arg.name or "")
        if param is not None and param.kind.accepts_keyword:
            if param.name in bound:
                return None
            bound.add(param.name)
        elif var_keyword:
            uses_variadic = True
        else:
            return None

    omitted_defaults: int = 0
    for param in method.parameters:
        if param.name in bound or param.kind.is_variadic:
            continue
        if param.is_required:
            return None
        omitted_defaults += 1

    return Binding(
        method=method,
        omitted_defaults=omitted_defaults,
        uses_variadic=uses_variadic,
        declaration_index=declaration_index,
    )


def select_overload(
    candidates: Sequence[MethodSymbol], arguments: Sequence[Argument]
) -> MethodSymbol | None:
    """Pick the overload a call binds to.

    The candidate that leaves the fewest defaulted parameters unfilled wins,
    then the one that does not need ``*args``/``**kwargs``, then the first
    declared.
    """

    bindings: list[Binding] = []
    for index, candidate in enumerate(candidates):
        binding = bind_arguments(candidate, arguments, declaration_index=index)
        if binding is not None:
            bindings.append(binding)

    if not bindings:
        return None
    return min(bindings, key=lambda b: b.rank).method
