from typing import Final

from assert_analyzer.models.diagnostic import (
    DiagnosticDescriptor,
    DiagnosticKind,
    DiagnosticSeverity,
)

DIAGNOSTIC_ID: Final[str] = "AssertsAnalyzer"
CATEGORY: Final[str] = "Syntax"

MESSAGE_OMITTED_RULE: Final[DiagnosticDescriptor] = DiagnosticDescriptor(
    id=DIAGNOSTIC_ID,
    kind=DiagnosticKind.MESSAGE_PARAMETER_OMITTED,
    title="Assertion method called without a failure message",
    message_format="Assertion method '{0}' is called without a failure message",
    category=CATEGORY,
    severity=DiagnosticSeverity.WARNING,
    description=(
        "The called overload accepts a 'message' argument. Pass it so that a "
        "failing assertion explains what went wrong."
    ),
)

OVERLOAD_RULE: Final[DiagnosticDescriptor] = DiagnosticDescriptor(
    id=DIAGNOSTIC_ID,
    kind=DiagnosticKind.OVERLOAD_WITH_MESSAGE_AVAILABLE,
    title="Assertion method without message used, but an overload with message exists",
    message_format=(
        "Assertion method '{0}' is called without a failure message; "
        "use the overload that accepts 'message'"
    ),
    category=CATEGORY,
    severity=DiagnosticSeverity.WARNING,
    description="An overload with a 'message' parameter exists and should be used.",
)

SUPPORTED_DIAGNOSTICS: Final[tuple[DiagnosticDescriptor, ...]] = (
    MESSAGE_OMITTED_RULE,
    OVERLOAD_RULE,
)

DESCRIPTORS_BY_KIND: Final[dict[DiagnosticKind, DiagnosticDescriptor]] = {
    descriptor.kind: descriptor for descriptor in SUPPORTED_DIAGNOSTICS
}
