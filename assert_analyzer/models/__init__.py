from .base import SourceLocation, StaticAnalyzerIssue, StaticAnalyzerReport
from .descriptors import (
    DESCRIPTORS_BY_KIND,
    DIAGNOSTIC_ID,
    MESSAGE_OMITTED_RULE,
    OVERLOAD_RULE,
    SUPPORTED_DIAGNOSTICS,
)
from .diagnostic import (
    Diagnostic,
    DiagnosticDescriptor,
    DiagnosticKind,
    DiagnosticReport,
    DiagnosticSeverity,
)
from .invocation import Argument, ArgumentUnpacking, Invocation, MemberAccess
from .symbols import (
    AttributeSymbol,
    MethodSymbol,
    ParameterKind,
    ParameterSymbol,
    Symbol,
    TypeSymbol,
)

__all__ = [
    "SourceLocation",
    "StaticAnalyzerIssue",
    "StaticAnalyzerReport",
    "DESCRIPTORS_BY_KIND",
    "DIAGNOSTIC_ID",
    "MESSAGE_OMITTED_RULE",
    "OVERLOAD_RULE",
    "SUPPORTED_DIAGNOSTICS",
    "Diagnostic",
    "DiagnosticDescriptor",
    "DiagnosticKind",
    "DiagnosticReport",
    "DiagnosticSeverity",
    "Argument",
    "ArgumentUnpacking",
    "Invocation",
    "MemberAccess",
    "AttributeSymbol",
    "MethodSymbol",
    "ParameterKind",
    "ParameterSymbol",
    "Symbol",
    "TypeSymbol",
]
