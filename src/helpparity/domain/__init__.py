"""Domain models for helpparity."""

from helpparity.domain.help import HelpRecord, ParameterDoc, RelatedLink
from helpparity.domain.parameters import (
    ParameterDescriptor,
    ParameterEntry,
    collapse_parameters,
    find_parameter,
)
from helpparity.domain.report import (
    RuleKind,
    RuleResult,
    ValidationReport,
    ValidationRequest,
)

__all__ = [
    "HelpRecord",
    "ParameterDescriptor",
    "ParameterDoc",
    "ParameterEntry",
    "RelatedLink",
    "RuleKind",
    "RuleResult",
    "ValidationReport",
    "ValidationRequest",
    "collapse_parameters",
    "find_parameter",
]
