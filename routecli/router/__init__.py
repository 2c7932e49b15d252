"""
Command routing.

Registration (Router), lookup (CommandRegistry, CategoryTree), typo
suggestions (Matcher), argument splitting (extract_flags) and invocation
dispatch (Dispatcher).
"""

from .categories import Category, CategoryListing, CategoryTree
from .dispatcher import Dispatcher, DispatchState, Outcome
from .errors import (
    AmbiguousCommandError,
    CommandError,
    CommandNotFoundError,
    CommandRegistrationError,
    DuplicateCategoryError,
    DuplicateCommandError,
    HandlerError,
    InvalidParamError,
    LookupFailure,
    MissingRequiredFlagError,
    MissingRequiredParamError,
    RegistrationError,
    UnknownParentError,
)
from .flags import GlobalFlag, GlobalFlagValues, ParsedInvocation, extract_flags
from .matcher import Matcher, Suggestion, levenshtein
from .registry import CommandRegistry, HandlerDescriptor
from .router import Router

__all__ = [
    # Routing
    "Router",
    "Dispatcher",
    "DispatchState",
    "Outcome",
    "CommandRegistry",
    "HandlerDescriptor",
    "Category",
    "CategoryListing",
    "CategoryTree",
    "Matcher",
    "Suggestion",
    "levenshtein",
    "GlobalFlag",
    "GlobalFlagValues",
    "ParsedInvocation",
    "extract_flags",
    # Errors
    "RegistrationError",
    "CommandRegistrationError",
    "DuplicateCommandError",
    "UnknownParentError",
    "DuplicateCategoryError",
    "LookupFailure",
    "CommandNotFoundError",
    "AmbiguousCommandError",
    "CommandError",
    "MissingRequiredParamError",
    "MissingRequiredFlagError",
    "InvalidParamError",
    "HandlerError",
]
