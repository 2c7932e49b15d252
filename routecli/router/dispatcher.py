"""
Invocation dispatch.

The Dispatcher runs one invocation through a small state machine:

    IDLE -> PARSING -> EXECUTING       handler found and run
                    -> HELP_UNIQUE     'help <command>'
                    -> HELP_CATEGORY   'help', 'help <category>', or no input
                    -> HELP_AMBIGUOUS  no exact match, close candidates found
                    -> NOT_FOUND       nothing matched
                    -> VERSION         '-v' / '--version' with a version message

Every terminal state writes its output and yields an exit code:
EXIT_OK for success and help display, EXIT_ERROR when the handler fails,
EXIT_NOT_FOUND for the not-found and ambiguous paths.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum

from ..constants import (
    EXIT_ERROR,
    EXIT_NOT_FOUND,
    EXIT_OK,
    HELP_KEYWORDS,
    VERSION_FLAGS,
)
from ..exceptions import RouteCliError
from ..help.renderer import HelpRenderer
from ..ui import prompts
from ..ui.output import OutputWriter, StreamOutput
from .errors import (
    AmbiguousCommandError,
    CommandError,
    CommandNotFoundError,
    HandlerError,
)
from .flags import ParsedInvocation, extract_flags, is_flag
from .matcher import Suggestion, command_words
from .registry import HandlerDescriptor
from .router import Router

lg = logging.getLogger(__name__)


class DispatchState(Enum):
    """States of a single dispatch run."""

    IDLE = "idle"
    PARSING = "parsing"
    EXECUTING = "executing"
    HELP_UNIQUE = "help_unique"
    HELP_AMBIGUOUS = "help_ambiguous"
    HELP_CATEGORY = "help_category"
    NOT_FOUND = "not_found"
    VERSION = "version"


@dataclass
class Outcome:
    """What a dispatch run ended in."""

    state: DispatchState
    exit_code: int
    descriptor: HandlerDescriptor | None = None
    invocation: ParsedInvocation | None = None
    suggestions: list[Suggestion] = field(default_factory=list)
    error: RouteCliError | None = None

    @property
    def ok(self) -> bool:
        return self.exit_code == EXIT_OK


def _typo_prompt(name: str) -> str:
    return (
        f"No command with that name exists, but a similar command '{name}' "
        f"does exist. Is this the command you wish to run?"
    )


class Dispatcher:
    """
    Routes one invocation to a handler or a help screen.

    Example:
        dispatcher = Dispatcher(router)
        outcome = dispatcher.dispatch(sys.argv[1:])
        sys.exit(outcome.exit_code)
    """

    def __init__(
        self,
        router: Router,
        renderer: HelpRenderer | None = None,
        out: OutputWriter | None = None,
        err: OutputWriter | None = None,
        confirm_typos: bool = False,
        confirm: Callable[[str], bool] | None = None,
    ) -> None:
        """
        Initialize the dispatcher.

        Args:
            router: Routing table, read-only for the duration of the run
            renderer: Help renderer (defaults to a plain HelpRenderer)
            out: Writer for help and listings (stdout by default)
            err: Writer for error lines (stderr by default)
            confirm_typos: Ask before running a unique close match
            confirm: Yes/no prompt used when confirm_typos is set
        """
        self.router = router
        self.renderer = renderer or HelpRenderer(router.app_name)
        self.out = out or StreamOutput()
        self.err = err or StreamOutput(error=True)
        self.confirm_typos = confirm_typos
        self._confirm = confirm or _interactive_confirm
        self.state = DispatchState.IDLE

    def _enter(self, state: DispatchState) -> None:
        lg.debug("dispatch state %s -> %s", self.state.value, state.value)
        self.state = state

    def _finish(self, state: DispatchState, exit_code: int, **kwargs) -> Outcome:
        self._enter(state)
        return Outcome(state=state, exit_code=exit_code, **kwargs)

    def dispatch(self, argv: Sequence[str]) -> Outcome:
        """
        Route one invocation.

        Args:
            argv: Process arguments without the binary name

        Returns:
            Outcome with the terminal state and exit code
        """
        self.state = DispatchState.IDLE
        self._enter(DispatchState.PARSING)
        tokens = self.router.strip_globals(argv)

        if tokens and tokens[0] in VERSION_FLAGS and self.router.version_message:
            self.out.write(self.renderer.render_version(self.router.version_message))
            return self._finish(DispatchState.VERSION, EXIT_OK)

        if not tokens:
            self.out.write(self.renderer.render_index(self.router))
            return self._finish(DispatchState.HELP_CATEGORY, EXIT_OK)

        if tokens[0].lower() in HELP_KEYWORDS:
            return self._help([t for t in tokens[1:] if not is_flag(t)])

        found = self.router.registry.lookup_prefix(tokens)
        if found is not None:
            descriptor, remaining = found
            return self._execute(descriptor, remaining)

        return self._miss(tokens)

    def _help(self, words: list[str]) -> Outcome:
        if not words:
            self.out.write(self.renderer.render_index(self.router))
            return self._finish(DispatchState.HELP_CATEGORY, EXIT_OK)

        descriptor = self.router.registry.resolve(words)
        if descriptor is not None:
            self.out.write(self.renderer.render_command(descriptor))
            return self._finish(
                DispatchState.HELP_UNIQUE, EXIT_OK, descriptor=descriptor
            )

        category = self.router.categories.get(" ".join(words))
        if category is not None:
            self.out.write(self.renderer.render_category(self.router, category))
            return self._finish(DispatchState.HELP_CATEGORY, EXIT_OK)

        query = " ".join(w.lower() for w in words)
        suggestions = self.router.matcher.suggest(words)
        if suggestions:
            self.out.write(self.renderer.render_suggestions(query, suggestions))
            error: RouteCliError = AmbiguousCommandError(
                query, [s.name for s in suggestions]
            )
        else:
            self.out.write(self.renderer.render_not_found(self.router, query))
            error = CommandNotFoundError(query)
        return self._finish(
            DispatchState.NOT_FOUND,
            EXIT_NOT_FOUND,
            suggestions=suggestions,
            error=error,
        )

    def _execute(self, descriptor: HandlerDescriptor, remaining: list[str]) -> Outcome:
        invocation = extract_flags(remaining, descriptor.value_flags)
        self._enter(DispatchState.EXECUTING)
        lg.debug(
            "executing %r args=%s flags=%s",
            descriptor.name,
            invocation.args,
            sorted(invocation.flags),
        )

        error: CommandError | None = None
        exit_code = EXIT_OK
        try:
            result = descriptor.handler.process(
                invocation.args, invocation.flags, invocation.value_flags
            )
            if result is not None:
                exit_code = int(result)
        except CommandError as e:
            error = e
        except Exception as e:
            lg.debug("command %r raised", descriptor.name, exc_info=True)
            error = HandlerError(descriptor.name, e)

        if error is not None:
            self.err.write(self.renderer.render_error(str(error)))
            exit_code = EXIT_ERROR

        return self._finish(
            DispatchState.EXECUTING,
            exit_code,
            descriptor=descriptor,
            invocation=invocation,
            error=error,
        )

    def _miss(self, tokens: list[str]) -> Outcome:
        words = command_words(tokens)
        query = " ".join(words) or tokens[0]
        suggestions = self.router.matcher.suggest(tokens)

        if not suggestions:
            self.out.write(self.renderer.render_not_found(self.router, query))
            return self._finish(
                DispatchState.NOT_FOUND,
                EXIT_NOT_FOUND,
                error=CommandNotFoundError(query),
            )

        if len(suggestions) == 1 and self.confirm_typos:
            choice = suggestions[0]
            if self._confirm(_typo_prompt(choice.name)):
                consumed = min(len(choice.matched.split(" ")), len(words))
                return self._execute(choice.descriptor, tokens[consumed:])

        self.out.write(self.renderer.render_suggestions(query, suggestions))
        return self._finish(
            DispatchState.HELP_AMBIGUOUS,
            EXIT_NOT_FOUND,
            suggestions=suggestions,
            error=AmbiguousCommandError(query, [s.name for s in suggestions]),
        )


def _interactive_confirm(message: str) -> bool:
    """Ask yes/no; a terminal without a user counts as no."""
    try:
        return prompts.confirm(message, default=False, auto_confirm=False)
    except prompts.NonInteractiveError:
        lg.debug("cannot confirm suggestion without a terminal")
        return False
