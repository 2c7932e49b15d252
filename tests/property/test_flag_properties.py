"""Property-based tests for token classification and prefix lookup."""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from routecli.router.flags import extract_flags, is_flag
from routecli.router.registry import CommandRegistry
from tests.helpers.commands import RecordingCommand

positionals = st.text(alphabet="abcxyz.0123", min_size=1, max_size=6)
flag_tokens = st.sampled_from(["-a", "-b", "--ssl", "--name", "--ip-address"])
tokens = st.lists(st.one_of(positionals, flag_tokens), max_size=10)


@pytest.mark.property
@pytest.mark.unit
class TestExtractFlagsProperties:
    """Properties of extract_flags()."""

    @given(tokens=tokens)
    def test_without_value_flags_every_token_is_classified(
        self, tokens: list[str]
    ) -> None:
        inv = extract_flags(tokens)

        assert inv.args == [t for t in tokens if not is_flag(t)]
        assert inv.flags == {t for t in tokens if is_flag(t)}
        assert inv.value_flags == {}

    @given(tokens=tokens)
    def test_value_flags_never_boolean(self, tokens: list[str]) -> None:
        inv = extract_flags(tokens, ["--name"])

        assert "--name" not in inv.flags
        assert ("--name" in inv.value_flags) == ("--name" in tokens)

    @given(tokens=tokens)
    def test_no_token_invented(self, tokens: list[str]) -> None:
        inv = extract_flags(tokens, ["--name", "--ip-address"])

        values = [v for v in inv.value_flags.values() if v is not None]
        assert len(inv.args) + len(values) <= len(tokens)
        assert set(inv.args) <= set(tokens)
        assert inv.flags <= set(tokens)


@pytest.mark.property
@pytest.mark.unit
class TestLookupProperties:
    """Properties of CommandRegistry.lookup_prefix()."""

    @given(
        words=st.lists(
            st.text(alphabet="abcdef", min_size=1, max_size=6), min_size=1, max_size=3
        ),
        rest=st.lists(positionals, max_size=3),
    )
    @settings(max_examples=100)
    def test_registered_name_found_in_any_case(
        self, words: list[str], rest: list[str]
    ) -> None:
        registry = CommandRegistry()
        registry.register(words, handler=RecordingCommand())

        found = registry.lookup_prefix([w.upper() for w in words] + rest)

        assert found is not None
        descriptor, remaining = found
        assert descriptor.tokens == tuple(words)
        assert remaining == rest
