"""
Unit tests for StrKit split, join and concatenation.
"""

import logging

import pytest

from strkit import UnitError
from strkit import compose
from strkit.compose import concat, join, release_tokens, split


class TestSplit:
    """Tests for splitting by delimiter."""

    def test_basic(self):
        """Test splitting on each delimiter."""
        assert split(b"a,b,c", b",") == [b"a", b"b", b"c"]

    def test_keeps_empty_tokens(self):
        """Test empty tokens between delimiters are kept."""
        assert split(b"a,,b", b",") == [b"a", b"", b"b"]

    def test_leading_and_trailing_delimiters(self):
        """Test delimiters at either end give empty tokens."""
        assert split(b",a,", b",") == [b"", b"a", b""]

    def test_no_delimiter(self):
        """Test text without a delimiter is a single token."""
        assert split(b"abc", b",") == [b"abc"]

    def test_empty_input(self):
        """Test empty input gives one empty token."""
        assert split(b"", b",") == [b""]

    def test_only_delimiters(self):
        """Test delimiters alone give only empty tokens."""
        assert split(b",,", ord(",")) == [b"", b"", b""]

    def test_tokens_are_independent(self):
        """Test tokens share no storage with the input."""
        text = bytearray(b"ab:cd")
        tokens = split(text, b":")
        assert all(isinstance(token, bytearray) for token in tokens)
        tokens[0][0] = ord("X")
        assert text == b"ab:cd"
        assert tokens[1] == b"cd"

    def test_absent(self):
        """Test absent input gives None."""
        assert split(None, b",") is None

    def test_bad_delimiter(self):
        """Test multi-byte delimiters are rejected."""
        with pytest.raises(UnitError):
            split(b"a,b", b",,")

    def test_logs_token_count(self, caplog):
        """Test the token count is logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger="strkit"):
            split(b"a b c", b" ")
        assert "3 tokens" in caplog.text


class TestSplitAllocationFailure:
    """A failed token allocation releases everything built so far."""

    def test_returns_absent(self, failing_allocator):
        """Test a failed token allocation gives None."""
        failing_allocator(compose, succeed=2)
        assert split(b"a,b,c,d", b",") is None

    def test_releases_partial_tokens(self, failing_allocator, monkeypatch):
        """Test tokens built before the failure are released."""
        calls = failing_allocator(compose, succeed=2)
        released = []

        def _spy(tokens):
            released.append([bytes(token) for token in tokens])
            compose_release(tokens)
            released.append(list(tokens))

        compose_release = compose.release_tokens
        monkeypatch.setattr(compose, "release_tokens", _spy)

        assert split(b"a,b,c,d", b",") is None
        assert len(calls) == 3
        assert released == [[b"a", b"b"], []]


class TestReleaseTokens:
    """Tests for releasing a split result."""

    def test_clears_tokens_and_list(self):
        """Test releasing empties every token and the list."""
        tokens = split(b"x;y", b";")
        first = tokens[0]
        release_tokens(tokens)
        assert tokens == []
        assert first == b""

    def test_absent_is_noop(self):
        """Test releasing None does nothing."""
        release_tokens(None)


class TestJoin:
    """Tests for joining with a separator."""

    def test_basic(self):
        """Test joining with a separator."""
        assert join([b"a", b"b", b"c"], b",") == b"a,b,c"

    def test_empty_elements(self):
        """Test empty elements still get separators."""
        assert join([b"", b"x", b""], b"-") == b"-x-"

    def test_single_element(self):
        """Test a single element gets no separator."""
        assert join([b"only"], b",") == b"only"

    def test_no_elements(self):
        """Test no elements gives a new empty buffer."""
        result = join([], b",")
        assert result == bytearray()
        assert result is not None

    def test_absent_sequence(self):
        """Test an absent sequence gives None."""
        assert join(None, b",") is None

    def test_absent_element_counts_as_empty(self):
        """Test an absent element counts as empty."""
        assert join([b"a", None, b"b"], b"+") == b"a++b"

    def test_accepts_generator(self):
        """Test any iterable of buffers can be joined."""
        assert join((part for part in [b"x", b"y"]), ord(" ")) == b"x y"

    def test_allocation_failure(self, failing_allocator):
        """Test join gives None when allocation fails."""
        failing_allocator(compose)
        assert join([b"a", b"b"], b",") is None


class TestConcat:
    """Tests for concatenation."""

    def test_basic(self):
        """Test concatenating two buffers."""
        assert concat(b"foo", b"bar") == b"foobar"

    def test_absent_operands_are_empty(self):
        """Test absent operands count as empty."""
        assert concat(None, b"bar") == b"bar"
        assert concat(b"foo", None) == b"foo"
        assert concat(None, None) == b""

    def test_result_is_new_buffer(self):
        """Test the result is a new buffer."""
        first = bytearray(b"ab")
        result = concat(first, b"")
        assert result == first
        assert result is not first

    def test_allocation_failure(self, failing_allocator):
        """Test concat gives None when allocation fails."""
        failing_allocator(compose)
        assert concat(b"a", b"b") is None
