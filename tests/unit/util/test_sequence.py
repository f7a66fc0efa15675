"""Unit tests for request sequencing."""

from shiki.util.sequence import RequestSequence


class TestRequestSequence:
    """Tests for RequestSequence."""

    def test_latest_token_is_current(self):
        sequence = RequestSequence()
        first = sequence.issue()
        second = sequence.issue()

        assert not sequence.is_current(first)
        assert sequence.is_current(second)
        assert sequence.latest == second

    def test_tokens_increase(self):
        sequence = RequestSequence()
        tokens = [sequence.issue() for _ in range(3)]
        assert tokens == sorted(tokens)
        assert len(set(tokens)) == 3
