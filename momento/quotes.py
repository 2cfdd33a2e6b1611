"""Rotating inspirational quotes."""

import random
from typing import Optional, Sequence

from momento.models import Quote

DEFAULT_QUOTES = (
    Quote(text="Be yourself; everyone else is already taken.", author="Oscar Wilde"),
    Quote(text="You are enough just as you are."),
    Quote(text="Do something today your future self will thank you for."),
    Quote(text="Breathe. You're doing better than you think."),
    Quote(text="It's a good day to have a good day."),
    Quote(text="Feel the feelings, then let them go."),
    Quote(text="Inhale confidence. Exhale doubt."),
)


class QuoteProvider:
    """Serves a current quote and rotates to a new one on request."""

    def __init__(
        self,
        quotes: Sequence[Quote] = DEFAULT_QUOTES,
        rng: Optional[random.Random] = None,
    ):
        if not quotes:
            raise ValueError("QuoteProvider needs at least one quote")
        self._quotes = tuple(quotes)
        self._rng = rng or random.Random()
        self._current = self._quotes[0]

    @property
    def current(self) -> Quote:
        return self._current

    def fetch_new(self) -> Quote:
        """Pick a random quote, different from the current one when possible."""
        choices = [q for q in self._quotes if q != self._current] or list(self._quotes)
        self._current = self._rng.choice(choices)
        return self._current
