# apps/adapters/profanity/fake.py
"""
Fake Profanity Checker for testing

Matches a fixed word list without calling the remote service.
"""
from typing import Iterable, List, Optional

DEFAULT_PROFANITIES = ["비속어", "욕설"]


class FakeProfanityChecker:
    """
    Fake profanity checker implementation for unit testing

    A text is profane when it contains any configured word.
    """

    def __init__(self, words: Optional[Iterable[str]] = None):
        """
        Initialize fake checker

        Args:
            words: Disallowed words, defaults to DEFAULT_PROFANITIES
        """
        self._words: List[str] = list(words) if words is not None else list(DEFAULT_PROFANITIES)
        self.checked_texts: List[str] = []

    def contains_profanity(self, text: str) -> bool:
        self.checked_texts.append(text)
        return any(word in text for word in self._words)
