# apps/domain/ports/profanity.py

"""
Profanity Checker Port - Interface for name screening

Menus and products may not be named with disallowed language.
The check itself lives outside the domain (remote service or fake).
"""

from typing import Protocol


class IProfanityChecker(Protocol):
    """
    Interface for profanity detection

    Implementations answer whether a text contains disallowed words.
    """

    def contains_profanity(self, text: str) -> bool:
        """
        Check text for profanity

        Args:
            text: Text to screen (product or menu name)

        Returns:
            True if the text contains disallowed language

        Raises:
            PurgomalumError: If the remote check fails
        """
        ...
