"""
String Transformers - Pig Latin

Works on characters (Unicode code points), never on encoded bytes.
"""

import logging

logger = logging.getLogger(__name__)

VOWELS = frozenset("aeiou")


def pig_latin(word: str) -> str:
    """
    Convert a single word to pig latin

    "first" -> "irst-fay", "apple" -> "apple-hay", "" -> "".
    Only lowercase ASCII vowels count as vowels; any other leading
    character is moved to the end like a consonant.
    """
    if not word:
        return ""

    first = word[0]
    if first in VOWELS:
        return f"{word}-hay"
    return f"{word[1:]}-{first}ay"


def pig_latin_text(text: str) -> str:
    """Convert every whitespace-separated word of text, joined by single spaces"""
    words = text.split()
    logger.debug(f"Converting {len(words)} words to pig latin")
    return " ".join(pig_latin(word) for word in words)
