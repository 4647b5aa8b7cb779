"""
Game Configuration Constants Module

Defines the fixed game rules: board dimensions and the word bank that target
words are drawn from. Everything here is immutable for the life of the process.
"""

from typing import Final, Tuple

MAX_ROUNDS: Final[int] = 6
"""
Number of rows on the board, i.e. guess attempts allowed per game.
"""

WORD_LENGTH: Final[int] = 5
"""
Number of cells per row and letters per target word.
"""

WORD_BANK_SIZE: Final[int] = 10

# Curated word bank, ordered; targets are drawn from it by index
WORD_BANK: Final[Tuple[str, ...]] = (
    "apple",
    "mango",
    "crane",
    "light",
    "stone",
    "brave",
    "plant",
    "ghost",
    "dream",
    "flint",
)


def validate_word_bank_integrity() -> bool:
    """
    Validates the integrity and consistency of the word bank.

    Checks performed:
    1. Size: exactly WORD_BANK_SIZE entries
    2. Length: every word is exactly WORD_LENGTH characters
    3. Characters: ASCII letters only, all lowercase
    4. Uniqueness: no duplicate entries

    Returns:
        bool: True if the word bank passes all checks

    Raises:
        ValueError: If any check fails, with a message naming the offending word
    """
    if len(WORD_BANK) != WORD_BANK_SIZE:
        raise ValueError(f"Word bank must contain {WORD_BANK_SIZE} words, found {len(WORD_BANK)}")

    for index, word in enumerate(WORD_BANK):
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word at index {index} '{word}' is not {WORD_LENGTH} characters long")

        if not (word.isascii() and word.isalpha()):
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.islower():
            raise ValueError(f"Word at index {index} '{word}' is not in lowercase format")

    if len(WORD_BANK) != len(set(WORD_BANK)):
        duplicates = sorted({word for word in WORD_BANK if WORD_BANK.count(word) > 1})
        raise ValueError(f"Duplicate words found in word bank: {duplicates}")

    return True


def get_word_statistics() -> dict:
    """
    Summarises the word bank.

    Returns:
        dict: total_words, avg_vowel_count, letter_frequency and the five
        most_common_letters as (letter, count) pairs
    """
    if not WORD_BANK:
        return {"error": "Word bank is empty"}

    vowels = set('aeiou')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in WORD_BANK)

    letter_frequency = {}
    for word in WORD_BANK:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(WORD_BANK),
        "avg_vowel_count": round(total_vowels / len(WORD_BANK), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }
