"""
Tests for the fixed game rules and word bank.
"""

import unittest
from unittest import mock

from wordle_grid.config import game_settings
from wordle_grid.config.game_settings import (
    MAX_ROUNDS, WORD_BANK, WORD_LENGTH, get_word_statistics, validate_word_bank_integrity,
)


class TestWordBank(unittest.TestCase):

    def test_dimensions(self):
        self.assertEqual(MAX_ROUNDS, 6)
        self.assertEqual(WORD_LENGTH, 5)

    def test_ten_lowercase_five_letter_words(self):
        self.assertEqual(len(WORD_BANK), 10)
        for word in WORD_BANK:
            self.assertEqual(len(word), 5)
            self.assertTrue(word.isalpha() and word.islower())

    def test_bank_is_immutable(self):
        self.assertIsInstance(WORD_BANK, tuple)

    def test_integrity_passes(self):
        self.assertTrue(validate_word_bank_integrity())

    def test_integrity_rejects_bad_banks(self):
        bad_banks = [
            WORD_BANK[:9],
            WORD_BANK[:9] + ("toolong",),
            WORD_BANK[:9] + ("Apple",),
            WORD_BANK[:9] + ("ap9le",),
            WORD_BANK[:9] + (WORD_BANK[0],),
        ]
        for bank in bad_banks:
            with self.subTest(bank=bank[-1]):
                with mock.patch.object(game_settings, 'WORD_BANK', bank):
                    with self.assertRaises(ValueError):
                        validate_word_bank_integrity()


class TestWordStatistics(unittest.TestCase):

    def test_statistics(self):
        stats = get_word_statistics()
        self.assertEqual(stats['total_words'], 10)
        self.assertEqual(sum(stats['letter_frequency'].values()), 50)
        self.assertEqual(len(stats['most_common_letters']), 5)
        self.assertGreater(stats['avg_vowel_count'], 0)


if __name__ == "__main__":
    unittest.main()
