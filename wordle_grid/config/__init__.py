"""
Configuration Package

Two kinds of configuration live here:
- app_config.py: Flask application settings (environment-based)
- game_settings.py: fixed game rules and the word bank
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    MAX_ROUNDS, WORD_LENGTH, WORD_BANK, WORD_BANK_SIZE,
    validate_word_bank_integrity, get_word_statistics,
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'MAX_ROUNDS', 'WORD_LENGTH', 'WORD_BANK', 'WORD_BANK_SIZE',
    'validate_word_bank_integrity', 'get_word_statistics'
]
