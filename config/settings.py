"""
Configuration Settings Module
==============================

This module manages all configuration settings for the Roster Scraper.
It loads settings from environment variables and provides sensible defaults.

For Junior Developers:
---------------------
Configuration management is crucial for production applications because:
1. Different environments (dev, test, prod) need different settings
2. Secrets (like the Flask secret key) should never be in code
3. Settings should be easy to change without modifying code

We use environment variables loaded from a .env file for local development.
In production, these are set in the hosting dashboard.

Usage:
    from config.settings import Config

    timeout = Config.REQUEST_TIMEOUT
    min_rows = Config.MIN_TABLE_ROWS
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# ==============================================================================
# Load Environment Variables
# ==============================================================================
# Path(__file__).parent.parent is the project root (where .env lives)
PROJECT_ROOT = Path(__file__).parent.parent

# Only affects local development - production uses real env vars
env_path = PROJECT_ROOT / '.env'
if env_path.exists():
    load_dotenv(env_path)


class Config:
    """
    Base configuration class with all settings.

    All settings are class attributes, so you access them like:
        Config.REQUEST_TIMEOUT

    For Junior Developers:
    ---------------------
    os.getenv('NAME', 'default') reads the environment variable 'NAME'.
    If it doesn't exist, it returns 'default' instead.
    """

    # ==========================================================================
    # Project Paths
    # ==========================================================================
    PROJECT_ROOT = PROJECT_ROOT
    LOGS_DIR = PROJECT_ROOT / 'logs'

    # Where the CLI writes team.json / roster.json
    OUTPUT_DIR = Path(os.getenv('OUTPUT_DIR', str(PROJECT_ROOT / 'output')))
    TEAM_FILENAME = 'team.json'
    ROSTER_FILENAME = 'roster.json'

    # ==========================================================================
    # Flask Configuration
    # ==========================================================================
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')

    FLASK_ENV = os.getenv('FLASK_ENV', 'development')
    DEBUG = FLASK_ENV == 'development'

    # Keep roster fields in the order we build them
    JSON_SORT_KEYS = False

    # ==========================================================================
    # Scraping Configuration
    # ==========================================================================
    # Delay between pages when scraping a batch of rosters (in seconds)
    SCRAPE_DELAY_SECONDS = float(os.getenv('SCRAPE_DELAY_SECONDS', '2'))

    # Athletics sites frequently block obvious bots, so we present a
    # regular desktop browser identity
    USER_AGENT = os.getenv(
        'USER_AGENT',
        'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 '
        '(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36'
    )

    # Request timeout in seconds
    REQUEST_TIMEOUT = int(os.getenv('REQUEST_TIMEOUT', '30'))

    # Maximum retries for failed requests
    MAX_RETRIES = int(os.getenv('MAX_RETRIES', '3'))

    # Headless browser settings (only used for script-rendered pages)
    RENDER_TIMEOUT = int(os.getenv('RENDER_TIMEOUT', '60'))
    RENDER_WAIT_SECONDS = float(os.getenv('RENDER_WAIT_SECONDS', '5'))

    # ==========================================================================
    # Extraction Configuration
    # ==========================================================================
    # Tables with fewer body rows than this are page furniture, not rosters
    MIN_TABLE_ROWS = int(os.getenv('MIN_TABLE_ROWS', '5'))

    # How many ancestor levels we inspect when looking for a staff section
    STAFF_SECTION_DEPTH = int(os.getenv('STAFF_SECTION_DEPTH', '10'))

    # Column classifier: number of body rows sampled per column, and the
    # minimum share of sampled cells that must match the column's detector
    COLUMN_SAMPLE_SIZE = int(os.getenv('COLUMN_SAMPLE_SIZE', '8'))
    COLUMN_VALIDATION_THRESHOLD = float(os.getenv('COLUMN_VALIDATION_THRESHOLD', '0.5'))

    # ==========================================================================
    # Team Defaults
    # ==========================================================================
    DEFAULT_TEAM_NAME = 'Unknown Team'
    DEFAULT_PRIMARY_COLOR = os.getenv('DEFAULT_PRIMARY_COLOR', '#1a1a2e')
    DEFAULT_SECONDARY_COLOR = os.getenv('DEFAULT_SECONDARY_COLOR', '#ffffff')

    # ==========================================================================
    # Logging Configuration
    # ==========================================================================
    # Log level: DEBUG, INFO, WARNING, ERROR, CRITICAL
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    LOG_FILE = os.getenv('LOG_FILE', 'logs/roster_scraper.log')


class DevelopmentConfig(Config):
    """
    Development configuration - used for local development.
    """
    DEBUG = True
    FLASK_ENV = 'development'


class ProductionConfig(Config):
    """
    Production configuration - used for the live API.
    """
    DEBUG = False
    FLASK_ENV = 'production'

    @classmethod
    def validate(cls):
        """Validate that required production settings are set."""
        if cls.SECRET_KEY == 'dev-secret-key-change-in-production':
            raise ValueError(
                "SECRET_KEY must be set to a secure value in production! "
                "Generate one with: python -c \"import secrets; print(secrets.token_hex(32))\""
            )


class TestingConfig(Config):
    """
    Testing configuration - used when running pytest.
    """
    TESTING = True
    DEBUG = True

    # Tests never write log files
    LOG_FILE = ''


# ==============================================================================
# Configuration Factory
# ==============================================================================
config_by_name = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config():
    """
    Get the appropriate configuration based on FLASK_ENV.

    Returns:
        The configuration class for the current environment.
    """
    env = os.getenv('FLASK_ENV', 'development')
    return config_by_name.get(env, DevelopmentConfig)
