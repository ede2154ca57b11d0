import enum
import logging


class Config:
    """Base configuration."""

    LOG_LEVEL = logging.INFO
    LOG_TO_FILE = True
    MAX_LOG_FILES = 5


class DevelopmentConfig(Config):
    """Development configuration."""

    LOG_LEVEL = logging.DEBUG


class ProductionConfig(Config):
    """Production configuration."""

    LOG_LEVEL = logging.WARNING


class TestingConfig(Config):
    """Testing configuration."""

    LOG_LEVEL = logging.DEBUG
    LOG_TO_FILE = False


class ConfigType(enum.Enum):
    DEVELOPMENT = DevelopmentConfig
    PRODUCTION = ProductionConfig
    TESTING = TestingConfig
