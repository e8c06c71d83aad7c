# config.py


class Config:
    DEBUG = False
    TESTING = False
    MAX_CONTENT_LENGTH = 50 * 1024 * 1024   # uploads larger than this are rejected with 413


class ProductionConfig(Config):
    pass


class DevelopmentConfig(Config):
    DEBUG = True


class TestingConfig(Config):
    TESTING = True
    DEBUG = True
