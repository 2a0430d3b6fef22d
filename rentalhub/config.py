import os


class Config:
    # Secret key for sessions / JWT - REQUIRED outside testing
    SECRET_KEY = os.environ.get("SECRET_KEY")

    # Database connection
    SQLALCHEMY_DATABASE_URI = os.environ.get("DATABASE_URL", "sqlite:///rentalhub.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # JWT Configuration
    JWT_SECRET_KEY = os.environ.get("JWT_SECRET_KEY", SECRET_KEY)

    # Flask Configuration
    FLASK_ENV = os.environ.get("FLASK_ENV", "production")
    FLASK_DEBUG = os.environ.get("FLASK_DEBUG", "False").lower() == "true"
    JSON_SORT_KEYS = False
    API_PREFIX = "/api"
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # Unit photos
    UNIT_FOLDER_MAPPING_FILE = os.environ.get("UNIT_FOLDER_MAPPING_FILE", "storage/app/unit_folder_mappings.json")
    UNIT_PHOTO_ROOT = os.environ.get("UNIT_PHOTO_ROOT", "storage/app/public")
    UNIT_PHOTO_URL_PREFIX = os.environ.get("UNIT_PHOTO_URL_PREFIX", "/storage")


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret-key"
    JWT_SECRET_KEY = "test-jwt-secret-key-that-is-long-enough"
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    UNIT_FOLDER_MAPPING_FILE = None
