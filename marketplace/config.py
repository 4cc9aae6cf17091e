import os


def _postgres_url():
    host = os.getenv('POSTGRES_HOST')
    if not host:
        return None

    _database = os.getenv('POSTGRES_DB')
    _user = os.getenv('POSTGRES_USER')
    _password = os.getenv('POSTGRES_PASSWORD')
    _port = os.getenv('POSTGRES_PORT', '5432')
    return f'postgresql://{_user}:{_password}@{host}:{_port}/{_database}'


DATABASE_URL = os.getenv('DATABASE_URL') or _postgres_url() or 'sqlite:///./marketplace.db'

GZIP_MINIMUM_SIZE = int(os.getenv('GZIP_MINIMUM_SIZE', '1000'))
CORS_ORIGINS = [origin.strip() for origin in os.getenv('CORS_ORIGINS', '*').split(',') if origin.strip()]

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
LOG_DIR = os.getenv('LOG_DIR')

HOST = os.getenv('HOST', '0.0.0.0')
PORT = int(os.getenv('PORT', '8000'))
