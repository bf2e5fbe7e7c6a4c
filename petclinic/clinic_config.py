import os

from dotenv import load_dotenv

# Load .env automatically so local settings don't need exporting
load_dotenv()


def env_flag(name, default='true'):
    return os.environ.get(name, default).lower() in ('1', 'true', 'yes')


class Config:
    SECRET_KEY = os.environ.get('PETCLINIC_SECRET', 'change-this-in-prod')
    SQLALCHEMY_DATABASE_URI = os.environ.get('PETCLINIC_DATABASE_URL', 'sqlite:///petclinic.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Demo data written at startup when the owner table is empty
    SEED_DEMO_DATA = env_flag('PETCLINIC_SEED')
    SEED_OWNER_COUNT = int(os.environ.get('PETCLINIC_SEED_OWNERS', '150'))

    LOG_LEVEL = os.environ.get('PETCLINIC_LOG_LEVEL', 'INFO').upper()
