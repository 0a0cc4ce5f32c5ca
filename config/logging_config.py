import logging.config
from typing import Optional

from config.settings import settings

LOGGING_CONFIG = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'standard': {
            'format': '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
        },
    },
    'handlers': {
        'default': {
            'level': 'DEBUG',
            'formatter': 'standard',
            'class': 'logging.StreamHandler',
            'stream': 'ext://sys.stderr',
        },
    },
    'loggers': {
        '': {  # root logger
            'handlers': ['default'],
            'level': 'INFO',
            'propagate': True
        },
        'pdfminer': {
            'level': 'WARNING',
            'propagate': False
        },
        'pdfplumber': {
            'level': 'WARNING',
            'propagate': False
        },
        'PIL': {
            'level': 'WARNING',
            'propagate': False
        },
        'resume_onboarding': {
            'handlers': ['default'],
            'level': 'INFO',
            'propagate': False
        }
    }
}


def setup_logging(level: Optional[str] = None):
    """Configure logging for the application"""
    level = (level or settings.LOG_LEVEL).upper()
    config = dict(LOGGING_CONFIG)
    config['loggers'] = {name: dict(cfg) for name, cfg in LOGGING_CONFIG['loggers'].items()}
    config['loggers']['']['level'] = level
    config['loggers']['resume_onboarding']['level'] = level
    logging.config.dictConfig(config)
