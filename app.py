import sys

from loguru import logger

from socialq.api import create_app
from socialq.config import settings
from socialq.date_recognizers.dateparser_recognizer import DateparserRecognizer
from socialq.stores.local import LocalStore

logger.configure(handlers=[{"sink": sys.stderr, "level": settings.log_level}])

logger.info(f"Initializing relationship tracker with store at {settings.local_store_path}")
store = LocalStore(settings.local_store_path)
date_recognizer = DateparserRecognizer(languages=settings.date_languages)
app = create_app(
    store=store,
    date_recognizer=date_recognizer,
)
