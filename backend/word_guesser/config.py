import os

from dotenv import load_dotenv

# Pick up backend/.env when present; real environment variables win.
load_dotenv()

# Database used by the Flask-SQLAlchemy models. Any SQLAlchemy URL works.
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///word_guesser.db")

# JSON array of candidate secret words. Defaults to the bundled list.
WORD_LIST_PATH = os.getenv("WORD_LIST_PATH")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
