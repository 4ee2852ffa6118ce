"""Central .env loader. Entrypoints import this before reading settings."""
from pathlib import Path
from dotenv import load_dotenv

# Project-root .env; real environment variables take precedence
_env_path = Path(__file__).resolve().parent / ".env"
load_dotenv(_env_path, override=False)
