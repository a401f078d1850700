"""Configuration management for the Tiffin pricing package."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR: Final[Path] = Path(__file__).parent.parent

# Load environment variables from .env file if it exists
env_path = BASE_DIR / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'INFO').upper()
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'

# Pricing defaults
DEFAULT_DELIVERY_CHARGE: Final[float] = float(os.getenv('DEFAULT_DELIVERY_CHARGE', '19'))
DEFAULT_TRIAL_PRICE: Final[float] = float(os.getenv('DEFAULT_TRIAL_PRICE', '99'))
DEFAULT_MONTHLY_PRICE: Final[float] = float(os.getenv('DEFAULT_MONTHLY_PRICE', '2000'))
CURRENCY_SYMBOL: Final[str] = os.getenv('CURRENCY_SYMBOL', '₹')
