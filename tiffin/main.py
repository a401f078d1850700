import argparse
import json
import logging
import sys

from pydantic import ValidationError

from tiffin.logic.pricing.calculator import calculate_price_breakdown
from tiffin.utilities.config import CURRENCY_SYMBOL, DEBUG, LOG_LEVEL
from tiffin.utilities.validators import OrderSelectionInput

logger = logging.getLogger("tiffin_quote")


def quote(payload: dict) -> dict:
    """Validate an order selection and return its price breakdown."""
    selection = OrderSelectionInput.model_validate(payload)
    return calculate_price_breakdown(selection.to_params())


def log_level() -> int:
    """Numeric level for LOG_LEVEL; unknown names fall back to INFO."""
    if DEBUG:
        return logging.DEBUG
    level = getattr(logging, LOG_LEVEL, logging.INFO)
    return level if isinstance(level, int) else logging.INFO


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="tiffin-quote", description="Price a tiffin order from a JSON selection.")
    parser.add_argument("path", help="JSON file with the order selection, or '-' for stdin")
    args = parser.parse_args(argv)

    logging.basicConfig(level=log_level(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        if args.path == "-":
            payload = json.load(sys.stdin)
        else:
            with open(args.path, 'r', encoding='utf-8') as f:
                payload = json.load(f)
    except (OSError, ValueError) as e:  # ValueError covers JSONDecodeError and UnicodeDecodeError
        logger.error(f"Cannot read order selection from {args.path}: {e}")
        return 1

    try:
        breakdown = quote(payload)
    except ValidationError as e:
        print(e, file=sys.stderr)
        return 2

    logger.info(f"Quoted {CURRENCY_SYMBOL}{breakdown['final_amount']} for {args.path}")
    print(json.dumps(breakdown, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
