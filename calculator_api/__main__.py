"""Entry point: python -m calculator_api"""

import sys

from calculator_api.config import get_settings
from calculator_api.infrastructure.observability import setup_logging
from calculator_api.server import CalculatorServer


def main() -> int:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    CalculatorServer(settings).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
