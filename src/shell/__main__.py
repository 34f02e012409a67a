"""Точка входа: python -m src.shell"""

import logging
import os

from src.core.config import OrderingConfig
from src.shell.menu import BookshopShell


def main() -> None:
    logging.basicConfig(
        level=os.getenv("BOOKSHOP_LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    BookshopShell(config=OrderingConfig.from_env()).run()


if __name__ == "__main__":
    main()
