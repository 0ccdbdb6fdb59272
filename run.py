"""
Main entrypoint for the Dollar Quote application.
Usage: python run.py [server|client|init-db]
"""

import asyncio
import logging
import sys
from pathlib import Path

project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from dollar_quote.logging_config import configure_logging  # noqa: E402

USAGE = """Usage: python run.py [server|client|init-db]
  server  - Start the Quote Server
  client  - Fetch the quote from the server into cotacao.txt
  init-db - Create the quote table in the database file"""

logger = logging.getLogger(__name__)


async def main():
    if len(sys.argv) != 2:
        print(USAGE)
        sys.exit(1)

    command = sys.argv[1].lower()

    configure_logging()

    if command == "server":
        from dollar_quote.server.service import main as run_service

        logger.info("Starting Quote Server...")
    elif command == "client":
        from dollar_quote.client.service import main as run_service
    elif command == "init-db":
        from dollar_quote.storage.quote_storage import main as run_service

        logger.info("Provisioning quote database...")
    else:
        print(f"Unknown command: {command}")
        print(USAGE)
        sys.exit(1)
    await run_service()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\nShutdown requested by user")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Application failed: {e}")
        sys.exit(1)
