import asyncio
import logging

import config
from utils.logging_config import setup_logging, silence_sql_loggers

# Initialize centralized logging configuration
setup_logging()
silence_sql_loggers()

from db import create_db_and_tables
from enums.storage_backend import StorageBackendType
from storage import get_storage


async def main():
    """Prepare the configured storage backend for the storefront."""
    if config.STORAGE_BACKEND == StorageBackendType.SQL:
        await create_db_and_tables()
    storage = get_storage()
    logging.info(f"🛋️ Storefront core ready (Environment: {config.RUNTIME_ENVIRONMENT.value}, "
                 f"Storage: {type(storage).__name__})")
    return storage


if __name__ == '__main__':
    asyncio.run(main())
