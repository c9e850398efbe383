"""
Entry point for the Noteful API
"""

import logging
from dotenv import load_dotenv

# Load environment variables from .env file before any settings are read
load_dotenv()

from noteful.config.settings import DatabaseEnvironmentConfig, PORT  # noqa: E402
from noteful.app import app  # noqa: E402

# Configure logging
logging.basicConfig(level=logging.DEBUG if DatabaseEnvironmentConfig.get_config().debug else logging.INFO)
logger = logging.getLogger(__name__)

if __name__ == "__main__":
    import uvicorn
    logger.info(f"Starting Noteful API on port {PORT}")
    uvicorn.run(app, host="0.0.0.0", port=PORT)
