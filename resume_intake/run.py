# run.py
import logging
import sys

from resume_intake.app import create_app
from resume_intake.config import ConfigError
from resume_intake.services.object_store import ObjectStoreInitError

logger = logging.getLogger(__name__)

if __name__ == "__main__":
    try:
        app = create_app()
    except (ConfigError, ObjectStoreInitError) as e:
        logging.basicConfig(level=logging.INFO)
        logger.critical(f"Failed to initialize resume intake: {e}")
        sys.exit(1)
    logger.info("Starting Flask server on http://127.0.0.1:5000")
    app.run(debug=False, host="127.0.0.1", port=5000)
