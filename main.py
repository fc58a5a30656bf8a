from __future__ import annotations

import logging

from dotenv import load_dotenv

from apps.api import create_app
from core.config import get_settings

load_dotenv()

logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = create_app()
logger.info("Hydrogen siting API ready")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8001, reload=True)
