"""
Cake Shop server entry point
"""
import logging

import uvicorn

from cakeshop.app import create_app
from cakeshop.config import get_settings

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = create_app()


if __name__ == "__main__":
    print("🎂 Starting Cake Shop...")
    print(f"📖 Docs at http://localhost:{settings.port}/docs")

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower()
    )
