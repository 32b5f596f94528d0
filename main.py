# main.py: FastAPI via Uvicorn
import asyncio
import logging

import uvicorn
from equipment_search.config import settings
from equipment_search.web.server import create_app

logger = logging.getLogger(__name__)
logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL))

async def run():
    web_app = create_app()
    server = uvicorn.Server(
        uvicorn.Config(
            web_app,
            host=settings.WEB_HOST,
            port=settings.WEB_PORT,
            log_level=settings.LOG_LEVEL.lower(),
        )
    )
    logger.info("serving equipment search on %s:%s", settings.WEB_HOST, settings.WEB_PORT)
    # blocks until Ctrl+C / shutdown; the lifespan hook closes the outbound client
    await server.serve()

if __name__ == "__main__":
    try:
        asyncio.run(run())
    except (KeyboardInterrupt, SystemExit):
        pass
