"""Development server for the Employee Directory Service."""

import uvicorn

from config.settings import settings

if __name__ == "__main__":
    logging_level = settings.log_level.lower()
    uvicorn.run("app.main:app", host=settings.host, port=settings.port, log_level=logging_level)
