import uvicorn

from core.config import settings
from core.logging_config import setup_logging

if __name__ == "__main__":
    setup_logging()
    uvicorn.run(
        "web.api:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=True,
    )
