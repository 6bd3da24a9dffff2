import uvicorn

from shared.core.config import settings


def start_server():
    # reload needs the import string, not the app object
    uvicorn.run(
        "property_service.app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    try:
        start_server()
    except KeyboardInterrupt:
        print("\nShutting down server...")
