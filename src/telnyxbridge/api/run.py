from telnyxbridge.core.config import get_settings
import uvicorn


def main():  # pragma: no cover
    settings = get_settings()
    # Single worker: the Extra registry and event broker live in process memory.
    uvicorn.run(
        "telnyxbridge.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
        reload=False,
    )


if __name__ == "__main__":  # pragma: no cover
    main()
