import uvicorn

from snippet_studio.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "snippet_studio.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.server.reload,
    )


if __name__ == "__main__":
    main()
