import uvicorn

from .settings import Settings


def main() -> None:
    settings = Settings()  # type: ignore[call-arg]

    uvicorn.run(
        "portfolio_api.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
        proxy_headers=True,
    )


if __name__ == "__main__":
    main()
