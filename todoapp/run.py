"""Start the API with uvicorn, using HOST / PORT from the settings."""


def main() -> None:
    import uvicorn

    from todoapp.config import settings

    uvicorn.run("todoapp.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
