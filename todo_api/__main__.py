"""Server entry point — `python -m todo_api` or the `todo-api` script."""

import uvicorn

from todo_api.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "todo_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
