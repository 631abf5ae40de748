"""Run the phonebook backend with uvicorn: python -m phonebook"""

import uvicorn

from phonebook.config import settings


def main() -> None:
    uvicorn.run(
        "phonebook.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
