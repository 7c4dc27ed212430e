"""Run the API with uvicorn: ``python -m flavors_api``.

Equivalent to:
    uvicorn flavors_api.main:app --host $HOST --port $PORT
"""

import uvicorn

from flavors_api.config import settings


def main() -> None:
    uvicorn.run(
        "flavors_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
