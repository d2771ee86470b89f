"""Run the API with uvicorn: ``python -m cashcard``."""
import os

import uvicorn


def main() -> None:
    host = os.getenv("HOST", "127.0.0.1")
    port = int(os.getenv("PORT", "8000"))
    uvicorn.run("cashcard.app:app", host=host, port=port, reload=False, log_level="info")


if __name__ == "__main__":
    main()
