import logging
import os

import uvicorn


def main():
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    host = os.environ.get("HOST", "0.0.0.0")
    port = int(os.environ.get("PORT", "8000"))
    reload = os.environ.get("RELOAD", "").lower() in {"1", "true", "yes"}
    uvicorn.run("conjuga.main:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    main()
