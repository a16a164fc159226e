import logging

import uvicorn

from ecolista.api.api_run import app
from ecolista.utilities.config import APP_HOST, APP_PORT, LOG_FORMAT, LOG_LEVEL


if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    # Print a friendly message that points to the URL you can open in a browser
    print(f"EcoLista API on http://localhost:{APP_PORT} (Press CTRL+C to quit)")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)
