import logging

import uvicorn

from api.routes.submissions import create_app
from config import Config

config = Config.from_env()

logging.basicConfig(level=config.log_level)
logger = logging.getLogger(__name__)

app = create_app(config)

if __name__ == "__main__":
    logger.info("Server running on port %s", config.port)
    uvicorn.run(app, host=config.host, port=config.port)
