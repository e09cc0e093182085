import logging

from . import config
from .app import create_app


def main():
    logging.basicConfig(
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        level=config.LOG_LEVEL
    )
    logger = logging.getLogger('order_service')

    app = create_app()
    logger.info("server started......")
    app.run(host=config.HOST, port=config.PORT, threaded=True)


if __name__ == '__main__':
    main()
