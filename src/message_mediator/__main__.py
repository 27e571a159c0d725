import logging
import os

from .demo import run_demo

if __name__ == "__main__":
    logging.basicConfig(level=os.environ.get("MESSAGE_MEDIATOR_LOG_LEVEL", "WARNING"))
    run_demo()
