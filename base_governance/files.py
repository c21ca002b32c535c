import json
import logging
import os

logger = logging.getLogger(__name__)


def save_json(obj, filename):
    directory = os.path.dirname(filename)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(filename, "w") as f:
        json.dump(obj, f, indent=2)
    logger.info("Saved: %s", filename)
    return filename
