# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License"). You
# may not use this file except in compliance with the License. A copy of
# the License is located at
#
#     http://aws.amazon.com/apache2.0/
#
# or in the "license" file accompanying this file. This file is
# distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF
# ANY KIND, either express or implied. See the License for the specific
# language governing permissions and limitations under the License.
import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Get a logger with a single stream handler attached.

    Args:
        name: Logger name, usually the module's __name__.
        level: Optional level to set. When omitted the logger inherits its
            level from its parents, so --debug applies to it.

    Returns:
        The configured logger.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    if level is not None:
        logger.setLevel(level)
    return logger


def enable_debug_logging() -> None:
    """Switch the root logger and stratus loggers to DEBUG."""
    logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT)
    logging.getLogger().setLevel(logging.DEBUG)
    logging.getLogger("stratus").setLevel(logging.DEBUG)
