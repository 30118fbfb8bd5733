"""Shared helpers for Carom Tournament: logging setup and id generation."""

# Carom Tournament
# Copyright (C) 2025  Carom Tournament developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import logging
import uuid
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

_PACKAGE_LOGGER = "caromtournament"


def setup_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Return the module logger for ``name``.

    Handlers are left to the application (see :func:`configure_logging`), so
    library use stays silent unless the host configures logging.
    """
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    return logger


def configure_logging(verbose: bool = False) -> None:
    """Attach a stream handler to the package logger."""
    package_logger = logging.getLogger(_PACKAGE_LOGGER)
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def generate_id(prefix: str) -> str:
    """Generate a unique id such as ``tournament_3f2a9c1d``."""
    return f"{prefix.lower()}_{uuid.uuid4().hex[:8]}"
