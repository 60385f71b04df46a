# Seiargs Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for seiargs."""
import logging

logger: logging.Logger = logging.getLogger("seiargs")
