"""fit - colorized output for git."""

from loguru import logger

from .formatter import format_output
from .styles import StyleSheet
from .types import ClassifiedLine, FormattedDocument, TableRow, Tag

__version__ = "0.1.0"

# silent as a library; configure_logging turns records back on
logger.disable("fit")

__all__ = ["ClassifiedLine", "FormattedDocument", "StyleSheet", "TableRow", "Tag", "format_output"]
