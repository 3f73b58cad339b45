from __future__ import annotations

import logging
from pathlib import Path

import pytest

from tests._fixtures.xml_docs import XmlDocWriter


@pytest.fixture
def xml_writer(tmp_path: Path) -> XmlDocWriter:
    """Provide a writer for XML documentation files under tmp_path."""
    return XmlDocWriter(tmp_path / "xml")


@pytest.fixture(autouse=True)
def _reset_logging():
    """Undo configure_logging side effects so caplog sees every record."""
    logger = logging.getLogger("xmldoc2md")
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
