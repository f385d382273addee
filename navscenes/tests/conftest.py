import logging

import pytest

from navscenes.tests.helpers import TRACE_STEPS, write_jsonl


@pytest.fixture
def trace_file(tmp_path):
    return write_jsonl(tmp_path / "trace.jsonl", TRACE_STEPS)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
