import sys
from datetime import datetime
from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

# Add root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from logger import RecordingLogger
from tracker import Tracker

FIXED_TIME = datetime(2024, 5, 1, 12, 30, 0)


@pytest.fixture
def recording_logger():
    return RecordingLogger(clock=lambda: FIXED_TIME)


@pytest.fixture
def tracker(recording_logger):
    return Tracker(recording_logger)


@pytest.fixture
def output_console():
    return Console(file=StringIO(), width=200, color_system=None)
