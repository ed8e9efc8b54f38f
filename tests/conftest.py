import sys
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from guest_roster.models import GuestDetails, GuestRecord  # noqa: E402


def make_guest(guest_id="g1", name="", main=None, progress=None, room=None, face=None, doc_image=None, **details):
    return GuestRecord(
        id=guest_id,
        name=name,
        is_main_guest=main,
        details=GuestDetails(**details),
        face_image=face,
        document_image=doc_image,
        progress=progress,
        booking_room_id=room,
    )


class FakeClock:
    def __init__(self, now=1_700_000_000_000):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms


@pytest.fixture
def clock():
    return FakeClock()
