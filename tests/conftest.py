import os
import tempfile

# keep log files out of the working tree; must happen before pantilthat is imported
os.environ.setdefault('PANTILTHAT_LOG_DIR', tempfile.mkdtemp(prefix='pantilthat-logs-'))

import pytest  # noqa: E402

from pantilthat import PanTilt, TransportError  # noqa: E402


class FakeTransport:
    """Records register operations instead of talking to a bus."""

    def __init__(self):
        self.operations = []
        self.words = {}
        self.fail = False
        self.closed = False

    def _check(self):
        if self.fail:
            raise TransportError('bus unavailable')

    def write_byte_data(self, register, value):
        self._check()
        self.operations.append(('write_byte', register, value))

    def write_word_data(self, register, value):
        self._check()
        self.operations.append(('write_word', register, value))

    def read_word_data(self, register):
        self._check()
        self.operations.append(('read_word', register))
        return self.words.get(register, 0)

    def close(self):
        self.closed = True


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def pantilt(transport):
    controller = PanTilt(transport, idle_timeout=-1)
    yield controller
    controller.shutdown()
