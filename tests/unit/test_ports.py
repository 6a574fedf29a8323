"""Unit tests for NullPort and BufferedPort."""

import pytest

from intcode.core.errors import BufferExhausted, PortError
from intcode.core.ports import BufferedPort, NullPort, Port


class TestNullPort:

    def test_get_is_zero(self):
        port = NullPort()
        assert port.get() == 0
        assert port.get() == 0

    def test_put_discards(self):
        port = NullPort()
        port.put(5)
        port.close()
        assert port.get() == 0


class TestBufferedPort:

    def test_fifo_order(self):
        port = BufferedPort([3, 1, 2])
        assert [port.get(), port.get(), port.get()] == [3, 1, 2]

    def test_exhausted(self):
        port = BufferedPort([1])
        port.get()
        with pytest.raises(BufferExhausted):
            port.get()

    def test_exhausted_is_port_error(self):
        with pytest.raises(PortError):
            BufferedPort().get()

    def test_feed_and_remaining(self):
        port = BufferedPort([1])
        port.feed(2, 3)
        assert port.remaining == 3
        port.get()
        assert port.remaining == 2

    def test_collects_outputs(self):
        port = BufferedPort()
        port.put(4)
        port.put(-7)
        assert port.outputs == [4, -7]


class TestPortBase:

    def test_port_is_abstract(self):
        with pytest.raises(TypeError):
            Port()
