import sys

import pytest

from jadio.server import ManagedServer, ServerManager, ServerNotFoundError, ServerStatus

SLEEPER = ["-c", "import time; time.sleep(30)"]
WRITER = ["-c", "import sys; sys.stdout.write('out'); sys.stderr.write('err')"]


@pytest.fixture
def servers():
    created = []

    def make(args):
        server = ManagedServer("test", sys.executable, args)
        created.append(server)
        return server

    yield make
    for server in created:
        server.stop()


def test_new_server_is_stopped():
    server = ManagedServer("idle", sys.executable, SLEEPER)
    assert server.status == ServerStatus.STOPPED
    assert server.is_running() is False
    assert server.read_output() == ("", "")


def test_start_and_stop(servers):
    server = servers(SLEEPER)
    server.start()
    assert server.status == ServerStatus.RUNNING
    assert server.is_running() is True
    server.stop()
    assert server.status == ServerStatus.STOPPED
    assert server.process is None
    assert server.is_running() is False


def test_start_when_running_keeps_process(servers):
    server = servers(SLEEPER)
    server.start()
    first = server.process
    server.start()
    assert server.process is first


def test_start_missing_command_sets_error():
    server = ManagedServer("broken", "definitely-not-a-real-command-xyz", [])
    with pytest.raises(OSError):
        server.start()
    assert server.status == ServerStatus.ERROR
    assert server.error
    assert server.process is None


def test_exited_process_is_not_running(servers):
    server = servers(["-c", "pass"])
    server.start()
    server.process.wait()
    assert server.is_running() is False
    assert server.status == ServerStatus.STOPPED
    assert server.process is None


def test_read_output(servers):
    server = servers(WRITER)
    server.start()
    server.process.wait()
    assert server.read_output() == ("out", "err")


def test_manager_unknown_server():
    manager = ServerManager()
    assert manager.status("nope") is None
    with pytest.raises(ServerNotFoundError):
        manager.start_server("nope")
    with pytest.raises(ServerNotFoundError):
        manager.stop_server("nope")
    with pytest.raises(ServerNotFoundError):
        manager.read_output("nope")


def test_manager_lifecycle():
    manager = ServerManager()
    manager.add_server("sleepy", sys.executable, SLEEPER)
    assert manager.status("sleepy") == ServerStatus.STOPPED
    try:
        manager.start_server("sleepy")
        assert manager.status("sleepy") == ServerStatus.RUNNING
    finally:
        manager.stop_server("sleepy")
    assert manager.status("sleepy") == ServerStatus.STOPPED


def test_manager_read_output():
    manager = ServerManager()
    manager.add_server("writer", sys.executable, WRITER)
    manager.start_server("writer")
    try:
        manager.servers["writer"].process.wait()
        assert manager.read_output("writer") == ("out", "err")
    finally:
        manager.stop_server("writer")