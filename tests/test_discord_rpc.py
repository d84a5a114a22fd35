import pytest
from pypresence import PyPresenceException
from pypresence.types import ActivityType

from mpris_presence import discord_rpc
from mpris_presence.discord_rpc import DiscordTransport, activity_payload
from mpris_presence.errors import TransportError
from mpris_presence.models import ActivityInfo


class FakePresence:
    def __init__(self, error=None, user=None):
        self.error = error
        self.user = user
        self.updates = []
        self.clears = 0
        self.closed = False

    def connect(self):
        if self.error is not None:
            raise self.error

    def update(self, **payload):
        if self.error is not None:
            raise self.error
        self.updates.append(payload)

    def clear(self):
        if self.error is not None:
            raise self.error
        self.clears += 1

    def close(self):
        self.closed = True


@pytest.fixture(autouse=True)
def no_ready_wait(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(discord_rpc.time, "sleep", lambda s: None)


def test_payload_is_listening_activity() -> None:
    payload = activity_payload(ActivityInfo("Song", "by Artist", "on Album", "https://img"))

    assert payload == {
        "details": "Song",
        "state": "by Artist",
        "large_image": "https://img",
        "large_text": "on Album",
        "activity_type": ActivityType.LISTENING,
    }


def test_payload_omits_empty_rows_and_truncates() -> None:
    payload = activity_payload(ActivityInfo(details="x" * 200, image="spotify"))

    assert payload["details"] == "x" * 128
    assert payload["state"] is None
    assert payload["large_text"] is None


def test_connect_prints_account(capsys) -> None:
    transport = DiscordTransport("1234", FakePresence(user={"username": "someone", "discriminator": "0"}))

    transport.connect()

    assert "[RPC] Connected as someone" in capsys.readouterr().out


def test_connect_failure_is_transport_error() -> None:
    transport = DiscordTransport("1234", FakePresence(error=PyPresenceException("no discord")))

    with pytest.raises(TransportError):
        transport.connect()


def test_update_and_clear_report_success() -> None:
    rpc = FakePresence()
    transport = DiscordTransport("1234", rpc)

    assert transport.update(ActivityInfo(details="Song", image="spotify")) is True
    assert transport.clear() is True
    assert rpc.updates[0]["details"] == "Song"
    assert rpc.clears == 1


def test_send_errors_are_logged_not_raised(capsys) -> None:
    transport = DiscordTransport("1234", FakePresence(error=PyPresenceException("pipe closed")))

    assert transport.update(ActivityInfo(details="Song")) is False
    assert transport.clear() is False
    assert "couldn't set activity" in capsys.readouterr().err


def test_close_closes_connection() -> None:
    rpc = FakePresence()
    DiscordTransport("1234", rpc).close()

    assert rpc.closed
