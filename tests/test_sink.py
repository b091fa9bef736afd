from pushdispatch.models import AlertDescription
from pushdispatch.sink import NotificationTray


def _alert(title):
    return AlertDescription(title=title, body="body")


def test_same_signature_replaces():
    tray = NotificationTray()
    tray.notify(1, _alert("first"))
    tray.notify(1, _alert("second"))

    assert len(tray) == 1
    assert tray.get(1).title == "second"
    assert [sig for sig, _ in tray.history] == [1, 1]


def test_distinct_signatures_and_cancel():
    tray = NotificationTray()
    tray.notify(1, _alert("a"))
    tray.notify(2, _alert("b"))
    assert set(tray.active()) == {1, 2}

    tray.cancel(1)
    tray.cancel(404)
    assert tray.get(1) is None
    assert list(tray.active()) == [2]
