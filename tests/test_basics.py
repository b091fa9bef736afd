"""Basic unit tests for the pushdispatch package."""

from pushdispatch import (
    AsyncPushNotifications,
    PushNotifications,
    PushDispatchError,
    FetchError,
    RegistrationError,
    ConfigError,
    Category,
    __version__,
)


def test_version():
    assert __version__ == "0.1.0"


def test_public_exports():
    assert PushNotifications is not None
    assert AsyncPushNotifications is not None


def test_error_hierarchy():
    assert issubclass(FetchError, PushDispatchError)
    assert issubclass(RegistrationError, PushDispatchError)
    assert issubclass(ConfigError, PushDispatchError)


def test_error_attributes():
    err = PushDispatchError(code="test_code", message="something broke")
    assert err.code == "test_code"
    assert str(err) == "something broke"
    assert err.details is None

    err_with_details = FetchError("bad update", details={"id": "5"})
    assert err_with_details.code == "fetch_error"
    assert err_with_details.details == {"id": "5"}


def test_category_values():
    assert Category.FRIEND_FOLLOW == "friend_follow"
    assert Category.PROJECT_UPDATE == "project_update"
