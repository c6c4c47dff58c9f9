import pytest

from loglet.infrastructure.error_handler import (
    DirectoryCreationError,
    FileError,
    FileOpenError,
    InvalidFileLogSettingError,
    LogletError,
    PanicError,
    SerializationError,
    WriteError,
    handle_file_errors,
)


# ---- Helpers ---------------------------------------------------------------

def raise_exc(exc: Exception):
    def _fn(*args, **kwargs):
        raise exc
    return _fn


# ---- Exception classes -----------------------------------------------------

def test_loglet_error_message_and_original():
    original = ValueError("boom")
    err = LogletError("failed", original)
    assert err.message == "failed"
    assert err.original_error is original
    assert "failed" in str(err)
    assert "Original: boom" in str(err)


@pytest.mark.parametrize("exc_cls", [InvalidFileLogSettingError, PanicError])
def test_specific_errors_store_message(exc_cls):
    err = exc_cls("msg")
    assert err.message == "msg"
    assert str(err) == "msg"


@pytest.mark.parametrize("exc_cls, operation", [
    (DirectoryCreationError, "directory creation"),
    (FileOpenError, "file open"),
    (SerializationError, "serialization"),
    (WriteError, "write"),
])
def test_file_errors_name_their_operation(exc_cls, operation):
    err = exc_cls("msg", OSError("disk"))
    assert isinstance(err, FileError)
    assert err.operation == operation
    assert str(err) == "msg (Original: disk)"


def test_file_error_operation_override():
    err = FileError("msg", operation="stat")
    assert err.operation == "stat"


def test_panic_error_carries_outcome():
    outcome = object()
    err = PanicError("stop", outcome)
    assert err.outcome is outcome
    assert str(err) == "stop"


# ---- handle_file_errors decorator -----------------------------------------

@pytest.mark.parametrize("raised", [
    OSError("no space"),
    PermissionError("denied"),
    TypeError("bad type"),
    ValueError("bad value"),
])
def test_handle_file_errors_translates(raised):
    fn = handle_file_errors(WriteError, "append failed")(raise_exc(raised))

    with pytest.raises(WriteError) as exc_info:
        fn()

    assert exc_info.value.message == "append failed"
    assert exc_info.value.original_error is raised
    assert exc_info.value.__cause__ is raised


def test_handle_file_errors_passes_loglet_errors_through():
    original = SerializationError("already translated")
    fn = handle_file_errors(WriteError, "append failed")(raise_exc(original))

    with pytest.raises(SerializationError) as exc_info:
        fn()

    assert exc_info.value is original


def test_handle_file_errors_leaves_other_exceptions():
    fn = handle_file_errors(WriteError, "append failed")(raise_exc(KeyError("k")))

    with pytest.raises(KeyError):
        fn()


def test_handle_file_errors_returns_value_and_keeps_name():
    @handle_file_errors(FileOpenError, "file open failed")
    def opener(value):
        return value * 2

    assert opener(21) == 42
    assert opener.__name__ == "opener"
