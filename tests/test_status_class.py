import pytest

from status_table import StatusClass


@pytest.mark.parametrize(
    "code, expected",
    [
        (100, StatusClass.INFORMATIONAL),
        (226, StatusClass.SUCCESS),
        (308, StatusClass.REDIRECTION),
        (451, StatusClass.CLIENT_ERROR),
        (599, StatusClass.SERVER_ERROR),
        (99, None),
        (600, None),
    ],
)
def test_from_code(code, expected):
    assert StatusClass.from_code(code) is expected


@pytest.mark.parametrize(
    "label, expected",
    [
        ("4xx", StatusClass.CLIENT_ERROR),
        ("4XX", StatusClass.CLIENT_ERROR),
        ("2", StatusClass.SUCCESS),
        ("server_error", StatusClass.SERVER_ERROR),
        (" REDIRECTION ", StatusClass.REDIRECTION),
    ],
)
def test_from_label(label, expected):
    assert StatusClass.from_label(label) is expected


@pytest.mark.parametrize("label", ["6xx", "0", "teapot", ""])
def test_from_label_invalid(label):
    with pytest.raises(ValueError, match="Invalid status class"):
        StatusClass.from_label(label)


def test_label():
    assert StatusClass.INFORMATIONAL.label == "1xx"
    assert StatusClass.SERVER_ERROR.label == "5xx"


def test_contains():
    assert StatusClass.CLIENT_ERROR.contains(418)
    assert not StatusClass.CLIENT_ERROR.contains(500)
