import pytest

from status_table import StatusClass, StatusEntry, StatusRegistry, build_registry


@pytest.fixture(scope="module")
def registry() -> StatusRegistry:
    return build_registry()


def test_registry_has_all_codes(registry: StatusRegistry):
    assert len(registry) == 62
    assert 306 not in registry


def test_codes_strictly_ascending(registry: StatusRegistry):
    codes = registry.codes()
    assert codes == sorted(codes)
    assert len(set(codes)) == len(codes)


@pytest.mark.parametrize(
    "code, reason",
    [
        (200, "OK"),
        (302, "Found"),
        (404, "Not Found"),
        (418, "I'm a teapot"),
        (511, "Network Authentication Required"),
    ],
)
def test_known_reasons(registry: StatusRegistry, code, reason):
    assert registry.get(code) == reason
    assert registry.reason(code) == reason


@pytest.mark.parametrize("code", [999, 666, 306, 0, -1])
def test_unknown_codes(registry: StatusRegistry, code):
    assert code not in registry
    assert registry.get(code) is None
    with pytest.raises(KeyError):
        registry.reason(code)


def test_class_counts(registry: StatusRegistry):
    assert registry.class_counts() == {
        StatusClass.INFORMATIONAL: 4,
        StatusClass.SUCCESS: 10,
        StatusClass.REDIRECTION: 8,
        StatusClass.CLIENT_ERROR: 29,
        StatusClass.SERVER_ERROR: 11,
    }


def test_no_empty_reasons(registry: StatusRegistry):
    for entry in registry:
        assert entry.reason.strip()


def test_build_is_deterministic():
    assert build_registry().to_dict() == build_registry().to_dict()


def test_to_dict_shape(registry: StatusRegistry):
    data = registry.to_dict()
    assert len(data) == 62
    assert data["418"] == "I'm a teapot"
    assert list(data) == [str(code) for code in registry.codes()]


def test_by_class(registry: StatusRegistry):
    redirects = registry.by_class(StatusClass.REDIRECTION)
    assert [entry.code for entry in redirects] == [300, 301, 302, 303, 304, 305, 307, 308]


def test_filter_class_returns_registry(registry: StatusRegistry):
    informational = registry.filter_class(StatusClass.INFORMATIONAL)
    assert isinstance(informational, StatusRegistry)
    assert informational.codes() == [100, 101, 102, 103]
    # Original registry is untouched
    assert len(registry) == 62


def test_subset_skips_unknown_codes(registry: StatusRegistry, caplog):
    subset = registry.subset([418, 999, 200])
    assert subset.codes() == [200, 418]
    assert "999" in caplog.text


def test_registry_rejects_duplicates():
    with pytest.raises(ValueError, match="Duplicate"):
        StatusRegistry([StatusEntry(200, "OK"), StatusEntry(200, "Still OK")])


def test_registry_rejects_unordered_entries():
    with pytest.raises(ValueError, match="out of order"):
        StatusRegistry([StatusEntry(404, "Not Found"), StatusEntry(200, "OK")])


@pytest.mark.parametrize("code, reason", [(99, "Too low"), (600, "Too high"), (200, ""), (200, "  ")])
def test_entry_validation(code, reason):
    with pytest.raises(ValueError):
        StatusEntry(code, reason)


def test_entry_is_frozen():
    entry = StatusEntry(200, "OK")
    with pytest.raises(AttributeError):
        entry.reason = "Fine"
