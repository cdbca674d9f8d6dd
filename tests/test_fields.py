import pytest

from autogitlog.core import fields
from autogitlog.core.fields import CustomField, FieldName


def test_available_fields_cover_builtins():
    available = fields.available_fields()
    assert "repo" in available
    assert "branch" in available
    assert "commit" in available
    assert len(available) == 12


def test_parse_field_recognizes_builtins_and_custom():
    assert fields.parse_field("commitShort") is FieldName.COMMIT_SHORT
    assert fields.parse_field("isDirty") is FieldName.IS_DIRTY
    custom = fields.parse_field("custom:git rev-list --count HEAD")
    assert custom == CustomField(key="custom:git rev-list --count HEAD", command="git rev-list --count HEAD")
    assert fields.field_key(custom) == "custom:git rev-list --count HEAD"


@pytest.mark.parametrize("name", ["unknown", "Branch", "", "custom:", "custom:   "])
def test_parse_field_rejects_unrecognized(name):
    assert fields.parse_field(name) is None


@pytest.mark.parametrize(
    "url, expected",
    [
        ("https://github.com/acme/widgets.git", "widgets"),
        ("https://github.com/acme/widgets", "widgets"),
        ("https://gitlab.example.com/group/sub/widgets.git/", "widgets"),
        ("git@github.com:acme/widgets.git", "widgets"),
        ("git@github.com:widgets.git", "widgets"),
        ("ssh://git@host.example.com:2222/acme/widgets.git", "widgets"),
        ("/srv/git/widgets.git", "widgets"),
    ],
)
def test_repo_name_from_url(url, expected):
    assert fields.repo_name_from_url(url) == expected
