import pytest

from mpris_presence.errors import FieldNotFoundError
from mpris_presence.models import UNSUPPORTED
from mpris_presence.rows import render_rows, template_field


def test_substitutes_field_and_keeps_literal_text() -> None:
    assert render_rows(["Playing {title}"], {"xesam:title": "Song"}) == ["Playing Song", "", ""]


def test_missing_field_aborts_whole_render() -> None:
    metadata = {"xesam:artist": ["Artist"]}

    with pytest.raises(FieldNotFoundError) as exc:
        render_rows(["by {artist}", "Playing {title}"], metadata)
    assert exc.value.field == "title"
    assert str(exc.value) == "Field not found: title"


def test_lists_are_joined_and_unsupported_values_use_placeholder() -> None:
    metadata = {"xesam:artist": ["A", "B"], "xesam:trackNumber": 7}

    assert render_rows(["{artist}", "#{trackNumber}"], metadata) == ["A, B", f"#{UNSUPPORTED}", ""]


def test_only_first_three_templates_are_used() -> None:
    metadata = {"xesam:title": "T", "xesam:album": "A"}
    rows = render_rows(["{title}", "{album}", "{title}!", "{missing}"], metadata)

    assert rows == ["T", "A", "T!"]


def test_template_without_placeholder_needs_empty_named_field() -> None:
    assert template_field("no placeholder") == ""
    with pytest.raises(FieldNotFoundError) as exc:
        render_rows(["no placeholder"], {"xesam:title": "T"})
    assert exc.value.field == ""


def test_only_first_placeholder_is_substituted() -> None:
    metadata = {"xesam:title": "T", "xesam:album": "A"}

    assert render_rows(["{title} - {album}"], metadata) == ["T - {album}", "", ""]


def test_empty_template_list_pads_to_three_rows() -> None:
    assert render_rows([], {}) == ["", "", ""]
