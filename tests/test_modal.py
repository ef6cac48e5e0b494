import logging

from poise.modal import ActionRow, InputText, find_modal_text


def make_rows():
    return [
        ActionRow([InputText("first", "alpha")]),
        ActionRow([InputText("second", "beta")]),
        ActionRow([InputText("blank", "")]),
    ]


def test_finds_value_by_custom_id():
    rows = make_rows()
    assert find_modal_text(rows, "second") == "beta"
    assert find_modal_text(rows, "first") == "alpha"


def test_value_is_taken_out():
    rows = make_rows()
    assert find_modal_text(rows, "first") == "alpha"
    assert rows[0].components[0].value == ""
    assert find_modal_text(rows, "first") is None


def test_blank_value_gives_none():
    assert find_modal_text(make_rows(), "blank") is None


def test_missing_id_logs_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="poise.modal"):
        assert find_modal_text(make_rows(), "absent") is None
    assert "absent not found in modal response" in caplog.text


def test_empty_row_is_skipped(caplog):
    rows = [ActionRow([]), ActionRow([InputText("x", "value")])]
    with caplog.at_level(logging.WARNING, logger="poise.modal"):
        assert find_modal_text(rows, "x") == "value"
    assert "empty action row in modal response" in caplog.text


def test_non_input_component_is_skipped(caplog):
    rows = [ActionRow(["button"]), ActionRow([InputText("x", "value")])]
    with caplog.at_level(logging.WARNING, logger="poise.modal"):
        assert find_modal_text(rows, "x") == "value"
    assert "unexpected non input text component" in caplog.text


def test_only_first_component_of_row_is_considered():
    rows = [ActionRow([InputText("a", "one"), InputText("b", "two")])]
    assert find_modal_text(rows, "b") is None
    assert rows[0].components[1].value == "two"