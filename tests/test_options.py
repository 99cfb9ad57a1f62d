from __future__ import annotations

import dataclasses

import pytest

from watson_assistant_sdk.assistant_v1 import (
    CreateValueOptions,
    GetWorkspaceOptions,
    ListValuesOptions,
    ListWorkspacesOptions,
    UpdateValueOptions,
)
from watson_assistant_sdk.assistant_v2 import CreateSessionOptions, MessageContext, MessageInput, MessageOptions
from watson_assistant_sdk.exceptions import AssistantValidationError
from watson_assistant_sdk.options import FrozenMapping, Options, OptionsBuilder, registered_options


def test_builder_with_required_fields_and_setters() -> None:
    options = ListValuesOptions.builder("ws-123", "color").page_limit(10).sort("-name").build()

    assert options.workspace_id == "ws-123"
    assert options.entity == "color"
    assert options.page_limit == 10
    assert options.sort == "-name"
    assert options.cursor is None


def test_build_without_workspace_id_names_the_field() -> None:
    with pytest.raises(AssistantValidationError, match="workspace_id") as excinfo:
        ListValuesOptions.builder().entity("color").build()

    assert excinfo.value.field == "workspace_id"


def test_validation_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        ListValuesOptions.builder().build()


@pytest.mark.parametrize("field", ["workspace_id", "entity"])
@pytest.mark.parametrize("bad_value", [None, ""])
def test_each_required_field_is_checked(field: str, bad_value: object) -> None:
    builder = ListValuesOptions.builder("ws-123", "color").include_count(True)
    getattr(builder, field)(bad_value)

    with pytest.raises(AssistantValidationError, match=f"{field} cannot be empty"):
        builder.build()


def test_required_body_field_is_checked() -> None:
    with pytest.raises(AssistantValidationError) as excinfo:
        CreateValueOptions.builder("ws-123", "color").synonyms(["red"]).build()

    assert excinfo.value.field == "value"


def test_direct_construction_validates_too() -> None:
    with pytest.raises(AssistantValidationError, match="entity cannot be empty"):
        ListValuesOptions("ws-123", "")


def test_optional_fields_default_to_none() -> None:
    options = ListValuesOptions.builder("ws-123", "color").build()

    for name in ListValuesOptions.optional_fields():
        assert getattr(options, name) is None
    assert options.query_params() == {}


def test_every_set_value_reads_back() -> None:
    values = {
        "workspace_id": "ws-123",
        "entity": "color",
        "export": False,
        "page_limit": 25,
        "include_count": True,
        "sort": "updated",
        "cursor": "opaque-token",
        "include_audit": True,
    }
    builder = ListValuesOptions.builder()
    for name, value in values.items():
        builder = getattr(builder, name)(value)
    options = builder.build()

    for name, value in values.items():
        assert getattr(options, name) == value


def test_required_and_optional_field_lists() -> None:
    assert ListValuesOptions.required_fields() == ("workspace_id", "entity")
    assert CreateValueOptions.required_fields() == ("workspace_id", "entity", "value")
    assert ListWorkspacesOptions.required_fields() == ()
    assert "cursor" in ListValuesOptions.optional_fields()


def test_new_builder_copies_without_aliasing() -> None:
    original = ListValuesOptions("ws-123", "color", page_limit=10, cursor="page-1")

    copy = original.new_builder().build()
    assert copy == original
    assert copy is not original

    next_page = original.new_builder().cursor("page-2").build()
    assert next_page.cursor == "page-2"
    assert next_page.page_limit == 10
    assert original.cursor == "page-1"


def test_builder_keeps_no_reference_to_built_object() -> None:
    builder = ListValuesOptions.builder("ws-123", "color")
    first = builder.build()
    builder.sort("name")
    second = builder.build()

    assert first.sort is None
    assert second.sort == "name"


def test_setter_accepts_none_to_clear_optional() -> None:
    options = ListValuesOptions("ws-123", "color", sort="name")
    cleared = options.new_builder().sort(None).build()

    assert cleared.sort is None


def test_built_options_are_immutable() -> None:
    options = ListValuesOptions("ws-123", "color")

    with pytest.raises(dataclasses.FrozenInstanceError):
        options.cursor = "page-2"  # type: ignore[misc]

    mutators = [name for name in dir(options) if name.startswith("set") or name.startswith("with_")]
    assert mutators == []


def test_containers_are_frozen_on_build() -> None:
    synonyms = ["crimson", "scarlet"]
    metadata = {"hex": "#f00"}
    options = CreateValueOptions("ws-123", "color", "red", synonyms=synonyms, metadata=metadata)
    synonyms.append("ruby")
    metadata["hex"] = "#ff0000"

    assert options.synonyms == ("crimson", "scarlet")
    assert isinstance(options.metadata, FrozenMapping)
    assert options.metadata["hex"] == "#f00"
    with pytest.raises(TypeError):
        options.metadata["hex"] = "#000"  # type: ignore[index]


def test_input_models_are_detached_from_caller_dicts() -> None:
    skills = {"main skill": {"user_defined": {"plan": "basic"}}}
    options = MessageOptions("asst-1", "sess-1", context=MessageContext(skills=skills))
    before = options.body()

    skills["main skill"]["user_defined"]["plan"] = "premium"
    skills["actions skill"] = {}

    assert options.body() == before
    assert options.body()["context"]["skills"] == {"main skill": {"user_defined": {"plan": "basic"}}}


def test_options_with_containers_are_hashable() -> None:
    first = CreateValueOptions("ws-123", "color", "red", metadata={"hex": "#f00", "tags": ["warm"]}, synonyms=["crimson"])
    second = CreateValueOptions("ws-123", "color", "red", metadata={"hex": "#f00", "tags": ["warm"]}, synonyms=["crimson"])

    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second}) == 1


def test_options_with_input_models_are_hashable() -> None:
    def build() -> MessageOptions:
        return MessageOptions(
            "asst-1",
            "sess-1",
            input=MessageInput(text="hello"),
            context=MessageContext(skills={"main skill": {"user_defined": {"plan": "basic"}}}),
        )

    assert hash(build()) == hash(build())
    assert {build(): "cached"}[build()] == "cached"


def test_has_body_follows_declared_body_fields() -> None:
    assert UpdateValueOptions.has_body()
    assert CreateValueOptions.has_body()
    assert MessageOptions.has_body()
    assert not ListValuesOptions.has_body()
    assert not CreateSessionOptions.has_body()
    assert UpdateValueOptions("ws-123", "color", "red").body() == {}


def test_unknown_setter_raises_attribute_error() -> None:
    builder = ListValuesOptions.builder()

    with pytest.raises(AttributeError):
        builder.page_size(10)  # type: ignore[attr-defined]


def test_update_rejects_unknown_fields() -> None:
    with pytest.raises(TypeError, match="page_size"):
        ListValuesOptions.builder().update(page_size=10)


def test_builder_rejects_too_many_or_duplicated_positionals() -> None:
    with pytest.raises(TypeError):
        GetWorkspaceOptions.builder("ws-1", "extra")
    with pytest.raises(TypeError, match="workspace_id"):
        GetWorkspaceOptions.builder("ws-1", workspace_id="ws-2")


def test_builder_from_options_matches_new_builder() -> None:
    options = ListValuesOptions("ws-123", "color", export=True)
    builder = OptionsBuilder.from_options(options)

    assert builder.build() == options.new_builder().build()


def test_builder_repr_shows_staged_values() -> None:
    builder = ListValuesOptions.builder("ws-123").sort("name")

    assert repr(builder) == "ListValuesOptions.Builder(workspace_id='ws-123', sort='name')"


def test_no_domain_validation_on_optional_values() -> None:
    options = ListValuesOptions("ws-123", "color", page_limit=-5, sort="???")

    assert options.page_limit == -5
    assert options.sort == "???"


def test_wire_projection_uses_wire_names_and_omits_unset() -> None:
    options = UpdateValueOptions("ws-123", "color", "red", new_value="crimson", new_synonyms=["scarlet"])

    assert options.path_params() == {"workspace_id": "ws-123", "entity": "color", "value": "red"}
    assert options.query_params() == {}
    assert options.body() == {"value": "crimson", "synonyms": ["scarlet"]}


def test_query_params_keep_booleans() -> None:
    options = ListValuesOptions("ws-123", "color", export=False, page_limit=10)

    assert options.query_params() == {"export": False, "page_limit": 10}


def test_resolve_path_percent_encodes_segments() -> None:
    options = GetWorkspaceOptions("ws/1 2")

    assert options.resolve_path() == "/v1/workspaces/ws%2F1%202"


def test_body_serializes_input_models_by_alias() -> None:
    options = MessageOptions(
        "asst-1",
        "sess-1",
        input=MessageInput(text="hello"),
        context=MessageContext(global_={"system": {"turn_count": 1}}),
    )

    assert options.body() == {
        "input": {"message_type": "text", "text": "hello"},
        "context": {"global": {"system": {"turn_count": 1}}},
    }


def test_to_dict_lists_only_set_fields() -> None:
    options = CreateValueOptions("ws-123", "color", "red", patterns=["r.d"])

    assert options.to_dict() == {
        "workspace_id": "ws-123",
        "entity": "color",
        "value": "red",
        "patterns": ["r.d"],
    }


def test_concrete_options_are_registered() -> None:
    registered = registered_options().values()

    assert ListValuesOptions in registered
    assert MessageOptions in registered
    assert Options not in registered


def test_every_field_travels_in_path_query_or_body() -> None:
    for name, options_cls in registered_options().items():
        locations = {field.metadata.get("location") for field in dataclasses.fields(options_cls)}
        assert locations <= {"path", "query", "body"}, name
    assert not hasattr(Options, "headers")
