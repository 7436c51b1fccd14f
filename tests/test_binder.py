from __future__ import annotations

import pytest

from jsdoc_cli.binding.binder import bind, bind_arguments, parse_options, select_target
from jsdoc_cli.binding.keywords import build_keyword_table
from jsdoc_cli.exceptions import (
    AmbiguousArgumentsError,
    InvalidNumberError,
    MissingArgumentsError,
    UnknownArgumentError,
    UnknownCommandError,
)
from tests.source_helpers import binding, descriptor, sample_tags, tag


def _verbose_target():
    return binding(
        "main",
        tag("text", "string"),
        tag("verbose", "boolean", optional=True),
    )


def test_single_required_argument_consumes_all_words() -> None:
    target = binding("main", tag("text", "string"))

    assert bind_arguments(target, ["a", "b", "c"]) == ["a b c"]


def test_several_required_arguments_take_one_token_each() -> None:
    target = binding("main", tag("a", "string"), tag("b", "number"))

    assert bind_arguments(target, ["x", "2"]) == ["x", 2]


@pytest.mark.parametrize(
    ("tokens", "expected"),
    [
        (["hi", "--verbose"], ["hi", True]),
        (["hi", "-v"], ["hi", True]),
        (["hi", "--no-verbose"], ["hi", False]),
        (["hi", "-no-verbose"], ["hi", False]),
        (["hi", "--verbose", "false"], ["hi", False]),
        (["hi", "--no-verbose", "false"], ["hi", False]),
        (["hi", "--no-verbose", "yes"], ["hi", True]),
        (["hi", "--verbose=no"], ["hi", False]),
        (["hi"], ["hi"]),
    ],
)
def test_boolean_options(tokens: list[str], expected: list[object]) -> None:
    assert bind_arguments(_verbose_target(), tokens) == expected


def test_sample_signature_binds_in_documentation_order() -> None:
    target = binding("main", *sample_tags())

    assert bind_arguments(target, ["1", "--arg3", '{"a": 1}']) == [1, None, {"a": 1}]
    assert bind_arguments(target, ["1", "--arg2", "2", "--arg3", '{"a":1}']) == [1, 2, {"a": 1}]
    assert bind_arguments(target, ["1", "--arg2=5"]) == [1, 5]


def test_array_options_split_and_accumulate() -> None:
    target = binding(
        "main",
        tag("tags", "string[]", optional=True),
        tag("ids", "number[]", optional=True),
    )

    assert bind_arguments(target, ["--tags", "a,b,c"]) == [["a", "b", "c"]]
    assert bind_arguments(target, ["--tags", "a", "--tags", "b,c"]) == [["a", "b", "c"]]
    assert bind_arguments(target, ["--ids", "[1,2]"]) == [None, [1, 2]]


def test_dotted_options_build_nested_mapping() -> None:
    target = binding(
        "main",
        tag("opts", "object", optional=True),
        tag("opts.retries", "number", optional=True),
        tag("opts.name", "string", optional=True),
    )

    bound = bind_arguments(target, ["--opts.retries", "3", "--opts.name", "x"])

    assert bound == [{"retries": 3, "name": "x"}]


def test_dotted_options_merge_into_required_parent() -> None:
    target = binding(
        "main",
        tag("opts", "object"),
        tag("opts.retries", "number", optional=True),
        tag("verbose", "boolean", optional=True),
    )

    assert bind_arguments(target, ['{"a": 1}', "--opts.retries", "3"]) == [{"a": 1, "retries": 3}]
    assert bind_arguments(target, ["{}", "--opts.retries", "3", "--verbose"]) == [{"retries": 3}, True]
    assert bind_arguments(target, ['{"a": 1}']) == [{"a": 1}]


def test_dotted_option_cannot_stand_in_for_required_parent() -> None:
    target = binding("main", tag("opts", "object"), tag("opts.retries", "number", optional=True))

    with pytest.raises(MissingArgumentsError) as excinfo:
        bind_arguments(target, ["--opts.retries", "3"])

    assert excinfo.value.names == ("opts",)


def test_dotted_option_without_parent_tag() -> None:
    target = binding(
        "main",
        tag("config.port", "number", optional=True),
        tag("quiet", "boolean", optional=True),
    )

    assert bind_arguments(target, ["--config.port", "80"]) == [{"port": 80}]
    assert bind_arguments(target, ["-q"]) == [None, True]


def test_missing_required_arguments_are_all_named() -> None:
    target = binding("main", tag("a", "string"), tag("b", "string"))

    with pytest.raises(MissingArgumentsError) as excinfo:
        bind_arguments(target, [])

    assert excinfo.value.names == ("a", "b")
    assert str(excinfo.value) == "Missing required arguments: <a> <b>"


def test_required_argument_missing_before_options() -> None:
    with pytest.raises(MissingArgumentsError) as excinfo:
        bind_arguments(_verbose_target(), ["--verbose"])

    assert excinfo.value.names == ("text",)


def test_leading_unknown_text_is_rejected() -> None:
    target = binding("main", tag("flag", "number", optional=True))

    with pytest.raises(UnknownArgumentError) as excinfo:
        bind_arguments(target, ["bogus", "--flag", "1"])

    assert excinfo.value.text == "bogus"
    assert str(excinfo.value) == "Unknown argument: bogus"


def test_text_without_any_keyword_is_rejected() -> None:
    target = binding("main", tag("flag", "number", optional=True))

    with pytest.raises(UnknownArgumentError):
        bind_arguments(target, ["--other", "1"])


def test_option_token_consumed_as_required_value_is_ambiguous() -> None:
    target = binding(
        "main",
        tag("a", "string"),
        tag("b", "string"),
        tag("verbose", "boolean", optional=True),
    )

    with pytest.raises(AmbiguousArgumentsError, match="Invalid arguments: x --verbose"):
        bind_arguments(target, ["x", "--verbose"])


def test_coercion_errors_surface_from_binding() -> None:
    target = binding("main", *sample_tags())

    with pytest.raises(InvalidNumberError):
        bind_arguments(target, ["one"])


def test_parse_options_empty() -> None:
    assert parse_options(build_keyword_table([]), []) == {}
    assert parse_options(build_keyword_table([]), ["  "]) == {}


def test_single_export_is_selected_without_command() -> None:
    single = descriptor(binding("main", tag("n", "number")))

    invocation = bind(single, ["5"])

    assert invocation.target.name == "main"
    assert invocation.arguments == (5,)


def test_command_token_selects_among_exports() -> None:
    many = descriptor(binding("main", *sample_tags()), binding("test", *sample_tags()))

    invocation = bind(many, ["test", "3"])

    assert invocation.target.name == "test"
    assert invocation.arguments == (3,)


def test_unknown_or_missing_command() -> None:
    many = descriptor(binding("main"), binding("test"))

    with pytest.raises(UnknownCommandError, match="Unknown task: nope"):
        select_target(many, ["nope"])
    with pytest.raises(UnknownCommandError):
        bind(many, [])


def test_export_without_params_binds_nothing() -> None:
    many = descriptor(binding("main"), binding("test"))

    assert bind(many, ["main"]).arguments == ()
