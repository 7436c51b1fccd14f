from __future__ import annotations

import textwrap

from jsdoc_cli.analysis.jsdoc import parse_doc_block, parse_param_tag
from jsdoc_cli.analysis.model import ParameterTag


def _block(text: str) -> str:
    return textwrap.dedent(text).strip()


def test_parse_doc_block_reads_description_and_params() -> None:
    documentation = parse_doc_block(
        _block(
            """
            /**
             * The description of the main export.
             * @param {number} arg1 - The first argument.
             * @param {number} [arg2=0] - The second argument.
             * @param {object} [arg3={}] - The third argument.
             */
            """
        )
    )

    assert documentation is not None
    assert documentation.description == "The description of the main export."
    assert documentation.tags == (
        ParameterTag("arg1", "number", description="The first argument."),
        ParameterTag("arg2", "number", optional=True, default="0", description="The second argument."),
        ParameterTag("arg3", "object", optional=True, default="{}", description="The third argument."),
    )
    assert [tag.name for tag in documentation.required] == ["arg1"]
    assert [tag.name for tag in documentation.options] == ["arg2", "arg3"]


def test_parse_doc_block_ignores_non_param_tags() -> None:
    documentation = parse_doc_block(
        _block(
            """
            /**
             * Adds numbers.
             * Across two lines.
             * @param {number} a first
             * @returns {number} the sum
             * @example add(1, 2)
             */
            """
        )
    )

    assert documentation is not None
    assert documentation.description == "Adds numbers.\nAcross two lines."
    assert [tag.name for tag in documentation.tags] == ["a"]
    assert documentation.tags[0].description == "first"


def test_parse_doc_block_rejects_plain_comments() -> None:
    assert parse_doc_block("/* plain */") is None
    assert parse_doc_block("/**/") is None
    assert parse_doc_block("// line") is None


def test_parse_doc_block_single_line() -> None:
    documentation = parse_doc_block("/** Says hello. */")

    assert documentation is not None
    assert documentation.description == "Says hello."
    assert documentation.tags == ()


def test_param_tag_continues_over_lines() -> None:
    documentation = parse_doc_block(
        _block(
            """
            /**
             * @param {string} name - The name
             *   to greet.
             */
            """
        )
    )

    assert documentation is not None
    assert documentation.tags[0].description == "The name\n  to greet."


def test_parse_param_tag_optional_type_suffix() -> None:
    tag = parse_param_tag("{string=} label shown")

    assert tag == ParameterTag("label", "string", optional=True, description="shown")


def test_parse_param_tag_nested_braces_and_dotted_name() -> None:
    tag = parse_param_tag("{Array<{id: number}>} [opts.items] list of items")

    assert tag is not None
    assert tag.type == "Array<{id: number}>"
    assert tag.name == "opts.items"
    assert tag.optional is True
    assert tag.default is None
    assert tag.top_level_name == "opts"
    assert tag.is_dotted is True


def test_parse_param_tag_without_type_is_any() -> None:
    tag = parse_param_tag("value whatever")

    assert tag == ParameterTag("value", "*", description="whatever")


def test_parse_param_tag_rejects_broken_input() -> None:
    assert parse_param_tag("{number name") is None
    assert parse_param_tag("{number} [name") is None
    assert parse_param_tag("{number}") is None
