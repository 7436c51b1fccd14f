from __future__ import annotations

import pytest

from jsdoc_cli.commands.help_text import render_export_manual, render_manual
from jsdoc_cli.exceptions import UnknownCommandError
from tests.source_helpers import binding, descriptor, sample_tags, tag


def _many():
    return descriptor(
        binding("main", *sample_tags(), description="The description of the main export."),
        binding("test", *sample_tags(), description="The description of the test export."),
    )


def test_manual_lists_tasks() -> None:
    lines = render_manual(_many(), styled=False).splitlines()

    assert lines == [
        "Usage: index <task> [options]",
        "",
        "Tasks:",
        f"  {'main'.ljust(24)} The description of the main export.",
        f"  {'test'.ljust(24)} The description of the test export.",
        "",
        "Options:",
        f"  {'-h, --help'.ljust(24)} Display this manual.",
    ]


def test_export_manual_lists_arguments_and_options() -> None:
    lines = render_export_manual(_many(), "main", styled=False).splitlines()

    assert lines == [
        "Usage: index main <arg1> [options]",
        "",
        "The description of the main export.",
        "",
        "Arguments:",
        f"  {'<arg1>'.ljust(24)} The first argument.",
        "",
        "Options:",
        f"  {'-h, --help'.ljust(24)} Display this manual.",
        f"  {'--arg2 <number>'.ljust(24)} The second argument. Defaults to 0.",
        f"  {'--arg3 <object>'.ljust(24)} The third argument. Defaults to {{}}.",
    ]


def test_single_export_manual_omits_task_name() -> None:
    single = descriptor(
        binding(
            "default",
            tag("name", "string", description="- Who to greet."),
            tag("loud", "boolean", optional=True, description="Shout."),
            description="Greets someone.",
        ),
        name="greet",
    )

    text = render_manual(single, styled=False)

    assert text.splitlines()[0] == "Usage: greet <name> [options]"
    assert f"  {'<name>'.ljust(24)} Who to greet." in text.splitlines()
    assert f"  {'-l, --loud'.ljust(24)} Shout." in text.splitlines()


def test_wide_labels_grow_the_column() -> None:
    long_name = "a-very-long-option-name-indeed"
    single = descriptor(binding("main", tag(long_name, "string", optional=True)))

    lines = render_manual(single, styled=False).splitlines()
    label = f"-a, --{long_name} <string>"

    assert f"  {label.ljust(len(label) + 4)}".rstrip() in [line.rstrip() for line in lines]


def test_styled_manual_uses_bold_name() -> None:
    assert "\x1b[1m" in render_manual(_many(), styled=True)


def test_unknown_export_manual() -> None:
    with pytest.raises(UnknownCommandError):
        render_export_manual(_many(), "nope", styled=False)
