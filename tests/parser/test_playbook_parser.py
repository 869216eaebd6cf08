"""Tests for the playbook parse entry point."""

import pytest

from playmark.parser import (
    PLAIN_CODE_BLOCK,
    PLAIN_COMMENT,
    PLAIN_TEXT,
    Flag,
    ParseResult,
    parse,
    parse_file,
)
from playmark.parser.errors import ErrorType, Severity


def flag_pairs(block):
    return [(f.name, f.value) for f in block.flags]


class TestParseBasics:
    @pytest.mark.parametrize("source", ["", "   ", "\n\n", " \t\n  \n"])
    def test_blank_input(self, source):
        result = parse(source)

        assert result.blocks == []
        assert result.errors == []

    @pytest.mark.parametrize("value", [None, 42, b"@task", ["@task"]])
    def test_non_string_input_raises(self, value):
        with pytest.raises(TypeError):
            parse(value)

    def test_returns_parse_result(self):
        assert isinstance(parse("hello"), ParseResult)


class TestSingleLineAnnotations:
    @pytest.mark.parametrize(
        "name,f1,v1,f2,v2",
        [
            ("task", "prompt", "Summarize", "variable", "out"),
            ("model", "name", "gpt-4.1", "temperature", "0.2"),
            ("customAnnotation", "a", "", "b", "with  spaces"),
            ("x_1", "f", "{{topic}}", "g", "--not-a-flag"),
        ],
    )
    def test_two_named_flags(self, name, f1, v1, f2, v2):
        line = f'@{name} --{f1} "{v1}" --{f2} "{v2}"'

        result = parse(line)

        assert result.errors == []
        assert len(result.blocks) == 1
        block = result.blocks[0]
        assert block.name == name
        assert block.flags == [Flag(f1, [v1]), Flag(f2, [v2])]
        assert block.content == line
        assert block.line == 1

    def test_bare_values(self):
        block = parse('@context "main" "research"').blocks[0]

        assert block.name == "context"
        assert flag_pairs(block) == [("", ["main", "research"])]

    def test_flag_without_value(self):
        block = parse("@task --verbose").blocks[0]

        assert flag_pairs(block) == [("verbose", [])]

    def test_annotation_without_flags(self):
        result = parse("@pause")

        assert result.errors == []
        assert result.blocks[0].name == "pause"
        assert result.blocks[0].flags == []

    def test_unknown_identifier_passes_through(self):
        block = parse('@Some_Thing42 "x"').blocks[0]

        assert block.name == "Some_Thing42"


class TestMultiLineAnnotations:
    def test_flags_stacked_under_header(self):
        source = (
            "@task\n"
            '   --prompt "Check which specifications are relevant"\n'
            '   --variable "relevant_specs"'
        )

        result = parse(source)

        assert result.errors == []
        assert len(result.blocks) == 1
        block = result.blocks[0]
        assert flag_pairs(block) == [
            ("prompt", ["Check which specifications are relevant"]),
            ("variable", ["relevant_specs"]),
        ]
        assert block.content == (
            "@task\n"
            '--prompt "Check which specifications are relevant"\n'
            '--variable "relevant_specs"'
        )

    def test_text_after_continuation_is_plain_text(self):
        result = parse('@task\n--prompt "x"\nNow some prose.')

        assert [b.name for b in result.blocks] == ["task", PLAIN_TEXT]
        assert result.blocks[1].line == 3

    def test_horizontal_rule_after_bare_header(self):
        result = parse("@task\n---\nText")

        assert result.errors == []
        assert [(b.name, b.content, b.flags) for b in result.blocks] == [
            ("task", "@task", []),
            (PLAIN_TEXT, "---", []),
            (PLAIN_TEXT, "Text", []),
        ]


class TestUnquotedValues:
    def test_named_flag_with_unquoted_value(self):
        result = parse("@flag value")

        assert len(result.blocks) == 1
        assert result.blocks[0].name == "flag"
        assert result.blocks[0].flags == []
        assert len(result.errors) == 1
        assert result.errors[0].type == ErrorType.FLAG_SYNTAX_ERROR
        assert result.errors[0].severity is Severity.WARNING

    def test_bad_flag_keeps_siblings(self):
        result = parse('@task --a "1" --b oops --c "3"')

        assert flag_pairs(result.blocks[0]) == [("a", ["1"]), ("c", ["3"])]
        assert [e.type for e in result.errors] == [ErrorType.FLAG_SYNTAX_ERROR]
        assert result.errors[0].line == 1

    def test_stray_token_after_quoted_value_reported_once(self):
        result = parse('@task --prompt "Summarize" now')

        assert [e.type for e in result.errors] == [ErrorType.INVALID_SYNTAX]
        assert flag_pairs(result.blocks[0]) == [("prompt", ["Summarize"])]


class TestOtherBlocks:
    def test_comment(self):
        result = parse("<!-- This is a comment -->")

        assert result.errors == []
        block = result.blocks[0]
        assert block.name == PLAIN_COMMENT
        assert block.flags == []
        assert block.content == "This is a comment"

    def test_code_block(self):
        block = parse("```Python3\nprint('hi')\n```").blocks[0]

        assert block.name == PLAIN_CODE_BLOCK
        assert block.content == "print('hi')"
        assert block.metadata.language == "Python3"

    def test_plain_text_keeps_original_line(self):
        block = parse("   indented prose  ").blocks[0]

        assert block.name == PLAIN_TEXT
        assert block.content == "   indented prose  "

    def test_each_prose_line_is_a_block(self):
        result = parse("first\nsecond\n\nthird")

        assert [(b.content, b.line) for b in result.blocks] == [
            ("first", 1),
            ("second", 2),
            ("third", 4),
        ]


class TestWorkflowPlaybook:
    def test_block_sequence(self, workflow_playbook):
        result = parse(workflow_playbook)

        assert result.errors == []
        assert [(b.name, b.line) for b in result.blocks] == [
            ("model", 1),
            ("context", 2),
            (PLAIN_TEXT, 4),
            (PLAIN_COMMENT, 6),
            ("task", 7),
            ("task", 9),
            (PLAIN_CODE_BLOCK, 13),
            ("context", 17),
        ]

    def test_block_details(self, workflow_playbook):
        blocks = parse(workflow_playbook).blocks

        assert flag_pairs(blocks[0]) == [("", ["gpt-4.1"])]
        assert blocks[3].content == "Research first, then write the spec"
        assert flag_pairs(blocks[5]) == [
            ("prompt", ["Check which specifications are relevant to the {{topic}}"]),
            ("variable", ["relevant_specs"]),
        ]
        assert blocks[6].content == 'echo "collect sources"'
        assert blocks[6].metadata.language == "bash"
        assert flag_pairs(blocks[7]) == [("", ["research", "specifications"])]

    def test_lines_non_decreasing(self, workflow_playbook):
        lines = [b.line for b in parse(workflow_playbook).blocks]

        assert lines == sorted(lines)

    def test_values_always_lists(self, workflow_playbook):
        for block in parse(workflow_playbook).blocks:
            for flag in block.flags:
                assert isinstance(flag.value, list)

    def test_executable_when_valid(self, workflow_playbook):
        result = parse(workflow_playbook)

        assert result.is_valid
        assert result.executable_blocks() == result.blocks

    def test_repeat_parse_is_identical(self, workflow_playbook):
        assert parse(workflow_playbook) == parse(workflow_playbook)


class TestReparseBlockContent:
    @pytest.mark.parametrize(
        "source",
        [
            '@task --prompt "Summarize" --variable "out"',
            '@context "main" "research"',
            '@task\n  --prompt "a"\n  "bare"\n  --empty',
            "@solo",
            "  some prose",
        ],
    )
    def test_content_reparses_to_equivalent_block(self, source):
        original = parse(source).blocks[0]

        reparsed = parse(original.content)

        assert reparsed.errors == []
        assert len(reparsed.blocks) == 1
        assert reparsed.blocks[0].name == original.name
        assert reparsed.blocks[0].flags == original.flags


class TestErrors:
    def test_unclosed_code_block(self):
        result = parse('@execute\n```bash\necho "hi"')

        assert len(result.errors) == 1
        assert result.errors[0].type == "UnclosedCodeBlock"
        assert result.errors[0].severity.value == "critical"
        assert result.errors[0].line == 2

    def test_unclosed_code_block_keeps_earlier_blocks(self):
        result = parse('@model "x"\n\n```bash\necho')

        assert [b.name for b in result.blocks] == ["model"]
        assert not result.is_valid
        assert result.executable_blocks() == []

    def test_invalid_annotation_emits_no_block(self):
        result = parse('@ task\n@ok "x"')

        assert [b.name for b in result.blocks] == ["ok"]
        assert result.errors[0].type == ErrorType.INVALID_ANNOTATION
        assert result.errors[0].context == "@ task"

    def test_bare_at_sign(self):
        result = parse("@")

        assert result.blocks == []
        assert result.errors[0].type == ErrorType.INVALID_ANNOTATION

    def test_errors_sorted_by_line(self):
        result = parse('@ bad\n@task "a" b\n@x --f v')

        assert [(e.line, e.type) for e in result.errors] == [
            (1, ErrorType.INVALID_ANNOTATION),
            (2, ErrorType.INVALID_SYNTAX),
            (3, ErrorType.FLAG_SYNTAX_ERROR),
        ]

    def test_warning_alone_blocks_execution(self):
        result = parse('@task --prompt "ok"\n@flag value')

        assert len(result.blocks) == 2
        assert result.executable_blocks() == []


class TestUnclosedComment:
    def test_opener_degrades_to_plain_text(self):
        result = parse('<!-- never closed\n@task "x"')

        assert result.errors == []
        assert [(b.name, b.content) for b in result.blocks] == [
            (PLAIN_TEXT, "<!-- never closed"),
            ("task", '@task "x"'),
        ]

    def test_opener_after_last_close(self):
        result = parse("<!-- closed -->\ntext\n<!-- open\nmore")

        assert [b.name for b in result.blocks] == [
            PLAIN_COMMENT,
            PLAIN_TEXT,
            PLAIN_TEXT,
            PLAIN_TEXT,
        ]


class TestParseFile:
    def test_reads_utf8(self, tmp_path):
        path = tmp_path / "p.md"
        path.write_text('@task "résumé ✓"', encoding="utf-8")

        result = parse_file(path)

        assert result.blocks[0].flags[0].value == ["résumé ✓"]

    def test_accepts_str_path(self, playbook_file):
        assert parse_file(str(playbook_file)).is_valid

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            parse_file(tmp_path / "missing.md")
