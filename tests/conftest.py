"""Shared pytest fixtures for playmark tests."""

import pytest

from playmark.parser.base import ParseContext


@pytest.fixture
def make_context():
    """Build a ParseContext from markdown text."""

    def _make(markdown: str) -> ParseContext:
        return ParseContext.from_text(markdown)

    return _make


@pytest.fixture
def workflow_playbook():
    """A realistic playbook mixing every block kind."""
    return """@model "gpt-4.1"
@context "main"

You're a senior software engineer developing an API authentication module.

<!-- Research first, then write the spec -->
@task "Research {{topic}} online and summarize key points"

@task
   --prompt "Check which specifications are relevant to the {{topic}}"
   --variable "relevant_specs"

```bash
echo "collect sources"
```

@context "research" "specifications"
"""


@pytest.fixture
def playbook_file(tmp_path, workflow_playbook):
    """Write the workflow playbook to disk."""
    path = tmp_path / "workflow.md"
    path.write_text(workflow_playbook, encoding="utf-8")
    return path


@pytest.fixture
def broken_playbook_file(tmp_path):
    """A playbook with an unclosed code block."""
    path = tmp_path / "broken.md"
    path.write_text('@execute\n```bash\necho "hi"\n', encoding="utf-8")
    return path
