"""
Shared pytest fixtures.

Config-reading code walks up from the cwd looking for pyproject.toml, so
tests that touch config run from an empty temp directory with the
FAQRENDER_* variables cleared.
"""

import pytest

ENV_VARS = (
    "FAQRENDER_DEBUG",
    "FAQRENDER_DEFAULT_FORMAT",
    "FAQRENDER_HOST",
    "FAQRENDER_PORT",
)


@pytest.fixture
def isolated_env(monkeypatch, tmp_path):
    """Run from an empty directory with no FAQRENDER_* overrides."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def faq_yaml(tmp_path):
    """A small FAQ list covering each format, one item with a script."""
    path = tmp_path / "faq.yaml"
    path.write_text(
        """
items:
  - summary: What is this?
    content: "<p>A <strong>safe</strong> answer</p>"
    format: html
  - summary: Can I use Markdown?
    content: |
      **Yes**, and raw HTML too:

      <script>alert(1)</script>
    format: markdown
  - summary: Plain text?
    content: "Line one\\nLine two"
    format: text
""",
        encoding="utf-8",
    )
    return path
