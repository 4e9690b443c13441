"""
Shared fixtures for readingtime tests.
"""

import os

import pytest

ARTICLE_PARAGRAPH = (
    "The river had been rising for three days before anyone in the valley thought to move the "
    "livestock to higher ground, and by then the lower fields were already under a hand of water. "
)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's environment out of Settings()."""
    for name in ("WPM", "BOT_TOKEN", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    for name in list(os.environ):
        if name.upper().startswith("READINGTIME_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def simple_html():
    return "<html><body><p>one two three</p></body></html>"


@pytest.fixture
def head_html():
    return "<head><title>Ignore Me</title></head><body>visible text here</body>"


@pytest.fixture
def article_html():
    """A page with chrome around a long article."""
    paragraphs = "\n".join(f"<p>{ARTICLE_PARAGRAPH * 3}</p>" for _ in range(6))
    return f"""
    <html>
      <head>
        <title>Flood season</title>
        <style>body {{ font-family: serif; }}</style>
        <script>window.analytics = true;</script>
      </head>
      <body>
        <nav class="navigation"><a href="/">Home</a> <a href="/news">News</a></nav>
        <div class="sidebar">Subscribe now for daily updates</div>
        <article class="post-content">
          <h1>Flood season</h1>
          {paragraphs}
        </article>
        <footer class="footer">Copyright footer text</footer>
      </body>
    </html>
    """


@pytest.fixture
def words_html():
    """Factory for a document whose visible text has exactly `count` words."""

    def _build(count: int) -> str:
        words = " ".join(f"w{i}" for i in range(count))
        return f"<html><body><p>{words}</p></body></html>"

    return _build
