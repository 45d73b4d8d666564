"""Shared pytest fixtures for Link Colors tests."""

import pytest
import tempfile
from pathlib import Path

from link_colors.config import Settings
from link_colors.core.colors import ColorSession


# =============================================================================
# Settings / Session Fixtures
# =============================================================================

@pytest.fixture
def session():
    """Fresh color session (isolates tests from each other)."""
    return ColorSession()


@pytest.fixture
def settings():
    """Default settings: vibrant palette, prefix stripping, strict-full hashing."""
    return Settings()


@pytest.fixture
def settings_no_prefix():
    """Settings with prefix stripping disabled."""
    return Settings(ignore_prefix=False)


# =============================================================================
# Document Fixtures
# =============================================================================

@pytest.fixture
def sample_document():
    """Markdown note exercising plain links, aliases, embeds and broken links."""
    return (
        "# Weekly notes\n"
        "See [[Project Alpha]] and [[Project Alpha|the alpha]].\n"
        "![[Embedded Note]]\n"
        "Talked with [[Char - Pamela]] about [[Data Science]].\n"
        "[[Unterminated link\n"
        "Unrelated paragraph text.\n"
    )


@pytest.fixture
def temp_output_dir():
    """Create temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_notes(temp_output_dir, sample_document):
    """Two markdown files that reference the same target."""
    first = temp_output_dir / "first.md"
    second = temp_output_dir / "second.md"
    first.write_text(sample_document, encoding='utf-8')
    second.write_text("Back to [[Project Alpha]].\n", encoding='utf-8')
    return [first, second]


@pytest.fixture
def temp_config_file(temp_output_dir):
    """Create a temporary config YAML file."""
    import yaml
    config_path = temp_output_dir / "config.yaml"
    with open(config_path, 'w') as f:
        yaml.dump({
            'palette': 'nord',
            'hash_mode': 'similarity',
            'display': {'dark_mode': False},
        }, f)
    return config_path


# =============================================================================
# Environment
# =============================================================================

@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep LINKCOLOR_* variables from the caller's shell out of tests."""
    for var in ('LINKCOLOR_PALETTE', 'LINKCOLOR_HASH_MODE', 'LINKCOLOR_IGNORE_PREFIX',
                'LINKCOLOR_UNDERLINE_VARIANTS', 'LINKCOLOR_DARK_MODE'):
        monkeypatch.delenv(var, raising=False)
