"""
Pytest configuration and shared fixtures
"""

import sys
from pathlib import Path

import pytest

# Add src to Python path so tests run without an install
REPO_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(REPO_ROOT / "src"))

from hymnal.models import LanguageDescriptor  # noqa: E402


@pytest.fixture
def english():
    return LanguageDescriptor(key='english', code='en', directory='english',
                              title='Christ In Song')


@pytest.fixture
def swahili():
    return LanguageDescriptor(key='swahili', code='sw', directory='swahili',
                              title='Nyimbo Za Kristo')


@pytest.fixture
def sample_html_hymn():
    """HTML hymn with a title heading, numbered verses and a chorus"""
    return (
        "<h1>Hymn 1 - Watchman Blow The Gospel Trumpet</h1>"
        "<p><font color=\"#ff0000\"><b>1</b></font> Watchman, blow the gospel trumpet,<br>"
        "Every soul a warning give;</p>"
        "<p><i><b>Chorus:</b></i><br>Blow the trumpet, trusty watchman,<br>"
        "Blow it loud o'er land and sea;</p>"
        "<p><font color=\"#ff0000\"><b>2</b></font> Sound it in the hedges,<br>"
        "Let the world hear it.</p>"
    )


@pytest.fixture
def sample_markdown_hymn():
    """Markdown hymn as stored by the older hymnals"""
    return (
        "**1** Mlinzi piga tarumbeta,\n"
        "Kila roho aonywe;\n"
        "\n"
        "**KWAYA:**\n"
        "Piga tarumbeta mlinzi,\n"
        "\n"
        "\n"
        "**2** Ipige vichakani,\n"
        "Dunia isikie.\n"
    )
