"""Test configuration and fixtures for pytest."""

import pytest
from unittest.mock import MagicMock, Mock

from jdfilter.lexicon import JsonFileLexiconStore, TechLexicon


@pytest.fixture
def mock_supabase_client():
    """Mock Supabase client for testing."""
    client = MagicMock()

    table_mock = MagicMock()
    client.table.return_value = table_mock

    # Chain methods
    table_mock.select.return_value = table_mock
    table_mock.upsert.return_value = table_mock
    table_mock.eq.return_value = table_mock
    table_mock.execute.return_value = Mock(data=[])

    return client


@pytest.fixture
def lexicon_path(tmp_path):
    return tmp_path / "tech_stacks.json"


@pytest.fixture
def file_lexicon(lexicon_path):
    """TechLexicon backed by a JSON file in a temp directory."""
    return TechLexicon(JsonFileLexiconStore(str(lexicon_path)))


@pytest.fixture
def sample_job_html():
    """A job posting page with metadata, body text and an inline script."""
    return """
<!DOCTYPE html>
<html>
<head>
  <title>Senior Frontend Engineer | Acme Careers</title>
  <meta property="og:title" content="Senior Frontend Engineer at Acme">
  <meta property="og:site_name" content="Acme">
  <meta name="description" content="Join Acme to build dashboards with TypeScript.">
  <meta property="og:description" content="Acme is hiring a frontend engineer.">
  <meta name="keywords" content="frontend, , dashboards">
  <meta property="article:tag" content="Engineering">
  <script type="text/javascript">
    window.__DATA__ = {"stack": "Amazon Web Services"};
  </script>
</head>
<body>
  <h1> Senior Frontend Engineer </h1>
  <section class="meta">
    <span>Austin, TX</span>
    <span>Hybrid - 3 days in office</span>
  </section>
  <p>We build our product with React.js and Node.js.</p>
  <ul>
    <li>5+ years of experience</li>
    <li>Strong JavaScript fundamentals</li>
  </ul>
</body>
</html>
"""
