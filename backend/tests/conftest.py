"""Pytest configuration and fixtures."""

import pytest

from code_analyzer.config import Settings

# Sample JavaScript code for testing
SAMPLE_JS_ISSUES = '''// Sample JavaScript file with known issues

// Bug: legacy declaration keyword
var globalCounter = 0;

// Bug: Loose equality comparison
function checkValue(value) {
  if (value == null) {
    return false;
  }
  return true;
}

// Security: XSS vulnerability
function displayUserInput(input) {
  document.getElementById('output').innerHTML = input;
}

// Security: Logging sensitive information
function authenticateUser(username, password) {
  console.log('Attempting login with password:', password);
  return true;
}

// Performance: Inefficient loop
function processLargeArray(items) {
  for (let i = 0; i < items.length; i++) {
    for (let j = 0; j < items.length; j++) {
      sum(items[i], items[j]);
    }
  }
}

// Quality: unfinished work marker
function calculateTotal(items) {
  // TODO: Add validation for items array
  return items.reduce((acc, item) => acc + item.price, 0);
}

function complexCalculation(a, b, c) {
  return (a * b) + (c / 2) - Math.sqrt(a);
}
'''

SAMPLE_JS_CLEAN = '''// Adds two numbers.
const add = (a, b) => a + b;

// Returns true when both values are strictly equal.
function same(a, b) {
  return a === b;
}
'''


class FakeRemote:
    """Stand-in for the LLM client: returns canned text or raises."""

    def __init__(self, response: str = "[]", error: Exception | None = None):
        self.response = response
        self.error = error
        self.calls: list[dict] = []

    async def generate(self, prompt, system_prompt=None, timeout=None):
        self.calls.append({"prompt": prompt, "system_prompt": system_prompt, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def sample_js_issues():
    """JavaScript sample with one or more issues per category."""
    return SAMPLE_JS_ISSUES


@pytest.fixture
def sample_js_clean():
    """JavaScript sample with no heuristic findings."""
    return SAMPLE_JS_CLEAN


@pytest.fixture
def heuristic_settings():
    """Settings without a provider credential."""
    return Settings(_env_file=None, gemini_api_key="")


@pytest.fixture
def remote_settings():
    """Settings with a usable provider credential."""
    return Settings(_env_file=None, gemini_api_key="test-api-key", analysis_timeout_seconds=5.0)


@pytest.fixture
def make_remote():
    """Factory for fake remote analyzers."""
    return FakeRemote
