"""Unit tests for `!w` command resolution and per-nick memory."""

import pytest

from agent.memory import UserLocationMemory
from agent.resolver import place_query, resolve_query, zip_query


@pytest.fixture
def memory():
    return UserLocationMemory()


# =============================================================================
# Bare trigger
# =============================================================================

def test_bare_trigger_without_memory_is_none(memory):
    assert resolve_query("!w", "alice", memory) is None
    assert len(memory) == 0


def test_bare_trigger_repeats_stored_query(memory):
    memory.remember("alice", "Paris")
    assert resolve_query("!w", "alice", memory) == "Paris"


def test_bare_trigger_is_case_sensitive_on_nick(memory):
    memory.remember("alice", "Paris")
    assert resolve_query("!w", "Alice", memory) is None


# =============================================================================
# Place names
# =============================================================================

def test_place_with_comma_is_normalized_and_remembered(memory):
    assert resolve_query("!w New York, NY", "alice", memory) == "New+York+NY"
    assert memory.lookup("alice") == "New+York+NY"
    assert resolve_query("!w", "alice", memory) == "New+York+NY"


def test_single_word_place(memory):
    assert resolve_query("!w London", "alice", memory) == "London"
    assert memory.lookup("alice") == "London"


def test_place_overwrites_previous_query(memory):
    resolve_query("!w 10001", "alice", memory)
    resolve_query("!w Berlin", "alice", memory)
    assert memory.lookup("alice") == "Berlin"


def test_place_query_helper():
    assert place_query("San Jose, CA") == "San+Jose+CA"
    assert place_query("Paris") == "Paris"


def test_place_followed_by_digits_keeps_only_leading_words(memory):
    assert resolve_query("!w Springfield 62701", "alice", memory) == "Springfield+"


def test_trigger_found_inside_message(memory):
    assert resolve_query("hey bot !w Oslo", "alice", memory) == "Oslo"


# =============================================================================
# Zip codes
# =============================================================================

def test_zip_code_query_and_memory(memory):
    assert resolve_query("!w 10001", "alice", memory) == "10001,+USA"
    assert memory.lookup("alice") == "10001,+USA"


def test_zip_query_helper():
    assert zip_query("94040") == "94040,+USA"


# =============================================================================
# Nick lookups
# =============================================================================

def test_alphabetic_nick_is_treated_as_place(memory):
    # a plain word is a place name first; "bob" is stored for alice
    memory.remember("bob", "Chicago")
    assert resolve_query("!w bob", "alice", memory) == "bob"
    assert memory.lookup("alice") == "bob"
    assert memory.lookup("bob") == "Chicago"


def test_alphabetic_nick_without_memory_still_resolves_as_place(memory):
    assert resolve_query("!w bob", "alice", memory) == "bob"


def test_nick_lookup_for_non_alphabetic_nick(memory):
    memory.remember("_bob", "Chicago")
    assert resolve_query("!w _bob", "alice", memory) == "Chicago"
    assert "alice" not in memory


def test_nick_lookup_unknown_nick_is_none(memory):
    assert resolve_query("!w [away]", "alice", memory) is None
    assert len(memory) == 0


# =============================================================================
# Non-matches
# =============================================================================

@pytest.mark.parametrize("text", ["hello there", "!weather Paris", "!w", "w Paris", ""])
def test_non_commands_resolve_to_none(memory, text):
    assert resolve_query(text, "alice", memory) is None
    assert len(memory) == 0
