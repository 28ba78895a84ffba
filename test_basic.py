#!/usr/bin/env python3
"""Basic test script to verify the dictionary search functionality."""

import sys
import os

# Add the project root to the Python path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from sabdakosh.config.settings import DEFAULT_DICTIONARY_PATH
from sabdakosh.loader import load_lexicon
from sabdakosh.service import DictionaryService


def test_basic_functionality():
    """Test basic dictionary search functionality."""
    print("🚀 Testing Sabdakosh Dictionary Search")
    print("=" * 50)

    print("📊 Loading bundled dictionary...")
    lexicon = load_lexicon(DEFAULT_DICTIONARY_PATH)
    service = DictionaryService(lexicon)
    print(f"✅ Loaded {len(lexicon)} entries")

    # Test cases
    test_cases = [
        ("घर", "Exact match"),
        ("मा", "Prefix shared by several words"),
        ("मया", "Dropped vowel sign"),
        ("बटो", "Dropped vowel sign inside word"),
        ("zzz", "No match"),
        ("   ", "Blank query"),
    ]

    print("\n🔍 Running test cases...")
    print("-" * 50)

    for query, description in test_cases:
        print(f"\nQuery: '{query}' ({description})")
        result = service.search(query)

        print(f"  ⏱️  Execution time: {result.execution_time_ms:.2f}ms")
        print(f"  📊 Total results: {result.total_results}")

        if result.results:
            for i, res in enumerate(result.results, 1):
                print(f"  📋 Result {i}: {res.word} (score {res.score})")
                for definition in res.definitions:
                    print(f"     [{definition.grammar}] {'; '.join(definition.senses)}")
        else:
            print(f"  ❌ {result.message}")

    # Get statistics
    print("\n📈 Service Statistics...")
    print("-" * 50)
    stats = service.get_stats()
    print(f"Total queries: {stats['total_queries']}")
    print(f"Matched: {stats['matched_queries']}")
    print(f"No matches: {stats['no_match_queries']}")
    print(f"Empty: {stats['empty_queries']}")
    print(f"Average execution time: {stats['average_execution_time_ms']:.2f}ms")

    assert stats["total_queries"] == len(test_cases)

    print("\n✅ All tests completed successfully!")
    return True


if __name__ == "__main__":
    try:
        test_basic_functionality()
    except Exception as e:
        print(f"\n❌ Test failed with error: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)
