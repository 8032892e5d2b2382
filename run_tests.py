#!/usr/bin/env python3
"""
Main test runner for the pylox scanner tests.

Author: xwest
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def run_all_tests():
    """Run a quick smoke scan, then the full unittest suite."""

    print("🚀 pylox Scanner Test Suite")
    print("=" * 60)

    try:
        from pylox.lexer import Scanner
        print("✅ Scanner imported successfully")
    except ImportError as e:
        print(f"❌ Failed to import scanner: {e}")
        return False

    print("Testing a simple scan...")
    code = """
    fun fib(n) {
        if (n <= 1) return n; // base case
        return fib(n - 2) + fib(n - 1);
    }
    print fib(10.5);
    """
    scanner = Scanner(code, "<smoke>")
    tokens = scanner.scan_tokens()
    print(f"     Generated {len(tokens)} tokens")
    if scanner.has_errors():
        for error in scanner.errors:
            print(f"     ❌ {error.message} (line {error.line})")
        return False
    print("✅ Smoke scan PASSED")
    print()

    suite = unittest.defaultTestLoader.discover(os.path.join(project_root, "tests"))
    result = unittest.TextTestRunner(verbosity=2).run(suite)

    print("\n" + "=" * 60)
    if result.wasSuccessful():
        print("✅ All tests passed!")
    else:
        print("❌ Some tests failed.")
        print(f"Failures: {len(result.failures)}")
        print(f"Errors: {len(result.errors)}")
    return result.wasSuccessful()


if __name__ == "__main__":
    sys.exit(0 if run_all_tests() else 1)
