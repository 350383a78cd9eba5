#!/usr/bin/env python3
"""
Test runner script with common testing commands.

Usage: python run_tests.py <command>
"""

import subprocess
import sys
from pathlib import Path

PYTEST = [sys.executable, "-m", "pytest"]
COVERAGE = ["--cov=stockscope", "--cov-report=term-missing"]

SUITES = {
    "core": ("tests/test_core/", "Running analytics, calculator and comparison tests"),
    "providers": ("tests/test_providers/", "Running market data provider tests"),
    "services": ("tests/test_services/", "Running stock service tests"),
    "config": ("tests/test_config/", "Running configuration tests"),
    "api": ("tests/test_webapi/", "Running API tests"),
}


def run_command(cmd, description):
    """Run a command and print the description."""
    print(f"\n🧪 {description}")
    print("=" * 50)
    print(f"Running: {' '.join(cmd)}")
    print()

    result = subprocess.run(cmd, cwd=Path(__file__).parent)
    return result.returncode == 0


def print_usage():
    print("Usage: python run_tests.py <command>")
    print("\nAvailable commands:")
    print("  all        - Run all tests with coverage")
    print("  unit       - Run everything except the API tests")
    for name, (_, description) in SUITES.items():
        print(f"  {name:<10} - {description}")
    print("  fast       - Run tests without coverage")
    print("  coverage   - Generate HTML coverage report")
    print("  clean      - Clean test artifacts")


def clean():
    artifacts = [".coverage", "htmlcov", ".pytest_cache", "__pycache__", "*.pyc"]
    print("\n🧹 Cleaning test artifacts...")
    for pattern in artifacts:
        subprocess.run(
            ["find", ".", "-name", pattern, "-prune", "-exec", "rm", "-rf", "{}", "+"],
            capture_output=True,
        )
    print("✅ Test artifacts cleaned!")


def main():
    """Main test runner."""
    if len(sys.argv) < 2:
        print_usage()
        return

    command = sys.argv[1].lower()

    if command == "clean":
        clean()
        return

    if command == "all":
        success = run_command(
            PYTEST + ["tests/", "-v"] + COVERAGE, "Running all tests with coverage"
        )
    elif command == "unit":
        success = run_command(
            PYTEST + ["tests/", "--ignore=tests/test_webapi", "-v"],
            "Running unit tests only",
        )
    elif command in SUITES:
        path, description = SUITES[command]
        success = run_command(PYTEST + [path, "-v"], description)
    elif command == "fast":
        success = run_command(
            PYTEST + ["tests/", "-q"], "Running tests without coverage (fast)"
        )
    elif command == "coverage":
        success = run_command(
            PYTEST + ["tests/", "--cov-report=html"] + COVERAGE,
            "Generating coverage report",
        )
        if success:
            print("\n📊 Coverage report generated!")
            print("   - HTML report: htmlcov/index.html")
    else:
        print(f"❌ Unknown command: {command}")
        print_usage()
        sys.exit(2)

    if success:
        print(f"\n✅ {command.title()} tests completed successfully!")
    else:
        print(f"\n❌ {command.title()} tests failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
